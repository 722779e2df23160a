"""Tests for the content extractors."""

from __future__ import annotations

from unittest.mock import AsyncMock, MagicMock

import httpx
import pytest

from genai_news.errors import ServiceError
from genai_news.extract import ExaContentExtractor, HttpContentExtractor
from genai_news.extract.http import html_to_text

ARTICLE_HTML = """
<html>
  <head><title>t</title><script>var tracking = 1;</script></head>
  <body>
    <nav><p>Home | News</p></nav>
    <article>
      <h1>Headline</h1>
      <p>First paragraph of the story.</p>
      <p>  Second   paragraph. </p>
      <p></p>
    </article>
    <footer><p>Copyright</p></footer>
  </body>
</html>
"""


class TestHtmlToText:
    """Tests for html_to_text."""

    def test_prefers_article_paragraphs(self) -> None:
        text = html_to_text(ARTICLE_HTML)
        assert text == "First paragraph of the story.\n\nSecond paragraph."

    def test_falls_back_to_main(self) -> None:
        html = "<body><p>outside</p><main><p>inside</p></main></body>"
        assert html_to_text(html) == "inside"

    def test_no_paragraphs_collapses_whitespace(self) -> None:
        html = "<body><div>Some\n\n   text</div><style>p{}</style></body>"
        assert html_to_text(html) == "Some text"


class TestHttpContentExtractor:
    """Tests for HttpContentExtractor."""

    async def test_extracts_page_text(self, monkeypatch: pytest.MonkeyPatch) -> None:
        requested: list[str] = []

        async def mock_get(self, url, **kwargs):
            requested.append(url)
            return httpx.Response(
                200, text=ARTICLE_HTML, request=httpx.Request("GET", url)
            )

        monkeypatch.setattr(httpx.AsyncClient, "get", mock_get)

        text = await HttpContentExtractor().extract("https://example.com/story")

        assert requested == ["https://example.com/story"]
        assert text.startswith("First paragraph")

    async def test_rate_limit_is_tagged(self, monkeypatch: pytest.MonkeyPatch) -> None:
        async def mock_get(self, url, **kwargs):
            return httpx.Response(429, request=httpx.Request("GET", url))

        monkeypatch.setattr(httpx.AsyncClient, "get", mock_get)

        with pytest.raises(ServiceError) as exc_info:
            await HttpContentExtractor().extract("https://example.com/story")

        assert exc_info.value.is_rate_limited

    async def test_timeout_is_other_error(self, monkeypatch: pytest.MonkeyPatch) -> None:
        async def mock_get(self, url, **kwargs):
            raise httpx.ReadTimeout("timed out")

        monkeypatch.setattr(httpx.AsyncClient, "get", mock_get)

        with pytest.raises(ServiceError) as exc_info:
            await HttpContentExtractor().extract("https://example.com/story")

        assert not exc_info.value.is_rate_limited


class TestExaContentExtractor:
    """Tests for ExaContentExtractor."""

    @pytest.fixture
    def extractor(self) -> ExaContentExtractor:
        extractor = ExaContentExtractor(api_key="test-key")
        extractor._client = MagicMock()
        return extractor

    async def test_returns_first_result_text(self, extractor: ExaContentExtractor) -> None:
        extractor._client.get_contents = AsyncMock(
            return_value=MagicMock(results=[MagicMock(text="Full text")])
        )

        assert await extractor.extract("https://example.com/a") == "Full text"
        extractor._client.get_contents.assert_awaited_once_with(
            ["https://example.com/a"], text=True
        )

    async def test_empty_results_raise(self, extractor: ExaContentExtractor) -> None:
        extractor._client.get_contents = AsyncMock(return_value=MagicMock(results=[]))

        with pytest.raises(ServiceError, match="no contents"):
            await extractor.extract("https://example.com/a")
