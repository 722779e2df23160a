"""Direct HTTP content extraction with BeautifulSoup."""

import logging
import re

import httpx
from bs4 import BeautifulSoup

from genai_news.errors import ServiceError, error_from_http_status

logger = logging.getLogger(__name__)

DEFAULT_USER_AGENT = (
    "Mozilla/5.0 (X11; Linux x86_64) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/124.0 Safari/537.36"
)

_NOISE_TAGS = ("script", "style", "noscript", "nav", "header", "footer", "aside", "form")


def _collapse(text: str) -> str:
    return re.sub(r"\s+", " ", text).strip()


def html_to_text(html: str) -> str:
    """Extract readable body text from an HTML page.

    Prefers the ``<article>`` element, then ``<main>``, then ``<body>``.
    Paragraph text is joined with blank lines.
    """
    soup = BeautifulSoup(html, "html.parser")
    for tag in soup(list(_NOISE_TAGS)):
        tag.decompose()

    root = soup.find("article") or soup.find("main") or soup.body or soup
    paragraphs = [_collapse(p.get_text(" ", strip=True)) for p in root.find_all("p")]
    paragraphs = [p for p in paragraphs if p]
    if paragraphs:
        return "\n\n".join(paragraphs)
    return _collapse(root.get_text(" ", strip=True))


class HttpContentExtractor:
    """Fetch an article page and extract its text.

    Args:
        timeout: Request timeout in seconds.
        user_agent: User-Agent header sent with each request.
    """

    def __init__(
        self,
        *,
        timeout: float = 15.0,
        user_agent: str = DEFAULT_USER_AGENT,
    ) -> None:
        self._timeout = timeout
        self._user_agent = user_agent

    async def extract(self, url: str) -> str:
        headers = {
            "User-Agent": self._user_agent,
            "Accept": "text/html,application/xhtml+xml,application/xml;q=0.9,*/*;q=0.8",
        }
        try:
            async with httpx.AsyncClient(
                timeout=self._timeout, follow_redirects=True, headers=headers
            ) as client:
                response = await client.get(url)
                response.raise_for_status()
        except httpx.HTTPStatusError as e:
            raise error_from_http_status(
                e.response.status_code, e.response.headers, service="http_extract"
            ) from e
        except httpx.HTTPError as e:
            raise ServiceError(f"Failed to fetch {url}: {e}", service="http_extract") from e

        return html_to_text(response.text)
