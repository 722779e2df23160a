"""News search through SerpApi's Google News vertical."""

import logging
import os

import httpx

from genai_news.data import SearchResult
from genai_news.errors import ServiceError, error_from_http_status, json_body

SERPAPI_URL = "https://serpapi.com/search.json"

logger = logging.getLogger(__name__)


class SerpApiSearcher:
    """Search Google News through SerpApi.

    Returns the ``news_results`` block of the response, which carries
    title, link, snippet, source, date and thumbnail per hit.

    Args:
        api_key: SerpApi key (defaults to SERPAPI_API_KEY env var).
        language: Interface language passed as ``hl``.
        country: Country passed as ``gl``.
        timeout: Request timeout in seconds.
    """

    def __init__(
        self,
        *,
        api_key: str | None = None,
        language: str = "ja",
        country: str = "jp",
        timeout: float = 30.0,
    ) -> None:
        self._api_key = api_key or os.environ.get("SERPAPI_API_KEY")
        if not self._api_key:
            raise ValueError(
                "SerpApi API key required. Pass api_key or set SERPAPI_API_KEY env var."
            )
        self._language = language
        self._country = country
        self._timeout = timeout

    async def search(self, query: str, *, limit: int = 8) -> list[SearchResult]:
        params: dict[str, str | int] = {
            "engine": "google",
            "tbm": "nws",
            "q": query,
            "num": limit,
            "hl": self._language,
            "gl": self._country,
            "api_key": self._api_key,  # type: ignore[dict-item]
        }

        try:
            async with httpx.AsyncClient(timeout=self._timeout) as client:
                response = await client.get(SERPAPI_URL, params=params)
                response.raise_for_status()
        except httpx.HTTPStatusError as e:
            raise error_from_http_status(
                e.response.status_code, e.response.headers, service="serpapi"
            ) from e
        except httpx.HTTPError as e:
            raise ServiceError(f"SerpApi request failed: {e}", service="serpapi") from e

        data = json_body(response, service="serpapi")
        results = [_parse_news_result(item) for item in data.get("news_results") or []]
        return results[:limit]


def _parse_news_result(item: dict) -> SearchResult:
    source = item.get("source")
    # Google News results nest the publisher as {"name": ...}
    if isinstance(source, dict):
        source = source.get("name")
    thumbnail = item.get("thumbnail")
    return SearchResult(
        title=item.get("title", ""),
        link=item.get("link", ""),
        snippet=item.get("snippet") or "",
        description=item.get("description"),
        source=source,
        displayed_link=item.get("displayed_link"),
        date=item.get("date"),
        thumbnail=thumbnail if isinstance(thumbnail, str) else None,
    )
