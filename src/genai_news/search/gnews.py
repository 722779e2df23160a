"""News search through the GNews API."""

import logging
import os

import httpx

from genai_news.data import SearchResult
from genai_news.errors import ServiceError, error_from_http_status, json_body

GNEWS_API_URL = "https://gnews.io/api/v4/search"

logger = logging.getLogger(__name__)


class GNewsSearcher:
    """Search for news articles using the GNews API.

    Args:
        api_key: GNews API key (defaults to GNEWS_API_KEY env var).
        lang: Language code for results (default: "en").
    """

    def __init__(
        self,
        *,
        api_key: str | None = None,
        lang: str = "en",
    ) -> None:
        self._api_key = api_key or os.environ.get("GNEWS_API_KEY")
        if not self._api_key:
            raise ValueError("GNews API key required. Pass api_key or set GNEWS_API_KEY env var.")
        self._lang = lang

    async def search(self, query: str, *, limit: int = 8) -> list[SearchResult]:
        params: dict[str, str | int] = {
            "q": query,
            "lang": self._lang,
            "max": min(limit, 100),  # GNews max is 100
            "apikey": self._api_key,  # type: ignore[dict-item]
        }

        try:
            async with httpx.AsyncClient(timeout=30.0) as client:
                response = await client.get(GNEWS_API_URL, params=params)
                response.raise_for_status()
        except httpx.HTTPStatusError as e:
            raise error_from_http_status(
                e.response.status_code, e.response.headers, service="gnews"
            ) from e
        except httpx.HTTPError as e:
            raise ServiceError(f"GNews request failed: {e}", service="gnews") from e

        data = json_body(response, service="gnews")
        results: list[SearchResult] = []
        for item in data.get("articles") or []:
            results.append(
                SearchResult(
                    title=item.get("title", ""),
                    link=item.get("url", ""),
                    description=item.get("description"),
                    snippet=item.get("content") or "",
                    source=(item.get("source") or {}).get("name"),
                    date=item.get("publishedAt"),
                    thumbnail=item.get("image"),
                )
            )
        return results
