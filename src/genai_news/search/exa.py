"""News search using the official exa-py SDK."""

import logging
import os

from exa_py import AsyncExa

from genai_news.data import SearchResult
from genai_news.errors import ErrorKind, ServiceError
from genai_news.url import extract_domain

logger = logging.getLogger(__name__)


def exa_error(error: Exception) -> ServiceError:
    """Classify an exa-py failure.

    The SDK reports HTTP failures as plain exceptions whose message carries
    the status code.
    """
    message = str(error)
    kind = ErrorKind.RATE_LIMITED if "429" in message else ErrorKind.OTHER
    return ServiceError(f"Exa request failed: {message}", kind=kind, service="exa")


class ExaSearcher:
    """Search for news using the Exa API.

    Requests the ``news`` category and asks Exa for a short text excerpt so
    results carry a usable snippet.

    Args:
        api_key: Exa API key (defaults to EXA_API_KEY env var).
        snippet_characters: Max characters of page text to request per hit.
    """

    def __init__(
        self,
        *,
        api_key: str | None = None,
        snippet_characters: int = 500,
    ) -> None:
        self._api_key = api_key or os.environ.get("EXA_API_KEY")
        if not self._api_key:
            raise ValueError("Exa API key required. Pass api_key or set EXA_API_KEY env var.")
        self._snippet_characters = snippet_characters
        self._client = AsyncExa(api_key=self._api_key)

    async def search(self, query: str, *, limit: int = 8) -> list[SearchResult]:
        try:
            response = await self._client.search_and_contents(
                query,
                num_results=limit,
                category="news",
                text={"max_characters": self._snippet_characters},
            )
        except Exception as e:
            raise exa_error(e) from e

        results: list[SearchResult] = []
        for result in response.results:
            results.append(
                SearchResult(
                    title=result.title or "",
                    link=result.url,
                    snippet=getattr(result, "text", None) or "",
                    source=extract_domain(result.url),
                    date=result.published_date,
                    thumbnail=getattr(result, "image", None),
                )
            )
        return results
