from typing import Protocol

from genai_news.data import SearchResult


class NewsSearcher(Protocol):
    """Interface for news search services."""

    async def search(self, query: str, *, limit: int = 8) -> list[SearchResult]:
        """Run a news-type search.

        Args:
            query: Free-text search query.
            limit: Maximum results to return.

        Returns:
            Results in the provider's ranking order.

        Raises:
            ServiceError: On any failure; rate limits are tagged as such.
        """
        ...
