from typing import Protocol


class ContentExtractor(Protocol):
    """Interface for full-text extraction from an article URL."""

    async def extract(self, url: str) -> str:
        """Fetch a page and return its main text.

        Raises:
            ServiceError: On any failure; rate limits are tagged as such.
        """
        ...
