"""Content extraction through Exa's contents endpoint."""

import logging
import os

from exa_py import AsyncExa

from genai_news.errors import ServiceError
from genai_news.search.exa import exa_error

logger = logging.getLogger(__name__)


class ExaContentExtractor:
    """Retrieve cleaned page text for a URL using the Exa API.

    Args:
        api_key: Exa API key (defaults to EXA_API_KEY env var).
    """

    def __init__(self, *, api_key: str | None = None) -> None:
        self._api_key = api_key or os.environ.get("EXA_API_KEY")
        if not self._api_key:
            raise ValueError("Exa API key required. Pass api_key or set EXA_API_KEY env var.")
        self._client = AsyncExa(api_key=self._api_key)

    async def extract(self, url: str) -> str:
        try:
            response = await self._client.get_contents([url], text=True)
        except Exception as e:
            raise exa_error(e) from e

        if not response.results:
            raise ServiceError(f"Exa returned no contents for {url}", service="exa")
        return response.results[0].text or ""
