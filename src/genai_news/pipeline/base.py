"""Pipeline protocol for producing a news batch."""

from typing import Protocol

from genai_news.data import NewsArticle, Usage


class NewsPipeline(Protocol):
    """Interface for pipelines that build a fresh article batch."""

    async def run(self) -> tuple[list[NewsArticle], Usage]:
        """Build a new batch of articles.

        Returns:
            Tuple of (articles, usage).

        Raises:
            Exception: Any pipeline-level failure; per-item failures are
                handled inside the pipeline.
        """
        ...
