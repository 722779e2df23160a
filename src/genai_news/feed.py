"""In-memory article feed with the top-level failure boundary."""

import logging
from typing import Any

from genai_news.data import FetchOutcome, NewsArticle, Usage
from genai_news.fallback import fallback_articles
from genai_news.pipeline.base import NewsPipeline

logger = logging.getLogger(__name__)

FETCH_FAILED_MESSAGE = "ニュース取得に失敗しました"


class NewsFeed:
    """Holds the current article batch and refreshes it from a pipeline.

    Each refresh replaces the whole batch. When the pipeline raises, the
    error is logged, ``error`` is set to a user-facing message and the
    static sample batch is shown instead. Overlapping refreshes are not
    serialized; whichever finishes last wins.

    Args:
        pipeline: Pipeline that builds a fresh batch.
    """

    def __init__(self, pipeline: NewsPipeline) -> None:
        self._pipeline = pipeline
        self.articles: list[NewsArticle] = []
        self.loading = False
        self.error: str | None = None
        self.user: Any = None
        self.last_usage = Usage()

    async def refresh(self) -> FetchOutcome:
        """Run the pipeline and replace the current batch.

        Returns:
            The outcome of this refresh, including the fallback flag.
        """
        self.loading = True
        self.error = None
        try:
            articles, usage = await self._pipeline.run()
            outcome = FetchOutcome(articles=articles, usage=usage)
        except Exception as e:
            logger.exception("ニュース取得エラー")
            outcome = FetchOutcome(
                articles=fallback_articles(),
                error=f"{FETCH_FAILED_MESSAGE}: {e}",
                used_fallback=True,
            )
        finally:
            self.loading = False

        self.articles = outcome.articles
        self.error = outcome.error
        self.last_usage = outcome.usage
        return outcome
