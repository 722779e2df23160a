"""Rate-limited news aggregation pipeline."""

import asyncio
import logging
import time
from functools import partial

from genai_news.backoff import BackoffExecutor, Clock, RetryStats, Sleep, utc_now
from genai_news.data import APICallUsage, NewsArticle, SearchResult, Usage
from genai_news.extract.base import ContentExtractor
from genai_news.pipeline.settings import PipelineSettings
from genai_news.run_logger import RunLogger
from genai_news.search.base import NewsSearcher
from genai_news.translate.base import TextGenerator
from genai_news.translate.prompt import TRANSLATION_FAILED, build_translation_prompt

logger = logging.getLogger(__name__)


def deduplicate_by_link(results: list[SearchResult]) -> list[SearchResult]:
    """Drop results whose link was already seen, keeping the first occurrence."""
    seen_links: set[str] = set()
    unique: list[SearchResult] = []
    for result in results:
        if result.link not in seen_links:
            seen_links.add(result.link)
            unique.append(result)
    return unique


class AggregationPipeline:
    """Search, deduplicate, enrich and translate news, one call at a time.

    Flow:
    1. Each configured query is searched sequentially, paced by ``query_delay``
    2. Results are concatenated in query order and deduplicated by link
    3. The first ``max_articles`` results are processed in order:
       short snippets among the first ``extraction_candidates`` are replaced
       by extracted page text, then the body is translated to Japanese
    4. Articles are paced by ``article_delay``

    Every external call goes through the backoff executor. A failing query,
    extraction, translation or article is logged and skipped; anything else
    propagates out of ``run``.

    Args:
        searcher: News search service.
        extractor: Full-text extraction service.
        generator: Text generation service used for translation.
        settings: Caps, thresholds and delays.
        executor: Backoff executor wrapping every external call.
        sleep: Awaitable sleep used for pacing delays.
        clock: Current-time source for ids and default timestamps.
        run_logger: Optional RunLogger for intermediate result logging.
    """

    def __init__(
        self,
        searcher: NewsSearcher,
        extractor: ContentExtractor,
        generator: TextGenerator,
        *,
        settings: PipelineSettings | None = None,
        executor: BackoffExecutor | None = None,
        sleep: Sleep = asyncio.sleep,
        clock: Clock = utc_now,
        run_logger: RunLogger | None = None,
    ) -> None:
        self._searcher = searcher
        self._extractor = extractor
        self._generator = generator
        self._settings = settings or PipelineSettings()
        self._executor = executor or BackoffExecutor(sleep=sleep, clock=clock)
        self._sleep = sleep
        self._clock = clock
        self._run_logger = run_logger

    @property
    def settings(self) -> PipelineSettings:
        return self._settings

    async def run(self) -> tuple[list[NewsArticle], Usage]:
        """Execute one aggregation run.

        Returns:
            Tuple of (articles in discovery order, usage).
        """
        queries = list(self._settings.queries)
        if self._run_logger:
            self._run_logger.start_run("aggregation", queries)

        usage = Usage()
        try:
            articles = await self._run(queries, usage)
        except Exception as e:
            if self._run_logger:
                self._run_logger.finish_run([], usage, error=str(e))
            raise

        if self._run_logger:
            self._run_logger.finish_run(articles, usage)
        return (articles, usage)

    async def _run(self, queries: list[str], usage: Usage) -> list[NewsArticle]:
        logger.info("ニュース取得を開始...")
        all_results = await self._search_all(queries, usage)
        logger.info(f"全検索結果数: {len(all_results)}")

        t0 = time.monotonic()
        unique_results = deduplicate_by_link(all_results)
        logger.info(f"重複除去後: {len(unique_results)}")
        selected = unique_results[: self._settings.max_articles]

        if self._run_logger:
            self._run_logger.log_stage(
                stage="deduplication",
                component="link_dedup",
                input_data={"result_count": len(all_results)},
                output_data={
                    "unique_count": len(unique_results),
                    "selected_count": len(selected),
                },
                usage=None,
                duration_seconds=time.monotonic() - t0,
            )

        batch_stamp = int(self._clock().timestamp() * 1000)
        articles: list[NewsArticle] = []
        for i, result in enumerate(selected):
            try:
                logger.info(f"記事 {i + 1}/{len(selected)} 処理中: {result.title}")
                article = await self._process_result(i, result, batch_stamp, usage)
                articles.append(article)
            except Exception as e:
                logger.error(f"記事処理エラー ({result.title}): {e}")

            if i < len(selected) - 1:
                await self._sleep(self._settings.article_delay)

        logger.info(f"全処理完了。記事数: {len(articles)}")
        return articles

    async def _search_all(self, queries: list[str], usage: Usage) -> list[SearchResult]:
        """Run every query in order; failed queries contribute nothing."""
        all_results: list[SearchResult] = []
        for i, query in enumerate(queries):
            logger.info(f"検索中 ({i + 1}/{len(queries)}): {query}")
            t0 = time.monotonic()
            retry = RetryStats()
            try:
                results = await self._executor.run(
                    partial(self._searcher.search, query, limit=self._settings.results_per_query),
                    stats=retry,
                )
                usage.search_requests += 1
                all_results.extend(results)
                logger.info(f"ニュース検索結果: {len(results)}件")
                if self._run_logger:
                    self._run_logger.log_stage(
                        stage="search",
                        component=type(self._searcher).__name__,
                        input_data=query,
                        output_data=results,
                        usage=Usage(search_requests=1),
                        duration_seconds=time.monotonic() - t0,
                        retry=retry,
                    )
            except Exception as e:
                logger.warning(f"検索エラー ({query}): {e}")
                if self._run_logger:
                    self._run_logger.log_stage(
                        stage="search",
                        component=type(self._searcher).__name__,
                        input_data=query,
                        output_data=None,
                        usage=None,
                        duration_seconds=time.monotonic() - t0,
                        error=str(e),
                        retry=retry,
                    )

            if i < len(queries) - 1:
                await self._sleep(self._settings.query_delay)

        return all_results

    async def _process_result(
        self,
        index: int,
        result: SearchResult,
        batch_stamp: int,
        usage: Usage,
    ) -> NewsArticle:
        settings = self._settings
        body = result.snippet or result.description or ""

        # Eligibility uses the index within the capped selection
        if len(body) < settings.min_snippet_length and index < settings.extraction_candidates:
            body = await self._extract(result, body, usage)

        translated = ""
        if len(body) > settings.min_translatable_length:
            translated = await self._translate(body, usage)

        return NewsArticle(
            id=f"article-{batch_stamp}-{index}",
            title=result.title,
            original_text=body,
            translated_text=translated,
            published_at=result.date or self._clock().isoformat(),
            source=result.source or result.displayed_link or "Web",
            url=result.link,
            image_url=result.thumbnail or None,
        )

    async def _extract(self, result: SearchResult, body: str, usage: Usage) -> str:
        """Replace a short body with extracted page text when extraction succeeds."""
        logger.info(f"記事内容を抽出中: {result.link}")
        t0 = time.monotonic()
        retry = RetryStats()
        try:
            extracted = await self._executor.run(
                partial(self._extractor.extract, result.link), stats=retry
            )
        except Exception as e:
            logger.warning(f"記事抽出失敗 ({result.link}): {e}")
            if self._run_logger:
                self._run_logger.log_stage(
                    stage="extraction",
                    component=type(self._extractor).__name__,
                    input_data=result.link,
                    output_data=None,
                    usage=None,
                    duration_seconds=time.monotonic() - t0,
                    error=str(e),
                    retry=retry,
                )
            return body

        usage.extraction_requests += 1
        if extracted and len(extracted) > self._settings.min_snippet_length:
            body = extracted[: self._settings.max_content_length]
            logger.info(f"記事内容抽出成功: {len(body)}文字")

        if self._run_logger:
            self._run_logger.log_stage(
                stage="extraction",
                component=type(self._extractor).__name__,
                input_data=result.link,
                output_data={"extracted_length": len(extracted or ""), "body_length": len(body)},
                usage=Usage(extraction_requests=1),
                duration_seconds=time.monotonic() - t0,
                retry=retry,
            )
        return body

    async def _translate(self, body: str, usage: Usage) -> str:
        """Translate ``body`` to Japanese, or return the failure marker."""
        logger.info("日本語翻訳を生成中...")
        await self._sleep(self._settings.translation_delay)

        t0 = time.monotonic()
        retry = RetryStats()
        try:
            generated = await self._executor.run(
                partial(
                    self._generator.generate,
                    build_translation_prompt(body),
                    max_tokens=self._settings.translation_max_tokens,
                ),
                stats=retry,
            )
        except Exception as e:
            logger.warning(f"翻訳エラー: {e}")
            if self._run_logger:
                self._run_logger.log_stage(
                    stage="translation",
                    component=type(self._generator).__name__,
                    input_data={"body_length": len(body)},
                    output_data=None,
                    usage=None,
                    duration_seconds=time.monotonic() - t0,
                    error=str(e),
                    retry=retry,
                )
            return TRANSLATION_FAILED

        call_usage = Usage(
            api_calls=[
                APICallUsage(
                    model=generated.model,
                    input_tokens=generated.input_tokens,
                    output_tokens=generated.output_tokens,
                )
            ]
        )
        usage += call_usage
        logger.info("翻訳完了")

        if self._run_logger:
            self._run_logger.log_stage(
                stage="translation",
                component=type(self._generator).__name__,
                input_data={"body_length": len(body)},
                output_data={"translated_length": len(generated.text)},
                usage=call_usage,
                duration_seconds=time.monotonic() - t0,
                retry=retry,
            )
        return generated.text
