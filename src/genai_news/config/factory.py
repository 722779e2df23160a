"""Factory functions to create components from configuration."""

from pathlib import Path

from genai_news.backoff import BackoffExecutor
from genai_news.config.models import (
    BackoffConfig,
    ClaudeTranslatorConfig,
    ExaExtractorConfig,
    ExaSearcherConfig,
    ExtractorConfig,
    GNewsSearcherConfig,
    HttpExtractorConfig,
    NewsConfig,
    SearcherConfig,
    SerpApiSearcherConfig,
)
from genai_news.extract.base import ContentExtractor
from genai_news.extract.exa import ExaContentExtractor
from genai_news.extract.http import HttpContentExtractor
from genai_news.feed import NewsFeed
from genai_news.pipeline.aggregation import AggregationPipeline
from genai_news.run_logger import RunLogger
from genai_news.search.base import NewsSearcher
from genai_news.search.exa import ExaSearcher
from genai_news.search.gnews import GNewsSearcher
from genai_news.search.serpapi import SerpApiSearcher
from genai_news.translate.base import TextGenerator
from genai_news.translate.claude import ClaudeTextGenerator


def create_searcher(config: SearcherConfig) -> NewsSearcher:
    """Create a news searcher from config."""
    if isinstance(config, SerpApiSearcherConfig):
        return SerpApiSearcher(language=config.language, country=config.country)
    if isinstance(config, GNewsSearcherConfig):
        return GNewsSearcher(lang=config.lang)
    if isinstance(config, ExaSearcherConfig):
        return ExaSearcher(snippet_characters=config.snippet_characters)
    msg = f"Unknown searcher config type: {type(config)}"
    raise ValueError(msg)


def create_extractor(config: ExtractorConfig) -> ContentExtractor:
    """Create a content extractor from config."""
    if isinstance(config, HttpExtractorConfig):
        return HttpContentExtractor(timeout=config.timeout)
    if isinstance(config, ExaExtractorConfig):
        return ExaContentExtractor()
    msg = f"Unknown extractor config type: {type(config)}"
    raise ValueError(msg)


def create_generator(config: ClaudeTranslatorConfig) -> TextGenerator:
    """Create a text generator from config."""
    if isinstance(config, ClaudeTranslatorConfig):
        return ClaudeTextGenerator(model=config.model)
    msg = f"Unknown translator config type: {type(config)}"
    raise ValueError(msg)


def create_executor(config: BackoffConfig) -> BackoffExecutor:
    """Create the backoff executor from config."""
    return BackoffExecutor(max_retries=config.max_retries, base_delay=config.base_delay)


def create_pipeline(
    config: NewsConfig,
    run_logger: RunLogger | None = None,
) -> AggregationPipeline:
    """Create the aggregation pipeline and its service clients from config."""
    return AggregationPipeline(
        searcher=create_searcher(config.searcher),
        extractor=create_extractor(config.extractor),
        generator=create_generator(config.translator),
        settings=config.pipeline,
        executor=create_executor(config.backoff),
        run_logger=run_logger,
    )


def create_from_config(
    config: NewsConfig,
    *,
    log_override: bool | None = None,
    log_dir_override: str | None = None,
) -> tuple[NewsFeed, RunLogger | None]:
    """Create a ready-to-refresh feed from root config.

    Args:
        config: Root configuration.
        log_override: Override the config's logging.enabled setting.
        log_dir_override: Override the config's logging.log_dir setting.

    Returns:
        Tuple of (feed, run_logger). run_logger is None if logging is disabled.
    """
    log_enabled = log_override if log_override is not None else config.logging.enabled
    log_dir = Path(log_dir_override if log_dir_override is not None else config.logging.log_dir)

    run_logger: RunLogger | None = None
    if log_enabled:
        run_logger = RunLogger(log_dir=log_dir, enabled=True)

    pipeline = create_pipeline(config, run_logger=run_logger)
    return (NewsFeed(pipeline), run_logger)
