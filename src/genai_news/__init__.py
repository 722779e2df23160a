"""genai-news: generative AI news aggregation with Japanese translation."""

from genai_news.backoff import BackoffExecutor, RetryStats, compute_wait, retry_with_backoff
from genai_news.config import NewsConfig, create_from_config, load_config
from genai_news.data import (
    APICallUsage,
    FetchOutcome,
    GeneratedText,
    NewsArticle,
    SearchResult,
    Usage,
)
from genai_news.errors import ErrorKind, ServiceError
from genai_news.extract import ContentExtractor, ExaContentExtractor, HttpContentExtractor
from genai_news.fallback import fallback_articles
from genai_news.feed import NewsFeed
from genai_news.pipeline import (
    AggregationPipeline,
    NewsPipeline,
    PipelineSettings,
    deduplicate_by_link,
)
from genai_news.run_logger import RunLogger
from genai_news.search import ExaSearcher, GNewsSearcher, NewsSearcher, SerpApiSearcher
from genai_news.translate import TRANSLATION_FAILED, ClaudeTextGenerator, TextGenerator
from genai_news.trigger import AuthGatedTrigger, AuthState, AuthStateProvider, StaticAuthProvider

__all__ = [
    # Models
    "APICallUsage",
    "FetchOutcome",
    "GeneratedText",
    "NewsArticle",
    "SearchResult",
    "Usage",
    # Errors
    "ErrorKind",
    "ServiceError",
    # Backoff
    "BackoffExecutor",
    "RetryStats",
    "compute_wait",
    "retry_with_backoff",
    # Protocols
    "AuthStateProvider",
    "ContentExtractor",
    "NewsPipeline",
    "NewsSearcher",
    "TextGenerator",
    # Searchers
    "ExaSearcher",
    "GNewsSearcher",
    "SerpApiSearcher",
    # Extractors
    "ExaContentExtractor",
    "HttpContentExtractor",
    # Translation
    "ClaudeTextGenerator",
    "TRANSLATION_FAILED",
    # Pipeline
    "AggregationPipeline",
    "PipelineSettings",
    "deduplicate_by_link",
    "fallback_articles",
    # Feed / trigger
    "AuthGatedTrigger",
    "AuthState",
    "NewsFeed",
    "StaticAuthProvider",
    # Logging
    "RunLogger",
    # Config
    "NewsConfig",
    "create_from_config",
    "load_config",
]
