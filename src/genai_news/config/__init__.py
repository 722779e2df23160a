"""Configuration module for genai-news."""

from genai_news.config.factory import create_from_config
from genai_news.config.loader import get_default_config_path, load_config
from genai_news.config.models import (
    BackoffConfig,
    ClaudeTranslatorConfig,
    ExaExtractorConfig,
    ExaSearcherConfig,
    ExtractorConfig,
    GNewsSearcherConfig,
    HttpExtractorConfig,
    LoggingConfig,
    NewsConfig,
    SearcherConfig,
    SerpApiSearcherConfig,
)
from genai_news.pipeline.settings import PipelineSettings

__all__ = [
    "BackoffConfig",
    "ClaudeTranslatorConfig",
    "ExaExtractorConfig",
    "ExaSearcherConfig",
    "ExtractorConfig",
    "GNewsSearcherConfig",
    "HttpExtractorConfig",
    "LoggingConfig",
    "NewsConfig",
    "PipelineSettings",
    "SearcherConfig",
    "SerpApiSearcherConfig",
    "create_from_config",
    "get_default_config_path",
    "load_config",
]
