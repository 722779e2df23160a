"""Data models for genai-news."""

from genai_news.data.models import (
    APICallUsage,
    FetchOutcome,
    GeneratedText,
    NewsArticle,
    SearchResult,
    Usage,
)

__all__ = [
    "APICallUsage",
    "FetchOutcome",
    "GeneratedText",
    "NewsArticle",
    "SearchResult",
    "Usage",
]
