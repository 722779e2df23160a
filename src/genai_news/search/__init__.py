"""News search module."""

from genai_news.search.base import NewsSearcher
from genai_news.search.exa import ExaSearcher
from genai_news.search.gnews import GNewsSearcher
from genai_news.search.serpapi import SerpApiSearcher

__all__ = [
    "ExaSearcher",
    "GNewsSearcher",
    "NewsSearcher",
    "SerpApiSearcher",
]
