"""Article content extraction module."""

from genai_news.extract.base import ContentExtractor
from genai_news.extract.exa import ExaContentExtractor
from genai_news.extract.http import HttpContentExtractor, html_to_text

__all__ = [
    "ContentExtractor",
    "ExaContentExtractor",
    "HttpContentExtractor",
    "html_to_text",
]
