"""Text generation and translation module."""

from genai_news.translate.base import TextGenerator
from genai_news.translate.claude import ClaudeTextGenerator
from genai_news.translate.prompt import (
    TRANSLATION_FAILED,
    TRANSLATION_PROMPT,
    build_translation_prompt,
)

__all__ = [
    "TRANSLATION_FAILED",
    "TRANSLATION_PROMPT",
    "ClaudeTextGenerator",
    "TextGenerator",
    "build_translation_prompt",
]
