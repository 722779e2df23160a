from typing import Protocol

from genai_news.data import GeneratedText


class TextGenerator(Protocol):
    """Interface for hosted text generation."""

    async def generate(self, prompt: str, *, max_tokens: int = 1000) -> GeneratedText:
        """Generate a completion for a single-turn prompt.

        Raises:
            ServiceError: On any failure; rate limits are tagged as such.
        """
        ...
