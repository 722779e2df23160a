"""Claude-based text generation."""

import logging
import os

import anthropic

from genai_news.data import GeneratedText
from genai_news.errors import ErrorKind, ServiceError, reset_time_from_headers

logger = logging.getLogger(__name__)


class ClaudeTextGenerator:
    """Generate text with Anthropic's Messages API.

    The SDK's own retries are disabled; rate limits surface as
    ``ServiceError`` and are retried by the backoff executor.

    Args:
        model: Anthropic model to use.
        api_key: API key (defaults to CLAUDE_API_KEY env var).
    """

    def __init__(
        self,
        *,
        model: str = "claude-haiku-4-5-20251001",
        api_key: str | None = None,
    ) -> None:
        resolved_key = api_key or os.environ.get("CLAUDE_API_KEY")
        if not resolved_key:
            raise ValueError(
                "Claude API key required. Pass api_key or set CLAUDE_API_KEY env var."
            )
        self._client = anthropic.AsyncAnthropic(api_key=resolved_key, max_retries=0)
        self._model = model

    async def generate(self, prompt: str, *, max_tokens: int = 1000) -> GeneratedText:
        try:
            response = await self._client.messages.create(
                model=self._model,
                max_tokens=max_tokens,
                messages=[{"role": "user", "content": prompt}],
            )
        except anthropic.RateLimitError as e:
            raise ServiceError(
                f"Claude rate limit exceeded: {e}",
                kind=ErrorKind.RATE_LIMITED,
                reset_at=reset_time_from_headers(e.response.headers),
                service="claude",
            ) from e
        except anthropic.APIError as e:
            raise ServiceError(f"Claude request failed: {e}", service="claude") from e

        text = ""
        for block in response.content:
            if hasattr(block, "text"):
                text += block.text

        return GeneratedText(
            text=text,
            model=self._model,
            input_tokens=response.usage.input_tokens,
            output_tokens=response.usage.output_tokens,
        )
