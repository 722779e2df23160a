"""Tests for ClaudeTextGenerator and the translation prompt."""

from unittest.mock import AsyncMock, MagicMock

import anthropic
import httpx
import pytest
from anthropic.types import TextBlock

from genai_news.errors import ErrorKind, ServiceError
from genai_news.translate import ClaudeTextGenerator, build_translation_prompt

API_URL = "https://api.anthropic.com/v1/messages"


def _make_mock_usage(input_tokens: int = 100, output_tokens: int = 50) -> MagicMock:
    usage = MagicMock()
    usage.input_tokens = input_tokens
    usage.output_tokens = output_tokens
    return usage


@pytest.fixture
def mock_response() -> MagicMock:
    """Create a mock API response with real TextBlocks."""
    response = MagicMock()
    response.content = [
        TextBlock(type="text", text="OpenAIは"),
        TextBlock(type="text", text="新モデルを発表しました。"),
    ]
    response.usage = _make_mock_usage()
    return response


@pytest.fixture
def generator(mock_response: MagicMock) -> ClaudeTextGenerator:
    """Create a generator with mocked API client."""
    gen = ClaudeTextGenerator(model="test-model", api_key="test-key")
    object.__setattr__(gen._client.messages, "create", AsyncMock(return_value=mock_response))
    return gen


def _set_error(generator: ClaudeTextGenerator, error: Exception) -> None:
    object.__setattr__(generator._client.messages, "create", AsyncMock(side_effect=error))


def test_init_requires_api_key(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("CLAUDE_API_KEY", raising=False)
    with pytest.raises(ValueError, match="API key required"):
        ClaudeTextGenerator()


def test_init_uses_env_var(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("CLAUDE_API_KEY", "env-key")
    generator = ClaudeTextGenerator()
    assert generator._client.api_key == "env-key"


async def test_generate_concatenates_text_blocks(generator: ClaudeTextGenerator) -> None:
    result = await generator.generate("prompt")

    assert result.text == "OpenAIは新モデルを発表しました。"
    assert result.model == "test-model"
    assert result.input_tokens == 100
    assert result.output_tokens == 50


async def test_generate_passes_prompt_and_max_tokens(generator: ClaudeTextGenerator) -> None:
    await generator.generate("translate me", max_tokens=1000)

    kwargs = generator._client.messages.create.call_args.kwargs
    assert kwargs["model"] == "test-model"
    assert kwargs["max_tokens"] == 1000
    assert kwargs["messages"] == [{"role": "user", "content": "translate me"}]


async def test_rate_limit_is_tagged(generator: ClaudeTextGenerator) -> None:
    response = httpx.Response(
        429,
        headers={"retry-after": "20"},
        request=httpx.Request("POST", API_URL),
    )
    _set_error(
        generator, anthropic.RateLimitError("rate limited", response=response, body=None)
    )

    with pytest.raises(ServiceError) as exc_info:
        await generator.generate("prompt")

    assert exc_info.value.kind == ErrorKind.RATE_LIMITED
    assert exc_info.value.reset_at is not None
    assert exc_info.value.service == "claude"


async def test_connection_error_is_other(generator: ClaudeTextGenerator) -> None:
    _set_error(generator, anthropic.APIConnectionError(request=httpx.Request("POST", API_URL)))

    with pytest.raises(ServiceError) as exc_info:
        await generator.generate("prompt")

    assert exc_info.value.kind == ErrorKind.OTHER


def test_translation_prompt_embeds_text() -> None:
    prompt = build_translation_prompt("Hello world")

    assert "Hello world" in prompt
    assert prompt.startswith("以下のテキストを自然な日本語に翻訳してください。")
    assert prompt.endswith("翻訳:")
