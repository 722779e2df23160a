"""Pydantic configuration models for genai-news components."""

from typing import Annotated, Literal

from pydantic import BaseModel, Field

from genai_news.pipeline.settings import PipelineSettings

# ============================================================
# Searcher Configs
# ============================================================


class SerpApiSearcherConfig(BaseModel):
    """Configuration for SerpApiSearcher."""

    type: Literal["serpapi"] = "serpapi"
    language: str = "ja"
    country: str = "jp"

    model_config = {"frozen": True}


class GNewsSearcherConfig(BaseModel):
    """Configuration for GNewsSearcher."""

    type: Literal["gnews"] = "gnews"
    lang: str = "en"

    model_config = {"frozen": True}


class ExaSearcherConfig(BaseModel):
    """Configuration for ExaSearcher."""

    type: Literal["exa"] = "exa"
    snippet_characters: int = 500

    model_config = {"frozen": True}


SearcherConfig = Annotated[
    SerpApiSearcherConfig | GNewsSearcherConfig | ExaSearcherConfig,
    Field(discriminator="type"),
]


# ============================================================
# Extractor Configs
# ============================================================


class HttpExtractorConfig(BaseModel):
    """Configuration for HttpContentExtractor."""

    type: Literal["http"] = "http"
    timeout: float = 15.0

    model_config = {"frozen": True}


class ExaExtractorConfig(BaseModel):
    """Configuration for ExaContentExtractor."""

    type: Literal["exa"] = "exa"

    model_config = {"frozen": True}


ExtractorConfig = Annotated[
    HttpExtractorConfig | ExaExtractorConfig,
    Field(discriminator="type"),
]


# ============================================================
# Translator Config
# ============================================================


class ClaudeTranslatorConfig(BaseModel):
    """Configuration for ClaudeTextGenerator."""

    type: Literal["claude"] = "claude"
    model: str = "claude-haiku-4-5-20251001"

    model_config = {"frozen": True}


# ============================================================
# Backoff / Logging Configs
# ============================================================


class BackoffConfig(BaseModel):
    """Retry settings applied to every external call."""

    max_retries: int = Field(default=3, ge=1)
    base_delay: float = Field(default=1.0, ge=0)

    model_config = {"frozen": True}


class LoggingConfig(BaseModel):
    """Configuration for intermediate pipeline logging."""

    enabled: bool = False
    log_dir: str = "logs"

    model_config = {"frozen": True}


# ============================================================
# Root Config
# ============================================================


class NewsConfig(BaseModel):
    """Root configuration for genai-news."""

    pipeline: PipelineSettings = Field(default_factory=PipelineSettings)
    backoff: BackoffConfig = Field(default_factory=BackoffConfig)
    searcher: SearcherConfig = Field(default_factory=SerpApiSearcherConfig)
    extractor: ExtractorConfig = Field(default_factory=HttpExtractorConfig)
    translator: ClaudeTranslatorConfig = Field(default_factory=ClaudeTranslatorConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    model_config = {"frozen": True}
