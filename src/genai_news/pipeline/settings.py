"""Tunable limits and pacing for the aggregation pipeline."""

from pydantic import BaseModel, Field

DEFAULT_QUERIES: tuple[str, ...] = (
    "AI 人工知能 最新ニュース 2024 OpenAI ChatGPT",
    "generative AI 生成AI 最新技術 Google Microsoft",
)


class PipelineSettings(BaseModel):
    """Caps, thresholds and fixed delays for one aggregation run.

    The defaults keep a run inside the free-tier quotas of the search and
    generation services. Delays are in seconds.
    """

    queries: tuple[str, ...] = DEFAULT_QUERIES
    results_per_query: int = Field(default=8, ge=1)
    max_articles: int = Field(default=6, ge=0)
    extraction_candidates: int = Field(default=3, ge=0)
    min_snippet_length: int = Field(default=200, ge=0)
    max_content_length: int = Field(default=2000, ge=1)
    min_translatable_length: int = Field(default=50, ge=0)
    translation_max_tokens: int = Field(default=1000, ge=1)
    query_delay: float = Field(default=2.0, ge=0)
    translation_delay: float = Field(default=1.5, ge=0)
    article_delay: float = Field(default=2.0, ge=0)

    model_config = {"frozen": True}
