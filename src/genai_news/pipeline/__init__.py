"""Pipeline module for news aggregation."""

from genai_news.pipeline.aggregation import AggregationPipeline, deduplicate_by_link
from genai_news.pipeline.base import NewsPipeline
from genai_news.pipeline.settings import DEFAULT_QUERIES, PipelineSettings

__all__ = [
    "DEFAULT_QUERIES",
    "AggregationPipeline",
    "NewsPipeline",
    "PipelineSettings",
    "deduplicate_by_link",
]
