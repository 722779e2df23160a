"""JSON run log for aggregation runs.

One file per run records every external call the pipeline made (search,
extraction, translation), how often each was rate limited and how long the
backoff waited, plus the shape of the final batch.
"""

import dataclasses
import uuid
from collections.abc import Sequence
from datetime import UTC, datetime
from pathlib import Path
from typing import Any

from pydantic import BaseModel

from genai_news.backoff import RetryStats
from genai_news.data import NewsArticle, Usage
from genai_news.translate.prompt import TRANSLATION_FAILED


class StageRecord(BaseModel):
    """One external call (or local step) within a run."""

    stage: str
    component: str
    input: Any = None
    output: Any = None
    usage: dict[str, Any] | None = None
    error: str | None = None
    retries: int = 0
    backoff_seconds: float = 0.0
    started_at: str = ""
    duration_seconds: float = 0.0


class RunRecord(BaseModel):
    """Everything recorded about one aggregation run."""

    run_id: str
    pipeline_type: str
    queries: list[str]
    started_at: str
    completed_at: str | None = None
    stages: list[StageRecord] = []
    article_count: int = 0
    translated_count: int = 0
    translation_failures: int = 0
    total_retries: int = 0
    total_backoff_seconds: float = 0.0
    total_usage: dict[str, Any] | None = None
    error: str | None = None


def _serialize(obj: Any) -> Any:
    """Convert stage payloads to JSON-compatible values.

    Usage is flattened with its token totals so the log needs no
    post-processing to read them.
    """
    if isinstance(obj, Usage):
        return {
            "search_requests": obj.search_requests,
            "extraction_requests": obj.extraction_requests,
            "generation_calls": len(obj.api_calls),
            "input_tokens": obj.input_tokens,
            "output_tokens": obj.output_tokens,
            "api_calls": [dataclasses.asdict(c) for c in obj.api_calls],
        }
    if dataclasses.is_dataclass(obj) and not isinstance(obj, type):
        return dataclasses.asdict(obj)
    if isinstance(obj, (list, tuple)):
        return [_serialize(item) for item in obj]
    if isinstance(obj, dict):
        return {k: _serialize(v) for k, v in obj.items()}
    return obj


def _now() -> str:
    return datetime.now(tz=UTC).isoformat()


class RunLogger:
    """Collects stage records for the current run and writes them as JSON.

    A disabled logger accepts every call and writes nothing.

    Args:
        log_dir: Directory for ``run_<timestamp>.json`` files.
        enabled: Whether anything is recorded.
    """

    def __init__(self, log_dir: Path, *, enabled: bool = True) -> None:
        self._log_dir = log_dir
        self._enabled = enabled
        self._record: RunRecord | None = None
        self._last_log_path: Path | None = None

    @property
    def enabled(self) -> bool:
        return self._enabled

    @property
    def last_log_path(self) -> Path | None:
        """File written by the most recent ``finish_run``, if any."""
        return self._last_log_path

    def start_run(self, pipeline_type: str, queries: Sequence[str]) -> None:
        if not self._enabled:
            return
        self._record = RunRecord(
            run_id=str(uuid.uuid4()),
            pipeline_type=pipeline_type,
            queries=list(queries),
            started_at=_now(),
        )

    def log_stage(
        self,
        stage: str,
        component: str,
        input_data: Any,
        output_data: Any,
        usage: Usage | None,
        duration_seconds: float,
        error: str | None = None,
        retry: RetryStats | None = None,
    ) -> None:
        """Append a stage to the current run; ignored outside a run.

        Args:
            stage: "search", "deduplication", "extraction" or "translation".
            component: Class name of the service that handled the stage.
            input_data: What the stage was asked for.
            output_data: What it produced (None on failure).
            usage: Service usage attributable to this stage.
            duration_seconds: Wall-clock time, including backoff waits.
            error: Failure message when the stage gave up.
            retry: Rate-limit retries observed by the backoff executor.
        """
        if not self._enabled or self._record is None:
            return

        retry = retry or RetryStats()
        self._record.stages.append(
            StageRecord(
                stage=stage,
                component=component,
                input=_serialize(input_data),
                output=_serialize(output_data),
                usage=_serialize(usage) if usage is not None else None,
                error=error,
                retries=retry.retries,
                backoff_seconds=round(retry.waited_seconds, 4),
                started_at=_now(),
                duration_seconds=round(duration_seconds, 4),
            )
        )

    def finish_run(
        self,
        articles: Sequence[NewsArticle],
        usage: Usage | None,
        *,
        error: str | None = None,
    ) -> Path | None:
        """Summarise the batch and write the run file.

        Args:
            articles: Final batch (empty when the run raised).
            usage: Accumulated usage for the run.
            error: Pipeline-level failure message.

        Returns:
            The written file, or None when disabled or outside a run.
        """
        record = self._record
        if not self._enabled or record is None:
            return None

        record.completed_at = _now()
        record.article_count = len(articles)
        record.translation_failures = sum(
            1 for a in articles if a.translated_text == TRANSLATION_FAILED
        )
        record.translated_count = sum(
            1 for a in articles if a.translated_text and a.translated_text != TRANSLATION_FAILED
        )
        record.total_retries = sum(s.retries for s in record.stages)
        record.total_backoff_seconds = round(sum(s.backoff_seconds for s in record.stages), 4)
        record.total_usage = _serialize(usage) if usage is not None else None
        record.error = error

        self._log_dir.mkdir(parents=True, exist_ok=True)
        # Colons are not portable in file names
        stamp = record.started_at.split(".")[0].split("+")[0].replace(":", "-")
        path = self._log_dir / f"run_{stamp}.json"
        path.write_text(record.model_dump_json(indent=2), encoding="utf-8")

        self._last_log_path = path
        self._record = None
        return path
