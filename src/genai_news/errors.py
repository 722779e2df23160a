"""Tagged errors raised by external service adapters.

Adapters translate SDK and HTTP failures into ``ServiceError`` so retry
logic only has to look at ``kind`` and ``reset_at``.
"""

import logging
from collections.abc import Mapping
from datetime import UTC, datetime, timedelta
from email.utils import parsedate_to_datetime
from enum import StrEnum
from typing import Any

import httpx

logger = logging.getLogger(__name__)

# Epoch values above this are treated as milliseconds
_EPOCH_MS_THRESHOLD = 10**11

_RESET_HEADERS = (
    "retry-after",
    "x-ratelimit-reset",
    "ratelimit-reset",
    "anthropic-ratelimit-requests-reset",
    "anthropic-ratelimit-tokens-reset",
)


class ErrorKind(StrEnum):
    """Failure classification used by the backoff executor."""

    RATE_LIMITED = "rate_limited"
    OTHER = "other"


class ServiceError(Exception):
    """Failure of an external service call.

    Args:
        message: Human-readable description.
        kind: Failure classification.
        reset_at: Time at which the quota resets, when the server reported one.
        service: Name of the service that failed (for logs).
    """

    def __init__(
        self,
        message: str,
        *,
        kind: ErrorKind = ErrorKind.OTHER,
        reset_at: datetime | None = None,
        service: str = "",
    ) -> None:
        super().__init__(message)
        self.kind = kind
        self.reset_at = reset_at
        self.service = service

    @property
    def is_rate_limited(self) -> bool:
        return self.kind == ErrorKind.RATE_LIMITED

    def __repr__(self) -> str:
        return (
            f"ServiceError({str(self)!r}, kind={self.kind.value!r}, "
            f"reset_at={self.reset_at!r}, service={self.service!r})"
        )


def parse_reset_time(value: str | None, *, now: datetime | None = None) -> datetime | None:
    """Parse a rate-limit reset hint into an absolute UTC time.

    Accepts delta seconds (``Retry-After: 30``), epoch seconds or
    milliseconds (``X-RateLimit-Reset``), HTTP dates and ISO-8601 strings.
    Returns None when the value is missing or unparseable.
    """
    if not value:
        return None
    value = value.strip()
    now = now or datetime.now(tz=UTC)

    try:
        number = float(value)
    except ValueError:
        number = None

    if number is not None:
        if number >= _EPOCH_MS_THRESHOLD:
            return datetime.fromtimestamp(number / 1000, tz=UTC)
        # Small numbers are a delta, large ones an epoch timestamp
        if number < 10**9:
            return now + timedelta(seconds=number)
        return datetime.fromtimestamp(number, tz=UTC)

    try:
        parsed = datetime.fromisoformat(value.replace("Z", "+00:00"))
    except ValueError:
        try:
            parsed = parsedate_to_datetime(value)
        except (TypeError, ValueError):
            logger.debug("Unparseable reset hint: %s", value)
            return None

    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=UTC)
    return parsed


def reset_time_from_headers(
    headers: Mapping[str, str], *, now: datetime | None = None
) -> datetime | None:
    """Extract the reset time from standard rate-limit response headers."""
    for name in _RESET_HEADERS:
        reset_at = parse_reset_time(headers.get(name), now=now)
        if reset_at is not None:
            return reset_at
    return None


def error_from_http_status(
    status_code: int,
    headers: Mapping[str, str],
    *,
    service: str,
    message: str = "",
) -> ServiceError:
    """Build a ``ServiceError`` from an HTTP error response."""
    text = message or f"{service} request failed with status {status_code}"
    if status_code == 429:
        return ServiceError(
            text,
            kind=ErrorKind.RATE_LIMITED,
            reset_at=reset_time_from_headers(headers),
            service=service,
        )
    return ServiceError(text, service=service)


def json_body(response: httpx.Response, *, service: str) -> dict[str, Any]:
    """Decode a JSON object body, raising ``ServiceError`` for anything else."""
    try:
        data = response.json()
    except ValueError as e:
        raise ServiceError(f"{service} returned a non-JSON body: {e}", service=service) from e
    if not isinstance(data, dict):
        raise ServiceError(
            f"{service} returned {type(data).__name__}, expected a JSON object",
            service=service,
        )
    return data
