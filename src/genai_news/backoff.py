"""Retry-with-backoff executor for rate-limited service calls."""

import asyncio
import logging
import math
from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from datetime import UTC, datetime
from typing import TypeVar

from tenacity import AsyncRetrying, RetryCallState, retry_if_exception, stop_after_attempt

from genai_news.errors import ServiceError

logger = logging.getLogger(__name__)

T = TypeVar("T")

Sleep = Callable[[float], Awaitable[object]]
Clock = Callable[[], datetime]


def utc_now() -> datetime:
    return datetime.now(tz=UTC)


def is_rate_limited(error: BaseException) -> bool:
    """Whether an error should be retried with backoff."""
    return isinstance(error, ServiceError) and error.is_rate_limited


def compute_wait(
    error: BaseException | None,
    attempt_index: int,
    base_delay: float,
    now: datetime,
) -> float:
    """Compute how long to wait before the next attempt.

    The exponential delay ``base_delay * 2**attempt_index`` is a floor: a
    server-supplied reset time only extends the wait, never shortens it.

    Args:
        error: The error raised by the failed attempt.
        attempt_index: Zero-based index of the failed attempt.
        base_delay: Base delay in seconds.
        now: Current time, compared against the error's reset time.

    Returns:
        Wait in seconds.
    """
    exponential = base_delay * 2**attempt_index
    if isinstance(error, ServiceError) and error.reset_at is not None:
        until_reset = (error.reset_at - now).total_seconds()
        return max(until_reset, exponential)
    return exponential


@dataclass
class RetryStats:
    """Backoff activity observed while running one operation."""

    retries: int = 0
    waited_seconds: float = 0.0

    def record(self, wait: float) -> None:
        self.retries += 1
        self.waited_seconds += wait


async def retry_with_backoff(
    operation: Callable[[], Awaitable[T]],
    *,
    max_retries: int = 3,
    base_delay: float = 1.0,
    sleep: Sleep = asyncio.sleep,
    clock: Clock = utc_now,
    on_wait: Callable[[float], None] | None = None,
) -> T:
    """Run ``operation``, retrying rate-limited failures with backoff.

    Only ``ServiceError`` instances classified as rate limited are retried.
    Any other error propagates on first occurrence. When every attempt is
    rate limited, the last error propagates unchanged.

    Args:
        operation: Zero-argument coroutine factory to execute.
        max_retries: Total number of attempts, including the first.
        base_delay: Base delay in seconds for exponential backoff.
        sleep: Awaitable sleep function (injectable for tests).
        clock: Returns the current UTC time (injectable for tests).
        on_wait: Called with the wait in seconds before each retry.

    Returns:
        The operation's result.
    """
    if max_retries < 1:
        raise ValueError(f"max_retries must be at least 1, got {max_retries}")

    def wait(retry_state: RetryCallState) -> float:
        error = retry_state.outcome.exception() if retry_state.outcome else None
        return compute_wait(error, retry_state.attempt_number - 1, base_delay, clock())

    def before_sleep(retry_state: RetryCallState) -> None:
        seconds = retry_state.next_action.sleep if retry_state.next_action else 0.0
        logger.info("Rate limited. Waiting %d seconds...", math.ceil(seconds))
        if on_wait is not None:
            on_wait(seconds)

    retrying = AsyncRetrying(
        sleep=sleep,
        stop=stop_after_attempt(max_retries),
        wait=wait,
        retry=retry_if_exception(is_rate_limited),
        before_sleep=before_sleep,
        reraise=True,
    )
    return await retrying(operation)


class BackoffExecutor:
    """Bound retry settings applied to every external call of a pipeline.

    Args:
        max_retries: Total attempts per call.
        base_delay: Base delay in seconds.
        sleep: Awaitable sleep function.
        clock: Current-time source.
    """

    def __init__(
        self,
        max_retries: int = 3,
        base_delay: float = 1.0,
        *,
        sleep: Sleep = asyncio.sleep,
        clock: Clock = utc_now,
    ) -> None:
        self.max_retries = max_retries
        self.base_delay = base_delay
        self._sleep = sleep
        self._clock = clock

    async def run(
        self,
        operation: Callable[[], Awaitable[T]],
        *,
        stats: RetryStats | None = None,
    ) -> T:
        """Run ``operation`` with backoff, recording waits into ``stats``."""
        return await retry_with_backoff(
            operation,
            max_retries=self.max_retries,
            base_delay=self.base_delay,
            sleep=self._sleep,
            clock=self._clock,
            on_wait=stats.record if stats is not None else None,
        )
