"""Decides when the feed refreshes, based on authentication state."""

import asyncio
import logging
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, Protocol

from genai_news.feed import NewsFeed

logger = logging.getLogger(__name__)

Unsubscribe = Callable[[], None]


@dataclass(frozen=True)
class AuthState:
    """Snapshot emitted by an auth provider."""

    user: Any = None
    is_loading: bool = False

    @property
    def is_ready(self) -> bool:
        """Authenticated and no longer loading."""
        return self.user is not None and not self.is_loading


class AuthStateProvider(Protocol):
    """Interface for auth providers that push state changes."""

    def subscribe(self, callback: Callable[[AuthState], None]) -> Unsubscribe:
        """Register ``callback`` for state changes.

        Returns:
            A callable that removes the subscription.
        """
        ...


class StaticAuthProvider:
    """Auth provider with a fixed user, emitting one ready state on subscribe.

    Args:
        user: The signed-in user, or None for an anonymous session.
    """

    def __init__(self, user: Any = None) -> None:
        self._user = user
        self._subscribers: list[Callable[[AuthState], None]] = []

    @property
    def subscriber_count(self) -> int:
        return len(self._subscribers)

    def subscribe(self, callback: Callable[[AuthState], None]) -> Unsubscribe:
        self._subscribers.append(callback)
        callback(AuthState(user=self._user, is_loading=False))

        def unsubscribe() -> None:
            if callback in self._subscribers:
                self._subscribers.remove(callback)

        return unsubscribe

    def emit(self, state: AuthState) -> None:
        """Push a new state to every subscriber."""
        self._user = state.user
        for callback in list(self._subscribers):
            callback(state)


class AuthGatedTrigger:
    """Refresh a feed whenever an authenticated, settled state is observed.

    Must be started from within a running event loop, since refreshes are
    scheduled as tasks on it.

    Args:
        feed: Feed to refresh.
        provider: Source of auth state changes.
    """

    def __init__(self, feed: NewsFeed, provider: AuthStateProvider) -> None:
        self._feed = feed
        self._provider = provider
        self._unsubscribe: Unsubscribe | None = None
        self._tasks: set[asyncio.Task[Any]] = set()

    def start(self) -> None:
        """Subscribe to the provider. Calling twice has no effect."""
        if self._unsubscribe is not None:
            return
        self._unsubscribe = self._provider.subscribe(self._on_state)

    def _on_state(self, state: AuthState) -> None:
        self._feed.user = state.user
        if not state.is_ready:
            return
        logger.info("Authenticated; scheduling news refresh")
        task = asyncio.get_running_loop().create_task(self._feed.refresh())
        self._tasks.add(task)
        task.add_done_callback(self._tasks.discard)

    async def wait(self) -> None:
        """Wait for every refresh scheduled so far to finish."""
        while self._tasks:
            await asyncio.gather(*list(self._tasks))

    def close(self) -> None:
        """Remove the provider subscription. Safe to call more than once."""
        if self._unsubscribe is not None:
            self._unsubscribe()
            self._unsubscribe = None
