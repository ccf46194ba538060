"""Last-issued-wins wrapper around an async fetch.

Responses can arrive out of order. Each ``issue()`` bumps a generation
counter and only the completion carrying the current generation is applied.
There is no network cancellation: superseded fetches run to completion and
their results are dropped.
"""

from __future__ import annotations

import asyncio
import inspect
import logging
from dataclasses import dataclass
from typing import Any, Awaitable, Callable

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RequestHandle:
    token: int
    argument: Any


class RequestGuard:
    """Issue fetches and apply only the result of the most recent one.

    ``on_success(handle, result)`` and ``on_failure(handle, exc)`` run only
    for the current handle. ``clear()`` makes every outstanding completion
    inert, which is what teardown relies on.
    """

    def __init__(
        self,
        fetch: Callable[[Any], Awaitable[Any]],
        on_success: Callable[[RequestHandle, Any], None],
        on_failure: Callable[[RequestHandle, BaseException], None],
    ) -> None:
        self._fetch = fetch
        self._on_success = on_success
        self._on_failure = on_failure
        self._generation = 0
        self._current: RequestHandle | None = None
        self._settled: RequestHandle | None = None
        self._tasks: set[asyncio.Task] = set()

    @property
    def current(self) -> RequestHandle | None:
        return self._current

    @property
    def pending(self) -> bool:
        """True while the current fetch has not completed."""
        return self._current is not None and self._current != self._settled

    def is_current(self, handle: RequestHandle) -> bool:
        return self._current is not None and handle == self._current

    def issue(self, argument: Any) -> RequestHandle:
        """Start a fetch for ``argument`` and make it the authoritative one."""
        self._generation += 1
        handle = RequestHandle(self._generation, argument)
        self._current = handle
        try:
            awaitable = self._fetch(argument)
        except Exception as exc:
            self._fail(handle, exc)
            return handle
        if not inspect.isawaitable(awaitable):
            awaitable = _resolved(awaitable)
        task = asyncio.ensure_future(self._complete(handle, awaitable))
        self._tasks.add(task)
        task.add_done_callback(self._tasks.discard)
        return handle

    def clear(self) -> None:
        """Forget the current handle; any late completion becomes a no-op."""
        self._current = None

    async def _complete(self, handle: RequestHandle, awaitable: Awaitable[Any]) -> None:
        try:
            result = await awaitable
        except asyncio.CancelledError:
            raise
        except Exception as exc:
            if not self.is_current(handle):
                logger.debug("ignoring failure of superseded fetch %d: %s", handle.token, exc)
                return
            self._fail(handle, exc)
            return
        if not self.is_current(handle):
            logger.debug("discarding stale result of fetch %d for %r", handle.token, handle.argument)
            return
        self._settled = handle
        self._on_success(handle, result)

    def _fail(self, handle: RequestHandle, exc: Exception) -> None:
        logger.warning("fetch for %r failed: %s", handle.argument, exc)
        self._settled = handle
        self._on_failure(handle, exc)


async def _resolved(value: Any) -> Any:
    return value
