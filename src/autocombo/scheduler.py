"""Coalescing timers: trailing-edge debounce and leading-edge throttle.

Both run on the current asyncio loop and can be cancelled, so nothing
fires once the owner has been torn down.
"""

from __future__ import annotations

import asyncio
from typing import Any, Callable


class DebounceScheduler:
    """Run ``callback`` once, ``delay`` seconds after the last ``schedule()``.

    Each call replaces the pending one, so a burst of calls produces a
    single callback carrying the arguments of the final call.
    """

    def __init__(self, callback: Callable[..., Any], delay: float = 0.2) -> None:
        self._callback = callback
        self.delay = delay
        self._handle: asyncio.TimerHandle | None = None

    @property
    def pending(self) -> bool:
        return self._handle is not None

    def schedule(self, *args: Any) -> None:
        self.cancel()
        loop = asyncio.get_running_loop()
        self._handle = loop.call_later(self.delay, self._fire, args)

    def cancel(self) -> None:
        if self._handle is not None:
            self._handle.cancel()
            self._handle = None

    def _fire(self, args: tuple[Any, ...]) -> None:
        self._handle = None
        self._callback(*args)


class Throttle:
    """Run ``callback`` at most once per ``interval`` seconds.

    The first call runs immediately. Calls arriving while blocked are
    dropped, not deferred.
    """

    def __init__(self, callback: Callable[..., Any], interval: float = 0.1) -> None:
        self._callback = callback
        self.interval = interval
        self._handle: asyncio.TimerHandle | None = None

    @property
    def blocked(self) -> bool:
        return self._handle is not None

    def __call__(self, *args: Any) -> bool:
        """Returns True if the callback ran."""
        if self._handle is not None:
            return False
        loop = asyncio.get_running_loop()
        self._handle = loop.call_later(self.interval, self._release)
        self._callback(*args)
        return True

    def cancel(self) -> None:
        if self._handle is not None:
            self._handle.cancel()
            self._handle = None

    def _release(self) -> None:
        self._handle = None
