"""Mixin that manages SessionState watches with auto-cleanup."""

from __future__ import annotations

from typing import Callable

from autocombo.model import Callback, SessionState


class StateWatcherMixin:
    """Mixin for widgets that render a SessionState.

    Subclasses should:
    - Call ``_init_watcher()`` in ``__init__``
    - Use ``self.state_watch(state, keys, callback)`` instead of ``state.watch(...)``
    - Skip unwatching in ``on_unmount`` -- the mixin handles cleanup
    """

    def _init_watcher(self) -> None:
        self._unwatchers: list[Callable[[], object]] = []

    def state_watch(self, state: SessionState, keys: tuple[str, ...], callback: Callback) -> None:
        """Register one callback for several fields, dropped on unmount."""
        for key in keys:
            self._unwatchers.append(state.watch(key, callback))

    def _drop_watches(self) -> None:
        for unwatch in self._unwatchers:
            unwatch()
        self._unwatchers.clear()

    def on_unmount(self) -> None:
        self._drop_watches()
