"""Suggestion session: the state machine behind an autocomplete field.

The session knows nothing about rendering. Events come in as method calls
(``edit``, ``select_next``, ``commit``...) and everything the outside world
has to do is requested through the callables handed to the constructor.

Phases::

    EMPTY --edit--> LOADING --results--> SHOWING | NO_RESULTS
    SHOWING --commit--> COMMITTED --edit--> LOADING
    any --edit("")--> EMPTY
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import Any, Awaitable, Callable

from autocombo.committer import SelectionCommitter
from autocombo.config import Settings
from autocombo.guard import RequestGuard, RequestHandle
from autocombo.messages import ASSERTIVE, results_found
from autocombo.model import Phase, SessionState, Suggestion
from autocombo.scheduler import DebounceScheduler, Throttle

logger = logging.getLogger(__name__)

FetchSuggestions = Callable[[str], Awaitable[Sequence[Any]]]
FetchSavedInfo = Callable[[Any], Awaitable[Any]]


def _noop(*args: Any) -> None:
    pass


class SuggestionSession:
    """Owns one SessionState and drives it from user and fetch events."""

    def __init__(
        self,
        fetch_suggestions: FetchSuggestions,
        *,
        on_select: Callable[[Any, Suggestion], None] | None = None,
        announce: Callable[[str, str], None] | None = None,
        scroll_into_view: Callable[[int], None] | None = None,
        focus_input: Callable[[], None] | None = None,
        fetch_saved_info: FetchSavedInfo | None = None,
        selected_item: Any = None,
        settings: Settings | None = None,
    ) -> None:
        self.settings = settings or Settings()
        self.state = SessionState()
        self.announce = announce or _noop
        self.scroll_into_view = scroll_into_view or _noop
        self.focus_input = focus_input or _noop
        self.selected_item = selected_item
        self.closed = False

        self._fetch_saved_info = fetch_saved_info
        self._debouncer = DebounceScheduler(self.refresh, self.settings.debounce_interval)
        self._scroll = Throttle(self._scroll_to, self.settings.scroll_throttle)
        self._guard = RequestGuard(fetch_suggestions, self._apply_results, self._apply_failure)
        self._saved_guard: RequestGuard | None = None
        if fetch_saved_info is not None:
            self._saved_guard = RequestGuard(fetch_saved_info, self._apply_saved_info, self._saved_info_failed)
        self.committer = SelectionCommitter(self, on_select or _noop)
        self.state.watch("selected_index", self._on_selected_index)

    # -- properties --------------------------------------------------------

    @property
    def editable(self) -> bool:
        """False while a previously committed item is pinned."""
        return self.selected_item is None and not self.closed

    @property
    def can_navigate(self) -> bool:
        """True when arrow keys should move through the suggestions."""
        s = self.state
        return s.show_suggestions and bool(s.suggestions) and not s.loading

    @property
    def min_query_length(self) -> int:
        return max(1, self.settings.min_query_length)

    # -- lifecycle ---------------------------------------------------------

    def start(self) -> None:
        """Resolve the label of a pre-selected item, if there is one."""
        if self.selected_item is None:
            return
        if self._saved_guard is None:
            logger.debug("selected item given without fetch_saved_info, label left blank")
            return
        self.state.loading = True
        self.state.phase = Phase.LOADING
        self._saved_guard.issue(self.selected_item)

    def close(self) -> None:
        """Tear down: no timer or fetch completion touches state after this."""
        self.closed = True
        self._debouncer.cancel()
        self._scroll.cancel()
        self._guard.clear()
        if self._saved_guard is not None:
            self._saved_guard.clear()

    # -- input events ------------------------------------------------------

    def edit(self, query: str) -> None:
        """The user changed the text."""
        if not self.editable:
            logger.debug("ignoring edit %r on a pinned or closed session", query)
            return
        self.state.query = query
        if len(query) < self.min_query_length:
            self._to_empty()
            return
        self.state.loading = True
        self.state.phase = Phase.LOADING
        self._debouncer.schedule(query)

    def refresh(self, query: str | None = None) -> None:
        """Fetch suggestions for ``query`` (default: the current text) now."""
        if self.closed:
            return
        if query is None:
            query = self.state.query
        if len(query) < self.min_query_length:
            self._to_empty()
            return
        s = self.state
        s.show_suggestions = True
        s.selected_index = None
        s.loading = True
        s.phase = Phase.LOADING
        self._guard.issue(query)

    def cancel_pending(self) -> None:
        """Drop the queued debounce and make in-flight fetches inert."""
        self._debouncer.cancel()
        self._guard.clear()
        if self._saved_guard is not None:
            self._saved_guard.clear()
        self.state.loading = False

    def _to_empty(self) -> None:
        self.cancel_pending()
        s = self.state
        s.show_suggestions = False
        s.selected_index = None
        s.phase = Phase.EMPTY

    # -- navigation --------------------------------------------------------

    def select_previous(self) -> int | None:
        """Move the highlight up, wrapping from the top (or nothing) to the end."""
        if not self.can_navigate:
            return None
        index = self.state.selected_index
        self.state.selected_index = self.state.last_index if not index else index - 1
        return self.state.selected_index

    def select_next(self) -> int | None:
        """Move the highlight down, wrapping from the end to the top."""
        if not self.can_navigate:
            return None
        index = self.state.selected_index
        if index is None or index == self.state.last_index:
            self.state.selected_index = 0
        else:
            self.state.selected_index = index + 1
        return self.state.selected_index

    def select(self, index: int | None) -> None:
        """Highlight ``index`` directly, or clear the highlight with None."""
        self.state.selected_index = index

    # -- commit (delegates) ------------------------------------------------

    def commit(self, suggestion: Suggestion) -> None:
        self.committer.commit(suggestion)

    def commit_selected(self) -> Suggestion | None:
        """Commit the highlighted suggestion; returns it, or None if none."""
        suggestion = self.state.selected
        if suggestion is not None:
            self.committer.commit(suggestion)
        return suggestion

    def commit_pointer(self, index: int) -> None:
        self.committer.commit_pointer(index)

    def reset_selection(self) -> None:
        self.committer.reset_selection()

    # -- fetch completions -------------------------------------------------

    def _apply_results(self, handle: RequestHandle, results: Any) -> None:
        try:
            suggestions = tuple(Suggestion.coerce(item) for item in results)
        except (TypeError, ValueError) as exc:
            logger.warning("malformed suggestions for %r: %s", handle.argument, exc)
            self._apply_failure(handle, exc)
            return
        s = self.state
        s.suggestions = suggestions
        s.loading = False
        s.phase = Phase.SHOWING if suggestions else Phase.NO_RESULTS
        self.announce(results_found(len(suggestions)), ASSERTIVE)

    def _apply_failure(self, handle: RequestHandle, exc: BaseException) -> None:
        s = self.state
        s.loading = False
        s.phase = Phase.SHOWING if s.suggestions else Phase.NO_RESULTS

    def _apply_saved_info(self, handle: RequestHandle, item: Any) -> None:
        try:
            suggestion = Suggestion.coerce(item)
        except (TypeError, ValueError) as exc:
            self._saved_info_failed(handle, exc)
            return
        s = self.state
        s.loading = False
        s.query = suggestion.label
        s.phase = Phase.COMMITTED

    def _saved_info_failed(self, handle: RequestHandle, exc: BaseException) -> None:
        logger.warning("could not resolve selected item %r: %s", handle.argument, exc)
        self.state.loading = False
        self.state.phase = Phase.COMMITTED

    # -- scroll follow -----------------------------------------------------

    def _on_selected_index(self, state: SessionState, key: str, old: Any, new: Any) -> None:
        if new is not None and state.show_suggestions and not self.closed:
            self._scroll(new)

    def _scroll_to(self, index: int) -> None:
        self.scroll_into_view(index)
