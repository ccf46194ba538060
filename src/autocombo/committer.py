"""Finalizing a choice and handing it to the consumer."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Callable

from autocombo.model import Phase, Suggestion

if TYPE_CHECKING:
    from autocombo.session import SuggestionSession


class SelectionCommitter:
    """Commits suggestions on behalf of a SuggestionSession.

    ``on_select(value, suggestion)`` is called exactly once per commit,
    before the session state is reset for further editing.
    """

    def __init__(self, session: SuggestionSession, on_select: Callable[[Any, Suggestion], None]) -> None:
        self.session = session
        self.on_select = on_select

    def commit(self, suggestion: Suggestion) -> None:
        session = self.session
        session.cancel_pending()
        self.on_select(suggestion.value, suggestion)
        state = session.state
        state.selected_index = None
        state.show_suggestions = False
        state.query = suggestion.label
        state.phase = Phase.COMMITTED

    def commit_index(self, index: int) -> Suggestion:
        suggestion = self.session.state.suggestions[index]
        self.commit(suggestion)
        return suggestion

    def commit_pointer(self, index: int) -> Suggestion:
        """Commit from a click, then give focus back to the text field."""
        suggestion = self.commit_index(index)
        self.session.focus_input()
        return suggestion

    def reset_selection(self) -> None:
        """Drop the committed selection and search again for its text.

        The consumer is told about the reset through an empty-valued commit,
        which clears whatever selection it had stored.
        """
        session = self.session
        prior_query = session.state.query
        self.commit(Suggestion(value="", label=prior_query))
        session.selected_item = None
        session.refresh(prior_query)
