"""Autocomplete input whose dropdown is fed by an async fetch."""

from __future__ import annotations

from typing import Any

from rich.text import Text
from textual.app import ComposeResult
from textual.containers import Container, Horizontal
from textual.events import Key
from textual.message import Message
from textual.widgets import Button, Input, LoadingIndicator, OptionList, Static
from textual.widgets.option_list import Option

from autocombo.config import Settings
from autocombo.model import SessionState, Suggestion
from autocombo.navigator import KeyboardNavigator
from autocombo.session import FetchSavedInfo, FetchSuggestions, SuggestionSession
from autocombo.ui.watcher import StateWatcherMixin

RENDERED_FIELDS = ("query", "suggestions", "show_suggestions", "selected_index", "loading", "phase")


def highlight_match(label: str, query: str) -> Text:
    """Return ``label`` with the first case-insensitive match of ``query`` in bold."""
    text = Text(label)
    if query:
        start = label.lower().find(query.lower())
        if start >= 0:
            text.stylize("bold", start, start + len(query))
    return text


class SuggestionList(OptionList):
    """The dropdown. Never takes focus; the Input keeps it."""

    can_focus = False


class AutocompleteDropdown(StateWatcherMixin, Container):
    """Text input with an async suggestion dropdown.

    All behaviour lives in ``self.session``; this widget renders its state
    and forwards input, keys and clicks to it.
    """

    class Selected(Message):
        """Posted once per commit. ``value`` is empty when a selection is reset."""

        def __init__(self, value: Any, suggestion: Suggestion) -> None:
            super().__init__()
            self.value = value
            self.suggestion = suggestion

    class Announced(Message):
        """Posted for status announcements (result counts, selection made)."""

        def __init__(self, message: str, priority: str) -> None:
            super().__init__()
            self.message = message
            self.priority = priority

    DEFAULT_CSS = """
    AutocompleteDropdown {
        height: auto;
    }
    AutocompleteDropdown > .field {
        height: auto;
    }
    AutocompleteDropdown Input {
        width: 1fr;
    }
    AutocompleteDropdown LoadingIndicator {
        width: 5;
        height: 3;
        display: none;
    }
    AutocompleteDropdown LoadingIndicator.-visible {
        display: block;
    }
    AutocompleteDropdown #change {
        display: none;
    }
    AutocompleteDropdown #change.-visible {
        display: block;
    }
    AutocompleteDropdown SuggestionList {
        max-height: 10;
        display: none;
    }
    AutocompleteDropdown SuggestionList.-visible {
        display: block;
    }
    AutocompleteDropdown .status {
        height: 1;
        color: $text-muted;
    }
    """

    def __init__(
        self,
        fetch_suggestions: FetchSuggestions,
        *,
        fetch_saved_info: FetchSavedInfo | None = None,
        selected_item: Any = None,
        settings: Settings | None = None,
        placeholder: str = "Type to search",
        **kwargs,
    ) -> None:
        self._init_watcher()
        super().__init__(**kwargs)
        self._placeholder = placeholder
        self._rendered: tuple[Suggestion, ...] = ()
        self._editing = False
        self.session = SuggestionSession(
            fetch_suggestions,
            on_select=self._on_session_select,
            announce=self._on_session_announce,
            scroll_into_view=self._on_session_scroll,
            focus_input=self._focus_input,
            fetch_saved_info=fetch_saved_info,
            selected_item=selected_item,
            settings=settings,
        )
        self.navigator = KeyboardNavigator(self.session)

    def compose(self) -> ComposeResult:
        with Horizontal(classes="field"):
            yield Input(placeholder=self._placeholder)
            yield LoadingIndicator()
            yield Button("Change", id="change")
        yield SuggestionList()
        yield Static("", classes="status")

    def on_mount(self) -> None:
        self.state_watch(self.session.state, RENDERED_FIELDS, self._on_state_changed)
        self.session.start()
        self._render_state()

    def on_unmount(self) -> None:
        self.session.close()

    # -- rendering ---------------------------------------------------------

    def _on_state_changed(self, state: SessionState, key: str, old: Any, new: Any) -> None:
        if key == "query":
            if self._editing:
                return
            inp = self.query_one(Input)
            if inp.value != new:
                inp.value = new
                inp.cursor_position = len(new)
            return
        self.call_later(self._render_state)

    def _render_state(self) -> None:
        if not self.is_attached:
            return
        s = self.session.state
        inp = self.query_one(Input)
        inp.disabled = not self.session.editable
        self.query_one(LoadingIndicator).set_class(s.loading, "-visible")
        self.query_one("#change", Button).set_class(self.session.selected_item is not None, "-visible")

        option_list = self.query_one(SuggestionList)
        if s.suggestions != self._rendered:
            option_list.clear_options()
            option_list.add_options([Option(highlight_match(x.label, s.query)) for x in s.suggestions])
            self._rendered = s.suggestions
        option_list.set_class(s.show_suggestions and bool(s.suggestions), "-visible")
        if option_list.highlighted != s.selected_index:
            option_list.highlighted = s.selected_index

    # -- session callbacks -------------------------------------------------

    def _on_session_select(self, value: Any, suggestion: Suggestion) -> None:
        self.post_message(self.Selected(value, suggestion))

    def _on_session_announce(self, message: str, priority: str) -> None:
        self.query_one(".status", Static).update(message)
        self.post_message(self.Announced(message, priority))

    def _on_session_scroll(self, index: int) -> None:
        self.call_later(self._scroll_to, index)

    def _scroll_to(self, index: int) -> None:
        option_list = self.query_one(SuggestionList)
        if index < option_list.option_count:
            option_list.highlighted = index
            option_list.scroll_to_highlight()

    def _focus_input(self) -> None:
        self.query_one(Input).focus()

    # -- events ------------------------------------------------------------

    def on_input_changed(self, event: Input.Changed) -> None:
        """Programmatic updates echo the session's own query; skip those."""
        if event.value == self.session.state.query:
            return
        self._editing = True
        try:
            self.session.edit(event.value)
        finally:
            self._editing = False

    def _on_key(self, event: Key) -> None:
        """Intercept keys before they reach the Input."""
        inp = self.query_one(Input)
        outcome = self.navigator.handle(event.key, inp.cursor_position, len(inp.value))
        if outcome.caret is not None:
            inp.cursor_position = outcome.caret
        if outcome.prevent_default:
            event.prevent_default()
        if outcome.stop:
            event.stop()

    def on_option_list_option_selected(self, event: OptionList.OptionSelected) -> None:
        """Handle mouse click on a dropdown item."""
        event.stop()
        self.session.commit_pointer(event.option_index)

    def on_button_pressed(self, event: Button.Pressed) -> None:
        if event.button.id != "change":
            return
        event.stop()
        self.session.reset_selection()
        self.call_after_refresh(self._focus_input)
