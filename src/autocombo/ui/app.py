"""Demo Textual application hosting one autocomplete field."""

import logging
from typing import Any

from textual.app import App, ComposeResult
from textual.containers import Vertical
from textual.widgets import Footer, Static

from autocombo.catalog import Catalog
from autocombo.config import Settings
from autocombo.ui.dropdown import AutocompleteDropdown

logger = logging.getLogger(__name__)


class AutocompleteApp(App):
    """Pick an entry from a catalog by typing part of its label."""

    CSS = """
    #main {
        padding: 1 2;
    }
    #selection {
        margin-top: 1;
        color: $accent;
    }
    """

    TITLE = "autocombo"
    BINDINGS = [("ctrl+q", "quit", "Quit")]

    def __init__(self, catalog: Catalog, settings: Settings | None = None, selected_item: Any = None):
        super().__init__()
        self.catalog = catalog
        self.settings = settings or Settings()
        self.selected_item = selected_item
        self.selection: tuple[Any, str] | None = None

    def compose(self) -> ComposeResult:
        with Vertical(id="main"):
            yield AutocompleteDropdown(
                self.catalog.fetch_suggestions,
                fetch_saved_info=self.catalog.fetch_saved_info,
                selected_item=self.selected_item,
                settings=self.settings,
            )
            yield Static("Nothing selected", id="selection")
        yield Footer()

    def on_mount(self) -> None:
        self.query_one(AutocompleteDropdown).query_one("Input").focus()

    def on_autocomplete_dropdown_selected(self, event: AutocompleteDropdown.Selected) -> None:
        label = self.query_one("#selection", Static)
        if event.value == "":
            self.selection = None
            label.update("Nothing selected")
            return
        self.selection = (event.value, event.suggestion.label)
        label.update(f"Selected: {event.suggestion.label} ({event.value})")

    def on_autocomplete_dropdown_announced(self, event: AutocompleteDropdown.Announced) -> None:
        logger.debug("announce (%s): %s", event.priority, event.message)
