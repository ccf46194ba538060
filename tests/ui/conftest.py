"""Fixtures for UI tests."""

import pytest
from textual.app import App, ComposeResult
from textual.widgets import Input

from autocombo.catalog import Catalog
from autocombo.config import Settings
from autocombo.ui.dropdown import AutocompleteDropdown

CITIES_YAML = """\
- {value: p1, label: London}
- {value: p2, label: Long Beach}
- {value: p3, label: Paris}
- {value: p4, label: Barcelona}
"""

# Long enough for a zero-debounce fetch and the follow-up render to land.
SETTLE = 0.1


class DropdownApp(App):
    """Minimal app hosting one AutocompleteDropdown."""

    def __init__(self, catalog=None, **kwargs):
        super().__init__()
        self.catalog = catalog or Catalog.from_yaml(CITIES_YAML)
        self._kwargs = kwargs
        self.selected = []
        self.announced = []

    def compose(self) -> ComposeResult:
        yield AutocompleteDropdown(
            self.catalog.fetch_suggestions,
            fetch_saved_info=self.catalog.fetch_saved_info,
            settings=Settings(debounce_interval=0),
            **self._kwargs,
        )
        yield Input(id="other")

    def on_autocomplete_dropdown_selected(self, event: AutocompleteDropdown.Selected) -> None:
        self.selected.append((event.value, event.suggestion.label))

    def on_autocomplete_dropdown_announced(self, event: AutocompleteDropdown.Announced) -> None:
        self.announced.append(event.message)


@pytest.fixture
def app():
    return DropdownApp()
