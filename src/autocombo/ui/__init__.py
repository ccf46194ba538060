"""Textual UI for autocombo."""

from autocombo.ui.app import AutocompleteApp
from autocombo.ui.dropdown import AutocompleteDropdown, SuggestionList

__all__ = [
    "AutocompleteApp",
    "AutocompleteDropdown",
    "SuggestionList",
]
