"""In-memory suggestion source loaded from YAML.

Accepted file shapes::

    - {value: p1, label: London}
    - {value: p2, label: Long Beach}

or a plain mapping of value to label::

    p1: London
    p2: Long Beach
"""

from __future__ import annotations

import asyncio
from pathlib import Path
from typing import Any, Iterable

import yaml

from autocombo.model import Suggestion


class CatalogError(ValueError):
    """A catalog file is missing or malformed."""


def _parse_entries(document: Any) -> list[Suggestion]:
    if document is None:
        return []
    if isinstance(document, dict):
        return [Suggestion(value=k, label=str(v)) for k, v in document.items()]
    if isinstance(document, list):
        entries = []
        for i, item in enumerate(document):
            try:
                entries.append(Suggestion.coerce(item))
            except (TypeError, ValueError) as exc:
                raise CatalogError(f"entry {i + 1}: {exc}") from None
        return entries
    raise CatalogError("expected a list of {value, label} entries or a value: label mapping")


class Catalog:
    """A fixed list of suggestions served through async fetch calls.

    ``latency`` delays every fetch, which is handy for watching stale
    results get discarded in the TUI.
    """

    def __init__(self, suggestions: Iterable[Suggestion], *, latency: float = 0.0, max_results: int = 20) -> None:
        self.suggestions = list(suggestions)
        self.latency = latency
        self.max_results = max_results
        self._by_value = {s.value: s for s in self.suggestions}

    @classmethod
    def from_yaml(cls, text: str, **kwargs) -> Catalog:
        try:
            document = yaml.safe_load(text)
        except yaml.YAMLError as exc:
            raise CatalogError(f"invalid YAML ({exc})") from None
        return cls(_parse_entries(document), **kwargs)

    @classmethod
    def from_path(cls, path: str | Path, **kwargs) -> Catalog:
        path = Path(path)
        try:
            text = path.read_text()
        except OSError as exc:
            raise CatalogError(f"cannot read {path}: {exc.strerror}") from None
        try:
            return cls.from_yaml(text, **kwargs)
        except CatalogError as exc:
            raise CatalogError(f"{path}: {exc}") from None

    def match(self, query: str) -> list[Suggestion]:
        """Labels containing ``query`` (case-insensitive), prefix matches first."""
        needle = query.lower()
        prefix: list[Suggestion] = []
        inner: list[Suggestion] = []
        for s in self.suggestions:
            label = s.label.lower()
            if label.startswith(needle):
                prefix.append(s)
            elif needle in label:
                inner.append(s)
        return (prefix + inner)[: self.max_results]

    async def fetch_suggestions(self, query: str) -> list[Suggestion]:
        if self.latency:
            await asyncio.sleep(self.latency)
        return self.match(query)

    async def fetch_saved_info(self, value: Any) -> Suggestion:
        if self.latency:
            await asyncio.sleep(self.latency)
        try:
            return self._by_value[value]
        except KeyError:
            raise LookupError(f"no suggestion with value {value!r}") from None

    def __len__(self) -> int:
        return len(self.suggestions)
