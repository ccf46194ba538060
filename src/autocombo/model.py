"""Suggestion and session state with change notification."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable

Callback = Callable[["SessionState", str, Any, Any], None]


@dataclass(frozen=True)
class Suggestion:
    """One entry of the dropdown.

    ``value`` is opaque to the session and handed back to the consumer on
    commit. ``label`` is what the user sees and what the query becomes.
    """

    value: Any
    label: str

    @classmethod
    def coerce(cls, item: Any) -> Suggestion:
        """Accept a Suggestion or a mapping with ``value`` and ``label`` keys."""
        if isinstance(item, Suggestion):
            return item
        if isinstance(item, Mapping):
            try:
                return cls(value=item["value"], label=str(item["label"]))
            except KeyError as exc:
                raise ValueError(f"suggestion is missing {exc.args[0]!r}: {item!r}") from None
        raise TypeError(f"cannot build a suggestion from {type(item).__name__}")


class Phase(str, Enum):
    EMPTY = "empty"
    LOADING = "loading"
    SHOWING = "showing"
    NO_RESULTS = "no_results"
    COMMITTED = "committed"


_FIELDS = ("query", "suggestions", "show_suggestions", "selected_index", "loading", "phase")


class SessionState:
    """The live state of one suggestion session.

    Fields are plain attributes. Assigning a different value fires the
    watchers registered for that key. Assigning ``suggestions`` always
    resets ``selected_index`` and the list is stored as a tuple, so a new
    fetch replaces it wholesale.
    """

    def __init__(self, query: str = "") -> None:
        object.__setattr__(self, "_watchers", {})
        object.__setattr__(self, "_values", {})
        self._values.update(
            query=query,
            suggestions=(),
            show_suggestions=False,
            selected_index=None,
            loading=False,
            phase=Phase.EMPTY,
        )

    def __getattr__(self, name: str) -> Any:
        if name.startswith("_"):
            raise AttributeError(name)
        try:
            return self._values[name]
        except KeyError:
            raise AttributeError(name) from None

    def __setattr__(self, name: str, value: Any) -> None:
        if name not in _FIELDS:
            raise AttributeError(f"SessionState has no field {name!r}")
        if name == "suggestions":
            value = tuple(value)
            self.selected_index = None
        elif name == "selected_index" and value is not None:
            if not 0 <= value < len(self._values["suggestions"]):
                raise IndexError(f"selected_index {value} out of range")
        old = self._values[name]
        self._values[name] = value
        if old != value:
            for cb in list(self._watchers.get(name, ())):
                cb(self, name, old, value)

    def watch(self, key: str, callback: Callback) -> Callable[[], None]:
        """Watch a field for changes. Returns an unwatch callable."""
        if key not in _FIELDS:
            raise KeyError(key)
        self._watchers.setdefault(key, []).append(callback)
        return lambda: callback in self._watchers.get(key, []) and self._watchers[key].remove(callback)

    @property
    def selected(self) -> Suggestion | None:
        """The highlighted suggestion, if any."""
        index = self._values["selected_index"]
        if index is None:
            return None
        return self._values["suggestions"][index]

    @property
    def last_index(self) -> int:
        return len(self._values["suggestions"]) - 1

    def __repr__(self) -> str:
        v = self._values
        return (
            f"<SessionState {v['phase'].value} query={v['query']!r} "
            f"suggestions={len(v['suggestions'])} selected={v['selected_index']}>"
        )
