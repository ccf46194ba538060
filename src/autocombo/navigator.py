"""Keyboard handling for an autocomplete field.

Arrow keys move the highlight while the dropdown is usable. When it is
not, up/down jump the caret to the start/end of the text.
"""

from __future__ import annotations

from dataclasses import dataclass

from autocombo.messages import POLITE, SELECTION_MADE
from autocombo.session import SuggestionSession


@dataclass(frozen=True)
class KeyOutcome:
    """What the host widget should do with a key event.

    ``stop`` stops propagation, ``prevent_default`` suppresses the field's
    own handling, and ``caret`` (when set) is the new caret position.
    """

    stop: bool = False
    prevent_default: bool = False
    caret: int | None = None

    @property
    def handled(self) -> bool:
        return self.stop or self.prevent_default


PASS = KeyOutcome()
CONSUMED = KeyOutcome(stop=True, prevent_default=True)


class KeyboardNavigator:
    """Maps key names (``up``, ``down``, ``tab``, ``enter``) onto a session."""

    def __init__(self, session: SuggestionSession) -> None:
        self.session = session

    def handle(self, key: str, caret: int, text_length: int) -> KeyOutcome:
        if not self.session.can_navigate:
            return self._move_caret(key, caret, text_length)

        if key == "up":
            self.session.select_previous()
            return CONSUMED
        if key == "down":
            self.session.select_next()
            return CONSUMED
        if key == "tab":
            if self.session.commit_selected() is not None:
                self.session.announce(SELECTION_MADE, POLITE)
            # Tab still moves focus.
            return PASS
        if key == "enter":
            if self.session.commit_selected() is not None:
                return CONSUMED
            return PASS
        return PASS

    def _move_caret(self, key: str, caret: int, text_length: int) -> KeyOutcome:
        if key == "up" and caret != 0:
            return KeyOutcome(stop=True, prevent_default=True, caret=0)
        if key == "down" and caret != text_length:
            return KeyOutcome(stop=True, prevent_default=True, caret=text_length)
        return PASS
