"""Search-as-you-type suggestion sessions."""

from autocombo.config import Settings
from autocombo.guard import RequestGuard, RequestHandle
from autocombo.model import Phase, SessionState, Suggestion
from autocombo.navigator import KeyboardNavigator, KeyOutcome
from autocombo.scheduler import DebounceScheduler, Throttle
from autocombo.session import SuggestionSession

__all__ = [
    "DebounceScheduler",
    "KeyOutcome",
    "KeyboardNavigator",
    "Phase",
    "RequestGuard",
    "RequestHandle",
    "SessionState",
    "Settings",
    "Suggestion",
    "SuggestionSession",
    "Throttle",
]
