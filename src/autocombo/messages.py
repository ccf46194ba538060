"""Status announcements for screen readers and status lines."""

ASSERTIVE = "assertive"
POLITE = "polite"

NO_RESULTS = "No results."
SELECTION_MADE = "Selection made."


def results_found(count: int) -> str:
    """Announcement after a fetch settles with ``count`` suggestions."""
    if not count:
        return NO_RESULTS
    noun = "result" if count == 1 else "results"
    return f"{count} {noun} found, use up and down arrow keys to navigate."
