"""Handler for 'autocombo query': one headless session cycle."""

import asyncio

from autocombo.catalog import Catalog
from autocombo.cli._common import configure_logging, load_catalog_or_die, output_json, settings_from_args
from autocombo.config import Settings
from autocombo.model import SessionState
from autocombo.session import SuggestionSession


async def run_query(catalog: Catalog, text: str, settings: Settings | None = None) -> tuple[SessionState, list[str]]:
    """Type ``text`` into a fresh session and wait for its fetch to settle.

    Returns the final state and every announcement made along the way.
    """
    announcements: list[str] = []
    settled = asyncio.Event()
    session = SuggestionSession(
        catalog.fetch_suggestions,
        announce=lambda message, priority: announcements.append(message),
        settings=settings,
    )

    def _on_loading(state, key, old, new) -> None:
        if not new:
            settled.set()

    session.state.watch("loading", _on_loading)
    session.edit(text)
    if session.state.loading:
        await settled.wait()
    session.close()
    return session.state, announcements


def query(args) -> int:
    configure_logging(args.verbose)
    settings = settings_from_args(args)
    catalog = load_catalog_or_die(args.catalog, settings, args.json)

    state, announcements = asyncio.run(run_query(catalog, args.text, settings))

    if args.json:
        output_json(
            {
                "query": state.query,
                "phase": state.phase.value,
                "suggestions": [{"value": s.value, "label": s.label} for s in state.suggestions],
                "announcement": announcements[-1] if announcements else None,
            }
        )
        return 0

    for s in state.suggestions:
        print(f"{s.value}  {s.label}")
    if announcements:
        print(announcements[-1])
    return 0
