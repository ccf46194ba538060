"""CLI argument parser and dispatch for autocombo."""

import argparse

from autocombo.cli.query import query
from autocombo.cli.tui import tui
from autocombo.cli.web import web


def build_parser() -> argparse.ArgumentParser:
    """Build the full CLI argument parser."""
    common = argparse.ArgumentParser(add_help=False)
    common.add_argument("--config", help="YAML settings file with an 'autocombo' section")
    common.add_argument("--debounce", type=float, help="Quiet period before fetching, in seconds (default: 0.2)")
    common.add_argument("--min-length", dest="min_length", type=int, help="Shortest query that fetches (default: 1)")
    common.add_argument("--latency", type=float, help="Simulated fetch latency in seconds (default: 0)")
    common.add_argument("--max-results", dest="max_results", type=int, help="Suggestions per fetch (default: 20)")
    common.add_argument("--json", action="store_true", help="Machine-readable JSON output")
    common.add_argument("-v", "--verbose", action="store_true", help="Debug logging")

    parser = argparse.ArgumentParser(
        prog="autocombo",
        description="Search-as-you-type picker over a YAML catalog",
        parents=[common],
    )

    nouns = parser.add_subparsers(dest="noun")

    # --- tui ---
    tui_p = nouns.add_parser("tui", help="Pick interactively (default)", parents=[common])
    tui_p.add_argument("catalog", help="YAML catalog of {value, label} entries")
    tui_p.add_argument("--selected", help="Value of an existing selection to start from")
    tui_p.set_defaults(func=tui)

    # --- query ---
    query_p = nouns.add_parser("query", help="Print suggestions for a query", parents=[common])
    query_p.add_argument("catalog", help="YAML catalog of {value, label} entries")
    query_p.add_argument("text", help="Query text")
    query_p.set_defaults(func=query)

    # --- web ---
    web_p = nouns.add_parser("web", help="Serve the picker in a browser", parents=[common])
    web_p.add_argument("catalog", help="YAML catalog of {value, label} entries")
    web_p.add_argument("--host", default="localhost", help="Bind address (default: localhost)")
    web_p.add_argument("--port", type=int, default=8617, help="Port (default: 8617)")
    web_p.set_defaults(func=web)

    return parser
