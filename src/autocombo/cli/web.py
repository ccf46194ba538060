"""Handlers for 'autocombo web' command."""

import shlex
import shutil
import sys
from pathlib import Path

from textual_serve.server import Server


def tui_command(executable: str, args) -> str:
    """Build the command line textual-serve runs for each browser session."""
    parts = [executable, "tui", str(Path(args.catalog).resolve())]
    if args.config:
        parts += ["--config", str(Path(args.config).resolve())]
    for flag, value in (
        ("--debounce", args.debounce),
        ("--min-length", args.min_length),
        ("--latency", args.latency),
        ("--max-results", args.max_results),
    ):
        if value is not None:
            parts += [flag, str(value)]
    return shlex.join(parts)


def web(args) -> int:
    if not Path(args.catalog).is_file():
        print(f"error: {args.catalog} not found", file=sys.stderr)
        return 1

    autocombo = shutil.which("autocombo")
    if autocombo is None:
        print("error: autocombo not found on PATH", file=sys.stderr)
        return 1

    server = Server(
        tui_command(autocombo, args),
        host=args.host,
        port=args.port,
        title="autocombo",
    )

    print(f"serving {args.catalog} at http://{args.host}:{args.port}")
    server.serve()
    return 0
