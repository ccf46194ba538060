"""Shared helpers for CLI command handlers."""

import json
import logging
import sys

from autocombo.catalog import Catalog, CatalogError
from autocombo.config import ConfigError, Settings, load_settings


def configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        format="%(asctime)s %(levelname)s %(message)s",
        stream=sys.stderr,
        level=logging.DEBUG if verbose else logging.INFO,
    )


def settings_from_args(args) -> Settings:
    """Settings from --config, overridden by individual flags. Exit 1 on error."""
    try:
        settings = load_settings(args.config)
    except ConfigError as e:
        error(str(e), args.json)
    return settings.override(
        debounce_interval=args.debounce,
        min_query_length=args.min_length,
        latency=args.latency,
        max_results=args.max_results,
    )


def load_catalog_or_die(path: str, settings: Settings, json_mode: bool) -> Catalog:
    """Load a catalog file. Exit 1 with message if it is missing or malformed."""
    try:
        return Catalog.from_path(path, latency=settings.latency, max_results=settings.max_results)
    except CatalogError as e:
        error(str(e), json_mode)


def output_json(data: dict | list) -> None:
    """Write JSON to stdout."""
    print(json.dumps(data, indent=2))


def error(message: str, json_mode: bool) -> None:
    """Print error to stderr and exit 1."""
    if json_mode:
        print(json.dumps({"error": message}), file=sys.stderr)
    else:
        print(f"error: {message}", file=sys.stderr)
    sys.exit(1)
