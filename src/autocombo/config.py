"""Settings for sessions and the demo catalog, optionally read from YAML.

A settings file holds an ``autocombo`` mapping with hyphenated keys::

    autocombo:
      debounce-interval: 0.3
      min-query-length: 2
"""

from __future__ import annotations

from dataclasses import dataclass, fields, replace
from pathlib import Path
from typing import Any

import yaml

SECTION = "autocombo"


class ConfigError(ValueError):
    """A settings file could not be read or holds a bad value."""


@dataclass(frozen=True)
class Settings:
    debounce_interval: float = 0.2
    min_query_length: int = 1
    scroll_throttle: float = 0.1
    latency: float = 0.0
    max_results: int = 20

    def override(self, **values: Any) -> Settings:
        """Return a copy with every non-None value applied."""
        changes = {k: v for k, v in values.items() if v is not None}
        return replace(self, **changes) if changes else self


def _python_key(key: str) -> str:
    """Convert a hyphenated settings key to a field name."""
    return key.replace("-", "_")


def _coerce(name: str, raw: Any, default: Any) -> Any:
    """Coerce a raw YAML value to the type of the field default."""
    try:
        if isinstance(default, int):
            value = int(raw)
        else:
            value = float(raw)
    except (TypeError, ValueError):
        raise ConfigError(f"{name}: expected a number, got {raw!r}") from None
    if value < 0:
        raise ConfigError(f"{name}: must not be negative")
    return value


def settings_from_mapping(data: dict[str, Any] | None, base: Settings | None = None) -> Settings:
    """Build Settings from a ``{hyphenated-key: value}`` mapping.

    Unknown keys are ignored.
    """
    base = base or Settings()
    if not data:
        return base
    if not isinstance(data, dict):
        raise ConfigError(f"'{SECTION}' must be a mapping")
    defaults = {f.name: getattr(base, f.name) for f in fields(Settings)}
    values: dict[str, Any] = {}
    for key, raw in data.items():
        name = _python_key(str(key))
        if name in defaults:
            values[name] = _coerce(str(key), raw, defaults[name])
    return replace(base, **values)


def load_settings(path: str | Path | None) -> Settings:
    """Read Settings from a YAML file; a missing path yields the defaults."""
    if path is None:
        return Settings()
    path = Path(path)
    try:
        text = path.read_text()
    except OSError as exc:
        raise ConfigError(f"cannot read {path}: {exc.strerror}") from None
    try:
        document = yaml.safe_load(text) or {}
    except yaml.YAMLError as exc:
        raise ConfigError(f"{path}: invalid YAML ({exc})") from None
    if not isinstance(document, dict):
        raise ConfigError(f"{path}: expected a mapping at top level")
    return settings_from_mapping(document.get(SECTION))
