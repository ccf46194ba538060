"""Shared fixtures for CLI tests."""

from argparse import Namespace

import pytest

CITIES_YAML = """\
- {value: p1, label: London}
- {value: p2, label: Long Beach}
- {value: p3, label: Paris}
- {value: p4, label: Barcelona}
"""


@pytest.fixture
def catalog_file(tmp_path):
    """A small YAML catalog on disk."""
    path = tmp_path / "cities.yaml"
    path.write_text(CITIES_YAML)
    return path


def make_args(**overrides) -> Namespace:
    """Namespace with every common flag unset."""
    values = dict(
        config=None,
        debounce=0.0,
        min_length=None,
        latency=None,
        max_results=None,
        json=False,
        verbose=False,
    )
    values.update(overrides)
    return Namespace(**values)
