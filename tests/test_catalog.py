"""Tests for the YAML-backed Catalog."""

import pytest

from autocombo.catalog import Catalog, CatalogError
from autocombo.model import Suggestion

CITIES_YAML = """\
- {value: p1, label: London}
- {value: p2, label: Long Beach}
- {value: p3, label: Paris}
- {value: p4, label: Barcelona}
"""


@pytest.fixture
def catalog():
    return Catalog.from_yaml(CITIES_YAML)


def test_list_form(catalog):
    assert len(catalog) == 4
    assert catalog.suggestions[0] == Suggestion("p1", "London")


def test_mapping_form():
    catalog = Catalog.from_yaml("p1: London\np2: Paris\n")
    assert catalog.suggestions == [Suggestion("p1", "London"), Suggestion("p2", "Paris")]


def test_empty_document():
    assert len(Catalog.from_yaml("")) == 0


def test_bad_entry():
    with pytest.raises(CatalogError, match="entry 2"):
        Catalog.from_yaml("- {value: p1, label: London}\n- {value: p2}\n")


def test_bad_shape():
    with pytest.raises(CatalogError):
        Catalog.from_yaml("just a string")


def test_invalid_yaml():
    with pytest.raises(CatalogError, match="invalid YAML"):
        Catalog.from_yaml("- [unclosed")


def test_from_path_missing(tmp_path):
    with pytest.raises(CatalogError, match="cannot read"):
        Catalog.from_path(tmp_path / "nope.yaml")


def test_from_path(tmp_path):
    path = tmp_path / "cities.yaml"
    path.write_text(CITIES_YAML)
    assert len(Catalog.from_path(path, max_results=2)) == 4


def test_match_is_case_insensitive_prefix_first(catalog):
    labels = [s.label for s in catalog.match("LON")]
    assert labels == ["London", "Long Beach", "Barcelona"]


def test_match_respects_max_results():
    catalog = Catalog.from_yaml(CITIES_YAML, max_results=1)
    assert [s.label for s in catalog.match("lon")] == ["London"]


def test_match_nothing(catalog):
    assert catalog.match("zzz") == []


@pytest.mark.asyncio
async def test_fetch_suggestions(catalog):
    results = await catalog.fetch_suggestions("par")
    assert results == [Suggestion("p3", "Paris")]


@pytest.mark.asyncio
async def test_fetch_saved_info(catalog):
    assert await catalog.fetch_saved_info("p3") == Suggestion("p3", "Paris")


@pytest.mark.asyncio
async def test_fetch_saved_info_unknown(catalog):
    with pytest.raises(LookupError):
        await catalog.fetch_saved_info("p9")
