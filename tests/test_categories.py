from __future__ import annotations

import json
from pathlib import Path

import pytest

from statement_sorter import CategoryStore, JsonFileStatePort, load_base_categories
from statement_sorter.categories import normalize_name
from statement_sorter.config import DEFAULT_BASE_CATEGORIES
from statement_sorter.persistence import CUSTOM_CATEGORIES
from tests.helpers.factories import BASE_TABLE


def test_packaged_base_table_loads_with_uppercase_keys():
    table = load_base_categories()
    assert table
    assert all(k == k.strip().upper() for k in table)
    assert load_base_categories(DEFAULT_BASE_CATEGORIES) == table


def test_base_table_path_can_be_overridden(tmp_path: Path, monkeypatch):
    seed = tmp_path / "seed.json"
    seed.write_text(json.dumps({" acme ": "Coffee", "  ": "Ignored"}), encoding="utf-8")
    monkeypatch.setenv("STATEMENT_SORTER_BASE_CATEGORIES", str(seed))
    assert load_base_categories() == {"ACME": "Coffee"}


def test_mapping_view_merges_with_custom_precedence(port):
    port.save(CUSTOM_CATEGORIES, {"RENT": "Apartment", "ACME": "Coffee"})
    store = CategoryStore.load(BASE_TABLE, port)

    assert store["rent"] == "Apartment"
    assert store["ACME"] == "Coffee"
    assert store["SHELL"] == "Gas"
    assert len(store) == len(BASE_TABLE) + 1
    assert set(store) == set(BASE_TABLE) | {"ACME"}
    assert store.merged()["RENT"] == "Apartment"
    with pytest.raises(KeyError):
        store["MISSING"]


def test_category_names_are_sorted_and_unique(store):
    store.learn(["ACME"], "Coffee")
    store.learn(["BOOKS"], "Books")
    assert store.category_names() == ["Books", "Coffee", "Dining", "Gas", "Groceries", "Housing"]


def test_views_are_read_only(store):
    with pytest.raises(TypeError):
        store.base["NEW"] = "x"  # type: ignore[index]
    with pytest.raises(TypeError):
        store.custom["NEW"] = "x"  # type: ignore[index]


def test_learned_keywords_survive_a_restart(tmp_path: Path):
    first = CategoryStore.load(BASE_TABLE, JsonFileStatePort(tmp_path))
    first.learn(["acme coffee"], "Coffee")

    second = CategoryStore.load(BASE_TABLE, JsonFileStatePort(tmp_path))
    assert second.custom == {"ACME COFFEE": "Coffee"}
    assert second["ACME COFFEE"] == "Coffee"


def test_reload_picks_up_external_changes(store, port):
    port.save(CUSTOM_CATEGORIES, {"ACME": "Coffee"})
    assert "ACME" not in store
    store.reload()
    assert store["ACME"] == "Coffee"


def test_invalid_custom_record_is_ignored(port):
    port.save(CUSTOM_CATEGORIES, ["not", "a", "table"])
    store = CategoryStore.load(BASE_TABLE, port)
    assert dict(store.custom) == {}
    assert store["SHELL"] == "Gas"


@pytest.mark.parametrize(
    ("raw", "expected"),
    [("  Coffee ", "Coffee"), (" Eating   Out\t", "Eating   Out"), ("   ", "")],
)
def test_normalize_name(raw, expected):
    assert normalize_name(raw) == expected
