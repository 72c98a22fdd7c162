"""
Tests for the meal seeding script.
"""

import json

import pytest

from adapters import InMemoryMealStore
from scripts import seed_meals as seed_script
from test_fixtures import REALISTIC_MEALS


@pytest.mark.anyio
async def test_seed_inserts_valid_and_skips_invalid():
    store = InMemoryMealStore()
    meals = [
        REALISTIC_MEALS["pho"],
        REALISTIC_MEALS["tacos"],
        {"title": "No chef", "description": "Orphaned dish"},
        "not a meal",
    ]

    inserted, skipped = await seed_script.seed_meals(store, meals)

    assert (inserted, skipped) == (2, 2)
    assert {m.title for m in await store.find_all()} == {"Pho Bo", "Tacos al Pastor"}


@pytest.mark.anyio
async def test_seed_drop_replaces_existing():
    store = InMemoryMealStore()
    await store.insert(REALISTIC_MEALS["risotto"])

    inserted, _ = await seed_script.seed_meals(store, [REALISTIC_MEALS["pho"]], drop=True)

    assert inserted == 1
    assert [m.title for m in await store.find_all()] == ["Pho Bo"]


def test_main_loads_file(tmp_path, monkeypatch):
    store = InMemoryMealStore()
    monkeypatch.setattr(seed_script, "build_store", lambda settings: store)
    meal_file = tmp_path / "meals.json"
    meal_file.write_text(json.dumps(list(REALISTIC_MEALS.values())), encoding="utf-8")

    assert seed_script.main([str(meal_file)]) == 0


def test_main_missing_file(tmp_path):
    assert seed_script.main([str(tmp_path / "absent.json")]) == 1


def test_main_rejects_non_list(tmp_path):
    meal_file = tmp_path / "meals.json"
    meal_file.write_text(json.dumps(REALISTIC_MEALS["pho"]), encoding="utf-8")

    assert seed_script.main([str(meal_file)]) == 1
