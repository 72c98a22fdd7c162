"""
Tests for the in-memory record store.
"""

import pytest
from bson import ObjectId

from adapters import InMemoryMealStore
from app.exceptions import InvalidIdentifierError, StoreValidationError
from test_fixtures import MISSING_ID, REALISTIC_MEALS

pytestmark = pytest.mark.anyio


@pytest.fixture
def store():
    return InMemoryMealStore()


async def test_insert_assigns_object_id(store):
    meal = await store.insert(REALISTIC_MEALS["pho"])

    assert ObjectId.is_valid(meal.id)
    assert meal.date_added.tzinfo is not None
    assert await store.find_by_id(meal.id) == meal


@pytest.mark.parametrize("field", ["title", "description", "chef"])
async def test_insert_rejects_missing_or_empty_field(store, field):
    missing = {k: v for k, v in REALISTIC_MEALS["pho"].items() if k != field}
    empty = {**REALISTIC_MEALS["pho"], field: ""}

    for data in (missing, empty):
        with pytest.raises(StoreValidationError):
            await store.insert(data)

    assert await store.find_all() == []


async def test_find_by_id_malformed(store):
    with pytest.raises(InvalidIdentifierError):
        await store.find_by_id("nope")


async def test_find_by_id_missing(store):
    assert await store.find_by_id(MISSING_ID) is None


async def test_find_filters_by_equality(store):
    pho = await store.insert(REALISTIC_MEALS["pho"])
    await store.insert(REALISTIC_MEALS["tacos"])

    assert await store.find({"title": "Pho Bo"}) == [pho]
    assert await store.find({"title": "pho bo"}) == []
    assert len(await store.find_all()) == 2


async def test_update_returns_previous_record(store):
    meal = await store.insert(REALISTIC_MEALS["risotto"])

    before = await store.update_by_id(meal.id, {"title": "Saffron Risotto"})

    assert before == meal
    after = await store.find_by_id(meal.id)
    assert after.title == "Saffron Risotto"
    assert after.chef == meal.chef


async def test_update_with_no_changes(store):
    meal = await store.insert(REALISTIC_MEALS["risotto"])

    assert await store.update_by_id(meal.id, {}) == meal
    assert await store.find_by_id(meal.id) == meal


async def test_update_missing(store):
    assert await store.update_by_id(MISSING_ID, {"title": "x"}) is None


async def test_returned_records_are_copies(store):
    meal = await store.insert(REALISTIC_MEALS["pho"])
    meal.title = "Mutated"

    assert (await store.find_by_id(meal.id)).title == "Pho Bo"


async def test_delete(store):
    meal = await store.insert(REALISTIC_MEALS["pho"])

    assert await store.delete_by_id(meal.id) == meal
    assert await store.delete_by_id(meal.id) is None
    assert await store.find_by_id(meal.id) is None


async def test_update_casts_numbers(store):
    meal = await store.insert(REALISTIC_MEALS["pho"])

    await store.update_by_id(meal.id, {"title": 12})

    assert (await store.find_by_id(meal.id)).title == "12"


async def test_update_rejects_uncastable_value(store):
    meal = await store.insert(REALISTIC_MEALS["pho"])

    with pytest.raises(StoreValidationError):
        await store.update_by_id(meal.id, {"description": {"text": "soup"}})

    assert await store.find_by_id(meal.id) == meal


async def test_insert_casts_numbers(store):
    meal = await store.insert({**REALISTIC_MEALS["pho"], "chef": 3})
    assert meal.chef == "3"
