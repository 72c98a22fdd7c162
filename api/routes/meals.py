"""
Meal routes - create, read, update, delete and search endpoints.

Each handler awaits exactly one store call and answers with the status
envelope from ``api.responses``; store failures never change the HTTP code.
"""

from fastapi import APIRouter, Depends, Query
from typing import Optional
import logging

from api.dependencies import get_meal_store
from api.responses import (
    MSG_DELETE_NOT_FOUND,
    MSG_MEAL_NOT_FOUND,
    MSG_MEALS_NOT_FOUND,
    MSG_SAVE_FAILED,
    MSG_SEARCH_FAILED,
    MSG_UPDATE_FAILED,
    error_response,
    no_results_response,
    ok_response,
)
from api.schemas import MealCreate, MealUpdate
from app.exceptions import StoreError
from repositories.base import MealStore

router = APIRouter(prefix="/api", tags=["Meals"])
logger = logging.getLogger("airchef.api.meals")


@router.post("/create")
async def create_meal(
    payload: Optional[MealCreate] = None,
    store: MealStore = Depends(get_meal_store),
):
    """
    Save a new meal and return it with its assigned id and dateAdded.

    Missing or empty fields are rejected by the store, not here.
    """
    payload = payload or MealCreate()
    logger.debug(f"Create request: {payload.model_dump()}")

    try:
        meal = await store.insert(payload.model_dump())
    except StoreError as e:
        logger.warning(f"Error saving meal: {e}")
        return error_response(MSG_SAVE_FAILED)

    logger.info(f"Saved a new meal {meal.id}")
    return ok_response(meal=meal.to_api())


@router.get("/get/{meal_id}")
async def get_meal(meal_id: str, store: MealStore = Depends(get_meal_store)):
    """Get a single meal by id"""
    try:
        meal = await store.find_by_id(meal_id)
    except StoreError as e:
        logger.warning(f"Error fetching meal {meal_id}: {e}")
        return error_response(MSG_MEAL_NOT_FOUND)

    if meal is None:
        return error_response(MSG_MEAL_NOT_FOUND)

    return ok_response(meal=meal.to_api())


@router.get("/get")
async def list_meals(store: MealStore = Depends(get_meal_store)):
    """Get every meal. An empty store is still a success."""
    try:
        meals = await store.find_all()
    except StoreError as e:
        logger.warning(f"Error listing meals: {e}")
        return error_response(MSG_MEALS_NOT_FOUND)

    return ok_response(meals=[meal.to_api() for meal in meals])


@router.get("/search")
async def search_meals(
    title: Optional[str] = Query(default=None, description="Exact meal title"),
    store: MealStore = Depends(get_meal_store),
):
    """
    Find meals whose title equals ``title`` exactly (case-sensitive).

    Unlike /get, an empty result is reported with status NO RESULTS.
    """
    logger.info(f"Searching for meals titled {title!r}")

    try:
        meals = await store.find({"title": title})
    except StoreError as e:
        logger.warning(f"Error searching meals: {e}")
        return error_response(MSG_SEARCH_FAILED)

    if not meals:
        return no_results_response()

    return ok_response(meals=[meal.to_api() for meal in meals])


@router.post("/update/{meal_id}")
async def update_meal(
    meal_id: str,
    payload: Optional[MealUpdate] = None,
    store: MealStore = Depends(get_meal_store),
):
    """
    Update a meal's title and/or description.

    Only fields sent with a non-empty value are written. The response carries
    the meal as it was before the update.
    """
    changes = (payload or MealUpdate()).changes()
    logger.info(f"Updating meal {meal_id} with {changes}")

    try:
        previous = await store.update_by_id(meal_id, changes)
    except StoreError as e:
        logger.warning(f"Error updating meal {meal_id}: {e}")
        return error_response(MSG_UPDATE_FAILED)

    if previous is None:
        return error_response(MSG_UPDATE_FAILED)

    logger.info(f"Updated meal {meal_id}")
    return ok_response(meal=previous.to_api())


@router.get("/delete/{meal_id}")
async def delete_meal(meal_id: str, store: MealStore = Depends(get_meal_store)):
    """Delete a meal by id"""
    try:
        removed = await store.delete_by_id(meal_id)
    except StoreError as e:
        logger.warning(f"Error deleting meal {meal_id}: {e}")
        return error_response(MSG_DELETE_NOT_FOUND)

    if removed is None:
        return error_response(MSG_DELETE_NOT_FOUND)

    logger.info(f"Deleted meal {meal_id}")
    return ok_response(message=f"Successfully deleted id {meal_id}")
