"""
API dependencies for dependency injection
"""

from fastapi import Request

from app.config import Settings
from repositories.base import MealStore


def get_meal_store(request: Request) -> MealStore:
    """
    Record store dependency for FastAPI routes.

    The store is attached to ``app.state`` by ``main.create_app``.

    Usage:
        @router.get("/example")
        async def example(store: MealStore = Depends(get_meal_store)):
            meals = await store.find_all()
    """
    return request.app.state.meal_store


def get_settings(request: Request) -> Settings:
    """Settings the running application was built with."""
    return request.app.state.settings
