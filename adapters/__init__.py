"""
Adapters package - Record store implementations.
"""

from adapters.memory_adapter import InMemoryMealStore
from adapters.mongo_adapter import MongoMealStore
from app.config import Settings, StoreBackend
from repositories.base import MealStore


def build_store(settings: Settings) -> MealStore:
    """Create the record store selected by ``settings.store_backend``."""
    if settings.store_backend == StoreBackend.MEMORY:
        return InMemoryMealStore()
    return MongoMealStore(
        uri=settings.mongo_uri,
        db_name=settings.mongo_db_name,
        collection_name=settings.mongo_collection,
    )


__all__ = [
    "InMemoryMealStore",
    "MongoMealStore",
    "build_store",
]
