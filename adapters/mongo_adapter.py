"""MongoDB adapter for meal storage and retrieval.
"""

from contextlib import contextmanager
from typing import Any, Dict, List, Mapping, Optional
import logging

from bson import ObjectId
from bson.errors import InvalidId
from pydantic import ValidationError
from pymongo import AsyncMongoClient, ReturnDocument
from pymongo.errors import PyMongoError

from app.exceptions import InvalidIdentifierError, StoreError, StoreValidationError
from domain.models import Meal
from repositories.base import MealStore, validated_changes, validated_draft

logger = logging.getLogger("airchef.mongo")


def _object_id(meal_id: str) -> ObjectId:
    try:
        return ObjectId(meal_id)
    except (InvalidId, TypeError) as exc:
        raise InvalidIdentifierError(
            f"'{meal_id}' is not a valid meal id", details={"id": meal_id}
        ) from exc


def _to_meal(doc: Mapping[str, Any]) -> Meal:
    try:
        return Meal.from_document(doc)
    except ValidationError as exc:
        raise StoreValidationError(
            f"Stored meal {doc.get('_id')} is malformed",
            details={"errors": exc.errors(include_url=False)},
        ) from exc


@contextmanager
def _driver_errors(operation: str):
    """Re-raise driver failures as StoreError."""
    try:
        yield
    except PyMongoError as exc:
        logger.exception("MongoDB %s failed", operation)
        raise StoreError(
            f"MongoDB {operation} failed", details={"error": str(exc)}
        ) from exc


class MongoMealStore(MealStore):
    """
    MealStore backed by a MongoDB collection via pymongo's asyncio client.

    Documents are stored as ``{_id, title, description, chef, dateAdded}``.
    """

    def __init__(
        self,
        uri: str = "mongodb://localhost:27017",
        db_name: str = "airchef",
        collection_name: str = "meals",
        client: Optional[AsyncMongoClient] = None,
        collection=None,
    ):
        if client is None:
            client = AsyncMongoClient(uri, tz_aware=True)
        self._client = client
        self._uri = uri
        self._db_name = db_name
        self._collection = (
            collection if collection is not None else client[db_name][collection_name]
        )

    # ------------------ Connection ------------------
    async def connect(self) -> None:
        with _driver_errors("connect"):
            await self._client.admin.command("ping")
            await self._collection.create_index("title")
        logger.info("Connected to MongoDB %s (database: %s)", self._uri, self._db_name)

    async def close(self) -> None:
        """Close MongoDB connection."""
        try:
            await self._client.close()
            logger.info("MongoDB client closed")
        except PyMongoError:
            logger.exception("Error closing MongoDB client")

    # ------------------ CRUD ------------------
    async def insert(self, data: Mapping[str, Any]) -> Meal:
        doc = validated_draft(data).to_document()
        with _driver_errors("insert"):
            result = await self._collection.insert_one(doc)
        doc["_id"] = result.inserted_id
        return _to_meal(doc)

    async def find_by_id(self, meal_id: str) -> Optional[Meal]:
        oid = _object_id(meal_id)
        with _driver_errors("find_one"):
            doc = await self._collection.find_one({"_id": oid})
        if doc is None:
            logger.debug(f"Meal not found: {meal_id}")
            return None
        return _to_meal(doc)

    async def find(self, filters: Mapping[str, Any]) -> List[Meal]:
        with _driver_errors("find"):
            docs: List[Dict[str, Any]] = await self._collection.find(dict(filters)).to_list()
        logger.debug(f"Found {len(docs)} meals matching {dict(filters)}")
        return [_to_meal(doc) for doc in docs]

    async def update_by_id(
        self, meal_id: str, changes: Mapping[str, Any]
    ) -> Optional[Meal]:
        oid = _object_id(meal_id)
        changes = validated_changes(changes)
        # $set rejects an empty document
        if not changes:
            return await self.find_by_id(meal_id)
        with _driver_errors("find_one_and_update"):
            doc = await self._collection.find_one_and_update(
                {"_id": oid},
                {"$set": changes},
                return_document=ReturnDocument.BEFORE,
            )
        return _to_meal(doc) if doc is not None else None

    async def delete_by_id(self, meal_id: str) -> Optional[Meal]:
        oid = _object_id(meal_id)
        with _driver_errors("find_one_and_delete"):
            doc = await self._collection.find_one_and_delete({"_id": oid})
        return _to_meal(doc) if doc is not None else None
