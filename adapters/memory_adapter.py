"""In-memory meal store.

Dictionary-backed MealStore with the same id, validation and update
semantics as the MongoDB adapter. Data is lost on process restart.
"""

from copy import deepcopy
from typing import Any, Dict, List, Mapping, Optional
import logging

from bson import ObjectId

from app.exceptions import InvalidIdentifierError
from domain.models import Meal
from repositories.base import MealStore, validated_changes, validated_draft

logger = logging.getLogger("airchef.memory")


class InMemoryMealStore(MealStore):
    """
    Example:
        >>> store = InMemoryMealStore()
        >>> meal = await store.insert({"title": "Pho", "description": "Soup", "chef": "Linh"})
        >>> await store.find_by_id(meal.id)
    """

    def __init__(self) -> None:
        # insertion order doubles as natural order for find()
        self._documents: Dict[ObjectId, Dict[str, Any]] = {}

    @staticmethod
    def _key(meal_id: str) -> ObjectId:
        if not isinstance(meal_id, str) or not ObjectId.is_valid(meal_id):
            raise InvalidIdentifierError(
                f"'{meal_id}' is not a valid meal id", details={"id": meal_id}
            )
        return ObjectId(meal_id)

    async def insert(self, data: Mapping[str, Any]) -> Meal:
        doc = validated_draft(data).to_document()
        doc["_id"] = ObjectId()
        self._documents[doc["_id"]] = doc
        logger.debug("Stored meal %s in memory", doc["_id"])
        return Meal.from_document(deepcopy(doc))

    async def find_by_id(self, meal_id: str) -> Optional[Meal]:
        doc = self._documents.get(self._key(meal_id))
        return Meal.from_document(deepcopy(doc)) if doc is not None else None

    async def find(self, filters: Mapping[str, Any]) -> List[Meal]:
        return [
            Meal.from_document(deepcopy(doc))
            for doc in self._documents.values()
            if all(doc.get(field) == value for field, value in filters.items())
        ]

    async def update_by_id(
        self, meal_id: str, changes: Mapping[str, Any]
    ) -> Optional[Meal]:
        key = self._key(meal_id)
        changes = validated_changes(changes)
        doc = self._documents.get(key)
        if doc is None:
            return None
        before = Meal.from_document(deepcopy(doc))
        doc.update(changes)
        return before

    async def delete_by_id(self, meal_id: str) -> Optional[Meal]:
        doc = self._documents.pop(self._key(meal_id), None)
        return Meal.from_document(doc) if doc is not None else None
