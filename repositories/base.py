"""
Record store interface for the data access layer.
Routes depend on this abstraction; concrete stores live in ``adapters``.
"""

from abc import ABC, abstractmethod
from typing import Any, Dict, List, Mapping, Optional

from pydantic import ValidationError

from app.exceptions import StoreValidationError
from domain.models import Meal, MealChanges, MealDraft


def validated_draft(data: Mapping[str, Any]) -> MealDraft:
    """Cast a create payload, raising StoreValidationError when it breaks the meal schema."""
    try:
        return MealDraft.model_validate(dict(data))
    except ValidationError as exc:
        raise StoreValidationError(
            "Meal validation failed",
            details={"errors": exc.errors(include_url=False)},
        ) from exc


def validated_changes(changes: Mapping[str, Any]) -> Dict[str, Any]:
    """Cast an update set, raising StoreValidationError for values a meal cannot hold."""
    try:
        return MealChanges.model_validate(dict(changes)).to_update()
    except ValidationError as exc:
        raise StoreValidationError(
            "Meal update validation failed",
            details={"errors": exc.errors(include_url=False)},
        ) from exc


class MealStore(ABC):
    """
    Asynchronous CRUD primitives over Meal records.

    Implementations signal failures by raising ``app.exceptions.StoreError``
    (or a subclass) and signal "no such record" by returning ``None``.
    """

    async def connect(self) -> None:
        """Open / verify the underlying connection. No-op by default."""

    async def close(self) -> None:
        """Release the underlying connection. No-op by default."""

    @abstractmethod
    async def insert(self, data: Mapping[str, Any]) -> Meal:
        """
        Validate and persist a new meal.

        Args:
            data: Raw field mapping (title, description, chef); values may be missing

        Returns:
            The stored meal with its assigned id and dateAdded

        Raises:
            StoreValidationError: If a required field is missing or empty
        """

    @abstractmethod
    async def find_by_id(self, meal_id: str) -> Optional[Meal]:
        """Get a meal by id, or None. Raises InvalidIdentifierError for malformed ids."""

    @abstractmethod
    async def find(self, filters: Mapping[str, Any]) -> List[Meal]:
        """Get every meal whose fields equal the given values."""

    async def find_all(self) -> List[Meal]:
        """Get every meal in the store"""
        return await self.find({})

    @abstractmethod
    async def update_by_id(
        self, meal_id: str, changes: Mapping[str, Any]
    ) -> Optional[Meal]:
        """
        Apply ``changes`` to a meal.

        ``changes`` is cast with ``validated_changes``; a value a meal cannot hold
        raises StoreValidationError.

        Returns:
            The meal as it was *before* the update, or None if no meal has that id.
            An empty ``changes`` mapping leaves the record untouched.
        """

    @abstractmethod
    async def delete_by_id(self, meal_id: str) -> Optional[Meal]:
        """Remove a meal and return it, or None if no meal has that id."""
