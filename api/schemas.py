"""Request bodies for the meal endpoints.

Field values are taken as sent; casting and rejection happen in the store,
so a bad value fails through the endpoint's own error message.
"""
from pydantic import BaseModel, ConfigDict
from typing import Any, Dict

from domain.models import UPDATABLE_FIELDS


class MealCreate(BaseModel):
    """Body of POST /api/create. Presence is checked by the store, not here."""

    title: Any = None
    description: Any = None
    chef: Any = None

    model_config = ConfigDict(extra="ignore")


class MealUpdate(BaseModel):
    """Body of POST /api/update/{id}. Anything besides title/description is dropped."""

    title: Any = None
    description: Any = None

    model_config = ConfigDict(extra="ignore")

    def changes(self) -> Dict[str, Any]:
        """Fields to write: only those present with a truthy value.

        Falsy values (``""``, ``0``, ``false``, ``null``) count as "not provided"
        and leave the stored value alone.
        """
        return {
            field: getattr(self, field)
            for field in UPDATABLE_FIELDS
            if getattr(self, field)
        }
