"""
Meal entity - the single record type persisted in the record store.
"""

from datetime import datetime, timezone
from typing import Any, Dict, Mapping, Optional

from pydantic import BaseModel, ConfigDict, Field


class MealDraft(BaseModel):
    """Fields a caller supplies when creating a meal.

    Every field is required and must be a non-empty string; the store runs
    incoming documents through this model before writing them.
    """

    title: str = Field(..., min_length=1)
    description: str = Field(..., min_length=1)
    chef: str = Field(..., min_length=1)

    # numbers are cast to strings, like a document schema cast
    model_config = ConfigDict(coerce_numbers_to_str=True)

    def to_document(self) -> Dict[str, Any]:
        """Build the document to insert, stamping ``dateAdded`` with the current UTC time."""
        doc = self.model_dump()
        doc["dateAdded"] = datetime.now(timezone.utc)
        return doc


class Meal(BaseModel):
    """A persisted meal, as returned by the store."""

    id: str
    title: str = Field(..., min_length=1)
    description: str = Field(..., min_length=1)
    chef: str = Field(..., min_length=1)
    date_added: datetime = Field(..., alias="dateAdded")

    model_config = ConfigDict(populate_by_name=True)

    @classmethod
    def from_document(cls, doc: Mapping[str, Any]) -> "Meal":
        return cls(
            id=str(doc["_id"]),
            title=doc.get("title"),
            description=doc.get("description"),
            chef=doc.get("chef"),
            dateAdded=doc.get("dateAdded"),
        )

    def to_api(self) -> Dict[str, Any]:
        """JSON-ready representation: ``{id, title, description, chef, dateAdded}``."""
        return self.model_dump(by_alias=True, mode="json")


# Fields the update endpoint is allowed to change
UPDATABLE_FIELDS = ("title", "description")


class MealChanges(BaseModel):
    """Field values an update may write; cast the same way as ``MealDraft``."""

    title: Optional[str] = Field(default=None, min_length=1)
    description: Optional[str] = Field(default=None, min_length=1)

    model_config = ConfigDict(coerce_numbers_to_str=True, extra="forbid")

    def to_update(self) -> Dict[str, Any]:
        """Only the fields that were supplied."""
        return self.model_dump(exclude_unset=True)
