"""
Domain models package - Pydantic entities persisted in the record store.
"""

from domain.models.meal import Meal, MealChanges, MealDraft, UPDATABLE_FIELDS

__all__ = [
    "Meal",
    "MealChanges",
    "MealDraft",
    "UPDATABLE_FIELDS",
]
