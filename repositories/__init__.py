"""
Repositories package - Data access layer.
"""

from repositories.base import MealStore

__all__ = [
    "MealStore",
]
