"""
App package - Application configuration and core utilities.
Contains settings, exceptions, and foundational application code.
"""

from app.config import settings
from app.exceptions import (
    StoreError,
    InvalidIdentifierError,
    StoreValidationError,
)

__all__ = [
    "settings",
    "StoreError",
    "InvalidIdentifierError",
    "StoreValidationError",
]
