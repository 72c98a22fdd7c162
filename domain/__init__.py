"""
Domain layer - Business entities.
"""

from domain import models

__all__ = ["models"]
