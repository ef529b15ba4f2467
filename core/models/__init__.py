"""Database models for core application."""

from core.models.restaurant import Restaurant
from core.models.review import Review

__all__ = ["Restaurant", "Review"]
