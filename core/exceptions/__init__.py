"""Exception handling utilities for the review analytics service."""

from core.exceptions.domain_exceptions import (
    RestaurantNotFoundError,
    ReviewAnalyticsError,
    UnsupportedDatabaseError,
)
from core.exceptions.handlers import custom_exception_handler

__all__ = [
    "RestaurantNotFoundError",
    "ReviewAnalyticsError",
    "UnsupportedDatabaseError",
    "custom_exception_handler",
]
