"""Django signals for rating maintenance and connection setup."""

from core.signals.database_signals import register_classifier_functions
from core.signals.review_signals import (
    refresh_stars_after_delete,
    refresh_stars_after_save,
    remember_previous_restaurant,
)

__all__ = [
    "refresh_stars_after_delete",
    "refresh_stars_after_save",
    "register_classifier_functions",
    "remember_previous_restaurant",
]
