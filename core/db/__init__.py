"""Database-side objects: classifier functions and the rating trigger."""

from core.db.installer import (
    drop_functions,
    drop_rating_trigger,
    install_functions,
    install_rating_trigger,
    rating_trigger_installed,
    register_sqlite_functions,
)

__all__ = [
    "drop_functions",
    "drop_rating_trigger",
    "install_functions",
    "install_rating_trigger",
    "rating_trigger_installed",
    "register_sqlite_functions",
]
