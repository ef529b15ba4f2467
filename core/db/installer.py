"""Install and remove the classifier functions and the rating trigger.

SQLite keeps user-defined functions per connection, so on SQLite
"installing" the functions means registering the Python callables on the
connection. PostgreSQL functions and the triggers on both backends are
persistent DDL.
"""

import structlog
from django.db.backends.base.base import BaseDatabaseWrapper

from core.db import sql
from core.db.functions import SQLITE_FUNCTIONS
from core.exceptions import UnsupportedDatabaseError

logger = structlog.get_logger(__name__)

SQLITE = "sqlite"
POSTGRESQL = "postgresql"


def _require_supported(connection: BaseDatabaseWrapper) -> str:
    if connection.vendor not in (SQLITE, POSTGRESQL):
        raise UnsupportedDatabaseError(connection.vendor)
    return connection.vendor


def _execute_all(connection: BaseDatabaseWrapper, statements) -> None:
    with connection.cursor() as cursor:
        for statement in statements:
            cursor.execute(statement)


def register_sqlite_functions(connection: BaseDatabaseWrapper) -> None:
    """Register the classifier callables on a SQLite connection."""
    connection.ensure_connection()
    for name, (func, num_args) in SQLITE_FUNCTIONS.items():
        connection.connection.create_function(
            name, num_args, func, deterministic=True
        )


def install_functions(connection: BaseDatabaseWrapper) -> None:
    """Make ``review_length``, ``popularity_tier`` and ``price_tier`` callable in SQL.

    Raises:
        UnsupportedDatabaseError: If the backend is not SQLite or PostgreSQL.
    """
    vendor = _require_supported(connection)
    if vendor == SQLITE:
        register_sqlite_functions(connection)
    else:
        _execute_all(connection, sql.POSTGRES_CREATE_FUNCTIONS)
    logger.info("database_functions_installed", vendor=vendor)


def drop_functions(connection: BaseDatabaseWrapper) -> None:
    """Remove the classifier functions.

    SQLite functions live only as long as the connection and are
    re-registered on the next one, so this is a no-op there.
    """
    vendor = _require_supported(connection)
    if vendor == POSTGRESQL:
        _execute_all(connection, sql.POSTGRES_DROP_FUNCTIONS)
    logger.info("database_functions_dropped", vendor=vendor)


def install_rating_trigger(connection: BaseDatabaseWrapper) -> None:
    """Create the trigger that keeps ``restaurants.stars`` equal to AVG(score).

    Existing trigger objects are replaced.

    Raises:
        UnsupportedDatabaseError: If the backend is not SQLite or PostgreSQL.
    """
    vendor = _require_supported(connection)
    if vendor == SQLITE:
        _execute_all(connection, sql.SQLITE_DROP_TRIGGERS)
        _execute_all(connection, sql.SQLITE_CREATE_TRIGGERS)
    else:
        _execute_all(connection, sql.POSTGRES_CREATE_TRIGGER)
    logger.info("rating_trigger_installed", vendor=vendor, trigger=sql.TRIGGER_NAME)


def drop_rating_trigger(connection: BaseDatabaseWrapper) -> None:
    """Remove the rating trigger if present."""
    vendor = _require_supported(connection)
    if vendor == SQLITE:
        _execute_all(connection, sql.SQLITE_DROP_TRIGGERS)
    else:
        _execute_all(connection, sql.POSTGRES_DROP_TRIGGER)
    logger.info("rating_trigger_dropped", vendor=vendor, trigger=sql.TRIGGER_NAME)


def rating_trigger_installed(connection: BaseDatabaseWrapper) -> bool:
    """Report whether the rating trigger exists in the database."""
    vendor = _require_supported(connection)
    query = sql.SQLITE_TRIGGER_COUNT if vendor == SQLITE else sql.POSTGRES_TRIGGER_COUNT
    expected = len(sql.SQLITE_TRIGGER_NAMES) if vendor == SQLITE else 1
    with connection.cursor() as cursor:
        cursor.execute(query)
        (count,) = cursor.fetchone()
    return count == expected
