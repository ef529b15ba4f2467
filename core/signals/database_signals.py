"""Django signals for database connection setup."""

from django.db.backends.signals import connection_created
from django.dispatch import receiver

from core.db import register_sqlite_functions


@receiver(connection_created)
def register_classifier_functions(sender, connection, **_kwargs) -> None:
    """Register the classifier functions on every new SQLite connection.

    SQLite keeps user-defined functions per connection, so they are
    registered whenever Django opens one.
    """
    if connection.vendor == "sqlite":
        register_sqlite_functions(connection)
