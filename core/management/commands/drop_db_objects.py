"""Remove the classifier functions and the rating trigger."""

from django.core.management.base import BaseCommand, CommandError
from django.db import DEFAULT_DB_ALIAS, connections

from core.db import drop_functions, drop_rating_trigger
from core.exceptions import UnsupportedDatabaseError


class Command(BaseCommand):
    """Drop database-side objects. Without flags both are dropped."""

    help = "Drop the classifier SQL functions and the rating trigger"

    def add_arguments(self, parser):
        parser.add_argument(
            "--functions", action="store_true", help="Drop the SQL functions"
        )
        parser.add_argument(
            "--trigger", action="store_true", help="Drop the rating trigger"
        )
        parser.add_argument("--database", default=DEFAULT_DB_ALIAS)

    def handle(self, *_args, **options):
        connection = connections[options["database"]]
        drop_all = not (options["functions"] or options["trigger"])

        try:
            # Trigger first: on PostgreSQL it depends on the trigger function.
            if drop_all or options["trigger"]:
                drop_rating_trigger(connection)
                self.stdout.write(self.style.SUCCESS("Dropped rating trigger"))
            if drop_all or options["functions"]:
                drop_functions(connection)
                self.stdout.write(self.style.SUCCESS("Dropped SQL functions"))
        except UnsupportedDatabaseError as e:
            raise CommandError(str(e)) from e
