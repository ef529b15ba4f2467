"""Install the classifier functions and the rating trigger."""

from django.core.management.base import BaseCommand, CommandError
from django.db import DEFAULT_DB_ALIAS, connections

from core.db import install_functions, install_rating_trigger
from core.exceptions import UnsupportedDatabaseError


class Command(BaseCommand):
    """Install database-side objects.

    Without flags both the functions and the trigger are installed.
    """

    help = "Install the classifier SQL functions and the rating trigger"

    def add_arguments(self, parser):
        parser.add_argument(
            "--functions", action="store_true", help="Install the SQL functions"
        )
        parser.add_argument(
            "--trigger", action="store_true", help="Install the rating trigger"
        )
        parser.add_argument("--database", default=DEFAULT_DB_ALIAS)

    def handle(self, *_args, **options):
        connection = connections[options["database"]]
        install_all = not (options["functions"] or options["trigger"])

        try:
            if install_all or options["functions"]:
                install_functions(connection)
                self.stdout.write(self.style.SUCCESS("Installed SQL functions"))
            if install_all or options["trigger"]:
                install_rating_trigger(connection)
                self.stdout.write(self.style.SUCCESS("Installed rating trigger"))
        except UnsupportedDatabaseError as e:
            raise CommandError(str(e)) from e
