"""Report restaurants whose stored stars disagree with their reviews."""

from django.conf import settings
from django.core.management.base import BaseCommand, CommandError

from core.services.rating_service import rating_service


class Command(BaseCommand):
    """Print rating drift.

    With ``--fail-on-drift`` the command exits non-zero when any
    restaurant drifts, for use in scheduled consistency checks.
    """

    help = "List restaurants whose stars differ from their average review score"

    def add_arguments(self, parser):
        parser.add_argument(
            "--tolerance",
            type=float,
            default=None,
            help="Allowed absolute difference (default: RATING_DRIFT_TOLERANCE)",
        )
        parser.add_argument(
            "--fail-on-drift",
            action="store_true",
            help="Raise an error when drift is found",
        )

    def handle(self, *_args, **options):
        tolerance = options["tolerance"]
        if tolerance is None:
            tolerance = settings.RATING_DRIFT_TOLERANCE
        if tolerance < 0:
            raise CommandError("--tolerance must not be negative")

        drift = rating_service.find_drift(tolerance=tolerance)
        if not drift:
            self.stdout.write(self.style.SUCCESS("No rating drift found"))
            return

        for item in drift:
            self.stdout.write(
                f"{item.restaurant_id}\t{item.name}\t"
                f"stored={item.stored_stars}\tcomputed={item.computed_stars}\t"
                f"reviews={item.review_total}"
            )

        message = f"{len(drift)} restaurant(s) with rating drift"
        if options["fail_on_drift"]:
            raise CommandError(message)
        self.stdout.write(self.style.WARNING(message))
