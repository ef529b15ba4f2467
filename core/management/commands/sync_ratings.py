"""Recompute restaurant stars from review scores."""

from django.core.management.base import BaseCommand

from core.services.rating_service import rating_service


class Command(BaseCommand):
    help = "Recompute restaurants.stars from the average review score"

    def add_arguments(self, parser):
        parser.add_argument(
            "--restaurant",
            type=int,
            nargs="+",
            dest="restaurant_ids",
            metavar="ID",
            help="Only refresh these restaurants",
        )

    def handle(self, *_args, **options):
        restaurant_ids = options["restaurant_ids"]
        if restaurant_ids:
            updated = rating_service.refresh_stars(restaurant_ids)
        else:
            updated = rating_service.refresh_all()
        self.stdout.write(self.style.SUCCESS(f"Updated {updated} restaurant(s)"))
