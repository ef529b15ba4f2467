"""Rating service keeping restaurant stars in step with review scores."""

from collections.abc import Iterable

from django.conf import settings
from django.db.models import Avg, Count, F, OuterRef, Q, Subquery
from django.db.models.functions import Abs

import structlog

from core.enums import RatingSyncMode
from core.models import Restaurant, Review
from core.schemas.rating import RatingDrift

logger = structlog.get_logger(__name__)


def _average_score_subquery() -> Subquery:
    """Correlated subquery yielding AVG(score) for the outer restaurant."""
    averages = (
        Review.objects.filter(service=OuterRef("pk"))
        .order_by()
        .values("service")
        .annotate(average=Avg("score"))
        .values("average")
    )
    return Subquery(averages)


def _review_total_subquery() -> Subquery:
    totals = (
        Review.objects.filter(service=OuterRef("pk"))
        .order_by()
        .values("service")
        .annotate(total=Count("id"))
        .values("total")
    )
    return Subquery(totals)


class RatingService:
    """Service for maintaining and auditing the denormalized stars column.

    This is the application-level counterpart of the database trigger
    installed by ``core.db.installer``: both set ``stars`` to the average
    review score, or NULL for a restaurant without reviews.
    """

    @staticmethod
    def sync_mode() -> RatingSyncMode:
        """Return the configured rating sync mode."""
        return RatingSyncMode(settings.RATING_SYNC_MODE)

    def refresh_stars(self, restaurant_ids: Iterable[int]) -> int:
        """Recompute stars for the given restaurants.

        Args:
            restaurant_ids: IDs of restaurants to refresh; None entries are ignored

        Returns:
            Number of restaurant rows updated
        """
        ids = sorted({rid for rid in restaurant_ids if rid is not None})
        if not ids:
            return 0

        updated = Restaurant.objects.filter(pk__in=ids).update(
            stars=_average_score_subquery()
        )
        logger.debug("restaurant_stars_refreshed", restaurant_ids=ids, updated=updated)
        return updated

    def refresh_all(self) -> int:
        """Recompute stars for every restaurant.

        Repairs drift left by bulk operations that bypass model signals.

        Returns:
            Number of restaurant rows updated
        """
        updated = Restaurant.objects.update(stars=_average_score_subquery())
        logger.info("all_restaurant_stars_refreshed", updated=updated)
        return updated

    def find_drift(self, tolerance: float | None = None) -> list[RatingDrift]:
        """Find restaurants whose stored stars disagree with their reviews.

        A restaurant drifts when exactly one of stored and computed stars is
        NULL, or when both are set and differ by more than ``tolerance``.

        Args:
            tolerance: Allowed absolute difference; defaults to
                settings.RATING_DRIFT_TOLERANCE

        Returns:
            List of RatingDrift records ordered by restaurant ID
        """
        if tolerance is None:
            tolerance = settings.RATING_DRIFT_TOLERANCE

        queryset = (
            Restaurant.objects.annotate(
                computed_stars=_average_score_subquery(),
                review_total=_review_total_subquery(),
            )
            .annotate(delta=Abs(F("stars") - F("computed_stars")))
            .filter(
                Q(stars__isnull=True, computed_stars__isnull=False)
                | Q(stars__isnull=False, computed_stars__isnull=True)
                | Q(delta__gt=tolerance)
            )
            .order_by("id")
        )

        drift = [
            RatingDrift(
                restaurant_id=restaurant.id,
                name=restaurant.name,
                stored_stars=restaurant.stars,
                computed_stars=restaurant.computed_stars,
                review_total=restaurant.review_total or 0,
            )
            for restaurant in queryset
        ]

        if drift:
            logger.warning(
                "rating_drift_detected",
                drifting_restaurants=len(drift),
                tolerance=tolerance,
            )
        return drift


# Global rating service instance
rating_service = RatingService()
