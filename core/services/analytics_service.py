"""Analytics service for aggregate restaurant and review queries."""

from django.db.models import Avg, Count, F, Max, Sum

import structlog

from core.constants import (
    DEFAULT_RANKING_LIMIT,
    MAX_REVIEW_SCORE,
    MIN_REVIEW_SCORE,
    UNKNOWN_TIER,
)
from core.db.functions import (
    popularity_tier_expression,
    price_tier_expression,
    review_length_expression,
)
from core.enums import PopularityTier, PriceTier
from core.exceptions import RestaurantNotFoundError
from core.models import Restaurant, Review
from core.schemas.analytics import (
    DistrictSummary,
    PlatformSummary,
    RestaurantScore,
    ReviewerSummary,
    ScoreLengthSummary,
    TierBreakdown,
)
from core.schemas.restaurant import (
    RestaurantSummary,
    ScoreBucket,
    ScoreDistribution,
)

logger = structlog.get_logger(__name__)

SCORE_RANGE = range(MIN_REVIEW_SCORE, MAX_REVIEW_SCORE + 1)


class AnalyticsService:
    """Service for aggregate queries over restaurants and reviews.

    Each method runs a single grouped query (JOIN + GROUP BY, or a CASE
    expression grouped by tier) and returns pydantic schemas.
    """

    def _scored_restaurants(self):
        return Restaurant.objects.annotate(
            average_score=Avg("reviews__score"),
            review_total=Count("reviews"),
            total_likes=Sum("reviews__likes", default=0),
        )

    @staticmethod
    def _to_restaurant_score(restaurant: Restaurant) -> RestaurantScore:
        return RestaurantScore(
            restaurant_id=restaurant.id,
            name=restaurant.name,
            district=restaurant.district,
            stored_stars=restaurant.stars,
            average_score=restaurant.average_score,
            review_total=restaurant.review_total,
            total_likes=restaurant.total_likes,
        )

    def restaurant_scores(self, min_reviews: int = 0) -> list[RestaurantScore]:
        """Get stored and computed rating figures for every restaurant.

        Args:
            min_reviews: Only include restaurants with at least this many reviews

        Returns:
            List of RestaurantScore ordered by restaurant name
        """
        queryset = (
            self._scored_restaurants()
            .filter(review_total__gte=min_reviews)
            .order_by("name", "id")
        )
        return [self._to_restaurant_score(restaurant) for restaurant in queryset]

    def top_restaurants(
        self, limit: int = DEFAULT_RANKING_LIMIT, min_reviews: int = 1
    ) -> list[RestaurantScore]:
        """Rank restaurants by average review score.

        Ties are broken by number of reviews, then by name.

        Args:
            limit: Maximum number of restaurants to return
            min_reviews: Only rank restaurants with at least this many reviews

        Returns:
            List of RestaurantScore, best first
        """
        queryset = (
            self._scored_restaurants()
            .filter(review_total__gte=min_reviews)
            .order_by(
                F("average_score").desc(nulls_last=True),
                "-review_total",
                "name",
            )[:limit]
        )
        results = [self._to_restaurant_score(restaurant) for restaurant in queryset]
        logger.debug(
            "top_restaurants_ranked",
            limit=limit,
            min_reviews=min_reviews,
            returned=len(results),
        )
        return results

    def district_summary(self) -> list[DistrictSummary]:
        """Aggregate restaurant counts, stars and review counts per district."""
        rows = (
            Restaurant.objects.values("district")
            .annotate(
                restaurant_count=Count("id"),
                average_stars=Avg("stars"),
                total_review_count=Sum("review_count", default=0),
            )
            .order_by("district")
        )
        return [DistrictSummary(**row) for row in rows]

    def platform_summary(self) -> list[PlatformSummary]:
        """Aggregate review counts, scores and likes per review platform."""
        rows = (
            Review.objects.values("platform")
            .annotate(
                review_count=Count("id"),
                average_score=Avg("score"),
                total_likes=Sum("likes", default=0),
            )
            .order_by("-review_count", "platform")
        )
        return [PlatformSummary(**row) for row in rows]

    def tier_breakdown(self) -> TierBreakdown:
        """Count restaurants per popularity tier and per price tier.

        Every tier is present, zero-filled. Restaurants whose classifier
        input is NULL are counted under ``unknown``.
        """
        return TierBreakdown(
            popularity=self._count_by_tier(
                popularity_tier_expression(), [tier.value for tier in PopularityTier]
            ),
            price=self._count_by_tier(
                price_tier_expression(), [tier.value for tier in PriceTier]
            ),
        )

    @staticmethod
    def _count_by_tier(expression, tiers: list[str]) -> dict[str, int]:
        counts = dict.fromkeys([*tiers, UNKNOWN_TIER], 0)
        rows = (
            Restaurant.objects.annotate(tier=expression)
            .values("tier")
            .annotate(count=Count("id"))
            .order_by()
        )
        for row in rows:
            counts[row["tier"] or UNKNOWN_TIER] += row["count"]
        return counts

    def top_reviewers(self, limit: int = DEFAULT_RANKING_LIMIT) -> list[ReviewerSummary]:
        """Rank authors by number of reviews, then by likes received."""
        rows = (
            Review.objects.values("author_id")
            .annotate(
                review_count=Count("id"),
                average_score=Avg("score"),
                total_likes=Sum("likes", default=0),
                restaurant_count=Count("service", distinct=True),
            )
            .order_by("-review_count", "-total_likes", "author_id")[:limit]
        )
        return [ReviewerSummary(**row) for row in rows]

    def review_length_by_score(self) -> list[ScoreLengthSummary]:
        """Get review body length figures for each score value, zero-filled."""
        rows = (
            Review.objects.annotate(length=review_length_expression())
            .values("score")
            .annotate(
                review_count=Count("id"),
                average_length=Avg("length"),
                max_length=Max("length"),
            )
            .order_by("score")
        )
        by_score = {row["score"]: row for row in rows}
        return [
            ScoreLengthSummary(**by_score[score])
            if score in by_score
            else ScoreLengthSummary(score=score, review_count=0)
            for score in SCORE_RANGE
        ]

    def score_distribution(self, restaurant_id: int) -> ScoreDistribution:
        """Count a restaurant's reviews per score value.

        Raises:
            RestaurantNotFoundError: If the restaurant does not exist
        """
        restaurant = (
            Restaurant.objects.filter(pk=restaurant_id).only("id", "name").first()
        )
        if restaurant is None:
            raise RestaurantNotFoundError(restaurant_id)

        counts = dict(
            Review.objects.filter(service_id=restaurant_id)
            .values("score")
            .annotate(count=Count("id"))
            .order_by()
            .values_list("score", "count")
        )
        buckets = [
            ScoreBucket(score=score, count=counts.get(score, 0))
            for score in SCORE_RANGE
        ]
        return ScoreDistribution(
            restaurant_id=restaurant.id,
            name=restaurant.name,
            total=sum(bucket.count for bucket in buckets),
            buckets=buckets,
        )

    def unreviewed_restaurants(self) -> list[RestaurantSummary]:
        """List restaurants that have no linked reviews."""
        queryset = Restaurant.objects.filter(reviews__isnull=True).order_by(
            "name", "id"
        )
        return [RestaurantSummary.model_validate(restaurant) for restaurant in queryset]


# Global analytics service instance
analytics_service = AnalyticsService()
