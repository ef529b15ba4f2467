"""Restaurant service for listing restaurants and their reviews."""

import re

from django.db.models import F, QuerySet

import structlog

from core.db.functions import (
    popularity_tier_expression,
    price_tier_expression,
    review_length_expression,
)
from core.exceptions import RestaurantNotFoundError
from core.models import Restaurant, Review
from core.schemas.restaurant import RestaurantListQuery
from core.schemas.review import ReviewListQuery

logger = structlog.get_logger(__name__)


def category_tag_pattern(tag: str) -> str:
    """Regex matching ``tag`` as a whole item of a comma-separated column."""
    return rf"(^|,)\s*{re.escape(tag.strip())}\s*(,|$)"


class RestaurantService:
    """Service for restaurant and review lookups.

    Restaurants are annotated with their popularity and price tiers, and
    reviews are joined with the restaurant they belong to.
    """

    def annotated_restaurants(self) -> QuerySet[Restaurant]:
        """Return all restaurants annotated with popularity and price tiers."""
        return Restaurant.objects.annotate(
            popularity_tier=popularity_tier_expression(),
            price_tier=price_tier_expression(),
        )

    def list_restaurants(
        self, filters: RestaurantListQuery | None = None
    ) -> QuerySet[Restaurant]:
        """List restaurants matching the given filters.

        Args:
            filters: Optional filter parameters

        Returns:
            Annotated restaurant queryset ordered by name
        """
        queryset = self.annotated_restaurants()
        if filters is None:
            return queryset.order_by("name", "id")

        if filters.district:
            queryset = queryset.filter(district=filters.district)
        if filters.category:
            queryset = queryset.filter(
                categories__iregex=category_tag_pattern(filters.category)
            )
        if filters.platform:
            queryset = queryset.filter(platform=filters.platform)
        if filters.min_stars is not None:
            queryset = queryset.filter(stars__gte=filters.min_stars)
        if filters.popularity_tier:
            queryset = queryset.filter(popularity_tier=filters.popularity_tier)
        if filters.price_tier:
            queryset = queryset.filter(price_tier=filters.price_tier)
        if filters.search:
            queryset = queryset.filter(name__icontains=filters.search)

        logger.debug(
            "restaurants_listed",
            filters=filters.model_dump(exclude_none=True),
        )
        return queryset.order_by("name", "id")

    def get_restaurant(self, restaurant_id: int) -> Restaurant:
        """Get a single annotated restaurant.

        Args:
            restaurant_id: Restaurant ID

        Returns:
            Restaurant annotated with popularity and price tiers

        Raises:
            RestaurantNotFoundError: If the restaurant does not exist
        """
        try:
            return self.annotated_restaurants().get(pk=restaurant_id)
        except Restaurant.DoesNotExist as e:
            raise RestaurantNotFoundError(restaurant_id) from e

    def ensure_restaurant_exists(self, restaurant_id: int) -> None:
        """Raise RestaurantNotFoundError unless the restaurant exists."""
        if not Restaurant.objects.filter(pk=restaurant_id).exists():
            raise RestaurantNotFoundError(restaurant_id)

    def list_reviews(self, filters: ReviewListQuery | None = None) -> QuerySet[Review]:
        """List reviews joined with their restaurant.

        Each review carries ``restaurant_id``, ``restaurant_name``,
        ``district`` and ``review_length`` annotations.

        Args:
            filters: Optional filter parameters

        Returns:
            Review queryset, newest first
        """
        queryset = Review.objects.select_related("service").annotate(
            restaurant_id=F("service_id"),
            restaurant_name=F("service__name"),
            district=F("service__district"),
            review_length=review_length_expression(),
        )
        if filters is None:
            return queryset

        if filters.restaurant_id is not None:
            queryset = queryset.filter(service_id=filters.restaurant_id)
        if filters.author_id:
            queryset = queryset.filter(author_id=filters.author_id)
        if filters.platform:
            queryset = queryset.filter(platform=filters.platform)
        if filters.min_score is not None:
            queryset = queryset.filter(score__gte=filters.min_score)
        if filters.max_score is not None:
            queryset = queryset.filter(score__lte=filters.max_score)
        return queryset

    def list_restaurant_reviews(
        self, restaurant_id: int, filters: ReviewListQuery | None = None
    ) -> QuerySet[Review]:
        """List the reviews of one restaurant.

        Raises:
            RestaurantNotFoundError: If the restaurant does not exist
        """
        self.ensure_restaurant_exists(restaurant_id)
        scoped = (filters or ReviewListQuery()).model_copy(
            update={"restaurant_id": restaurant_id}
        )
        return self.list_reviews(scoped)


# Global restaurant service instance
restaurant_service = RestaurantService()
