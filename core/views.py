"""API views for core application."""

from typing import Any

import structlog
from django.conf import settings
from pydantic import BaseModel, ValidationError
from rest_framework import status
from rest_framework.permissions import AllowAny
from rest_framework.response import Response
from rest_framework.views import APIView

from core.pagination import StandardPageNumberPagination
from core.schemas.analytics import RankingQuery
from core.schemas.rating import (
    RatingDriftQuery,
    RatingDriftResponse,
    RatingSyncRequest,
    RatingSyncResponse,
)
from core.schemas.restaurant import RestaurantDetail, RestaurantListQuery
from core.schemas.review import ReviewDetail, ReviewListQuery
from core.services.analytics_service import analytics_service
from core.services.health_service import health_service
from core.services.rating_service import rating_service
from core.services.restaurant_service import restaurant_service

logger = structlog.get_logger(__name__)


def _parse(schema: type[BaseModel], data: Any) -> tuple[Any, Response | None]:
    """Validate request data with a pydantic schema.

    Returns:
        (parsed model, None) on success, (None, 400 response) on failure
    """
    try:
        return schema.model_validate(data), None
    except ValidationError as e:
        logger.warning(
            "request_validation_failed",
            schema=schema.__name__,
            validation_errors=e.errors(include_url=False, include_context=False),
        )
        return None, Response(
            {
                "error": "bad_request",
                "message": "Invalid request parameters",
                "errors": e.errors(include_url=False, include_context=False),
            },
            status=status.HTTP_400_BAD_REQUEST,
        )


def _dump_all(items) -> list[dict[str, Any]]:
    return [item.model_dump(mode="json") for item in items]


class PublicAPIView(APIView):
    """Base view for the unauthenticated analytics API."""

    authentication_classes = ()
    permission_classes = (AllowAny,)


class LivenessCheckView(PublicAPIView):
    """Liveness probe endpoint for Kubernetes.

    Returns 200 if the service is alive and running.
    This should not check external dependencies.
    """

    def get(self, _request):
        """Handle GET request for liveness check."""
        liveness = health_service.get_liveness_status()
        return Response(liveness.model_dump(mode="json"), status=status.HTTP_200_OK)


class ReadinessCheckView(PublicAPIView):
    """Readiness probe endpoint for Kubernetes.

    Returns 200 with a degraded status when the database (or, in trigger
    mode, the rating trigger) is unavailable.
    """

    def get(self, _request):
        """Handle GET request for readiness check."""
        readiness = health_service.get_readiness_status()
        return Response(readiness.model_dump(mode="json"), status=status.HTTP_200_OK)


class RestaurantListView(PublicAPIView):
    """List restaurants with their popularity and price tiers.

    Supports filtering by district, category, platform, minimum stars,
    tiers and a name search. Paginated.
    """

    def get(self, request):
        """Handle GET request for the restaurant list.

        Returns:
            200 OK with a page of RestaurantDetail
            400 Bad Request if a filter is invalid
            404 Not Found if the page does not exist
        """
        filters, error = _parse(RestaurantListQuery, request.query_params.dict())
        if error:
            return error

        queryset = restaurant_service.list_restaurants(filters)
        paginator = StandardPageNumberPagination()
        page = paginator.paginate_queryset(queryset, request, view=self)
        return paginator.get_paginated_response(
            _dump_all(RestaurantDetail.model_validate(r) for r in page)
        )


class RestaurantDetailView(PublicAPIView):
    """Retrieve a single restaurant."""

    def get(self, _request, restaurant_id: int):
        """Handle GET request for one restaurant.

        Returns:
            200 OK with RestaurantDetail
            404 Not Found if the restaurant does not exist
        """
        restaurant = restaurant_service.get_restaurant(restaurant_id)
        return Response(
            RestaurantDetail.model_validate(restaurant).model_dump(mode="json"),
            status=status.HTTP_200_OK,
        )


class RestaurantReviewListView(PublicAPIView):
    """List the reviews of one restaurant. Paginated."""

    def get(self, request, restaurant_id: int):
        """Handle GET request for a restaurant's reviews.

        Returns:
            200 OK with a page of ReviewDetail
            400 Bad Request if a filter is invalid
            404 Not Found if the restaurant does not exist
        """
        filters, error = _parse(ReviewListQuery, request.query_params.dict())
        if error:
            return error

        queryset = restaurant_service.list_restaurant_reviews(restaurant_id, filters)
        paginator = StandardPageNumberPagination()
        page = paginator.paginate_queryset(queryset, request, view=self)
        return paginator.get_paginated_response(
            _dump_all(ReviewDetail.model_validate(r) for r in page)
        )


class RestaurantScoreDistributionView(PublicAPIView):
    """Count a restaurant's reviews per score."""

    def get(self, _request, restaurant_id: int):
        """Handle GET request for a score distribution."""
        distribution = analytics_service.score_distribution(restaurant_id)
        return Response(distribution.model_dump(mode="json"), status=status.HTTP_200_OK)


class ReviewListView(PublicAPIView):
    """List reviews joined with their restaurant. Paginated."""

    def get(self, request):
        """Handle GET request for the review list.

        Returns:
            200 OK with a page of ReviewDetail
            400 Bad Request if a filter is invalid
        """
        filters, error = _parse(ReviewListQuery, request.query_params.dict())
        if error:
            return error

        queryset = restaurant_service.list_reviews(filters)
        paginator = StandardPageNumberPagination()
        page = paginator.paginate_queryset(queryset, request, view=self)
        return paginator.get_paginated_response(
            _dump_all(ReviewDetail.model_validate(r) for r in page)
        )


class RestaurantScoresView(PublicAPIView):
    """Stored stars next to the computed average for each restaurant."""

    def get(self, request):
        """Handle GET request for restaurant scores (``min_reviews`` optional)."""
        query, error = _parse(RankingQuery, request.query_params.dict())
        if error:
            return error

        scores = analytics_service.restaurant_scores(min_reviews=query.min_reviews or 0)
        return Response(_dump_all(scores), status=status.HTTP_200_OK)


class TopRestaurantsView(PublicAPIView):
    """Restaurants ranked by average review score."""

    def get(self, request):
        """Handle GET request for the top restaurants.

        ``min_reviews`` defaults to 1 so unreviewed restaurants are not ranked.
        """
        query, error = _parse(RankingQuery, request.query_params.dict())
        if error:
            return error

        min_reviews = 1 if query.min_reviews is None else query.min_reviews
        ranking = analytics_service.top_restaurants(
            limit=query.limit, min_reviews=min_reviews
        )
        return Response(_dump_all(ranking), status=status.HTTP_200_OK)


class DistrictSummaryView(PublicAPIView):
    """Restaurant figures per district."""

    def get(self, _request):
        """Handle GET request for the district summary."""
        return Response(
            _dump_all(analytics_service.district_summary()), status=status.HTTP_200_OK
        )


class PlatformSummaryView(PublicAPIView):
    """Review figures per source platform."""

    def get(self, _request):
        """Handle GET request for the platform summary."""
        return Response(
            _dump_all(analytics_service.platform_summary()), status=status.HTTP_200_OK
        )


class TierBreakdownView(PublicAPIView):
    """Restaurant counts per popularity and price tier."""

    def get(self, _request):
        """Handle GET request for the tier breakdown."""
        breakdown = analytics_service.tier_breakdown()
        return Response(breakdown.model_dump(mode="json"), status=status.HTTP_200_OK)


class TopReviewersView(PublicAPIView):
    """Most active review authors."""

    def get(self, request):
        """Handle GET request for the top reviewers (``limit`` optional)."""
        query, error = _parse(RankingQuery, request.query_params.dict())
        if error:
            return error

        reviewers = analytics_service.top_reviewers(limit=query.limit)
        return Response(_dump_all(reviewers), status=status.HTTP_200_OK)


class ReviewLengthView(PublicAPIView):
    """Review body length figures per score."""

    def get(self, _request):
        """Handle GET request for review lengths by score."""
        return Response(
            _dump_all(analytics_service.review_length_by_score()),
            status=status.HTTP_200_OK,
        )


class UnreviewedRestaurantsView(PublicAPIView):
    """Restaurants without any linked review."""

    def get(self, _request):
        """Handle GET request for unreviewed restaurants."""
        return Response(
            _dump_all(analytics_service.unreviewed_restaurants()),
            status=status.HTTP_200_OK,
        )


class RatingDriftView(PublicAPIView):
    """Restaurants whose stored stars disagree with their reviews."""

    def get(self, request):
        """Handle GET request for the rating drift report.

        Returns:
            200 OK with RatingDriftResponse
            400 Bad Request if the tolerance is invalid
        """
        query, error = _parse(RatingDriftQuery, request.query_params.dict())
        if error:
            return error

        tolerance = query.tolerance
        if tolerance is None:
            tolerance = settings.RATING_DRIFT_TOLERANCE

        drift = rating_service.find_drift(tolerance=tolerance)
        response = RatingDriftResponse(
            tolerance=tolerance, drift_count=len(drift), restaurants=drift
        )
        return Response(response.model_dump(mode="json"), status=status.HTTP_200_OK)


class RatingSyncView(PublicAPIView):
    """Recompute stored stars from review scores."""

    def post(self, request):
        """Handle POST request to refresh stars.

        Body: optional ``restaurant_ids``; all restaurants when omitted.

        Returns:
            200 OK with RatingSyncResponse
            400 Bad Request if the body is invalid
        """
        sync_request, error = _parse(RatingSyncRequest, request.data or {})
        if error:
            return error

        if sync_request.restaurant_ids:
            updated = rating_service.refresh_stars(sync_request.restaurant_ids)
        else:
            updated = rating_service.refresh_all()

        logger.info(
            "rating_sync_requested",
            restaurant_ids=sync_request.restaurant_ids,
            updated_count=updated,
        )
        response = RatingSyncResponse(
            updated_count=updated, sync_mode=rating_service.sync_mode()
        )
        return Response(response.model_dump(mode="json"), status=status.HTTP_200_OK)
