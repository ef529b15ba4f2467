"""URL routing configuration for core application."""

from django.urls import path

from .views import (
    DistrictSummaryView,
    LivenessCheckView,
    PlatformSummaryView,
    RatingDriftView,
    RatingSyncView,
    ReadinessCheckView,
    RestaurantDetailView,
    RestaurantListView,
    RestaurantReviewListView,
    RestaurantScoreDistributionView,
    RestaurantScoresView,
    ReviewLengthView,
    ReviewListView,
    TierBreakdownView,
    TopRestaurantsView,
    TopReviewersView,
    UnreviewedRestaurantsView,
)

urlpatterns = [
    # Health check endpoints
    path("health/live", LivenessCheckView.as_view(), name="health-live"),
    path("health/ready", ReadinessCheckView.as_view(), name="health-ready"),
    # Restaurant endpoints
    path("restaurants", RestaurantListView.as_view(), name="restaurant-list"),
    path(
        "restaurants/<int:restaurant_id>",
        RestaurantDetailView.as_view(),
        name="restaurant-detail",
    ),
    path(
        "restaurants/<int:restaurant_id>/reviews",
        RestaurantReviewListView.as_view(),
        name="restaurant-reviews",
    ),
    path(
        "restaurants/<int:restaurant_id>/score-distribution",
        RestaurantScoreDistributionView.as_view(),
        name="restaurant-score-distribution",
    ),
    # Review endpoints
    path("reviews", ReviewListView.as_view(), name="review-list"),
    # Analytics endpoints
    path(
        "analytics/restaurant-scores",
        RestaurantScoresView.as_view(),
        name="restaurant-scores",
    ),
    path(
        "analytics/top-restaurants",
        TopRestaurantsView.as_view(),
        name="top-restaurants",
    ),
    path(
        "analytics/districts",
        DistrictSummaryView.as_view(),
        name="district-summary",
    ),
    path(
        "analytics/platforms",
        PlatformSummaryView.as_view(),
        name="platform-summary",
    ),
    path("analytics/tiers", TierBreakdownView.as_view(), name="tier-breakdown"),
    path(
        "analytics/reviewers",
        TopReviewersView.as_view(),
        name="top-reviewers",
    ),
    path(
        "analytics/review-lengths",
        ReviewLengthView.as_view(),
        name="review-lengths",
    ),
    path(
        "analytics/unreviewed-restaurants",
        UnreviewedRestaurantsView.as_view(),
        name="unreviewed-restaurants",
    ),
    # Rating maintenance endpoints
    path("ratings/drift", RatingDriftView.as_view(), name="rating-drift"),
    path("ratings/sync", RatingSyncView.as_view(), name="rating-sync"),
]
