"""Services for the core app."""

from core.services.analytics_service import AnalyticsService, analytics_service
from core.services.health_service import HealthService, health_service
from core.services.rating_service import RatingService, rating_service
from core.services.restaurant_service import RestaurantService, restaurant_service

__all__ = [
    "AnalyticsService",
    "HealthService",
    "RatingService",
    "RestaurantService",
    "analytics_service",
    "health_service",
    "rating_service",
    "restaurant_service",
]
