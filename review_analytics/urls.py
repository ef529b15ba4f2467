"""Root URL configuration for the restaurant review analytics service."""

from django.urls import include, path

urlpatterns = [
    path("api/v1/restaurant-reviews/", include("core.urls")),
]
