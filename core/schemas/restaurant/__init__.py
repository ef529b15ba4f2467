"""Restaurant schemas."""

from core.schemas.restaurant.restaurant_detail import RestaurantDetail
from core.schemas.restaurant.restaurant_list_query import RestaurantListQuery
from core.schemas.restaurant.restaurant_summary import RestaurantSummary
from core.schemas.restaurant.score_distribution import ScoreBucket, ScoreDistribution

__all__ = [
    "RestaurantDetail",
    "RestaurantListQuery",
    "RestaurantSummary",
    "ScoreBucket",
    "ScoreDistribution",
]
