"""Schemas for the core app."""

from core.schemas.analytics import (
    DistrictSummary,
    PlatformSummary,
    RankingQuery,
    RestaurantScore,
    ReviewerSummary,
    ScoreLengthSummary,
    TierBreakdown,
)
from core.schemas.health import (
    DependencyHealth,
    LivenessResponse,
    ReadinessResponse,
)
from core.schemas.rating import (
    RatingDrift,
    RatingDriftQuery,
    RatingDriftResponse,
    RatingSyncRequest,
    RatingSyncResponse,
)
from core.schemas.restaurant import (
    RestaurantDetail,
    RestaurantListQuery,
    RestaurantSummary,
    ScoreBucket,
    ScoreDistribution,
)
from core.schemas.review import ReviewDetail, ReviewListQuery

__all__ = [
    "DependencyHealth",
    "DistrictSummary",
    "LivenessResponse",
    "PlatformSummary",
    "RankingQuery",
    "RatingDrift",
    "RatingDriftQuery",
    "RatingDriftResponse",
    "RatingSyncRequest",
    "RatingSyncResponse",
    "ReadinessResponse",
    "RestaurantDetail",
    "RestaurantListQuery",
    "RestaurantScore",
    "RestaurantSummary",
    "ReviewDetail",
    "ReviewListQuery",
    "ReviewerSummary",
    "ScoreBucket",
    "ScoreDistribution",
    "ScoreLengthSummary",
    "TierBreakdown",
]
