"""Analytics schemas."""

from core.schemas.analytics.district_summary import DistrictSummary
from core.schemas.analytics.platform_summary import PlatformSummary
from core.schemas.analytics.ranking_query import RankingQuery
from core.schemas.analytics.restaurant_score import RestaurantScore
from core.schemas.analytics.reviewer_summary import ReviewerSummary
from core.schemas.analytics.score_length_summary import ScoreLengthSummary
from core.schemas.analytics.tier_breakdown import TierBreakdown

__all__ = [
    "DistrictSummary",
    "PlatformSummary",
    "RankingQuery",
    "RestaurantScore",
    "ReviewerSummary",
    "ScoreLengthSummary",
    "TierBreakdown",
]
