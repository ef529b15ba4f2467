"""Rating maintenance schemas."""

from core.schemas.rating.rating_drift import RatingDrift
from core.schemas.rating.rating_drift_query import RatingDriftQuery
from core.schemas.rating.rating_drift_response import RatingDriftResponse
from core.schemas.rating.rating_sync_request import RatingSyncRequest
from core.schemas.rating.rating_sync_response import RatingSyncResponse

__all__ = [
    "RatingDrift",
    "RatingDriftQuery",
    "RatingDriftResponse",
    "RatingSyncRequest",
    "RatingSyncResponse",
]
