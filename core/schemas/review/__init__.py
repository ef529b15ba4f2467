"""Review schemas."""

from core.schemas.review.review_detail import ReviewDetail
from core.schemas.review.review_list_query import ReviewListQuery

__all__ = ["ReviewDetail", "ReviewListQuery"]
