"""Constants used throughout the review analytics application."""

from core.enums import PopularityTier, PriceTier

# HTTP Headers
REQUEST_ID_HEADER = "X-Request-ID"
PROCESS_TIME_HEADER = "X-Process-Time"

# Performance Thresholds
SLOW_REQUEST_THRESHOLD = 1.0  # Log requests slower than 1 second

# Review score bounds (inclusive)
MIN_REVIEW_SCORE = 1
MAX_REVIEW_SCORE = 5

# Price level bounds (inclusive), one level per currency sign
MIN_PRICE_RANGE = 1
MAX_PRICE_RANGE = 4

# Classifier thresholds, highest first: (minimum value, tier)
POPULARITY_THRESHOLDS = (
    (500, PopularityTier.POPULAR),
    (100, PopularityTier.ESTABLISHED),
    (10, PopularityTier.EMERGING),
)
POPULARITY_FLOOR_TIER = PopularityTier.NEW

PRICE_THRESHOLDS = (
    (3, PriceTier.PREMIUM),
    (2, PriceTier.MODERATE),
)
PRICE_FLOOR_TIER = PriceTier.BUDGET

# Label used when a classifier input is NULL in grouped reports
UNKNOWN_TIER = "unknown"

# Default result sizes for ranked analytics queries
DEFAULT_RANKING_LIMIT = 10
MAX_RANKING_LIMIT = 100
