"""Enumerations for the core app."""

from core.enums.health_status import HealthStatus
from core.enums.popularity_tier import PopularityTier
from core.enums.price_tier import PriceTier
from core.enums.rating_sync_mode import RatingSyncMode

__all__ = ["HealthStatus", "PopularityTier", "PriceTier", "RatingSyncMode"]
