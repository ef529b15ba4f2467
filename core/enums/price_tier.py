"""Price tier enumeration for restaurants."""

from enum import Enum


class PriceTier(str, Enum):
    """Price tier derived from a restaurant's price range."""

    PREMIUM = "premium"
    MODERATE = "moderate"
    BUDGET = "budget"
