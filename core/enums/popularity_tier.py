"""Popularity tier enumeration for restaurants."""

from enum import Enum


class PopularityTier(str, Enum):
    """Popularity tier derived from a restaurant's review count."""

    POPULAR = "popular"
    ESTABLISHED = "established"
    EMERGING = "emerging"
    NEW = "new"
