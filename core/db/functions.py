"""Restaurant and review classifiers.

Every classifier exists in three forms that agree for every input:

- a plain Python callable, also registered as a SQLite function,
- a portable ORM expression (``Case``/``When`` or ``Length``),
- a ``Func`` that calls the database-side function installed by
  ``core.db.installer``.

NULL input always yields NULL output.
"""

from collections.abc import Sequence
from enum import Enum

from django.db.models import Case, CharField, Func, IntegerField, Value, When
from django.db.models.functions import Length

from core.constants import (
    POPULARITY_FLOOR_TIER,
    POPULARITY_THRESHOLDS,
    PRICE_FLOOR_TIER,
    PRICE_THRESHOLDS,
)


def _classify(
    value: int | None, thresholds: Sequence[tuple[int, Enum]], floor: Enum
) -> str | None:
    if value is None:
        return None
    for minimum, tier in thresholds:
        if value >= minimum:
            return tier.value
    return floor.value


def review_length(body: str | None) -> int | None:
    """Return the number of characters in a review body."""
    if body is None:
        return None
    return len(body)


def popularity_tier(review_count: int | None) -> str | None:
    """Classify a restaurant by its platform review count."""
    return _classify(review_count, POPULARITY_THRESHOLDS, POPULARITY_FLOOR_TIER)


def price_tier(price_range: int | None) -> str | None:
    """Classify a restaurant by its price level."""
    return _classify(price_range, PRICE_THRESHOLDS, PRICE_FLOOR_TIER)


def _tier_case(
    field: str, thresholds: Sequence[tuple[int, Enum]], floor: Enum
) -> Case:
    whens = [
        When(**{f"{field}__gte": minimum}, then=Value(tier.value))
        for minimum, tier in thresholds
    ]
    whens.append(When(**{f"{field}__isnull": False}, then=Value(floor.value)))
    return Case(*whens, default=None, output_field=CharField())


def popularity_tier_expression(field: str = "review_count") -> Case:
    """Build the ORM expression equivalent of ``popularity_tier``."""
    return _tier_case(field, POPULARITY_THRESHOLDS, POPULARITY_FLOOR_TIER)


def price_tier_expression(field: str = "price_range") -> Case:
    """Build the ORM expression equivalent of ``price_tier``."""
    return _tier_case(field, PRICE_THRESHOLDS, PRICE_FLOOR_TIER)


def review_length_expression(field: str = "body") -> Length:
    """Build the ORM expression equivalent of ``review_length``."""
    return Length(field)


def tier_case_sql(column: str, thresholds: Sequence[tuple[int, Enum]], floor: Enum) -> str:
    """Render a classifier as a SQL CASE over ``column``.

    Used to generate database-side function bodies from the same thresholds
    as the Python callables.
    """
    branches = " ".join(
        f"WHEN {column} >= {int(minimum)} THEN '{tier.value}'"
        for minimum, tier in thresholds
    )
    return (
        f"CASE WHEN {column} IS NULL THEN NULL {branches} "
        f"ELSE '{floor.value}' END"
    )


class DbReviewLength(Func):
    """Call the installed ``review_length`` database function."""

    function = "review_length"
    arity = 1
    output_field = IntegerField()


class DbPopularityTier(Func):
    """Call the installed ``popularity_tier`` database function."""

    function = "popularity_tier"
    arity = 1
    output_field = CharField()


class DbPriceTier(Func):
    """Call the installed ``price_tier`` database function."""

    function = "price_tier"
    arity = 1
    output_field = CharField()


# name -> (callable, argument count); registered on every SQLite connection
SQLITE_FUNCTIONS = {
    "review_length": (review_length, 1),
    "popularity_tier": (popularity_tier, 1),
    "price_tier": (price_tier, 1),
}
