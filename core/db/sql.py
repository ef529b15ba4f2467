"""Vendor-specific DDL for the classifier functions and the rating trigger."""

from core.constants import (
    POPULARITY_FLOOR_TIER,
    POPULARITY_THRESHOLDS,
    PRICE_FLOOR_TIER,
    PRICE_THRESHOLDS,
)
from core.db.functions import tier_case_sql

TRIGGER_NAME = "reviews_sync_stars"
TRIGGER_FUNCTION_NAME = "restaurants_sync_stars"


def refresh_stars_sql(where: str) -> str:
    """Build an UPDATE that recomputes stars for restaurants matching ``where``."""
    return (
        "UPDATE restaurants SET stars = ("
        "SELECT AVG(r.score) FROM reviews r WHERE r.service = restaurants.id"
        f") WHERE {where}"
    )


_REFRESH_NEW = refresh_stars_sql("id = NEW.service")
_REFRESH_OLD = refresh_stars_sql("id = OLD.service")
_REFRESH_BOTH = refresh_stars_sql("id IN (OLD.service, NEW.service)")

# SQLite

SQLITE_TRIGGER_NAMES = (
    f"{TRIGGER_NAME}_insert",
    f"{TRIGGER_NAME}_update",
    f"{TRIGGER_NAME}_delete",
)

SQLITE_CREATE_TRIGGERS = (
    f"CREATE TRIGGER {TRIGGER_NAME}_insert AFTER INSERT ON reviews "
    f"BEGIN {_REFRESH_NEW}; END",
    f"CREATE TRIGGER {TRIGGER_NAME}_update AFTER UPDATE OF score, service "
    f"ON reviews BEGIN {_REFRESH_BOTH}; END",
    f"CREATE TRIGGER {TRIGGER_NAME}_delete AFTER DELETE ON reviews "
    f"BEGIN {_REFRESH_OLD}; END",
)

SQLITE_DROP_TRIGGERS = tuple(
    f"DROP TRIGGER IF EXISTS {name}" for name in SQLITE_TRIGGER_NAMES
)

SQLITE_TRIGGER_COUNT = (
    "SELECT COUNT(*) FROM sqlite_master WHERE type = 'trigger' AND name IN ("
    + ", ".join(f"'{name}'" for name in SQLITE_TRIGGER_NAMES)
    + ")"
)

# PostgreSQL

_POPULARITY_CASE = tier_case_sql(
    "review_count", POPULARITY_THRESHOLDS, POPULARITY_FLOOR_TIER
)
_PRICE_CASE = tier_case_sql("price_range", PRICE_THRESHOLDS, PRICE_FLOOR_TIER)

POSTGRES_CREATE_FUNCTIONS = (
    "CREATE OR REPLACE FUNCTION review_length(body text) RETURNS integer "
    "LANGUAGE sql IMMUTABLE AS $$ SELECT char_length(body) $$",
    "CREATE OR REPLACE FUNCTION popularity_tier(review_count integer) "
    f"RETURNS text LANGUAGE sql IMMUTABLE AS $$ SELECT {_POPULARITY_CASE} $$",
    "CREATE OR REPLACE FUNCTION price_tier(price_range integer) "
    f"RETURNS text LANGUAGE sql IMMUTABLE AS $$ SELECT {_PRICE_CASE} $$",
)

POSTGRES_DROP_FUNCTIONS = (
    "DROP FUNCTION IF EXISTS review_length(text)",
    "DROP FUNCTION IF EXISTS popularity_tier(integer)",
    "DROP FUNCTION IF EXISTS price_tier(integer)",
)

POSTGRES_CREATE_TRIGGER = (
    f"CREATE OR REPLACE FUNCTION {TRIGGER_FUNCTION_NAME}() RETURNS trigger "
    "LANGUAGE plpgsql AS $$\n"
    "BEGIN\n"
    "    IF TG_OP IN ('UPDATE', 'DELETE') THEN\n"
    f"        {_REFRESH_OLD};\n"
    "    END IF;\n"
    "    IF TG_OP IN ('INSERT', 'UPDATE') THEN\n"
    f"        {_REFRESH_NEW};\n"
    "    END IF;\n"
    "    RETURN NULL;\n"
    "END;\n"
    "$$",
    f"DROP TRIGGER IF EXISTS {TRIGGER_NAME} ON reviews",
    f"CREATE TRIGGER {TRIGGER_NAME} AFTER INSERT OR UPDATE OR DELETE ON reviews "
    f"FOR EACH ROW EXECUTE FUNCTION {TRIGGER_FUNCTION_NAME}()",
)

POSTGRES_DROP_TRIGGER = (
    f"DROP TRIGGER IF EXISTS {TRIGGER_NAME} ON reviews",
    f"DROP FUNCTION IF EXISTS {TRIGGER_FUNCTION_NAME}()",
)

POSTGRES_TRIGGER_COUNT = (
    "SELECT COUNT(*) FROM pg_trigger "
    f"WHERE tgname = '{TRIGGER_NAME}' AND NOT tgisinternal"
)
