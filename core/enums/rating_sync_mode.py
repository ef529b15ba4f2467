"""Rating synchronization mode enumeration."""

from enum import Enum


class RatingSyncMode(str, Enum):
    """Which mechanism keeps ``restaurants.stars`` in step with reviews."""

    SIGNAL = "signal"
    TRIGGER = "trigger"
    OFF = "off"
