"""
Shared Enums

Application-wide enums used across multiple modules.
"""
from enum import Enum


class MedalClass(str, Enum):
    """Tier of an award. Values match the feed's medalType strings."""
    GOLD = "GOLD"
    SILVER = "SILVER"
    BRONZE = "BRONZE"


class PollerState(str, Enum):
    """Where the poller is within a cycle."""
    IDLE = "idle"
    FETCHING = "fetching"
    AGGREGATING = "aggregating"
    RANKING = "ranking"
    COMPARING = "comparing"
    EMITTING = "emitting"
    SLEEPING = "sleeping"
    STOPPED = "stopped"


# Dict version for lookups by wire value
MEDAL_CLASSES = {m.value: m for m in MedalClass}
