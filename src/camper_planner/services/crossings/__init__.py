"""Channel crossing reference data and selection."""

from .catalog import get_crossing, load_crossings
from .selector import (
    RankedCrossing,
    is_mainland_europe,
    is_uk_or_ireland,
    needs_crossing,
    rank_crossings,
    rank_crossings_detailed,
)

__all__ = [
    "RankedCrossing",
    "get_crossing",
    "is_mainland_europe",
    "is_uk_or_ireland",
    "load_crossings",
    "needs_crossing",
    "rank_crossings",
    "rank_crossings_detailed",
]
