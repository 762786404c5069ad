"""
Load planning operations.

Re-optimizes pallet stations around the CoB envelope midpoint, splits,
transfers and merges flights, and estimates aircraft counts.
"""

from loadmaster.planner.placement import reoptimize, target_position, center_index, assignment_order
from loadmaster.planner.flights import (
    SPECIAL_CARGO_STAYS_WITH_ORIGINAL,
    split,
    transfer,
    merge,
    next_callsign,
)
from loadmaster.planner.estimate import minimum_aircraft, quick_estimate, pallets_per_aircraft

__all__ = [
    "reoptimize",
    "target_position",
    "center_index",
    "assignment_order",
    "SPECIAL_CARGO_STAYS_WITH_ORIGINAL",
    "split",
    "transfer",
    "merge",
    "next_callsign",
    "minimum_aircraft",
    "quick_estimate",
    "pallets_per_aircraft",
]
