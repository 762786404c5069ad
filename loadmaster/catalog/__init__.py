"""
Aircraft specification catalog.

Read-only lookup of per-type station tables, payload limits and CoB
envelopes, plus the shared loading constants.
"""

from loadmaster.catalog.specs import (
    AIRCRAFT_SPECS,
    C17_SPEC,
    C130_SPEC,
    UnknownAircraftType,
    list_aircraft,
    spec_for,
    station_for_position,
)
from loadmaster.constants import (
    PAX_WEIGHT_LB,
    PAX_SEATING_ZONE_SPAN_IN,
    PAX_ZONE_FRACTION,
    PALLET_463L_LENGTH_IN,
    PALLET_463L_SPACING_IN,
)

__all__ = [
    "AIRCRAFT_SPECS",
    "C17_SPEC",
    "C130_SPEC",
    "UnknownAircraftType",
    "list_aircraft",
    "spec_for",
    "station_for_position",
    "PAX_WEIGHT_LB",
    "PAX_SEATING_ZONE_SPAN_IN",
    "PAX_ZONE_FRACTION",
    "PALLET_463L_LENGTH_IN",
    "PALLET_463L_SPACING_IN",
]
