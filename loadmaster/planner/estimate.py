"""
Aircraft-count estimates for a lift.

A lift needs enough aircraft for both its floor space and its payload;
the larger of the two counts wins.

    pallets per aircraft = floor(cargo_length / (463L length + spacing))
    by_pallets           = ceil(pallets / pallets per aircraft)
    by_weight            = ceil(weight / max_payload)
"""

import math
from typing import Union

from loadmaster.catalog.specs import spec_for
from loadmaster.constants import (
    PALLET_463L_LENGTH_IN,
    PALLET_463L_SPACING_IN,
    VEHICLE_LENGTH_ESTIMATE_IN,
)
from loadmaster.models.aircraft import AircraftSpec, AircraftType
from loadmaster.models.results import AircraftEstimate


def pallets_per_aircraft(spec: AircraftSpec) -> int:
    """463L pallets that fit end to end on the cargo floor."""
    return int(spec.cargo_length // (PALLET_463L_LENGTH_IN + PALLET_463L_SPACING_IN))


def _counts(positions: float, weight: float, spec: AircraftSpec) -> tuple[int, int]:
    if positions < 0 or weight < 0:
        raise ValueError("Pallet count and weight must be non-negative")
    by_positions = math.ceil(positions / pallets_per_aircraft(spec))
    by_weight = math.ceil(weight / spec.max_payload)
    return by_positions, by_weight


def minimum_aircraft(
    total_pallets: int,
    total_weight: float,
    aircraft_type: Union[AircraftType, str],
) -> AircraftEstimate:
    """
    Minimum aircraft for a set of pallets.

    Args:
        total_pallets: Number of 463L pallets
        total_weight: Total lift weight (lb)
        aircraft_type: Aircraft to size against

    Returns:
        AircraftEstimate with both counts and the larger of them
    """
    spec = spec_for(aircraft_type)
    by_pallets, by_weight = _counts(total_pallets, total_weight, spec)
    return AircraftEstimate(
        by_pallets=by_pallets,
        by_weight=by_weight,
        minimum=max(by_pallets, by_weight),
        weight_limited=by_weight >= by_pallets,
        position_limited=by_pallets > by_weight,
    )


def quick_estimate(
    total_weight: float,
    pallet_count: int,
    rolling_stock_count: int,
    aircraft_type: Union[AircraftType, str],
) -> AircraftEstimate:
    """
    Rough aircraft count including rolling stock.

    Each vehicle is assumed to take a fixed length of floor, converted to
    pallet positions. Confidence drops to medium when vehicles are present
    since their real footprint is unknown.
    """
    if rolling_stock_count < 0:
        raise ValueError("Rolling stock count must be non-negative")

    spec = spec_for(aircraft_type)
    vehicle_positions = math.ceil(
        rolling_stock_count * VEHICLE_LENGTH_ESTIMATE_IN / PALLET_463L_LENGTH_IN
    )
    by_positions, by_weight = _counts(pallet_count + vehicle_positions, total_weight, spec)
    return AircraftEstimate(
        by_pallets=by_positions,
        by_weight=by_weight,
        minimum=max(by_positions, by_weight),
        weight_limited=by_weight >= by_positions,
        position_limited=by_positions > by_weight,
        confidence="medium" if rolling_stock_count > 0 else "high",
    )
