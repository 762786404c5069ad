"""
Weight aggregation for a cargo set.

Total load weight is the sum of pallet gross weights, vehicle weights and
passenger weight at a fixed per-head allowance.
"""

from typing import Iterable

from loadmaster.constants import PAX_WEIGHT_LB
from loadmaster.models.cargo import PalletPlacement, VehiclePlacement


def pallet_weight(pallets: Iterable[PalletPlacement]) -> float:
    """Sum of pallet gross weights (lb)."""
    return sum((p.pallet.gross_weight for p in pallets), 0.0)


def vehicle_weight(vehicles: Iterable[VehiclePlacement]) -> float:
    """Sum of vehicle weights (lb)."""
    return sum((v.vehicle.weight for v in vehicles), 0.0)


def passenger_weight(pax_count: int) -> float:
    """Weight of ``pax_count`` passengers with gear (lb)."""
    if pax_count < 0:
        raise ValueError("Passenger count must be non-negative")
    return pax_count * PAX_WEIGHT_LB


def total_weight(
    pallets: Iterable[PalletPlacement],
    vehicles: Iterable[VehiclePlacement],
    pax_count: int,
) -> float:
    """
    Total load weight for a cargo set.

    Args:
        pallets: Placed pallets
        vehicles: Placed rolling stock
        pax_count: Number of passengers

    Returns:
        Total weight in pounds; 0 for an empty cargo set
    """
    return pallet_weight(pallets) + vehicle_weight(vehicles) + passenger_weight(pax_count)
