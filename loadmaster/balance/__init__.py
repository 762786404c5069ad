"""
Weight and balance calculations.

This module provides:
- Weight aggregation over pallets, rolling stock and passengers
- Moment-based center of balance in %MAC with envelope status
- Per-station placement limits
- pint unit helpers for metric reporting
"""

from loadmaster.balance.units import ureg, Q_, lb_to_kg, kg_to_lb, in_to_m, moment_lb_in_to_kg_m
from loadmaster.balance.weight import (
    total_weight,
    pallet_weight,
    vehicle_weight,
    passenger_weight,
)
from loadmaster.balance.cob import (
    solve_cob,
    pallet_arm,
    vehicle_arm,
    passenger_arm,
    cg_to_mac_percent,
    envelope_limits,
    station_to_envelope_percent,
    cob_status_message,
    format_percent,
    format_weight,
)
from loadmaster.balance.stations import validate_station_placement, position_weight_limit

__all__ = [
    # Units
    "ureg",
    "Q_",
    "lb_to_kg",
    "kg_to_lb",
    "in_to_m",
    "moment_lb_in_to_kg_m",
    # Weight
    "total_weight",
    "pallet_weight",
    "vehicle_weight",
    "passenger_weight",
    # CoB
    "solve_cob",
    "pallet_arm",
    "vehicle_arm",
    "passenger_arm",
    "cg_to_mac_percent",
    "envelope_limits",
    "station_to_envelope_percent",
    "cob_status_message",
    "format_percent",
    "format_weight",
    # Stations
    "validate_station_placement",
    "position_weight_limit",
]
