"""
Loadmaster (loadmaster)

Weight and balance engine for military airlift. Computes total weight and
center of balance for a flight load, validates it against the aircraft's
payload, position and %MAC envelope limits, re-plans pallet stations, and
splits, transfers and merges loads between flights.

WARNING: This tool is a planning aid only. It does not replace a certified
load plan or the aircraft loading manual.

Usage:
    python -m loadmaster make-example
    python -m loadmaster analyze --input example_load.json --readable
    python -m loadmaster reoptimize --input example_load.json
    python -m loadmaster serve --port 8000
"""

__version__ = "0.1.0"
__author__ = "Loadmaster Project"

from loadmaster.models.aircraft import AircraftType, AircraftSpec, StationConstraint
from loadmaster.models.cargo import Pallet, Vehicle, PalletPlacement, VehiclePlacement
from loadmaster.models.flight import FlightLoad, SplitResult, TransferResult
from loadmaster.models.results import CobResult, ValidationResult
from loadmaster.catalog.specs import spec_for, list_aircraft, UnknownAircraftType
from loadmaster.balance.cob import solve_cob
from loadmaster.balance.weight import total_weight
from loadmaster.checks.validator import validate
from loadmaster.planner.placement import reoptimize
from loadmaster.planner.flights import split, transfer, merge

__all__ = [
    "AircraftType",
    "AircraftSpec",
    "StationConstraint",
    "Pallet",
    "Vehicle",
    "PalletPlacement",
    "VehiclePlacement",
    "FlightLoad",
    "SplitResult",
    "TransferResult",
    "CobResult",
    "ValidationResult",
    "spec_for",
    "list_aircraft",
    "UnknownAircraftType",
    "solve_cob",
    "total_weight",
    "validate",
    "reoptimize",
    "split",
    "transfer",
    "merge",
]
