"""
Pydantic models for aircraft, cargo, flight loads and results.
"""

from loadmaster.models.aircraft import AircraftType, StationConstraint, SeatZone, AircraftSpec
from loadmaster.models.cargo import (
    ContentItem,
    Pallet,
    Vehicle,
    PassengerBlock,
    PalletPlacement,
    VehiclePlacement,
)
from loadmaster.models.results import (
    EnvelopeStatus,
    CobResult,
    EnvelopeLimits,
    EnvelopePosition,
    IssueCode,
    ValidationIssue,
    ValidationResult,
    StationCheck,
    AircraftEstimate,
)
from loadmaster.models.flight import FlightLoad, SplitResult, TransferResult

__all__ = [
    "AircraftType",
    "StationConstraint",
    "SeatZone",
    "AircraftSpec",
    "ContentItem",
    "Pallet",
    "Vehicle",
    "PassengerBlock",
    "PalletPlacement",
    "VehiclePlacement",
    "EnvelopeStatus",
    "CobResult",
    "EnvelopeLimits",
    "EnvelopePosition",
    "IssueCode",
    "ValidationIssue",
    "ValidationResult",
    "StationCheck",
    "AircraftEstimate",
    "FlightLoad",
    "SplitResult",
    "TransferResult",
]
