"""
Load validation against catalog limits.

``validate`` applies the aircraft-wide hard limits in a fixed order:

    1. Total weight against maximum payload
    2. Pallet count against available positions
    3. Raw CoB against the %MAC envelope

Every check runs; a load that breaks several rules reports all of them.
Violations are returned as issues, never raised.

``check_station_limits`` is a separate, finer-grained pass over each
placed pallet and the passenger count.
"""

from typing import Optional

from loadmaster.balance.cob import format_limit, format_percent, format_weight, solve_cob
from loadmaster.balance.stations import validate_station_placement
from loadmaster.constants import PALLET_463L_WIDTH_IN
from loadmaster.models.aircraft import AircraftSpec
from loadmaster.models.flight import FlightLoad
from loadmaster.models.results import IssueCode, ValidationIssue, ValidationResult


def check_payload(load: FlightLoad, spec: AircraftSpec) -> Optional[ValidationIssue]:
    """Total weight must not exceed maximum payload."""
    weight = load.total_weight
    if weight > spec.max_payload:
        return ValidationIssue(
            code=IssueCode.OVERWEIGHT,
            message=(
                f"Overweight: {format_weight(weight)} lbs exceeds "
                f"{format_weight(spec.max_payload)} lbs max"
            ),
        )
    return None


def check_pallet_count(load: FlightLoad, spec: AircraftSpec) -> Optional[ValidationIssue]:
    """Pallet count must fit the available positions."""
    count = len(load.pallets)
    if count > spec.pallet_positions:
        return ValidationIssue(
            code=IssueCode.TOO_MANY_PALLETS,
            message=f"Too many pallets: {count} exceeds {spec.pallet_positions} positions",
        )
    return None


def check_cob_envelope(load: FlightLoad, spec: AircraftSpec) -> Optional[ValidationIssue]:
    """Raw (unclamped) CoB, solved against ``spec``, must lie within its envelope."""
    cob = solve_cob(load.pallets, load.vehicles, load.pax_count, spec).cob_percent
    if cob < spec.cob_min_percent or cob > spec.cob_max_percent:
        return ValidationIssue(
            code=IssueCode.COB_OUT_OF_ENVELOPE,
            message=(
                f"Center of balance {format_percent(cob)}% outside safe envelope "
                f"({format_limit(spec.cob_min_percent)}-{format_limit(spec.cob_max_percent)}%)"
            ),
        )
    return None


# Order is part of the contract: weight, then pallet count, then CoB.
LOAD_CHECKS = (check_payload, check_pallet_count, check_cob_envelope)


def validate(load: FlightLoad, spec: Optional[AircraftSpec] = None) -> ValidationResult:
    """
    Validate a flight load against its aircraft's hard limits.

    Args:
        load: Flight load to check
        spec: Aircraft specification; defaults to the load's catalog entry

    Returns:
        ValidationResult with issues in check order
    """
    spec = spec or load.spec
    issues = []
    for check in LOAD_CHECKS:
        issue = check(load, spec)
        if issue is not None:
            issues.append(issue)
    return ValidationResult.from_issues(issues)


def check_station_limits(load: FlightLoad, spec: Optional[AircraftSpec] = None) -> ValidationResult:
    """
    Check every placed pallet against its station, and passengers against seats.

    Pallets whose station index lies beyond the station table are reported
    by ``validate`` as a pallet-count issue and skipped here.
    """
    spec = spec or load.spec
    issues = []

    for placement in load.pallets:
        position = placement.station_index + 1
        if position > len(spec.stations):
            continue
        pallet = placement.pallet
        check = validate_station_placement(
            spec, position, pallet.height, PALLET_463L_WIDTH_IN, pallet.gross_weight
        )
        for issue in check.issues:
            issues.append(
                ValidationIssue(code=issue.code, message=f"Pallet {pallet.id}: {issue.message}")
            )

    if load.pax_count > spec.seat_capacity:
        issues.append(
            ValidationIssue(
                code=IssueCode.SEAT_CAPACITY,
                message=f"Too many passengers: {load.pax_count} exceeds {spec.seat_capacity} seats",
            )
        )

    return ValidationResult.from_issues(issues)
