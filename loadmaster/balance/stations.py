"""
Per-station placement limits.

Each station has its own height, width and weight limit; ramp stations are
tighter than the main deck.
"""

from loadmaster.catalog.specs import station_for_position
from loadmaster.models.aircraft import AircraftSpec, StationConstraint
from loadmaster.models.results import IssueCode, StationCheck, ValidationIssue


def position_weight_limit(spec: AircraftSpec, station: StationConstraint) -> float:
    """Weight limit for a station, never above the aircraft-wide per-position limit."""
    aircraft_limit = spec.ramp_position_weight if station.is_ramp else spec.per_position_weight
    return min(station.max_weight, aircraft_limit)


def validate_station_placement(
    spec: AircraftSpec,
    position: int,
    height: float,
    width: float,
    weight: float,
) -> StationCheck:
    """
    Check whether a pallet fits at a station.

    Args:
        spec: Aircraft specification
        position: 1-indexed station position
        height: Pallet height (in)
        width: Pallet width (in)
        weight: Pallet gross weight (lb)

    Returns:
        StationCheck with one coded issue per exceeded limit
    """
    try:
        station = station_for_position(spec, position)
    except ValueError as e:
        issue = ValidationIssue(code=IssueCode.INVALID_STATION, message=str(e))
        return StationCheck(valid=False, issues=[issue])

    issues = []
    if height > station.max_height:
        issues.append(ValidationIssue(
            code=IssueCode.STATION_HEIGHT,
            message=f'Height {height:g}" exceeds station {position} limit of {station.max_height:g}"',
        ))
    if width > station.max_width:
        issues.append(ValidationIssue(
            code=IssueCode.STATION_WIDTH,
            message=f'Width {width:g}" exceeds station {position} limit of {station.max_width:g}"',
        ))
    limit = position_weight_limit(spec, station)
    if weight > limit:
        issues.append(ValidationIssue(
            code=IssueCode.STATION_OVERWEIGHT,
            message=f"Weight {weight:,.0f} lb exceeds station {position} limit of {limit:,.0f} lb",
        ))

    return StationCheck(valid=not issues, issues=issues)
