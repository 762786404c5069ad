"""
Center of balance solver.

Converts placed loads into a total moment, a CG station and a CoB
percentage of the Mean Aerodynamic Chord, then places that value against
the aircraft's envelope.

ASSUMPTIONS:
- Pallet and vehicle coordinates are measured from the start of the cargo
  bay; adding ``cargo_bay_fs_start`` gives the arm from the aircraft datum.
- Passengers are one point load at the center of a fixed seating zone.
- Only longitudinal balance is computed; lateral offsets are ignored.

Equations:
    arm       = coord + cargo_bay_fs_start
    CG        = sum(W * arm) / sum(W)
    CoB %MAC  = (CG - LEMAC) / MAC * 100
"""

import logging
from typing import Iterable

from loadmaster.constants import (
    PAX_SEATING_ZONE_SPAN_IN,
    PAX_WEIGHT_LB,
    PAX_ZONE_FRACTION,
)
from loadmaster.models.aircraft import AircraftSpec
from loadmaster.models.cargo import PalletPlacement, VehiclePlacement
from loadmaster.models.results import (
    CobResult,
    EnvelopeLimits,
    EnvelopePosition,
    EnvelopeStatus,
)

logger = logging.getLogger(__name__)


def pallet_arm(placement: PalletPlacement, spec: AircraftSpec) -> float:
    """Arm of a placed pallet from the aircraft datum (in)."""
    return placement.longitudinal_coord + spec.cargo_bay_fs_start


def vehicle_arm(placement: VehiclePlacement, spec: AircraftSpec) -> float:
    """Arm of a vehicle's center from the aircraft datum (in)."""
    return placement.vehicle.longitudinal_position + spec.cargo_bay_fs_start


def passenger_arm(spec: AircraftSpec) -> float:
    """Arm of the passenger point load: the middle of the seating zone."""
    return (
        spec.cargo_bay_fs_start
        + spec.cargo_length * PAX_ZONE_FRACTION
        + PAX_SEATING_ZONE_SPAN_IN / 2
    )


def cg_to_mac_percent(cg_station: float, spec: AircraftSpec) -> float:
    """Convert a CG station to raw %MAC."""
    return (cg_station - spec.lemac_station) / spec.mac_length * 100


def mac_percent_to_station(percent: float, spec: AircraftSpec) -> float:
    """Convert %MAC to a station measured from the datum."""
    return spec.lemac_station + percent / 100 * spec.mac_length


def clamp_percent(value: float) -> float:
    """Clamp a percentage to 0-100 for display."""
    return max(0.0, min(100.0, value))


def envelope_status(cob_percent: float, spec: AircraftSpec) -> tuple[EnvelopeStatus, float]:
    """
    Place a raw %MAC value against the envelope.

    Returns:
        Tuple of (status, deviation). Deviation is the signed distance to
        the violated limit: negative when forward, positive when aft.
    """
    if cob_percent < spec.cob_min_percent:
        return EnvelopeStatus.FORWARD_OF_LIMIT, cob_percent - spec.cob_min_percent
    if cob_percent > spec.cob_max_percent:
        return EnvelopeStatus.AFT_OF_LIMIT, cob_percent - spec.cob_max_percent
    return EnvelopeStatus.WITHIN_LIMITS, 0.0


def _result(
    spec: AircraftSpec,
    total_weight: float,
    total_moment: float,
    cg_station: float,
    cob_percent: float,
) -> CobResult:
    status, deviation = envelope_status(cob_percent, spec)
    return CobResult(
        total_weight=total_weight,
        total_moment=total_moment,
        cg_station=cg_station,
        cob_percent=cob_percent,
        display_percent=clamp_percent(cob_percent),
        in_envelope=status is EnvelopeStatus.WITHIN_LIMITS,
        deviation=deviation,
        status=status,
        min_allowed=spec.cob_min_percent,
        max_allowed=spec.cob_max_percent,
    )


def solve_cob(
    pallets: Iterable[PalletPlacement],
    vehicles: Iterable[VehiclePlacement],
    pax_count: int,
    spec: AircraftSpec,
) -> CobResult:
    """
    Compute the center of balance for a cargo set.

    Args:
        pallets: Placed pallets
        vehicles: Placed rolling stock
        pax_count: Number of passengers
        spec: Aircraft specification

    Returns:
        CobResult with CG station, raw and display %MAC and envelope status

    Notes:
        - An empty (zero-weight) load returns the envelope midpoint and
          counts as balanced.
        - The envelope decision always uses the raw %MAC. Clamping applies
          to ``display_percent`` only.
    """
    total_moment = 0.0
    total_weight = 0.0

    for placement in pallets:
        weight = placement.pallet.gross_weight
        total_moment += weight * pallet_arm(placement, spec)
        total_weight += weight

    for placement in vehicles:
        weight = placement.vehicle.weight
        total_moment += weight * vehicle_arm(placement, spec)
        total_weight += weight

    if pax_count > 0:
        weight = pax_count * PAX_WEIGHT_LB
        total_moment += weight * passenger_arm(spec)
        total_weight += weight

    if total_weight == 0:
        midpoint = spec.cob_midpoint_percent
        return _result(spec, 0.0, 0.0, mac_percent_to_station(midpoint, spec), midpoint)

    cg_station = total_moment / total_weight
    cob_percent = cg_to_mac_percent(cg_station, spec)
    logger.debug(
        "%s CoB: weight=%.0f lb cg=%.1f in cob=%.2f%%MAC",
        spec.type.value, total_weight, cg_station, cob_percent,
    )
    return _result(spec, total_weight, total_moment, cg_station, cob_percent)


def envelope_limits(spec: AircraftSpec) -> EnvelopeLimits:
    """
    Convert the %MAC envelope to station coordinates.

    Forward limit = LEMAC + min% x MAC, aft limit = LEMAC + max% x MAC.
    """
    fwd_limit = mac_percent_to_station(spec.cob_min_percent, spec)
    aft_limit = mac_percent_to_station(spec.cob_max_percent, spec)
    return EnvelopeLimits(
        fwd_limit=fwd_limit,
        aft_limit=aft_limit,
        usable_length=aft_limit - fwd_limit,
        target_station=(fwd_limit + aft_limit) / 2,
    )


def station_to_envelope_percent(cg_station: float, spec: AircraftSpec) -> EnvelopePosition:
    """
    Express a CG station as a percentage of the usable envelope.

    The forward limit maps to 0 %, the aft limit to 100 % and the target
    to 50 %. Stations outside the envelope are pinned to 0 or 100.
    """
    limits = envelope_limits(spec)
    mac_percent = cg_to_mac_percent(cg_station, spec)

    if cg_station < limits.fwd_limit:
        return EnvelopePosition(
            percent=0.0, status=EnvelopeStatus.FORWARD_OF_LIMIT, mac_percent=mac_percent
        )
    if cg_station > limits.aft_limit:
        return EnvelopePosition(
            percent=100.0, status=EnvelopeStatus.AFT_OF_LIMIT, mac_percent=mac_percent
        )

    percent = (cg_station - limits.fwd_limit) / limits.usable_length * 100
    return EnvelopePosition(
        percent=clamp_percent(percent),
        status=EnvelopeStatus.WITHIN_LIMITS,
        mac_percent=mac_percent,
    )


def format_percent(value: float) -> str:
    """One decimal place, as shown on load plans."""
    return f"{value:.1f}"


def format_weight(value: float) -> str:
    """Whole pounds with thousands separators."""
    return f"{value:,.0f}"


def format_limit(value: float) -> str:
    """Envelope limits print without a trailing '.0'."""
    return f"{value:g}"


def cob_status_message(result: CobResult) -> str:
    """One-line CoB summary for reports."""
    limits = f"{format_limit(result.min_allowed)}-{format_limit(result.max_allowed)}%"
    if result.in_envelope:
        return f"CoB {format_percent(result.cob_percent)}% MAC - Within envelope ({limits})"

    if result.status is EnvelopeStatus.FORWARD_OF_LIMIT:
        direction, limit = "forward", result.min_allowed
    else:
        direction, limit = "aft", result.max_allowed
    return (
        f"WARNING: CoB {format_percent(result.cob_percent)}% MAC exceeds {direction} "
        f"limit ({format_limit(limit)}%) by {format_percent(abs(result.deviation))}%"
    )
