"""
Greedy pallet re-optimization.

Places the heaviest pallets nearest the station that corresponds to the
middle of the CoB envelope, spreading outward one station at a time.

ASSUMPTIONS:
- The envelope midpoint is mapped linearly onto the cargo floor
  (mid% of cargo length), then matched against station RDL distances.
- Rolling stock and passengers stay where they are; only pallets move.
- Ties in weight keep their original list order.
"""

import logging
from typing import Optional

from loadmaster.models.aircraft import AircraftSpec
from loadmaster.models.cargo import PalletPlacement
from loadmaster.models.flight import FlightLoad

logger = logging.getLogger(__name__)


def target_position(spec: AircraftSpec) -> float:
    """Cargo-floor position of the envelope midpoint (in)."""
    return spec.cob_midpoint_percent / 100 * spec.cargo_length


def center_index(spec: AircraftSpec) -> int:
    """
    Index of the first station at or aft of the target position.

    Falls back to the middle of the station list when every station is
    forward of the target.
    """
    target = target_position(spec)
    for index, station in enumerate(spec.stations):
        if station.rdl_distance >= target:
            return index
    return len(spec.stations) // 2


def assignment_order(center: int, station_count: int, needed: int) -> list[int]:
    """
    Station indices alternating outward from ``center``.

    Yields center, center+1, center-1, center+2, center-2, ... and keeps
    going on the remaining side once one end of the list is reached.

    Args:
        center: Index to start from
        station_count: Number of stations available
        needed: Number of indices wanted

    Returns:
        At most ``min(needed, station_count)`` distinct indices
    """
    needed = min(needed, station_count)
    if needed <= 0:
        return []

    order = [center]
    offset = 1
    while len(order) < needed:
        aft = center + offset
        fwd = center - offset
        if aft < station_count:
            order.append(aft)
        if fwd >= 0 and len(order) < needed:
            order.append(fwd)
        offset += 1
    return order


def reoptimize(load: FlightLoad, spec: Optional[AircraftSpec] = None) -> FlightLoad:
    """
    Reassign pallets to stations around the envelope midpoint.

    Args:
        load: Flight load to re-plan
        spec: Aircraft specification; must equal the load's catalog entry when given

    Returns:
        A new FlightLoad marked modified. The input is not changed; a load
        without pallets is returned as is.

    Raises:
        ValueError: if ``spec`` differs from the load's catalog entry
    """
    if spec is not None and spec != load.spec:
        raise ValueError(
            f"Cannot re-optimize {load.aircraft_type.value} flight {load.id} "
            f"against a different {spec.type.value} specification"
        )
    if not load.pallets:
        return load

    spec = load.spec
    station_count = len(spec.stations)

    by_weight = sorted(load.pallets, key=lambda p: p.pallet.gross_weight, reverse=True)
    if len(by_weight) > station_count:
        dropped = [p.pallet.id for p in by_weight[station_count:]]
        logger.warning(
            "Flight %s: %d pallets exceed %d stations, dropping %s",
            load.id, len(by_weight), station_count, ", ".join(dropped),
        )
        by_weight = by_weight[:station_count]

    center = center_index(spec)
    indices = sorted(assignment_order(center, station_count, len(by_weight)))

    placements = []
    for placement, index in zip(by_weight, indices):
        station = spec.stations[index]
        placements.append(
            PalletPlacement(
                pallet=placement.pallet,
                station_index=index,
                longitudinal_coord=station.rdl_distance,
                is_ramp=station.is_ramp,
            )
        )

    result = load.rebuild(pallets=tuple(placements), is_modified=True)
    logger.debug(
        "Flight %s re-optimized around station %d: cob %.2f%%MAC",
        load.id, center + 1, result.cob_percent,
    )
    if not result.cob.in_envelope:
        logger.warning(
            "Flight %s still outside envelope after re-optimization (%.1f%%MAC)",
            load.id, result.cob_percent,
        )
    return result
