"""
Flight split, transfer and merge.

Every operation returns new FlightLoad values; inputs are never modified.
Weight and CoB on the results are derived from their new pallet lists.

Re-indexing renumbers ``station_index`` densely from 0 in list order.
Longitudinal coordinates are kept, so a moved pallet's moment arm does not
change until the flight is re-optimized.
"""

import logging
import math
import re
from typing import Iterable, Optional, Sequence

from loadmaster.models.cargo import PalletPlacement
from loadmaster.models.flight import FlightLoad, SplitResult, TransferResult

logger = logging.getLogger(__name__)

# Rolling stock and passengers remain on the original flight when it is split.
SPECIAL_CARGO_STAYS_WITH_ORIGINAL = True

_TRAILING_DIGITS = re.compile(r"(\d+)$")


def reindex(pallets: Iterable[PalletPlacement]) -> tuple[PalletPlacement, ...]:
    """Renumber placements 0..n-1 in list order."""
    return tuple(
        placement.model_copy(update={"station_index": index})
        for index, placement in enumerate(pallets)
    )


def next_callsign(callsign: str) -> str:
    """
    Increment the trailing number of a callsign, keeping its zero padding.

    REACH01 -> REACH02, REACH9 -> REACH10. A callsign without a number
    is treated as number 1.

    Keeping the padding departs from a plain integer increment, which
    would turn REACH01 into REACH2.
    """
    match = _TRAILING_DIGITS.search(callsign)
    if not match:
        return f"{callsign}2"
    digits = match.group(1)
    number = str(int(digits) + 1).zfill(len(digits))
    return callsign[: match.start()] + number


def default_split_index(load: FlightLoad) -> int:
    """Ceiling of half the pallet count."""
    return math.ceil(len(load.pallets) / 2)


def split(
    load: FlightLoad,
    split_index: Optional[int] = None,
    new_id: Optional[str] = None,
) -> SplitResult:
    """
    Split a flight's pallets into two flights.

    Args:
        load: Flight to split
        split_index: Pallets before this index stay on the original flight;
            defaults to the ceiling of half the pallet count. Either half may
            be empty, so a one-pallet flight splits into itself and an empty
            flight.
        new_id: Identifier for the new flight; defaults to "{id}-B"

    Returns:
        SplitResult with the original (first) and new (second) flight

    Raises:
        ValueError: if the index lies outside 0..len(pallets)
    """
    count = len(load.pallets)
    if split_index is None:
        split_index = default_split_index(load)
    if not 0 <= split_index <= count:
        raise ValueError(
            f"Cannot split flight {load.id} with {count} pallets at index {split_index}"
        )

    first_pallets = load.pallets[:split_index]
    second_pallets = load.pallets[split_index:]

    if SPECIAL_CARGO_STAYS_WITH_ORIGINAL:
        first = load.rebuild(pallets=first_pallets, is_modified=True)
        second_vehicles, second_pax = (), 0
    else:
        first = load.rebuild(pallets=first_pallets, vehicles=(), pax_count=0, is_modified=True)
        second_vehicles, second_pax = load.vehicles, load.pax_count

    second = load.rebuild(
        id=new_id or f"{load.id}-B",
        parent_id=load.id,
        callsign=next_callsign(load.callsign),
        pallets=reindex(second_pallets),
        vehicles=second_vehicles,
        pax_count=second_pax,
        is_modified=True,
    )

    logger.info(
        "Split flight %s at %d: %s (%d pallets), %s (%d pallets)",
        load.id, split_index, first.id, len(first.pallets), second.id, len(second.pallets),
    )
    return SplitResult(first=first, second=second)


def transfer(
    source: FlightLoad,
    target: FlightLoad,
    unit_ids: Sequence[str],
) -> TransferResult:
    """
    Move named pallets from one flight to another.

    Moved pallets are appended to the target in source order. Both flights
    are re-indexed densely from 0 and marked modified.

    Raises:
        ValueError: if a pallet id is not on the source flight, or source
            and target are the same flight
    """
    if source.id == target.id:
        raise ValueError(f"Cannot transfer pallets from flight {source.id} to itself")

    wanted = set(unit_ids)
    unknown = wanted.difference(source.pallet_ids)
    if unknown:
        raise ValueError(
            f"Pallets not on flight {source.id}: {', '.join(sorted(unknown))}"
        )

    moving = [p for p in source.pallets if p.pallet.id in wanted]
    remaining = [p for p in source.pallets if p.pallet.id not in wanted]
    moved_weight = sum((p.weight for p in moving), 0.0)

    new_source = source.rebuild(pallets=reindex(remaining), is_modified=True)
    new_target = target.rebuild(
        pallets=reindex([*target.pallets, *moving]),
        is_modified=True,
    )

    logger.info(
        "Transferred %d pallets (%.0f lb) from %s to %s",
        len(moving), moved_weight, source.id, target.id,
    )
    return TransferResult(source=new_source, target=new_target, transferred_weight=moved_weight)


def merge(target: FlightLoad, source: FlightLoad) -> FlightLoad:
    """
    Combine two flights into ``target``.

    All pallets, rolling stock and passengers from ``source`` are added to
    ``target``; pallets are re-indexed densely from 0.

    Raises:
        ValueError: if the flights use different aircraft types
    """
    if target.aircraft_type != source.aircraft_type:
        raise ValueError(
            f"Cannot merge {source.aircraft_type.value} flight {source.id} "
            f"into {target.aircraft_type.value} flight {target.id}"
        )

    merged = target.rebuild(
        pallets=reindex([*target.pallets, *source.pallets]),
        vehicles=(*target.vehicles, *source.vehicles),
        pax_count=target.pax_count + source.pax_count,
        is_modified=True,
    )
    logger.info("Merged flight %s into %s", source.id, target.id)
    return merged
