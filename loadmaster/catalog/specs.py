"""
Aircraft specification catalog.

Station data follows the C-17 and C-130 loading manuals. The catalog is
built once at import; a malformed entry fails here rather than inside a
per-flight calculation.

CoB datums:
    C-17:  LEMAC 869.7", MAC 309.5", envelope 16-40 %MAC.
    C-130: LEMAC 494.5", MAC 164.5", envelope 18-33 %MAC.

``cargo_bay_fs_start`` is the fuselage station where cargo-relative x = 0
begins. It is calibrated so that cargo centered on the floor lands near
the envelope midpoint:
    C-17:  (869.7 + 0.28 x 309.5) - 528 = 428"
    C-130: (494.5 + 0.255 x 164.5) - 246 = 290"
"""

import logging
from types import MappingProxyType
from typing import Mapping, Union

from loadmaster.models.aircraft import AircraftSpec, AircraftType, SeatZone, StationConstraint

logger = logging.getLogger(__name__)


class UnknownAircraftType(ValueError):
    """Raised when the catalog has no entry for an aircraft key."""

    def __init__(self, key: object):
        self.key = key
        known = ", ".join(t.value for t in AircraftType)
        super().__init__(f"Unknown aircraft type {key!r} (known: {known})")


def _main_deck(position: int, rdl: float, height: float, width: float) -> StationConstraint:
    return StationConstraint(
        position=position,
        rdl_distance=rdl,
        max_height=height,
        max_width=width,
        max_weight=10000,
    )


C17_STATIONS = tuple(
    [
        _main_deck(pos, 245 + 58 * (pos - 1), 148, 216)
        for pos in range(1, 16)
    ]
    + [
        _main_deck(16, 1115, 148, 200),
        StationConstraint(
            position=17, rdl_distance=1173, max_height=70, max_width=144,
            max_weight=7500, is_ramp=True, requires_shoring=True,
        ),
        StationConstraint(
            position=18, rdl_distance=1215, max_height=70, max_width=144,
            max_weight=7500, is_ramp=True, requires_shoring=True,
        ),
    ]
)

C130_STATIONS = tuple(
    [
        _main_deck(pos, 245 + 82 * (pos - 1), 108, 123)
        for pos in range(1, 6)
    ]
    + [
        StationConstraint(
            position=6, rdl_distance=655, max_height=90, max_width=120,
            max_weight=10000, is_ramp=True, requires_shoring=True,
        ),
    ]
)


C17_SPEC = AircraftSpec(
    type=AircraftType.C17,
    name="C-17 Globemaster III",
    cargo_length=1056,
    cargo_width=216,
    cargo_height=148,
    pallet_positions=18,
    ramp_positions=frozenset({17, 18}),
    max_payload=170900,
    per_position_weight=10000,
    ramp_position_weight=7500,
    floor_loading_psi=250,
    ramp_clearance_width=144,
    ramp_clearance_height=70,
    cob_min_percent=16,
    cob_max_percent=40,
    mac_length=309.5,
    lemac_station=869.7,
    cargo_bay_fs_start=428,
    stations=C17_STATIONS,
    max_axle_weight=40000,
    max_vehicle_wheelbase=400,
    seat_capacity=102,
    seat_zones=(
        SeatZone(id="C17_LEFT_FWD", name="Left Side Forward", capacity=27,
                 x_start_in=0, x_end_in=400, y_offset_in=-100, side="left"),
        SeatZone(id="C17_LEFT_AFT", name="Left Side Aft", capacity=24,
                 x_start_in=400, x_end_in=800, y_offset_in=-100, side="left"),
        SeatZone(id="C17_RIGHT_FWD", name="Right Side Forward", capacity=27,
                 x_start_in=0, x_end_in=400, y_offset_in=100, side="right"),
        SeatZone(id="C17_RIGHT_AFT", name="Right Side Aft", capacity=24,
                 x_start_in=400, x_end_in=800, y_offset_in=100, side="right"),
    ),
)

C130_SPEC = AircraftSpec(
    type=AircraftType.C130,
    name="C-130H/J Hercules",
    cargo_length=492,
    cargo_width=123,
    cargo_height=108,
    pallet_positions=6,
    ramp_positions=frozenset({6}),
    max_payload=42000,
    per_position_weight=10000,
    ramp_position_weight=10000,
    floor_loading_psi=150,
    ramp_clearance_width=120,
    ramp_clearance_height=90,
    cob_min_percent=18,
    cob_max_percent=33,
    mac_length=164.5,
    lemac_station=494.5,
    cargo_bay_fs_start=290,
    stations=C130_STATIONS,
    max_axle_weight=15000,
    max_vehicle_wheelbase=240,
    seat_capacity=92,
    seat_zones=(
        SeatZone(id="C130_LEFT", name="Left Side Seats", capacity=23,
                 x_start_in=0, x_end_in=400, y_offset_in=-55, side="left"),
        SeatZone(id="C130_RIGHT", name="Right Side Seats", capacity=23,
                 x_start_in=0, x_end_in=400, y_offset_in=55, side="right"),
        SeatZone(id="C130_CENTER", name="Center Seats", capacity=46,
                 x_start_in=50, x_end_in=350, y_offset_in=0, side="center"),
    ),
)

AIRCRAFT_SPECS: Mapping[AircraftType, AircraftSpec] = MappingProxyType({
    AircraftType.C17: C17_SPEC,
    AircraftType.C130: C130_SPEC,
})


def spec_for(aircraft_type: Union[AircraftType, str]) -> AircraftSpec:
    """
    Look up the specification for an aircraft type.

    Args:
        aircraft_type: An AircraftType or its value ("C-17", "C-130")

    Returns:
        The catalog AircraftSpec

    Raises:
        UnknownAircraftType: if the key is not in the catalog
    """
    try:
        key = AircraftType(aircraft_type)
    except ValueError:
        raise UnknownAircraftType(aircraft_type) from None
    return AIRCRAFT_SPECS[key]


def list_aircraft() -> list[AircraftType]:
    """Aircraft types available in the catalog."""
    return list(AIRCRAFT_SPECS)


def station_for_position(spec: AircraftSpec, position: int) -> StationConstraint:
    """Return the station for a 1-indexed position number."""
    if not 1 <= position <= len(spec.stations):
        raise ValueError(
            f"Invalid position {position} for {spec.type.value} "
            f"(1-{len(spec.stations)})"
        )
    return spec.stations[position - 1]


logger.debug("Loaded aircraft catalog: %s", ", ".join(t.value for t in AIRCRAFT_SPECS))
