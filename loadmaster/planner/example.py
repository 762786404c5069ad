"""
A sample flight load for the CLI and API.
"""

from typing import Union

from loadmaster.catalog.specs import spec_for
from loadmaster.models.aircraft import AircraftType
from loadmaster.models.cargo import (
    ContentItem,
    Pallet,
    PalletPlacement,
    Vehicle,
    VehiclePlacement,
)
from loadmaster.models.flight import FlightLoad

_PALLET_WEIGHTS = (8200.0, 7600.0, 6400.0, 5100.0, 4300.0, 3500.0)


def example_load(aircraft_type: Union[AircraftType, str] = AircraftType.C17) -> FlightLoad:
    """
    Build a small mixed load: pallets in the forward stations, one HMMWV
    aft and a block of passengers.
    """
    spec = spec_for(aircraft_type)
    count = min(len(_PALLET_WEIGHTS), spec.main_deck_positions)

    pallets = []
    for index, gross in enumerate(_PALLET_WEIGHTS[:count]):
        station = spec.stations[index]
        pallet = Pallet(
            id=f"PLT-{index + 1:03d}",
            gross_weight=gross,
            net_weight=gross - 355,
            height=84.0,
            hazmat=index == 2,
            items=(
                ContentItem(
                    item_id=f"TCN-{index + 1:03d}-A",
                    description="General cargo",
                    weight_lb=gross - 355,
                    length_in=104,
                    width_in=84,
                    height_in=80,
                    hazmat=index == 2,
                ),
            ),
        )
        pallets.append(
            PalletPlacement(
                pallet=pallet,
                station_index=index,
                longitudinal_coord=station.rdl_distance,
                is_ramp=station.is_ramp,
            )
        )

    hmmwv = Vehicle(
        id="VEH-001",
        description="M1152 HMMWV",
        weight=5900.0,
        length=190.0,
        width=86.0,
        height=72.0,
        axle_weights=(3100.0, 2800.0),
        longitudinal_position=round(spec.cargo_length * 0.7),
    )

    return FlightLoad(
        id=f"{spec.type.value}-001",
        callsign="REACH01",
        aircraft_type=spec.type,
        pallets=tuple(pallets),
        vehicles=(VehiclePlacement(vehicle=hmmwv, deck="MAIN"),),
        pax_count=20,
    )
