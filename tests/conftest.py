"""
Pytest configuration and shared fixtures.
"""

import pytest

from loadmaster.catalog.specs import C17_SPEC, C130_SPEC
from loadmaster.models.aircraft import AircraftSpec, AircraftType
from loadmaster.models.cargo import Pallet, PalletPlacement, Vehicle, VehiclePlacement
from loadmaster.models.flight import FlightLoad
from loadmaster.planner.example import example_load


def make_pallet(pallet_id: str, gross: float, height: float = 80.0) -> Pallet:
    """A pallet with a typical 355 lb tare."""
    return Pallet(
        id=pallet_id,
        gross_weight=gross,
        net_weight=max(gross - 355.0, 0.0),
        height=height,
    )


def place(pallet: Pallet, index: int, coord: float) -> PalletPlacement:
    """Place a pallet at an explicit cargo-floor coordinate."""
    return PalletPlacement(pallet=pallet, station_index=index, longitudinal_coord=coord)


def place_at_station(pallet: Pallet, index: int, spec: AircraftSpec) -> PalletPlacement:
    """Place a pallet on a catalog station."""
    station = spec.stations[index]
    return PalletPlacement(
        pallet=pallet,
        station_index=index,
        longitudinal_coord=station.rdl_distance,
        is_ramp=station.is_ramp,
    )


@pytest.fixture
def c17() -> AircraftSpec:
    """C-17 catalog entry."""
    return C17_SPEC


@pytest.fixture
def c130() -> AircraftSpec:
    """C-130 catalog entry."""
    return C130_SPEC


@pytest.fixture
def empty_c17_load() -> FlightLoad:
    """A C-17 flight with nothing on board."""
    return FlightLoad(id="FLT-EMPTY", callsign="REACH01", aircraft_type=AircraftType.C17)


@pytest.fixture
def two_pallet_load() -> FlightLoad:
    """Two 5,000 lb pallets at cargo-floor coordinates 0 and 54 on a C-17."""
    return FlightLoad(
        id="FLT-TWO",
        callsign="REACH01",
        aircraft_type=AircraftType.C17,
        pallets=(
            place(make_pallet("P1", 5000.0), 0, 0.0),
            place(make_pallet("P2", 5000.0), 1, 54.0),
        ),
    )


@pytest.fixture
def mixed_c17_load(c17) -> FlightLoad:
    """Five pallets on the first stations, one vehicle and twelve passengers."""
    weights = [4000.0, 9000.0, 6000.0, 9000.0, 2500.0]
    pallets = tuple(
        place_at_station(make_pallet(f"P{i + 1}", w), i, c17)
        for i, w in enumerate(weights)
    )
    vehicle = Vehicle(
        id="V1",
        description="M1152 HMMWV",
        weight=5900.0,
        length=190.0,
        width=86.0,
        height=72.0,
        axle_weights=(3100.0, 2800.0),
        longitudinal_position=700.0,
    )
    return FlightLoad(
        id="FLT-MIX",
        callsign="REACH01",
        aircraft_type=AircraftType.C17,
        pallets=pallets,
        vehicles=(VehiclePlacement(vehicle=vehicle),),
        pax_count=12,
    )


@pytest.fixture
def example_c17_load() -> FlightLoad:
    """The sample load served by the CLI and API."""
    return example_load(AircraftType.C17)
