"""
Aircraft data models.

Static physical and regulatory constants for one aircraft type: cargo bay
dimensions, pallet stations, payload limits and the center-of-balance
envelope. These models are frozen; the catalog builds them once at import.
"""

from enum import Enum

from pydantic import BaseModel, Field, model_validator


class AircraftType(str, Enum):
    """Supported airlift aircraft."""
    C17 = "C-17"
    C130 = "C-130"


class StationConstraint(BaseModel):
    """
    One fixed pallet position in the cargo bay.

    Heights and widths narrow toward the ramp and the fuselage taper, so each
    station carries its own limits.
    """
    position: int = Field(..., ge=1, description="1-indexed position number")
    rdl_distance: float = Field(..., ge=0, description="Reference Datum Line distance (in)")
    max_height: float = Field(..., gt=0, description="Maximum cargo height at this station (in)")
    max_width: float = Field(..., gt=0, description="Maximum cargo width at this station (in)")
    max_weight: float = Field(..., gt=0, description="Maximum weight for this position (lb)")
    is_ramp: bool = Field(default=False, description="Whether this position is on the ramp")
    requires_shoring: bool = Field(
        default=False,
        description="Whether heavy loads at this position need shoring plates",
    )

    model_config = {"frozen": True}


class SeatZone(BaseModel):
    """A seating area along the cargo bay sidewalls or centerline."""
    id: str = Field(..., description="Zone identifier, e.g. 'C17_LEFT_FWD'")
    name: str = Field(..., description="Human-readable zone name")
    capacity: int = Field(..., ge=0, description="Maximum passengers in this zone")
    x_start_in: float = Field(..., description="Start position from cargo bay start (in)")
    x_end_in: float = Field(..., description="End position from cargo bay start (in)")
    y_offset_in: float = Field(default=0.0, description="Lateral offset, negative is left wall")
    side: str = Field(default="center", description="left, right or center")

    model_config = {"frozen": True}


class AircraftSpec(BaseModel):
    """
    Physical and regulatory constants for one aircraft type.

    Longitudinal values are inches; weights are pounds; the CoB envelope is
    expressed in percent of the Mean Aerodynamic Chord (%MAC).
    """

    type: AircraftType = Field(..., description="Aircraft type key")
    name: str = Field(..., description="Display name")

    # Cargo compartment
    cargo_length: float = Field(..., gt=0, description="Cargo floor length (in)")
    cargo_width: float = Field(..., gt=0, description="Cargo floor width (in)")
    cargo_height: float = Field(..., gt=0, description="Main deck height (in)")

    # Positions
    pallet_positions: int = Field(..., ge=1, description="Number of pallet stations")
    ramp_positions: frozenset[int] = Field(
        default_factory=frozenset,
        description="1-indexed positions that sit on the ramp",
    )

    # Payload limits
    max_payload: float = Field(..., gt=0, description="Maximum payload (lb)")
    per_position_weight: float = Field(..., gt=0, description="Main deck position limit (lb)")
    ramp_position_weight: float = Field(..., gt=0, description="Ramp position limit (lb)")
    floor_loading_psi: float = Field(default=0.0, ge=0, description="Floor loading limit (psi)")

    # Ramp clearance
    ramp_clearance_width: float = Field(..., gt=0, description="Ramp clearance width (in)")
    ramp_clearance_height: float = Field(..., gt=0, description="Ramp clearance height (in)")

    # Center of balance envelope
    cob_min_percent: float = Field(..., description="Forward CoB limit (%MAC)")
    cob_max_percent: float = Field(..., description="Aft CoB limit (%MAC)")
    mac_length: float = Field(..., gt=0, description="Mean Aerodynamic Chord length (in)")
    lemac_station: float = Field(..., description="Leading Edge of MAC station (in from datum)")
    cargo_bay_fs_start: float = Field(
        ...,
        description="Fuselage station where cargo-relative x = 0 begins (in)",
    )

    stations: tuple[StationConstraint, ...] = Field(..., description="Stations, forward to aft")

    # Vehicles
    max_axle_weight: float = Field(default=0.0, ge=0, description="Maximum axle weight (lb)")
    max_vehicle_wheelbase: float = Field(default=0.0, ge=0, description="Maximum wheelbase (in)")

    # Passengers
    seat_capacity: int = Field(..., ge=0, description="Maximum number of passengers")
    seat_zones: tuple[SeatZone, ...] = Field(default=(), description="Seating zones")

    model_config = {"frozen": True}

    @model_validator(mode="after")
    def check_consistency(self) -> "AircraftSpec":
        """Reject a malformed catalog entry before any flight is computed."""
        if not self.stations:
            raise ValueError(f"{self.type.value}: station table is empty")
        if len(self.stations) != self.pallet_positions:
            raise ValueError(
                f"{self.type.value}: {len(self.stations)} stations defined "
                f"for {self.pallet_positions} pallet positions"
            )
        if not self.cob_min_percent < self.cob_max_percent:
            raise ValueError(
                f"{self.type.value}: cob_min_percent must be below cob_max_percent"
            )
        ramp_stations = {s.position for s in self.stations if s.is_ramp}
        if set(self.ramp_positions) != ramp_stations:
            raise ValueError(
                f"{self.type.value}: ramp_positions {sorted(self.ramp_positions)} "
                f"do not match ramp stations {sorted(ramp_stations)}"
            )
        positions = [s.position for s in self.stations]
        if positions != list(range(1, self.pallet_positions + 1)):
            raise ValueError(f"{self.type.value}: stations must be numbered 1..N in order")
        return self

    @property
    def cob_midpoint_percent(self) -> float:
        """Center of the CoB envelope."""
        return (self.cob_min_percent + self.cob_max_percent) / 2

    @property
    def main_deck_positions(self) -> int:
        """Number of stations that are not on the ramp."""
        return sum(1 for s in self.stations if not s.is_ramp)
