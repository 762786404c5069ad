"""
Cargo unit and placement models.

A flight carries three kinds of cargo: 463L pallets placed at fixed stations,
rolling stock placed at an explicit longitudinal coordinate, and a block of
passengers whose weight is derived from the head count.
"""

from typing import Optional

from pydantic import BaseModel, Field, model_validator

from loadmaster.constants import PAX_WEIGHT_LB


class ContentItem(BaseModel):
    """A line item built onto a pallet."""
    item_id: str = Field(..., description="Movement item identifier")
    description: str = Field(default="", description="Item description")
    weight_lb: float = Field(..., ge=0, description="Item weight (lb)")
    length_in: float = Field(default=0.0, ge=0, description="Item length (in)")
    width_in: float = Field(default=0.0, ge=0, description="Item width (in)")
    height_in: float = Field(default=0.0, ge=0, description="Item height (in)")
    hazmat: bool = Field(default=False, description="Hazardous material flag")

    model_config = {"frozen": True}


class Pallet(BaseModel):
    """A built-up 463L pallet."""
    id: str = Field(..., description="Pallet identifier")
    gross_weight: float = Field(..., ge=0, description="Gross weight incl. pallet and nets (lb)")
    net_weight: float = Field(default=0.0, ge=0, description="Cargo weight only (lb)")
    height: float = Field(default=0.0, ge=0, description="Built-up height (in)")
    hazmat: bool = Field(default=False, description="Contains hazardous material")
    is_prebuilt: bool = Field(default=False, description="Arrived already palletized")
    items: tuple[ContentItem, ...] = Field(default=(), description="Pallet contents")

    model_config = {"frozen": True}

    @model_validator(mode="after")
    def check_weights(self) -> "Pallet":
        if self.net_weight > self.gross_weight:
            raise ValueError(
                f"Pallet {self.id}: net weight {self.net_weight} exceeds gross {self.gross_weight}"
            )
        return self


class Vehicle(BaseModel):
    """
    A piece of rolling stock.

    ``longitudinal_position`` is the vehicle's center measured from the
    start of the cargo bay; ``lateral_position`` is measured from the
    centerline, positive to the right.
    """
    id: str = Field(..., description="Vehicle identifier")
    description: str = Field(default="", description="Vehicle description")
    weight: float = Field(..., ge=0, description="Vehicle weight (lb)")
    length: float = Field(default=0.0, ge=0, description="Length (in)")
    width: float = Field(default=0.0, ge=0, description="Width (in)")
    height: float = Field(default=0.0, ge=0, description="Height (in)")
    axle_weights: tuple[float, ...] = Field(default=(), description="Per-axle weights (lb)")
    lateral_position: float = Field(default=0.0, description="Offset from centerline (in)")
    longitudinal_position: float = Field(
        default=0.0,
        description="Center of the vehicle from cargo bay start (in)",
    )

    model_config = {"frozen": True}

    @model_validator(mode="after")
    def check_axles(self) -> "Vehicle":
        if any(w < 0 for w in self.axle_weights):
            raise ValueError(f"Vehicle {self.id}: axle weights must be non-negative")
        return self


class PassengerBlock(BaseModel):
    """A group of passengers seated together."""
    count: int = Field(..., ge=0, description="Number of passengers")

    model_config = {"frozen": True}

    @property
    def weight(self) -> float:
        """Passenger weight with gear."""
        return self.count * PAX_WEIGHT_LB


class PalletPlacement(BaseModel):
    """A pallet assigned to a station."""
    pallet: Pallet = Field(..., description="The placed pallet")
    station_index: int = Field(..., ge=0, description="0-based station index")
    longitudinal_coord: float = Field(
        ...,
        description="Pallet center from cargo bay start (in)",
    )
    is_ramp: bool = Field(default=False, description="Placed on a ramp station")

    model_config = {"frozen": True}

    @property
    def weight(self) -> float:
        return self.pallet.gross_weight


class VehiclePlacement(BaseModel):
    """A vehicle loaded at its own longitudinal coordinate."""
    vehicle: Vehicle = Field(..., description="The placed vehicle")
    is_ramp: bool = Field(default=False, description="Vehicle rests on the ramp")
    deck: Optional[str] = Field(default=None, description="MAIN or RAMP, for reporting")

    model_config = {"frozen": True}

    @property
    def weight(self) -> float:
        return self.vehicle.weight

    @property
    def longitudinal_coord(self) -> float:
        return self.vehicle.longitudinal_position
