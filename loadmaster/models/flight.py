"""
Flight load model.

A FlightLoad is one aircraft's cargo set. Its weight and center of balance
are derived from the pallet, vehicle and passenger lists every time they
are read, so they cannot drift from the cargo they describe. Changes go
through ``rebuild``, which returns a new validated load.
"""

from typing import Any, Optional

from pydantic import BaseModel, Field, computed_field

from loadmaster.balance.cob import solve_cob
from loadmaster.balance.weight import passenger_weight, total_weight
from loadmaster.catalog.specs import spec_for
from loadmaster.models.aircraft import AircraftSpec, AircraftType
from loadmaster.models.cargo import PalletPlacement, VehiclePlacement
from loadmaster.models.results import CobResult


class FlightLoad(BaseModel):
    """
    The cargo assigned to one aircraft.

    Weight and CoB fields are computed on access and included when the
    model is serialized. Values for them in input data are ignored.
    """

    id: str = Field(..., description="Flight identifier")
    parent_id: Optional[str] = Field(
        default=None,
        description="Flight this load was split or derived from",
    )
    callsign: str = Field(default="", description="Mission callsign, e.g. REACH01")
    aircraft_type: AircraftType = Field(..., description="Aircraft type")
    pallets: tuple[PalletPlacement, ...] = Field(default=(), description="Pallet placements")
    vehicles: tuple[VehiclePlacement, ...] = Field(default=(), description="Rolling stock")
    pax_count: int = Field(default=0, ge=0, description="Number of passengers")
    is_modified: bool = Field(
        default=False,
        description="Whether placements changed since the load was planned",
    )

    model_config = {"frozen": True}

    @property
    def spec(self) -> AircraftSpec:
        """Catalog specification for this load's aircraft."""
        return spec_for(self.aircraft_type)

    @computed_field
    @property
    def total_weight(self) -> float:
        """Pallets + vehicles + passengers (lb)."""
        return total_weight(self.pallets, self.vehicles, self.pax_count)

    @computed_field
    @property
    def pax_weight(self) -> float:
        """Passenger weight with gear (lb)."""
        return passenger_weight(self.pax_count)

    @computed_field
    @property
    def cob(self) -> CobResult:
        """Full center of balance solution."""
        return solve_cob(self.pallets, self.vehicles, self.pax_count, self.spec)

    @computed_field
    @property
    def cob_percent(self) -> float:
        """Raw center of balance (%MAC)."""
        return self.cob.cob_percent

    @computed_field
    @property
    def payload_used_percent(self) -> float:
        """Total weight as a share of maximum payload."""
        return self.total_weight / self.spec.max_payload * 100

    @computed_field
    @property
    def positions_used(self) -> int:
        """Pallet stations occupied."""
        return len(self.pallets)

    @computed_field
    @property
    def seat_utilization_percent(self) -> float:
        """Passengers as a share of seat capacity."""
        capacity = self.spec.seat_capacity
        return self.pax_count / capacity * 100 if capacity else 0.0

    @property
    def pallet_ids(self) -> list[str]:
        return [p.pallet.id for p in self.pallets]

    def rebuild(self, **changes: Any) -> "FlightLoad":
        """
        Return a copy with ``changes`` applied and re-validated.

        Derived fields are recomputed from the new lists on the next read.
        """
        data = dict(self)
        data.update(changes)
        return type(self).model_validate(data)


class SplitResult(BaseModel):
    """The two flights produced by splitting one."""
    first: FlightLoad = Field(..., description="Original flight keeping the first pallets")
    second: FlightLoad = Field(..., description="New flight carrying the remaining pallets")


class TransferResult(BaseModel):
    """Both sides of a pallet transfer."""
    source: FlightLoad = Field(..., description="Flight the pallets left")
    target: FlightLoad = Field(..., description="Flight the pallets joined")
    transferred_weight: float = Field(..., ge=0, description="Gross weight moved (lb)")
