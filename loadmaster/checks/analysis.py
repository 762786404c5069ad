"""
Full load analysis: derived figures, hard-limit validation, station checks
and a metric summary, bundled for reporting layers.
"""

from typing import Optional

from pydantic import BaseModel, Field

from loadmaster.balance.cob import cob_status_message, solve_cob
from loadmaster.balance.units import in_to_m, lb_to_kg, moment_lb_in_to_kg_m
from loadmaster.checks.validator import check_station_limits, validate
from loadmaster.models.aircraft import AircraftSpec
from loadmaster.models.flight import FlightLoad
from loadmaster.models.results import ValidationResult


class MetricSummary(BaseModel):
    """Weight and balance figures in SI units."""
    total_weight_kg: float = Field(..., description="Total load weight (kg)")
    total_moment_kg_m: float = Field(..., description="Total moment (kg-m)")
    cg_station_m: float = Field(..., description="CG station from aircraft datum (m)")


class LoadAnalysis(BaseModel):
    """Everything a load plan report shows for one flight."""
    flight: FlightLoad = Field(..., description="Analyzed flight load")
    validation: ValidationResult = Field(..., description="Hard-limit validation")
    station_checks: ValidationResult = Field(..., description="Per-station limit checks")
    cob_message: str = Field(..., description="One-line CoB summary")
    metric: MetricSummary = Field(..., description="Metric equivalents")


def analyze(load: FlightLoad, spec: Optional[AircraftSpec] = None) -> LoadAnalysis:
    """Validate a flight load and collect its report figures."""
    spec = spec or load.spec
    cob = solve_cob(load.pallets, load.vehicles, load.pax_count, spec)
    return LoadAnalysis(
        flight=load,
        validation=validate(load, spec),
        station_checks=check_station_limits(load, spec),
        cob_message=cob_status_message(cob),
        metric=MetricSummary(
            total_weight_kg=lb_to_kg(cob.total_weight),
            total_moment_kg_m=moment_lb_in_to_kg_m(cob.total_moment),
            cg_station_m=in_to_m(cob.cg_station),
        ),
    )
