"""
FastAPI server for the loadmaster weight and balance engine.

Provides REST endpoints over the catalog, load analysis and flight
operations. Every endpoint is a thin wrapper: it validates the request
body, calls the engine and returns the engine's own models.

WARNING: Planning aid only, NOT a substitute for a certified load plan.
"""

import logging
from typing import Optional

from fastapi import FastAPI, HTTPException, Query
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel, Field

from loadmaster import __version__
from loadmaster.catalog.specs import UnknownAircraftType, list_aircraft, spec_for
from loadmaster.checks.analysis import LoadAnalysis, analyze
from loadmaster.models.aircraft import AircraftSpec, AircraftType
from loadmaster.models.flight import FlightLoad, SplitResult, TransferResult
from loadmaster.models.results import AircraftEstimate
from loadmaster.planner.estimate import quick_estimate
from loadmaster.planner.example import example_load
from loadmaster.planner.flights import merge, split, transfer
from loadmaster.planner.placement import reoptimize

logger = logging.getLogger(__name__)

# Create FastAPI app
app = FastAPI(
    title="Loadmaster API",
    description="""
    Weight and balance and pallet placement for C-17 and C-130 airlift.

    **WARNING**: Planning aid only. Not a substitute for a certified load plan.
    """,
    version=__version__,
)

# Add CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


class HealthResponse(BaseModel):
    """Health check response."""
    status: str
    version: str


class AircraftSummary(BaseModel):
    """One catalog entry in the aircraft listing."""
    type: AircraftType
    name: str
    max_payload: float
    pallet_positions: int
    cob_min_percent: float
    cob_max_percent: float
    seat_capacity: int


class SplitRequest(BaseModel):
    """Request body for the split endpoint."""
    flight: FlightLoad
    split_index: Optional[int] = Field(default=None, description="Defaults to half, rounded up")
    new_id: Optional[str] = Field(default=None, description="Defaults to '<id>-B'")


class TransferRequest(BaseModel):
    """Request body for the transfer endpoint."""
    source: FlightLoad
    target: FlightLoad
    unit_ids: list[str] = Field(..., min_length=1, description="Pallet ids to move")


class MergeRequest(BaseModel):
    """Request body for the merge endpoint."""
    target: FlightLoad
    source: FlightLoad


def _bad_request(error: ValueError) -> HTTPException:
    logger.info("Rejected request: %s", error)
    return HTTPException(status_code=400, detail=str(error))


def _lookup_spec(aircraft_type: str) -> AircraftSpec:
    try:
        return spec_for(aircraft_type)
    except UnknownAircraftType as e:
        raise HTTPException(status_code=404, detail=str(e))


@app.get("/health", response_model=HealthResponse, tags=["System"])
async def health_check():
    """Check if the API is running."""
    return HealthResponse(status="healthy", version=__version__)


@app.get("/aircraft", response_model=list[AircraftSummary], tags=["Reference"])
async def get_aircraft_list():
    """List the aircraft in the catalog."""
    return [
        AircraftSummary(
            type=spec.type,
            name=spec.name,
            max_payload=spec.max_payload,
            pallet_positions=spec.pallet_positions,
            cob_min_percent=spec.cob_min_percent,
            cob_max_percent=spec.cob_max_percent,
            seat_capacity=spec.seat_capacity,
        )
        for spec in map(spec_for, list_aircraft())
    ]


@app.get("/aircraft/{aircraft_type}", response_model=AircraftSpec, tags=["Reference"])
async def get_aircraft(aircraft_type: str):
    """Full specification for one aircraft type (e.g. C-17)."""
    return _lookup_spec(aircraft_type)


@app.get("/example", response_model=FlightLoad, tags=["Reference"])
async def get_example(
    aircraft_type: str = Query(default=AircraftType.C17.value, description="Aircraft type"),
):
    """Get an example flight load."""
    spec = _lookup_spec(aircraft_type)
    return example_load(spec.type)


@app.get("/estimate", response_model=AircraftEstimate, tags=["Planning"])
async def get_estimate(
    total_weight: float = Query(..., ge=0, description="Total lift weight (lb)"),
    pallet_count: int = Query(..., ge=0, description="Number of 463L pallets"),
    rolling_stock_count: int = Query(default=0, ge=0, description="Number of vehicles"),
    aircraft_type: str = Query(default=AircraftType.C17.value, description="Aircraft type"),
):
    """Estimate how many aircraft a lift needs."""
    spec = _lookup_spec(aircraft_type)
    return quick_estimate(total_weight, pallet_count, rolling_stock_count, spec.type)


@app.post("/analyze", response_model=LoadAnalysis, tags=["Analysis"])
async def analyze_load(flight: FlightLoad):
    """
    Compute weight and CoB for a flight load and validate it.

    An invalid load is still analyzed; its issues are listed in the
    ``validation`` block rather than returned as an error.
    """
    return analyze(flight)


@app.post("/reoptimize", response_model=FlightLoad, tags=["Planning"])
async def reoptimize_load(flight: FlightLoad):
    """Reassign pallets to stations around the CoB envelope midpoint."""
    return reoptimize(flight)


@app.post("/split", response_model=SplitResult, tags=["Planning"])
async def split_load(request: SplitRequest):
    """Split a flight's pallets into two flights."""
    try:
        return split(request.flight, split_index=request.split_index, new_id=request.new_id)
    except ValueError as e:
        raise _bad_request(e)


@app.post("/transfer", response_model=TransferResult, tags=["Planning"])
async def transfer_pallets(request: TransferRequest):
    """Move pallets from one flight to another."""
    try:
        return transfer(request.source, request.target, request.unit_ids)
    except ValueError as e:
        raise _bad_request(e)


@app.post("/merge", response_model=FlightLoad, tags=["Planning"])
async def merge_loads(request: MergeRequest):
    """Combine two flights of the same aircraft type."""
    try:
        return merge(request.target, request.source)
    except ValueError as e:
        raise _bad_request(e)
