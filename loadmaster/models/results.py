"""
Result models returned by the balance solver, validators and estimators.

These are what reporting layers consume: CoB figures, envelope status and
structured validation issues.
"""

from enum import Enum

from pydantic import BaseModel, Field


class EnvelopeStatus(str, Enum):
    """Where a CG station sits relative to the CoB envelope."""
    WITHIN_LIMITS = "within_limits"
    FORWARD_OF_LIMIT = "forward_of_limit"
    AFT_OF_LIMIT = "aft_of_limit"


class CobResult(BaseModel):
    """
    Center of balance for a set of placed loads.

    ``cob_percent`` is the raw %MAC value and is what the envelope decision
    uses. ``display_percent`` is the same value clamped to 0-100 for UIs.
    """
    total_weight: float = Field(..., ge=0, description="Weight included in the moment sum (lb)")
    total_moment: float = Field(..., description="Sum of weight x arm (lb-in)")
    cg_station: float = Field(..., description="CG station from aircraft datum (in)")
    cob_percent: float = Field(..., description="Raw center of balance (%MAC)")
    display_percent: float = Field(..., ge=0, le=100, description="Clamped %MAC for display")
    in_envelope: bool = Field(..., description="Whether the raw value is within limits")
    deviation: float = Field(
        ...,
        description="Signed distance to the violated limit (%MAC); negative forward, 0 in envelope",
    )
    status: EnvelopeStatus = Field(..., description="Envelope status")
    min_allowed: float = Field(..., description="Forward limit (%MAC)")
    max_allowed: float = Field(..., description="Aft limit (%MAC)")


class EnvelopeLimits(BaseModel):
    """CoB envelope converted to station coordinates (in from datum)."""
    fwd_limit: float = Field(..., description="Forward limit station")
    aft_limit: float = Field(..., description="Aft limit station")
    usable_length: float = Field(..., description="Aft minus forward limit")
    target_station: float = Field(..., description="Envelope midpoint station")


class EnvelopePosition(BaseModel):
    """A CG station expressed as a fraction of the usable envelope."""
    percent: float = Field(..., ge=0, le=100, description="0 at forward limit, 100 at aft limit")
    status: EnvelopeStatus = Field(..., description="Envelope status")
    mac_percent: float = Field(..., description="Raw %MAC for the same station")


class IssueCode(str, Enum):
    """Machine-readable validation issue codes."""
    OVERWEIGHT = "overweight"
    TOO_MANY_PALLETS = "too_many_pallets"
    COB_OUT_OF_ENVELOPE = "cob_out_of_envelope"
    STATION_OVERWEIGHT = "station_overweight"
    STATION_HEIGHT = "station_height"
    STATION_WIDTH = "station_width"
    INVALID_STATION = "invalid_station"
    SEAT_CAPACITY = "seat_capacity"


class ValidationIssue(BaseModel):
    """One violated rule."""
    code: IssueCode = Field(..., description="Issue code")
    message: str = Field(..., description="Human-readable message")


class ValidationResult(BaseModel):
    """
    Outcome of a load check.

    Issues keep the order in which the checks ran.
    """
    valid: bool = Field(..., description="True when no issues were found")
    issues: list[ValidationIssue] = Field(default_factory=list, description="Ordered issues")

    @classmethod
    def from_issues(cls, issues: list[ValidationIssue]) -> "ValidationResult":
        return cls(valid=not issues, issues=list(issues))

    @property
    def messages(self) -> list[str]:
        """Issue messages in check order."""
        return [issue.message for issue in self.issues]

    @property
    def codes(self) -> list[IssueCode]:
        return [issue.code for issue in self.issues]


class StationCheck(BaseModel):
    """Result of checking one pallet against one station."""
    valid: bool = Field(..., description="Whether the pallet fits the station")
    issues: list[ValidationIssue] = Field(default_factory=list, description="Limit violations")

    @property
    def errors(self) -> list[str]:
        return [issue.message for issue in self.issues]


class AircraftEstimate(BaseModel):
    """How many aircraft a lift needs, by floor space and by payload."""
    by_pallets: int = Field(..., ge=0, description="Aircraft needed for floor positions")
    by_weight: int = Field(..., ge=0, description="Aircraft needed for payload")
    minimum: int = Field(..., ge=0, description="Larger of the two")
    weight_limited: bool = Field(default=False, description="Payload drives the count")
    position_limited: bool = Field(default=False, description="Floor space drives the count")
    confidence: str = Field(default="high", description="high, medium or low")
