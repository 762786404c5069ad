"""
Load validation.

Hard limits (payload, pallet count, CoB envelope) and per-station limits,
reported as structured issues rather than exceptions.
"""

from loadmaster.checks.validator import (
    validate,
    check_station_limits,
    check_payload,
    check_pallet_count,
    check_cob_envelope,
)
from loadmaster.checks.analysis import LoadAnalysis, MetricSummary, analyze

__all__ = [
    "validate",
    "check_station_limits",
    "check_payload",
    "check_pallet_count",
    "check_cob_envelope",
    "LoadAnalysis",
    "MetricSummary",
    "analyze",
]
