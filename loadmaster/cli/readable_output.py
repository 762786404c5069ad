"""
Helpers to turn JSON load analyses into a compact, human-readable console
summary. Works on the output of ``loadmaster analyze`` or ``POST /analyze``.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any


def _fmt_float(value: Any, unit: str = "", missing: str = "n/a") -> str:
    """Format a number with an optional unit suffix."""
    try:
        fval = float(value)
    except (TypeError, ValueError):
        return missing
    suffix = f" {unit}" if unit else ""
    if abs(fval) >= 100:
        return f"{fval:,.0f}{suffix}"
    return f"{fval:.1f}{suffix}"


def _fmt_pallet(placement: dict[str, Any]) -> str:
    pallet = placement.get("pallet", {})
    flags = []
    if pallet.get("hazmat"):
        flags.append("HAZ")
    if placement.get("is_ramp"):
        flags.append("RAMP")
    flag_str = f" [{', '.join(flags)}]" if flags else ""
    return (
        f"    {placement.get('station_index', 0) + 1:>2}  {pallet.get('id', '?'):<12} "
        f"{_fmt_float(pallet.get('gross_weight'), 'lb'):>10}  "
        f"@ {_fmt_float(placement.get('longitudinal_coord'), 'in')}{flag_str}"
    )


def _print_issues(title: str, result: dict[str, Any] | None) -> None:
    issues = (result or {}).get("issues") or []
    if not issues:
        return
    print(f"  {title}:")
    for issue in issues:
        print(f"    - {issue.get('message', '?')}")


def print_analysis(data: dict[str, Any]) -> None:
    """Print a summary of an analysis dict (``LoadAnalysis.model_dump``)."""
    flight = data.get("flight", {})
    cob = flight.get("cob", {})
    metric = data.get("metric", {})
    validation = data.get("validation", {})

    print(
        f"Flight {flight.get('id', '?')} ({flight.get('callsign') or 'no callsign'}) | "
        f"{flight.get('aircraft_type', '?')}"
        f"{' | modified' if flight.get('is_modified') else ''}"
    )
    print(
        f"  Weight: {_fmt_float(flight.get('total_weight'), 'lb')} "
        f"({_fmt_float(metric.get('total_weight_kg'), 'kg')}), "
        f"{_fmt_float(flight.get('payload_used_percent'), '%')} of max payload"
    )
    print(
        f"  CG: station {_fmt_float(cob.get('cg_station'), 'in')} "
        f"({_fmt_float(metric.get('cg_station_m'), 'm')})"
    )
    print(f"  {data.get('cob_message', '')}")
    print(
        f"  Pallets: {flight.get('positions_used', 0)} | "
        f"Vehicles: {len(flight.get('vehicles') or [])} | "
        f"PAX: {flight.get('pax_count', 0)} "
        f"({_fmt_float(flight.get('seat_utilization_percent'), '%')} of seats)"
    )

    pallets = flight.get("pallets") or []
    if pallets:
        print("  Stations:")
        for placement in pallets:
            print(_fmt_pallet(placement))

    for vehicle in flight.get("vehicles") or []:
        v = vehicle.get("vehicle", {})
        print(
            f"  Vehicle {v.get('id', '?')} {v.get('description', '')}: "
            f"{_fmt_float(v.get('weight'), 'lb')} @ {_fmt_float(v.get('longitudinal_position'), 'in')}"
        )

    print(f"  Status: {'VALID' if validation.get('valid') else 'INVALID'}")
    _print_issues("Issues", validation)
    _print_issues("Station checks", data.get("station_checks"))


def print_readable_output(json_path: Path) -> None:
    """
    Print a human-friendly summary of an analysis JSON file.

    Args:
        json_path: Path to the JSON output of ``loadmaster analyze``.
    """
    data = json.loads(Path(json_path).read_text())
    print_analysis(data)
