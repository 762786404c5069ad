"""
Tests for load validation.
"""

import pytest

from loadmaster.checks.analysis import analyze
from loadmaster.checks.validator import check_station_limits, validate
from loadmaster.models.aircraft import AircraftType
from loadmaster.models.flight import FlightLoad
from loadmaster.models.results import IssueCode

from conftest import make_pallet, place, place_at_station


def _load(pallets, pax_count=0, aircraft_type=AircraftType.C17):
    return FlightLoad(
        id="FLT-1",
        aircraft_type=aircraft_type,
        pallets=tuple(pallets),
        pax_count=pax_count,
    )


class TestValidate:
    """Tests for the hard-limit validator."""

    def test_balanced_load_is_valid(self):
        """Test a light load centered on the envelope midpoint."""
        load = _load([place(make_pallet("P1", 8000.0), 5, 528.0)])

        result = validate(load)

        assert result.valid is True
        assert result.issues == []

    def test_overweight_scenario(self, c17):
        """Test 18 x 12,000 lb pallets on a C-17."""
        load = _load(place_at_station(make_pallet(f"P{i}", 12000.0), i, c17) for i in range(18))

        result = validate(load)

        assert load.total_weight == 216000.0
        assert result.valid is False
        assert any("Overweight" in m for m in result.messages)
        assert result.issues[0].code is IssueCode.OVERWEIGHT
        assert result.issues[0].message == "Overweight: 216,000 lbs exceeds 170,900 lbs max"

    def test_too_many_pallets(self):
        load = _load(place(make_pallet(f"P{i}", 500.0), i, 528.0) for i in range(19))

        result = validate(load)

        assert result.codes == [IssueCode.TOO_MANY_PALLETS]
        assert result.messages == ["Too many pallets: 19 exceeds 18 positions"]

    def test_cob_out_of_envelope_uses_raw_value(self, two_pallet_load):
        """Test that a CoB far forward is reported with its unclamped value."""
        result = validate(two_pallet_load)

        assert result.codes == [IssueCode.COB_OUT_OF_ENVELOPE]
        assert result.messages == [
            "Center of balance -134.0% outside safe envelope (16-40%)"
        ]

    def test_reports_every_violation_in_order(self):
        """Test that checks do not short-circuit and keep their order."""
        load = _load(place(make_pallet(f"P{i}", 10000.0), i, 0.0) for i in range(19))

        result = validate(load)

        assert result.codes == [
            IssueCode.OVERWEIGHT,
            IssueCode.TOO_MANY_PALLETS,
            IssueCode.COB_OUT_OF_ENVELOPE,
        ]

    def test_two_violations(self):
        """Test overweight and pallet count reported together with CoB in limits."""
        load = _load(place(make_pallet(f"P{i}", 10000.0), i, 528.0) for i in range(19))

        result = validate(load)

        assert result.codes == [IssueCode.OVERWEIGHT, IssueCode.TOO_MANY_PALLETS]

    def test_empty_load_is_valid(self, empty_c17_load):
        assert validate(empty_c17_load).valid is True

    def test_explicit_spec_overrides_catalog(self, c130):
        """Test validating a C-17 cargo set against C-130 limits."""
        load = _load([place(make_pallet("P1", 45000.0), 0, 528.0)])

        assert IssueCode.OVERWEIGHT not in validate(load).codes
        assert IssueCode.OVERWEIGHT in validate(load, c130).codes

    def test_explicit_spec_datums_used_for_cob(self, c17):
        """Test that CoB is solved against the passed spec, not the catalog entry."""
        load = _load([place(make_pallet("P1", 5000.0), 0, 0.0)])
        moved = c17.model_copy(update={"lemac_station": 428 - 0.28 * 309.5})

        assert validate(load).codes == [IssueCode.COB_OUT_OF_ENVELOPE]
        assert validate(load, moved).valid is True
        assert analyze(load, moved).cob_message.startswith("CoB 28.0% MAC - Within envelope")


class TestStationLimits:
    """Tests for per-station checks over a whole load."""

    def test_clean_load(self, mixed_c17_load):
        assert check_station_limits(mixed_c17_load).valid is True

    def test_ramp_pallet_too_tall_and_heavy(self, c17):
        load = _load([place_at_station(make_pallet("R1", 8000.0, height=100.0), 16, c17)])

        result = check_station_limits(load)

        assert result.codes == [IssueCode.STATION_HEIGHT, IssueCode.STATION_OVERWEIGHT]
        assert result.messages[0] == 'Pallet R1: Height 100" exceeds station 17 limit of 70"'

    def test_seat_capacity(self):
        result = check_station_limits(_load([], pax_count=103))

        assert result.codes == [IssueCode.SEAT_CAPACITY]
        assert "103 exceeds 102 seats" in result.messages[0]

    def test_pallets_beyond_station_table_skipped(self):
        load = _load(place(make_pallet(f"P{i}", 500.0, height=60.0), i, 528.0) for i in range(20))

        assert check_station_limits(load).valid is True

    def test_station_checks_do_not_change_validate(self, c17):
        """Test that station problems never appear in the hard-limit result."""
        load = _load([place_at_station(make_pallet("R1", 8000.0, height=100.0), 16, c17)])

        assert IssueCode.STATION_HEIGHT not in validate(load).codes


class TestAnalyze:
    """Tests for the combined analysis."""

    def test_analysis_bundle(self, two_pallet_load):
        analysis = analyze(two_pallet_load)

        assert analysis.flight == two_pallet_load
        assert analysis.validation.valid is False
        assert analysis.cob_message.startswith("WARNING: CoB -134.0% MAC")
        assert analysis.metric.total_weight_kg == pytest.approx(4535.9237)
        assert analysis.metric.cg_station_m == pytest.approx(455.0 * 0.0254)

    def test_analysis_serializes(self, example_c17_load):
        data = analyze(example_c17_load).model_dump(mode="json")

        assert data["flight"]["aircraft_type"] == "C-17"
        assert "total_weight" in data["flight"]
        assert isinstance(data["validation"]["issues"], list)
