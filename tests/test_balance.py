"""
Tests for weight and balance calculations.

Tests weight aggregation, the CoB solver, envelope helpers, station limits
and unit conversions.
"""

import math
import pytest

from loadmaster.balance.cob import (
    cg_to_mac_percent,
    clamp_percent,
    cob_status_message,
    envelope_limits,
    envelope_status,
    passenger_arm,
    solve_cob,
    station_to_envelope_percent,
)
from loadmaster.balance.stations import position_weight_limit, validate_station_placement
from loadmaster.balance.units import in_to_m, kg_to_lb, lb_to_kg, moment_lb_in_to_kg_m
from loadmaster.balance.weight import passenger_weight, pallet_weight, total_weight, vehicle_weight
from loadmaster.models.cargo import Vehicle, VehiclePlacement
from loadmaster.models.results import EnvelopeStatus, IssueCode

from conftest import make_pallet, place


class TestWeight:
    """Tests for weight aggregation."""

    def test_empty_set_is_zero(self):
        assert total_weight([], [], 0) == 0.0

    def test_additivity(self, mixed_c17_load):
        """Test total = pallets + vehicles + 225 lb per passenger."""
        pallets = mixed_c17_load.pallets
        vehicles = mixed_c17_load.vehicles

        expected = (
            sum(p.pallet.gross_weight for p in pallets)
            + sum(v.vehicle.weight for v in vehicles)
            + 12 * 225
        )

        assert total_weight(pallets, vehicles, 12) == pytest.approx(expected)
        assert pallet_weight(pallets) + vehicle_weight(vehicles) + passenger_weight(12) == pytest.approx(expected)

    def test_negative_passengers_rejected(self):
        with pytest.raises(ValueError):
            passenger_weight(-1)


class TestCobSolver:
    """Tests for solve_cob."""

    def test_empty_load_returns_midpoint(self, c17, c130):
        """Test that an empty load sits at the envelope midpoint."""
        c17_result = solve_cob([], [], 0, c17)
        c130_result = solve_cob([], [], 0, c130)

        assert c17_result.cob_percent == pytest.approx(28.0)
        assert c17_result.in_envelope is True
        assert c17_result.cg_station == pytest.approx(869.7 + 0.28 * 309.5)
        assert c130_result.cob_percent == pytest.approx(25.5)

    def test_two_pallet_reference_value(self, two_pallet_load, c17):
        """
        Two 5,000 lb pallets at cargo coordinates 0 and 54.

        Arms are 428 and 482 in, so CG = 455 in and
        CoB = (455 - 869.7) / 309.5 x 100 = -134.0 %MAC.
        """
        result = solve_cob(two_pallet_load.pallets, [], 0, c17)

        assert result.total_weight == 10000.0
        assert result.cg_station == pytest.approx(455.0)
        assert not math.isnan(result.cob_percent)
        assert round(result.cob_percent, 1) == -134.0

    def test_raw_value_decides_envelope(self, two_pallet_load, c17):
        """Test that clamping only affects the display value."""
        result = solve_cob(two_pallet_load.pallets, [], 0, c17)

        assert result.display_percent == 0.0
        assert result.in_envelope is False
        assert result.status is EnvelopeStatus.FORWARD_OF_LIMIT
        assert result.deviation == pytest.approx(result.cob_percent - 16)

    def test_passenger_only_load(self, c17):
        """Test that passengers sit at the middle of the seating zone."""
        result = solve_cob([], [], 10, c17)

        assert passenger_arm(c17) == pytest.approx(428 + 1056 * 0.4 + 50)
        assert result.cg_station == pytest.approx(900.4)
        assert result.total_weight == 2250.0

    def test_vehicle_contributes_moment(self, c17):
        vehicle = Vehicle(id="V1", weight=6000.0, longitudinal_position=528.0)

        result = solve_cob([], [VehiclePlacement(vehicle=vehicle)], 0, c17)

        assert result.cg_station == pytest.approx(956.0)
        assert result.cob_percent == pytest.approx((956.0 - 869.7) / 309.5 * 100)
        assert result.in_envelope is True

    def test_moving_aft_increases_cob(self, c17):
        """Test envelope monotonicity for a fixed total weight."""
        base = [place(make_pallet("P1", 6000.0), 0, 300.0), place(make_pallet("P2", 4000.0), 1, 500.0)]
        aft = [place(p.pallet, p.station_index, p.longitudinal_coord + 40.0) for p in base]
        fwd = [place(p.pallet, p.station_index, p.longitudinal_coord - 40.0) for p in base]

        base_cob = solve_cob(base, [], 0, c17).cob_percent

        assert solve_cob(aft, [], 0, c17).cob_percent > base_cob
        assert solve_cob(fwd, [], 0, c17).cob_percent < base_cob

    def test_aft_of_limit(self, c17):
        heavy_aft = [place(make_pallet("P1", 10000.0), 17, 1000.0)]

        result = solve_cob(heavy_aft, [], 0, c17)

        assert result.status is EnvelopeStatus.AFT_OF_LIMIT
        assert result.deviation > 0
        assert result.display_percent == 100.0


class TestEnvelopeHelpers:
    """Tests for envelope conversions."""

    def test_envelope_status_boundaries(self, c17):
        """Test that the limits themselves are inside the envelope."""
        assert envelope_status(16.0, c17) == (EnvelopeStatus.WITHIN_LIMITS, 0.0)
        assert envelope_status(40.0, c17) == (EnvelopeStatus.WITHIN_LIMITS, 0.0)
        assert envelope_status(15.0, c17)[0] is EnvelopeStatus.FORWARD_OF_LIMIT

    def test_envelope_limits(self, c17):
        limits = envelope_limits(c17)

        assert limits.fwd_limit == pytest.approx(869.7 + 0.16 * 309.5)
        assert limits.aft_limit == pytest.approx(869.7 + 0.40 * 309.5)
        assert limits.usable_length == pytest.approx(0.24 * 309.5)
        assert limits.target_station == pytest.approx(869.7 + 0.28 * 309.5)

    def test_station_to_envelope_percent(self, c17):
        limits = envelope_limits(c17)

        middle = station_to_envelope_percent(limits.target_station, c17)
        forward = station_to_envelope_percent(900.0, c17)
        aft = station_to_envelope_percent(1000.0, c17)

        assert middle.percent == pytest.approx(50.0)
        assert middle.mac_percent == pytest.approx(28.0)
        assert forward.percent == 0.0
        assert forward.status is EnvelopeStatus.FORWARD_OF_LIMIT
        assert aft.percent == 100.0
        assert aft.status is EnvelopeStatus.AFT_OF_LIMIT

    def test_cg_to_mac_percent_at_lemac(self, c17):
        assert cg_to_mac_percent(869.7, c17) == pytest.approx(0.0)

    @pytest.mark.parametrize("value,expected", [(-20.0, 0.0), (55.5, 55.5), (140.0, 100.0)])
    def test_clamp_percent(self, value, expected):
        assert clamp_percent(value) == expected


class TestStatusMessage:
    """Tests for cob_status_message."""

    def test_within_envelope(self, c17):
        result = solve_cob([], [], 0, c17)

        assert cob_status_message(result) == "CoB 28.0% MAC - Within envelope (16-40%)"

    def test_forward_warning(self, two_pallet_load, c17):
        result = solve_cob(two_pallet_load.pallets, [], 0, c17)

        assert cob_status_message(result) == (
            "WARNING: CoB -134.0% MAC exceeds forward limit (16%) by 150.0%"
        )


class TestStationLimits:
    """Tests for per-station placement checks."""

    def test_main_deck_fits(self, c17):
        check = validate_station_placement(c17, 3, 96.0, 88.0, 9000.0)

        assert check.valid is True
        assert check.errors == []

    def test_ramp_limits(self, c17):
        """Test that every exceeded ramp limit is reported."""
        check = validate_station_placement(c17, 17, 80.0, 150.0, 8000.0)

        assert check.valid is False
        assert check.errors == [
            'Height 80" exceeds station 17 limit of 70"',
            'Width 150" exceeds station 17 limit of 144"',
            "Weight 8,000 lb exceeds station 17 limit of 7,500 lb",
        ]
        assert [issue.code for issue in check.issues] == [
            IssueCode.STATION_HEIGHT,
            IssueCode.STATION_WIDTH,
            IssueCode.STATION_OVERWEIGHT,
        ]

    def test_invalid_position(self, c17):
        check = validate_station_placement(c17, 0, 50.0, 50.0, 100.0)

        assert check.valid is False
        assert "Invalid position" in check.errors[0]
        assert check.issues[0].code is IssueCode.INVALID_STATION

    def test_position_weight_limit(self, c17, c130):
        assert position_weight_limit(c17, c17.stations[16]) == 7500
        assert position_weight_limit(c130, c130.stations[5]) == 10000


class TestUnits:
    """Tests for pint conversions."""

    def test_lb_kg_round_trip(self):
        assert lb_to_kg(100.0) == pytest.approx(45.359237)
        assert kg_to_lb(45.359237) == pytest.approx(100.0)

    def test_in_to_m(self):
        assert in_to_m(100.0) == pytest.approx(2.54)

    def test_moment(self):
        assert moment_lb_in_to_kg_m(1000.0) == pytest.approx(0.45359237 * 0.0254 * 1000)
