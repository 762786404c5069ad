"""
Tests for the aircraft specification catalog.
"""

import pytest
from pydantic import ValidationError

from loadmaster.catalog import (
    AIRCRAFT_SPECS,
    C17_SPEC,
    C130_SPEC,
    UnknownAircraftType,
    list_aircraft,
    spec_for,
    station_for_position,
)
from loadmaster.models.aircraft import AircraftSpec, AircraftType


class TestSpecLookup:
    """Tests for spec_for and list_aircraft."""

    def test_lookup_by_enum(self):
        assert spec_for(AircraftType.C17) is C17_SPEC

    def test_lookup_by_string(self):
        assert spec_for("C-130") is C130_SPEC

    def test_unknown_type_raises(self):
        """Test that an unknown key fails with a ValueError subclass."""
        with pytest.raises(UnknownAircraftType) as exc_info:
            spec_for("B-52")

        assert isinstance(exc_info.value, ValueError)
        assert exc_info.value.key == "B-52"
        assert "C-17" in str(exc_info.value)

    def test_list_aircraft(self):
        assert list_aircraft() == [AircraftType.C17, AircraftType.C130]

    def test_catalog_is_read_only(self):
        with pytest.raises(TypeError):
            AIRCRAFT_SPECS[AircraftType.C17] = C130_SPEC


class TestC17Spec:
    """Tests for C-17 catalog values."""

    def test_envelope(self, c17):
        assert c17.cob_min_percent == 16
        assert c17.cob_max_percent == 40
        assert c17.cob_midpoint_percent == pytest.approx(28.0)

    def test_datums(self, c17):
        assert c17.lemac_station == pytest.approx(869.7)
        assert c17.mac_length == pytest.approx(309.5)
        assert c17.cargo_bay_fs_start == 428

    def test_stations(self, c17):
        """Test station count and ramp layout."""
        assert len(c17.stations) == c17.pallet_positions == 18
        assert c17.main_deck_positions == 16
        assert [s.position for s in c17.stations if s.is_ramp] == [17, 18]

    def test_stations_run_forward_to_aft(self, c17):
        distances = [s.rdl_distance for s in c17.stations]

        assert distances == sorted(distances)

    def test_ramp_station_limits(self, c17):
        ramp = station_for_position(c17, 17)

        assert ramp.max_height == 70
        assert ramp.max_weight == 7500
        assert ramp.requires_shoring is True


class TestC130Spec:
    """Tests for C-130 catalog values."""

    def test_envelope(self, c130):
        assert c130.cob_midpoint_percent == pytest.approx(25.5)

    def test_stations(self, c130):
        assert len(c130.stations) == 6
        assert c130.ramp_positions == frozenset({6})
        assert c130.max_payload == 42000


class TestStationForPosition:
    """Tests for station_for_position."""

    def test_first_station(self, c17):
        assert station_for_position(c17, 1).rdl_distance == 245

    @pytest.mark.parametrize("position", [0, 19, -1])
    def test_out_of_range(self, c17, position):
        with pytest.raises(ValueError, match="Invalid position"):
            station_for_position(c17, position)


class TestSpecConsistency:
    """Tests that malformed specifications are rejected when built."""

    def _rebuild(self, **changes):
        data = dict(C17_SPEC)
        data.update(changes)
        return AircraftSpec.model_validate(data)

    def test_catalog_entry_round_trips(self):
        assert self._rebuild() == C17_SPEC

    def test_inverted_envelope_rejected(self):
        with pytest.raises(ValidationError, match="cob_min_percent"):
            self._rebuild(cob_min_percent=40, cob_max_percent=16)

    def test_station_count_mismatch_rejected(self):
        with pytest.raises(ValidationError, match="stations defined"):
            self._rebuild(pallet_positions=17)

    def test_empty_station_table_rejected(self):
        with pytest.raises(ValidationError, match="empty"):
            self._rebuild(stations=())

    def test_ramp_positions_must_match_stations(self):
        with pytest.raises(ValidationError, match="ramp_positions"):
            self._rebuild(ramp_positions=frozenset({18}))

    def test_mac_must_be_positive(self):
        with pytest.raises(ValidationError):
            self._rebuild(mac_length=0)
