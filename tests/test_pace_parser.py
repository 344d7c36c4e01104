"""Tests for pace and speed normalization."""
import pytest

from moveframe_engine.parsers.models import NormalizeOptions, Outcome
from moveframe_engine.services.normalizer import normalize


def pace(sport, raw, **options):
    return normalize(sport, "pace", raw, NormalizeOptions(**options))


class TestBikeSpeed:
    """BIKE pace is a decimal speed in km/h."""

    @pytest.mark.parametrize("raw,expected", [
        ("353", "353.0"),
        ("25.5", "25.5"),
        ("30km/h", "30.0"),
        ("25.5.1", "25.5"),
        ("0", "0.0"),
    ])
    def test_formats_one_decimal(self, raw, expected):
        result = pace("BIKE", raw)
        assert result.value == expected
        assert result.outcome == Outcome.ACCEPTED

    def test_no_upper_bound(self):
        assert pace("BIKE", "9999").value == "9999.0"

    def test_lone_decimal_point_rejected(self):
        result = pace("BIKE", ".")
        assert result.rejected
        assert result.value == "."


class TestRowingPace:
    """ROWING pace per 500m, M'SS\"T with all leading digits as minutes."""

    def test_digit_path(self):
        assert pace("ROWING", "1305").value == "1'30\"5"

    def test_short_digit_input(self):
        assert pace("ROWING", "5").value == "0'00\"5"

    def test_separator_path_defaults_tenths(self):
        assert pace("ROWING", "1:30").value == "1'30\"0"

    def test_separator_path_with_tenths(self):
        assert pace("ROWING", "1:30.5").value == "1'30\"5"

    @pytest.mark.parametrize("raw", ["1:75", "10305", "12:00"])
    def test_out_of_range_is_echoed(self, raw):
        result = pace("ROWING", raw)
        assert result.rejected
        assert result.value == raw


class TestSkiPace:
    """SKI pace has no tenths."""

    @pytest.mark.parametrize("raw,expected", [
        ("245", "2'45\""),
        ("5", "0'05\""),
        ("45", "0'45\""),
        ("2:45", "2'45\""),
        ("2'5", "2'05\""),
    ])
    def test_formats(self, raw, expected):
        assert pace("SKI", raw).value == expected

    def test_seconds_over_59_rejected(self):
        result = pace("SKI", "299")
        assert result.rejected
        assert result.value == "299"


class TestRunPace:
    """RUN pace depends on km mode."""

    def test_km_mode_snaps_below_minimum(self):
        result = pace("RUN", "130", is_km_pace=True)
        assert result.value == "2'00\"0"
        assert result.outcome == Outcome.CLAMPED
        assert not result.rejected

    def test_km_mode_separator_below_minimum(self):
        assert pace("RUN", "1:45", is_km_pace=True).value == "2'00\"0"

    def test_km_mode_in_range(self):
        result = pace("RUN", "4305", is_km_pace=True)
        assert result.value == "4'30\"5"
        assert result.outcome == Outcome.ACCEPTED

    @pytest.mark.parametrize("raw", ["9:75", "12:00"])
    def test_km_mode_above_maximum_rejected(self, raw):
        result = pace("RUN", raw, is_km_pace=True)
        assert result.rejected
        assert result.value == raw

    def test_per_100_mode(self):
        assert pace("RUN", "1305", is_km_pace=False).value == "1'30\"5"

    def test_per_100_mode_rejects_two_minutes(self):
        assert pace("RUN", "2305", is_km_pace=False).rejected

    def test_km_mode_derived_from_meters(self):
        """1000m shows Pace\\km, 100m shows Pace\\100."""
        assert pace("RUN", "130", meters="1000").value == "2'00\"0"
        assert pace("RUN", "2305", meters="100").rejected


class TestGenericPace:
    """Other sports: one minute digit read from the left."""

    @pytest.mark.parametrize("raw,expected", [
        ("1305", "1'30\"5"),
        ("130", "0'13\"0"),
        ("13055", "1'30\"5"),
        ("1:30", "1'30\"0"),
        ("1'30\"5", "1'30\"5"),
    ])
    def test_formats(self, raw, expected):
        assert pace("SWIM", raw).value == expected

    def test_seconds_over_59_rejected(self):
        result = pace("SWIM", "1960")
        assert result.rejected
        assert result.value == "1960"

    def test_unknown_sport_uses_generic_rule(self):
        assert pace("PETANQUE", "1305").value == "1'30\"5"


class TestEmptyPace:
    """Empty or digit-less input clears the field."""

    @pytest.mark.parametrize("sport", ["BIKE", "ROWING", "SKI", "RUN", "SWIM"])
    @pytest.mark.parametrize("raw", ["", "abc"])
    def test_empty(self, sport, raw):
        result = pace(sport, raw)
        assert result.value == ""
        assert result.outcome == Outcome.ACCEPTED
