"""Tests for bounded numeric fields."""
import pytest

from moveframe_engine.parsers.models import FieldKind, Outcome
from moveframe_engine.parsers.range_validator import RANGES, validate_range


class TestValidateRange:
    """Numeric fields notify and substitute the nearest bound."""

    @pytest.mark.parametrize("kind,raw,expected", [
        ("rowPerMin", "24", "24"),
        ("reps", "12", "12"),
        ("pulse", "72bpm", "72"),
        ("weight", "0", "0"),
        ("weight", "9999", "9999"),
    ])
    def test_in_range(self, kind, raw, expected):
        result = validate_range(kind, raw)
        assert result.value == expected
        assert result.outcome == Outcome.ACCEPTED

    @pytest.mark.parametrize("kind,raw,expected", [
        ("rowPerMin", "5", "10"),
        ("reps", "0", "1"),
        ("pulse", "40", "60"),
        ("weight", "-5", "0"),
    ])
    def test_below_minimum(self, kind, raw, expected):
        result = validate_range(kind, raw)
        assert result.value == expected
        assert result.outcome == Outcome.NOTIFIED
        assert result.message.startswith("Minimum")

    @pytest.mark.parametrize("kind,raw,expected", [
        ("rowPerMin", "120", "99"),
        ("reps", "100", "99"),
        ("pulse", "250", "200"),
        ("weight", "10000", "9999"),
    ])
    def test_above_maximum(self, kind, raw, expected):
        result = validate_range(kind, raw)
        assert result.value == expected
        assert result.outcome == Outcome.NOTIFIED
        assert result.message.startswith("Maximum")

    def test_non_numeric_rejected(self):
        result = validate_range(FieldKind.REPS, "abc")
        assert result.rejected
        assert result.value == "abc"

    def test_empty_accepted(self):
        assert validate_range(FieldKind.PULSE, "").value == ""

    def test_kind_without_range(self):
        with pytest.raises(ValueError):
            validate_range(FieldKind.TIME, "10")

    def test_ranges(self):
        assert RANGES[FieldKind.ROW_PER_MIN] == (10, 99)
        assert RANGES[FieldKind.REPS] == (1, 99)
        assert RANGES[FieldKind.PULSE] == (60, 200)
        assert RANGES[FieldKind.WEIGHT] == (0, 9999)
