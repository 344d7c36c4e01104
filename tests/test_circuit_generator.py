"""Tests for the circuit matrix generator."""
import pytest

from moveframe_engine.models import CircuitExercise
from moveframe_engine.services.circuit_generator import (
    ExecutionOrder,
    RegenerationPolicy,
    describe_circuits,
    generate,
    insert,
    relabel,
    summarize,
)


def circuits(*names):
    return relabel([CircuitExercise(letter="", name=name) for name in names])


class TestGenerate:
    """Initial matrix build."""

    def test_row_order(self, two_circuits):
        rows = generate(two_circuits, 2, 3)
        assert len(rows) == 12
        assert [r.circuit for r in rows[:6]] == ["A"] * 6
        assert [r.circuit for r in rows[6:]] == ["B"] * 6
        assert [(r.series, r.station) for r in rows[:6]] == [
            (1, 1), (1, 2), (1, 3), (2, 1), (2, 2), (2, 3),
        ]

    def test_editable_fields_empty(self, two_circuits):
        row = generate(two_circuits, 1, 1)[0]
        assert (row.sector, row.exercise, row.rip, row.pause) == ("", "", "", "")

    def test_pause_fill(self, two_circuits):
        assert all(r.pause == '10"' for r in generate(two_circuits, 1, 2, pause='10"'))

    def test_no_circuits(self):
        assert generate([], 2, 2) == []

    @pytest.mark.parametrize("series,stations", [(0, 3), (2, 0)])
    def test_non_positive_counts(self, two_circuits, series, stations):
        with pytest.raises(ValueError):
            generate(two_circuits, series, stations)


class TestRelabel:
    """Letters follow position."""

    def test_relabel(self):
        exercises = [CircuitExercise(letter="Q"), CircuitExercise(letter="A"), CircuitExercise(letter="Z")]
        assert [ex.letter for ex in relabel(exercises)] == ["A", "B", "C"]
        assert exercises[0].letter == "Q"

    def test_beyond_z(self):
        labeled = relabel([CircuitExercise(letter="") for _ in range(28)])
        assert [ex.letter for ex in labeled[-3:]] == ["Z", "AA", "AB"]


class TestInsert:
    """Mid-table insertion and regeneration."""

    def test_insert_after_first(self):
        exercises = circuits("Squat", "Bench", "Row")
        rows = generate(exercises, 2, 2)
        new_exercises, new_rows = insert(exercises, rows, "A", 1, 1, 3)

        assert [ex.letter for ex in new_exercises] == ["A", "B", "C", "D"]
        assert [ex.name for ex in new_exercises] == ["Squat", "", "Bench", "Row"]

        b_rows = [r for r in new_rows if r.circuit == "B"]
        assert [(r.series, r.station) for r in b_rows] == [(1, 1), (1, 2), (1, 3)]
        for letter in ("A", "C", "D"):
            assert len([r for r in new_rows if r.circuit == letter]) == 4

    def test_letters_contiguous(self):
        exercises = circuits("A", "B", "C")
        new_exercises, new_rows = insert(exercises, generate(exercises, 1, 1), "B", 2, 1, 1)
        letters = [ex.letter for ex in new_exercises]
        assert letters == ["A", "B", "C", "D", "E"]
        assert sorted({r.circuit for r in new_rows}) == letters

    @pytest.mark.parametrize("after", [None, "", "last", "X"])
    def test_appends_at_end(self, after):
        exercises = circuits("Squat", "Bench")
        new_exercises, _ = insert(exercises, [], after, 1, 2, 2)
        assert [ex.name for ex in new_exercises] == ["Squat", "Bench", ""]

    def test_empty_rows_only_changes_exercises(self):
        exercises = circuits("Squat")
        new_exercises, new_rows = insert(exercises, [], "A", 2, 2, 2)
        assert len(new_exercises) == 3
        assert new_rows == []

    def test_pause_stations_applied_to_every_row(self):
        exercises = circuits("Squat", "Bench")
        rows = generate(exercises, 1, 2)
        _, new_rows = insert(exercises, rows, "A", 1, 1, 1, pause_stations='15"')
        assert all(r.pause == '15"' for r in new_rows)

    def test_existing_circuits_keep_their_counts(self):
        exercises = circuits("Squat", "Bench")
        rows = generate(exercises[:1], 3, 2) + generate(exercises[1:], 1, 4)
        new_exercises, new_rows = insert(exercises, rows, "A", 1, 2, 2)

        summary = {s.letter: (s.series, s.stations) for s in summarize(new_exercises, new_rows)}
        assert summary == {"A": (3, 2), "B": (2, 2), "C": (1, 4)}

    def test_defaults_for_circuits_without_rows(self):
        exercises = circuits("Squat", "Bench")
        rows = generate(exercises[:1], 1, 1)
        new_exercises, new_rows = insert(
            exercises, rows, "last", 1, 1, 1, default_series=2, default_stations=3,
        )
        summary = {s.letter: (s.series, s.stations) for s in summarize(new_exercises, new_rows)}
        assert summary["B"] == (2, 3)

    def test_discard_policy_clears_edits(self):
        exercises = circuits("Squat", "Bench")
        rows = generate(exercises, 1, 1)
        rows[1] = rows[1].model_copy(update={"exercise": "Bench press", "rip": "10"})
        _, new_rows = insert(exercises, rows, "A", 1, 1, 1)
        assert all(r.exercise == "" and r.rip == "" for r in new_rows)

    def test_preserve_policy_keeps_edits_under_new_letter(self):
        exercises = circuits("Squat", "Bench")
        rows = generate(exercises, 1, 1)
        rows[1] = rows[1].model_copy(update={"exercise": "Bench press", "rip": "10", "pause": '45"'})
        _, new_rows = insert(exercises, rows, "A", 1, 1, 1, policy=RegenerationPolicy.PRESERVE)

        moved = [r for r in new_rows if r.circuit == "C"][0]
        assert moved.exercise == "Bench press"
        assert moved.rip == "10"
        assert moved.pause == '45"'
        assert [r for r in new_rows if r.circuit == "B"][0].exercise == ""

    def test_policy_accepts_string(self):
        exercises = circuits("Squat")
        _, new_rows = insert(exercises, generate(exercises, 1, 1), None, 1, 1, 1, policy="preserve")
        assert len(new_rows) == 2

    def test_inputs_not_mutated(self):
        exercises = circuits("Squat", "Bench")
        rows = generate(exercises, 1, 1)
        insert(exercises, rows, "A", 1, 1, 1)
        assert [ex.letter for ex in exercises] == ["A", "B"]
        assert [r.circuit for r in rows] == ["A", "B"]

    @pytest.mark.parametrize("count,series,stations", [(0, 1, 1), (1, 0, 1), (1, 1, 0)])
    def test_invalid_counts(self, count, series, stations):
        with pytest.raises(ValueError):
            insert(circuits("Squat"), [], "A", count, series, stations)


class TestSummarize:
    """Per-circuit counts read back from the rows."""

    def test_summary(self, two_circuits):
        rows = generate(two_circuits, 2, 3)
        summary = summarize(two_circuits, rows)
        assert [(s.letter, s.series, s.stations, s.rows) for s in summary] == [
            ("A", 2, 3, 6), ("B", 2, 3, 6),
        ]

    def test_circuit_without_rows(self, two_circuits):
        summary = summarize(two_circuits, generate(two_circuits[:1], 1, 1))
        assert summary[1].rows == 0


class TestDescribeCircuits:
    """Plain-text preview of a battery."""

    def test_series_horizontal(self):
        text = describe_circuits(2, 3, 4, pause_circuits="2'", pause_stations='10"', pause_series="1'")
        assert text == (
            "2 circuits of 3 series each, with 4 stations per circuit\n"
            "Pause\\circuits: 2' - Pause\\stations: 10\" - Pause\\series: 1' - "
            "Execute horizontally (all series for station)"
        )

    def test_continuous_vertical(self):
        text = describe_circuits(1, 3, 5, execution_order=ExecutionOrder.VERTICAL, time_per_circuit=8)
        first, second = text.split("\n")
        assert first == "1 circuits of continuous for 8 minutes, with 5 stations per circuit"
        assert second.endswith("Execute vertically (1 serie for station)")

    def test_order_given_as_text(self):
        assert describe_circuits(1, 1, 1, execution_order="vertical").endswith("(1 serie for station)")

    def test_invalid_order(self):
        with pytest.raises(ValueError):
            describe_circuits(1, 1, 1, execution_order="diagonal")
