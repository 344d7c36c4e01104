"""
Circuit Matrix Generator

Builds the circuit x series x station rows of a battery planner and inserts
new circuits mid-table. Circuit letters are always re-derived from position.
"""

import logging
from enum import Enum
from typing import Dict, List, Optional, Tuple

from moveframe_engine.models import CircuitExercise, CircuitRow, CircuitSummary
from moveframe_engine.utils import circuit_letter

logger = logging.getLogger(__name__)

APPEND_MARKER = "last"
EDITABLE_FIELDS = ("sector", "exercise", "rip", "pause")


class RegenerationPolicy(str, Enum):
    """What happens to edited cells of existing circuits on insert"""
    DISCARD = "discard"      # every row is rebuilt empty
    PRESERVE = "preserve"    # existing circuits keep their cell values


class ExecutionOrder(str, Enum):
    VERTICAL = "vertical"
    HORIZONTAL = "horizontal"


EXECUTION_ORDER_TEXT = {
    ExecutionOrder.VERTICAL: "vertically (1 serie for station)",
    ExecutionOrder.HORIZONTAL: "horizontally (all series for station)",
}


def _check_counts(series: int, stations: int):
    if series < 1 or stations < 1:
        raise ValueError(f"Series and stations must be >= 1, got {series} series x {stations} stations")


def _circuit_rows(letter: str, series: int, stations: int, pause: str = "") -> List[CircuitRow]:
    return [
        CircuitRow(circuit=letter, series=s, station=st, pause=pause)
        for s in range(1, series + 1)
        for st in range(1, stations + 1)
    ]


def relabel(exercises: List[CircuitExercise]) -> List[CircuitExercise]:
    """Copies of the exercises with letters matching their positions."""
    return [ex.model_copy(update={"letter": circuit_letter(i)}) for i, ex in enumerate(exercises)]


def generate(
    exercises: List[CircuitExercise],
    series_per_circuit: int,
    stations_per_circuit: int,
    pause: str = "",
) -> List[CircuitRow]:
    """Rows in circuit -> series -> station order with empty editable cells."""
    _check_counts(series_per_circuit, stations_per_circuit)

    rows: List[CircuitRow] = []
    for exercise in exercises:
        rows.extend(_circuit_rows(exercise.letter, series_per_circuit, stations_per_circuit, pause))

    logger.info(
        f"Generated {len(rows)} rows for {len(exercises)} circuits "
        f"({series_per_circuit} series x {stations_per_circuit} stations)"
    )
    return rows


def summarize(exercises: List[CircuitExercise], rows: List[CircuitRow]) -> List[CircuitSummary]:
    """Series and station counts of every circuit as found in the rows."""
    summaries = {ex.letter: CircuitSummary(letter=ex.letter) for ex in exercises}
    for row in rows:
        summary = summaries.get(row.circuit)
        if summary is None:
            continue
        summary.series = max(summary.series, row.series)
        summary.stations = max(summary.stations, row.station)
        summary.rows += 1
    return [summaries[ex.letter] for ex in exercises]


def describe_circuits(
    circuit_count: int,
    series_per_circuit: int,
    stations_per_circuit: int,
    *,
    pause_circuits: str = "",
    pause_stations: str = "",
    pause_series: str = "",
    execution_order: ExecutionOrder = ExecutionOrder.HORIZONTAL,
    time_per_circuit: Optional[int] = None,
) -> str:
    """
    Two-line preview of a battery, e.g.

        2 circuits of 3 series each, with 4 stations per circuit
        Pause\\circuits: 2' - Pause\\stations: 10" - Pause\\series: 1' - Execute horizontally (...)

    A ``time_per_circuit`` (minutes) describes continuous circuits instead of series.
    """
    if time_per_circuit is not None:
        series_text = f"continuous for {time_per_circuit} minutes"
    else:
        series_text = f"{series_per_circuit} series each"

    order_text = EXECUTION_ORDER_TEXT[ExecutionOrder(execution_order)]
    return (
        f"{circuit_count} circuits of {series_text}, with {stations_per_circuit} stations per circuit\n"
        f"Pause\\circuits: {pause_circuits} - Pause\\stations: {pause_stations} - "
        f"Pause\\series: {pause_series} - Execute {order_text}"
    )


def _insert_position(exercises: List[CircuitExercise], insert_after_letter: Optional[str]) -> int:
    if not insert_after_letter or insert_after_letter == APPEND_MARKER:
        return len(exercises)
    for i, ex in enumerate(exercises):
        if ex.letter == insert_after_letter:
            return i + 1
    logger.warning(f"Circuit {insert_after_letter!r} not found, appending new circuits at the end")
    return len(exercises)


def insert(
    exercises: List[CircuitExercise],
    rows: List[CircuitRow],
    insert_after_letter: Optional[str],
    count: int,
    new_series: int,
    new_stations: int,
    *,
    pause_stations: str = "",
    policy: RegenerationPolicy = RegenerationPolicy.DISCARD,
    default_series: Optional[int] = None,
    default_stations: Optional[int] = None,
) -> Tuple[List[CircuitExercise], List[CircuitRow]]:
    """
    Insert ``count`` circuits after the named one and regenerate the matrix.

    Args:
        exercises: Current circuits, in order
        rows: Current matrix; when empty only the circuit list changes
        insert_after_letter: Letter to insert after; None, '' or 'last' appends
        count: Number of circuits to add
        new_series: Series of each new circuit
        new_stations: Stations of each new circuit
        pause_stations: Pause given to every regenerated row
        policy: DISCARD rebuilds every row empty, PRESERVE keeps the cells
            of existing circuits under their new letters
        default_series: Series for existing circuits with no rows
        default_stations: Stations for existing circuits with no rows

    Returns:
        (exercises, rows) as new lists

    Raises:
        ValueError: If count, new_series or new_stations is below 1.
    """
    if count < 1:
        raise ValueError(f"Number of circuits to insert must be >= 1, got {count}")
    _check_counts(new_series, new_stations)
    policy = RegenerationPolicy(policy)

    position = _insert_position(exercises, insert_after_letter)
    new_exercises = [
        CircuitExercise(letter=circuit_letter(len(exercises) + i))
        for i in range(count)
    ]
    spliced = list(exercises[:position]) + new_exercises + list(exercises[position:])
    relabeled = relabel(spliced)

    if not rows:
        return relabeled, []

    # Existing circuits keep the counts they were generated with
    counts: Dict[str, Tuple[int, int]] = {}
    for summary in summarize(exercises, rows):
        series = summary.series or default_series or new_series
        stations = summary.stations or default_stations or new_stations
        counts[summary.letter] = (series, stations)

    cells: Dict[Tuple[str, int, int], CircuitRow] = {}
    if policy == RegenerationPolicy.PRESERVE:
        cells = {(row.circuit, row.series, row.station): row for row in rows}

    new_ids = {id(ex) for ex in new_exercises}
    new_rows: List[CircuitRow] = []
    for circuit, current in zip(spliced, relabeled):
        if id(circuit) in new_ids:
            new_rows.extend(_circuit_rows(current.letter, new_series, new_stations, pause_stations))
            continue

        series, stations = counts[circuit.letter]
        for row in _circuit_rows(current.letter, series, stations, pause_stations):
            previous = cells.get((circuit.letter, row.series, row.station))
            if previous is not None:
                row = row.model_copy(update={f: getattr(previous, f) for f in EDITABLE_FIELDS})
            new_rows.append(row)

    logger.info(
        f"Inserted {count} circuits at position {position}; "
        f"regenerated {len(new_rows)} rows ({policy.value})"
    )
    return relabeled, new_rows
