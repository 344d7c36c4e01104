"""
Individual Plan Propagator

Per-repetition rows of a moveframe planned in individual mode. Every
operation returns a new list; the rows passed in are never mutated.
"""

import logging
from typing import Any, Dict, List, Optional

from moveframe_engine.models import PROPAGATED_FIELDS, IndividualPlanRow
from moveframe_engine.services.sport_config import RestType, SportClass, classify_sport

logger = logging.getLogger(__name__)

DEFAULT_PAUSE = '20"'
DEFAULT_SPEED = 'A2'
DEFAULT_TIME = "0h05'30\""
DEFAULT_STRENGTH_REPS = '12'
DEFAULT_TOOL_REPS = '1'


def _default(defaults: Dict[str, Any], key: str, fallback: str = '') -> str:
    """Moveframe default as text; missing or empty values use the fallback."""
    value = defaults.get(key)
    return str(value) if value else fallback


def copy_down(rows: List[IndividualPlanRow], from_index: int) -> List[IndividualPlanRow]:
    """
    Copy the present fields of rows[from_index] onto every later row.

    Fields the source row does not carry (None) leave the targets untouched;
    ``index`` is never copied. Copying from the last row, or beyond it,
    returns an unchanged copy.

    Raises:
        IndexError: If from_index is negative.
    """
    if from_index < 0:
        raise IndexError(f"Row index must be >= 0, got {from_index}")

    result = [row.model_copy() for row in rows]
    if from_index >= len(rows) - 1:
        return result

    source = rows[from_index]
    updates = {
        field: getattr(source, field)
        for field in PROPAGATED_FIELDS
        if getattr(source, field) is not None
    }
    for i in range(from_index + 1, len(result)):
        result[i] = result[i].model_copy(update=updates)

    logger.debug(f"Copied {len(updates)} fields from row {from_index + 1} to {len(rows) - from_index - 1} rows")
    return result


def initialize_individual_plans(
    sport: str,
    count: int,
    defaults: Optional[Dict[str, Any]] = None,
) -> List[IndividualPlanRow]:
    """
    Build one row per repetition with the sport's field subset.

    ``defaults`` holds the moveframe-level values (speed, pace, time, pause,
    rest_type, reps, repetitions, strokes, watts, pause_min, pause_mode,
    pause_pace) the rows start from.
    """
    if count < 0:
        raise ValueError(f"Repetition count must be >= 0, got {count}")

    defaults = defaults or {}
    classification = classify_sport(sport)
    rows = []

    for i in range(count):
        row: Dict[str, Any] = {
            'index': i + 1,
            'pause': _default(defaults, 'pause', DEFAULT_PAUSE),
            'rest_type': _default(defaults, 'rest_type', RestType.SET_TIME.value),
            'strokes': _default(defaults, 'strokes'),
            'watts': _default(defaults, 'watts'),
            'pause_min': _default(defaults, 'pause_min'),
            'pause_mode': _default(defaults, 'pause_mode'),
            'pause_pace': _default(defaults, 'pause_pace'),
        }

        if classification == SportClass.STRENGTH:
            row['reps'] = _default(defaults, 'reps', DEFAULT_STRENGTH_REPS)
            row['weight'] = ''
        elif classification == SportClass.TOOLS:
            row['reps'] = _default(defaults, 'repetitions', DEFAULT_TOOL_REPS)
            row['tools'] = ''
        else:
            row['speed'] = _default(defaults, 'speed', DEFAULT_SPEED)
            row['time'] = _default(defaults, 'pace') or _default(defaults, 'time', DEFAULT_TIME)

        rows.append(IndividualPlanRow(**row))

    logger.info(f"Initialized {count} individual plan rows for {sport} ({classification.value})")
    return rows


def update_individual_plan(
    rows: List[IndividualPlanRow],
    index: int,
    field: str,
    value: Optional[str],
) -> List[IndividualPlanRow]:
    """
    Set one field on one row. An edit to the first row applies to every row.

    Raises:
        IndexError: If index is outside the rows.
        ValueError: If field is not an editable plan field, or the value
            is not valid for it (e.g. None for pause).
    """
    if field not in PROPAGATED_FIELDS:
        raise ValueError(f"Unknown individual plan field: {field!r}")
    if index < 0 or index >= len(rows):
        raise IndexError(f"Row index {index} out of range for {len(rows)} rows")

    targets = range(len(rows)) if index == 0 else [index]
    result = [row.model_copy() for row in rows]
    for i in targets:
        # pydantic.ValidationError is a ValueError
        result[i] = IndividualPlanRow.model_validate({**result[i].model_dump(), field: value})
    return result
