"""
Movelap Generator

Expands the sequences of a moveframe into one movelap per repetition and
renders the moveframe description shown in the workout grid.
"""

import logging
from typing import List, Optional, Tuple

from moveframe_engine.models import Movelap, MovelapBatch, MovelapGlobalFields, Sequence
from moveframe_engine.services.sport_config import normalize_sport

logger = logging.getLogger(__name__)

EMPTY_DESCRIPTION = "Empty moveframe"
DISTANCE_SEQUENCE_SPORTS = ("SWIM", "BIKE", "RUN")
STYLED_SPORTS = ("SWIM", "RUN")


def generate_movelaps(
    moveframe_id: str,
    sport: str,
    sequences: List[Sequence],
    global_fields: Optional[MovelapGlobalFields] = None,
) -> List[Movelap]:
    """One movelap per repetition, numbered continuously across sequences."""
    global_fields = global_fields or MovelapGlobalFields()
    movelaps: List[Movelap] = []
    rep_number = 1

    for sequence in sequences:
        for i in range(1, sequence.repetitions + 1):
            pause = sequence.pause
            # Last rep of a sequence carries the transition to the next one
            if i == sequence.repetitions and sequence.end_pause:
                pause = sequence.end_pause

            movelaps.append(Movelap(
                moveframe_id=moveframe_id,
                repetition_number=rep_number,
                distance=sequence.meters or None,
                speed=sequence.speed or None,
                style=sequence.style or None,
                pace=global_fields.pace100 or None,
                time=global_fields.time or None,
                reps=sequence.reps or None,
                pause=pause or None,
                alarm=global_fields.alarm or None,
                sound=global_fields.sound or None,
                notes=global_fields.note or None,
            ))
            rep_number += 1

    logger.debug(f"Generated {len(movelaps)} movelaps for {sport} moveframe {moveframe_id}")
    return movelaps


def _describe(sport: str, seq: Sequence) -> str:
    if sport in STYLED_SPORTS:
        return f"{seq.meters}m x {seq.repetitions} {seq.speed} {seq.style} pause {seq.pause}"
    if sport == "BIKE":
        rpm = f" R1:{seq.r1} R2:{seq.r2}" if seq.r1 and seq.r2 else ""
        return f"{seq.meters}m x {seq.repetitions} {seq.speed}{rpm} pause {seq.pause}"
    if sport == "BODY_BUILDING":
        return f"{seq.exercise} {seq.reps} reps x {seq.sets} sets {seq.speed} pause {seq.pause}"
    return f"{seq.repetitions} reps pause {seq.pause}"


def describe_sequences(sport: str, sequences: List[Sequence]) -> str:
    """Human-readable moveframe description, e.g. '100m x 4 A2 Freestyle pause 20"'."""
    if not sequences:
        return EMPTY_DESCRIPTION

    sport = normalize_sport(sport)
    parts = []
    for index, seq in enumerate(sequences):
        desc = _describe(sport, seq)
        if seq.end_pause and index < len(sequences) - 1:
            desc += f" + {seq.end_pause}"
        parts.append(desc)
    return " + ".join(parts)


def calculate_total_reps(sequences: List[Sequence]) -> int:
    return sum(seq.repetitions for seq in sequences)


def validate_sequence(sequence: Sequence, sport: str) -> Tuple[bool, List[str]]:
    errors: List[str] = []
    sport = normalize_sport(sport)

    if not sequence.repetitions or sequence.repetitions < 1:
        errors.append("Repetitions must be at least 1")
    if not sequence.pause:
        errors.append("Pause is required")

    if sport in DISTANCE_SEQUENCE_SPORTS:
        if not sequence.meters or sequence.meters < 1:
            errors.append("Distance/meters is required")
        if not sequence.speed:
            errors.append("Speed is required")
        if sport in STYLED_SPORTS and not sequence.style:
            errors.append("Style is required")
    elif sport == "BODY_BUILDING":
        if not sequence.exercise:
            errors.append("Exercise is required")
        if not sequence.reps or sequence.reps < 1:
            errors.append("Reps per set is required")
        if not sequence.sets or sequence.sets < 1:
            errors.append("Number of sets is required")

    return len(errors) == 0, errors


def validate_sequences(sequences: List[Sequence], sport: str) -> Tuple[bool, List[str]]:
    """Validate every sequence; errors are prefixed with the 1-based sequence number."""
    all_errors = []
    for index, sequence in enumerate(sequences):
        valid, errors = validate_sequence(sequence, sport)
        if not valid:
            all_errors.append(f"Sequence {index + 1}: {', '.join(errors)}")
    return len(all_errors) == 0, all_errors


def build_movelap_batch(
    moveframe_id: str,
    sport: str,
    sequences: List[Sequence],
    global_fields: Optional[MovelapGlobalFields] = None,
) -> MovelapBatch:
    """Movelaps plus description, after validating the sequences.

    Raises:
        ValueError: If any sequence is invalid.
    """
    valid, errors = validate_sequences(sequences, sport)
    if not valid:
        logger.warning(f"Invalid sequences for moveframe {moveframe_id}: {errors}")
        raise ValueError("; ".join(errors))

    return MovelapBatch(
        movelaps=generate_movelaps(moveframe_id, sport, sequences, global_fields),
        description=describe_sequences(sport, sequences),
    )
