"""
Workout Parameter Normalizer

Single entry point for free-form field input. The (sport, field kind) pair
selects a FieldSpec from FIELD_SPECS; the spec names the registered parser
and carries the shape, bounds and overflow policy it applies.
"""

import logging
from typing import Dict, Optional, Tuple, Union

from moveframe_engine.parsers import get_parser
from moveframe_engine.parsers.models import (
    NUMERIC_KINDS,
    FieldKind,
    FieldSpec,
    NormalizeOptions,
    NormalizeResult,
    OverflowPolicy,
    ValueShape,
)
from moveframe_engine.parsers.range_validator import validate_range
from moveframe_engine.services.sport_config import RestType, is_km_pace, normalize_sport

logger = logging.getLogger(__name__)

ANY_SPORT = "*"

SPEED_SPEC = FieldSpec(parser="speed", shape=ValueShape.DECIMAL, lower="0.0", policy=OverflowPolicy.CLAMP)
ROWING_PACE_SPEC = FieldSpec(parser="pace", shape=ValueShape.PACE_TENTHS, lower="0'00\"0", upper="9'59\"9")
SKI_PACE_SPEC = FieldSpec(parser="pace", shape=ValueShape.PACE, lower="0'00\"", upper="9'59\"")
PACE_SPEC = FieldSpec(
    parser="pace", shape=ValueShape.PACE_TENTHS, lower="0'00\"0", upper="9'59\"0", minute_digits=1,
)
RUN_KM_PACE_SPEC = FieldSpec(
    parser="pace",
    shape=ValueShape.PACE_TENTHS,
    lower="2'00\"0",
    upper="9'59\"9",
    policy=OverflowPolicy.SNAP_MIN,
    min_minutes=2,
    minute_digits=1,
)
RUN_PACE_SPEC = FieldSpec(
    parser="pace", shape=ValueShape.PACE_TENTHS, lower="0'00\"0", upper="1'59\"0", max_minutes=1, minute_digits=1,
)
TIME_SPEC = FieldSpec(
    parser="duration", shape=ValueShape.DURATION, lower="0h00'00\"0", upper="9h00'00\"0",
    policy=OverflowPolicy.SATURATE,
)
RESTART_TIME_SPEC = TIME_SPEC.model_copy(update={"parser": "restart_time"})
PAUSE_SPEC = FieldSpec(parser="pause", shape=ValueShape.PACE, upper="59\"", policy=OverflowPolicy.CLAMP)
REPS_TIME_SPEC = FieldSpec(
    parser="reps_time", shape=ValueShape.PACE, lower="0'01\"", upper="9'59\"", policy=OverflowPolicy.NOTIFY,
)

FIELD_SPECS: Dict[Tuple[str, FieldKind], FieldSpec] = {
    ("BIKE", FieldKind.PACE): SPEED_SPEC,
    ("ROWING", FieldKind.PACE): ROWING_PACE_SPEC,
    ("SKI", FieldKind.PACE): SKI_PACE_SPEC,
    (ANY_SPORT, FieldKind.PACE): PACE_SPEC,
    (ANY_SPORT, FieldKind.TIME): TIME_SPEC,
    (ANY_SPORT, FieldKind.PAUSE): PAUSE_SPEC,
    (ANY_SPORT, FieldKind.REPS_TIME): REPS_TIME_SPEC,
}


def _parse_kind(field_kind: Union[FieldKind, str]) -> FieldKind:
    try:
        return FieldKind(field_kind)
    except ValueError:
        raise ValueError(f"Unknown field kind: {field_kind!r}")


def _run_km_mode(options: NormalizeOptions) -> bool:
    if options.is_km_pace is not None:
        return options.is_km_pace
    if options.meters is not None:
        return is_km_pace("RUN", options.meters)
    return False


def resolve_spec(sport: str, field_kind: Union[FieldKind, str],
                 options: Optional[NormalizeOptions] = None) -> FieldSpec:
    """
    Look up the parser spec for a sport and field.

    Raises:
        ValueError: If the field kind is unknown or has no text parser.
    """
    kind = _parse_kind(field_kind)
    options = options or NormalizeOptions()
    key = normalize_sport(sport)

    if kind == FieldKind.PACE and key == "RUN":
        return RUN_KM_PACE_SPEC if _run_km_mode(options) else RUN_PACE_SPEC

    if kind == FieldKind.PAUSE and options.rest_type == RestType.RESTART_TIME.value:
        return RESTART_TIME_SPEC

    spec = FIELD_SPECS.get((key, kind)) or FIELD_SPECS.get((ANY_SPORT, kind))
    if spec is None:
        raise ValueError(f"Field kind '{kind.value}' has no text parser")
    return spec


def normalize(sport: str, field_kind: Union[FieldKind, str], raw: Optional[str],
              options: Optional[NormalizeOptions] = None) -> NormalizeResult:
    """
    Normalize a raw field value for a sport.

    Args:
        sport: Sport identifier, e.g. 'RUN' or 'body building'
        field_kind: One of FieldKind (or its string value)
        raw: Text exactly as typed; None is treated as empty
        options: Per-call context

    Returns:
        NormalizeResult; validation failures are outcomes, never exceptions

    Raises:
        ValueError: If field_kind is unknown.
    """
    kind = _parse_kind(field_kind)
    options = options or NormalizeOptions()
    raw = raw or ''

    if kind in NUMERIC_KINDS:
        return validate_range(kind, raw)

    if kind == FieldKind.PAUSE and options.rest_type == RestType.RESTART_PULSE.value:
        return validate_range(FieldKind.PULSE, raw)

    spec = resolve_spec(sport, kind, options)
    parser = get_parser(spec.parser)
    logger.debug(f"Normalizing {kind.value} for {sport!r} with '{spec.parser}' parser")

    result = parser.parse(raw, spec, options)
    return result
