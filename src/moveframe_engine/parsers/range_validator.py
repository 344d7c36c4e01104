"""
Range Validator

Bounded integer fields. Input is read like a browser number field: the
leading integer counts and anything after it is ignored ("12abc" -> 12).
"""

import logging
from typing import Dict, Tuple, Union

from moveframe_engine.utils import leading_int
from .models import FieldKind, NormalizeResult

logger = logging.getLogger(__name__)

RANGES: Dict[FieldKind, Tuple[int, int]] = {
    FieldKind.ROW_PER_MIN: (10, 99),
    FieldKind.REPS: (1, 99),
    FieldKind.PULSE: (60, 200),
    FieldKind.WEIGHT: (0, 9999),
}

LABELS = {
    FieldKind.ROW_PER_MIN: "row per minute",
    FieldKind.REPS: "reps",
    FieldKind.PULSE: "pulse",
    FieldKind.WEIGHT: "weight",
}


def validate_range(kind: Union[FieldKind, str], raw: str) -> NormalizeResult:
    """
    Bound a numeric field.

    Below the minimum and above the maximum both notify and substitute the
    nearest bound; input without a leading integer is rejected.

    Raises:
        ValueError: If the kind has no numeric range.
    """
    kind = FieldKind(kind)
    if kind not in RANGES:
        raise ValueError(f"No numeric range for field kind '{kind.value}'")

    raw = raw or ''
    if not raw.strip():
        return NormalizeResult.accept('', raw)

    value = leading_int(raw)
    if value is None:
        logger.warning(f"Rejected non-numeric {kind.value}: {raw!r}")
        return NormalizeResult.reject(raw)

    minimum, maximum = RANGES[kind]
    label = LABELS[kind]
    if value < minimum:
        message = f"Minimum {label} is {minimum}"
        logger.warning(f"{message}, got {value}")
        return NormalizeResult.notify(str(minimum), message, raw)
    if value > maximum:
        message = f"Maximum {label} is {maximum}"
        logger.warning(f"{message}, got {value}")
        return NormalizeResult.notify(str(maximum), message, raw)

    return NormalizeResult.accept(str(value), raw)
