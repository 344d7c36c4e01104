"""Utility functions."""
import json
import logging
import re
from typing import Any, Optional

logger = logging.getLogger(__name__)

_LEADING_INT_RE = re.compile(r"^\s*([+-]?\d+)")
_LEADING_FLOAT_RE = re.compile(r"^\s*([+-]?(?:\d+(?:\.\d*)?|\.\d+))")


def leading_int(s: Optional[str]) -> Optional[int]:
    """Parse the integer prefix of a string ("12abc" -> 12), like a browser number field."""
    if s is None:
        return None
    match = _LEADING_INT_RE.match(str(s))
    return int(match.group(1)) if match else None


def leading_float(s: Optional[str]) -> Optional[float]:
    """Parse the float prefix of a string ("25.5.1" -> 25.5)."""
    if s is None:
        return None
    match = _LEADING_FLOAT_RE.match(str(s))
    return float(match.group(1)) if match else None


def digits_only(s: Optional[str]) -> str:
    """Strip everything that is not a digit."""
    return re.sub(r"\D", "", s or "")


def circuit_letter(index: int) -> str:
    """Letter for a zero-based position: 0 -> A, 25 -> Z, 26 -> AA, 27 -> AB."""
    if index < 0:
        raise ValueError(f"Circuit index must be >= 0, got {index}")
    result = ""
    while index >= 0:
        result = chr(65 + index % 26) + result
        index = index // 26 - 1
    return result


def load_json_or_default(raw: Optional[str], default: Any) -> Any:
    """Decode stored JSON, falling back to ``default`` when it is missing or malformed."""
    if not raw:
        return default
    try:
        return json.loads(raw)
    except (TypeError, ValueError) as e:
        logger.warning(f"Ignoring malformed stored JSON: {e}")
        return default
