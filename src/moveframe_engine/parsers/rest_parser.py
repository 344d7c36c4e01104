"""
Rest Parsers

Pause and reps-time fields, both in the M'SS" shape and both digits-only:
separators are dropped and the last two digits are always the seconds.
"""

import logging
from abc import abstractmethod

from . import register_parser
from .base import BaseFieldParser
from .models import FieldSpec, NormalizeOptions, NormalizeResult

logger = logging.getLogger(__name__)

MIN_REPS_TIME = "0'01\""
MAX_REPS_TIME = "9'59\""


def format_live(digits: str) -> str:
    """Partial rendering while the user is still typing; no bounds applied."""
    if not digits:
        return ''
    if len(digits) == 1:
        return f"0'{digits}"
    if len(digits) == 2:
        return f"0'{digits}\""
    return f"{digits[:-2]}'{digits[-2:]}\""


def split_minutes_seconds(digits: str):
    padded = digits.zfill(3)
    return int(padded[:-2]), padded[-2:]


class _RestParser(BaseFieldParser):

    def parse(self, raw: str, spec: FieldSpec, options: NormalizeOptions) -> NormalizeResult:
        self.warnings = []
        digits = self.digits(raw)
        if not digits:
            return NormalizeResult.accept('', raw)
        if options.live:
            return NormalizeResult.accept(format_live(digits), raw)

        minutes, seconds = split_minutes_seconds(digits)
        return self.bound(raw, minutes, seconds)

    @abstractmethod
    def bound(self, raw: str, minutes: int, seconds: str) -> NormalizeResult:
        """Apply the field's bounds to the slot-filled minutes and seconds."""
        ...


class PauseParser(_RestParser):
    """Set-time pause; seconds above 59 clamp to 59"""

    @staticmethod
    def parser_name() -> str:
        return "pause"

    def bound(self, raw: str, minutes: int, seconds: str) -> NormalizeResult:
        if int(seconds) > 59:
            return NormalizeResult.clamp(f"{minutes}'59\"", raw)
        return NormalizeResult.accept(f"{minutes}'{seconds}\"", raw)


class RepsTimeParser(_RestParser):
    """Duration of a timed repetition, 0'01" to 9'59" """

    @staticmethod
    def parser_name() -> str:
        return "reps_time"

    def bound(self, raw: str, minutes: int, seconds: str) -> NormalizeResult:
        if minutes > 9:
            return self._notify(raw, MAX_REPS_TIME, f"Maximum time is {MAX_REPS_TIME}")
        if minutes == 0 and int(seconds) == 0:
            return self._notify(raw, MIN_REPS_TIME, f"Minimum time is {MIN_REPS_TIME}")
        if int(seconds) > 59:
            return NormalizeResult.clamp(f"{minutes}'59\"", raw)
        return NormalizeResult.accept(f"{minutes}'{seconds}\"", raw)

    def _notify(self, raw: str, value: str, message: str) -> NormalizeResult:
        self.add_warning(f"{message}: {raw!r}")
        return NormalizeResult.notify(value, message, raw)


register_parser(PauseParser)
register_parser(RepsTimeParser)
