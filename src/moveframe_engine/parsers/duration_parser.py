"""
Duration Parsers

Time (duration) fields in the HhMM'SS"T shape, and the restart time of a
"Restart time" pause which is entered the same way.

Digits are filled right to left: tenths, then seconds, minutes and hours.
    "5"       -> 0h00'00"5
    "13045"   -> 0h13'04"5
    "123456"  -> 1h23'45"6
Separated input reads hours only when it has an 'h' or two or more ':'/'.':
    "1:30"    -> 0h01'30"0
    "1h23:45" -> 1h23'45"0
"""

import re
import logging
from typing import Optional, Tuple

from . import register_parser
from .base import BaseFieldParser
from .models import FieldSpec, NormalizeOptions, NormalizeResult

logger = logging.getLogger(__name__)

MAX_HOURS = 9
MAX_TIME = "9h00'00\"0"
RESTART_TIME_DIGITS = 7

_HOURS_RE = re.compile(r"(\d+)h")
_MINUTES_RE = re.compile(r"(\d+)'")
_SECONDS_RE = re.compile(r"(\d+)\"")


def split_time_digits(digits: str) -> Tuple[str, str, str, str]:
    """Slot-fill pure digits into (hours, minutes, seconds, tenths)."""
    padded = digits.zfill(6)
    return padded[:-5], padded[-5:-3], padded[-3:-1], padded[-1:]


def format_time(hours: str, minutes: str, seconds: str, tenths: str) -> str:
    return f"{int(hours)}h{minutes}'{seconds}\"{tenths}"


def format_time_from_digits(digits: str) -> str:
    """Canonical time for a digit string, without bounds checks."""
    if not digits:
        return ''
    return format_time(*split_time_digits(digits))


def time_to_seconds(value: Optional[str]) -> int:
    """Whole seconds of a canonical time or pause ("1h23'45\"6" -> 5025, "20\"" -> 20)."""
    if not value:
        return 0

    hours = _HOURS_RE.search(value)
    minutes = _MINUTES_RE.search(value)
    seconds = _SECONDS_RE.search(value)

    if not (hours or minutes or seconds):
        # Bare number, as in the "0" pause option
        digits = re.match(r"\s*(\d+)", value)
        return int(digits.group(1)) if digits else 0

    total = 0
    if hours:
        total += int(hours.group(1)) * 3600
    if minutes:
        total += int(minutes.group(1)) * 60
    if seconds:
        total += int(seconds.group(1))
    return total


class _TimeParserMixin:
    """Bounds shared by every HhMM'SS\"T parser."""

    def check_time(self, raw: str, hours: str, minutes: str, seconds: str,
                   tenths: str) -> NormalizeResult:
        if int(hours) >= MAX_HOURS:
            if int(hours) == MAX_HOURS and not int(minutes) and not int(seconds) and not int(tenths):
                return NormalizeResult.accept(MAX_TIME, raw)
            logger.debug(f"Time {raw!r} saturates at {MAX_TIME}")
            return NormalizeResult.clamp(MAX_TIME, raw)

        if int(minutes) > 59 or int(seconds) > 59:
            return self.reject(raw, "Minutes and seconds must be 59 or less")

        return NormalizeResult.accept(format_time(hours, minutes, seconds, tenths), raw)


class DurationParser(_TimeParserMixin, BaseFieldParser):
    """Moveframe time field"""

    LIST_SEPARATORS = re.compile(r"[.:]")

    @staticmethod
    def parser_name() -> str:
        return "duration"

    def parse(self, raw: str, spec: FieldSpec, options: NormalizeOptions) -> NormalizeResult:
        self.warnings = []
        if not raw:
            return NormalizeResult.accept('', raw)

        if self.has_separator(raw):
            groups = re.findall(r"\d+", raw)
            if not groups:
                return NormalizeResult.accept('', raw)
            return self.check_time(raw, *self._separated_slots(raw, groups))

        digits = self.digits(raw)
        if not digits:
            return NormalizeResult.accept('', raw)
        return self.check_time(raw, *split_time_digits(digits))

    def _separated_slots(self, raw: str, groups) -> Tuple[str, str, str, str]:
        has_hours = 'h' in raw or len(self.LIST_SEPARATORS.split(raw)) > 2
        if not has_hours:
            groups = ['0'] + groups
        groups = groups + [''] * (4 - len(groups))

        hours = groups[0] or '0'
        minutes = (groups[1] or '0').zfill(2)
        seconds = self.seconds_group(groups[2])
        tenths = groups[3][:1] or '0'
        return hours, minutes, seconds, tenths


class RestartTimeParser(_TimeParserMixin, BaseFieldParser):
    """Clock time at which the next repetition restarts"""

    @staticmethod
    def parser_name() -> str:
        return "restart_time"

    def parse(self, raw: str, spec: FieldSpec, options: NormalizeOptions) -> NormalizeResult:
        self.warnings = []
        digits = self.digits(raw)[:RESTART_TIME_DIGITS]
        if not digits:
            return NormalizeResult.accept('', raw)

        result = self.check_time(raw, *split_time_digits(digits))
        if result.rejected or not options.reference_time:
            return result

        restart = time_to_seconds(result.value)
        # A zero restart time is left for the user to complete
        if 0 < restart <= time_to_seconds(options.reference_time):
            message = f"Restart time must be greater than {options.reference_time}"
            self.add_warning(f"{message}: {raw!r}")
            return NormalizeResult.notify('', message, raw)
        return result


register_parser(DurationParser)
register_parser(RestartTimeParser)
