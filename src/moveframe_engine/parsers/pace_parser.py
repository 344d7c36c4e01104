"""
Pace Parsers

Fast-input parsers for the pace/speed field:
- BIKE speed in km/h ("25.5", "30" -> "30.0")
- pace with tenths ("1305" -> 1'30"5, "1:30" -> 1'30"0)
- pace without tenths ("245" -> 2'45")
"""

import re
import logging

from moveframe_engine.utils import leading_float
from . import register_parser
from .base import BaseFieldParser
from .models import (
    FieldSpec,
    NormalizeOptions,
    NormalizeResult,
    OverflowPolicy,
    ValueShape,
)

logger = logging.getLogger(__name__)


class SpeedParser(BaseFieldParser):
    """Decimal speed, one decimal place, no upper bound"""

    NON_SPEED_CHARS = re.compile(r"[^\d.]")

    @staticmethod
    def parser_name() -> str:
        return "speed"

    def parse(self, raw: str, spec: FieldSpec, options: NormalizeOptions) -> NormalizeResult:
        self.warnings = []
        if not raw:
            return NormalizeResult.accept('', raw)

        cleaned = self.NON_SPEED_CHARS.sub('', raw)
        if not cleaned:
            return NormalizeResult.accept('', raw)

        speed = leading_float(cleaned)
        if speed is None:
            return self.reject(raw, "Unparseable speed")

        if speed < 0:
            return NormalizeResult.clamp(spec.lower or '0.0', raw)

        return NormalizeResult.accept(f"{speed:.1f}", raw)


class PaceParser(BaseFieldParser):
    """Minutes/seconds pace, with or without a tenths digit"""

    @staticmethod
    def parser_name() -> str:
        return "pace"

    def parse(self, raw: str, spec: FieldSpec, options: NormalizeOptions) -> NormalizeResult:
        self.warnings = []
        if not raw:
            return NormalizeResult.accept('', raw)

        with_tenths = spec.shape == ValueShape.PACE_TENTHS

        if self.has_separator(raw):
            pattern = self.SEPARATED_TENTHS_PATTERN if with_tenths else self.SEPARATED_PATTERN
            match = pattern.search(raw)
            if match:
                minutes = match.group(1) or '0'
                seconds = self.seconds_group(match.group(2))
                tenths = (match.group(3) or '0') if with_tenths else ''
                return self._check_bounds(raw, minutes, seconds, tenths, spec)

        digits = self.digits(raw)
        if not digits:
            return NormalizeResult.accept('', raw)

        minutes, seconds, tenths = self._slot_fill(digits, with_tenths, spec.minute_digits)
        return self._check_bounds(raw, minutes, seconds, tenths, spec)

    @staticmethod
    def _slot_fill(digits: str, with_tenths: bool, minute_digits):
        """Split pure digits into minute, second and tenth slots."""
        padded = digits.zfill(4 if with_tenths else 3)

        if minute_digits:
            # Fixed-width minute slot read from the left; extra digits are dropped
            m = minute_digits
            tenths = padded[m + 2:m + 3] if with_tenths else ''
            return padded[:m], padded[m:m + 2], tenths

        # Right-aligned: everything before the seconds is minutes
        if with_tenths:
            return padded[:-3], padded[-3:-1], padded[-1:]
        return padded[:-2], padded[-2:], ''

    def _check_bounds(self, raw: str, minutes: str, seconds: str, tenths: str,
                      spec: FieldSpec) -> NormalizeResult:
        minute = int(minutes)
        second = int(seconds)

        if spec.policy == OverflowPolicy.SNAP_MIN and minute < spec.min_minutes:
            logger.debug(f"Pace {raw!r} below {spec.lower}, snapping to minimum")
            return NormalizeResult.clamp(spec.lower, raw)

        if minute > spec.max_minutes or second > 59:
            return self.reject(raw, f"Pace out of range {spec.lower}-{spec.upper}")

        return NormalizeResult.accept(f"{minutes}'{seconds}\"{tenths}", raw)


register_parser(SpeedParser)
register_parser(PaceParser)
