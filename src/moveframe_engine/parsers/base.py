"""
Base Field Parser

Abstract base class for the free-form workout field parsers, plus the
registry the dispatch table uses to look parsers up by name.
"""

import re
import logging
from abc import ABC, abstractmethod
from typing import List, Optional

from moveframe_engine.utils import digits_only
from .models import FieldSpec, NormalizeOptions, NormalizeResult

logger = logging.getLogger(__name__)


class BaseFieldParser(ABC):
    """Abstract base class for field parsers"""

    # Any of these switches a raw value from the digit path to the separator path
    SEPARATOR_PATTERN = re.compile(r"[.:'\"h]")
    # "1:30", "1'30\"5", "1.305"
    SEPARATED_TENTHS_PATTERN = re.compile(r"(\d+)[.:'\"h]?(\d+)?[.:'\"h]?(\d)?")
    # "2:45", "2'45"
    SEPARATED_PATTERN = re.compile(r"(\d+)[.:'\"h]?(\d+)?")

    def __init__(self):
        self.warnings: List[str] = []

    @staticmethod
    @abstractmethod
    def parser_name() -> str:
        """Return the name dispatch specs refer to (e.g. 'pace')."""
        ...

    @abstractmethod
    def parse(self, raw: str, spec: FieldSpec, options: NormalizeOptions) -> NormalizeResult:
        """
        Normalize a raw field value.

        Args:
            raw: Text exactly as the user typed it
            spec: Shape, bounds and overflow policy for the field
            options: Per-call context (km pace, rest type, live typing)

        Returns:
            NormalizeResult with the formatted value and its outcome
        """
        pass

    def has_separator(self, raw: str) -> bool:
        return bool(self.SEPARATOR_PATTERN.search(raw))

    @staticmethod
    def digits(raw: str) -> str:
        return digits_only(raw)

    @staticmethod
    def seconds_group(group: Optional[str]) -> str:
        """Second group of a separated value, left-padded/truncated to two digits."""
        return (group or '0').zfill(2)[:2]

    def reject(self, raw: str, reason: str) -> NormalizeResult:
        self.add_warning(f"{reason}: {raw!r}")
        return NormalizeResult.reject(raw)

    def add_warning(self, warning: str):
        """Add a warning message"""
        self.warnings.append(warning)
        logger.warning(f"Parser warning: {warning}")
