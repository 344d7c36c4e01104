"""
Parser Models

Pydantic models shared by the field parsers: the field kinds, canonical value
shapes, overflow policies and the three-way normalization outcome.
"""

from typing import Optional
from pydantic import BaseModel, Field
from enum import Enum


class FieldKind(str, Enum):
    """Workout parameter fields with free-form input"""
    TIME = "time"
    PACE = "pace"
    PAUSE = "pause"
    REPS_TIME = "repsTime"
    # Bounded integer fields
    ROW_PER_MIN = "rowPerMin"
    REPS = "reps"
    PULSE = "pulse"
    WEIGHT = "weight"


NUMERIC_KINDS = {FieldKind.ROW_PER_MIN, FieldKind.REPS, FieldKind.PULSE, FieldKind.WEIGHT}


class ValueShape(str, Enum):
    """Canonical rendering of a parsed value"""
    DECIMAL = "D.D"                  # BIKE speed km/h
    PACE_TENTHS = "M'SS\"T"          # 1'30"5
    PACE = "M'SS\""                  # 2'45"
    DURATION = "HhMM'SS\"T"          # 1h23'45"6
    INTEGER = "N"                    # reps, pulse, ...


class OverflowPolicy(str, Enum):
    """What happens when a parsed value leaves its bounds"""
    REJECT = "reject"                # echo the raw input back unchanged
    CLAMP = "clamp"                  # silently substitute the nearest valid value
    SNAP_MIN = "snap_min"            # below min snaps to min, above max rejects
    SATURATE = "saturate"            # hour field saturates at its maximum
    NOTIFY = "notify"                # user notification, then clamp


class Outcome(str, Enum):
    """How a raw input was treated; callers can tell all of these apart"""
    ACCEPTED = "accepted"
    REJECTED = "rejected"
    CLAMPED = "clamped"
    NOTIFIED = "notified"


class FieldSpec(BaseModel):
    """Parser spec record: one row of the sport/field dispatch table"""
    parser: str = Field(..., description="Registered parser name")
    shape: ValueShape
    lower: Optional[str] = None
    upper: Optional[str] = None
    policy: OverflowPolicy = OverflowPolicy.REJECT
    min_minutes: int = 0
    max_minutes: int = 9
    # Digit path: fixed minute slot width, or None to give minutes every leading digit
    minute_digits: Optional[int] = None

    class Config:
        frozen = True


class NormalizeOptions(BaseModel):
    """Per-call context for the normalizer"""
    is_km_pace: Optional[bool] = Field(default=None, description="RUN pace per km/mile instead of per 100m")
    meters: Optional[str] = Field(default=None, description="Distance used to derive the pace label")
    rest_type: Optional[str] = Field(default=None, description="'Set time', 'Restart time' or 'Restart pulse'")
    live: bool = Field(default=False, description="Render the still-typing representation, no bounds")
    reference_time: Optional[str] = Field(default=None, description="Time a restart time must exceed")


class NormalizeResult(BaseModel):
    """Result of normalizing one raw field value"""
    value: str
    outcome: Outcome = Outcome.ACCEPTED
    message: Optional[str] = Field(default=None, description="User-facing notification text")
    raw: Optional[str] = None

    @property
    def rejected(self) -> bool:
        return self.outcome == Outcome.REJECTED

    @property
    def notified(self) -> bool:
        return self.outcome == Outcome.NOTIFIED

    @classmethod
    def accept(cls, value: str, raw: Optional[str] = None) -> 'NormalizeResult':
        return cls(value=value, outcome=Outcome.ACCEPTED, raw=raw)

    @classmethod
    def reject(cls, raw: str) -> 'NormalizeResult':
        return cls(value=raw, outcome=Outcome.REJECTED, raw=raw)

    @classmethod
    def clamp(cls, value: str, raw: Optional[str] = None) -> 'NormalizeResult':
        return cls(value=value, outcome=Outcome.CLAMPED, raw=raw)

    @classmethod
    def notify(cls, value: str, message: str, raw: Optional[str] = None) -> 'NormalizeResult':
        return cls(value=value, outcome=Outcome.NOTIFIED, message=message, raw=raw)
