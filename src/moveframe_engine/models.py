"""Data models for moveframe planning."""
from pydantic import BaseModel, Field
from typing import List, Optional, Literal

from moveframe_engine.utils import load_json_or_default

MovelapStatus = Literal['PENDING', 'COMPLETED', 'SKIPPED', 'DISABLED']

DEFAULT_CIRCUIT_COLOR = '#FFD700'
DEFAULT_ANNOTATION_BG_COLOR = '#5168c2'
DEFAULT_ANNOTATION_TEXT_COLOR = '#000000'


class IndividualPlanRow(BaseModel):
    """
    One repetition row of a moveframe planned in "individual" mode.

    A field counts as present when it is not None; an empty string is a value.
    Which optional subset is populated depends on the sport classification:
    - distance: speed, time, strokes, watts
    - strength: reps, weight
    - tools: reps, tools
    """
    index: int = Field(..., ge=1, description="1-based repetition number")
    pause: str = ""

    speed: Optional[str] = None
    time: Optional[str] = None
    strokes: Optional[str] = None
    watts: Optional[str] = None
    rest_type: Optional[str] = None
    pause_min: Optional[str] = None
    pause_mode: Optional[str] = None
    pause_pace: Optional[str] = None
    reps: Optional[str] = None
    weight: Optional[str] = None
    tools: Optional[str] = None

    class Config:
        extra = "ignore"  # Ignore extra fields like 'id' from UI


# Fields carried from a source row by copy-down, in the order the UI edits them
PROPAGATED_FIELDS = (
    'speed',
    'time',
    'pause',
    'reps',
    'weight',
    'tools',
    'strokes',
    'watts',
    'rest_type',
    'pause_min',
    'pause_mode',
    'pause_pace',
)


class CircuitExercise(BaseModel):
    """A circuit of a battery; its letter always mirrors its list position."""
    letter: str
    name: str = ""
    color: str = DEFAULT_CIRCUIT_COLOR


class CircuitRow(BaseModel):
    """One (circuit, series, station) cell of the circuit matrix."""
    circuit: str
    series: int = Field(..., ge=1)
    station: int = Field(..., ge=1)
    sector: str = ""
    exercise: str = ""
    rip: str = ""
    pause: str = ""


class AnnotationColors(BaseModel):
    """Display colours of an annotation moveframe."""
    bg_color: str = DEFAULT_ANNOTATION_BG_COLOR
    text_color: str = DEFAULT_ANNOTATION_TEXT_COLOR
    bold: bool = False

    class Config:
        extra = "ignore"

    @classmethod
    def from_json(cls, raw: Optional[str]) -> 'AnnotationColors':
        """Build from stored JSON; anything unusable yields the defaults."""
        data = load_json_or_default(raw, {})
        if not isinstance(data, dict):
            return cls()
        try:
            return cls(
                bg_color=data.get('bg_color') or data.get('annotationBgColor') or DEFAULT_ANNOTATION_BG_COLOR,
                text_color=data.get('text_color') or data.get('annotationTextColor') or DEFAULT_ANNOTATION_TEXT_COLOR,
                bold=bool(data.get('bold', data.get('annotationBold', False))),
            )
        except (TypeError, ValueError):
            return cls()


class Sequence(BaseModel):
    """A run of identical repetitions inside a moveframe."""
    repetitions: int = 0
    pause: str = ""
    end_pause: Optional[str] = None  # Pause after the last rep, before the next sequence

    # Distance sports
    meters: Optional[int] = None
    speed: Optional[str] = None
    style: Optional[str] = None
    r1: Optional[str] = None  # BIKE chainring
    r2: Optional[str] = None  # BIKE sprocket

    # Strength sports
    exercise: Optional[str] = None
    reps: Optional[int] = None
    sets: Optional[int] = None

    class Config:
        extra = "ignore"


class MovelapGlobalFields(BaseModel):
    """Values shared by every movelap of a moveframe."""
    pace100: Optional[str] = None
    time: Optional[str] = None
    alarm: Optional[int] = None
    sound: Optional[str] = None
    note: Optional[str] = None


class Movelap(BaseModel):
    """One repetition instance inside a moveframe."""
    moveframe_id: str
    repetition_number: int
    distance: Optional[int] = None
    speed: Optional[str] = None
    style: Optional[str] = None
    pace: Optional[str] = None
    time: Optional[str] = None
    reps: Optional[int] = None
    rest_type: Optional[str] = None
    pause: Optional[str] = None
    alarm: Optional[int] = None
    sound: Optional[str] = None
    notes: Optional[str] = None
    status: MovelapStatus = 'PENDING'
    is_skipped: bool = False
    is_disabled: bool = False


class CircuitSummary(BaseModel):
    """Series/station counts of one circuit as found in a matrix."""
    letter: str
    series: int = 0
    stations: int = 0
    rows: int = 0


class MovelapBatch(BaseModel):
    """Movelaps generated for a moveframe with their description."""
    movelaps: List[Movelap] = Field(default_factory=list)
    description: str = ""
