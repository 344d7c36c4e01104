"""
Sport Field Configuration

Static per-sport option lists and the distance/strength/tools classification
that drives which normalizer rules and individual-plan fields apply.
"""

import logging
from enum import Enum
from typing import Dict, List, Optional, Union

from pydantic import BaseModel, Field

logger = logging.getLogger(__name__)


class SportClass(str, Enum):
    """Exactly one classification per sport"""
    DISTANCE = "distance"
    STRENGTH = "strength"
    TOOLS = "tools"


class RestType(str, Enum):
    SET_TIME = "Set time"
    RESTART_TIME = "Restart time"
    RESTART_PULSE = "Restart pulse"


REPS_TYPES = ["Reps", "Time"]
FREE_INPUT = "input"  # pause option marker: free entry instead of a list

MACRO_FINAL_OPTIONS = ["0'", "1'", "2'", "3'", "4'", "5'", "6'", "7'", "8'", "9'"]
ALARM_OPTIONS = [str(-i) for i in range(1, 11)]
SOUND_OPTIONS = ["Beep", "Bell", "Chime", "None"]
DISTANCE_SPEEDS = ["A1", "A2", "A3", "B1", "B2", "B3", "C1", "C2"]

PauseOptions = Union[List[str], str]


class SportFieldConfig(BaseModel):
    """Legal options for every field of a sport"""
    sport: str
    classification: SportClass
    meters: List[str] = Field(default_factory=list)
    speeds: List[str] = Field(default_factory=list)
    styles: Union[List[str], str] = Field(default_factory=list)  # list, or 'dropdown'/'input'
    pace100_meters: List[str] = Field(default_factory=list)
    rest_types: List[RestType] = Field(default_factory=list)
    pauses: Dict[str, PauseOptions] = Field(default_factory=dict)
    macro_finals: List[str] = Field(default_factory=lambda: list(MACRO_FINAL_OPTIONS))
    alarms: List[str] = Field(default_factory=lambda: list(ALARM_OPTIONS))
    sounds: List[str] = Field(default_factory=lambda: list(SOUND_OPTIONS))
    reps_types: List[str] = Field(default_factory=list)
    reps_range: Optional[Dict[str, int]] = None
    time_range: Optional[Dict[str, str]] = None
    has_row_per_min: bool = False

    class Config:
        use_enum_values = True

    @property
    def is_distance_based(self) -> bool:
        return self.classification == SportClass.DISTANCE.value

    @property
    def is_strength_based(self) -> bool:
        return self.classification == SportClass.STRENGTH.value

    @property
    def is_tool_based(self) -> bool:
        return self.classification == SportClass.TOOLS.value


ALL_REST_TYPES = [RestType.SET_TIME, RestType.RESTART_TIME, RestType.RESTART_PULSE]
NO_RESTART_TIME = [RestType.SET_TIME, RestType.RESTART_PULSE]

RUN_METERS = ['50', '60', '80', '100', '110', '150', '200', '300', '400', '500', '600', '800',
              '1000', '1200', '1500', '2000', '3000', '5000', '10000', 'input']
RUN_PACE100 = ['50', '60', '80', '100', '110', '150', '200', '300', '400', '500']
RUN_PAUSES = ['0', '20"', '30"', '45"', "1'", "1'15\"", "1'30\"", "2'", "2'30\"", "3'", "4'", "5'", "6'", "7'"]
BIKE_METERS = ['200', '400', '500', '1000', '1500', '2000', '3000', '4000', '5000', '7000', '8000', '10000', 'input']
BIKE_PAUSES = ['0', '15"', '30"', '45"', "1'", "1'30\"", "2'", "2'30\"", "3'", "4'", "5'"]
SNOW_METERS = ['50', '100', '200', '300', '400', '500', '600', '800', '1000', '1200', '1500', '2000',
               '3000', '5000', '10000', 'input']
SNOW_PAUSES = ['20"', '30"', '45"', "1'", "1'15\"", "1'30\"", "2'", "2'30\"", "3'", "4'", "5'", "6'", "7'"]
MOVES_PAUSES = ['0"', '5"', '10"', '15"', '20"', '30"', '45"', "1'", "1'15\"", "1'30\"", "2'", "2'30\"",
                "3'", "4'", "5'", "6'", "7'"]
TEAM_PAUSES = ['0"', '10"', '15"', '20"', '30"', '45"', "1'", "1'30\"", "2'", "2'30\"", "3'", "5'"]
RACKET_PAUSES = ['0"', '10"', '15"', '20"', '30"', '45"', "1'", "1'30\"", "2'", "3'"]
GYM_PAUSES = ['0"', '10"', '15"', '20"', '30"', '45"', "1'", "1'30\"", "2'", "3'"]


def _pauses(set_time: List[str], rest_types: List[RestType]) -> Dict[str, PauseOptions]:
    """Pause options keyed by rest type; restart types take free input."""
    pauses: Dict[str, PauseOptions] = {}
    for rest_type in rest_types:
        pauses[rest_type.value] = list(set_time) if rest_type == RestType.SET_TIME else FREE_INPUT
    return pauses


def _distance(sport: str, meters, styles, pace100, set_time, **extra) -> SportFieldConfig:
    return SportFieldConfig(
        sport=sport,
        classification=SportClass.DISTANCE,
        meters=meters,
        speeds=DISTANCE_SPEEDS,
        styles=styles,
        pace100_meters=pace100,
        rest_types=ALL_REST_TYPES,
        pauses=_pauses(set_time, ALL_REST_TYPES),
        **extra,
    )


def _series(sport: str, speeds, styles, set_time, rest_types=ALL_REST_TYPES,
            classification=SportClass.TOOLS) -> SportFieldConfig:
    return SportFieldConfig(
        sport=sport,
        classification=classification,
        speeds=speeds,
        styles=styles,
        rest_types=rest_types,
        pauses=_pauses(set_time, rest_types),
        reps_types=REPS_TYPES,
        reps_range={"min": 1, "max": 99},
        time_range={"min": "0'01\"", "max": "9'59\""},
    )


_SLOW_TO_QUICK = ['Very slow', 'Slow', 'Normal', 'Quick', 'Very fast']
_SLOW_TO_FAST = ['Very slow', 'Slow', 'Normal', 'Quick', 'Fast', 'Very fast']
_SLOW_TO_EXPLOSIVE = _SLOW_TO_FAST + ['Explosive']

SPORT_CONFIGS: Dict[str, SportFieldConfig] = {cfg.sport: cfg for cfg in [
    _distance(
        'SWIM',
        ['25', '33', '50', '66', '75', '100', '125', '150', '200', '250', '300', '400', '500',
         '800', '1000', '1200', '1500', 'input'],
        ['Freestyle', 'Dolphin', 'Backstroke', 'Breaststroke', 'Sliding', 'Apnea'],
        ['25', '33', '50', '66', '75', '100', '125', '150', '200', '250', '300', '400', '500',
         '800', '1000', '1200', '1500'],
        ['0', '0"', '5"', '10"', '15"', '20"', '25"', '30"', '35"', '40"', '45"', '50"', "1'",
         "1'10\"", "1'15\"", "1'30\"", "2'", "2'30\"", "3'"],
    ),
    _distance('RUN', RUN_METERS, ['Track', 'Road', 'Cross', 'Beach', 'Hill', 'Downhill'], RUN_PACE100, RUN_PAUSES),
    _distance('BIKE', BIKE_METERS, ['Road', 'Track', 'Mountain', 'Indoor'], ['200', '400'], BIKE_PAUSES),
    _distance('SPINNING', BIKE_METERS, ['Endurance', 'HIIT', 'Intervals', 'Climb'], ['200', '400'], BIKE_PAUSES),
    _distance(
        'ROWING',
        ['100', '200', '250', '300', '400', '500', '750', '1000', '1250', '1500', '1750', '2000',
         '2500', '3000', '4000', '5000', '7000', '8000', '10000', '12000', '15000', 'input'],
        [],
        ['100', '200', '250', '300', '400'],
        ['15"', '30"', '45"', "1'", "1'30\"", "2'", "2'30\"", "3'", "4'", "5'"],
        has_row_per_min=True,
    ),
    _distance('SKATE', [m for m in SNOW_METERS if m != 'input'], ['Track', 'Road', 'Downhill'],
              ['50', '100', '200', '300', '400', '500', '600'], SNOW_PAUSES),
    _distance('SKI', SNOW_METERS, ['Track', 'Downhill'], ['50', '100', '200', '300', '400', '500'], SNOW_PAUSES),
    _distance('SNOWBOARD', SNOW_METERS, ['Park', 'Downhill', 'Freestyle'],
              ['50', '100', '200', '300', '400', '500'], SNOW_PAUSES),
    _distance('WALKING', RUN_METERS, ['Track', 'Road', 'Cross', 'Beach', 'Hill', 'Downhill'], RUN_PACE100, RUN_PAUSES),
    _distance('HIKING', RUN_METERS, ['Track', 'Road', 'Cross', 'Beach', 'Hill', 'Downhill'], RUN_PACE100, RUN_PAUSES),
    _series(
        'BODY_BUILDING',
        ['Very slow', 'Slow', 'Normal', 'Quick', 'Fast', 'Very fast', 'Explosive', 'Negative'],
        [],
        ['0', '0"', '5"', '10"', '15"', '20"', '30"', '45"', "1'", "1'15\"", "1'30\"", "2'",
         "2'30\"", "3'", "4'", "5'", "6'", "7'"],
        classification=SportClass.STRENGTH,
    ),
    _series('GYMNASTIC', ['Very slow', 'Slow', 'Normal', 'Quick', 'Very fast', 'Explosive', 'Negative'],
            'dropdown', MOVES_PAUSES),
    _series('STRETCHING', _SLOW_TO_QUICK, 'dropdown', MOVES_PAUSES),
    _series('PILATES', _SLOW_TO_QUICK, 'dropdown', MOVES_PAUSES),
    _series('YOGA', _SLOW_TO_QUICK, 'dropdown', MOVES_PAUSES),
    _series('TECHNICAL_MOVES', _SLOW_TO_QUICK, 'dropdown', MOVES_PAUSES),
    _series('FREE_MOVES', _SLOW_TO_QUICK, 'input', MOVES_PAUSES),
    _series('SOCCER', _SLOW_TO_FAST, 'input', TEAM_PAUSES, NO_RESTART_TIME),
    _series('BASKETBALL', _SLOW_TO_FAST, 'input', TEAM_PAUSES, NO_RESTART_TIME),
    _series('TENNIS', _SLOW_TO_FAST, 'input', RACKET_PAUSES, NO_RESTART_TIME),
    _series('VOLLEYBALL', _SLOW_TO_FAST, 'input', RACKET_PAUSES, NO_RESTART_TIME),
    _series('GOLF', ['Very slow', 'Slow', 'Normal', 'Quick', 'Fast'], 'input',
            ['0"', '15"', '20"', '30"', '45"', "1'", "1'30\"", "2'", "3'"], NO_RESTART_TIME),
    _series('BOXING', _SLOW_TO_EXPLOSIVE, 'input', RACKET_PAUSES, NO_RESTART_TIME),
    _series('MARTIAL_ARTS', _SLOW_TO_EXPLOSIVE, 'input', RACKET_PAUSES, NO_RESTART_TIME),
    _series('CLIMBING', ['Very slow', 'Slow', 'Normal', 'Quick', 'Fast'], 'input',
            ['0"', '30"', '45"', "1'", "1'30\"", "2'", "3'", "5'"], NO_RESTART_TIME),
    _series('DANCING', _SLOW_TO_FAST, 'input',
            ['0"', '15"', '20"', '30"', '45"', "1'", "1'30\"", "2'", "3'"], NO_RESTART_TIME),
    _series('CALISTENIC', _SLOW_TO_EXPLOSIVE + ['Negative'], 'input', GYM_PAUSES),
    _series('CROSSFIT', _SLOW_TO_EXPLOSIVE, 'input', GYM_PAUSES),
    _series('SPARTAN', _SLOW_TO_EXPLOSIVE, 'input', GYM_PAUSES),
    _series('TRIATHLON', _SLOW_TO_FAST, 'input',
            ['0"', '15"', '30"', '45"', "1'", "1'30\"", "2'", "3'"], NO_RESTART_TIME),
    _series('TRACK_FIELD', _SLOW_TO_EXPLOSIVE, 'input',
            ['0"', '15"', '30"', '45"', "1'", "1'30\"", "2'", "3'", "5'"], NO_RESTART_TIME),
]}

FALLBACK_SPORT = 'SWIM'

# Sports whose moveframes never show a pace field
NO_PACE_SPORTS = {
    'BODY_BUILDING', 'GYMNASTIC', 'STRETCHING', 'PILATES', 'YOGA', 'TECHNICAL_MOVES',
    'FREE_MOVES', 'CALISTENIC', 'CROSSFIT', 'SPARTAN',
}

KM_PACE_LABELS = ('Pace\\km', 'Pace\\mile')


def normalize_sport(sport: Optional[str]) -> str:
    """Canonical sport identifier ("body building" -> "BODY_BUILDING")."""
    return "_".join((sport or "").strip().upper().replace("-", " ").split())


def get_sport_config(sport: str) -> SportFieldConfig:
    """Configuration for a sport; unknown sports fall back to SWIM."""
    key = normalize_sport(sport)
    config = SPORT_CONFIGS.get(key)
    if config is None:
        logger.debug(f"Unknown sport {sport!r}, using {FALLBACK_SPORT} configuration")
        return SPORT_CONFIGS[FALLBACK_SPORT]
    return config


def classify_sport(sport: str) -> SportClass:
    return SportClass(get_sport_config(sport).classification)


def should_show_pace_field(sport: str) -> bool:
    return normalize_sport(sport) not in NO_PACE_SPORTS


def get_pace_label(sport: str, meters: Optional[str] = None) -> str:
    """Label of the pace field, which also decides km-mode for RUN."""
    key = normalize_sport(sport)
    if key == 'BIKE':
        return 'Speed\\h'
    if key == 'ROWING':
        return 'Speed\\500m'
    if key == 'SKI':
        return 'Pace\\Refdist'

    config = get_sport_config(key)
    if meters is not None and str(meters) in config.pace100_meters:
        return 'Pace\\100'
    return 'Pace\\km'


def is_km_pace(sport: str, meters: Optional[str] = None) -> bool:
    return get_pace_label(sport, meters) in KM_PACE_LABELS


def get_pause_options(sport: str, rest_type: Optional[str] = None) -> PauseOptions:
    """Pause choices for a rest type: a list, FREE_INPUT, or [] when unsupported."""
    config = get_sport_config(sport)
    key = rest_type or RestType.SET_TIME.value
    return config.pauses.get(key, [])
