"""API routes for the moveframe engine."""

import logging
from typing import Any, Dict, List, Optional

from fastapi import APIRouter, HTTPException
from pydantic import BaseModel, Field

from moveframe_engine.config import settings
from moveframe_engine.models import (
    CircuitExercise,
    CircuitRow,
    IndividualPlanRow,
    MovelapGlobalFields,
    Sequence,
)
from moveframe_engine.parsers.models import FieldKind, NormalizeOptions
from moveframe_engine.services import circuit_generator, movelap_generator, plan_propagator
from moveframe_engine.services.circuit_generator import ExecutionOrder, RegenerationPolicy
from moveframe_engine.services.normalizer import normalize
from moveframe_engine.services.sport_config import (
    SPORT_CONFIGS,
    get_pace_label,
    get_sport_config,
    normalize_sport,
    should_show_pace_field,
)

logger = logging.getLogger(__name__)

router = APIRouter()

# ---------------------------------------------------------------------------
# Request models
# ---------------------------------------------------------------------------


class NormalizeRequest(BaseModel):
    sport: str
    field_kind: FieldKind
    raw: str = ""
    options: NormalizeOptions = Field(default_factory=NormalizeOptions)


class InitializePlansRequest(BaseModel):
    sport: str
    count: int = Field(..., ge=0)
    defaults: Dict[str, Any] = Field(default_factory=dict)


class UpdatePlanRequest(BaseModel):
    rows: List[IndividualPlanRow]
    index: int
    field: str
    value: Optional[str] = None


class CopyDownRequest(BaseModel):
    rows: List[IndividualPlanRow]
    from_index: int


class GenerateCircuitsRequest(BaseModel):
    exercises: List[CircuitExercise]
    series_per_circuit: int
    stations_per_circuit: int
    pause: str = ""
    pause_circuits: str = ""
    pause_series: str = ""
    execution_order: ExecutionOrder = ExecutionOrder.HORIZONTAL
    time_per_circuit: Optional[int] = None


class InsertCircuitsRequest(BaseModel):
    exercises: List[CircuitExercise]
    rows: List[CircuitRow] = Field(default_factory=list)
    insert_after_letter: Optional[str] = None
    count: int = 1
    new_series: int
    new_stations: int
    pause_stations: Optional[str] = None
    policy: RegenerationPolicy = RegenerationPolicy.DISCARD
    default_series: Optional[int] = None
    default_stations: Optional[int] = None


class GenerateMovelapsRequest(BaseModel):
    moveframe_id: str
    sport: str
    sequences: List[Sequence]
    global_fields: MovelapGlobalFields = Field(default_factory=MovelapGlobalFields)


# ---------------------------------------------------------------------------
# Health / sports
# ---------------------------------------------------------------------------


@router.get("/health")
def health():
    """Health check endpoint."""
    return {"ok": True, "environment": settings.ENVIRONMENT}


@router.get("/sports")
def list_sports():
    """All sports with their classification."""
    return {
        "sports": [
            {
                "sport": cfg.sport,
                "classification": cfg.classification,
                "shows_pace": should_show_pace_field(cfg.sport),
            }
            for cfg in SPORT_CONFIGS.values()
        ],
        "icon_type": settings.SPORT_ICON_TYPE,
    }


@router.get("/sports/{sport}")
def get_sport(sport: str, meters: Optional[str] = None):
    """Field options of one sport; unknown sports get the SWIM configuration."""
    if normalize_sport(sport) not in SPORT_CONFIGS:
        logger.info(f"No configuration for sport {sport!r}, serving fallback")
    config = get_sport_config(sport)
    response = config.model_dump()
    response["pace_label"] = get_pace_label(sport, meters)
    return response


# ---------------------------------------------------------------------------
# Normalizer
# ---------------------------------------------------------------------------


@router.post("/normalize")
def normalize_field(request: NormalizeRequest):
    """Normalize one free-form field value."""
    try:
        result = normalize(request.sport, request.field_kind, request.raw, request.options)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    response = result.model_dump()
    response["rejected"] = result.rejected
    return response


# ---------------------------------------------------------------------------
# Individual plans
# ---------------------------------------------------------------------------


@router.post("/plans/initialize")
def initialize_plans(request: InitializePlansRequest):
    """Build the individual plan rows of a moveframe."""
    rows = plan_propagator.initialize_individual_plans(request.sport, request.count, request.defaults)
    return {"rows": [row.model_dump() for row in rows]}


@router.post("/plans/update")
def update_plan(request: UpdatePlanRequest):
    """Edit one field of one row; first-row edits apply to every row."""
    try:
        rows = plan_propagator.update_individual_plan(request.rows, request.index, request.field, request.value)
    except (ValueError, IndexError) as e:
        raise HTTPException(status_code=400, detail=str(e))
    return {"rows": [row.model_dump() for row in rows]}


@router.post("/plans/copy-down")
def copy_down(request: CopyDownRequest):
    """Copy one row's values onto every row below it."""
    try:
        rows = plan_propagator.copy_down(request.rows, request.from_index)
    except IndexError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return {"rows": [row.model_dump() for row in rows]}


# ---------------------------------------------------------------------------
# Circuits
# ---------------------------------------------------------------------------


@router.post("/circuits/generate")
def generate_circuits(request: GenerateCircuitsRequest):
    """Build the circuit x series x station matrix."""
    try:
        rows = circuit_generator.generate(
            request.exercises,
            request.series_per_circuit,
            request.stations_per_circuit,
            request.pause,
        )
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    description = circuit_generator.describe_circuits(
        len(request.exercises),
        request.series_per_circuit,
        request.stations_per_circuit,
        pause_circuits=request.pause_circuits,
        pause_stations=request.pause,
        pause_series=request.pause_series,
        execution_order=request.execution_order,
        time_per_circuit=request.time_per_circuit,
    )
    return {"rows": [row.model_dump() for row in rows], "description": description}


@router.post("/circuits/insert")
def insert_circuits(request: InsertCircuitsRequest):
    """Insert circuits mid-table and regenerate the matrix."""
    pause_stations = request.pause_stations
    if pause_stations is None:
        pause_stations = settings.DEFAULT_PAUSE_STATIONS
    try:
        exercises, rows = circuit_generator.insert(
            request.exercises,
            request.rows,
            request.insert_after_letter,
            request.count,
            request.new_series,
            request.new_stations,
            pause_stations=pause_stations,
            policy=request.policy,
            default_series=request.default_series,
            default_stations=request.default_stations,
        )
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return {
        "exercises": [ex.model_dump() for ex in exercises],
        "rows": [row.model_dump() for row in rows],
        "summary": [s.model_dump() for s in circuit_generator.summarize(exercises, rows)],
    }


# ---------------------------------------------------------------------------
# Movelaps
# ---------------------------------------------------------------------------


@router.post("/movelaps/generate")
def generate_movelaps(request: GenerateMovelapsRequest):
    """Expand moveframe sequences into movelaps with a description."""
    try:
        batch = movelap_generator.build_movelap_batch(
            request.moveframe_id,
            request.sport,
            request.sequences,
            request.global_fields,
        )
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return batch.model_dump()
