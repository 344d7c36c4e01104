"""
Test fixtures for moveframe-engine.

Provides the FastAPI test client and sample plan/circuit/sequence data.
"""

import sys
from pathlib import Path
from typing import List

import pytest
from fastapi.testclient import TestClient

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"

# Make src/ importable so tests can do `import moveframe_engine...`
for p in {ROOT, SRC}:
    p_str = str(p)
    if p_str not in sys.path:
        sys.path.insert(0, p_str)

from moveframe_engine.main import app  # noqa: E402
from moveframe_engine.models import (  # noqa: E402
    CircuitExercise,
    IndividualPlanRow,
    Sequence,
)


# ---------------------------------------------------------------------------
# Core Test Client
# ---------------------------------------------------------------------------


@pytest.fixture(scope="session")
def api_client() -> TestClient:
    """Shared FastAPI TestClient for moveframe-engine."""
    return TestClient(app)


@pytest.fixture
def client() -> TestClient:
    """Per-test FastAPI TestClient."""
    return TestClient(app)


# ---------------------------------------------------------------------------
# Sample Data Fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def distance_rows() -> List[IndividualPlanRow]:
    """Four SWIM repetition rows with distinct values."""
    return [
        IndividualPlanRow(
            index=i + 1,
            speed=f"A{i + 1}",
            time=f"0h01'3{i}\"0",
            pause='20"',
            strokes="",
            watts="",
            rest_type="Set time",
        )
        for i in range(4)
    ]


@pytest.fixture
def two_circuits() -> List[CircuitExercise]:
    return [CircuitExercise(letter="A", name="Squat"), CircuitExercise(letter="B", name="Push up")]


@pytest.fixture
def swim_sequences() -> List[Sequence]:
    return [
        Sequence(repetitions=3, pause='20"', end_pause="1'", meters=100, speed="A2", style="Freestyle"),
        Sequence(repetitions=2, pause='30"', meters=50, speed="B1", style="Backstroke"),
    ]
