import json
import sys
from datetime import datetime
from pathlib import Path

import pytest

# Add src to sys.path so we can import eval_toolkit
SRC_PATH = Path(__file__).resolve().parent.parent / "src"
if SRC_PATH.as_posix() not in sys.path:
    sys.path.insert(0, SRC_PATH.as_posix())


# Common test fixtures
@pytest.fixture
def valid_document() -> dict:
    """Minimal valid evaluation: every optional top-level field left out."""
    return {
        "title": "Quiz",
        "subject": "Math",
        "date": "2025-01-15",
        "duration": 60,
        "totalPoints": 10,
        "questions": [{"id": "q1", "statement": "2+2?", "points": 10}],
    }


@pytest.fixture
def complete_document() -> dict:
    """Evaluation with every optional field given."""
    return {
        "id": "eval-7",
        "title": "Fractions test",
        "subject": "Math",
        "date": "2025-03-02",
        "duration": 45,
        "totalPoints": 12,
        "professorId": "prof-9",
        "classIds": ["class-a", "class-b"],
        "status": "active",
        "questions": [
            {
                "id": "q1",
                "number": 1,
                "statement": "Simplify 4/8.",
                "modelAnswer": "1/2",
                "points": 4,
                "estimatedLines": 2,
            },
            {
                "id": "q2",
                "number": 2,
                "statement": "Add 1/3 and 1/6.",
                "modelAnswer": "1/2",
                "points": 8,
                "estimatedLines": 6,
            },
        ],
    }


@pytest.fixture
def valid_json(valid_document: dict) -> str:
    return json.dumps(valid_document)


@pytest.fixture
def fixed_now() -> datetime:
    return datetime(2025, 6, 1, 9, 30, 0)
