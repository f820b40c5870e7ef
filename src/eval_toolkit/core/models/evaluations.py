"""
Module: evaluations

Purpose:
    Provides the EvaluationDraft and QuestionDraft dataclasses - the canonical
    shape handed to the persistence layer after an import has been validated
    and normalized. Immutable, validated on construction.

Key Functions:
    - EvaluationDraft.to_dict() / EvaluationDraft.from_dict(): camelCase
      persistence shape
    - EvaluationDraft.question_points: Calculated sum of question points

Dependencies:
    - dataclasses (std)

Used By:
    - importer.normalizer
    - importer.pipeline
    - core.utils.serialization
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Literal, Union

EvaluationStatus = Literal["draft", "active", "correcting", "completed"]

EVALUATION_STATUSES: tuple[str, ...] = ("draft", "active", "correcting", "completed")
DEFAULT_STATUS: EvaluationStatus = "draft"

Number = Union[int, float]


def _require_number(name: str, value: Any, *, positive: bool) -> None:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValueError(f"{name} must be a number: {value!r}")
    if positive and value <= 0:
        raise ValueError(f"{name} must be positive: {value!r}")


@dataclass(frozen=True)
class QuestionDraft:
    """
    A single question of an imported evaluation (immutable).

    Attributes:
        id: Question identifier, always a string
        number: Human-facing ordinal, 1-based
        statement: Question text
        model_answer: Reference answer, may be empty
        points: Points awarded for the question
        estimated_lines: Answer-space sizing for printed sheets

    Invariants:
        - id and statement are strings
        - estimated_lines > 0
    """

    id: str
    number: Number
    statement: str
    model_answer: str
    points: Number
    estimated_lines: Number

    def __post_init__(self) -> None:
        """Validate question on construction."""
        if not isinstance(self.id, str):
            raise ValueError(f"question id must be a string: {self.id!r}")
        if not isinstance(self.statement, str):
            raise ValueError(f"statement must be a string: {self.statement!r}")
        if not isinstance(self.model_answer, str):
            raise ValueError(f"model_answer must be a string: {self.model_answer!r}")
        _require_number("number", self.number, positive=False)
        _require_number("points", self.points, positive=False)
        _require_number("estimated_lines", self.estimated_lines, positive=True)

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "number": self.number,
            "statement": self.statement,
            "modelAnswer": self.model_answer,
            "points": self.points,
            "estimatedLines": self.estimated_lines,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "QuestionDraft":
        return cls(
            id=data["id"],
            number=data["number"],
            statement=data["statement"],
            model_answer=data["modelAnswer"],
            points=data["points"],
            estimated_lines=data["estimatedLines"],
        )


@dataclass(frozen=True)
class EvaluationDraft:
    """
    Fully-populated evaluation ready for persistence (immutable).

    Produced only by the normalizer, from a document the validator accepted.
    Identifiers set here (``id``, ``professor_id``) are advisory: the
    persistence layer may replace them.

    Attributes:
        id: Evaluation identifier
        title: Evaluation title
        subject: Subject taught
        date: ISO calendar date (YYYY-MM-DD)
        duration: Duration in minutes
        total_points: Declared point total
        professor_id: Owning professor, empty when not yet assigned
        class_ids: Classes the evaluation is assigned to (order kept)
        status: Lifecycle status
        questions: Ordered questions, never empty

    Example:
        >>> draft = EvaluationDraft.from_dict(record)
        >>> draft.question_points == draft.total_points
        True
    """

    id: str
    title: str
    subject: str
    date: str
    duration: Number
    total_points: Number
    professor_id: str
    class_ids: tuple[str, ...]
    status: EvaluationStatus
    questions: tuple[QuestionDraft, ...]

    def __post_init__(self) -> None:
        """Validate evaluation on construction."""
        for name in ("id", "title", "subject", "date", "professor_id"):
            value = getattr(self, name)
            if not isinstance(value, str):
                raise ValueError(f"{name} must be a string: {value!r}")
        _require_number("duration", self.duration, positive=True)
        _require_number("total_points", self.total_points, positive=False)
        if self.status not in EVALUATION_STATUSES:
            raise ValueError(f"Invalid status: {self.status!r}")
        if not all(isinstance(class_id, str) for class_id in self.class_ids):
            raise ValueError(f"class_ids must contain strings: {self.class_ids!r}")
        if not self.questions:
            raise ValueError("questions must not be empty")

    @property
    def question_points(self) -> Number:
        """Sum of question points. Calculated, never stored."""
        return sum(question.points for question in self.questions)

    def to_dict(self) -> dict:
        """
        Serialize to the camelCase record accepted by the persistence layer.

        Returns:
            Dict representation with lists instead of tuples
        """
        return {
            "id": self.id,
            "title": self.title,
            "subject": self.subject,
            "date": self.date,
            "duration": self.duration,
            "totalPoints": self.total_points,
            "professorId": self.professor_id,
            "classIds": list(self.class_ids),
            "status": self.status,
            "questions": [question.to_dict() for question in self.questions],
        }

    @classmethod
    def from_dict(cls, data: dict) -> "EvaluationDraft":
        return cls(
            id=data["id"],
            title=data["title"],
            subject=data["subject"],
            date=data["date"],
            duration=data["duration"],
            total_points=data["totalPoints"],
            professor_id=data["professorId"],
            class_ids=tuple(data["classIds"]),
            status=data["status"],
            questions=tuple(QuestionDraft.from_dict(q) for q in data["questions"]),
        )
