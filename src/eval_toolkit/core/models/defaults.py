"""
Module: defaults

Purpose:
    Single table of default values for optional import fields. The validator
    reads the warning messages from it, the normalizer reads the values, so
    the two stages cannot disagree about what a missing field becomes.

Key Classes:
    - DefaultContext: Inputs a default may depend on (clock, position, user)
    - FieldDefault: One row of the table

Key Constants:
    - EVALUATION_DEFAULTS: Top-level fields, keyed by JSON key
    - QUESTION_DEFAULTS: Per-question fields, keyed by JSON key
    - WARNED_FIELDS: Top-level fields whose absence produces a warning

Used By:
    - core.schemas.validator
    - importer.normalizer
"""

from __future__ import annotations

import uuid
from dataclasses import dataclass
from datetime import datetime
from typing import Any, Callable, Dict, Optional

from .evaluations import DEFAULT_STATUS

DEFAULT_DURATION_MINUTES = 60
DEFAULT_ESTIMATED_LINES = 5


@dataclass(frozen=True)
class DefaultContext:
    """
    Everything a default factory may look at.

    Attributes:
        now: Clock reading for time-based defaults
        professor_id: Professor committing the import, if known
        position: 1-based question position (question defaults only)
    """

    now: datetime
    professor_id: Optional[str] = None
    position: int = 0


@dataclass(frozen=True)
class FieldDefault:
    """
    Default for one optional field.

    Attributes:
        factory: Builds the default value from a DefaultContext
        warning: Message emitted by the validator when the field is missing,
            or None when absence is silent
    """

    factory: Callable[[DefaultContext], Any]
    warning: Optional[str] = None

    def value(self, context: DefaultContext) -> Any:
        return self.factory(context)


def generate_evaluation_id(context: DefaultContext) -> str:
    """Time-based id with a random suffix so same-millisecond imports differ."""
    millis = int(context.now.timestamp() * 1000)
    return f"eval-{millis}-{uuid.uuid4().hex[:8]}"


EVALUATION_DEFAULTS: Dict[str, FieldDefault] = {
    "id": FieldDefault(
        factory=generate_evaluation_id,
        warning="No id provided, one will be generated automatically",
    ),
    "professorId": FieldDefault(
        factory=lambda ctx: ctx.professor_id or "",
        warning="No professorId provided, the current professor will be assigned",
    ),
    "status": FieldDefault(
        factory=lambda ctx: DEFAULT_STATUS,
        warning=f"No status provided, status will be set to '{DEFAULT_STATUS}'",
    ),
    "classIds": FieldDefault(
        factory=lambda ctx: (),
        warning="No classes assigned, you can add them later",
    ),
    # Required fields: these defaults only back the normalizer's totality.
    "date": FieldDefault(factory=lambda ctx: ctx.now.date().isoformat()),
    "duration": FieldDefault(factory=lambda ctx: DEFAULT_DURATION_MINUTES),
}

WARNED_FIELDS: tuple[str, ...] = tuple(
    key for key, default in EVALUATION_DEFAULTS.items() if default.warning
)

QUESTION_DEFAULTS: Dict[str, FieldDefault] = {
    "id": FieldDefault(factory=lambda ctx: f"q{ctx.position}"),
    "number": FieldDefault(factory=lambda ctx: ctx.position),
    "statement": FieldDefault(factory=lambda ctx: ""),
    "modelAnswer": FieldDefault(factory=lambda ctx: ""),
    "points": FieldDefault(factory=lambda ctx: 0),
    "estimatedLines": FieldDefault(factory=lambda ctx: DEFAULT_ESTIMATED_LINES),
}
