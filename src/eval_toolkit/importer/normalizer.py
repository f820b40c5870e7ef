"""
Module: importer.normalizer

Purpose:
    Turn a validator-approved import document into a fully-populated
    EvaluationDraft. Pure defaulting and reshaping: every optional field
    gets its value from the shared default table, aliases are folded into
    canonical keys, numeric ids become strings.

Key Functions:
    - normalize(): Document (or ValidationResult) -> EvaluationDraft

Key Classes:
    - NormalizationError: Raised when asked to normalize an invalid result

Dependencies:
    - core.models.defaults: Default values
    - core.schemas.checks: Type narrowing

Used By:
    - importer.pipeline
"""

from __future__ import annotations

import logging
from dataclasses import replace
from datetime import datetime
from typing import Any, Mapping, Optional, Union

from eval_toolkit.core.models import (
    DefaultContext,
    EvaluationDraft,
    QuestionDraft,
    EVALUATION_DEFAULTS,
    QUESTION_DEFAULTS,
)
from eval_toolkit.core.schemas import ValidationResult
from eval_toolkit.core.schemas.checks import (
    coerce_numeric_string,
    format_number,
    is_blank,
    is_number,
)

logger = logging.getLogger(__name__)


class NormalizationError(Exception):
    """Raised when normalize() is called on a document that failed validation."""

    def __init__(self, message: str, errors: list[str] | None = None):
        super().__init__(message)
        self.errors = errors or []


def normalize(
    data: Union[Mapping[str, Any], ValidationResult],
    *,
    professor_id: Optional[str] = None,
    now: Optional[datetime] = None,
) -> EvaluationDraft:
    """
    Build the canonical draft from a validated document.

    Precondition: the validator accepted ``data``. Passing a ValidationResult
    enforces that; passing the raw ``result.data`` mapping trusts the caller.

    Args:
        data: ValidationResult, or the ``data`` of a valid one
        professor_id: Current professor, used when the document has none
        now: Clock reading for generated ids and dates (defaults to now)

    Returns:
        EvaluationDraft with every field populated

    Raises:
        NormalizationError: If a ValidationResult with errors is given
    """
    if isinstance(data, ValidationResult):
        if not data.is_valid:
            raise NormalizationError(
                f"Cannot normalize an invalid evaluation ({len(data.errors)} errors)",
                errors=list(data.errors),
            )
        data = data.data

    context = DefaultContext(now=now or datetime.now(), professor_id=professor_id)

    questions = tuple(
        _normalize_question(question, replace(context, position=index + 1))
        for index, question in enumerate(data.get("questions") or [])
    )

    total_points = data.get("totalPoints")
    if not is_number(total_points):
        total_points = sum(question.points for question in questions)

    draft = EvaluationDraft(
        id=_identifier(data.get("id")) or EVALUATION_DEFAULTS["id"].value(context),
        title=data.get("title", ""),
        subject=data.get("subject", ""),
        date=_pick(data, "date", EVALUATION_DEFAULTS, context),
        duration=_duration(data.get("duration"), context),
        total_points=total_points,
        professor_id=_pick(data, "professorId", EVALUATION_DEFAULTS, context),
        class_ids=tuple(_pick(data, "classIds", EVALUATION_DEFAULTS, context)),
        status=_pick(data, "status", EVALUATION_DEFAULTS, context),
        questions=questions,
    )
    logger.debug(f"Normalized evaluation {draft.id} with {len(questions)} questions")
    return draft


def _pick(
    data: Mapping[str, Any],
    key: str,
    defaults: Mapping[str, Any],
    context: DefaultContext,
) -> Any:
    value = data.get(key)
    if is_blank(value):
        return defaults[key].value(context)
    return value


def _identifier(value: Any) -> Optional[str]:
    if is_number(value):
        return format_number(value)
    if isinstance(value, str) and value:
        return value
    return None


def _duration(value: Any, context: DefaultContext) -> Union[int, float]:
    if isinstance(value, str):
        value = coerce_numeric_string(value)
    if is_number(value):
        return value
    return EVALUATION_DEFAULTS["duration"].value(context)


def _normalize_question(question: Mapping[str, Any], context: DefaultContext) -> QuestionDraft:
    statement = question.get("statement")
    if statement is None:
        statement = question.get("text")
    if statement is None:
        statement = QUESTION_DEFAULTS["statement"].value(context)

    return QuestionDraft(
        id=_identifier(question.get("id")) or QUESTION_DEFAULTS["id"].value(context),
        number=_pick(question, "number", QUESTION_DEFAULTS, context),
        statement=statement,
        model_answer=_pick(question, "modelAnswer", QUESTION_DEFAULTS, context),
        points=_pick(question, "points", QUESTION_DEFAULTS, context),
        estimated_lines=_pick(question, "estimatedLines", QUESTION_DEFAULTS, context),
    )
