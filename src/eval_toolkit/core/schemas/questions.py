"""
Question List Validation

Validates the ``questions`` array of an import document. Problems from every
question are flattened into one list of messages, each prefixed with the
question's 1-based position.

The list is a working copy: alias resolution (``text`` -> ``statement``) and
numeric id coercion are applied in place so later stages only ever see the
canonical keys.
"""

from __future__ import annotations

from typing import Any

from .checks import (
    format_number,
    is_non_empty_string,
    is_number,
    is_positive_number,
    is_present,
)

STATEMENT_KEY = "statement"
STATEMENT_ALIAS = "text"

REQUIRED_QUESTION_FIELDS = ("id", "points")


def resolve_statement_alias(question: dict[str, Any]) -> None:
    """Copy ``text`` into ``statement`` when only the alias is given."""
    if is_present(question, STATEMENT_ALIAS) and not is_present(question, STATEMENT_KEY):
        question[STATEMENT_KEY] = question[STATEMENT_ALIAS]


def validate_questions(questions: list[Any]) -> list[str]:
    """
    Validate every element of a questions array.

    Args:
        questions: Raw questions value, already known to be a list

    Returns:
        Error messages in question order; empty if all questions are valid
    """
    errors: list[str] = []
    for index, question in enumerate(questions):
        errors.extend(_validate_question(question, index + 1))
    return errors


def _validate_question(question: Any, position: int) -> list[str]:
    prefix = f"Question {position}:"
    if not isinstance(question, dict):
        return [f"{prefix} must be an object"]

    errors: list[str] = []
    resolve_statement_alias(question)

    for field in REQUIRED_QUESTION_FIELDS:
        if not is_present(question, field):
            errors.append(f"{prefix} required field missing: {field}")
    if not is_present(question, STATEMENT_KEY):
        errors.append(
            f"{prefix} required field missing: {STATEMENT_KEY} or {STATEMENT_ALIAS}"
        )

    question_id = question.get("id")
    if question_id is not None:
        if is_number(question_id):
            question["id"] = format_number(question_id)
        elif not isinstance(question_id, str):
            errors.append(f"{prefix} id must be a string or a number")

    number = question.get("number")
    if number is not None and not is_number(number):
        errors.append(f"{prefix} number must be a number")

    statement = question.get(STATEMENT_KEY)
    if statement is not None and not is_non_empty_string(statement):
        errors.append(f"{prefix} statement must be a non-empty string")

    points = question.get("points")
    if points is not None and not is_positive_number(points):
        errors.append(f"{prefix} points must be a positive number")

    # Optional fields: only type-checked when given
    model_answer = question.get("modelAnswer")
    if model_answer is not None and not isinstance(model_answer, str):
        errors.append(f"{prefix} modelAnswer must be a string")

    estimated_lines = question.get("estimatedLines")
    if estimated_lines is not None and not is_positive_number(estimated_lines):
        errors.append(f"{prefix} estimatedLines must be a positive number")

    return errors
