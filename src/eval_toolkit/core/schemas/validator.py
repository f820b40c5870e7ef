"""
Evaluation Document Validation

Validates a decoded import document and collects every problem in one pass.

Two severities are kept apart:
- errors block the import (missing or mistyped fields, point totals that
  do not add up, unknown status, malformed classIds)
- warnings report optional fields that will be filled with a default

Invalid input is reported as data in a ValidationResult, never raised.
The only exception in this module, CanonicalSchemaError, is raised by
validate_canonical() when a *normalized* record breaks the persisted
schema, which means a bug rather than bad input.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Optional

import jsonschema

from ..models.defaults import EVALUATION_DEFAULTS, WARNED_FIELDS
from ..models.evaluations import EVALUATION_STATUSES
from .checks import (
    coerce_numeric_string,
    format_number,
    is_blank,
    is_iso_date,
    is_non_empty_string,
    is_number,
    is_positive_number,
    is_present,
)
from .questions import validate_questions

logger = logging.getLogger(__name__)

REQUIRED_FIELDS = ("title", "subject", "date", "duration", "totalPoints", "questions")

NOT_AN_OBJECT_MESSAGE = "The JSON document must be an object"

# Load schemas lazily
_SCHEMAS: dict[str, dict] = {}


@dataclass(frozen=True)
class ValidationResult:
    """
    Outcome of validating one import document (immutable).

    Attributes:
        is_valid: True when there are no errors; warnings never count
        errors: Blocking problems, in discovery order
        warnings: Non-blocking notices about defaulted fields
        data: Working copy of the document with coercions applied, kept
            for previews even when invalid

    Example:
        >>> result = validate_document({"title": "Quiz"})
        >>> result.is_valid
        False
        >>> result.errors[0]
        'Required field missing: subject'
    """

    is_valid: bool
    errors: tuple[str, ...]
    warnings: tuple[str, ...]
    data: dict[str, Any]

    @classmethod
    def failure(cls, error: str, data: Optional[dict[str, Any]] = None) -> "ValidationResult":
        """Result carrying a single blocking error."""
        return cls(is_valid=False, errors=(error,), warnings=(), data=data or {})


class CanonicalSchemaError(Exception):
    """Raised when a normalized record fails the canonical schema."""

    def __init__(self, message: str, path: str = "", errors: list[str] | None = None):
        super().__init__(message)
        self.path = path
        self.errors = errors or []


def validate_document(document: Any) -> ValidationResult:
    """
    Validate a decoded import document.

    Order:
    1. Required fields. If any is missing, stop: type checks on an
       incomplete document only produce noise.
    2. Type and range checks, then the points total cross-check.
    3. Optional fields: warnings when absent, errors when malformed.

    Args:
        document: Value decoded from JSON; nothing about it is trusted

    Returns:
        ValidationResult whose ``data`` is a working copy of ``document``;
        only the top level and question dicts are copied, since those are
        the only containers coercion writes to
    """
    if not isinstance(document, dict):
        return ValidationResult.failure(NOT_AN_OBJECT_MESSAGE)

    data = dict(document)
    if isinstance(data.get("questions"), list):
        data["questions"] = [dict(q) if isinstance(q, dict) else q for q in data["questions"]]
    errors: list[str] = []
    warnings: list[str] = []

    for field in REQUIRED_FIELDS:
        if not is_present(data, field):
            errors.append(f"Required field missing: {field}")
    if errors:
        logger.debug(f"Validation stopped: {len(errors)} required fields missing")
        return _result(data, errors, warnings)

    _check_fields(data, errors)
    _check_optional_fields(data, errors, warnings)

    logger.debug(f"Validation finished: {len(errors)} errors, {len(warnings)} warnings")
    return _result(data, errors, warnings)


def _result(data: dict[str, Any], errors: list[str], warnings: list[str]) -> ValidationResult:
    return ValidationResult(
        is_valid=not errors,
        errors=tuple(errors),
        warnings=tuple(warnings),
        data=data,
    )


def _check_fields(data: dict[str, Any], errors: list[str]) -> None:
    """Type/semantic checks on required fields, accumulated into errors."""
    if not is_non_empty_string(data["title"]):
        errors.append("Title must be a non-empty string")

    if not is_non_empty_string(data["subject"]):
        errors.append("Subject must be a non-empty string")

    date = data["date"]
    if not isinstance(date, str):
        errors.append("Date must be a string")
    elif not is_iso_date(date):
        errors.append("Date must be in ISO format (YYYY-MM-DD)")

    # Numeric strings are accepted for duration and converted in place
    duration = data["duration"]
    if isinstance(duration, str):
        coerced = coerce_numeric_string(duration)
        if coerced is not None:
            data["duration"] = duration = coerced
    if not is_positive_number(duration):
        errors.append("Duration must be a positive number (in minutes)")

    total_points = data["totalPoints"]
    if not is_positive_number(total_points):
        errors.append("totalPoints must be a positive number")

    questions = data["questions"]
    if not isinstance(questions, list):
        errors.append("questions must be an array")
        return
    if not questions:
        errors.append("The evaluation must contain at least one question")
        return
    errors.extend(validate_questions(questions))

    if is_number(total_points):
        calculated = sum_question_points(questions)
        if calculated != total_points:
            errors.append(
                f"Inconsistent totals: totalPoints ({format_number(total_points)}) "
                f"does not match the sum of question points ({format_number(calculated)})"
            )


def sum_question_points(questions: list[Any]) -> int | float:
    """
    Sum question points for the totals cross-check.

    Questions without valid positive points contribute 0; they are reported
    individually by the question validator.
    """
    return sum(
        question["points"]
        for question in questions
        if isinstance(question, dict) and is_positive_number(question.get("points"))
    )


def _check_optional_fields(
    data: dict[str, Any], errors: list[str], warnings: list[str]
) -> None:
    for field in WARNED_FIELDS:
        value = data.get(field)
        if is_blank(value):
            warnings.append(EVALUATION_DEFAULTS[field].warning)
            continue

        if field == "id" and not (isinstance(value, str) or is_number(value)):
            errors.append("Evaluation id must be a string or a number")
        elif field == "professorId" and not isinstance(value, str):
            errors.append("professorId must be a string")
        elif field == "status" and value not in EVALUATION_STATUSES:
            allowed = ", ".join(f"'{status}'" for status in EVALUATION_STATUSES)
            errors.append(f"status must be one of: {allowed}")
        elif field == "classIds":
            if not isinstance(value, list):
                errors.append("classIds must be an array")
            elif not all(isinstance(class_id, str) for class_id in value):
                errors.append("Every classIds element must be a string")


# ─────────────────────────────────────────────────────────────────────────────
# Canonical (persisted) shape
# ─────────────────────────────────────────────────────────────────────────────

def _load_schema(name: str) -> dict:
    """Load a schema from the schemas directory."""
    if name not in _SCHEMAS:
        schema_path = Path(__file__).parent / f"{name}.schema.json"
        if not schema_path.exists():
            raise FileNotFoundError(f"Schema not found: {schema_path}")
        with open(schema_path, "r", encoding="utf-8") as f:
            _SCHEMAS[name] = json.load(f)
    return _SCHEMAS[name]


def validate_canonical(record: dict[str, Any]) -> None:
    """
    Check a normalized record against the canonical evaluation schema.

    Args:
        record: Output of ``EvaluationDraft.to_dict()``

    Raises:
        CanonicalSchemaError: If the record does not match the schema
    """
    schema = _load_schema("evaluation")
    validator = jsonschema.Draft202012Validator(schema)
    violations = sorted(
        validator.iter_errors(record),
        key=lambda e: [str(p) for p in e.absolute_path],
    )
    if not violations:
        return

    messages = [
        f"{'.'.join(str(p) for p in e.absolute_path) or '<root>'}: {e.message}"
        for e in violations
    ]
    first = violations[0]
    raise CanonicalSchemaError(
        f"Normalized record does not match the canonical schema: {messages[0]}",
        path=".".join(str(p) for p in first.absolute_path),
        errors=messages,
    )
