"""
Schemas Package

Validation of untrusted import documents and of normalized records.
"""

from .validator import (
    validate_document,
    validate_canonical,
    sum_question_points,
    ValidationResult,
    CanonicalSchemaError,
    REQUIRED_FIELDS,
    NOT_AN_OBJECT_MESSAGE,
)
from .questions import validate_questions, resolve_statement_alias

__all__ = [
    "validate_document",
    "validate_canonical",
    "sum_question_points",
    "validate_questions",
    "resolve_statement_alias",
    "ValidationResult",
    "CanonicalSchemaError",
    "REQUIRED_FIELDS",
    "NOT_AN_OBJECT_MESSAGE",
]
