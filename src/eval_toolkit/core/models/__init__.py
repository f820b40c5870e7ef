"""
Core Models Package

Immutable, validated data models for imported evaluations, plus the default
table shared by the validator and the normalizer.

All drafts are frozen dataclasses: the normalizer builds new instances, it
never patches existing ones.
"""

from .evaluations import (
    EvaluationDraft,
    QuestionDraft,
    EvaluationStatus,
    EVALUATION_STATUSES,
    DEFAULT_STATUS,
)
from .defaults import (
    DefaultContext,
    FieldDefault,
    EVALUATION_DEFAULTS,
    QUESTION_DEFAULTS,
    WARNED_FIELDS,
)

__all__ = [
    "EvaluationDraft",
    "QuestionDraft",
    "EvaluationStatus",
    "EVALUATION_STATUSES",
    "DEFAULT_STATUS",
    "DefaultContext",
    "FieldDefault",
    "EVALUATION_DEFAULTS",
    "QUESTION_DEFAULTS",
    "WARNED_FIELDS",
]
