"""
Evaluation Toolkit Core Package

Data models, validation and parsing shared by the importer.

**DESIGN NOTES:**

1. **Immutable Drafts**
   - EvaluationDraft/QuestionDraft are frozen dataclasses
   - The normalizer builds new instances, never patches them

2. **Errors Are Data**
   - Bad input is reported in ValidationResult.errors
   - Exceptions are reserved for misuse (e.g. normalizing an invalid result)

3. **One Default Table**
   - models.defaults feeds both validator warnings and normalizer values
"""

from .models import EvaluationDraft, QuestionDraft
from .schemas import ValidationResult, validate_document
from .utils import parse_document

__all__ = [
    "EvaluationDraft",
    "QuestionDraft",
    "ValidationResult",
    "validate_document",
    "parse_document",
]
