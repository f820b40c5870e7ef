"""
Evaluation Importer

Validates pasted or uploaded evaluation documents and normalizes accepted
ones into drafts for persistence.

Example:
    >>> from eval_toolkit.importer import validate, normalize
    >>> result = validate(text)
    >>> if result.is_valid:
    ...     draft = normalize(result)
"""

from .config import ImporterConfig
from .normalizer import NormalizationError, normalize
from .pipeline import EvaluationImporter, validate
from .report import format_report
from .source import ImportFileError, read_import_file

__all__ = [
    "ImporterConfig",
    "EvaluationImporter",
    "validate",
    "normalize",
    "format_report",
    "read_import_file",
    "NormalizationError",
    "ImportFileError",
]
