"""
Module: importer.pipeline

Purpose:
    Orchestrate an evaluation import.
    Parse → Validate → (confirmation by the professor) → Normalize → Persist

Key Functions:
    - validate(): Raw text -> ValidationResult
    - normalize(): Re-exported from importer.normalizer

Key Classes:
    - EvaluationImporter: Config-bound entry point used by the application

Dependencies:
    - core.utils.serialization: Parsing
    - core.schemas: Validation and the canonical schema check
    - importer.normalizer: Defaulting

Used By:
    - scripts/validate_evaluation.py
    - The web application's import endpoint
"""

from __future__ import annotations

import logging
from datetime import datetime
from pathlib import Path
from typing import Callable, Optional, Union

from eval_toolkit.core.models import EvaluationDraft
from eval_toolkit.core.schemas import ValidationResult, validate_canonical, validate_document
from eval_toolkit.core.utils import parse_document

from .config import ImporterConfig
from .normalizer import NormalizationError, normalize
from .source import read_import_file

logger = logging.getLogger(__name__)

PersistCallback = Callable[[EvaluationDraft], None]


def validate(raw_text: Union[str, bytes]) -> ValidationResult:
    """
    Parse and validate pasted or uploaded import text.

    Never raises for bad input: a syntax error becomes the single error of
    the result.

    Args:
        raw_text: JSON text describing one evaluation

    Returns:
        ValidationResult with errors, warnings and the working copy

    Example:
        >>> result = validate('{ invalid')
        >>> result.is_valid
        False
    """
    parsed = parse_document(raw_text)
    if not parsed.ok:
        logger.debug(f"Import rejected by parser: {parsed.error}")
        return ValidationResult.failure(parsed.error)
    return validate_document(parsed.data)


class EvaluationImporter:
    """
    Import entry point bound to an ImporterConfig.

    The presentation layer calls validate()/validate_file(), shows the
    errors and warnings, and calls confirm() only when the professor
    accepts a valid result.

    Example:
        >>> importer = EvaluationImporter(ImporterConfig(professor_id="prof-1"))
        >>> result = importer.validate(text)
        >>> if result.is_valid:
        ...     draft = importer.confirm(result, persist=repository.save)
    """

    def __init__(self, config: Optional[ImporterConfig] = None) -> None:
        self.config = config or ImporterConfig()

    def validate(self, raw_text: Union[str, bytes]) -> ValidationResult:
        result = validate(raw_text)
        logger.info(
            f"Import validated: valid={result.is_valid}, "
            f"{len(result.errors)} errors, {len(result.warnings)} warnings"
        )
        return result

    def validate_file(self, path: Path) -> ValidationResult:
        """
        Read and validate an uploaded file.

        Raises:
            ImportFileError: If the file cannot be read
        """
        return self.validate(read_import_file(path, self.config))

    def confirm(
        self,
        result: ValidationResult,
        persist: Optional[PersistCallback] = None,
        *,
        now: Optional[datetime] = None,
    ) -> EvaluationDraft:
        """
        Commit a validated import.

        Args:
            result: A ValidationResult the professor accepted
            persist: Receives the normalized draft (e.g. a repository save)
            now: Clock reading for generated defaults

        Returns:
            The normalized draft

        Raises:
            NormalizationError: If result is not valid
            CanonicalSchemaError: If check_output is on and the draft does not
                match the canonical schema
        """
        if not result.is_valid:
            logger.warning(f"Refusing to commit an import with {len(result.errors)} errors")
            raise NormalizationError(
                "Only a valid import can be confirmed", errors=list(result.errors)
            )

        draft = normalize(result, professor_id=self.config.professor_id, now=now)
        if self.config.check_output:
            validate_canonical(draft.to_dict())

        if persist is not None:
            persist(draft)
        logger.info(
            f"Committed evaluation {draft.id} ({len(draft.questions)} questions, "
            f"{draft.total_points} points)"
        )
        return draft


__all__ = ["validate", "normalize", "EvaluationImporter", "PersistCallback"]
