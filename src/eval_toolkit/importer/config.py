"""
Module: importer.config

Purpose:
    Configuration dataclass for the evaluation import pipeline. Immutable
    configuration with validation on construction.

Key Classes:
    - ImporterConfig: Settings for reading, committing and checking imports

Dependencies:
    - dataclasses (std)

Used By:
    - importer.pipeline: EvaluationImporter
    - importer.source: Import file reading
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

DEFAULT_MAX_FILE_BYTES = 1024 * 1024


@dataclass(frozen=True)
class ImporterConfig:
    """
    Configuration for importing evaluations (immutable).

    Attributes:
        professor_id: Professor assigned at commit when the document has none
        accepted_extensions: File suffixes accepted for uploads
        max_file_bytes: Largest upload read, in bytes
        encoding: Text encoding of uploaded files
        check_output: Check normalized drafts against the canonical schema

    Example:
        >>> config = ImporterConfig(professor_id="prof-42")
        >>> config.accepts("quiz.JSON")
        True
    """

    professor_id: Optional[str] = None
    accepted_extensions: tuple[str, ...] = (".json",)
    max_file_bytes: int = DEFAULT_MAX_FILE_BYTES
    encoding: str = "utf-8"
    check_output: bool = True

    def __post_init__(self) -> None:
        """Validate configuration on construction."""
        if self.max_file_bytes <= 0:
            raise ValueError(f"max_file_bytes must be positive: {self.max_file_bytes}")
        if not self.accepted_extensions:
            raise ValueError("accepted_extensions must not be empty")
        for ext in self.accepted_extensions:
            if not ext.startswith("."):
                raise ValueError(f"Extension must start with '.': {ext!r}")
        if self.professor_id is not None and not isinstance(self.professor_id, str):
            raise ValueError(f"professor_id must be a string: {self.professor_id!r}")

    def accepts(self, filename: str) -> bool:
        """Return True if filename has an accepted extension (case-insensitive)."""
        lowered = filename.lower()
        return any(lowered.endswith(ext.lower()) for ext in self.accepted_extensions)
