"""Reading uploaded evaluation files."""

from __future__ import annotations

import logging
from pathlib import Path

from .config import ImporterConfig

logger = logging.getLogger(__name__)


class ImportFileError(RuntimeError):
    """Raised when an import file cannot be read."""

    def __init__(self, message: str, path: str = ""):
        super().__init__(message)
        self.path = path


def read_import_file(path: Path, config: ImporterConfig | None = None) -> str:
    """Read an uploaded evaluation file as text.

    The contents are not parsed here; that is the validator's job, so a
    file full of garbage still reads fine and fails later with a
    readable message.

    Args:
        path: File to read.
        config: Importer configuration; defaults are used when omitted.

    Returns:
        Decoded file contents.

    Raises:
        ImportFileError: If the file is missing, has the wrong extension,
            is too large, or cannot be decoded.
    """
    config = config or ImporterConfig()
    path = Path(path)

    if not config.accepts(path.name):
        accepted = ", ".join(config.accepted_extensions)
        raise ImportFileError(
            f"Unsupported file type '{path.suffix}' (accepted: {accepted})", path=str(path)
        )

    try:
        size = path.stat().st_size
        if size > config.max_file_bytes:
            raise ImportFileError(
                f"File is too large: {size} bytes (limit {config.max_file_bytes})",
                path=str(path),
            )
        raw = path.read_bytes()
    except OSError as e:
        raise ImportFileError(f"Cannot read import file {path}: {e}", path=str(path)) from e

    try:
        text = raw.decode(config.encoding)
    except UnicodeDecodeError as e:
        raise ImportFileError(
            f"Import file is not valid {config.encoding} text: {e}", path=str(path)
        ) from e

    logger.debug(f"Read {len(raw)} bytes from {path}")
    return text
