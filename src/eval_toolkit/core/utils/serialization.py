"""
Serialization Utilities

Turns raw import text into a decoded document, and drafts into JSON.

Parsing never raises on bad input: a syntax problem or a top-level value
that is not an object comes back as a single error string in ParseResult,
which the pipeline reports like any other validation error.
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Any, Optional, Union

from ..models.evaluations import EvaluationDraft
from ..schemas.validator import NOT_AN_OBJECT_MESSAGE

BOM = "\ufeff"


@dataclass(frozen=True)
class ParseResult:
    """
    Outcome of parsing import text.

    Exactly one of ``data`` and ``error`` is set.
    """

    data: Optional[dict[str, Any]] = None
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None


def _reject_constant(name: str) -> Any:
    raise ValueError(f"{name} is not valid JSON")


# ─────────────────────────────────────────────────────────────────────────────
# Import Parsing
# ─────────────────────────────────────────────────────────────────────────────

def parse_document(raw: Union[str, bytes]) -> ParseResult:
    """
    Decode import text into a JSON object.

    Args:
        raw: Pasted text or uploaded file contents (bytes are read as UTF-8)

    Returns:
        ParseResult with the decoded object, or the decoder's message
    """
    try:
        if isinstance(raw, bytes):
            raw = raw.decode("utf-8-sig")
        # NaN/Infinity are Python extensions, not JSON
        parsed = json.loads(raw.lstrip(BOM), parse_constant=_reject_constant)
    except (ValueError, RecursionError) as e:
        # RecursionError: nesting deeper than the decoder can follow
        return ParseResult(error=f"Invalid JSON: {e}")

    if not isinstance(parsed, dict):
        return ParseResult(error=NOT_AN_OBJECT_MESSAGE)
    return ParseResult(data=parsed)


# ─────────────────────────────────────────────────────────────────────────────
# Draft Serialization
# ─────────────────────────────────────────────────────────────────────────────

def draft_to_json(draft: EvaluationDraft, *, indent: Optional[int] = 2) -> str:
    """Serialize a draft to the camelCase JSON record."""
    return json.dumps(draft.to_dict(), indent=indent, ensure_ascii=False)


def draft_from_dict(data: dict[str, Any]) -> EvaluationDraft:
    """
    Rebuild a draft from its camelCase record.

    Raises:
        KeyError: If a canonical field is missing
        ValueError: If a field has the wrong type
    """
    return EvaluationDraft.from_dict(data)


def draft_from_json(text: str) -> EvaluationDraft:
    return draft_from_dict(json.loads(text))
