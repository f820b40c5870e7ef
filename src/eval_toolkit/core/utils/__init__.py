"""
Utils Package

Parsing and serialization functions.
"""

from .serialization import (
    parse_document,
    ParseResult,
    draft_to_json,
    draft_from_dict,
    draft_from_json,
)

__all__ = [
    "parse_document",
    "ParseResult",
    "draft_to_json",
    "draft_from_dict",
    "draft_from_json",
]
