"""
Module: schemas.checks

Purpose:
    Type-narrowing helpers for untrusted import documents. Every field of a
    decoded JSON document goes through one of these before it is trusted.

Key Functions:
    - is_present(): Key exists and is not null
    - is_number() / is_positive_number(): JSON numbers (bool excluded)
    - coerce_numeric_string(): "60" -> 60, "1.5" -> 1.5
    - is_non_empty_string(): String with content after trimming
    - is_blank(): Optional value left out (null, "" or [])
    - is_iso_date(): YYYY-MM-DD that exists on the calendar
    - format_number(): Render numbers the way they appear in JSON

Dependencies:
    - datetime (std)
    - re (std)

Used By:
    - core.schemas.validator
    - core.schemas.questions
    - importer.normalizer
"""

from __future__ import annotations

import math
import re
from datetime import datetime
from typing import Any, Mapping, Optional, Union

Number = Union[int, float]

ISO_DATE_RE = re.compile(r"^[0-9]{4}-[0-9]{2}-[0-9]{2}$")
ISO_DATE_FORMAT = "%Y-%m-%d"

# JSON number spelling, plus a leading "+" or "." as typed by hand
NUMERIC_STRING_RE = re.compile(r"^[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?$")


def is_present(data: Mapping[str, Any], key: str) -> bool:
    """Return True if key exists and its value is not null."""
    return data.get(key) is not None


def is_number(value: Any) -> bool:
    """
    Check for a JSON number.

    ``bool`` is a subclass of ``int`` in Python but ``true``/``false`` are not
    numbers in JSON, so they are rejected here.
    """
    if isinstance(value, bool):
        return False
    if isinstance(value, int):
        return True
    return isinstance(value, float) and math.isfinite(value)


def is_positive_number(value: Any) -> bool:
    return is_number(value) and value > 0


def is_non_empty_string(value: Any) -> bool:
    return isinstance(value, str) and value.strip() != ""


def is_blank(value: Any) -> bool:
    """Null, empty string or empty list: an optional field left out."""
    return value is None or value == "" or value == []


def coerce_numeric_string(value: str) -> Optional[Number]:
    """
    Parse a numeric string.

    Integral values come back as ``int`` so that "60" and 60 normalize to the
    same draft.

    Returns:
        The number, or None if the string is not a finite number
    """
    text = value.strip()
    if not NUMERIC_STRING_RE.match(text):
        return None
    number = float(text)
    if not math.isfinite(number):
        return None
    return int(number) if number.is_integer() else number


def is_iso_date(value: str) -> bool:
    """
    Check a ``YYYY-MM-DD`` date string.

    Both the shape and the calendar are checked: "2024-02-30" has the right
    shape but no such day.
    """
    if not ISO_DATE_RE.match(value):
        return False
    try:
        datetime.strptime(value, ISO_DATE_FORMAT)
    except ValueError:
        return False
    return True


def format_number(value: Number) -> str:
    """Format a number without a trailing ``.0`` for integral floats."""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)
