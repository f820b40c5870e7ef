"""Plain-text rendering of validation results for the person importing."""

from __future__ import annotations

from typing import Any

from eval_toolkit.core.schemas import ValidationResult
from eval_toolkit.core.schemas.checks import format_number, is_number

PREVIEW_FIELDS = (
    ("title", "Title"),
    ("subject", "Subject"),
    ("date", "Date"),
    ("duration", "Duration (min)"),
    ("totalPoints", "Total points"),
)


def format_report(result: ValidationResult) -> str:
    """Render a ValidationResult as text.

    Every error is listed at once so the document can be fixed in a single
    pass.

    Args:
        result: Outcome of validate().

    Returns:
        Multi-line report.
    """
    lines = ["Validation passed" if result.is_valid else "Validation failed"]

    preview = _preview_lines(result.data)
    if preview:
        lines.append("")
        lines.extend(preview)

    if result.errors:
        lines.append("")
        lines.append(f"Errors ({len(result.errors)}):")
        lines.extend(f"  • {error}" for error in result.errors)

    if result.warnings:
        lines.append("")
        lines.append(f"Warnings ({len(result.warnings)}):")
        lines.extend(f"  • {warning}" for warning in result.warnings)

    return "\n".join(lines)


def _preview_lines(data: dict[str, Any]) -> list[str]:
    lines = []
    for key, label in PREVIEW_FIELDS:
        value = data.get(key)
        if isinstance(value, str) and value.strip():
            lines.append(f"{label}: {value}")
        elif is_number(value):
            lines.append(f"{label}: {format_number(value)}")

    questions = data.get("questions")
    if isinstance(questions, list):
        lines.append(f"Questions: {len(questions)}")
    return lines
