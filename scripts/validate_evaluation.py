"""Validate an evaluation import file and print the report.

Usage:
    python scripts/validate_evaluation.py quiz.json
    python scripts/validate_evaluation.py quiz.json --normalize --professor-id prof-1

Exit codes: 0 valid, 1 invalid, 2 file could not be read.
"""

import argparse
import logging
import sys
from pathlib import Path

# Add src to path
project_root = Path(__file__).resolve().parent.parent
sys.path.insert(0, str(project_root / "src"))

from eval_toolkit.core.utils import draft_to_json
from eval_toolkit.importer import (
    EvaluationImporter,
    ImporterConfig,
    ImportFileError,
    format_report,
)


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Validate an evaluation JSON file")
    parser.add_argument("path", type=Path, help="Evaluation file to check")
    parser.add_argument(
        "--normalize",
        action="store_true",
        help="Print the normalized evaluation when the file is valid",
    )
    parser.add_argument("--professor-id", help="Professor assigned when the file has none")
    parser.add_argument("--verbose", "-v", action="store_true", help="Debug logging")
    return parser.parse_args(argv)


def main(argv=None) -> int:
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    importer = EvaluationImporter(ImporterConfig(professor_id=args.professor_id))
    try:
        result = importer.validate_file(args.path)
    except ImportFileError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2

    print(format_report(result))
    if not result.is_valid:
        return 1

    if args.normalize:
        draft = importer.confirm(result)
        print()
        print(draft_to_json(draft))
    return 0


if __name__ == "__main__":
    sys.exit(main())
