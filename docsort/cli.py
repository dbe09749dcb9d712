"""
Command-line interface for docsort.

Usage:
    python -m docsort classify FILENAME... [--employees ROSTER.json]
    python -m docsort batch --directory DIR [--pattern GLOB] [--employees ROSTER.json]
    python -m docsort categories
"""

import argparse
import glob
import json
import os
import sys
from typing import Any, List, Optional

from docsort.config import get_settings
from docsort.models.employee import Employee
from docsort.services.batch_analyzer import analyze_batch
from docsort.services.categories import get_categories
from docsort.services.document_classifier import classify_document
from docsort.services.roster import load_roster
from docsort.utils.structured_log import configure_logging


def create_parser() -> argparse.ArgumentParser:
    """Create CLI argument parser."""
    parser = argparse.ArgumentParser(
        prog="docsort",
        description="docsort CLI - Classify uploaded documents by filename"
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # Classify command
    classify_parser = subparsers.add_parser(
        "classify",
        help="Classify one or more filenames"
    )
    classify_parser.add_argument(
        "filenames",
        nargs="+",
        help="Filenames to classify"
    )
    classify_parser.add_argument(
        "--employees",
        "-e",
        type=str,
        default=None,
        help="JSON roster file to match employees against (default: no roster)"
    )

    # Batch command
    batch_parser = subparsers.add_parser(
        "batch",
        help="Analyze every file in a directory as one upload batch"
    )
    batch_parser.add_argument(
        "--directory",
        "-d",
        type=str,
        required=True,
        help="Directory containing the files to upload"
    )
    batch_parser.add_argument(
        "--pattern",
        "-p",
        type=str,
        default="*",
        help="Glob pattern for files (default: *)"
    )
    batch_parser.add_argument(
        "--employees",
        "-e",
        type=str,
        default=None,
        help="JSON roster file to match employees against (default: no roster)"
    )

    # Categories command
    subparsers.add_parser(
        "categories",
        help="Show the active document category table"
    )

    return parser


def _print_json(payload: Any) -> None:
    print(json.dumps(payload, ensure_ascii=False, indent=2))


def _roster(path: Optional[str]) -> List[Employee]:
    return load_roster(path) if path else []


def classify_command(args: argparse.Namespace) -> int:
    """Classify filenames given on the command line."""
    employees = _roster(args.employees)
    results = []
    for filename in args.filenames:
        result = classify_document(filename, employees)
        results.append({"filename": filename, **result.model_dump(mode="json", by_alias=True)})
    _print_json(results)
    return 0


def batch_command(args: argparse.Namespace) -> int:
    """
    Analyze a directory of files as one upload batch.

    Returns:
        int: Exit code (0 for success, 1 for error)
    """
    if not os.path.isdir(args.directory):
        print(f"Error: Not a directory: {args.directory}", file=sys.stderr)
        return 1

    paths = sorted(glob.glob(os.path.join(args.directory, args.pattern)))
    filenames = [os.path.basename(p) for p in paths if os.path.isfile(p)]
    if not filenames:
        print(f"Error: No files matching {args.pattern} in {args.directory}", file=sys.stderr)
        return 1

    analysis = analyze_batch(filenames, _roster(args.employees))
    _print_json(analysis.model_dump(mode="json", by_alias=True))
    return 0


def categories_command(args: argparse.Namespace) -> int:
    """Print the active category table in priority order."""
    _print_json([c.model_dump(mode="json") for c in get_categories()])
    return 0


COMMANDS = {
    "classify": classify_command,
    "batch": batch_command,
    "categories": categories_command,
}


def main(argv: Optional[List[str]] = None) -> int:
    """Main CLI entry point."""
    parser = create_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 1

    # Configuration and input files are the only things that can fail
    try:
        settings = get_settings()
        configure_logging(settings.log_level, stream=sys.stderr)
        return COMMANDS[args.command](args)
    except ValueError as e:
        print(f"Configuration error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
