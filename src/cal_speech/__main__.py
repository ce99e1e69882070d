"""Entry point for ``python -m cal_speech``.

Runs the speech post-processing pipeline on a transcript given on the
command line, or on every non-blank line of a file, and prints either the
console rendering or camelCase JSON.  Uses stdlib :mod:`argparse`.

Exit codes:
    0 -- All transcripts processed.
    1 -- An error occurred (file missing or unreadable, bad date, config error).
    2 -- Argument parsing error (handled by argparse).
"""

from __future__ import annotations

import argparse
import json
import sys
from datetime import date
from pathlib import Path

from cal_speech.config import ConfigError, load_settings
from cal_speech.display import print_processed_result
from cal_speech.log import get_logger, setup_logging
from cal_speech.pipeline import process

logger = get_logger(__name__)

DEFAULT_CONFIDENCE = 0.8


def build_parser() -> argparse.ArgumentParser:
    """Build and return the CLI argument parser."""
    parser = argparse.ArgumentParser(
        prog="cal-speech",
        description="Correct a speech transcript and propose a calendar event.",
    )
    parser.add_argument(
        "text",
        nargs="?",
        default=None,
        help="Transcript to process.",
    )
    parser.add_argument(
        "-f",
        "--file",
        type=str,
        default=None,
        help="Process every non-blank line of this UTF-8 file instead.",
    )
    parser.add_argument(
        "-c",
        "--confidence",
        type=float,
        default=DEFAULT_CONFIDENCE,
        help=f"Recogniser confidence (default: {DEFAULT_CONFIDENCE}).",
    )
    parser.add_argument(
        "--date",
        type=str,
        default=None,
        help="Reference date YYYY-MM-DD (default: today in TIMEZONE).",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        default=False,
        help="Print the result as JSON.",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        default=False,
        help="Enable debug-level logging.",
    )
    return parser


def _read_transcripts(args: argparse.Namespace) -> list[str]:
    """Return the transcripts named by *args*.

    Raises:
        FileNotFoundError: If ``--file`` does not exist.
        UnicodeDecodeError: If ``--file`` is not valid UTF-8.
    """
    if args.file is None:
        return [args.text]

    path = Path(args.file)
    if not path.is_file():
        raise FileNotFoundError(f"Transcript file not found: {path}")
    lines = path.read_text(encoding="utf-8").splitlines()
    return [line for line in lines if line.strip()]


def main(argv: list[str] | None = None) -> int:
    """Run the cal-speech CLI.

    Args:
        argv: Command-line arguments.  Defaults to ``sys.argv[1:]``
            when ``None``.

    Returns:
        Exit code: ``0`` on success, ``1`` on error.
    """
    parser = build_parser()
    args = parser.parse_args(argv if argv is not None else sys.argv[1:])

    if (args.text is None) == (args.file is None):
        parser.error("provide either TEXT or --file")

    try:
        settings = load_settings()
    except ConfigError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    setup_logging("DEBUG" if args.verbose else settings.log_level)

    if args.date is not None:
        try:
            reference_date = date.fromisoformat(args.date)
        except ValueError:
            print(f"Error: Invalid date: {args.date!r}", file=sys.stderr)
            return 1
    else:
        reference_date = settings.today()

    try:
        transcripts = _read_transcripts(args)
    except (OSError, UnicodeDecodeError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    logger.debug("Processing %d transcript(s) for %s", len(transcripts), reference_date)
    results = [process(text, args.confidence, reference_date) for text in transcripts]

    if args.json:
        payload = [r.model_dump(mode="json", by_alias=True) for r in results]
        output = payload[0] if args.file is None else payload
        print(json.dumps(output, ensure_ascii=False, indent=2))
    else:
        for result in results:
            print_processed_result(result)

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
