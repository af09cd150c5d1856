"""CLI entrypoint for the word search solver."""

from __future__ import annotations

import argparse
import logging
import os
import sys
from pathlib import Path

from wordsearch.core.constants import (
    DEFAULT_HTTP_TIMEOUT,
    DEFAULT_SOLUTION_FILE,
    HTTP_TIMEOUT_ENV,
)
from wordsearch.core.exceptions import WordSearchError
from wordsearch.engine.solver import OUTPUT_FORMATS, SolverConfig, WordSearchSolver
from wordsearch.utils.logger import configure_logging, get_logger
from wordsearch.utils.pretty import print_search_stats


LOGGER = get_logger("wordsearch.cli")


def positive_float(raw: str) -> float:
    """argparse type accepting only numbers greater than zero."""
    try:
        value = float(raw)
    except ValueError:
        raise argparse.ArgumentTypeError(f"expected a number, got {raw!r}") from None
    if value <= 0:
        raise argparse.ArgumentTypeError(f"must be greater than 0, got {raw}")
    return value


def _default_timeout() -> float:
    raw = os.environ.get(HTTP_TIMEOUT_ENV)
    if not raw:
        return DEFAULT_HTTP_TIMEOUT
    try:
        return positive_float(raw)
    except argparse.ArgumentTypeError as exc:
        LOGGER.warning("Ignoring %s=%r: %s", HTTP_TIMEOUT_ENV, raw, exc)
        return DEFAULT_HTTP_TIMEOUT


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Find word bank words in a letter grid and write the masked solution",
    )
    parser.add_argument(
        "--puzzle",
        type=str,
        help="Puzzle file path or http(s) URL (prompted for when omitted)",
    )
    parser.add_argument(
        "--wordbank",
        type=str,
        help="Word bank file path or http(s) URL (prompted for when omitted)",
    )
    parser.add_argument(
        "--output",
        type=Path,
        default=Path(DEFAULT_SOLUTION_FILE),
        help=f"Where to write the solution (default {DEFAULT_SOLUTION_FILE})",
    )
    parser.add_argument(
        "--workers",
        type=int,
        default=1,
        help="Number of threads scanning row bands in parallel",
    )
    parser.add_argument(
        "--timeout",
        type=positive_float,
        default=_default_timeout(),
        help=f"HTTP timeout in seconds for URL sources (env {HTTP_TIMEOUT_ENV})",
    )
    parser.add_argument(
        "--format",
        dest="output_format",
        choices=OUTPUT_FORMATS,
        default="text",
        help="Solution file format",
    )
    parser.add_argument(
        "--show",
        action="store_true",
        help="Print the masked grid and match statistics to stdout",
    )
    parser.add_argument(
        "--log-level",
        type=str,
        default="INFO",
        help="Logging level (DEBUG, INFO, WARNING, ERROR)",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    level = getattr(logging, args.log_level.upper(), logging.INFO)
    configure_logging(level)

    if args.workers < 1:
        parser.error("--workers must be at least 1")

    try:
        puzzle = args.puzzle or input("Enter puzzle file name: ").strip()
        wordbank = args.wordbank or input("Enter word bank file name: ").strip()
    except EOFError:
        parser.error("puzzle and word bank sources are required")

    config = SolverConfig(
        puzzle_source=puzzle,
        wordbank_source=wordbank,
        output_path=args.output,
        workers=args.workers,
        timeout_seconds=args.timeout,
        output_format=args.output_format,
    )

    try:
        result = WordSearchSolver(config).run()
    except WordSearchError as exc:
        LOGGER.error("Solve failed: %s", exc)
        print(f"error: {exc}", file=sys.stderr)
        return 1

    if args.show:
        print_search_stats(result)
    return 0


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
