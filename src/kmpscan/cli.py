"""Command line interface for the kmpscan substring search."""
from __future__ import annotations

import argparse
import codecs
import logging
import os
import sys
from collections.abc import Sequence

from . import io
from .engine.builder import build
from .engine.models import MAX_LINE_LENGTH, InvalidPattern, OutputFormat, SearchOptions
from .engine.report import format_json, format_text, run_search

logger = logging.getLogger(__name__)

EXIT_FOUND = 0
EXIT_NOT_FOUND = 1
EXIT_INVALID = 2


def _positive_length(value: str) -> int:
    try:
        length = int(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"invalid length: {value}") from exc
    if length < 1:
        raise argparse.ArgumentTypeError(f"length must be at least 1: {value}")
    return length


def _pattern_encoding(value: str) -> str:
    try:
        name = codecs.lookup(value).name
        empty = "".encode(name)
    except LookupError as exc:
        raise argparse.ArgumentTypeError(f"unknown text encoding: {value}") from exc
    # codecs that emit a byte order mark prefix it to every encoded pattern
    if empty:
        raise argparse.ArgumentTypeError(f"encoding writes a byte order mark: {value}")
    return name


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="kmpscan",
        description="Find the first occurrence of a pattern in a line read from standard input",
    )
    parser.add_argument("-V", "--version", action="version", version="kmpscan 0.1")
    parser.add_argument("pattern", help="pattern to search for")
    parser.add_argument("--verbose", action="store_true", default=False)
    parser.add_argument("--format", choices=[fmt.value for fmt in OutputFormat], default="text")
    parser.add_argument("--input", default="-", help="file whose first line is searched (default: stdin)")
    parser.add_argument("--out", default="-")
    parser.add_argument("--max-length", type=_positive_length, default=MAX_LINE_LENGTH)
    parser.add_argument(
        "--encoding",
        type=_pattern_encoding,
        help="encoding of the pattern argument (default: the raw command line bytes)",
    )
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default="WARNING",
    )
    return parser


def _configure_logging(level: str) -> None:
    package_logger = logging.getLogger("kmpscan")
    package_logger.handlers.clear()
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter("%(levelname)s %(name)s: %(message)s"))
    package_logger.addHandler(handler)
    package_logger.setLevel(level)
    package_logger.propagate = False


def _pattern_symbols(pattern: str, encoding: str | None) -> str | bytes:
    if encoding is None:
        # undoes the surrogate escapes Python used to decode argv
        return os.fsencode(pattern)
    return pattern


def _build_options(args: argparse.Namespace) -> SearchOptions:
    return SearchOptions(
        encoding=args.encoding,
        max_line_length=args.max_length,
        verbose=args.verbose,
        output_format=OutputFormat(args.format),
    )


def main(argv: Sequence[str] | None = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)
    _configure_logging(args.log_level)
    options = _build_options(args)

    try:
        table = build(
            _pattern_symbols(args.pattern, options.encoding),
            options.encoding or "utf-8",
        )
    except InvalidPattern as exc:
        sys.stderr.write(f"Error: {exc}\n")
        return EXIT_INVALID
    logger.debug("built automaton with %d states over %d symbols", table.length + 1, table.radix)

    text = io.read_input(args.input, options.max_line_length)
    report = run_search(table, text)
    logger.info("scanned %d bytes in %.1f us", report.text_length, report.elapsed_us)

    if options.output_format is OutputFormat.JSON:
        io.write_text(format_json(report), args.out)
    else:
        io.write_text(format_text(report, options.verbose), args.out)
    return EXIT_FOUND if report.found else EXIT_NOT_FOUND


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
