"""Timing and reporting helpers around a single scan."""
from __future__ import annotations

import json
import time

from .models import SearchReport, TransitionTable
from .runner import scan


def timed_scan(table: TransitionTable, text: bytes) -> tuple[int | None, float]:
    """Scan ``text`` and return the offset with the elapsed time in microseconds."""
    start = time.perf_counter()
    offset = scan(table, text)
    elapsed = time.perf_counter() - start
    return offset, elapsed * 1_000_000


def verify_match(table: TransitionTable, text: bytes, offset: int | None) -> bool:
    """Check that ``offset`` is a real occurrence of the pattern in ``text``.

    A missing match verifies trivially.
    """
    if offset is None:
        return True
    if offset < 0:
        return False
    return text[offset : offset + table.length] == table.pattern


def run_search(table: TransitionTable, text: bytes) -> SearchReport:
    offset, elapsed_us = timed_scan(table, text)
    if not verify_match(table, text, offset):
        raise RuntimeError(f"scan reported offset {offset} which does not hold the pattern")
    return SearchReport(
        pattern=table.pattern,
        text_length=len(text),
        offset=offset,
        elapsed_us=elapsed_us,
    )


def _display(pattern: bytes) -> str:
    return pattern.decode("utf-8", errors="backslashreplace")


def format_text(report: SearchReport, verbose: bool = False) -> str:
    lines: list[str] = []
    if verbose:
        lines.append(
            f"Search: pattern = '{_display(report.pattern)}', text length = {report.text_length}"
        )
    lines.append(f"KMP: {report.elapsed_us:2.0f} us")
    if verbose:
        if report.found:
            lines.append(f"Output: found at offset {report.offset}")
        else:
            lines.append("Output: not found")
    return "\n".join(lines)


def format_json(report: SearchReport) -> str:
    return json.dumps(report.to_json(), indent=2, sort_keys=True)
