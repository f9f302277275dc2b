"""Input/output helpers for the kmpscan CLI."""
import logging
import sys
from typing import BinaryIO

from .engine.models import MAX_LINE_LENGTH

logger = logging.getLogger(__name__)


def read_line(handle: BinaryIO, max_length: int = MAX_LINE_LENGTH) -> bytes:
    """Read one line of raw bytes from ``handle`` without its newline.

    Lines longer than ``max_length`` are cut to ``max_length`` bytes and the
    rest of the line is consumed, so the next read starts on the next line.
    Returns ``b""`` at end of stream.
    """
    if max_length < 0:
        raise ValueError("max_length must be non-negative")
    line = handle.readline(max_length + 1)
    if line.endswith(b"\n"):
        return line[:-1]
    if len(line) > max_length:
        rest = handle.readline()
        dropped = len(line) - max_length + len(rest.rstrip(b"\n"))
        logger.warning("input line truncated to %d bytes (%d dropped)", max_length, dropped)
        return line[:max_length]
    return line


def read_input(path: str, max_length: int = MAX_LINE_LENGTH) -> bytes:
    if path == "-":
        return read_line(sys.stdin.buffer, max_length)
    with open(path, "rb") as handle:
        return read_line(handle, max_length)


def write_text(text: str, path: str = "-") -> None:
    if path == "-":
        sys.stdout.write(text)
        if not text.endswith("\n"):
            sys.stdout.write("\n")
        sys.stdout.flush()
        return
    with open(path, "w", encoding="utf-8") as handle:
        handle.write(text)
        if not text.endswith("\n"):
            handle.write("\n")
