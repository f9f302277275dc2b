"""Driving a transition table across a text."""
from __future__ import annotations

from .builder import build
from .models import TransitionTable
from .symbols import Symbols, to_symbols


def scan(table: TransitionTable, text: Symbols, encoding: str = "utf-8") -> int | None:
    """Return the offset of the leftmost occurrence of the table's pattern.

    Each text symbol is read exactly once. ``None`` means the pattern does not
    occur, which includes every empty text.
    """
    symbols = to_symbols(text, encoding)
    rows = table.rows
    accepting = table.accepting
    state = 0
    for index, symbol in enumerate(symbols):
        state = rows[symbol][state]
        if state == accepting:
            return index - accepting + 1
    return None


def search(pattern: Symbols, text: Symbols, encoding: str = "utf-8") -> int | None:
    """Build a table for ``pattern`` and scan ``text`` with it once."""
    return scan(build(pattern, encoding), text, encoding)
