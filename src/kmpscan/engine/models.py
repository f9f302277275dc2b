"""Data models shared across the kmpscan engine."""
from __future__ import annotations

import enum
from dataclasses import dataclass, field

import numpy as np

RADIX = 256
MAX_LINE_LENGTH = 4095


class InvalidPattern(ValueError):
    """Raised when a pattern cannot be compiled into an automaton."""


class OutputFormat(str, enum.Enum):
    TEXT = "text"
    JSON = "json"


@dataclass(frozen=True, eq=False)
class TransitionTable:
    """Knuth-Morris-Pratt automaton for a single pattern.

    ``dfa[c, s]`` is the state reached from state ``s`` on symbol ``c``.
    States run from ``0`` to ``len(pattern)``; the last one is accepting and
    has no column of its own. The array is read-only once built, so a table
    can be shared between threads and scanned any number of times.
    """

    pattern: bytes
    dfa: np.ndarray
    rows: tuple[tuple[int, ...], ...] = field(init=False, repr=False)

    def __post_init__(self) -> None:
        # rows[symbol][state] mirrors dfa[symbol, state] as plain ints
        object.__setattr__(self, "rows", tuple(tuple(row) for row in self.dfa.tolist()))

    @property
    def length(self) -> int:
        return len(self.pattern)

    @property
    def accepting(self) -> int:
        return len(self.pattern)

    @property
    def radix(self) -> int:
        return int(self.dfa.shape[0])

    def step(self, state: int, symbol: int) -> int:
        """Return the state following ``state`` on ``symbol``."""
        return int(self.dfa[symbol, state])

    def restart_states(self) -> list[int]:
        """Replay ``pattern[1:]`` through the table.

        Entry ``j`` is the restart cursor after column ``j`` was filled in,
        which is the length of the longest proper border of ``pattern[:j + 1]``.
        """
        state = 0
        states = [0]
        for symbol in self.pattern[1:]:
            state = self.step(state, symbol)
            states.append(state)
        return states

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TransitionTable):
            return NotImplemented
        return self.pattern == other.pattern and np.array_equal(self.dfa, other.dfa)

    def __hash__(self) -> int:
        return hash(self.pattern)

    def __repr__(self) -> str:  # pragma: no cover - debug convenience
        return f"TransitionTable(pattern={self.pattern!r}, shape={self.dfa.shape})"


@dataclass(frozen=True)
class SearchOptions:
    """Settings for the command line search harness.

    encoding: codec used to turn a ``str`` pattern into byte symbols; ``None``
        keeps the bytes the operating system passed on the command line
    max_line_length: longest input line kept; longer lines are truncated
    verbose: also report the pattern, text length and outcome
    output_format: ``text`` for the classic report, ``json`` for a payload
    """

    encoding: str | None = None
    max_line_length: int = MAX_LINE_LENGTH
    verbose: bool = False
    output_format: OutputFormat = OutputFormat.TEXT


@dataclass(frozen=True)
class SearchReport:
    pattern: bytes
    text_length: int
    offset: int | None
    elapsed_us: float

    @property
    def found(self) -> bool:
        return self.offset is not None

    def to_json(self) -> dict[str, object]:
        return {
            "pattern": self.pattern.decode("utf-8", errors="backslashreplace"),
            "text_length": self.text_length,
            "found": self.found,
            "offset": self.offset,
            "elapsed_us": self.elapsed_us,
        }
