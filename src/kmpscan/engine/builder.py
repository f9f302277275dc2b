"""Construction of the Knuth-Morris-Pratt automaton."""
from __future__ import annotations

import numpy as np

from .models import RADIX, InvalidPattern, TransitionTable
from .symbols import Symbols, to_symbols


def build(pattern: Symbols, encoding: str = "utf-8") -> TransitionTable:
    """Build the transition table matching ``pattern``.

    Column ``j`` holds the transitions out of state ``j`` (``j`` symbols of the
    pattern matched). Mismatch transitions are copied from the column of the
    restart cursor, the state the automaton would be in after reading
    ``pattern[1:j]``, so no failure array is kept.
    """
    try:
        symbols = to_symbols(pattern, encoding)
    except (TypeError, ValueError, LookupError) as exc:
        raise InvalidPattern(f"pattern is not a byte sequence: {exc}") from exc
    if not symbols:
        raise InvalidPattern("pattern must not be empty")

    length = len(symbols)
    dfa = np.zeros((RADIX, length), dtype=np.intp)
    dfa[symbols[0], 0] = 1

    restart = 0
    for j in range(1, length):
        symbol = symbols[j]
        dfa[:, j] = dfa[:, restart]
        dfa[symbol, j] = j + 1
        restart = int(dfa[symbol, restart])

    dfa.setflags(write=False)
    return TransitionTable(pattern=symbols, dfa=dfa)
