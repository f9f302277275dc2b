"""kmpscan Knuth-Morris-Pratt substring search."""

from collections.abc import Sequence

from .engine.builder import build
from .engine.models import InvalidPattern, TransitionTable
from .engine.runner import scan, search


def main(argv: Sequence[str] | None = None) -> int:
    """Entry point mirroring :func:`kmpscan.cli.main`."""

    from .cli import main as cli_main

    return cli_main(argv)


__all__ = ["main", "build", "scan", "search", "InvalidPattern", "TransitionTable"]
