"""Command line entry point for :mod:`kmpscan`."""

from .cli import main

if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
