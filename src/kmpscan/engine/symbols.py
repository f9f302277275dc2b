"""Conversion of caller values into raw byte symbol sequences."""
from __future__ import annotations

from collections.abc import Sequence
from typing import Union

Symbols = Union[bytes, bytearray, memoryview, str, Sequence[int]]


def to_symbols(value: Symbols, encoding: str = "utf-8") -> bytes:
    """Return ``value`` as a ``bytes`` object of symbols in ``[0, 256)``.

    Strings are encoded with ``encoding``; offsets reported for them are byte
    offsets into the encoded form. Integer sequences must hold byte values.
    """
    if isinstance(value, bytes):
        return value
    if isinstance(value, (bytearray, memoryview)):
        return bytes(value)
    if isinstance(value, str):
        return value.encode(encoding)
    if isinstance(value, Sequence):
        # bytes() rejects values outside range(256) with ValueError
        return bytes(value)
    raise TypeError(f"cannot use {type(value).__name__} as a symbol sequence")
