"""Writing characters, strings and numbers to a text stream."""

from __future__ import annotations

import sys
from typing import TextIO

from .chars import itoa


def _target(stream: TextIO | None) -> TextIO:
    return sys.stdout if stream is None else stream


def _as_char(c: int | str) -> str:
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return c
    return chr(c & 0xFF)


def put_char(c: int | str, stream: TextIO | None = None) -> None:
    """Write one character; an int is taken as a byte-sized character code."""
    _target(stream).write(_as_char(c))


def put_str(s: str, stream: TextIO | None = None) -> None:
    """Write a string as it is."""
    if s:
        _target(stream).write(s)


def put_endl(s: str, stream: TextIO | None = None) -> None:
    """Write a string followed by a newline.

    A string that begins with a newline gets one extra newline in front.
    """
    out = _target(stream)
    if s.startswith("\n"):
        out.write("\n")
    out.write(s)
    out.write("\n")


def put_nbr(n: int, stream: TextIO | None = None) -> None:
    """Write a 32-bit signed integer in decimal."""
    _target(stream).write(itoa(n))