"""A small printf supporting the conversions c, s, p, d, i, u, x, X and %."""

from __future__ import annotations

import sys
from collections.abc import Iterator
from typing import Any, TextIO

from .chars import itoa

_CONVERSIONS = frozenset("cspdiuxX%")
_UINT_MASK = (1 << 32) - 1
_ULONG_MASK = (1 << 64) - 1


def _next_arg(args: Iterator[Any], spec: str) -> Any:
    try:
        return next(args)
    except StopIteration:
        raise TypeError(f"not enough arguments for conversion %{spec}") from None


def _convert(spec: str, args: Iterator[Any]) -> str:
    if spec == "%":
        return "%"
    value = _next_arg(args, spec)
    if spec == "c":
        if isinstance(value, str):
            if len(value) != 1:
                raise ValueError(f"%c expects a single character, got {value!r}")
            return value
        return chr(int(value) & 0xFF)
    if spec == "s":
        return "(null)" if value is None else str(value)
    if spec == "p":
        address = 0 if value is None else int(value) & _ULONG_MASK
        return "0x" + format(address, "x")
    if spec in "di":
        return itoa(int(value))
    if spec == "u":
        return str(int(value) & _UINT_MASK)
    return format(int(value) & _UINT_MASK, "x" if spec == "x" else "X")


def render(fmt: str, *args: Any) -> str:
    """Format ``args`` according to ``fmt`` and return the text.

    A ``%`` followed by an unknown character is dropped and the character
    kept; a trailing ``%`` is dropped. Extra arguments are ignored.
    """
    parts: list[str] = []
    chars = iter(fmt)
    arg_iter = iter(args)
    for ch in chars:
        if ch != "%":
            parts.append(ch)
            continue
        spec = next(chars, None)
        if spec is None:
            break
        if spec in _CONVERSIONS:
            parts.append(_convert(spec, arg_iter))
        else:
            parts.append(spec)
    return "".join(parts)


def printf(fmt: str, *args: Any, stream: TextIO | None = None) -> int:
    """Write the formatted text to ``stream`` (stdout by default); return its length."""
    text = render(fmt, *args)
    (sys.stdout if stream is None else stream).write(text)
    return len(text)