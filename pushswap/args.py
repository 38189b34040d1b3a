"""Validation of the command-line numbers given to the solver."""

from __future__ import annotations

from collections.abc import Sequence

from .stacks import parse_long

_INT_MIN = -(1 << 31)
_INT_MAX = (1 << 31) - 1
_MAX_TOKEN_LENGTH = 12


class ArgumentError(ValueError):
    """Raised when the command-line numbers are not acceptable.

    ``exit_status`` is the status the program ends with for this error.
    """

    def __init__(self, message: str = "Error", exit_status: int = 255):
        super().__init__(message)
        self.exit_status = exit_status


def is_number(token: str) -> bool:
    """True for an optional sign followed by one or more ASCII digits.

    Tokens longer than twelve characters, empty tokens and tokens that
    start with a space are rejected.
    """
    if not token or len(token) > _MAX_TOKEN_LENGTH or token.startswith(" "):
        return False
    body = token[1:] if token[0] in "+-" else token
    return bool(body) and all("0" <= ch <= "9" for ch in body)


def tokens_from_argv(argv: Sequence[str]) -> list[str]:
    """The number tokens held by the arguments (program name excluded).

    A single argument is split on spaces; several arguments are taken as
    one token each.
    """
    if len(argv) == 1:
        return [word for word in argv[0].split(" ") if word]
    return list(argv)


def parse_arguments(argv: Sequence[str]) -> list[int]:
    """Turn the arguments into distinct 32-bit integers, in the order given.

    Raises ArgumentError for a token that is not a number, a value outside
    the 32-bit signed range, a repeated value, or when no number is given.
    """
    tokens = tokens_from_argv(argv)
    if not tokens:
        raise ArgumentError("no numbers given", exit_status=1)
    values: list[int] = []
    seen: set[int] = set()
    for token in tokens:
        if not is_number(token):
            raise ArgumentError(f"not a number: {token!r}")
        value = parse_long(token)
        if not _INT_MIN <= value <= _INT_MAX:
            raise ArgumentError(f"out of range: {token!r}")
        if value in seen:
            raise ArgumentError(f"duplicate value: {token!r}")
        seen.add(value)
        values.append(value)
    return values