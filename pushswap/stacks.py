"""The two stacks of the puzzle, their moves, and helpers over values."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Sequence
from typing import TextIO

_WHITESPACE = frozenset(" \t\n\v\f\r")


class Stacks:
    """Stacks ``a`` and ``b``; the top of each stack is its leftmost item.

    Every move is appended to ``moves`` and, when a stream is given,
    written to it as its name followed by a newline.
    """

    def __init__(self, values: Iterable[int] = (), stream: TextIO | None = None):
        self.a: deque[int] = deque(values)
        self.b: deque[int] = deque()
        self.moves: list[str] = []
        self._stream = stream

    def __repr__(self) -> str:
        return f"Stacks(a={list(self.a)!r}, b={list(self.b)!r})"

    def _record(self, name: str) -> None:
        self.moves.append(name)
        if self._stream is not None:
            self._stream.write(name + "\n")

    def sa(self) -> None:
        """Swap the two top items of ``a``."""
        if len(self.a) < 2:
            raise IndexError("sa needs at least two items on stack a")
        first = self.a.popleft()
        second = self.a.popleft()
        self.a.extendleft((first, second))
        self._record("sa")

    def ra(self) -> None:
        """Rotate ``a`` up: the top item goes to the bottom."""
        if not self.a:
            raise IndexError("ra on empty stack a")
        self.a.rotate(-1)
        self._record("ra")

    def rra(self) -> None:
        """Rotate ``a`` down: the bottom item comes to the top."""
        if not self.a:
            raise IndexError("rra on empty stack a")
        self.a.rotate(1)
        self._record("rra")

    def pa(self) -> None:
        """Move the top item of ``b`` onto ``a``."""
        if not self.b:
            raise IndexError("pa on empty stack b")
        self.a.appendleft(self.b.popleft())
        self._record("pa")

    def pb(self) -> None:
        """Move the top item of ``a`` onto ``b``."""
        if not self.a:
            raise IndexError("pb on empty stack a")
        self.b.appendleft(self.a.popleft())
        self._record("pb")


def is_sorted(values: Iterable[int]) -> bool:
    """True when no item is greater than the one after it."""
    items = list(values)
    return all(left <= right for left, right in zip(items, items[1:]))


def max_bits(indices: Iterable[int]) -> int:
    """Number of bits needed to write the largest of the non-negative ``indices``."""
    items = list(indices)
    if not items:
        raise ValueError("max_bits of an empty sequence")
    largest = max(items)
    if largest < 0:
        raise ValueError("indices must not all be negative")
    return largest.bit_length()


def rank(values: Sequence[int]) -> list[int]:
    """Replace each value by its position in ascending order.

    Values must be distinct.
    """
    ordered = sorted(values)
    if any(left == right for left, right in zip(ordered, ordered[1:])):
        raise ValueError("values must be distinct")
    positions = {value: index for index, value in enumerate(ordered)}
    return [positions[value] for value in values]


def parse_long(text: str) -> int:
    """Parse a leading decimal integer without range limits.

    Leading whitespace is skipped, one optional sign is accepted and digits
    are read up to the first non-digit. Text without digits yields 0.
    """
    rest = text.lstrip("".join(_WHITESPACE))
    sign = 1
    if rest[:1] in ("+", "-"):
        if rest[0] == "-":
            sign = -1
        rest = rest[1:]
    digits = []
    for ch in rest:
        if not "0" <= ch <= "9":
            break
        digits.append(ch)
    return sign * int("".join(digits)) if digits else 0