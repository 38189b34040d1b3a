"""Sorting stack ``a`` with the puzzle's moves, and the command entry point."""

from __future__ import annotations

import sys
from collections.abc import Iterable, Sequence

from .args import ArgumentError, parse_arguments
from .stacks import Stacks, is_sorted, max_bits, rank


def _require_size(stacks: Stacks, size: int) -> None:
    if len(stacks.a) != size:
        raise ValueError(f"stack a must hold exactly {size} items, not {len(stacks.a)}")


def sort_two(stacks: Stacks) -> None:
    """Sort a two-item stack ``a``."""
    _require_size(stacks, 2)
    if stacks.a[0] > stacks.a[1]:
        stacks.sa()


def sort_three(stacks: Stacks) -> None:
    """Sort a three-item stack ``a`` with at most two moves."""
    _require_size(stacks, 3)
    n1, n2, n3 = stacks.a
    if n1 > n2 > n3:
        stacks.sa()
        stacks.rra()
    elif n1 > n2 and n1 > n3 and n2 < n3:
        stacks.ra()
    elif n1 > n2 and n1 < n3:
        stacks.sa()
    elif n2 > n1 > n3:
        stacks.rra()
    elif n1 < n2 and n2 > n3:
        stacks.rra()
        stacks.sa()


def sort_four(stacks: Stacks, target: int) -> None:
    """Sort a four-item stack ``a`` whose smallest item is ``target``."""
    _require_size(stacks, 4)
    if target not in stacks.a:
        raise ValueError(f"{target} is not on stack a")
    while stacks.a[0] != target:
        stacks.ra()
    stacks.pb()
    sort_three(stacks)
    stacks.pa()


def sort_five(stacks: Stacks) -> None:
    """Sort a five-item stack ``a`` holding the ranks 0 to 4."""
    _require_size(stacks, 5)
    position = stacks.a.index(0) if 0 in stacks.a else -1
    if position < 0:
        raise ValueError("rank 0 is not on stack a")
    if position == 4:
        stacks.rra()
    while stacks.a[0] != 0:
        stacks.ra()
    stacks.pb()
    sort_four(stacks, 1)
    stacks.pa()


def radix_sort(stacks: Stacks) -> None:
    """Sort stack ``a`` of non-negative ranks by binary radix, using ``b``."""
    size = len(stacks.a)
    for bit in range(max_bits(stacks.a)):
        for _ in range(size):
            if (stacks.a[0] >> bit) & 1:
                stacks.ra()
            else:
                stacks.pb()
        while stacks.b:
            stacks.pa()


def solve(values: Iterable[int]) -> list[str]:
    """The moves that sort the distinct ``values`` in ascending order."""
    items = list(values)
    ranks = rank(items)
    if is_sorted(items):
        return []
    stacks = Stacks(ranks)
    size = len(ranks)
    if size == 2:
        sort_two(stacks)
    elif size == 3:
        sort_three(stacks)
    elif size == 4:
        sort_four(stacks, 0)
    elif size == 5:
        sort_five(stacks)
    else:
        radix_sort(stacks)
    return stacks.moves


def main(argv: Sequence[str] | None = None) -> int:
    """Print the moves that sort the numbers given on the command line."""
    args = list(sys.argv[1:] if argv is None else argv)
    if not args:
        return 0
    try:
        values = parse_arguments(args)
    except ArgumentError as exc:
        sys.stderr.write("Error\n")
        return exc.exit_status
    for move in solve(values):
        sys.stdout.write(move + "\n")
    return 0