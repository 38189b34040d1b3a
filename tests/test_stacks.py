import io

import pytest

from pushswap.stacks import Stacks, is_sorted, max_bits, parse_long, rank


def test_sa_swaps_top_two():
    stacks = Stacks([1, 2, 3])
    stacks.sa()
    assert list(stacks.a) == [2, 1, 3]
    assert stacks.moves == ["sa"]


def test_sa_twice_is_identity():
    stacks = Stacks([4, 5, 6])
    stacks.sa()
    stacks.sa()
    assert list(stacks.a) == [4, 5, 6]


def test_ra_moves_top_to_bottom():
    stacks = Stacks([1, 2, 3])
    stacks.ra()
    assert list(stacks.a) == [2, 3, 1]
    assert stacks.moves == ["ra"]


def test_rra_moves_bottom_to_top():
    stacks = Stacks([1, 2, 3])
    stacks.rra()
    assert list(stacks.a) == [3, 1, 2]
    assert stacks.moves == ["rra"]


def test_ra_then_rra_restores():
    values = [9, 3, 7, 1]
    stacks = Stacks(values)
    stacks.ra()
    stacks.rra()
    assert list(stacks.a) == values
    assert stacks.moves == ["ra", "rra"]


def test_pb_then_pa_round_trip():
    stacks = Stacks([1, 2, 3])
    stacks.pb()
    assert list(stacks.a) == [2, 3]
    assert list(stacks.b) == [1]
    stacks.pa()
    assert list(stacks.a) == [1, 2, 3]
    assert not stacks.b
    assert stacks.moves == ["pb", "pa"]


def test_moves_written_to_stream():
    buf = io.StringIO()
    stacks = Stacks([2, 1], stream=buf)
    stacks.sa()
    stacks.pb()
    stacks.pa()
    assert buf.getvalue() == "sa\npb\npa\n"


def test_errors_on_too_few_items():
    stacks = Stacks([1])
    with pytest.raises(IndexError):
        stacks.sa()
    with pytest.raises(IndexError):
        stacks.pa()
    with pytest.raises(IndexError):
        Stacks().ra()
    with pytest.raises(IndexError):
        Stacks().rra()
    with pytest.raises(IndexError):
        Stacks().pb()


def test_is_sorted():
    assert is_sorted([1, 2, 2, 3]) is True
    assert is_sorted([2, 1]) is False
    assert is_sorted([5]) is True
    assert is_sorted([]) is True


@pytest.mark.parametrize("indices", [[0, 1, 2, 3], [0, 5], [0, 1, 100, 4]])
def test_max_bits_bounds(indices):
    bits = max_bits(indices)
    assert 2 ** (bits - 1) <= max(indices) < 2**bits


def test_max_bits_zero():
    assert max_bits([0]) == 0


def test_max_bits_errors():
    with pytest.raises(ValueError):
        max_bits([])
    with pytest.raises(ValueError):
        max_bits([-3, -1])


def test_rank_pinned():
    assert rank([30, 10, 20]) == [2, 0, 1]


def test_rank_is_permutation_keeping_order():
    values = [42, -7, 0, 2147483647, -2147483648, 13]
    ranks = rank(values)
    assert sorted(ranks) == list(range(len(values)))
    for i, left in enumerate(values):
        for j, right in enumerate(values):
            assert (left < right) == (ranks[i] < ranks[j])


def test_rank_rejects_duplicates():
    with pytest.raises(ValueError):
        rank([1, 2, 1])


def test_parse_long_signs_and_space():
    assert parse_long("  -42") == -42
    assert parse_long("+17") == 17
    assert parse_long("\t\n 8") == 8


def test_parse_long_stops_at_non_digit():
    assert parse_long("12abc") == 12
    assert parse_long("abc") == 0
    assert parse_long("-") == 0


def test_parse_long_no_wrap():
    assert parse_long("9999999999") == 9999999999
    assert parse_long("-2147483649") == -2147483649