# pushswap

`pushswap` sorts a list of distinct integers with two stacks, **a** and **b**.
It uses only a small set of operations and prints each operation it performs,
one per line.

The operations are:

| Operation | Effect |
|-----------|--------|
| `sa`  | swap the top two items of stack a |
| `pa`  | move the top of stack b onto stack a |
| `pb`  | move the top of stack a onto stack b |
| `ra`  | rotate stack a up: the top item goes to the bottom |
| `rra` | rotate stack a down: the bottom item comes to the top |

Each number is first replaced by its rank, that is, its position in ascending
order. Inputs of two to five numbers are then solved with dedicated short
sequences. Longer inputs are sorted with a binary radix sort over the ranks.

## Installation

```
pip install .
```

## Command line

Pass the numbers as separate arguments:

```
push_swap 3 2 1 0
```

or as one quoted, space-separated argument:

```
push_swap "5 1 4 2 3"
```

- If the input is already sorted, including a single number, nothing is
  printed.
- If a token is not an optional sign followed by digits, is longer than twelve
  characters, lies outside the 32-bit signed range, or repeats a value,
  `Error` is written to standard error and the command exits with status 255.
- A single argument that holds no numbers, such as `" "`, also prints `Error`,
  and the command exits with status 1.
- Running the command with no arguments prints nothing and exits with status 0.

## Library use

```python
from pushswap.sorting import solve

moves = solve([3, 2, 1])
print(moves)  # ['sa', 'rra']
```

### `pushswap.sorting`

- `solve(values)` returns the list of moves that sorts distinct values. It
  raises `ValueError` when a value appears twice.
- `sort_two`, `sort_three`, `sort_four(stacks, target)`, `sort_five` and
  `radix_sort` apply the individual strategies to a `Stacks` object holding
  ranks.
- `main(argv=None)` is the command-line entry point. It returns the exit
  status.

### `pushswap.stacks`

- `Stacks(values, stream=None)` holds the two stacks as `a` and `b`, with the
  top of each stack on the left. Its methods `sa`, `ra`, `rra`, `pa` and `pb`
  perform the moves. Each move is recorded in `moves` and, when a stream is
  given, written to it. A move on a stack with too few items raises
  `IndexError`.
- The module also provides these helpers:
  - `rank(values)` replaces each value by its position in ascending order.
  - `is_sorted(values)` tells whether the values are in ascending order.
  - `max_bits(indices)` gives the number of bits needed for the largest index.
  - `parse_long(text)` reads a leading decimal integer without range limits.

### `pushswap.args`

- `parse_arguments(argv)` validates a command-line style argument list, with
  the program name excluded. It returns the integers in the order given and
  raises `ArgumentError` on rejected input. The error carries the process exit
  status as `exit_status`.
- `tokens_from_argv(argv)` splits a single argument on spaces and otherwise
  takes each argument as one token.
- `is_number(token)` applies the token check described above.

### Helper modules

- `pushswap.chars`
  - `is_alpha`, `is_digit`, `is_alnum`, `is_ascii` and `is_print` classify
    ASCII characters.
  - `to_lower` and `to_upper` change the case of ASCII letters.
  - `atoi` parses a leading integer with 32-bit wrap-around, and `itoa` formats
    one.
- `pushswap.memory`: `bzero`, `memset`, `memcpy`, `memmove`, `memchr`,
  `memcmp` and `calloc` work on `bytes` and `bytearray`.
- `pushswap.strings`
  - `strchr`, `strrchr` and `strnstr` return an index, or `None` when nothing
    is found.
  - `strncmp` compares strings.
  - `strlcpy` and `strlcat` return the resulting text together with a length.
  - The module also has `substr`, `strjoin`, `strtrim`, `split`, `strmapi`
    and `striteri`.
- `pushswap.output`: `put_char`, `put_str`, `put_endl` and `put_nbr` write to
  a text stream, which is standard output by default.
- `pushswap.printf`: `render(fmt, *args)` formats the conversions `c s p d i u
  x X %`. `printf(fmt, *args, stream=None)` writes the same text and returns
  its length.

## What it does not do

The package only produces moves. It has no checker that reads a list of moves
and verifies that they sort the input. The moves `sb`, `ss`, `rb`, `rr`, `rrb`
and `rrr` are never used, and `Stacks` does not provide them.

## Tests

```
pip install .[test]
pytest
```