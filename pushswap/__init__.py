"""Sort distinct integers on two stacks with a limited set of moves, plus small text and byte helpers."""

__version__ = "0.1.0"