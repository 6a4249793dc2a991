"""A fixed array next to a growable list, and doubling their items."""

from __future__ import annotations


def array_and_vec() -> tuple[tuple[int, ...], list[int]]:
    """The same four numbers as a fixed tuple and as a list."""
    return (10, 20, 30, 40), [10, 20, 30, 40]


def vec_loop(v: list[int]) -> list[int]:
    """Double every item of the list in place and return it."""
    v[:] = [item * 2 for item in v]
    return v


def vec_map(v: list[int]) -> list[int]:
    """A new list with every item doubled."""
    return [item * 2 for item in v]