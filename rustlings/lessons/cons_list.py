"""A recursive cons list."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass


@dataclass(frozen=True)
class Nil:
    """The end of a cons list."""

    def __iter__(self) -> Iterator[int]:
        return iter(())


@dataclass(frozen=True)
class Cons:
    """A value followed by the rest of the list."""

    head: int
    tail: Cons | Nil

    def __iter__(self) -> Iterator[int]:
        node: Cons | Nil = self
        while isinstance(node, Cons):
            yield node.head
            node = node.tail


def create_empty_list() -> Nil:
    """A list with no items."""
    return Nil()


def create_non_empty_list() -> Cons:
    """The list 1, 2, 3."""
    return Cons(1, Cons(2, Cons(3, Nil())))