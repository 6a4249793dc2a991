"""Fruit baskets kept as mappings from fruit to count."""

from __future__ import annotations

import enum


class Fruit(enum.Enum):
    """The kinds of fruit a basket can hold."""

    APPLE = "apple"
    BANANA = "banana"
    MANGO = "mango"
    LYCHEE = "lychee"
    PINEAPPLE = "pineapple"


def new_fruit_basket() -> dict[str, int]:
    """A basket of at least three kinds and at least five pieces of fruit."""
    return {"banana": 2, "apple": 3, "ratio": 3}


def fill_fruit_basket(basket: dict[Fruit, int]) -> None:
    """Add one of every missing kind of fruit; counts already present stay as they are."""
    for fruit in Fruit:
        basket.setdefault(fruit, 1)