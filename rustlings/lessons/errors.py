"""Name tags, token costs and positive non-zero integers."""

from __future__ import annotations

import enum
import re
from dataclasses import dataclass

_INTEGER = re.compile(r"[+-]?[0-9]+")
_COST_PER_ITEM = 5
_PROCESSING_FEE = 1


def _parse_int(text: str, bits: int) -> int:
    """Parse a signed integer of the given width, as strictly as a typed parser."""
    if not text:
        raise ValueError("cannot parse integer from empty string")
    if not _INTEGER.fullmatch(text):
        raise ValueError("invalid digit found in string")
    value = int(text)
    if value > 2 ** (bits - 1) - 1:
        raise ValueError("number too large to fit in target type")
    if value < -(2 ** (bits - 1)):
        raise ValueError("number too small to fit in target type")
    return value


def generate_nametag_text(name: str) -> str:
    """Text for a name tag; raise ValueError for an empty name."""
    if not name:
        raise ValueError("`name` was empty; it must be nonempty.")
    return f"Hi! My name is {name}"


def total_cost(item_quantity: str) -> int:
    """Tokens needed for the typed quantity: 5 per item plus a fee of 1."""
    quantity = _parse_int(item_quantity, 32)
    cost = quantity * _COST_PER_ITEM + _PROCESSING_FEE
    if not -(2**31) <= cost <= 2**31 - 1:
        raise OverflowError("total cost does not fit in a 32-bit integer")
    return cost


def spend_tokens(tokens: int, item_quantity: str) -> int:
    """Buy the typed quantity if affordable and return the tokens left."""
    cost = total_cost(item_quantity)
    if cost > tokens:
        print("You can't afford that many!")
        return tokens
    tokens -= cost
    print(f"You now have {tokens} tokens.")
    return tokens


class CreationErrorKind(enum.Enum):
    """Why a positive non-zero integer could not be made."""

    NEGATIVE = "number is negative"
    ZERO = "number is zero"


class CreationError(ValueError):
    """The value is not positive; `kind` says how."""

    def __init__(self, kind: CreationErrorKind):
        super().__init__(kind.value)
        self.kind = kind


class ParsePosNonzeroError(ValueError):
    """Parsing failed; `error` is the parse error or the CreationError."""

    def __init__(self, error: ValueError):
        super().__init__(str(error))
        self.error = error


@dataclass(frozen=True)
class PositiveNonzeroInteger:
    """An integer greater than zero."""

    value: int

    @classmethod
    def new(cls, value: int) -> PositiveNonzeroInteger:
        """Wrap a value; raise CreationError if it is zero or negative."""
        if value == 0:
            raise CreationError(CreationErrorKind.ZERO)
        if value < 0:
            raise CreationError(CreationErrorKind.NEGATIVE)
        return cls(value)


def parse_pos_nonzero(s: str) -> PositiveNonzeroInteger:
    """Parse text into a positive non-zero integer; raise ParsePosNonzeroError."""
    try:
        value = _parse_int(s, 64)
    except ValueError as error:
        raise ParsePosNonzeroError(error) from error
    try:
        return PositiveNonzeroInteger.new(value)
    except CreationError as error:
        raise ParsePosNonzeroError(error) from error