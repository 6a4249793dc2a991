"""A person parsed from "name,age" text."""

from __future__ import annotations

import enum
import re
from dataclasses import dataclass

_USIZE_MAX = 2**64 - 1
_DIGITS = re.compile(r"\+?[0-9]+")


class ParsePersonErrorKind(enum.Enum):
    """Why a person could not be parsed."""

    EMPTY = "empty input string"
    BAD_LEN = "incorrect number of fields"
    NO_NAME = "empty name field"
    PARSE_INT = "invalid age"


class ParsePersonError(ValueError):
    """Parsing a person failed; `kind` says why."""

    def __init__(self, kind: ParsePersonErrorKind, detail: str | None = None):
        super().__init__(detail or kind.value)
        self.kind = kind
        self.detail = detail


def _parse_age(text: str) -> int:
    if not text:
        raise ParsePersonError(
            ParsePersonErrorKind.PARSE_INT, "cannot parse integer from empty string"
        )
    if not _DIGITS.fullmatch(text):
        raise ParsePersonError(ParsePersonErrorKind.PARSE_INT, "invalid digit found in string")
    value = int(text)
    if value > _USIZE_MAX:
        raise ParsePersonError(
            ParsePersonErrorKind.PARSE_INT, "number too large to fit in target type"
        )
    return value


@dataclass(frozen=True)
class Person:
    """A name and an age."""

    name: str
    age: int

    @classmethod
    def default(cls) -> Person:
        """The fallback person: John, 30."""
        return cls(name="John", age=30)

    @classmethod
    def parse(cls, s: str) -> Person:
        """Parse "name,age"; raise ParsePersonError on bad input."""
        if not s:
            raise ParsePersonError(ParsePersonErrorKind.EMPTY)
        fields = s.split(",")
        name = fields[0]
        if not name:
            raise ParsePersonError(ParsePersonErrorKind.NO_NAME)
        if len(fields) < 2:
            raise ParsePersonError(ParsePersonErrorKind.BAD_LEN)
        age = _parse_age(fields[1])
        if len(fields) > 2:
            raise ParsePersonError(ParsePersonErrorKind.BAD_LEN)
        return cls(name=name, age=age)

    @classmethod
    def from_text(cls, s: str) -> Person:
        """Parse "name,age", falling back to the default person on bad input."""
        try:
            return cls.parse(s)
        except ParsePersonError:
            return cls.default()