"""Apple prices, a string transformer and report cards."""

from __future__ import annotations

import enum
import math
from collections.abc import Iterable
from dataclasses import dataclass
from typing import Any


def calculate_price_of_apples(apples: int) -> int:
    """Two per apple, or one per apple when more than 40 are bought."""
    return apples if apples > 40 else apples * 2


class CommandKind(enum.Enum):
    """What the transformer does to a string."""

    UPPERCASE = enum.auto()
    TRIM = enum.auto()
    APPEND = enum.auto()


@dataclass(frozen=True)
class Command:
    """A transformation; `count` is how often "bar" is appended."""

    kind: CommandKind
    count: int = 0

    def __post_init__(self) -> None:
        if self.count < 0:
            raise ValueError("count must not be negative")


def _apply(text: str, command: Command) -> str:
    match command.kind:
        case CommandKind.UPPERCASE:
            return text.upper()
        case CommandKind.TRIM:
            return text.strip()
        case CommandKind.APPEND:
            return text + "bar" * command.count
    raise ValueError(f"unknown command: {command!r}")


def transformer(input: Iterable[tuple[str, Command]]) -> list[str]:
    """Apply each command to its string, keeping the order."""
    return [_apply(text, command) for text, command in input]


def _display(value: Any) -> str:
    if isinstance(value, float) and math.isfinite(value) and value.is_integer():
        return str(int(value))
    return str(value)


@dataclass(frozen=True)
class ReportCard:
    """A student's grade, numeric or alphabetical."""

    grade: Any
    student_name: str
    student_age: int

    def __post_init__(self) -> None:
        if not 0 <= self.student_age <= 255:
            raise ValueError("student_age must be in 0..=255")

    def render(self) -> str:
        return (
            f"{self.student_name} ({self.student_age}) - "
            f"achieved a grade of {_display(self.grade)}"
        )