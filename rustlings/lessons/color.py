"""RGB colours built from three integers, with range checking."""

from __future__ import annotations

import enum
from collections.abc import Sequence
from dataclasses import dataclass


class IntoColorErrorKind(enum.Enum):
    """Why a colour could not be built."""

    BAD_LEN = "incorrect number of components"
    INT_CONVERSION = "component outside 0..=255"


class IntoColorError(ValueError):
    """Building a colour failed; `kind` says why."""

    def __init__(self, kind: IntoColorErrorKind):
        super().__init__(kind.value)
        self.kind = kind


@dataclass(frozen=True)
class Color:
    """A colour with 8-bit red, green and blue components."""

    red: int
    green: int
    blue: int

    @classmethod
    def try_from(cls, value: Sequence[int]) -> Color:
        """Build a colour from three integers in 0..=255."""
        if len(value) != 3:
            raise IntoColorError(IntoColorErrorKind.BAD_LEN)
        for component in value:
            if not isinstance(component, int) or isinstance(component, bool):
                raise TypeError(f"colour components must be integers, not {component!r}")
        if any(not 0 <= component <= 255 for component in value):
            raise IntoColorError(IntoColorErrorKind.INT_CONVERSION)
        red, green, blue = value
        return cls(red=red, green=green, blue=blue)