"""Absolute values, copying only when something has to change."""

from __future__ import annotations

from collections.abc import Sequence


def abs_all(values: Sequence[int]) -> Sequence[int]:
    """Return the input itself if nothing is negative, else a new list of absolute values."""
    if all(value >= 0 for value in values):
        return values
    return [abs(value) for value in values]