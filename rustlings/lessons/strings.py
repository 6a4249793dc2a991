"""Trimming, composing and replacing text."""

from __future__ import annotations


def trim_me(input: str) -> str:
    """Remove whitespace from both ends."""
    return input.strip()


def compose_me(input: str) -> str:
    """Append " world!"."""
    return f"{input} world!"


def replace_me(input: str) -> str:
    """Replace every "cars" with "balloons"."""
    return input.replace("cars", "balloons")