"""Coloured status lines for the terminal."""

from __future__ import annotations

import os

from rich.console import Console
from rich.text import Text


def _console() -> Console:
    return Console(highlight=False, soft_wrap=True)


def _no_emoji() -> bool:
    return "NO_EMOJI" in os.environ


def _emit(symbol: str, message: str, colour: str) -> str:
    line = f"{symbol} {message}"
    _console().print(Text(line, style=colour))
    return line


def warn(message: str) -> str:
    """Print a red warning line and return its plain text."""
    return _emit("!" if _no_emoji() else "⚠️ ", message, "red")


def success(message: str) -> str:
    """Print a green success line and return its plain text."""
    return _emit("✓" if _no_emoji() else "✅", message, "green")