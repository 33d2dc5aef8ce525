"""Coloured status lines printed to the terminal."""

from __future__ import annotations

import os

from rich.console import Console
from rich.text import Text


def _emit(symbol: str, fallback: str, message: str, colour: str) -> str:
    marker = fallback if "NO_EMOJI" in os.environ else symbol
    line = f"{marker} {message}"
    console = Console(highlight=False, soft_wrap=True, emoji=False)
    console.print(Text.assemble((marker, colour), " ", (message, colour)))
    return line


def warn(message: str) -> str:
    """Print a red warning line and return its plain text."""
    return _emit("⚠️ ", "!", message, "red")


def success(message: str) -> str:
    """Print a green success line and return its plain text."""
    return _emit("✅", "✓", message, "green")