"""ANSI colour helpers for terminal log lines."""

from __future__ import annotations

from enum import Enum


class Color(str, Enum):
    """ANSI escape sequences used by the build log."""

    RESET = "\033[0m"
    RED = "\033[0;31m"
    GREEN = "\033[0;32m"
    YELLOW = "\033[0;33m"


def colorize(text: str, color: Color | str) -> str:
    """Wrap *text* in the escape sequence of *color*, followed by a reset."""
    code = Color(color)
    return f"{code.value}{text}{Color.RESET.value}"


def red(text: str) -> str:
    """Return *text* coloured red."""
    return colorize(text, Color.RED)


def green(text: str) -> str:
    """Return *text* coloured green."""
    return colorize(text, Color.GREEN)


def yellow(text: str) -> str:
    """Return *text* coloured yellow."""
    return colorize(text, Color.YELLOW)