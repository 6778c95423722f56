"""Exceptions raised by hintline.

Only configuration problems are raised here. Cursor and history positions
are clamped rather than reported, and terminal failures (``OSError``,
``EOFError``, ``KeyboardInterrupt``) propagate unchanged.
"""

from __future__ import annotations


class HintlineError(Exception):
    """Base class for hintline errors."""


class InvalidPatternError(HintlineError, ValueError):
    """The input validation pattern is not a valid regular expression."""

    def __init__(self, pattern: str, reason: str) -> None:
        super().__init__(f"Invalid input pattern {pattern!r}: {reason}")
        self.pattern = pattern
        self.reason = reason


class UnknownColorError(HintlineError, ValueError):
    """The color name is not part of the terminal palette."""

    def __init__(self, color: str) -> None:
        super().__init__(f"Unknown color: {color!r}")
        self.color = color
