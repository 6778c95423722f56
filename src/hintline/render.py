"""Painting the edited line and its inline suggestion."""

from __future__ import annotations

from itertools import groupby
from typing import Protocol

from hintline.suggestions import Suggestion
from hintline.terminal import Terminal
from hintline.viewport import Viewport

DEFAULT_PROMPT = "> "


class Writer(Protocol):
    """Output capability used by the painter."""

    @property
    def prompt(self) -> str: ...

    def write(self, text: str) -> None: ...

    def write_colored(self, text: str, color: str) -> None: ...

    def write_prompt(self) -> None: ...


class TerminalWriter:
    """``Writer`` that forwards to a ``Terminal``."""

    def __init__(self, terminal: Terminal, prompt: str = DEFAULT_PROMPT) -> None:
        self._terminal = terminal
        self._prompt = prompt

    @property
    def prompt(self) -> str:
        return self._prompt

    def write(self, text: str) -> None:
        if text:
            self._terminal.write(text)

    def write_colored(self, text: str, color: str) -> None:
        if text:
            self._terminal.write_colored(text, color)

    def write_prompt(self) -> None:
        self.write(self._prompt)


def suggestion_runs(suggestion: Suggestion, hint_color: str) -> list[tuple[str, str | None]]:
    """Split a suggestion value into ``(text, color)`` runs.

    Highlighted characters get ``None`` (normal foreground), the rest get
    *hint_color*.
    """
    highlighted = set(suggestion.highlight_indexes)
    colors = [None if i in highlighted else hint_color for i in range(len(suggestion.value))]
    runs: list[tuple[str, str | None]] = []
    pos = 0
    for color, group in groupby(colors):
        size = len(list(group))
        runs.append((suggestion.value[pos : pos + size], color))
        pos += size
    return runs


def write_suggestion(writer: Writer, suggestion: Suggestion, hint_color: str) -> int:
    """Write ``" (value)"`` with typed characters highlighted.

    Returns the number of cells written.
    """
    writer.write_colored(" (", hint_color)
    if not suggestion.highlight_indexes:
        writer.write_colored(suggestion.value, hint_color)
    else:
        for text, color in suggestion_runs(suggestion, hint_color):
            if color is None:
                writer.write(text)
            else:
                writer.write_colored(text, color)
    writer.write_colored(")", hint_color)
    return len(suggestion.value) + 3


class LinePainter:
    """Repaints the prompt line after every edit.

    Remembers how many cells were painted last time so the rows they
    covered can be cleared before the next paint.
    """

    def __init__(self, terminal: Terminal, writer: Writer, viewport: Viewport) -> None:
        self._terminal = terminal
        self._writer = writer
        self._viewport = viewport
        self._painted_length = 0

    @property
    def painted_length(self) -> int:
        return self._painted_length

    def begin(self) -> None:
        self._painted_length = 0

    def paint(self, buffer: str, suggestion: Suggestion | None, hint_color: str) -> None:
        if buffer and suggestion is not None and suggestion.value != buffer:
            self._draw(buffer, (suggestion, hint_color))
        else:
            self._draw(buffer, None)

    def finish(self, line: str) -> None:
        """Paint the committed *line* undecorated and move to the next row."""
        self._viewport.set_offset(len(line), len(line))
        self._draw(line, None)
        # A line filling its last row exactly already left the cursor below it
        last_row = self._viewport.rows_in_use(self._painted_length)[-1]
        if self._viewport.position().current_row == last_row:
            self._terminal.write("\r\n")

    def _draw(self, buffer: str, decoration: tuple[Suggestion, str] | None) -> None:
        self._clear()
        self._terminal.set_cursor(self._viewport.start_row, 0)
        self._writer.write_prompt()
        self._writer.write(buffer)

        painted = len(buffer)
        if decoration is not None:
            painted += write_suggestion(self._writer, *decoration)
        self._painted_length = painted

        height = self._terminal.rows
        self._viewport.fit(painted, height)
        pos = self._viewport.position()
        if pos.current_row >= height:
            # The cursor belongs below a bottom row that was filled exactly
            self._terminal.write("\r\n")
            self._viewport.scroll_up(pos.current_row - (height - 1))
            pos = self._viewport.position()
        self._terminal.set_cursor(pos.current_row, pos.current_col)

    def _clear(self) -> None:
        for row in self._viewport.rows_in_use(self._painted_length):
            self._terminal.set_cursor(row, 0)
            self._terminal.clear_line()
