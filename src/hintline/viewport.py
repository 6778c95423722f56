"""Cursor/viewport models mapping a buffer offset onto terminal cells.

The logical offset is the source of truth; row and column are derived from
it together with the prompt length and terminal width. Two strategies are
provided: ``WrappingViewport`` lets the line wrap onto following rows,
``SingleRowViewport`` keeps everything on the start row.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol


@dataclass(frozen=True)
class CursorPosition:
    start_row: int
    current_row: int
    current_col: int
    terminal_width: int
    logical_offset: int


class Viewport(Protocol):
    """Interface shared by the viewport strategies."""

    @property
    def offset(self) -> int: ...

    @property
    def start_row(self) -> int: ...

    def reset(self, start_row: int, width: int, prompt_length: int) -> None: ...

    def increment(self, length: int) -> None: ...

    def decrement(self) -> None: ...

    def set_offset(self, offset: int, length: int) -> None: ...

    def position(self) -> CursorPosition: ...

    def rows_in_use(self, painted_length: int) -> range: ...

    def fit(self, painted_length: int, height: int) -> None: ...

    def scroll_up(self, rows: int) -> None: ...


class _BaseViewport:
    def __init__(self) -> None:
        self._start_row: int = 0
        self._width: int = 80
        self._prompt_length: int = 0
        self._offset: int = 0

    @property
    def offset(self) -> int:
        return self._offset

    @property
    def start_row(self) -> int:
        return self._start_row

    @property
    def width(self) -> int:
        return self._width

    def reset(self, start_row: int, width: int, prompt_length: int) -> None:
        self._start_row = max(0, start_row)
        self._width = max(1, width)
        self._prompt_length = prompt_length
        self._offset = 0

    def increment(self, length: int) -> None:
        self._offset = min(self._offset + 1, max(0, length))

    def decrement(self) -> None:
        self._offset = max(self._offset - 1, 0)

    def set_offset(self, offset: int, length: int) -> None:
        self._offset = max(0, min(offset, length))

    def position(self) -> CursorPosition:
        row, col = self._cell(self._offset)
        return CursorPosition(
            start_row=self._start_row,
            current_row=row,
            current_col=col,
            terminal_width=self._width,
            logical_offset=self._offset,
        )

    def _cell(self, offset: int) -> tuple[int, int]:
        raise NotImplementedError

    def rows_in_use(self, painted_length: int) -> range:
        raise NotImplementedError

    def fit(self, painted_length: int, height: int) -> None:
        """Shift the start row up if painting *painted_length* cells scrolled."""
        overflow = self.rows_in_use(painted_length)[-1] - (height - 1)
        if overflow > 0:
            self.scroll_up(overflow)

    def scroll_up(self, rows: int) -> None:
        """Follow the terminal scrolling *rows* lines."""
        self._start_row = max(0, self._start_row - rows)


class WrappingViewport(_BaseViewport):
    """Multi-row mapping: the line wraps at the terminal width."""

    def _cell(self, offset: int) -> tuple[int, int]:
        cells = self._prompt_length + offset
        return self._start_row + cells // self._width, cells % self._width

    def rows_in_use(self, painted_length: int) -> range:
        # Only rows holding a painted cell; filling a row exactly does not wrap
        last_cell = max(0, self._prompt_length + painted_length - 1)
        last = self._start_row + last_cell // self._width
        return range(self._start_row, last + 1)


class SingleRowViewport(_BaseViewport):
    """Everything stays on the start row; the column stops at the last cell."""

    def _cell(self, offset: int) -> tuple[int, int]:
        return self._start_row, min(self._prompt_length + offset, self._width - 1)

    def rows_in_use(self, painted_length: int) -> range:
        return range(self._start_row, self._start_row + 1)
