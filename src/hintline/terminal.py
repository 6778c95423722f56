"""Terminal abstraction for raw-mode, blocking key input.

Provides a ``Terminal`` protocol and a concrete ``ProcessTerminal``
implementation that manages raw mode, bracketed paste, cursor placement
and colored output via ANSI escape sequences.
"""

from __future__ import annotations

import os
import re
import select
import sys
import termios
import tty
from collections import deque
from typing import Protocol

from hintline.errors import UnknownColorError
from hintline.keys import KeyEvent
from hintline.stdin_buffer import Chunk, StdinBuffer

# ---------------------------------------------------------------------------
# ANSI escape constants
# ---------------------------------------------------------------------------

_BRACKETED_PASTE_ENABLE = "\x1b[?2004h"
_BRACKETED_PASTE_DISABLE = "\x1b[?2004l"

_CLEAR_LINE = "\x1b[2K"
_SET_CURSOR_FMT = "\x1b[{};{}H"
_QUERY_CURSOR = "\x1b[6n"
_DEFAULT_FOREGROUND = "\x1b[39m"

_CURSOR_REPORT_RE = re.compile(r"^\x1b\[(\d+);(\d+)R$")

_CTRL_C = "\x03"
_CTRL_D = "\x04"

# Seconds to wait for the rest of an escape sequence
_ESCAPE_TIMEOUT = 0.01
# Seconds to wait for a cursor position report
_REPORT_TIMEOUT = 0.5

# ---------------------------------------------------------------------------
# Colors
# ---------------------------------------------------------------------------

COLORS: dict[str, int] = {
    "black": 30,
    "red": 31,
    "green": 32,
    "yellow": 33,
    "blue": 34,
    "magenta": 35,
    "cyan": 36,
    "white": 37,
    "gray": 90,
    "dark_gray": 90,
    "bright_red": 91,
    "bright_green": 92,
    "bright_yellow": 93,
    "bright_blue": 94,
    "bright_magenta": 95,
    "bright_cyan": 96,
    "bright_white": 97,
}


def color_code(color: str) -> int:
    """Return the SGR foreground code for a color name."""
    try:
        return COLORS[color.lower()]
    except KeyError:
        raise UnknownColorError(color) from None


def colorize(text: str, color: str) -> str:
    """Wrap *text* in *color*, restoring the default foreground after."""
    return f"\x1b[{color_code(color)}m{text}{_DEFAULT_FOREGROUND}"


# ---------------------------------------------------------------------------
# Terminal protocol
# ---------------------------------------------------------------------------


class Terminal(Protocol):
    """Interface for terminal I/O operations.

    Rows and columns are 0-based.
    """

    def start(self) -> None: ...

    def stop(self) -> None: ...

    def read_key(self) -> KeyEvent: ...

    @property
    def columns(self) -> int: ...

    @property
    def rows(self) -> int: ...

    def get_cursor(self) -> tuple[int, int]: ...

    def set_cursor(self, row: int, col: int) -> None: ...

    def clear_line(self) -> None: ...

    def write(self, data: str) -> None: ...

    def write_colored(self, data: str, color: str) -> None: ...


# ---------------------------------------------------------------------------
# ProcessTerminal implementation
# ---------------------------------------------------------------------------


class ProcessTerminal:
    """Concrete terminal implementation backed by ``sys.stdin``/``sys.stdout``.

    ``start`` switches stdin to raw mode and enables bracketed paste;
    ``stop`` restores the saved terminal attributes. ``read_key`` blocks
    until a complete key is available, raising ``EOFError`` on Ctrl+D or
    a closed stdin and ``KeyboardInterrupt`` on Ctrl+C.
    """

    def __init__(self) -> None:
        self._stdin_buffer = StdinBuffer()
        self._pending: deque[KeyEvent] = deque()
        self._original_termios: list | None = None

    # -- properties ---------------------------------------------------------

    @property
    def columns(self) -> int:
        try:
            return os.get_terminal_size(sys.stdout.fileno()).columns
        except (ValueError, OSError):
            return 80

    @property
    def rows(self) -> int:
        try:
            return os.get_terminal_size(sys.stdout.fileno()).lines
        except (ValueError, OSError):
            return 24

    # -- start / stop -------------------------------------------------------

    def start(self) -> None:
        """Enable raw mode and bracketed paste."""
        fd = sys.stdin.fileno()
        self._original_termios = termios.tcgetattr(fd)
        tty.setraw(fd)
        self._raw_write(_BRACKETED_PASTE_ENABLE)

    def stop(self) -> None:
        """Restore terminal state."""
        self._raw_write(_BRACKETED_PASTE_DISABLE)
        self._stdin_buffer.clear()
        if self._original_termios is not None:
            termios.tcsetattr(sys.stdin.fileno(), termios.TCSADRAIN, self._original_termios)
            self._original_termios = None

    # -- input --------------------------------------------------------------

    def read_key(self) -> KeyEvent:
        while not self._pending:
            for chunk in self._read_chunks():
                self._enqueue(chunk)
        return self._pending.popleft()

    def _enqueue(self, chunk: Chunk) -> None:
        if chunk.paste:
            self._pending.append(KeyEvent.paste(chunk.data))
            return
        if chunk.data == _CTRL_C:
            raise KeyboardInterrupt
        if chunk.data == _CTRL_D:
            raise EOFError
        event = KeyEvent.from_data(chunk.data)
        if event is not None:
            self._pending.append(event)

    def _read_chunks(self) -> list[Chunk]:
        fd = sys.stdin.fileno()
        raw = os.read(fd, 4096)
        if not raw:
            raise EOFError
        chunks = self._stdin_buffer.process(raw.decode("utf-8", errors="replace"))
        # A lone ESC (or a torn sequence) is released once input goes idle
        while self._stdin_buffer.pending and not self._stdin_buffer.in_paste:
            ready, _, _ = select.select([fd], [], [], _ESCAPE_TIMEOUT)
            if not ready:
                chunks.extend(self._stdin_buffer.flush())
                break
            more = os.read(fd, 4096)
            if not more:
                raise EOFError
            chunks.extend(self._stdin_buffer.process(more.decode("utf-8", errors="replace")))
        return chunks

    # -- cursor / screen manipulation --------------------------------------

    def get_cursor(self) -> tuple[int, int]:
        """Query the cursor position with a device status report."""
        self._raw_write(_QUERY_CURSOR)
        fd = sys.stdin.fileno()
        report: tuple[int, int] | None = None
        while report is None:
            ready, _, _ = select.select([fd], [], [], _REPORT_TIMEOUT)
            if not ready:
                return 0, 0
            raw = os.read(fd, 4096)
            if not raw:
                raise EOFError
            for chunk in self._stdin_buffer.process(raw.decode("utf-8", errors="replace")):
                match = _CURSOR_REPORT_RE.match(chunk.data)
                if match and not chunk.paste and report is None:
                    report = int(match.group(1)) - 1, int(match.group(2)) - 1
                else:
                    # Keys typed around the report
                    self._enqueue(chunk)
        return report

    def set_cursor(self, row: int, col: int) -> None:
        self._raw_write(_SET_CURSOR_FMT.format(row + 1, col + 1))

    def clear_line(self) -> None:
        self._raw_write(_CLEAR_LINE)

    # -- output -------------------------------------------------------------

    def write(self, data: str) -> None:
        self._raw_write(data)

    def write_colored(self, data: str, color: str) -> None:
        self._raw_write(colorize(data, color))

    def _raw_write(self, data: str) -> None:
        sys.stdout.write(data)
        sys.stdout.flush()
