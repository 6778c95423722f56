"""Hinted line input: a single-line editor with inline suggestions.

``HintedInput.read_line`` reads keys from a terminal until Enter, keeping an
edit buffer, a cursor mapped onto the terminal by a viewport strategy, the
suggestion list for what has been typed, and the recall position in the
history of committed lines. The line is repainted after every key.
"""

from __future__ import annotations

import logging
import re
from typing import Iterable

from hintline.config import HintlineConfig
from hintline.errors import InvalidPatternError
from hintline.history import History
from hintline.keybindings import EditorKeybindingsManager
from hintline.keys import PASTE, Key, KeyEvent
from hintline.render import LinePainter, TerminalWriter, Writer
from hintline.suggestions import HintCorpus, Suggestion, SuggestionList
from hintline.terminal import ProcessTerminal, Terminal, color_code
from hintline.viewport import SingleRowViewport, Viewport, WrappingViewport

logger = logging.getLogger(__name__)


def compile_input_pattern(pattern: str | re.Pattern[str]) -> re.Pattern[str]:
    """Compile a per-character validation pattern."""
    if isinstance(pattern, re.Pattern):
        return pattern
    try:
        return re.compile(pattern)
    except re.error as e:
        raise InvalidPatternError(pattern, str(e)) from e


class HintedInput:
    """Reads lines with autocomplete hints and history recall.

    Args:
        hints: The hint corpus, fixed for the life of the instance.
        terminal: Terminal to read keys from and paint on. Defaults to a
            ``ProcessTerminal`` on stdin/stdout.
        config: Prompt, colors, validation pattern and keybindings.
        viewport: Cursor mapping strategy. Defaults to ``WrappingViewport``,
            or ``SingleRowViewport`` when ``config.wrap`` is false.
        writer: Output capability used for painting. Defaults to a
            ``TerminalWriter`` over *terminal*.
    """

    def __init__(
        self,
        hints: Iterable[str],
        terminal: Terminal | None = None,
        *,
        config: HintlineConfig | None = None,
        viewport: Viewport | None = None,
        writer: Writer | None = None,
    ) -> None:
        self._config = config or HintlineConfig()
        self._corpus = HintCorpus(hints)
        self._terminal: Terminal = terminal if terminal is not None else ProcessTerminal()
        if viewport is None:
            viewport = WrappingViewport() if self._config.wrap else SingleRowViewport()
        self._viewport = viewport
        self._writer = writer or TerminalWriter(self._terminal, self._config.prompt)
        self._painter = LinePainter(self._terminal, self._writer, self._viewport)
        self._keybindings = EditorKeybindingsManager(self._config.keybindings)
        self._history = History()

        # Per-line state, reset by _begin()
        self._buffer = ""
        self._suggestions = SuggestionList()
        self._suggestion: Suggestion | None = None
        self._user_typed = False
        self._pattern: re.Pattern[str] = re.compile(".*")
        self._hint_color = self._config.hint_color

    # -- public -------------------------------------------------------------

    @property
    def hints(self) -> tuple[str, ...]:
        return self._corpus.hints

    @property
    def history(self) -> History:
        return self._history

    @property
    def buffer(self) -> str:
        return self._buffer

    @property
    def cursor(self) -> int:
        return self._viewport.offset

    @property
    def suggestion(self) -> Suggestion | None:
        return self._suggestion

    def read_line(
        self,
        input_pattern: str | re.Pattern[str] | None = None,
        hint_color: str | None = None,
    ) -> str:
        """Read one line, returning the committed text.

        *input_pattern* is tested against each typed character; characters
        that fail it are not inserted. Raises ``InvalidPatternError`` or
        ``UnknownColorError`` before touching the terminal. ``EOFError`` and
        ``KeyboardInterrupt`` from the terminal propagate.
        """
        pattern = compile_input_pattern(
            input_pattern if input_pattern is not None else self._config.input_pattern
        )
        color = hint_color or self._config.hint_color
        color_code(color)

        self._terminal.start()
        try:
            self._begin(pattern, color)
            while True:
                event = self._terminal.read_key()
                if self._keybindings.matches(event.key, "submit"):
                    break
                self.handle_key(event)
                self._render()
            line = self._committed_value()
            self._painter.finish(line)
        finally:
            self._terminal.stop()

        self._history.record(line)
        logger.debug("Committed line %r", line)
        return line

    # -- key handling -------------------------------------------------------

    def handle_key(self, event: KeyEvent) -> None:
        """Apply one key to the edit state without repainting."""
        if event.key == PASTE:
            self._insert_text(event.data)
            return

        action = self._keybindings.action_for(event.key)

        if action == "deleteCharBackward":
            self._handle_backspace()
        elif action == "deleteCharForward":
            self._handle_forward_delete()
        elif action == "acceptSuggestion":
            self._accept_suggestion()
        elif action == "cursorUp":
            self._handle_up()
        elif action == "cursorDown":
            self._handle_down()
        elif action == "cursorLeft":
            self._viewport.decrement()
        elif action == "cursorRight":
            self._viewport.increment(len(self._buffer))
        elif action == "cursorLineStart":
            self._viewport.set_offset(0, len(self._buffer))
        elif action == "cursorLineEnd":
            self._viewport.set_offset(len(self._buffer), len(self._buffer))
        elif event.key == Key.space:
            if self._suggestion is not None:
                self._accept_suggestion()
            else:
                self._insert_character(" ")
        elif event.is_function_key:
            logger.debug("Ignoring function key %s", event.key)
        elif event.char is not None:
            self._insert_character(event.char)
        else:
            logger.debug("Ignoring unbound key %s", event.key)

    def _insert_character(self, char: str) -> None:
        if not self._accepts(char):
            return
        offset = self._viewport.offset
        self._buffer = self._buffer[:offset] + char + self._buffer[offset:]
        self._viewport.increment(len(self._buffer))
        self._buffer_changed()

    def _insert_text(self, text: str) -> None:
        accepted = "".join(
            ch for ch in text if ch not in "\r\n" and ch.isprintable() and self._accepts(ch)
        )
        if not accepted:
            return
        offset = self._viewport.offset
        self._buffer = self._buffer[:offset] + accepted + self._buffer[offset:]
        self._viewport.set_offset(offset + len(accepted), len(self._buffer))
        self._buffer_changed()

    def _handle_backspace(self) -> None:
        offset = self._viewport.offset
        if offset > 0:
            self._buffer = self._buffer[: offset - 1] + self._buffer[offset:]
            self._viewport.decrement()
        self._buffer_changed()

    def _handle_forward_delete(self) -> None:
        offset = self._viewport.offset
        if offset < len(self._buffer):
            self._buffer = self._buffer[:offset] + self._buffer[offset + 1 :]
        self._buffer_changed()

    def _accept_suggestion(self) -> None:
        if self._suggestion is None:
            return
        self._buffer = self._suggestion.value + " "
        self._viewport.set_offset(len(self._buffer), len(self._buffer))
        self._buffer_changed()

    def _handle_up(self) -> None:
        if self._user_typed:
            self._suggestion = self._suggestions.previous()
        else:
            self._recall(self._history.previous())

    def _handle_down(self) -> None:
        if self._user_typed:
            self._suggestion = self._suggestions.next()
        else:
            self._recall(self._history.next())

    def _recall(self, line: str) -> None:
        # A recalled line commits as-is, so no suggestion may shadow it
        self._buffer = line
        self._viewport.set_offset(len(line), len(line))
        self._suggestions = SuggestionList()
        self._suggestion = None

    def _buffer_changed(self) -> None:
        self._suggestions = self._corpus.suggest(self._buffer)
        self._suggestion = self._suggestions.first()
        self._user_typed = bool(self._buffer.strip())

    def _accepts(self, char: str) -> bool:
        return self._pattern.search(char) is not None

    # -- line lifecycle -----------------------------------------------------

    def _begin(self, pattern: re.Pattern[str], hint_color: str) -> None:
        self._pattern = pattern
        self._hint_color = hint_color
        self._buffer = ""
        self._suggestions = SuggestionList()
        self._suggestion = None
        self._user_typed = False

        row, _ = self._terminal.get_cursor()
        self._viewport.reset(row, self._terminal.columns, len(self._writer.prompt))
        self._painter.begin()
        self._render()

    def _committed_value(self) -> str:
        if self._suggestion is not None and self._suggestion.value != self._buffer:
            return self._suggestion.value
        return self._buffer.rstrip(" ")

    def _render(self) -> None:
        self._painter.paint(self._buffer, self._suggestion, self._hint_color)
