"""StdinBuffer splits raw input into complete key sequences.

Input chunks read from a terminal can end in the middle of an escape
sequence. The buffer holds incomplete sequences back until more data
arrives (or until ``flush`` is called after an idle timeout) so partial
sequences are never misread as separate keypresses. Bracketed paste
content is collected and reported as a single paste.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

ESC = "\x1b"
BRACKETED_PASTE_START = "\x1b[200~"
BRACKETED_PASTE_END = "\x1b[201~"

COMPLETE = "complete"
INCOMPLETE = "incomplete"
NOT_ESCAPE = "not-escape"

# CSI: parameter bytes, intermediate bytes, one final byte
_CSI_RE = re.compile(r"\x1b\[[0-?]*[ -/]*[@-~]")
# SS3: optional modifier digit, then the key letter
_SS3_RE = re.compile(r"\x1bO\d?\D")
_OSC_TERMINATORS = ("\x07", ESC + "\\")


@dataclass(frozen=True)
class Chunk:
    """One complete unit of input: a key sequence or pasted text."""

    data: str
    paste: bool = False


def sequence_state(data: str) -> str:
    """Classify *data* as ``COMPLETE``, ``INCOMPLETE`` or ``NOT_ESCAPE``."""
    if not data.startswith(ESC):
        return NOT_ESCAPE
    introducer = data[1:2]
    if not introducer:
        return INCOMPLETE
    if introducer == "[":
        complete = _CSI_RE.fullmatch(data) is not None
    elif introducer == "]":
        complete = data.endswith(_OSC_TERMINATORS)
    elif introducer == "O":
        complete = _SS3_RE.fullmatch(data) is not None
    else:
        # ESC + one character is an Alt chord
        complete = len(data) == 2
    return COMPLETE if complete else INCOMPLETE


def split_sequences(text: str) -> tuple[list[str], str]:
    """Split *text* into complete sequences plus an incomplete tail."""
    sequences: list[str] = []
    i = 0
    while i < len(text):
        if text[i] != ESC:
            sequences.append(text[i])
            i += 1
            continue
        end = next(
            (j for j in range(i + 2, len(text) + 1) if sequence_state(text[i:j]) == COMPLETE),
            None,
        )
        if end is None:
            return sequences, text[i:]
        sequences.append(text[i:end])
        i = end
    return sequences, ""


class StdinBuffer:
    """Buffers raw input and hands out complete chunks.

    ``process`` returns the chunks completed by the new data; anything
    still incomplete stays pending until the next ``process`` or ``flush``.
    """

    def __init__(self) -> None:
        self._pending = ""
        self._paste: str | None = None

    @property
    def pending(self) -> bool:
        """True while part of an escape sequence is waiting for more data."""
        return bool(self._pending)

    @property
    def in_paste(self) -> bool:
        return self._paste is not None

    def process(self, data: str) -> list[Chunk]:
        """Feed input data and return the chunks it completes."""
        chunks: list[Chunk] = []
        text = self._pending + data
        self._pending = ""

        while text:
            if self._paste is not None:
                self._paste += text
                end = self._paste.find(BRACKETED_PASTE_END)
                if end < 0:
                    return chunks
                chunks.append(Chunk(self._paste[:end], paste=True))
                text = self._paste[end + len(BRACKETED_PASTE_END) :]
                self._paste = None
                continue

            head, marker, tail = text.partition(BRACKETED_PASTE_START)
            sequences, rest = split_sequences(head)
            chunks.extend(Chunk(seq) for seq in sequences)
            if not marker:
                self._pending = rest
                break
            self._paste = ""
            text = tail

        return chunks

    def flush(self) -> list[Chunk]:
        """Release pending data as-is, e.g. a lone ESC after a timeout."""
        if not self._pending:
            return []
        data, self._pending = self._pending, ""
        return [Chunk(data)]

    def clear(self) -> None:
        self._pending = ""
        self._paste = None
