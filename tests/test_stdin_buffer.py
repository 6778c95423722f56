"""Tests for hintline.stdin_buffer.StdinBuffer."""

from __future__ import annotations

import pytest

from hintline.stdin_buffer import (
    BRACKETED_PASTE_END,
    BRACKETED_PASTE_START,
    ESC,
    Chunk,
    StdinBuffer,
    sequence_state,
    split_sequences,
)


def data_of(chunks: list[Chunk]) -> list[str]:
    return [c.data for c in chunks]


# ---------------------------------------------------------------------------
# Sequence completeness
# ---------------------------------------------------------------------------


class TestSequenceState:
    @pytest.mark.parametrize(
        "seq",
        ["\x1b[A", "\x1b[3~", "\x1b[1;5C", "\x1bOA", "\x1bO5P", "\x1bb", "\x1b[12;40R", "\x1b]0;t\x07"],
    )
    def test_complete(self, seq: str) -> None:
        assert sequence_state(seq) == "complete"

    @pytest.mark.parametrize("seq", [ESC, "\x1b[", "\x1b[1;5", "\x1bO", "\x1bO5", "\x1b]0;title"])
    def test_incomplete(self, seq: str) -> None:
        assert sequence_state(seq) == "incomplete"

    def test_not_escape(self) -> None:
        assert sequence_state("a") == "not-escape"


class TestSplitSequences:
    def test_plain_text_splits_per_character(self) -> None:
        assert split_sequences("abc") == (["a", "b", "c"], "")

    def test_mixed_text_and_sequences(self) -> None:
        assert split_sequences("a\x1b[Ab") == (["a", "\x1b[A", "b"], "")

    def test_trailing_partial_sequence_is_remainder(self) -> None:
        assert split_sequences("a\x1b[1;") == (["a"], "\x1b[1;")


# ---------------------------------------------------------------------------
# StdinBuffer
# ---------------------------------------------------------------------------


class TestStdinBuffer:
    def test_initial_state(self) -> None:
        buf = StdinBuffer()
        assert buf.pending is False
        assert buf.in_paste is False

    def test_complete_input_is_returned(self) -> None:
        buf = StdinBuffer()
        assert data_of(buf.process("hi\x1b[D")) == ["h", "i", "\x1b[D"]
        assert buf.pending is False

    def test_partial_sequence_waits_for_more(self) -> None:
        buf = StdinBuffer()
        assert buf.process("\x1b[") == []
        assert buf.pending is True
        assert data_of(buf.process("3~")) == ["\x1b[3~"]
        assert buf.pending is False

    def test_flush_releases_lone_escape(self) -> None:
        buf = StdinBuffer()
        buf.process(ESC)
        assert buf.flush() == [Chunk(ESC)]
        assert buf.flush() == []

    def test_paste_in_one_chunk(self) -> None:
        buf = StdinBuffer()
        chunks = buf.process(f"a{BRACKETED_PASTE_START}hello world{BRACKETED_PASTE_END}b")
        assert chunks == [Chunk("a"), Chunk("hello world", paste=True), Chunk("b")]

    def test_paste_across_chunks(self) -> None:
        buf = StdinBuffer()
        assert buf.process(f"{BRACKETED_PASTE_START}hel") == []
        assert buf.in_paste is True
        assert buf.process("lo\x1b[A") == []
        assert buf.process(BRACKETED_PASTE_END) == [Chunk("hello\x1b[A", paste=True)]
        assert buf.in_paste is False

    def test_clear_drops_everything(self) -> None:
        buf = StdinBuffer()
        buf.process(f"{BRACKETED_PASTE_START}abc")
        buf.clear()
        assert buf.in_paste is False
        assert data_of(buf.process("x")) == ["x"]
