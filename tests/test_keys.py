"""Tests for hintline.keys -- keyboard input parsing."""

from __future__ import annotations

import pytest

from hintline.keys import (
    FUNCTION_KEYS,
    Key,
    KeyEvent,
    LEGACY_KEY_SEQUENCES,
    MODIFIED_KEY_SEQUENCES,
    PASTE,
    parse_key,
)


class TestKeyConstants:
    """Key class exposes named constants for common keys."""

    def test_arrow_keys(self):
        assert Key.up == "up"
        assert Key.down == "down"
        assert Key.left == "left"
        assert Key.right == "right"

    def test_ctrl_helper(self):
        assert Key.ctrl("a") == "ctrl+a"

    def test_ctrl_helper_matches_parsed_keys(self):
        assert parse_key("\x02") == Key.ctrl("b")

    def test_function_keys(self):
        assert FUNCTION_KEYS == {f"f{n}" for n in range(1, 13)}


class TestParseKeySimple:
    @pytest.mark.parametrize(
        ("data", "expected"),
        [
            ("\r", "enter"),
            ("\n", "enter"),
            ("\t", "tab"),
            (" ", "space"),
            ("\x7f", "backspace"),
            ("\x08", "backspace"),
            ("\x1b", "escape"),
            ("\x01", "ctrl+a"),
            ("\x05", "ctrl+e"),
            ("a", "a"),
            ("A", "A"),
            ("-", "-"),
            ("é", "é"),
        ],
    )
    def test_single_byte_keys(self, data, expected):
        assert parse_key(data) == expected

    def test_empty_input(self):
        assert parse_key("") is None

    def test_unknown_sequence(self):
        assert parse_key("\x1b[99;99X") is None


class TestParseKeyLegacy:
    @pytest.mark.parametrize(
        ("data", "expected"),
        [
            ("\x1b[A", "up"),
            ("\x1b[B", "down"),
            ("\x1b[C", "right"),
            ("\x1b[D", "left"),
            ("\x1bOA", "up"),
            ("\x1b[H", "home"),
            ("\x1b[F", "end"),
            ("\x1b[1~", "home"),
            ("\x1b[4~", "end"),
            ("\x1b[3~", "delete"),
            ("\x1bOP", "f1"),
            ("\x1b[15~", "f5"),
            ("\x1b[24~", "f12"),
            ("\x1b[Z", "shift+tab"),
        ],
    )
    def test_unmodified_sequences(self, data, expected):
        assert parse_key(data) == expected

    @pytest.mark.parametrize(
        ("data", "expected"),
        [
            ("\x1b[1;5C", "ctrl+right"),
            ("\x1b[1;2A", "shift+up"),
            ("\x1b[1;3D", "alt+left"),
            ("\x1b[3;5~", "ctrl+delete"),
            ("\x1b[15;2~", "shift+f5"),
            ("\x1b[1;5P", "ctrl+f1"),
            ("\x1bO2Q", "shift+f2"),
        ],
    )
    def test_modified_sequences(self, data, expected):
        assert parse_key(data) == expected

    def test_every_table_entry_parses(self):
        for seq, key in {**LEGACY_KEY_SEQUENCES, **MODIFIED_KEY_SEQUENCES}.items():
            assert parse_key(seq) == key


class TestParseKeyAlt:
    def test_alt_letter(self):
        assert parse_key("\x1bb") == "alt+b"

    def test_alt_backspace(self):
        assert parse_key("\x1b\x7f") == "alt+backspace"

    def test_alt_enter(self):
        assert parse_key("\x1b\r") == "alt+enter"

    def test_ctrl_alt_letter(self):
        assert parse_key("\x1b\x01") == "ctrl+alt+a"


class TestKeyEvent:
    def test_char_for_printable(self):
        assert KeyEvent("a", "a").char == "a"

    def test_char_for_space(self):
        assert KeyEvent("space", " ").char == " "

    def test_no_char_for_sequences(self):
        assert KeyEvent("up", "\x1b[A").char is None
        assert KeyEvent("tab", "\t").char is None

    def test_from_data(self):
        assert KeyEvent.from_data("\x1b[B") == KeyEvent("down", "\x1b[B")

    def test_from_data_unknown(self):
        assert KeyEvent.from_data("\x1b[99;99X") is None

    def test_paste(self):
        event = KeyEvent.paste("hello")
        assert event.key == PASTE
        assert event.data == "hello"

    @pytest.mark.parametrize("key", ["f1", "f12", "ctrl+f3", "shift+f5"])
    def test_function_key(self, key):
        assert KeyEvent(key, "").is_function_key

    @pytest.mark.parametrize("key", ["f", "enter", "ctrl+f", "up"])
    def test_not_function_key(self, key):
        assert not KeyEvent(key, "").is_function_key
