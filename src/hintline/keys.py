"""Key identification for raw terminal input.

Turns one complete input sequence (as split by ``StdinBuffer``) into a key
identifier such as ``"a"``, ``"enter"``, ``"ctrl+a"`` or ``"shift+f5"``.
Legacy xterm/VT sequences are understood; anything else is ``None``.
"""

from __future__ import annotations

from dataclasses import dataclass

# ---------------------------------------------------------------------------
# Type alias
# ---------------------------------------------------------------------------

KeyId = str

PASTE: KeyId = "paste"


# ---------------------------------------------------------------------------
# Key helper object
# ---------------------------------------------------------------------------


class Key:
    """Named key constants and modifier combinators."""

    enter = "enter"
    tab = "tab"
    space = "space"
    backspace = "backspace"
    delete = "delete"
    home = "home"
    end = "end"
    up = "up"
    down = "down"
    left = "left"
    right = "right"

    @staticmethod
    def ctrl(key: str) -> str:
        return f"ctrl+{key}"


FUNCTION_KEYS: frozenset[str] = frozenset(f"f{n}" for n in range(1, 13))


# ---------------------------------------------------------------------------
# Legacy escape sequences
# ---------------------------------------------------------------------------

LEGACY_KEY_SEQUENCES: dict[str, str] = {
    "\x1b[A": "up",
    "\x1b[B": "down",
    "\x1b[C": "right",
    "\x1b[D": "left",
    "\x1b[H": "home",
    "\x1b[F": "end",
    "\x1bOA": "up",
    "\x1bOB": "down",
    "\x1bOC": "right",
    "\x1bOD": "left",
    "\x1bOH": "home",
    "\x1bOF": "end",
    "\x1b[1~": "home",
    "\x1b[4~": "end",
    "\x1b[7~": "home",
    "\x1b[8~": "end",
    "\x1b[2~": "insert",
    "\x1b[3~": "delete",
    "\x1b[5~": "pageUp",
    "\x1b[6~": "pageDown",
    "\x1bOP": "f1",
    "\x1bOQ": "f2",
    "\x1bOR": "f3",
    "\x1bOS": "f4",
    "\x1b[11~": "f1",
    "\x1b[12~": "f2",
    "\x1b[13~": "f3",
    "\x1b[14~": "f4",
    "\x1b[15~": "f5",
    "\x1b[17~": "f6",
    "\x1b[18~": "f7",
    "\x1b[19~": "f8",
    "\x1b[20~": "f9",
    "\x1b[21~": "f10",
    "\x1b[23~": "f11",
    "\x1b[24~": "f12",
    "\x1b[Z": "shift+tab",
}

# xterm modifier parameter -> key id prefix
_MODIFIER_PREFIXES: dict[int, str] = {
    2: "shift+",
    3: "alt+",
    4: "shift+alt+",
    5: "ctrl+",
    6: "ctrl+shift+",
    7: "ctrl+alt+",
    8: "ctrl+shift+alt+",
}

# CSI 1;<mod><final> keys
_CSI_FINAL_KEYS: dict[str, str] = {
    "A": "up",
    "B": "down",
    "C": "right",
    "D": "left",
    "H": "home",
    "F": "end",
    "P": "f1",
    "Q": "f2",
    "R": "f3",
    "S": "f4",
}

# CSI <code>;<mod>~ keys
_CSI_TILDE_KEYS: dict[int, str] = {
    2: "insert",
    3: "delete",
    5: "pageUp",
    6: "pageDown",
    15: "f5",
    17: "f6",
    18: "f7",
    19: "f8",
    20: "f9",
    21: "f10",
    23: "f11",
    24: "f12",
}


def _build_modified_sequences() -> dict[str, str]:
    table: dict[str, str] = {}
    for mod, prefix in _MODIFIER_PREFIXES.items():
        for final, key in _CSI_FINAL_KEYS.items():
            table[f"\x1b[1;{mod}{final}"] = prefix + key
        for code, key in _CSI_TILDE_KEYS.items():
            table[f"\x1b[{code};{mod}~"] = prefix + key
        for final in "PQRS":
            table[f"\x1bO{mod}{final}"] = prefix + _CSI_FINAL_KEYS[final]
    return table


MODIFIED_KEY_SEQUENCES: dict[str, str] = _build_modified_sequences()


# ---------------------------------------------------------------------------
# Key events
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class KeyEvent:
    """A decoded key press.

    ``data`` is the raw sequence, or the pasted text for ``paste`` events.
    """

    key: KeyId
    data: str

    @property
    def char(self) -> str | None:
        """The literal character for printable single-character keys."""
        if len(self.data) == 1 and self.data.isprintable():
            return self.data
        return None

    @property
    def is_function_key(self) -> bool:
        base = self.key.rsplit("+", 1)[-1]
        return base in FUNCTION_KEYS

    @classmethod
    def from_data(cls, data: str) -> KeyEvent | None:
        key = parse_key(data)
        if key is None:
            return None
        return cls(key, data)

    @classmethod
    def paste(cls, text: str) -> KeyEvent:
        return cls(PASTE, text)


# ---------------------------------------------------------------------------
# parse_key -- determine what key was pressed from raw input
# ---------------------------------------------------------------------------


def parse_key(data: str) -> KeyId | None:
    """Parse raw terminal input and return the key identifier, or ``None``."""
    if not data:
        return None

    if data in LEGACY_KEY_SEQUENCES:
        return LEGACY_KEY_SEQUENCES[data]
    if data in MODIFIED_KEY_SEQUENCES:
        return MODIFIED_KEY_SEQUENCES[data]

    # --- Simple single-byte keys ---
    if data == "\x1b":
        return "escape"
    if data == "\r" or data == "\n":
        return "enter"
    if data == "\t":
        return "tab"
    if data == " ":
        return "space"
    if data == "\x7f" or data == "\x08":
        return "backspace"
    if data == "\x00":
        return "ctrl+space"

    # --- Ctrl + letter (0x01 - 0x1a) ---
    if len(data) == 1 and 1 <= ord(data) <= 26:
        return "ctrl+" + chr(ord(data) + ord("a") - 1)

    # --- Alt + key (ESC prefix) ---
    if len(data) == 2 and data[0] == "\x1b":
        ch = data[1]
        if ch == "\r" or ch == "\n":
            return "alt+enter"
        if ch == "\x7f" or ch == "\x08":
            return "alt+backspace"
        if ch == " ":
            return "alt+space"
        if 1 <= ord(ch) <= 26:
            return "ctrl+alt+" + chr(ord(ch) + ord("a") - 1)
        if ch.isprintable():
            return "alt+" + ch

    # --- Plain printable character ---
    if len(data) == 1 and data.isprintable():
        return data

    return None
