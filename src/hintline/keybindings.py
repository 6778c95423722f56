"""Editor keybindings manager."""

from __future__ import annotations

from typing import Literal, Mapping

from hintline.keys import Key, KeyId

EditorAction = Literal[
    # Cursor movement
    "cursorUp",
    "cursorDown",
    "cursorLeft",
    "cursorRight",
    "cursorLineStart",
    "cursorLineEnd",
    # Deletion
    "deleteCharBackward",
    "deleteCharForward",
    # Suggestions / commit
    "acceptSuggestion",
    "submit",
]

EditorKeybindingsConfig = Mapping[str, KeyId | list[KeyId]]

DEFAULT_EDITOR_KEYBINDINGS: dict[EditorAction, KeyId | list[KeyId]] = {
    # Cursor movement
    "cursorUp": Key.up,
    "cursorDown": Key.down,
    "cursorLeft": [Key.left, Key.ctrl("b")],
    "cursorRight": [Key.right, Key.ctrl("f")],
    "cursorLineStart": [Key.home, Key.ctrl("a")],
    "cursorLineEnd": [Key.end, Key.ctrl("e")],
    # Deletion
    "deleteCharBackward": Key.backspace,
    "deleteCharForward": Key.delete,
    # Suggestions / commit
    "acceptSuggestion": Key.tab,
    "submit": Key.enter,
}


class EditorKeybindingsManager:
    """Maps key identifiers to editor actions."""

    def __init__(self, config: EditorKeybindingsConfig | None = None) -> None:
        self._action_to_keys: dict[str, list[KeyId]] = {}
        self._key_to_action: dict[KeyId, str] = {}
        self._build_maps(config or {})

    def _build_maps(self, config: EditorKeybindingsConfig) -> None:
        for action, keys in DEFAULT_EDITOR_KEYBINDINGS.items():
            key_array = keys if isinstance(keys, list) else [keys]
            self._action_to_keys[action] = list(key_array)

        for action, keys in config.items():
            if action not in DEFAULT_EDITOR_KEYBINDINGS:
                raise ValueError(f"Unknown editor action: {action!r}")
            key_array = keys if isinstance(keys, list) else [keys]
            self._action_to_keys[action] = list(key_array)

        # Overrides win over defaults bound to the same key
        overridden = set(config)
        for action, keys in self._action_to_keys.items():
            for key in keys:
                if action in overridden or key not in self._key_to_action:
                    self._key_to_action[key] = action

    def action_for(self, key: KeyId) -> str | None:
        """Return the action bound to *key*, if any."""
        return self._key_to_action.get(key)

    def matches(self, key: KeyId, action: EditorAction) -> bool:
        return key in self._action_to_keys.get(action, [])
