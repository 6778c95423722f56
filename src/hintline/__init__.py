"""hintline: line input with inline autocomplete hints and history recall."""

# Configuration
from hintline.config import HintlineConfig

# Line editor
from hintline.editor import HintedInput, compile_input_pattern

# Errors
from hintline.errors import HintlineError, InvalidPatternError, UnknownColorError

# History
from hintline.history import History

# Keybindings
from hintline.keybindings import (
    DEFAULT_EDITOR_KEYBINDINGS,
    EditorAction,
    EditorKeybindingsManager,
)

# Keyboard input handling
from hintline.keys import Key, KeyEvent, KeyId, parse_key

# Rendering
from hintline.render import LinePainter, TerminalWriter, Writer

# Input buffering
from hintline.stdin_buffer import StdinBuffer

# Suggestions
from hintline.suggestions import HintCorpus, Suggestion, SuggestionList, compute_suggestions

# Terminal interface and implementation
from hintline.terminal import COLORS, ProcessTerminal, Terminal

# Cursor / viewport models
from hintline.viewport import CursorPosition, SingleRowViewport, Viewport, WrappingViewport

__all__ = [
    # Config
    "HintlineConfig",
    # Editor
    "HintedInput",
    "compile_input_pattern",
    # Errors
    "HintlineError",
    "InvalidPatternError",
    "UnknownColorError",
    # History
    "History",
    # Keybindings
    "DEFAULT_EDITOR_KEYBINDINGS",
    "EditorAction",
    "EditorKeybindingsManager",
    # Keys
    "Key",
    "KeyEvent",
    "KeyId",
    "parse_key",
    # Rendering
    "LinePainter",
    "TerminalWriter",
    "Writer",
    # Stdin buffer
    "StdinBuffer",
    # Suggestions
    "HintCorpus",
    "Suggestion",
    "SuggestionList",
    "compute_suggestions",
    # Terminal
    "COLORS",
    "ProcessTerminal",
    "Terminal",
    # Viewport
    "CursorPosition",
    "SingleRowViewport",
    "Viewport",
    "WrappingViewport",
]
