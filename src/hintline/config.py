"""Configuration for hinted input."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from typing import Mapping

from hintline.keys import KeyId
from hintline.render import DEFAULT_PROMPT

DEFAULT_HINT_COLOR = "dark_gray"
DEFAULT_INPUT_PATTERN = ".*"

_FALSE_VALUES = {"0", "false", "no", "off"}


@dataclass
class HintlineConfig:
    """Editor settings.

    ``wrap`` selects the multi-row viewport; when false the line stays on a
    single row.
    """

    prompt: str = DEFAULT_PROMPT
    hint_color: str = DEFAULT_HINT_COLOR
    input_pattern: str = DEFAULT_INPUT_PATTERN
    wrap: bool = True
    keybindings: dict[str, KeyId | list[KeyId]] = field(default_factory=dict)

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> HintlineConfig:
        """Build a config from ``HINTLINE_*`` environment variables."""
        env = os.environ if environ is None else environ
        config = cls()
        if "HINTLINE_PROMPT" in env:
            config.prompt = env["HINTLINE_PROMPT"]
        if env.get("HINTLINE_HINT_COLOR"):
            config.hint_color = env["HINTLINE_HINT_COLOR"]
        if env.get("HINTLINE_INPUT_PATTERN"):
            config.input_pattern = env["HINTLINE_INPUT_PATTERN"]
        if "HINTLINE_WRAP" in env:
            config.wrap = env["HINTLINE_WRAP"].strip().lower() not in _FALSE_VALUES
        return config
