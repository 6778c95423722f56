"""Tests for the hintline command line."""

from __future__ import annotations

import pytest
from click.testing import CliRunner

from hintline import cli
from hintline.cli import load_hints, main


class FakeEditor:
    """Stands in for HintedInput so no real terminal is touched."""

    instances: list[FakeEditor] = []

    def __init__(self, hints, config=None):
        self.hints = list(hints)
        self.config = config
        self.lines = ["status", "stop"]
        FakeEditor.instances.append(self)

    def read_line(self):
        if not self.lines:
            raise EOFError
        return self.lines.pop(0)


@pytest.fixture
def fake_editor(monkeypatch):
    FakeEditor.instances = []
    monkeypatch.setattr(cli, "HintedInput", FakeEditor)
    return FakeEditor


@pytest.fixture
def runner():
    return CliRunner()


class TestLoadHints:
    def test_arguments_only(self):
        assert load_hints(("a", "b"), None) == ["a", "b"]

    def test_file_lines_are_appended(self, tmp_path):
        path = tmp_path / "hints.txt"
        path.write_text("status\n\n  \nstop\r\n", encoding="utf-8")
        assert load_hints(("start",), path) == ["start", "status", "stop"]


class TestMain:
    def test_help(self, runner):
        result = runner.invoke(main, ["--help"])
        assert result.exit_code == 0
        assert "--hints-file" in result.output
        assert "--single-row" in result.output

    def test_echoes_each_line_until_eof(self, runner, fake_editor):
        result = runner.invoke(main, ["status", "stop"])
        assert result.exit_code == 0
        assert result.output == "status\nstop\n\n"
        assert fake_editor.instances[0].hints == ["status", "stop"]

    def test_options_override_config(self, runner, fake_editor):
        result = runner.invoke(
            main,
            ["--prompt", "$ ", "--hint-color", "cyan", "--pattern", "[a-z]", "--single-row", "x"],
        )
        assert result.exit_code == 0
        config = fake_editor.instances[0].config
        assert config.prompt == "$ "
        assert config.hint_color == "cyan"
        assert config.input_pattern == "[a-z]"
        assert config.wrap is False

    def test_environment_is_read(self, runner, fake_editor):
        result = runner.invoke(main, ["x"], env={"HINTLINE_PROMPT": "? "})
        assert result.exit_code == 0
        assert fake_editor.instances[0].config.prompt == "? "

    def test_hints_file(self, runner, fake_editor, tmp_path):
        path = tmp_path / "hints.txt"
        path.write_text("start-server\n", encoding="utf-8")
        result = runner.invoke(main, ["--hints-file", str(path), "status"])
        assert result.exit_code == 0
        assert fake_editor.instances[0].hints == ["status", "start-server"]

    def test_invalid_pattern_is_rejected(self, runner, fake_editor):
        result = runner.invoke(main, ["--pattern", "["])
        assert result.exit_code == 2
        assert "Invalid value" in result.output
        assert fake_editor.instances == []

    def test_unknown_color_is_rejected(self, runner, fake_editor):
        result = runner.invoke(main, ["--hint-color", "chartreuse"])
        assert result.exit_code == 2
        assert "chartreuse" in result.output

    def test_invalid_pattern_from_environment_is_usage_error(self, runner, fake_editor):
        result = runner.invoke(main, ["status"], env={"HINTLINE_INPUT_PATTERN": "["})
        assert result.exit_code == 2
        assert "Invalid input pattern" in result.output
        assert fake_editor.instances == []

    def test_unknown_color_from_environment_is_usage_error(self, runner, fake_editor):
        result = runner.invoke(main, ["status"], env={"HINTLINE_HINT_COLOR": "chartreuse"})
        assert result.exit_code == 2
        assert "Unknown color" in result.output

    def test_option_overrides_bad_environment_value(self, runner, fake_editor):
        result = runner.invoke(main, ["--hint-color", "cyan", "x"], env={"HINTLINE_HINT_COLOR": "chartreuse"})
        assert result.exit_code == 0
        assert fake_editor.instances[0].config.hint_color == "cyan"
