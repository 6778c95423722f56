"""CLI entry point for hintline. Uses Click for argument parsing."""

from __future__ import annotations

import logging
from pathlib import Path

import click

from hintline.config import HintlineConfig
from hintline.editor import HintedInput, compile_input_pattern
from hintline.errors import HintlineError
from hintline.terminal import color_code

logger = logging.getLogger(__name__)


def load_hints(hints: tuple[str, ...], hints_file: Path | None) -> list[str]:
    """Combine hint arguments with the non-blank lines of *hints_file*."""
    result = list(hints)
    if hints_file is not None:
        for line in hints_file.read_text(encoding="utf-8").splitlines():
            if line.strip():
                result.append(line.rstrip("\r\n"))
    return result


def _validate_pattern(ctx, param, value):
    if value is None:
        return value
    try:
        compile_input_pattern(value)
    except HintlineError as e:
        raise click.BadParameter(str(e)) from e
    return value


def _validate_color(ctx, param, value):
    if value is None:
        return value
    try:
        color_code(value)
    except HintlineError as e:
        raise click.BadParameter(str(e)) from e
    return value


@click.command()
@click.argument("hints", nargs=-1)
@click.option(
    "--hints-file",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    default=None,
    help="File with one hint per line",
)
@click.option("--pattern", default=None, callback=_validate_pattern, help="Regex each typed character must match")
@click.option("--hint-color", default=None, callback=_validate_color, help="Color of suggestion text")
@click.option("--prompt", default=None, help="Prompt text")
@click.option("--single-row", is_flag=True, help="Keep the line on one terminal row")
@click.option(
    "--log-level",
    type=click.Choice(["debug", "info", "warning", "error"]),
    default="warning",
    help="Logging level (logs go to stderr)",
)
def main(hints, hints_file, pattern, hint_color, prompt, single_row, log_level):
    """Read lines with inline suggestions from HINTS, echoing each one."""
    logging.basicConfig(
        level=getattr(logging, log_level.upper()),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )

    config = HintlineConfig.from_env()
    if pattern is not None:
        config.input_pattern = pattern
    if hint_color is not None:
        config.hint_color = hint_color
    if prompt is not None:
        config.prompt = prompt
    if single_row:
        config.wrap = False

    # Environment values bypass the option callbacks
    try:
        compile_input_pattern(config.input_pattern)
        color_code(config.hint_color)
    except HintlineError as e:
        raise click.UsageError(str(e)) from e

    corpus = load_hints(hints, hints_file)
    logger.info("Loaded %d hints", len(corpus))

    editor = HintedInput(corpus, config=config)
    while True:
        try:
            line = editor.read_line()
        except (EOFError, KeyboardInterrupt):
            click.echo()
            break
        click.echo(line)


if __name__ == "__main__":
    main()
