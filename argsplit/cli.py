"""
Splits command-style text into arguments.
Each argument is printed with its grouping and its offset in the original text.
"""

from __future__ import annotations

import json
from pathlib import Path

import click
from .config import OUTPUT_FORMATS, ConfigError, build_config
from .exceptions import InputTooLongError, UnterminatedGroupError
from .sequence import TokenSequence
from .splitter import Splitter

__all__ = ["cli", "render"]


def render(args: TokenSequence, output_format: str) -> list[str]:
    """Render split arguments as output lines.

    Args:
        args: Arguments to render.
        output_format: ``"plain"`` for one tab-separated line per argument,
            ``"json"`` for a single JSON document.

    Returns:
        list[str]: Lines to print, without trailing newlines.
    """
    if output_format == "json":
        document = {
            "original": args.original,
            "tokens": [
                {
                    "content": token.content,
                    "kind": token.kind.name.lower(),
                    "start_offset": token.start_offset,
                    "width": token.width,
                }
                for token in args
            ],
        }
        return [json.dumps(document, ensure_ascii=False)]

    return [f"{token.kind.name.lower()}\t{token.start_offset}\t{token.content}" for token in args]


@click.command()
@click.version_option()
@click.option(
    "--format", "output_format", type=click.Choice(OUTPUT_FORMATS), help="Output format"
)
@click.option("--restore-start", type=int, help="Print the original text from this argument")
@click.option("--restore-end", type=int, help="Stop restoring before this argument")
@click.option("--max-code-width", type=int, help="Maximum backticks in one code delimiter")
@click.option("--max-input-length", type=int, help="Maximum input length in characters")
@click.argument("text", required=False)
def cli(
    text: str | None = None,
    output_format: str | None = None,
    restore_start: int | None = None,
    restore_end: int | None = None,
    max_code_width: int | None = None,
    max_input_length: int | None = None,
):
    """
    Split TEXT, or each line of standard input, into arguments.

    Args:
        text: Text to split. Standard input is read line by line when omitted.
        output_format: Override for the output format (`plain` or `json`).
        restore_start: Index of the first argument to restore.
        restore_end: Index (exclusive) of the argument where restoring stops.
        max_code_width: Override for the widest backtick delimiter.
        max_input_length: Override for the input length limit.

    Raises:
        click.BadParameter: If the configuration is invalid.
        click.ClickException: If a line has an unterminated group or is too long.

    Examples:
        argsplit 'say "hello world"' --format json
        echo 'cmd a b c' | argsplit --restore-start 1
    """
    try:
        config = build_config(
            Path.cwd(),
            output_format=output_format,
            max_code_width=max_code_width,
            max_input_length=max_input_length,
        )
    except ConfigError as error:
        raise click.BadParameter(str(error)) from error

    splitter = Splitter(config, warn=lambda message: click.echo(message, err=True))
    if text is not None:
        lines = [text]
    else:
        lines = click.get_text_stream("stdin").read().splitlines()

    for line in lines:
        try:
            args = splitter.split(line)
        except (UnterminatedGroupError, InputTooLongError) as error:
            raise click.ClickException(str(error)) from error

        if restore_start is not None or restore_end is not None:
            click.echo(args.restore(restore_start or 0, restore_end))
            continue
        for output_line in render(args, config.output_format):
            click.echo(output_line)


if __name__ == "__main__":
    cli()
