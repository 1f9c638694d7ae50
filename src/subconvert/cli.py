"""CLI entry point for subconvert."""

import sys

import click

from .config import Config
from .convert import convert
from .errors import ConversionError


@click.command()
@click.argument("input_path", type=click.Path(dir_okay=False))
@click.argument("output_path", type=click.Path(dir_okay=False))
def main(input_path: str, output_path: str) -> None:
    """Convert subtitles between JSON and SRT.

    The direction is chosen from the file extensions: JSON converts to SRT,
    SRT or ASS converts to JSON.

    \b
    Examples:
      subconvert input.json output.srt
      subconvert input.srt output.json
      subconvert input.ass output.json
    """
    try:
        config = Config.from_env()
    except ValueError as e:
        raise click.ClickException(str(e))

    click.echo(f"Converting {input_path} → {output_path}")

    try:
        count = convert(input_path, output_path, config)
    except ConversionError as e:
        click.secho(f"Error: {e}", fg="red", err=True)
        sys.exit(1)

    click.echo(f"  Wrote {count} cues to {output_path}")
    click.echo()
    click.secho("Done!", fg="green", bold=True)


if __name__ == "__main__":
    main()
