"""
Parses a slide body file into content blocks.
Prints the blocks as JSON, or re-emits them as normalized slide markup.
"""

from __future__ import annotations

import logging
from pathlib import Path

import click

from .config import ConfigError, build_config
from .constants import SLIDE_EXTENSIONS
from .exceptions import ContentFileError
from .export import render_json, render_markup
from .parser import parse_file

__all__ = ["cli"]


@click.command()
@click.version_option()
@click.option(
    "--format",
    "output_format",
    type=click.Choice(["json", "markup"]),
    default="json",
    show_default=True,
    help="Output format",
)
@click.option("--indent", type=int, help="JSON indentation (0 for compact output)")
@click.option("--images/--no-images", default=None, help="Extract standalone image lines")
@click.option("--flow-lines/--no-flow-lines", default=None, help="Extract arrow flow lines")
@click.option(
    "--highlight-quotes/--no-highlight-quotes", default=None, help="Mark double-quoted text"
)
@click.option(
    "--max-file-size",
    type=click.IntRange(min=1),
    envvar="SLIDE_CONTENT_MAX_FILE_SIZE",
    help="Largest slide file to read, in bytes",
)
@click.option("-v", "--verbose", is_flag=True, help="Log parser decisions to stderr")
@click.argument(
    "filepath", type=click.Path(exists=True, dir_okay=False, resolve_path=True, path_type=Path)
)
def cli(
    filepath: Path,
    output_format: str = "json",
    indent: int | None = None,
    images: bool | None = None,
    flow_lines: bool | None = None,
    highlight_quotes: bool | None = None,
    max_file_size: int | None = None,
    verbose: bool = False,
):
    """
    Entry point for turning a slide file into content blocks.

    Args:
        filepath: Path to the slide file to process.
        output_format: `json` for block descriptions, `markup` for normalized
            slide markup.
        indent: Override for JSON indentation.
        images: Override for image line extraction.
        flow_lines: Override for flow line extraction.
        highlight_quotes: Override for quote highlighting.
        max_file_size: Override for the file size limit; also read from
            `SLIDE_CONTENT_MAX_FILE_SIZE`.
        verbose: Whether to log parser decisions at debug level.

    Returns:
        None.

    Raises:
        click.BadParameter: If the path is not a slide file or the
            configuration is invalid.
        click.ClickException: If the file is too large or cannot be read.

    Examples:
        slide-content slides/intro.md --format markup --flow-lines
    """
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    if filepath.suffix.lower() not in SLIDE_EXTENSIONS:
        raise click.BadParameter(
            f"{filepath.name} is not a slide file (expected one of: {', '.join(SLIDE_EXTENSIONS)})",
            param_hint="FILEPATH",
        )

    try:
        config = build_config(
            filepath.parent,
            extract_images=images,
            flow_lines=flow_lines,
            highlight_quotes=highlight_quotes,
            json_indent=indent,
            max_file_size=max_file_size,
        )
    except ConfigError as error:
        raise click.BadParameter(str(error)) from error

    try:
        blocks = parse_file(filepath, config)
    except ContentFileError as error:
        raise click.ClickException(str(error)) from error

    if not blocks:
        click.echo(f"Warning: {filepath.name} produced no content blocks", err=True)

    if output_format == "markup":
        print("".join(render_markup(blocks)), end="")
    else:
        print(render_json(blocks, indent=config.json_indent))


if __name__ == "__main__":
    cli()
