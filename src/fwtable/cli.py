"""Command-line interface for rendering fixed-width text tables."""

import csv
import logging
import sys
from typing import IO

import click

from .config import TableOptions
from .exceptions import FWTableError
from .formatter import Alignment, Field
from .generator import DEFAULT_PADDING, TableGenerator

logger = logging.getLogger(__name__)

ALIGNMENT_CHOICES = [alignment.value for alignment in Alignment]


@click.group()
@click.version_option()
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging on stderr")
def cli(verbose: bool) -> None:
    """fwtable plain-text table CLI."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")


@cli.command()
@click.argument("file", type=click.File("r", encoding="utf-8"), default="-")
@click.option(
    "--delimiter",
    "-d",
    default=",",
    help="Field delimiter of the input (use '\\t' for tabs, default: ',')",
)
@click.option(
    "--header-row/--no-header-row",
    default=True,
    help="Treat the first input record as column names (default: yes)",
)
@click.option(
    "--padding",
    type=int,
    default=DEFAULT_PADDING,
    help=f"Spaces on each side of every cell (default: {DEFAULT_PADDING})",
)
@click.option(
    "--headers/--no-headers",
    default=True,
    help="Render the header row (default: enabled)",
)
@click.option(
    "--align",
    "alignments",
    multiple=True,
    metavar="NAME=ALIGN",
    help=f"Column alignment, ALIGN is one of {', '.join(ALIGNMENT_CHOICES)} (repeatable)",
)
@click.option(
    "--width",
    "widths",
    multiple=True,
    metavar="NAME=N",
    help="Fixed column width; longer values are truncated with '...' (repeatable)",
)
def table(
    file: IO[str],
    delimiter: str,
    header_row: bool,
    padding: int,
    headers: bool,
    alignments: tuple[str, ...],
    widths: tuple[str, ...],
) -> None:
    """Render delimited text from FILE (or stdin) as a table."""
    if delimiter == "\\t":
        delimiter = "\t"
    if len(delimiter) != 1:
        raise click.BadParameter("must be a single character", param_hint="--delimiter")

    try:
        records = [record for record in csv.reader(file, delimiter=delimiter) if record]
    except (UnicodeDecodeError, csv.Error) as e:
        click.echo(f"✗ Failed to read input: {e}", err=True)
        sys.exit(1)

    if header_row and records:
        names, rows = records[0], records[1:]
    else:
        width = max((len(record) for record in records), default=0)
        names, rows = [str(i) for i in range(1, width + 1)], records
    logger.debug("Read %d columns and %d rows", len(names), len(rows))

    try:
        options = TableOptions.from_cli(
            padding=padding,
            print_headers=headers,
            alignments=alignments,
            widths=widths,
        )
        generator = TableGenerator.from_rows(names, rows)
        options.apply(generator)
    except FWTableError as e:
        click.echo(f"✗ Failed to build table: {e}", err=True)
        sys.exit(1)

    generator.print()


@cli.command()
@click.argument("text")
@click.option("--width", "-w", type=int, required=True, help="Width of the field")
@click.option(
    "--align",
    "alignment",
    type=click.Choice(ALIGNMENT_CHOICES, case_sensitive=False),
    default=Alignment.LEFT.value,
    help="Placement of TEXT within the field (default: left)",
)
@click.option("--pad-char", default=" ", help="Padding character (default: space)")
def field(text: str, width: int, alignment: str, pad_char: str) -> None:
    """Print TEXT fitted to a fixed-width field."""
    try:
        fitted = Field(text, width, Alignment.parse(alignment), pad_char).fitted_text
    except FWTableError as e:
        click.echo(f"✗ Failed to format field: {e}", err=True)
        sys.exit(1)

    click.echo(fitted)


if __name__ == "__main__":
    cli()
