"""CLI entry point for boxtable. Uses Click for argument parsing."""

from __future__ import annotations

import json
import logging
import sys

import click

from boxtable.errors import TableError
from boxtable.options import COLUMN_SIZINGS, HORIZONTAL_ALIGNMENTS, VERTICAL_ALIGNMENTS
from boxtable.stringify import display_value, inspect_value
from boxtable.table import create_table

logger = logging.getLogger(__name__)


def collect_keys(items: list[dict]) -> list[str]:
    """Every key found in *items*, in order of first appearance."""
    keys: dict[str, None] = {}
    for item in items:
        for key in item:
            keys.setdefault(key, None)
    return list(keys)


def load_records(text: str) -> list[dict]:
    """Parse a JSON array of objects."""
    data = json.loads(text)
    if isinstance(data, dict):
        data = [data]
    if not isinstance(data, list) or not all(isinstance(item, dict) for item in data):
        raise ValueError("Input must be a JSON object or an array of objects")
    return data


@click.command()
@click.argument("source", type=click.File("r", encoding="utf-8"), default="-")
@click.option("-k", "--key", "keys", multiple=True, help="Column to show (repeatable, default: all keys)")
@click.option("-w", "--max-width", type=int, default=80, show_default=True, help="Maximum line width")
@click.option(
    "--column-sizing",
    type=click.Choice(COLUMN_SIZINGS),
    default="stretch",
    show_default=True,
    help="How columns share the width",
)
@click.option(
    "--align",
    type=click.Choice(HORIZONTAL_ALIGNMENTS),
    default="middle",
    show_default=True,
    help="Horizontal alignment of cell text",
)
@click.option(
    "--valign",
    type=click.Choice(VERTICAL_ALIGNMENTS),
    default="middle",
    show_default=True,
    help="Vertical alignment of short cells",
)
@click.option("--full-width", is_flag=True, help="Stretch the table to exactly --max-width")
@click.option("--index", "index_column", is_flag=True, help="Prepend a row index column")
@click.option("--no-throw", is_flag=True, help="Print the error message instead of failing when too narrow")
@click.option("--plain", is_flag=True, help="Show strings without quotes")
@click.option(
    "--log-level",
    default="warning",
    type=click.Choice(["debug", "info", "warning", "error"]),
    show_default=True,
)
def main(
    source,
    keys,
    max_width,
    column_sizing,
    align,
    valign,
    full_width,
    index_column,
    no_throw,
    plain,
    log_level,
):
    """Render a JSON array of objects from SOURCE (default: stdin) as a table."""
    logging.basicConfig(
        level=getattr(logging, log_level.upper()),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )

    try:
        items = load_records(source.read())
    except ValueError as exc:
        click.echo(f"Invalid input: {exc}", err=True)
        sys.exit(1)

    columns = list(keys) or collect_keys(items)
    logger.info("Rendering %d records with columns %s", len(items), columns)

    try:
        table = create_table(
            items,
            columns,
            max_width=max_width,
            column_sizing=column_sizing,
            horizontal_alignment=align,
            vertical_alignment=valign,
            full_width=full_width,
            throw_if_too_small=not no_throw,
            index_column=index_column,
            stringify=display_value if plain else inspect_value,
        )
    except TableError as exc:
        click.echo(str(exc), err=True)
        sys.exit(1)

    click.echo(table)


if __name__ == "__main__":
    main()
