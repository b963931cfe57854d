"""Build box-drawing tables from records.

``plan_table`` turns records into cell text and solves the column widths;
``render_table`` draws a solved layout; ``create_table`` does both.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Iterable, Mapping, Sequence

from boxtable.errors import EmptyTableError, LayoutInvariantError, TableTooNarrowError
from boxtable.options import TableOptions, resolve_options
from boxtable.render import render_grid
from boxtable.sizing import (
    MIN_COLUMN_WIDTH,
    column_budget,
    fill_width,
    minimum_table_width,
    natural_widths,
    resolve_widths,
)

logger = logging.getLogger(__name__)

INDEX_COLUMN_NAME = "(index)"


@dataclass(frozen=True)
class TableLayout:
    """A table whose cell text and column widths are final."""

    header: tuple[str, ...]
    rows: tuple[tuple[str, ...], ...]
    widths: tuple[int, ...]
    options: TableOptions

    @property
    def line_width(self) -> int:
        return sum(self.widths) + len(self.widths) + 1


def field_value(item: Any, key: Any) -> Any:
    """Look up *key* on a record; missing fields read as None."""
    if isinstance(item, Mapping):
        return item.get(key)
    return getattr(item, str(key), None)


def _table_content(
    items: Iterable[Any], keys: Sequence[Any], options: TableOptions
) -> tuple[list[str], list[list[str]]]:
    header = [str(key) for key in keys]
    rows = [[options.stringify(field_value(item, key)) for key in keys] for item in items]

    if options.index_column:
        header.insert(0, INDEX_COLUMN_NAME)
        for i, row in enumerate(rows):
            row.insert(0, str(i))

    return header, rows


def plan_table(
    items: Iterable[Any],
    keys: Sequence[Any],
    options: TableOptions | None = None,
    **overrides: Any,
) -> TableLayout:
    """Stringify *items* and solve column widths without rendering.

    Raises:
        EmptyTableError: *keys* is empty.
        TableTooNarrowError: ``max_width`` is below ``4 * columns + 1``,
            regardless of ``throw_if_too_small``.
        LayoutInvariantError: The solver produced a column narrower than 3.
    """
    options = resolve_options(options, **overrides)
    if not keys:
        raise EmptyTableError("A table needs at least one key")

    header, rows = _table_content(items, keys, options)
    column_count = len(header)

    minimum_width = minimum_table_width(column_count)
    if options.max_width < minimum_width:
        raise TableTooNarrowError(minimum_width, options.max_width)

    budget = column_budget(options.max_width, column_count)
    widths = resolve_widths(natural_widths(header, rows), budget, options.column_sizing)
    if options.full_width:
        widths = fill_width(widths, budget)

    if any(width < MIN_COLUMN_WIDTH for width in widths):
        raise LayoutInvariantError(widths)

    logger.debug(
        "Planned %d x %d table, widths %s (budget %d)",
        len(rows), column_count, widths, budget,
    )
    return TableLayout(
        header=tuple(header),
        rows=tuple(tuple(row) for row in rows),
        widths=tuple(widths),
        options=options,
    )


def render_table(layout: TableLayout) -> str:
    return render_grid(
        layout.header,
        layout.rows,
        layout.widths,
        layout.options.horizontal_alignment,
        layout.options.vertical_alignment,
    )


def create_table(
    items: Iterable[Any],
    keys: Sequence[Any],
    options: TableOptions | None = None,
    **overrides: Any,
) -> str:
    """Render *items* as a table with one column per key.

    Args:
        items: Records; mappings are indexed by key, other objects are read
            by attribute.
        keys: Field names, in column order. Also used as column headers.
        options: Base options; defaults to ``TableOptions()``.
        **overrides: Individual ``TableOptions`` fields, e.g. ``max_width=40``.

    Returns:
        The table as lines joined by ``\\n`` with no trailing newline, or the
        too-narrow message when ``throw_if_too_small`` is False.
    """
    options = resolve_options(options, **overrides)
    try:
        layout = plan_table(items, keys, options)
    except TableTooNarrowError as exc:
        if options.throw_if_too_small:
            raise
        logger.debug("Returning message instead of table: %s", exc)
        return str(exc)
    return render_table(layout)
