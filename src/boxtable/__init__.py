"""boxtable: width-constrained box-drawing tables for terminals and logs."""

from boxtable.errors import (
    EmptyTableError,
    InvalidAlignmentError,
    LayoutInvariantError,
    TableError,
    TableOptionsError,
    TableTooNarrowError,
    UnknownColumnSizingError,
)
from boxtable.glyphs import LIGHT, BoxGlyphs
from boxtable.options import (
    ColumnSizing,
    HorizontalAlignment,
    TableOptions,
    VerticalAlignment,
)
from boxtable.sizing import minimum_table_width, resolve_widths
from boxtable.stringify import Stringify, display_value, inspect_value
from boxtable.table import TableLayout, create_table, plan_table, render_table
from boxtable.wrap import wrap_cell

__all__ = [
    # Tables
    "TableLayout",
    "create_table",
    "plan_table",
    "render_table",
    # Options
    "ColumnSizing",
    "HorizontalAlignment",
    "TableOptions",
    "VerticalAlignment",
    # Layout primitives
    "BoxGlyphs",
    "LIGHT",
    "minimum_table_width",
    "resolve_widths",
    "wrap_cell",
    # Stringification
    "Stringify",
    "display_value",
    "inspect_value",
    # Errors
    "EmptyTableError",
    "InvalidAlignmentError",
    "LayoutInvariantError",
    "TableError",
    "TableOptionsError",
    "TableTooNarrowError",
    "UnknownColumnSizingError",
]
