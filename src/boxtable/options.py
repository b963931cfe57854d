"""Rendering options for tables.

Options are a plain dataclass with defaults. Callers pass an instance, keyword
overrides, or both; overrides win.
"""

from __future__ import annotations

from dataclasses import dataclass, field, fields, replace
from typing import Any, Literal

from boxtable.errors import InvalidAlignmentError, UnknownColumnSizingError
from boxtable.stringify import Stringify, inspect_value

HorizontalAlignment = Literal["left", "middle", "right"]
VerticalAlignment = Literal["top", "middle", "bottom"]
ColumnSizing = Literal["stretch", "even"]

HORIZONTAL_ALIGNMENTS: tuple[str, ...] = ("left", "middle", "right")
VERTICAL_ALIGNMENTS: tuple[str, ...] = ("top", "middle", "bottom")
COLUMN_SIZINGS: tuple[str, ...] = ("stretch", "even")


@dataclass(frozen=True)
class TableOptions:
    """How a table is sized and aligned.

    Attributes:
        max_width: Hard upper bound on the width of every emitted line.
        column_sizing: ``stretch`` keeps natural widths and shrinks only on
            overflow; ``even`` gives every column the widest natural width.
        horizontal_alignment: Placement of text inside a cell line.
        vertical_alignment: Placement of short cells inside a taller row.
        full_width: Grow columns so lines are exactly ``max_width`` wide.
        throw_if_too_small: Raise when ``max_width`` cannot fit the columns;
            when False the error message is returned instead of a table.
        index_column: Prepend an ``(index)`` column with zero-based row numbers.
        stringify: Converts each field value to cell text.
    """

    max_width: int = 80
    column_sizing: ColumnSizing = "stretch"
    horizontal_alignment: HorizontalAlignment = "middle"
    vertical_alignment: VerticalAlignment = "middle"
    full_width: bool = False
    throw_if_too_small: bool = True
    index_column: bool = False
    stringify: Stringify = field(default=inspect_value, compare=False)

    def __post_init__(self) -> None:
        if self.column_sizing not in COLUMN_SIZINGS:
            raise UnknownColumnSizingError(self.column_sizing)
        if self.horizontal_alignment not in HORIZONTAL_ALIGNMENTS:
            raise InvalidAlignmentError(
                "horizontal alignment", self.horizontal_alignment, HORIZONTAL_ALIGNMENTS
            )
        if self.vertical_alignment not in VERTICAL_ALIGNMENTS:
            raise InvalidAlignmentError(
                "vertical alignment", self.vertical_alignment, VERTICAL_ALIGNMENTS
            )


_OPTION_NAMES = frozenset(f.name for f in fields(TableOptions))


def resolve_options(options: TableOptions | None = None, **overrides: Any) -> TableOptions:
    """Merge keyword *overrides* into *options* (or the defaults)."""
    unknown = sorted(set(overrides) - _OPTION_NAMES)
    if unknown:
        raise TypeError(f"Unknown table option(s): {', '.join(unknown)}")

    base = options if options is not None else TableOptions()
    # None values count as "not given"
    given = {name: value for name, value in overrides.items() if value is not None}
    if not given:
        return base
    return replace(base, **given)
