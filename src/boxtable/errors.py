"""Exceptions for boxtable."""

from __future__ import annotations


class TableError(Exception):
    """Base exception for all boxtable errors.

    Every exception raised by this library inherits from this class, so
    callers can catch all library-specific errors with a single except clause.
    """


class TableOptionsError(TableError, ValueError):
    """An option value is not one of the accepted choices."""


class UnknownColumnSizingError(TableOptionsError):
    """Raised for a column sizing strategy other than ``stretch`` or ``even``."""

    def __init__(self, column_sizing: object) -> None:
        self.column_sizing = column_sizing
        super().__init__(f"Unknown column sizing '{column_sizing}'")


class InvalidAlignmentError(TableOptionsError):
    """Raised for an unrecognised horizontal or vertical alignment."""

    def __init__(self, option: str, value: object, choices: tuple[str, ...]) -> None:
        self.option = option
        self.value = value
        super().__init__(
            f"Invalid {option} '{value}' (expected one of: {', '.join(choices)})"
        )


class EmptyTableError(TableError, ValueError):
    """Raised when a table is requested without any columns."""


class TableTooNarrowError(TableError, ValueError):
    """The requested maximum width cannot hold one minimal column per key.

    Attributes:
        minimum_width: Smallest width that fits the table (4 * columns + 1).
        max_width: The width that was requested.
    """

    def __init__(self, minimum_width: int, max_width: int) -> None:
        self.minimum_width = minimum_width
        self.max_width = max_width
        super().__init__(
            "The table does not fit. The width should be set to at least "
            f"{minimum_width} (4 * ColumnCount + 1) for this table to fit "
            f"(received width {max_width})."
        )


class LayoutInvariantError(TableError, RuntimeError):
    """The width solver produced a column narrower than the minimum.

    This indicates a defect in the layout arithmetic, never bad input.
    """

    def __init__(self, widths: list[int]) -> None:
        self.widths = widths
        super().__init__(
            f"Table does not fit: solved column widths {widths} contain a column "
            "narrower than 3. This is a bug in the width solver."
        )
