"""Column width solver.

Widths always include the two padding spaces around cell text. The budget is
the room left for columns once every border character has been placed:
``max_width - column_count - 1``.

Shrinking and growing scale the affected columns by a common factor. Every
column but the last one touched is rounded down and the last one absorbs the
exact remainder, so the solved widths sum to the budget.
"""

from __future__ import annotations

import logging
import math
from typing import Sequence

from boxtable.errors import UnknownColumnSizingError

logger = logging.getLogger(__name__)

CELL_PADDING = 2
MIN_COLUMN_WIDTH = 3


def minimum_table_width(column_count: int) -> int:
    """Narrowest line that holds *column_count* columns of width 3."""
    return 4 * column_count + 1


def column_budget(max_width: int, column_count: int) -> int:
    # one │ left of every column plus the closing │
    return max_width - column_count - 1


def natural_widths(header: Sequence[str], rows: Sequence[Sequence[str]]) -> list[int]:
    """Unwrapped width of each column: its longest cell plus padding."""
    widths = [len(name) + CELL_PADDING for name in header]
    for row in rows:
        for i, cell in enumerate(row):
            widths[i] = max(widths[i], len(cell) + CELL_PADDING)
    return [max(MIN_COLUMN_WIDTH, width) for width in widths]


def shrink_columns(widths: Sequence[int], average_width: int, overflow: int) -> list[int]:
    """Remove *overflow* characters from the columns wider than *average_width*.

    Each wide column except the last is scaled by a common factor but never
    below *average_width*; the last wide column gives up whatever is left.
    """
    result = list(widths)
    big = [i for i, width in enumerate(result) if width > average_width]
    if not big:
        return result

    big_total = sum(result[i] for i in big)
    shrink_factor = 1 - overflow / (big_total - len(big) * average_width)
    logger.debug(
        "Shrinking %d of %d columns by %d (factor %.3f)",
        len(big), len(result), overflow, shrink_factor,
    )

    for i in big[:-1]:
        fixed = max(average_width, math.floor(shrink_factor * result[i]))
        overflow -= result[i] - fixed
        result[i] = fixed

    result[big[-1]] -= overflow
    return result


def grow_columns(widths: Sequence[int], average_width: int, growth: int) -> list[int]:
    """Add *growth* characters to the columns narrower than *average_width*.

    When no column is narrower than the average every column takes part.
    """
    result = list(widths)
    if not result:
        return result
    small = [i for i, width in enumerate(result) if width < average_width]
    if not small:
        small = list(range(len(result)))

    small_total = sum(result[i] for i in small)
    grow_factor = 1 + growth / small_total
    logger.debug(
        "Growing %d of %d columns by %d (factor %.3f)",
        len(small), len(result), growth, grow_factor,
    )

    for i in small[:-1]:
        fixed = math.floor(grow_factor * result[i])
        growth -= fixed - result[i]
        result[i] = fixed

    result[small[-1]] += growth
    return result


def resolve_widths(natural: Sequence[int], budget: int, column_sizing: str) -> list[int]:
    """Final column widths for *natural* widths under *column_sizing*.

    The result never sums to more than *budget*. ``even`` returns equal
    widths whenever the widest column already fits.
    """
    if column_sizing == "stretch":
        widths = list(natural)
    elif column_sizing == "even":
        widest = max(natural, default=MIN_COLUMN_WIDTH)
        widths = [widest] * len(natural)
    else:
        raise UnknownColumnSizingError(column_sizing)

    overflow = sum(widths) - budget
    if overflow > 0 and widths:
        widths = shrink_columns(widths, budget // len(widths), overflow)
    return widths


def fill_width(widths: Sequence[int], budget: int) -> list[int]:
    """Grow *widths* until they use the whole *budget*."""
    slack = budget - sum(widths)
    if slack <= 0 or not widths:
        return list(widths)
    return grow_columns(widths, budget // len(widths), slack)
