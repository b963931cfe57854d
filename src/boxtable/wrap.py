"""Cell wrapping and vertical alignment.

Cells are cut into fixed-size slices with no regard for word boundaries.
"""

from __future__ import annotations

from typing import Sequence

from boxtable.sizing import CELL_PADDING


def wrap_cell(text: str, inner_width: int) -> list[str]:
    """Split *text* into lines of at most *inner_width* characters.

    Empty text gives a single empty line so every row is at least one line tall.
    """
    if inner_width < 1:
        raise ValueError(f"inner_width must be positive, got {inner_width}")
    if not text:
        return [""]
    return [text[i : i + inner_width] for i in range(0, len(text), inner_width)]


def align_vertically(lines: Sequence[str], height: int, alignment: str) -> list[str]:
    """Prepend blank lines so *lines* sits at *alignment* within *height* lines.

    ``top`` adds nothing; missing lines below a cell render blank anyway.
    """
    if alignment == "bottom":
        padding = height - len(lines)
    elif alignment == "middle":
        padding = (height - len(lines)) // 2
    else:
        padding = 0
    return [""] * max(padding, 0) + list(lines)


def paginate_row(
    cells: Sequence[str], widths: Sequence[int], alignment: str
) -> list[list[str]]:
    """Physical lines of one table row.

    Each returned line holds one string per column; cells shorter than the
    row contribute empty strings.
    """
    wrapped = [wrap_cell(cell, width - CELL_PADDING) for cell, width in zip(cells, widths)]
    height = max((len(lines) for lines in wrapped), default=0)
    aligned = [align_vertically(lines, height, alignment) for lines in wrapped]
    return [
        [lines[i] if i < len(lines) else "" for lines in aligned]
        for i in range(height)
    ]
