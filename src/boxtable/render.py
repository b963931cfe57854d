"""Turn solved column widths and cell text into bordered lines."""

from __future__ import annotations

from typing import Sequence

from boxtable.glyphs import LIGHT, BoxGlyphs, bottom_border, divider, top_border
from boxtable.wrap import paginate_row


def center_text(text: str, width: int) -> str:
    text = text.strip()
    padding = (width - len(text)) // 2
    return (" " * padding + text).ljust(width)


def align_text(text: str, width: int, alignment: str) -> str:
    """Pad one cell line to exactly *width* characters."""
    if alignment == "left":
        return (" " + text).ljust(width)
    if alignment == "right":
        return (text + " ").rjust(width)
    return center_text(text, width)


def render_row(
    cells: Sequence[str],
    widths: Sequence[int],
    alignment: str,
    glyphs: BoxGlyphs = LIGHT,
) -> str:
    """Render one physical line: every cell aligned and separated by │."""
    return (
        glyphs.vertical
        + glyphs.vertical.join(
            align_text(cell, width, alignment) for cell, width in zip(cells, widths)
        )
        + glyphs.vertical
    )


def render_block(
    cells: Sequence[str],
    widths: Sequence[int],
    horizontal_alignment: str,
    vertical_alignment: str,
    glyphs: BoxGlyphs = LIGHT,
) -> list[str]:
    """Render a logical row, wrapping long cells over several lines."""
    return [
        render_row(line, widths, horizontal_alignment, glyphs)
        for line in paginate_row(cells, widths, vertical_alignment)
    ]


def render_grid(
    header: Sequence[str],
    rows: Sequence[Sequence[str]],
    widths: Sequence[int],
    horizontal_alignment: str,
    vertical_alignment: str,
    glyphs: BoxGlyphs = LIGHT,
) -> str:
    lines = [top_border(widths, glyphs)]
    lines.extend(
        render_block(header, widths, horizontal_alignment, vertical_alignment, glyphs)
    )
    lines.append(divider(widths, glyphs))
    for row in rows:
        lines.extend(
            render_block(row, widths, horizontal_alignment, vertical_alignment, glyphs)
        )
    lines.append(bottom_border(widths, glyphs))
    return "\n".join(lines)
