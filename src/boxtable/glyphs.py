"""Box-drawing glyphs and the border lines built from them."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence


@dataclass(frozen=True)
class BoxGlyphs:
    """Characters used to draw table borders and dividers."""

    top_left: str = "┌"
    top_middle: str = "┬"
    top_right: str = "┐"
    left_middle: str = "├"
    middle: str = "┼"
    right_middle: str = "┤"
    bottom_left: str = "└"
    bottom_middle: str = "┴"
    bottom_right: str = "┘"
    horizontal: str = "─"
    vertical: str = "│"


LIGHT = BoxGlyphs()


def _border_line(
    widths: Sequence[int], left: str, junction: str, right: str, horizontal: str
) -> str:
    return left + junction.join(horizontal * width for width in widths) + right


def top_border(widths: Sequence[int], glyphs: BoxGlyphs = LIGHT) -> str:
    return _border_line(
        widths, glyphs.top_left, glyphs.top_middle, glyphs.top_right, glyphs.horizontal
    )


def divider(widths: Sequence[int], glyphs: BoxGlyphs = LIGHT) -> str:
    """Line separating the header block from the data rows."""
    return _border_line(
        widths, glyphs.left_middle, glyphs.middle, glyphs.right_middle, glyphs.horizontal
    )


def bottom_border(widths: Sequence[int], glyphs: BoxGlyphs = LIGHT) -> str:
    return _border_line(
        widths,
        glyphs.bottom_left,
        glyphs.bottom_middle,
        glyphs.bottom_right,
        glyphs.horizontal,
    )
