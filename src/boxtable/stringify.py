"""Value-to-text conversion for table cells.

A stringifier is any ``Callable[[Any], str]``. Cells must stay on one line
for the width and alignment guarantees to hold, so both built-ins collapse
line breaks.
"""

from __future__ import annotations

import re
from typing import Any, Callable

Stringify = Callable[[Any], str]

_LINE_BREAK_RE = re.compile(r"\r\n|\r|\n")


def _single_line(text: str) -> str:
    return _LINE_BREAK_RE.sub(" ", text)


def inspect_value(value: Any) -> str:
    """Debug representation of *value*: strings are quoted, containers nested."""
    return _single_line(repr(value))


def display_value(value: Any) -> str:
    """Like :func:`inspect_value`, but strings are shown without quotes."""
    if isinstance(value, str):
        return _single_line(value)
    return inspect_value(value)
