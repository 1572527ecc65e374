"""ASCII grid -> drawing primitives.

Two sweeps over the character grid:
  1. bracket pairs ``[ ... ]`` on a row become boxes,
  2. every character is classified into a dot, a stroke, a glyph or nothing.

Boxes come out first so a painter's-order renderer draws them underneath.
"""

from __future__ import annotations

import logging
from typing import Callable

from asciisketch.grid.primitives import Circle, Line, Primitive, Rectangle, Text

logger = logging.getLogger(__name__)

DEFAULT_CELL_WIDTH = 14.0
DEFAULT_CELL_HEIGHT = 24.0

# Box shrink inside its bracket span: half horizontally per side, full vertically.
BOX_PADDING = 4.0

# Gap between a stroke's end and the cell edge, so neighbouring strokes stay apart.
STROKE_INSET = 2.0

DOT_DIAMETER = 4.0

# Glyph anchor relative to the cell's top-left corner.
TEXT_OFFSET = (2.0, 2.0)

# Never become primitives in the classification sweep.
_SILENT = frozenset(" []\r")

_Rule = Callable[[float, float, float, float], Primitive]


def _dot(x0: float, y0: float, w: float, h: float) -> Primitive:
    return Circle(x=x0 + w / 2, y=y0 + h / 2, diameter=DOT_DIAMETER)


def _horizontal(x0: float, y0: float, w: float, h: float) -> Primitive:
    mid = y0 + h / 2
    return Line(x=x0 + STROKE_INSET, y=mid, x2=x0 + w - STROKE_INSET, y2=mid)


def _vertical(x0: float, y0: float, w: float, h: float) -> Primitive:
    mid = x0 + w / 2
    return Line(x=mid, y=y0 + STROKE_INSET, x2=mid, y2=y0 + h - STROKE_INSET)


def _rising(x0: float, y0: float, w: float, h: float) -> Primitive:
    return Line(
        x=x0 + STROKE_INSET,
        y=y0 + h - STROKE_INSET,
        x2=x0 + w - STROKE_INSET,
        y2=y0 + STROKE_INSET,
    )


def _falling(x0: float, y0: float, w: float, h: float) -> Primitive:
    return Line(
        x=x0 + STROKE_INSET,
        y=y0 + STROKE_INSET,
        x2=x0 + w - STROKE_INSET,
        y2=y0 + h - STROKE_INSET,
    )


GLYPH_RULES: dict[str, _Rule] = {
    "+": _dot,
    "*": _dot,
    "-": _horizontal,
    "_": _horizontal,
    "=": _horizontal,
    "|": _vertical,
    "/": _rising,
    "\\": _falling,
}


def split_rows(text: str) -> list[str]:
    """Rows of the grid. Empty text has no rows."""
    if not text:
        return []
    return text.split("\n")


def grid_extent(text: str) -> tuple[int, int]:
    """(rows, columns) of the grid; columns is the longest row, ``\\r`` excluded."""
    rows = split_rows(text)
    columns = max((len(row.rstrip("\r")) for row in rows), default=0)
    return len(rows), columns


def _boxes(rows: list[str], cell_width: float, cell_height: float) -> list[Primitive]:
    boxes: list[Primitive] = []
    for r, row in enumerate(rows):
        # Only the latest unmatched '[' on the row is remembered.
        open_col: int | None = None
        for c, ch in enumerate(row):
            if ch == "[":
                open_col = c
            elif ch == "]" and open_col is not None:
                boxes.append(
                    Rectangle(
                        x=open_col * cell_width + BOX_PADDING / 2,
                        y=r * cell_height + BOX_PADDING,
                        width=(c - open_col + 1) * cell_width - BOX_PADDING,
                        height=cell_height - 2 * BOX_PADDING,
                    )
                )
                open_col = None
    return boxes


def _glyphs(rows: list[str], cell_width: float, cell_height: float) -> list[Primitive]:
    out: list[Primitive] = []
    for r, row in enumerate(rows):
        y0 = r * cell_height
        for c, ch in enumerate(row):
            if ch in _SILENT:
                continue
            x0 = c * cell_width
            rule = GLYPH_RULES.get(ch)
            if rule is not None:
                out.append(rule(x0, y0, cell_width, cell_height))
            else:
                out.append(Text(x=x0 + TEXT_OFFSET[0], y=y0 + TEXT_OFFSET[1], character=ch))
    return out


def parse(
    text: str,
    cell_width: float = DEFAULT_CELL_WIDTH,
    cell_height: float = DEFAULT_CELL_HEIGHT,
) -> list[Primitive]:
    """Convert ASCII art into an ordered list of drawing primitives.

    Args:
        text: Newline-delimited rows; rows may differ in length.
        cell_width: Width of one character cell. Must be positive (not checked).
        cell_height: Height of one character cell. Must be positive (not checked).

    Returns:
        Rectangles from bracket pairs, followed by one primitive per
        non-silent character in row-major order.
    """
    rows = split_rows(text)
    boxes = _boxes(rows, cell_width, cell_height)
    glyphs = _glyphs(rows, cell_width, cell_height)
    logger.debug(
        "Parsed grid: %d rows, %d boxes, %d glyph primitives (cell %.1fx%.1f)",
        len(rows),
        len(boxes),
        len(glyphs),
        cell_width,
        cell_height,
    )
    return boxes + glyphs
