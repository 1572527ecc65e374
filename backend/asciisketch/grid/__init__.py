"""ASCII grid parser: text in, drawing primitives out."""

from asciisketch.grid.parser import grid_extent, parse
from asciisketch.grid.primitives import Circle, Line, Primitive, Rectangle, Text

__all__ = [
    "parse",
    "grid_extent",
    "Primitive",
    "Line",
    "Rectangle",
    "Circle",
    "Text",
]
