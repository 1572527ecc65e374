"""Drawing primitives emitted by the grid parser.

Each primitive is immutable and positioned in abstract drawing units. ``kind``
tags the variant for JSON consumers; ``layer`` fixes paint order (boxes sit
beneath strokes, dots and glyphs).
"""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any, ClassVar, Union

# Paint layers: lower paints first.
LAYER_BOX = 0
LAYER_STROKE = 1


@dataclass(frozen=True)
class Line:
    x: float
    y: float
    x2: float
    y2: float

    kind: ClassVar[str] = "line"
    layer: ClassVar[int] = LAYER_STROKE

    @property
    def bounds(self) -> tuple[float, float, float, float]:
        return (min(self.x, self.x2), min(self.y, self.y2), max(self.x, self.x2), max(self.y, self.y2))

    def to_dict(self) -> dict[str, Any]:
        return {"kind": self.kind, **asdict(self)}


@dataclass(frozen=True)
class Rectangle:
    """Axis-aligned box anchored at its top-left corner."""

    x: float
    y: float
    width: float
    height: float

    kind: ClassVar[str] = "rectangle"
    layer: ClassVar[int] = LAYER_BOX

    @property
    def bounds(self) -> tuple[float, float, float, float]:
        return (self.x, self.y, self.x + self.width, self.y + self.height)

    def to_dict(self) -> dict[str, Any]:
        return {"kind": self.kind, **asdict(self)}


@dataclass(frozen=True)
class Circle:
    """Small dot centred at (x, y)."""

    x: float
    y: float
    diameter: float

    kind: ClassVar[str] = "circle"
    layer: ClassVar[int] = LAYER_STROKE

    @property
    def radius(self) -> float:
        return self.diameter / 2

    @property
    def bounds(self) -> tuple[float, float, float, float]:
        r = self.radius
        return (self.x - r, self.y - r, self.x + r, self.y + r)

    def to_dict(self) -> dict[str, Any]:
        return {"kind": self.kind, **asdict(self)}


@dataclass(frozen=True)
class Text:
    """One source character, anchored at the glyph's top-left."""

    x: float
    y: float
    character: str

    kind: ClassVar[str] = "text"
    layer: ClassVar[int] = LAYER_STROKE

    @property
    def bounds(self) -> tuple[float, float, float, float]:
        # Glyph extent depends on the renderer's font; the anchor is all we know.
        return (self.x, self.y, self.x, self.y)

    def to_dict(self) -> dict[str, Any]:
        return {"kind": self.kind, **asdict(self)}


Primitive = Union[Line, Rectangle, Circle, Text]


def paint_order(primitives: list[Primitive]) -> list[Primitive]:
    """Stable sort by layer: boxes first, emission order kept within a layer."""
    return sorted(primitives, key=lambda p: p.layer)
