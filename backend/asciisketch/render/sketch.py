"""Hand-drawn SVG rendering of grid primitives.

Strokes are drawn twice as slightly wobbly cubic Beziers, boxes get a hachure
fill, dots are jittered outlines. All randomness comes from one seeded
generator per render call, so output is reproducible.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Any

import numpy as np
from shapely.geometry import LineString, box

from asciisketch.grid.parser import DEFAULT_CELL_HEIGHT, DEFAULT_CELL_WIDTH, parse
from asciisketch.grid.primitives import Circle, Line, Primitive, Rectangle, Text, paint_order
from asciisketch.svg.serializer import serialize_svg

logger = logging.getLogger(__name__)

# Upper bound on endpoint/control jitter before roughness scaling.
_MAX_RANDOMNESS_OFFSET = 2.0

# Jitter never exceeds this fraction of the stroke length.
_MAX_OFFSET_FRACTION = 0.1

# Sideways bow of each stroke, as a fraction of its length.
_BOWING = 1.0 / 100

# Second pass of a double stroke wobbles a bit more.
_SECOND_PASS_GAIN = 1.5

# Outline points for a dot; 12 is smooth enough at dot sizes.
_DOT_SEGMENTS = 12
_DOT_RADIUS_JITTER = 0.08

# Font size relative to cell height when rendering straight from text.
FONT_SCALE = 0.8

# Average glyph advance relative to font size (sans-serif).
_GLYPH_ASPECT = 0.6


@dataclass(frozen=True)
class SketchStyle:
    roughness: float = 1.5
    stroke: str = "#1e1e1e"
    stroke_width: float = 2.0
    seed: int = 42
    box_fill: str = "rgba(99, 102, 241, 0.35)"
    hachure_angle: float = -41.0
    hachure_gap: float = 8.0
    hachure_width: float = 1.0
    font_family: str = '"Segoe UI", Tahoma, Geneva, Verdana, sans-serif'
    font_size: float = 18.0
    margin: float = 16.0


DEFAULT_STYLE = SketchStyle()


def _pt(x: float, y: float) -> str:
    return f"{x:.2f} {y:.2f}"


def _rough_stroke(
    rng: np.random.Generator,
    x1: float,
    y1: float,
    x2: float,
    y2: float,
    roughness: float,
    gain: float = 1.0,
) -> str:
    """One wobbly cubic from (x1, y1) to (x2, y2) as path data."""
    length = math.hypot(x2 - x1, y2 - y1)
    offset = min(_MAX_RANDOMNESS_OFFSET, length * _MAX_OFFSET_FRACTION) * roughness * gain
    j = rng.uniform(-offset, offset, size=8) if offset > 0 else np.zeros(8)

    bow_x = (y2 - y1) * _BOWING * roughness + j[0] / 2
    bow_y = (x1 - x2) * _BOWING * roughness + j[1] / 2
    divergence = 0.2 + rng.random() * 0.2

    sx, sy = x1 + j[2], y1 + j[3]
    ex, ey = x2 + j[4], y2 + j[5]
    c1x = x1 + (x2 - x1) * divergence + bow_x + j[6]
    c1y = y1 + (y2 - y1) * divergence + bow_y + j[7]
    c2x = x1 + 2 * (x2 - x1) * divergence + bow_x
    c2y = y1 + 2 * (y2 - y1) * divergence + bow_y
    return f"M{_pt(sx, sy)} C{_pt(c1x, c1y)} {_pt(c2x, c2y)} {_pt(ex, ey)}"


def _double_stroke(rng: np.random.Generator, x1: float, y1: float, x2: float, y2: float, roughness: float) -> str:
    first = _rough_stroke(rng, x1, y1, x2, y2, roughness)
    second = _rough_stroke(rng, x1, y1, x2, y2, roughness, gain=_SECOND_PASS_GAIN)
    return f"{first} {second}"


def _stroke_attrs(style: SketchStyle) -> dict[str, Any]:
    return {
        "stroke": style.stroke,
        "stroke-width": style.stroke_width,
        "fill": "none",
        "stroke-linecap": "round",
        "stroke-linejoin": "round",
    }


def hachure_segments(
    rect: Rectangle,
    angle_deg: float,
    gap: float,
) -> list[tuple[float, float, float, float]]:
    """Parallel fill lines at ``angle_deg``, ``gap`` apart, clipped to the box."""
    if rect.width <= 0 or rect.height <= 0 or gap <= 0:
        return []

    outline = box(rect.x, rect.y, rect.x + rect.width, rect.y + rect.height)
    cx, cy = rect.x + rect.width / 2, rect.y + rect.height / 2
    reach = math.hypot(rect.width, rect.height)
    theta = math.radians(angle_deg)
    dx, dy = math.cos(theta), math.sin(theta)
    nx, ny = -dy, dx

    steps = int(reach / 2 // gap)
    segments: list[tuple[float, float, float, float]] = []
    for k in np.arange(-steps, steps + 1):
        ox, oy = cx + nx * k * gap, cy + ny * k * gap
        ray = LineString([(ox - dx * reach, oy - dy * reach), (ox + dx * reach, oy + dy * reach)])
        clipped = outline.intersection(ray)
        if clipped.is_empty or clipped.geom_type != "LineString":
            continue
        (ax, ay), (bx, by) = clipped.coords[0], clipped.coords[-1]
        segments.append((ax, ay, bx, by))
    return segments


def _rectangle_elements(rng: np.random.Generator, rect: Rectangle, style: SketchStyle) -> list[dict[str, Any]]:
    elements: list[dict[str, Any]] = []

    fill_strokes = [
        _rough_stroke(rng, ax, ay, bx, by, style.roughness)
        for ax, ay, bx, by in hachure_segments(rect, style.hachure_angle, style.hachure_gap)
    ]
    if fill_strokes:
        elements.append({
            "tag": "path",
            "d": " ".join(fill_strokes),
            "stroke": style.box_fill,
            "stroke-width": style.hachure_width,
            "fill": "none",
            "stroke-linecap": "round",
        })

    x0, y0, x1, y1 = rect.bounds
    corners = [(x0, y0), (x1, y0), (x1, y1), (x0, y1)]
    edges = [
        _double_stroke(rng, *corners[i], *corners[(i + 1) % 4], style.roughness)
        for i in range(4)
    ]
    elements.append({"tag": "path", "d": " ".join(edges), **_stroke_attrs(style)})
    return elements


def _circle_element(rng: np.random.Generator, dot: Circle, style: SketchStyle) -> dict[str, Any]:
    angles = np.linspace(0.0, 2.0 * np.pi, _DOT_SEGMENTS, endpoint=False)
    radii = dot.radius * (1.0 + rng.uniform(-_DOT_RADIUS_JITTER, _DOT_RADIUS_JITTER, size=_DOT_SEGMENTS) * style.roughness)
    xs = dot.x + radii * np.cos(angles)
    ys = dot.y + radii * np.sin(angles)
    d = "M" + " L".join(_pt(float(x), float(y)) for x, y in zip(xs, ys)) + " Z"
    return {
        "tag": "path",
        "d": d,
        "stroke": style.stroke,
        "stroke-width": style.stroke_width / 2,
        "fill": style.stroke,
        "stroke-linejoin": "round",
    }


def _text_element(glyph: Text, style: SketchStyle, font_size: float) -> dict[str, Any]:
    return {
        "tag": "text",
        "x": float(glyph.x),
        "y": float(glyph.y),
        "font-family": style.font_family,
        "font-size": float(font_size),
        "fill": style.stroke,
        "dominant-baseline": "hanging",
        "text": glyph.character,
    }


def to_elements(
    primitives: list[Primitive],
    style: SketchStyle = DEFAULT_STYLE,
    font_size: float | None = None,
) -> list[dict[str, Any]]:
    """SVG element dicts for the primitives, in paint order."""
    rng = np.random.default_rng(style.seed)
    size = font_size if font_size is not None else style.font_size
    elements: list[dict[str, Any]] = []

    for prim in paint_order(primitives):
        if isinstance(prim, Rectangle):
            elements.extend(_rectangle_elements(rng, prim, style))
        elif isinstance(prim, Line):
            d = _double_stroke(rng, prim.x, prim.y, prim.x2, prim.y2, style.roughness)
            elements.append({"tag": "path", "d": d, **_stroke_attrs(style)})
        elif isinstance(prim, Circle):
            elements.append(_circle_element(rng, prim, style))
        elif isinstance(prim, Text):
            elements.append(_text_element(prim, style, size))
    return elements


def fit_canvas(
    primitives: list[Primitive],
    style: SketchStyle = DEFAULT_STYLE,
    font_size: float | None = None,
) -> tuple[float, float]:
    """Canvas size that holds every primitive plus the style margin."""
    size = font_size if font_size is not None else style.font_size
    max_x, max_y = 0.0, 0.0
    for prim in primitives:
        _, _, x1, y1 = prim.bounds
        if isinstance(prim, Text):
            x1 += size * _GLYPH_ASPECT
            y1 += size
        max_x, max_y = max(max_x, x1), max(max_y, y1)
    return (math.ceil(max_x + style.margin), math.ceil(max_y + style.margin))


def render_svg(
    primitives: list[Primitive],
    width: float | None = None,
    height: float | None = None,
    *,
    style: SketchStyle = DEFAULT_STYLE,
    font_size: float | None = None,
    background: str | None = None,
) -> str:
    """Render primitives as a hand-drawn SVG document.

    A missing ``width`` or ``height`` is fitted to the drawing.
    """
    if width is None or height is None:
        fit_w, fit_h = fit_canvas(primitives, style, font_size)
        width = fit_w if width is None else width
        height = fit_h if height is None else height

    elements = to_elements(primitives, style, font_size)
    logger.debug("Rendered %d primitives into %d SVG elements (%.0fx%.0f)",
                 len(primitives), len(elements), width, height)
    return serialize_svg(elements, canvas_w=width, canvas_h=height, background=background)


def render_text(
    text: str,
    cell_width: float = DEFAULT_CELL_WIDTH,
    cell_height: float = DEFAULT_CELL_HEIGHT,
    width: float | None = None,
    height: float | None = None,
    *,
    style: SketchStyle = DEFAULT_STYLE,
    background: str | None = None,
) -> str:
    """Parse ASCII art and render it in one step; glyphs scale with the cell height."""
    primitives = parse(text, cell_width, cell_height)
    return render_svg(
        primitives,
        width,
        height,
        style=style,
        font_size=cell_height * FONT_SCALE,
        background=background,
    )
