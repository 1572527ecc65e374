"""Tests for the hand-drawn SVG renderer."""

from __future__ import annotations

import re
import xml.etree.ElementTree as ET

import pytest

from asciisketch.grid.parser import parse
from asciisketch.grid.primitives import Circle, Line, Rectangle, Text
from asciisketch.render.sketch import (
    SketchStyle,
    fit_canvas,
    hachure_segments,
    render_svg,
    render_text,
    to_elements,
)
from tests.conftest import BOX_SCENE, CLOUD_ARCH


def test_render_is_deterministic():
    assert render_text(CLOUD_ARCH) == render_text(CLOUD_ARCH)


def test_seed_changes_strokes():
    prims = parse(CLOUD_ARCH)
    assert render_svg(prims, style=SketchStyle(seed=1)) != render_svg(prims, style=SketchStyle(seed=2))


def test_empty_drawing_gets_margin_canvas():
    svg = render_svg([])
    assert 'viewBox="0 0 16 16"' in svg
    assert "<path" not in svg


def test_fit_canvas_box_scene():
    prims = parse(BOX_SCENE, 14, 24)
    # Rectangle ends at x=68, vertical line at y=46; margin 16.
    assert fit_canvas(prims, font_size=19.2) == (84, 62)
    assert 'viewBox="0 0 84 62"' in render_text(BOX_SCENE, 14, 24)


def test_explicit_canvas_size():
    svg = render_text(BOX_SCENE, width=800, height=600)
    assert 'viewBox="0 0 800 600"' in svg


def test_background():
    svg = render_text(BOX_SCENE, background="white")
    assert 'fill="white"' in svg


def test_rectangle_gets_fill_and_outline():
    style = SketchStyle()
    elements = to_elements([Rectangle(x=2, y=4, width=66, height=16)], style)
    assert len(elements) == 2
    fill, outline = elements
    assert fill["stroke"] == style.box_fill
    assert outline["stroke"] == style.stroke
    # Four edges, each drawn twice.
    assert outline["d"].count("M") == 8


def test_line_is_double_stroked():
    (elem,) = to_elements([Line(x=0, y=0, x2=100, y2=0)])
    assert elem["tag"] == "path"
    assert elem["d"].count("C") == 2
    assert elem["fill"] == "none"


def test_dot_is_filled_outline():
    style = SketchStyle()
    (elem,) = to_elements([Circle(x=7, y=12, diameter=4)], style)
    assert elem["fill"] == style.stroke
    assert elem["d"].endswith("Z")


def test_dot_stays_near_centre():
    (elem,) = to_elements([Circle(x=7, y=12, diameter=4)])
    coords = [float(v) for v in re.findall(r"-?\d+\.\d+", elem["d"])]
    xs, ys = coords[0::2], coords[1::2]
    assert all(abs(x - 7) < 3 for x in xs)
    assert all(abs(y - 12) < 3 for y in ys)


def test_text_element():
    (elem,) = to_elements([Text(x=30, y=2, character="A")], font_size=20)
    assert elem["tag"] == "text"
    assert elem["text"] == "A"
    assert elem["font-size"] == 20
    assert elem["dominant-baseline"] == "hanging"


def test_text_is_escaped_in_document():
    svg = render_text("a<b&")
    assert ">&lt;</text>" in svg
    assert ">&amp;</text>" in svg


def test_boxes_painted_first():
    prims = [Text(x=0, y=0, character="x"), Rectangle(x=0, y=0, width=40, height=16)]
    elements = to_elements(prims)
    assert elements[-1]["tag"] == "text"
    assert all(e["tag"] == "path" for e in elements[:-1])


def test_hachure_segments_inside_box():
    rect = Rectangle(x=2, y=4, width=66, height=16)
    segments = hachure_segments(rect, -41.0, 8.0)
    assert segments
    eps = 1e-9
    for ax, ay, bx, by in segments:
        for x, y in ((ax, ay), (bx, by)):
            assert rect.x - eps <= x <= rect.x + rect.width + eps
            assert rect.y - eps <= y <= rect.y + rect.height + eps


def test_hachure_degenerate_box():
    assert hachure_segments(Rectangle(x=0, y=0, width=0, height=10), -41.0, 8.0) == []


def test_roughness_zero_is_straight():
    (elem,) = to_elements([Line(x=0, y=10, x2=100, y2=10)], SketchStyle(roughness=0))
    coords = [float(v) for v in re.findall(r"-?\d+\.\d+", elem["d"])]
    assert all(y == 10.0 for y in coords[1::2])


@pytest.mark.parametrize("ch", ["\x01", "\x08", "\x0b", "\x0c", "\x1f", "\ufffe", "\ud800"])
def test_control_characters_keep_svg_well_formed(ch):
    svg = render_text(f"a{ch}b", 14, 24)
    root = ET.fromstring(svg.encode("utf-8"))
    glyphs = [el.text for el in root.iter("{http://www.w3.org/2000/svg}text")]
    assert glyphs == ["a", "\ufffd", "b"]
