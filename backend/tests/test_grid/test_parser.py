"""Tests for the ASCII grid parser."""

from __future__ import annotations

import pytest

from asciisketch.grid.parser import (
    BOX_PADDING,
    DOT_DIAMETER,
    GLYPH_RULES,
    STROKE_INSET,
    grid_extent,
    parse,
)
from asciisketch.grid.primitives import Circle, Line, Rectangle, Text
from tests.conftest import BOX_SCENE, CLOUD_ARCH, CRLF_SCENE, ROBOT

W, H = 14.0, 24.0


def _of(kind, primitives):
    return [p for p in primitives if isinstance(p, kind)]


def test_empty_text():
    assert parse("", W, H) == []


def test_blank_lines_only():
    assert parse("   \n\n  ", W, H) == []


def test_deterministic():
    assert parse(CLOUD_ARCH, W, H) == parse(CLOUD_ARCH, W, H)


def test_bracket_pair_spans_columns():
    prims = parse("[ab]", W, H)
    boxes = _of(Rectangle, prims)
    assert boxes == [Rectangle(x=BOX_PADDING / 2, y=BOX_PADDING, width=4 * W - BOX_PADDING, height=H - 2 * BOX_PADDING)]


def test_latest_open_bracket_wins():
    boxes = _of(Rectangle, parse("[a[b]", W, H))
    assert len(boxes) == 1
    box = boxes[0]
    assert box.x == 2 * W + BOX_PADDING / 2
    assert box.width == 3 * W - BOX_PADDING


def test_unmatched_open_bracket():
    prims = parse("[abc", W, H)
    assert _of(Rectangle, prims) == []
    assert [t.character for t in _of(Text, prims)] == ["a", "b", "c"]
    assert len(prims) == 3


def test_stray_close_bracket_ignored():
    prims = parse("a]b", W, H)
    assert _of(Rectangle, prims) == []
    assert [t.character for t in prims] == ["a", "b"]


def test_close_then_open_on_same_row():
    boxes = _of(Rectangle, parse("] [x] [y", W, H))
    assert len(boxes) == 1
    assert boxes[0].x == 2 * W + BOX_PADDING / 2


def test_brackets_do_not_pair_across_rows():
    assert _of(Rectangle, parse("[a\nb]", W, H)) == []


def test_two_boxes_on_one_row():
    boxes = _of(Rectangle, parse("[o] [o]", W, H))
    assert [b.x for b in boxes] == [BOX_PADDING / 2, 4 * W + BOX_PADDING / 2]


def test_boxes_come_first():
    prims = parse("x\n[ y ]", W, H)
    assert isinstance(prims[0], Rectangle)
    assert [type(p) for p in prims[1:]] == [Text, Text]


@pytest.mark.parametrize("ch", ["+", "*"])
def test_dot_glyphs(ch):
    assert parse(ch, W, H) == [Circle(x=W / 2, y=H / 2, diameter=DOT_DIAMETER)]


@pytest.mark.parametrize("ch", ["-", "_", "="])
def test_horizontal_glyphs(ch):
    assert parse(ch, W, H) == [Line(x=STROKE_INSET, y=H / 2, x2=W - STROKE_INSET, y2=H / 2)]


def test_vertical_glyph():
    assert parse("|", W, H) == [Line(x=W / 2, y=STROKE_INSET, x2=W / 2, y2=H - STROKE_INSET)]


def test_rising_diagonal():
    (line,) = parse("/", W, H)
    assert (line.x, line.y) == (STROKE_INSET, H - STROKE_INSET)
    assert (line.x2, line.y2) == (W - STROKE_INSET, STROKE_INSET)


def test_falling_diagonal():
    (line,) = parse("\\", W, H)
    assert (line.x, line.y) == (STROKE_INSET, STROKE_INSET)
    assert (line.x2, line.y2) == (W - STROKE_INSET, H - STROKE_INSET)


@pytest.mark.parametrize("ch", [" ", "[", "]", "\r"])
def test_silent_characters(ch):
    assert parse(ch, W, H) == []


@pytest.mark.parametrize("ch", ["Q", "o", "(", "<", ".", "é", "箱"])
def test_other_characters_become_text(ch):
    assert parse(ch, W, H) == [Text(x=2.0, y=2.0, character=ch)]


def test_rule_characters_never_become_text():
    prims = parse("".join(GLYPH_RULES), W, H)
    assert len(prims) == len(GLYPH_RULES)
    assert _of(Text, prims) == []


def test_word_is_split_into_glyphs():
    prims = parse("ROB", W, H)
    assert [(t.x, t.character) for t in prims] == [(2.0, "R"), (16.0, "O"), (30.0, "B")]


def test_row_offset_is_cell_height():
    first, second = parse("|\n|", W, H)
    assert second.y - first.y == H
    assert second.y2 - first.y2 == H
    assert first.x == second.x


def test_rows_do_not_overlap():
    prims = parse("[-|-]\n+/\\*\n[ab]", W, H)
    for p in prims:
        _, ymin, _, ymax = p.bounds
        row = int(ymin // H)
        assert row * H < ymin and ymax < (row + 1) * H


def test_cell_size_scales_geometry():
    small = parse("[ A ]", 10, 20)
    large = parse("[ A ]", 20, 40)
    assert large[0].width == 5 * 20 - BOX_PADDING
    assert small[0].width == 5 * 10 - BOX_PADDING


def test_box_scene():
    prims = parse(BOX_SCENE, W, H)
    assert prims == [
        Rectangle(x=2.0, y=4.0, width=66.0, height=16.0),
        Text(x=30.0, y=2.0, character="A"),
        Line(x=35.0, y=26.0, x2=35.0, y2=46.0),
    ]


def test_carriage_returns_are_silent():
    prims = parse(CRLF_SCENE, W, H)
    assert len(_of(Rectangle, prims)) == 1
    assert [t.character for t in _of(Text, prims)] == ["o", "k"]
    assert len(_of(Line, prims)) == 3


def test_robot_counts():
    prims = parse(ROBOT, W, H)
    assert len(_of(Rectangle, prims)) == 2
    # 2x'o', R, O, B
    assert len(_of(Text, prims)) == 5
    # \___/ is 5, | | is 2, --| |--- is 7
    assert len(_of(Line, prims)) == 14


def test_grid_extent():
    assert grid_extent("") == (0, 0)
    assert grid_extent("ab\nabcd\n") == (3, 4)
    assert grid_extent(CRLF_SCENE) == (3, 4)
