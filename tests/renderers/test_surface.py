# Copyright 2025 Tobias Olenyi.
# SPDX-License-Identifier: Apache-2.0

"""Tests for the drawing surface."""

import pytest

from protfig.layout import Box, TextPlacement
from protfig.renderers import DrawingSurface, Margins
from svg_helpers import elements_with_class, parse_svg


@pytest.fixture
def surface() -> DrawingSurface:
    return DrawingSurface(
        x_range=(0, 100),
        y_range=(0, 50),
        x_scale=2.0,
        margins=Margins(left=10, right=5, top=4, bottom=6),
    )


def test_canvas_size_includes_margins(surface: DrawingSurface):
    assert surface.width == 10 + 200 + 5
    assert surface.height == 4 + 50 + 6


def test_to_canvas_flips_y(surface: DrawingSurface):
    assert surface.to_canvas(0, 50) == (10, 4)
    assert surface.to_canvas(100, 0) == (210, 54)
    assert surface.to_canvas(50, 25) == (110, 29)


def test_rectangle_covers_box(surface: DrawingSurface):
    surface.append(surface.rectangle(Box(10, 20, 0, 10), fill="#ff0000", class_="r"))
    (rect,) = elements_with_class(parse_svg(surface.drawing.as_svg()), "r")

    assert float(rect.get("x")) == 30
    assert float(rect.get("y")) == 44
    assert float(rect.get("width")) == 20
    assert float(rect.get("height")) == 10
    assert rect.get("fill") == "#ff0000"


def test_text_uses_anchor_and_offsets(surface: DrawingSurface):
    placement = TextPlacement("label", 0, 50, anchor="end")
    surface.append(surface.text(placement, 12, "black", dx=-3, class_="t"))
    (text,) = elements_with_class(parse_svg(surface.drawing.as_svg()), "t")

    assert text.text == "label"
    assert text.get("text-anchor") == "end"
    assert text.get("dominant-baseline") == "middle"
    assert float(text.get("x")) == 7
    assert float(text.get("y")) == 4


def test_axis_has_line_and_ticks(surface: DrawingSurface):
    surface.append(
        surface.axis(0, 100, 0, ticks=(0, 50, 100), tick_length=5, stroke="black")
    )
    root = parse_svg(surface.drawing.as_svg())

    (line,) = elements_with_class(root, "axis-line")
    assert (float(line.get("x1")), float(line.get("x2"))) == (10, 210)
    ticks = elements_with_class(root, "axis-tick")
    assert len(ticks) == 3
    assert all(float(t.get("y2")) - float(t.get("y1")) == 5 for t in ticks)


def test_background_is_optional():
    plain = DrawingSurface((0, 10), (0, 10))
    filled = DrawingSurface((0, 10), (0, 10), background_color="#ffffff")

    assert elements_with_class(parse_svg(plain.drawing.as_svg()), "background") == []
    assert len(elements_with_class(parse_svg(filled.drawing.as_svg()), "background")) == 1


def test_inverted_range_is_rejected():
    with pytest.raises(ValueError):
        DrawingSurface((10, 0), (0, 10))
