# Copyright 2025 Tobias Olenyi.
# SPDX-License-Identifier: Apache-2.0

"""A drawsvg canvas addressed in layout coordinates."""

from dataclasses import dataclass
from typing import Any, Optional, Sequence, Tuple

from drawsvg import Drawing, Group, Line, Rectangle, Text

from protfig.layout import Box, TextPlacement


@dataclass(frozen=True)
class Margins:
    """Canvas space around the plotted region, in canvas units."""

    left: float = 0.0
    right: float = 0.0
    top: float = 0.0
    bottom: float = 0.0


class DrawingSurface:
    """Owns one SVG drawing and maps layout coordinates onto it.

    Layout coordinates have y growing upwards; the surface flips them into SVG
    canvas coordinates. Every surface is configured entirely by its
    constructor arguments, so two renders never share state.

    Attributes:
        x_range: Layout x interval shown on the canvas.
        y_range: Layout y interval shown on the canvas.
        x_scale: Canvas units per layout x unit.
        y_scale: Canvas units per layout y unit.
        margins: Canvas space around the plotted region.
        width: Total canvas width.
        height: Total canvas height.
        drawing: The underlying drawsvg.Drawing.
    """

    def __init__(
        self,
        x_range: Tuple[float, float],
        y_range: Tuple[float, float],
        x_scale: float = 1.0,
        y_scale: float = 1.0,
        margins: Optional[Margins] = None,
        background_color: Optional[str] = None,
        background_opacity: float = 1.0,
    ):
        if x_range[1] < x_range[0] or y_range[1] < y_range[0]:
            raise ValueError(f"Invalid surface ranges: x={x_range}, y={y_range}")

        self.x_range = x_range
        self.y_range = y_range
        self.x_scale = x_scale
        self.y_scale = y_scale
        self.margins = margins or Margins()

        self.width = (
            self.margins.left + (x_range[1] - x_range[0]) * x_scale + self.margins.right
        )
        self.height = (
            self.margins.top + (y_range[1] - y_range[0]) * y_scale + self.margins.bottom
        )
        self.drawing = Drawing(self.width, self.height)
        self.drawing.view_box = (0, 0, self.width, self.height)

        if background_color:
            self.drawing.append(
                Rectangle(
                    0,
                    0,
                    self.width,
                    self.height,
                    fill=background_color,
                    opacity=background_opacity,
                    class_="background",
                )
            )

    def to_canvas(self, x: float, y: float) -> Tuple[float, float]:
        """Convert a layout point into canvas coordinates."""
        canvas_x = self.margins.left + (x - self.x_range[0]) * self.x_scale
        canvas_y = self.margins.top + (self.y_range[1] - y) * self.y_scale
        return canvas_x, canvas_y

    def rectangle(self, box: Box, fill: str, **attrs: Any) -> Rectangle:
        """Create a filled rectangle covering `box`."""
        ax, ay = self.to_canvas(box.x0, box.y0)
        bx, by = self.to_canvas(box.x1, box.y1)
        return Rectangle(
            min(ax, bx), min(ay, by), abs(bx - ax), abs(by - ay), fill=fill, **attrs
        )

    def text(
        self,
        placement: TextPlacement,
        font_size: float,
        fill: str,
        dx: float = 0.0,
        dy: float = 0.0,
        **attrs: Any,
    ) -> Text:
        """Create a text element; `dx`/`dy` shift it in canvas units."""
        x, y = self.to_canvas(placement.x, placement.y)
        attrs.setdefault("dominant_baseline", "middle")
        return Text(
            text=placement.text,
            font_size=font_size,
            x=x + dx,
            y=y + dy,
            fill=fill,
            text_anchor=placement.anchor,
            **attrs,
        )

    def axis(
        self,
        start: float,
        stop: float,
        y: float,
        ticks: Sequence[float],
        tick_length: float,
        stroke: str,
        stroke_width: float = 1.0,
        **attrs: Any,
    ) -> Group:
        """Create a horizontal axis line with downward tick marks, no labels."""
        sx, sy = self.to_canvas(start, y)
        ex, _ = self.to_canvas(stop, y)
        group = Group(**attrs)
        group.append(
            Line(
                sx,
                sy,
                ex,
                sy,
                stroke=stroke,
                stroke_width=stroke_width,
                class_="axis-line",
            )
        )
        for tick in ticks:
            tx, _ = self.to_canvas(tick, y)
            group.append(
                Line(
                    tx,
                    sy,
                    tx,
                    sy + tick_length,
                    stroke=stroke,
                    stroke_width=stroke_width,
                    class_="axis-tick",
                )
            )
        return group

    def append(self, element: Any) -> None:
        self.drawing.append(element)
