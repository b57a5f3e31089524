# Copyright 2025 Tobias Olenyi.
# SPDX-License-Identifier: Apache-2.0

"""Layout of the standalone legend.

Coordinates are canvas units with y growing upwards from the bottom edge of
the canvas, like the diagram layout.
"""

from dataclasses import dataclass
from typing import List, Optional, Sequence

from protfig.core import (
    ColorAssignment,
    DiagramParameters,
    Diagnostics,
    FeatureRecord,
    logger,
)

from .diagram import Box, TextPlacement, check_input
from .style import LegendStyle
from .text import estimate_text_width, max_text_width


@dataclass(frozen=True)
class LegendEntry:
    domain: str
    color: str
    swatch: Box
    label: TextPlacement


@dataclass
class LegendLayout:
    width: float
    height: float
    entries: List[LegendEntry]
    frame: Optional[Box]
    title: Optional[TextPlacement]
    diagnostics: Diagnostics

    @property
    def domains(self) -> List[str]:
        return [entry.domain for entry in self.entries]


def select_legend_colors(
    features: Sequence[FeatureRecord], colors: Sequence[ColorAssignment]
) -> List[ColorAssignment]:
    """Color assignments whose domain occurs in the feature table.

    Keeps color table order; a domain listed more than once is kept once,
    with its first color.
    """
    used = {f.domain for f in features}
    selected: List[ColorAssignment] = []
    seen = set()
    for assignment in colors:
        if assignment.domain in used and assignment.domain not in seen:
            seen.add(assignment.domain)
            selected.append(assignment)
    return selected


def compute_legend_layout(
    features: Sequence[FeatureRecord],
    colors: Sequence[ColorAssignment],
    parameters: Optional[DiagramParameters] = None,
    style: Optional[LegendStyle] = None,
) -> LegendLayout:
    """Compute the legend key: one swatch and name per used domain.

    The input checks of the diagram run here too, so a domain that drops out
    of the key for lack of a color is reported in the layout's diagnostics.
    """
    parameters = parameters or DiagramParameters(legend_mode=True)
    style = style or LegendStyle()
    diagnostics = check_input(features, colors)

    selected = select_legend_colors(features, colors)
    logger.debug(f"Legend lists {len(selected)} of {len(colors)} color assignments")

    n = len(selected)
    name_width = max_text_width(
        (a.domain for a in selected), style.font_size, style.char_width_ratio
    )
    if n:
        box_width = (
            2 * style.padding + style.swatch_size + style.swatch_gap + name_width
        )
        box_height = (
            2 * style.padding + n * style.swatch_size + (n - 1) * style.row_spacing
        )
    else:
        box_width = box_height = 0.0

    title_width = title_height = 0.0
    if parameters.title:
        title_width = estimate_text_width(
            parameters.title, style.title_font_size, style.char_width_ratio
        )
        title_height = style.title_font_size * 2

    width = 2 * style.margin + max(box_width, title_width)
    height = 2 * style.margin + title_height + box_height

    title = None
    if parameters.title:
        title = TextPlacement(
            parameters.title,
            width / 2,
            height - style.margin - title_height / 2,
            anchor="middle",
        )

    box_top = height - style.margin - title_height
    frame = None
    entries: List[LegendEntry] = []
    if n:
        frame = Box(
            style.margin, style.margin + box_width, box_top - box_height, box_top
        )
        swatch_x = style.margin + style.padding
        for i, assignment in enumerate(selected):
            center_y = (
                box_top
                - style.padding
                - style.swatch_size / 2
                - i * (style.swatch_size + style.row_spacing)
            )
            swatch = Box.centered(
                swatch_x, swatch_x + style.swatch_size, center_y, style.swatch_size
            )
            label = TextPlacement(
                assignment.domain,
                swatch.x1 + style.swatch_gap,
                center_y,
                anchor="start",
            )
            entries.append(
                LegendEntry(assignment.domain, assignment.color, swatch, label)
            )

    return LegendLayout(
        width=width,
        height=height,
        entries=entries,
        frame=frame,
        title=title,
        diagnostics=diagnostics,
    )
