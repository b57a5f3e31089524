# Copyright 2025 Tobias Olenyi.
# SPDX-License-Identifier: Apache-2.0

"""Layout computation for diagrams and legends."""

from .style import BaseFigureStyle, DiagramStyle, LegendStyle
from .text import estimate_text_width, max_text_width
from .diagram import (
    DOM_HEIGHT,
    PR_HEIGHT,
    SEP,
    X_PADDING,
    Box,
    DiagramLayout,
    DomainBlock,
    ProteinRow,
    ScaleBar,
    TextPlacement,
    backbone_length,
    check_input,
    compute_diagram_layout,
)
from .legend import (
    LegendEntry,
    LegendLayout,
    compute_legend_layout,
    select_legend_colors,
)

__all__ = [
    "BaseFigureStyle",
    "DiagramStyle",
    "LegendStyle",
    "estimate_text_width",
    "max_text_width",
    "DOM_HEIGHT",
    "PR_HEIGHT",
    "SEP",
    "X_PADDING",
    "Box",
    "DiagramLayout",
    "DomainBlock",
    "ProteinRow",
    "ScaleBar",
    "TextPlacement",
    "backbone_length",
    "check_input",
    "compute_diagram_layout",
    "LegendEntry",
    "LegendLayout",
    "compute_legend_layout",
    "select_legend_colors",
]
