# Copyright 2025 Tobias Olenyi.
# SPDX-License-Identifier: Apache-2.0

"""Layout of the protein/domain diagram.

The layout is expressed in diagram coordinates: x is the amino-acid position
and y the vertical stacking slot, growing upwards from a baseline at 0. A
renderer maps these coordinates onto its drawing surface.
"""

from dataclasses import dataclass, field
from typing import Dict, List, Optional, Sequence, Tuple

from protfig.core import (
    PROTEIN_DOMAIN,
    ColorAssignment,
    DiagramParameters,
    Diagnostics,
    FeatureRecord,
    LayoutError,
    WarningKind,
    logger,
)

from .style import DiagramStyle
from .text import max_text_width

# Thickness of a backbone
PR_HEIGHT = 1.0
# Thickness of a domain block
DOM_HEIGHT = 10.0
# Vertical gap between two protein rows
SEP = 10.0
# Horizontal space left of position 1 and right of the longest protein
X_PADDING = 100.0


@dataclass(frozen=True)
class Box:
    """Axis-aligned rectangle in diagram coordinates."""

    x0: float
    x1: float
    y0: float
    y1: float

    @property
    def width(self) -> float:
        return self.x1 - self.x0

    @property
    def height(self) -> float:
        return self.y1 - self.y0

    @property
    def center_y(self) -> float:
        return (self.y0 + self.y1) / 2

    @staticmethod
    def centered(x0: float, x1: float, y: float, height: float) -> "Box":
        return Box(x0, x1, y - height / 2, y + height / 2)


@dataclass(frozen=True)
class TextPlacement:
    """A piece of text anchored at a point in diagram coordinates."""

    text: str
    x: float
    y: float
    anchor: str = "start"


@dataclass(frozen=True)
class DomainBlock:
    domain: str
    box: Box
    color: str
    has_color_assignment: bool = True


@dataclass
class ProteinRow:
    protein_id: str
    y: float
    length: int
    backbone: Box
    label: TextPlacement
    domains: List[DomainBlock] = field(default_factory=list)


@dataclass(frozen=True)
class ScaleBar:
    start: float
    stop: float
    y: float
    label: TextPlacement


@dataclass
class DiagramLayout:
    """Everything needed to draw a diagram, in diagram coordinates."""

    x_range: Tuple[float, float]
    y_range: Tuple[float, float]
    rows: List[ProteinRow]
    scale_bar: ScaleBar
    title: Optional[TextPlacement]
    label_width: float
    diagnostics: Diagnostics

    def row(self, protein_id: str) -> ProteinRow:
        for row in self.rows:
            if row.protein_id == protein_id:
                return row
        raise KeyError(protein_id)


def format_amount(value: float) -> str:
    """Render a number without a trailing '.0' for whole values."""
    return str(int(value)) if float(value).is_integer() else str(value)


def group_by_protein(
    features: Sequence[FeatureRecord],
) -> Dict[str, List[FeatureRecord]]:
    """Group records by protein id, in order of first appearance."""
    grouped: Dict[str, List[FeatureRecord]] = {}
    for record in features:
        grouped.setdefault(record.protein_id, []).append(record)
    return grouped


def build_color_lookup(colors: Sequence[ColorAssignment]) -> Dict[str, str]:
    """Map domain to color; the first assignment of a domain wins."""
    lookup: Dict[str, str] = {}
    for assignment in colors:
        lookup.setdefault(assignment.domain, assignment.color)
    return lookup


def _check_length_rows(
    grouped: Dict[str, List[FeatureRecord]], diagnostics: Diagnostics
) -> None:
    for protein_id, records in grouped.items():
        length_rows = [r for r in records if r.is_length_row]
        if not length_rows:
            diagnostics.warn(
                WarningKind.MISSING_LENGTH_ROW,
                f"Protein '{protein_id}' is missing a protein-length row.",
                protein_id=protein_id,
            )
        elif len(length_rows) > 1:
            diagnostics.warn(
                WarningKind.DUPLICATE_LENGTH_ROW,
                f"Protein '{protein_id}' has {len(length_rows)} protein-length rows; "
                "using the longest.",
                protein_id=protein_id,
            )


def _check_color_assignments(
    features: Sequence[FeatureRecord],
    color_lookup: Dict[str, str],
    diagnostics: Diagnostics,
) -> None:
    missing = [
        domain
        for domain in dict.fromkeys(f.domain for f in features)
        if domain != PROTEIN_DOMAIN and domain not in color_lookup
    ]
    if missing:
        diagnostics.warn(
            WarningKind.MISSING_COLOR,
            "One or more domains is missing a color assignment: "
            + ", ".join(f"'{d}'" for d in missing),
            domains=tuple(missing),
        )


def check_input(
    features: Sequence[FeatureRecord], colors: Sequence[ColorAssignment]
) -> Diagnostics:
    """Collect warnings about the feature and color tables.

    Both the diagram and the legend run these checks: proteins without (or
    with several) protein-length rows, and domains without a color.
    """
    diagnostics = Diagnostics()
    _check_length_rows(group_by_protein(features), diagnostics)
    _check_color_assignments(features, build_color_lookup(colors), diagnostics)
    return diagnostics


def backbone_length(records: Sequence[FeatureRecord]) -> int:
    """Length of a protein's backbone.

    Taken from the protein-length row (the longest one if there are several).
    Without such a row the backbone spans up to the largest stop coordinate.
    """
    length_rows = [r.length for r in records if r.is_length_row]
    if length_rows:
        return max(length_rows)
    return max(r.stop for r in records)


def compute_diagram_layout(
    features: Sequence[FeatureRecord],
    colors: Sequence[ColorAssignment],
    parameters: Optional[DiagramParameters] = None,
    style: Optional[DiagramStyle] = None,
) -> DiagramLayout:
    """Compute the placement of every element of a protein/domain diagram.

    Rows follow the order in which protein ids first appear in `features`;
    the first protein is placed nearest the top. Advisory problems in the
    input (missing protein-length rows, domains without color) are recorded
    in the returned layout's diagnostics and logged, they do not abort.

    Args:
        features: Normalized feature records.
        colors: Color assignments by domain name.
        parameters: Scale bar length and title; legend_mode is ignored here.
        style: Visual style, used for fallback colors and label metrics.

    Returns:
        The complete diagram layout.

    Raises:
        LayoutError: If there are no feature records.
    """
    if not features:
        raise LayoutError("Cannot lay out a diagram without feature records.")

    parameters = parameters or DiagramParameters()
    style = style or DiagramStyle()
    diagnostics = check_input(features, colors)

    grouped = group_by_protein(features)
    color_lookup = build_color_lookup(colors)
    lengths = {pid: backbone_length(records) for pid, records in grouped.items()}
    scalebar = parameters.scalebar_length

    y_max = len(grouped) * (SEP + DOM_HEIGHT) + SEP * 2.5
    x_min, x_max = -X_PADDING, max(lengths.values()) + X_PADDING
    if x_max <= scalebar:
        x_max = scalebar + 1

    fallback = style.fallback_color.as_hex()
    rows: List[ProteinRow] = []
    y = y_max - SEP / 2
    for protein_id, records in grouped.items():
        y -= SEP + DOM_HEIGHT
        row = ProteinRow(
            protein_id=protein_id,
            y=y,
            length=lengths[protein_id],
            backbone=Box.centered(1, lengths[protein_id], y, PR_HEIGHT),
            label=TextPlacement(protein_id, -X_PADDING, y, anchor="end"),
        )

        domains = dict.fromkeys(r.domain for r in records if not r.is_length_row)
        for domain in domains:
            color = color_lookup.get(domain)
            for record in records:
                if record.domain != domain:
                    continue
                row.domains.append(
                    DomainBlock(
                        domain=domain,
                        box=Box.centered(record.start, record.stop, y, DOM_HEIGHT),
                        color=color if color is not None else fallback,
                        has_color_assignment=color is not None,
                    )
                )
        rows.append(row)
        logger.debug(
            f"Row '{protein_id}' at y={y}: length {row.length}, "
            f"{len(row.domains)} domain block(s)"
        )

    scale_bar = ScaleBar(
        start=0,
        stop=scalebar,
        y=0,
        label=TextPlacement(
            f"{format_amount(scalebar)} aa", scalebar / 2, 0, anchor="middle"
        ),
    )
    title = (
        TextPlacement(parameters.title, 0, y_max, anchor="start")
        if parameters.title
        else None
    )
    label_width = style.label_padding + max_text_width(
        grouped, style.label_font_size, style.char_width_ratio
    )

    return DiagramLayout(
        x_range=(x_min, x_max),
        y_range=(0.0, y_max),
        rows=rows,
        scale_bar=scale_bar,
        title=title,
        label_width=label_width,
        diagnostics=diagnostics,
    )
