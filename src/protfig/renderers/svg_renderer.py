# Copyright 2025 Tobias Olenyi.
# SPDX-License-Identifier: Apache-2.0

"""Renders protein domain diagrams and legends to SVG using the drawsvg library."""

import os
from pathlib import Path
from typing import Optional, Sequence, Union

from drawsvg import Drawing, Group

from protfig.core import (
    ColorAssignment,
    DiagramParameters,
    FeatureRecord,
    logger,
)
from protfig.io.errors import OutputFileError
from protfig.layout import (
    DiagramLayout,
    DiagramStyle,
    LegendLayout,
    LegendStyle,
    ProteinRow,
    compute_diagram_layout,
    compute_legend_layout,
)

from .surface import DrawingSurface, Margins


class DiagramRenderer:
    """Renders either a protein/domain diagram or its legend to an SVG Drawing.

    Which of the two is drawn depends on `parameters.legend_mode`. Layout is
    computed first, so malformed input fails before anything is drawn; each
    call to `render` builds a fresh drawing surface.

    Attributes:
        features: Normalized feature records.
        colors: Color assignments by domain.
        parameters: Scale bar length, title and legend mode.
        diagram_style: Style of the diagram.
        legend_style: Style of the legend.
        layout: Layout of the most recent render, None before the first one.
    """

    def __init__(
        self,
        features: Sequence[FeatureRecord],
        colors: Sequence[ColorAssignment],
        parameters: Optional[DiagramParameters] = None,
        diagram_style: Optional[DiagramStyle] = None,
        legend_style: Optional[LegendStyle] = None,
    ):
        self.features = list(features)
        self.colors = list(colors)
        self.parameters = parameters or DiagramParameters()
        self.diagram_style = diagram_style or DiagramStyle()
        self.legend_style = legend_style or LegendStyle()
        self.layout: Optional[Union[DiagramLayout, LegendLayout]] = None

    def compute_layout(self) -> Union[DiagramLayout, LegendLayout]:
        """Lays out the legend or the diagram, depending on the legend mode."""
        if self.parameters.legend_mode:
            return compute_legend_layout(
                self.features, self.colors, self.parameters, self.legend_style
            )
        return compute_diagram_layout(
            self.features, self.colors, self.parameters, self.diagram_style
        )

    def render(self) -> Drawing:
        """Renders the diagram or legend to a drawsvg.Drawing object."""
        layout = self.compute_layout()
        self.layout = layout
        if isinstance(layout, LegendLayout):
            return self._render_legend(layout)
        return self._render_diagram(layout)

    def _render_diagram(self, layout: DiagramLayout) -> Drawing:
        style = self.diagram_style
        text_color = style.text_color.as_hex()

        surface = DrawingSurface(
            x_range=layout.x_range,
            y_range=layout.y_range,
            x_scale=style.residue_width,
            y_scale=style.unit_height,
            margins=Margins(
                left=layout.label_width,
                right=style.margin,
                top=style.margin + style.title_font_size,
                bottom=(
                    style.margin + style.tick_length + 1.5 * style.scalebar_font_size
                ),
            ),
            background_color=(
                style.background_color.as_hex() if style.background_color else None
            ),
        )
        root = Group(id="protfig-root", font_family=style.font_family)
        surface.append(root)

        # 1. Title
        if layout.title is not None:
            root.append(
                surface.text(
                    layout.title,
                    font_size=style.title_font_size,
                    fill=text_color,
                    font_weight="bold",
                    class_="title",
                )
            )

        # 2. Scale bar
        scale_bar = layout.scale_bar
        bar = surface.axis(
            scale_bar.start,
            scale_bar.stop,
            scale_bar.y,
            ticks=(scale_bar.start, scale_bar.stop),
            tick_length=style.tick_length,
            stroke=text_color,
            stroke_width=style.axis_stroke_width,
            class_="scalebar",
        )
        bar.append(
            surface.text(
                scale_bar.label,
                font_size=style.scalebar_font_size,
                fill=text_color,
                dy=style.tick_length + 2,
                dominant_baseline="hanging",
                class_="scalebar-label",
            )
        )
        root.append(bar)

        # 3. Proteins, first one on top
        for row in layout.rows:
            root.append(self._draw_protein_row(surface, row))

        logger.debug(
            f"Rendered {len(layout.rows)} protein row(s) on a "
            f"{surface.width:.0f}x{surface.height:.0f} canvas"
        )
        return surface.drawing

    def _draw_protein_row(self, surface: DrawingSurface, row: ProteinRow) -> Group:
        style = self.diagram_style
        group = Group(class_="protein", data_protein_id=row.protein_id)

        group.append(
            surface.rectangle(
                row.backbone,
                fill=style.backbone_color.as_hex(),
                class_="backbone",
            )
        )
        group.append(
            surface.text(
                row.label,
                font_size=style.label_font_size,
                fill=style.text_color.as_hex(),
                class_="protein-label",
            )
        )
        for block in row.domains:
            group.append(
                surface.rectangle(
                    block.box,
                    fill=block.color,
                    stroke=style.domain_stroke_color.as_hex(),
                    stroke_width=style.domain_stroke_width,
                    class_="domain",
                    data_domain=block.domain,
                )
            )
        return group

    def _render_legend(self, layout: LegendLayout) -> Drawing:
        style = self.legend_style
        text_color = style.text_color.as_hex()

        surface = DrawingSurface(
            x_range=(0.0, layout.width),
            y_range=(0.0, layout.height),
            background_color=(
                style.background_color.as_hex() if style.background_color else None
            ),
        )
        root = Group(id="protfig-legend", font_family=style.font_family)
        surface.append(root)

        if layout.title is not None:
            root.append(
                surface.text(
                    layout.title,
                    font_size=style.title_font_size,
                    fill=text_color,
                    font_weight="bold",
                    class_="title",
                )
            )

        if layout.frame is not None:
            frame_attrs = {"stroke_width": style.border_width}
            if style.border_color is not None:
                frame_attrs["stroke"] = style.border_color.as_hex()
            root.append(
                surface.rectangle(
                    layout.frame, fill="none", class_="legend-frame", **frame_attrs
                )
            )

        for entry in layout.entries:
            item = Group(class_="legend-entry", data_domain=entry.domain)
            item.append(
                surface.rectangle(
                    entry.swatch,
                    fill=entry.color,
                    stroke=text_color,
                    stroke_width=0.5,
                    class_="legend-swatch",
                )
            )
            item.append(
                surface.text(
                    entry.label,
                    font_size=style.font_size,
                    fill=text_color,
                    class_="legend-label",
                )
            )
            root.append(item)

        return surface.drawing

    def save_svg(self, filename: Union[str, Path]) -> None:
        """Renders the figure and saves it to an SVG file.

        Args:
            filename: The path to the output SVG file. Missing parent
                directories are created.

        Raises:
            OutputFileError: If the file cannot be written.
        """
        drawing = self.render()
        output_path = Path(filename)
        try:
            if not output_path.parent.exists():
                os.makedirs(output_path.parent, exist_ok=True)
            drawing.save_svg(str(output_path))
        except OSError as e:
            raise OutputFileError(str(output_path), str(e)) from e
        logger.info(f"SVG saved to {output_path}")

    def get_svg_string(self) -> str:
        """Renders the figure and returns the SVG content as a string."""
        return self.render().as_svg()
