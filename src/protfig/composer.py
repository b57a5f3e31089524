# Copyright 2025 Tobias Olenyi.
# SPDX-License-Identifier: Apache-2.0

"""High-level entry points composing loading, layout and rendering."""

from pathlib import Path
from typing import Optional, Sequence, Union

from drawsvg import Drawing

from protfig.core import ColorAssignment, DiagramParameters, FeatureRecord, logger
from protfig.io import (
    StyleParser,
    default_color_table,
    load_color_table,
    load_feature_table,
)
from protfig.layout import DiagramStyle, LegendStyle
from protfig.renderers import DiagramRenderer


def create_renderer(
    features: Sequence[FeatureRecord],
    colors: Optional[Sequence[ColorAssignment]] = None,
    scalebar: float = 500,
    title: Optional[str] = None,
    legend: bool = False,
    diagram_style: Optional[DiagramStyle] = None,
    legend_style: Optional[LegendStyle] = None,
) -> DiagramRenderer:
    """Create a renderer for a diagram (or its legend when `legend` is set).

    Without `colors`, every domain gets a color from the default palette.
    """
    if colors is None:
        colors = default_color_table(features)
        logger.debug(f"Assigned default colors to {len(colors)} domain(s)")

    parameters = DiagramParameters(
        scalebar_length=scalebar, title=title, legend_mode=legend
    )
    return DiagramRenderer(
        features,
        colors,
        parameters,
        diagram_style=diagram_style,
        legend_style=legend_style,
    )


def make_protein_figure(
    features: Sequence[FeatureRecord],
    colors: Optional[Sequence[ColorAssignment]] = None,
    scalebar: float = 500,
    title: Optional[str] = None,
    legend: bool = False,
    diagram_style: Optional[DiagramStyle] = None,
    legend_style: Optional[LegendStyle] = None,
) -> Drawing:
    """Draw the protein/domain diagram, or its legend when `legend` is set."""
    return create_renderer(
        features, colors, scalebar, title, legend, diagram_style, legend_style
    ).render()


def renderer_from_files(
    features_path: Union[str, Path],
    colors_path: Optional[Union[str, Path]] = None,
    style_path: Optional[Union[str, Path]] = None,
    scalebar: float = 500,
    title: Optional[str] = None,
    legend: bool = False,
) -> DiagramRenderer:
    """Load the CSV tables and optional TOML style file and build a renderer."""
    features = load_feature_table(features_path)
    colors = load_color_table(colors_path) if colors_path is not None else None

    diagram_style = legend_style = None
    if style_path is not None:
        parser = StyleParser(style_path)
        diagram_style = parser.get_diagram_style()
        legend_style = parser.get_legend_style()

    return create_renderer(
        features,
        colors,
        scalebar=scalebar,
        title=title,
        legend=legend,
        diagram_style=diagram_style,
        legend_style=legend_style,
    )
