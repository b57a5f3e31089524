# Copyright 2025 Tobias Olenyi.
# SPDX-License-Identifier: Apache-2.0

"""Visual style definitions for diagrams and legends."""

from typing import Optional

from pydantic import BaseModel, Field
from pydantic_extra_types.color import Color


class BaseFigureStyle(BaseModel):
    """Properties shared by diagram and legend figures."""

    font_family: str = Field(default="Arial", description="Font family for all text.")
    text_color: Color = Field(
        default=Color((0, 0, 0)), description="Color for all text. Black."
    )
    title_font_size: float = Field(
        default=15.0, gt=0, description="Font size for the title."
    )
    background_color: Optional[Color] = Field(
        default=Color((255, 255, 255)),
        description="Canvas background. None for transparent.",
    )
    char_width_ratio: float = Field(
        default=0.6,
        gt=0,
        description="Average glyph width relative to the font size, used to size text boxes.",
    )

    model_config = {"extra": "forbid"}


class DiagramStyle(BaseFigureStyle):
    """Style of the protein/domain diagram."""

    backbone_color: Color = Field(
        default=Color((0, 0, 0)), description="Fill color of the backbones. Black."
    )
    fallback_color: Color = Field(
        default=Color((190, 190, 190)),
        description="Fill color for domains without a color assignment. Grey.",
    )
    domain_stroke_color: Color = Field(
        default=Color((0, 0, 0)), description="Outline color of domain blocks."
    )
    domain_stroke_width: float = Field(
        default=0.5, ge=0.0, description="Outline width of domain blocks."
    )
    label_font_size: float = Field(
        default=12.0, gt=0, description="Font size for protein labels."
    )
    scalebar_font_size: float = Field(
        default=12.0, gt=0, description="Font size for the scale bar annotation."
    )
    residue_width: float = Field(
        default=1.0, gt=0, description="Canvas units per amino acid."
    )
    unit_height: float = Field(
        default=2.0, gt=0, description="Canvas units per vertical layout unit."
    )
    label_padding: float = Field(
        default=36.0,
        ge=0.0,
        description="Space left of the widest protein label, in canvas units.",
    )
    margin: float = Field(
        default=20.0, ge=0.0, description="Outer margin of the canvas."
    )
    tick_length: float = Field(
        default=6.0, ge=0.0, description="Length of the scale bar ticks."
    )
    axis_stroke_width: float = Field(
        default=1.0, gt=0, description="Line width of the scale bar."
    )


class LegendStyle(BaseFigureStyle):
    """Style of the standalone legend."""

    font_size: float = Field(default=9.6, gt=0, description="Font size of entries.")
    swatch_size: float = Field(
        default=12.0, gt=0, description="Edge length of the color swatches."
    )
    swatch_gap: float = Field(
        default=8.0, ge=0.0, description="Space between swatch and domain name."
    )
    row_spacing: float = Field(
        default=6.0, ge=0.0, description="Vertical space between entries."
    )
    padding: float = Field(
        default=10.0, ge=0.0, description="Space inside the legend box."
    )
    margin: float = Field(
        default=20.0, ge=0.0, description="Space around the legend box."
    )
    border_color: Optional[Color] = Field(
        default=Color((0, 0, 0)), description="Legend box outline. None to omit."
    )
    border_width: float = Field(default=1.0, ge=0.0)
