# Copyright 2025 Tobias Olenyi.
# SPDX-License-Identifier: Apache-2.0

"""Rendering submodule for protfig."""

from .surface import DrawingSurface, Margins
from .svg_renderer import DiagramRenderer

__all__ = ["DiagramRenderer", "DrawingSurface", "Margins"]
