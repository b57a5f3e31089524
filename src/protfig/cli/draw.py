# Copyright 2025 Tobias Olenyi.
# SPDX-License-Identifier: Apache-2.0

from pathlib import Path
from typing import Optional, Annotated

from cyclopts import Parameter

from protfig.composer import renderer_from_files
from protfig.core import logger
from protfig.io import validate_optional_files
from protfig.renderers import DiagramRenderer
from .errors import error_handler, InvalidArgumentError
from .utils import set_logging_level, CommonParameters, print_success_summary


def _write_output(renderer: DiagramRenderer, output: Optional[Path]) -> None:
    if output is not None:
        renderer.save_svg(output)
    else:
        print(renderer.get_svg_string())


@error_handler
def draw_diagram(
    features: Path,
    colors: Optional[Path] = None,
    output: Annotated[Optional[Path], Parameter(name=["-o", "--output"])] = None,
    scalebar: float = 500,
    title: Optional[str] = None,
    style: Optional[Path] = None,
    *,
    common: CommonParameters | None = None,
) -> int:
    """
    Draw proteins as backbones with their domains as colored blocks.

    Args:
        features: CSV feature table with the columns protein_id, domain, start
            and stop. Each protein should have one row with the domain
            'protein' giving its length (start 1, stop = length).
        colors: CSV color table with the columns domain and color.
            If not provided, domains are colored from a colorblind-safe palette.
        output: Path to save the SVG output.
            If not provided, the SVG is printed to stdout.
            The directory will be created if it doesn't exist.
        scalebar: Length of the scale bar in amino acids.
        title: Title drawn above the diagram.
        style: Path to a TOML style file with [diagram] and [legend] sections.
    Returns:
        int: 0 for success, 1 for errors.
    Examples:
        Basic usage:
            protfig diagram features.csv colors.csv -o diagram.svg
        With a title and a longer scale bar:
            protfig diagram features.csv colors.csv -o diagram.svg --title "Kinases" --scalebar 1000
    """
    set_logging_level(common)

    if scalebar <= 0:
        raise InvalidArgumentError("--scalebar", f"must be positive, got {scalebar}")

    validate_optional_files([features, colors, style])

    renderer = renderer_from_files(
        features, colors, style, scalebar=scalebar, title=title, legend=False
    )
    _write_output(renderer, output)

    warnings = renderer.layout.diagnostics.warnings
    print_success_summary("diagram", features, colors, style, output, warnings)
    return 0


@error_handler
def draw_legend(
    features: Path,
    colors: Optional[Path] = None,
    output: Annotated[Optional[Path], Parameter(name=["-o", "--output"])] = None,
    title: Optional[str] = None,
    style: Optional[Path] = None,
    *,
    common: CommonParameters | None = None,
) -> int:
    """
    Draw the legend of a diagram: one color swatch per domain in use.

    Args:
        features: CSV feature table with the columns protein_id, domain, start and stop.
        colors: CSV color table with the columns domain and color.
            If not provided, domains are colored from a colorblind-safe palette.
        output: Path to save the SVG output.
            If not provided, the SVG is printed to stdout.
        title: Title drawn above the legend.
        style: Path to a TOML style file with [diagram] and [legend] sections.
    Returns:
        int: 0 for success, 1 for errors.
    Examples:
        protfig legend features.csv colors.csv -o legend.svg --title "Domains"
    """
    set_logging_level(common)
    validate_optional_files([features, colors, style])

    renderer = renderer_from_files(features, colors, style, title=title, legend=True)
    _write_output(renderer, output)

    logger.debug(f"Legend entries: {', '.join(renderer.layout.domains)}")
    warnings = renderer.layout.diagnostics.warnings
    print_success_summary("legend", features, colors, style, output, warnings)
    return 0
