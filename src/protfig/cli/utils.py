# Copyright 2025 Tobias Olenyi.
# SPDX-License-Identifier: Apache-2.0

import logging
from typing import Optional, Annotated
from dataclasses import dataclass
from pathlib import Path

from cyclopts import Parameter, Group, validators

from protfig.core import DiagramWarning, logger
from protfig.core.logger import setup_logging

verbosity_group = Group(
    "Verbosity",
    default_parameter=Parameter(negative=""),  # Disable "--no-" flags
    validator=validators.MutuallyExclusive(),  # Only one option is allowed to be selected.
)


@Parameter(name="*")
@dataclass
class CommonParameters:
    quiet: Annotated[
        bool,
        Parameter(group=verbosity_group, help="Suppress all output except errors."),
    ] = False
    verbose: Annotated[
        bool, Parameter(group=verbosity_group, help="Print additional information.")
    ] = False


def set_logging_level(common: CommonParameters | None = None) -> None:
    if common and common.quiet:
        level = logging.ERROR
    elif common and common.verbose:
        level = logging.DEBUG
    else:
        level = logging.INFO

    setup_logging(level)


def print_success_summary(
    kind: str,
    features_path: Path,
    colors_path: Optional[Path],
    style_path: Optional[Path],
    output_path: Optional[Path],
    warnings: list[DiagramWarning],
) -> None:
    """
    Print a summary of the successful operation.

    Args:
        kind: What was drawn ("diagram" or "legend")
        features_path: Path to the feature table
        colors_path: Path to the color table, or None if default colors were used
        style_path: Path to the style file, or None if using default styles
        output_path: Path to the output SVG file, or None if printing to stdout
        warnings: Warnings emitted while laying out the figure
    """
    logger.info(f"Successfully drew {kind}:")
    logger.info(f"  Feature table: {str(features_path)}")
    logger.info(f"  Colors: {str(colors_path) if colors_path else 'default palette'}")
    if style_path:
        logger.info(f"  Style file: {str(style_path)}")
    logger.info(f"  Output file: {str(output_path) if output_path else 'stdout'}")
    if warnings:
        logger.info(f"  Warnings: {len(warnings)}")
