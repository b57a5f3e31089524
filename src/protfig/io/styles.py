# Copyright 2025 Tobias Olenyi.
# SPDX-License-Identifier: Apache-2.0

"""Parser for diagram and legend style definitions in TOML format."""

from pathlib import Path
from typing import Dict, Union

import toml
from pydantic import ValidationError

from protfig.core import logger
from protfig.layout.style import BaseFigureStyle, DiagramStyle, LegendStyle

from .errors import (
    StyleParsingError,
    InvalidTomlError,
    StyleValidationError,
    StyleFileNotFoundError,
)


class StyleParser:
    """Parser for TOML style files with `[diagram]` and `[legend]` sections."""

    # Define known sections and their corresponding Pydantic models
    KNOWN_SECTIONS = {
        "diagram": DiagramStyle,
        "legend": LegendStyle,
    }

    def __init__(self, file_path: Union[str, Path]):
        """Initialize the style parser.

        Args:
            file_path: Path to the TOML style file

        Raises:
            StyleFileNotFoundError: If the file doesn't exist
            InvalidTomlError: If the TOML is malformed
        """
        self.file_path = Path(file_path)
        if not self.file_path.exists():
            raise StyleFileNotFoundError(str(self.file_path))

        try:
            with open(self.file_path, "r") as f:
                self.raw_style_data = toml.load(f)
        except toml.TomlDecodeError as e:
            raise InvalidTomlError(f"Invalid TOML format: {e}") from e

        self._validate_structure()

    def _validate_structure(self) -> None:
        """Checks for unknown top-level sections in the style file."""
        unknown_sections = [
            section
            for section in self.raw_style_data
            if section not in self.KNOWN_SECTIONS
        ]

        if unknown_sections:
            # This is just a warning, not an error
            logger.warning(
                f"Unknown style sections found and ignored: {', '.join(unknown_sections)}"
            )

    def parse(self) -> Dict[str, BaseFigureStyle]:
        """Parses the known sections from the TOML file into Pydantic style objects.

        Returns:
            A dictionary mapping section names ('diagram', 'legend') to their
            style model instances. Sections missing from the file are omitted.

        Raises:
            StyleValidationError: If any style section has invalid data according to
                                  its Pydantic model.
            StyleParsingError: For other general parsing issues.
        """
        parsed_styles: Dict[str, BaseFigureStyle] = {}

        for section_name, StyleModelClass in self.KNOWN_SECTIONS.items():
            section_data = self.raw_style_data.get(section_name)

            if section_data is None:
                # Section not present in the file, skip it (will use default later)
                continue

            if not isinstance(section_data, dict):
                raise StyleValidationError(
                    f"Invalid format for section '{section_name}'. Expected a table (dictionary), got {type(section_data).__name__}."
                )

            try:
                # Pydantic handles validation and type conversion (including Color)
                parsed_styles[section_name] = StyleModelClass(**section_data)
            except ValidationError as e:
                error_msgs = [
                    f"  - {'.'.join(str(loc) for loc in err['loc'])}: {err['msg']}"
                    for err in e.errors()
                ]
                raise StyleValidationError(
                    f"Invalid style definition in section '{section_name}':\n"
                    + "\n".join(error_msgs)
                ) from e

        return parsed_styles

    def get_diagram_style(self) -> DiagramStyle:
        """Diagram style from the file, or the defaults if the section is absent."""
        return self.parse().get("diagram", DiagramStyle())

    def get_legend_style(self) -> LegendStyle:
        """Legend style from the file, or the defaults if the section is absent."""
        return self.parse().get("legend", LegendStyle())
