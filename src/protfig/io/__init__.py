# Copyright 2025 Tobias Olenyi.
# SPDX-License-Identifier: Apache-2.0

"""Input/output utilities for protfig."""

from typing import List, Optional
from pathlib import Path

from protfig.io.tables import (
    FEATURE_COLUMNS,
    COLOR_COLUMNS,
    read_table,
    normalize_feature_table,
    normalize_color_table,
    to_feature_records,
    load_feature_table,
    load_color_table,
    features_from_rows,
    colors_from_rows,
)
from protfig.io.palette import OKABE_ITO, default_color_table
from protfig.io.styles import StyleParser
from protfig.io.errors import (
    # Base classes
    IOError,
    FileError,
    FileNotFoundError,
    # Table errors
    TableError,
    TableFileError,
    MissingColumnError,
    EmptyTableError,
    InvalidCoordinateError,
    MissingValueError,
    InvalidColorError,
    # Style errors
    StyleError,
    StyleFileNotFoundError,
    StyleParsingError,
    InvalidTomlError,
    StyleValidationError,
    # Output errors
    OutputError,
    OutputFileError,
)


__all__ = [
    # Tables
    "FEATURE_COLUMNS",
    "COLOR_COLUMNS",
    "read_table",
    "normalize_feature_table",
    "normalize_color_table",
    "to_feature_records",
    "load_feature_table",
    "load_color_table",
    "features_from_rows",
    "colors_from_rows",
    "OKABE_ITO",
    "default_color_table",
    # Classes
    "StyleParser",
    # Functions
    "validate_optional_files",
    # Errors
    "IOError",
    "FileError",
    "FileNotFoundError",
    "TableError",
    "TableFileError",
    "MissingColumnError",
    "EmptyTableError",
    "InvalidCoordinateError",
    "MissingValueError",
    "InvalidColorError",
    "StyleError",
    "StyleFileNotFoundError",
    "StyleParsingError",
    "InvalidTomlError",
    "StyleValidationError",
    "OutputError",
    "OutputFileError",
]


def validate_optional_files(
    file_paths: List[Optional[Path]],
) -> None:
    """Validate that optional files exist if specified.

    Args:
        file_paths: List of file paths to check (can include None values)

    Raises:
        FileNotFoundError: If any specified file does not exist
    """
    for path in file_paths:
        if path and not path.exists():
            raise FileNotFoundError(str(path))
