# Copyright 2025 Tobias Olenyi.
# SPDX-License-Identifier: Apache-2.0

"""Error classes for the protfig IO module."""

from typing import Optional, Sequence

from protfig.core import ProtFigError


# Base IO error classes
class IOError(ProtFigError):
    """Base class for all IO-related errors in protfig."""

    def __init__(self, message: str):
        super().__init__(f"IO error: {message}")


class FileError(IOError):
    """Base class for file-related errors."""

    def __init__(self, message: str):
        super().__init__(message)


class FileNotFoundError(FileError):
    """Exception raised when a required file is not found."""

    def __init__(self, file_path: str):
        self.file_path = file_path
        message = f"File not found: {file_path}"
        suggestion = "Please check that the file exists and the path is correct."
        super().__init__(f"{message}\n{suggestion}")


# Table-related errors
class TableError(IOError):
    """Base class for errors in feature or color tables."""

    def __init__(self, message: str):
        super().__init__(f"Table error: {message}")


class TableFileError(TableError):
    """Exception raised when a table file cannot be read as CSV."""

    def __init__(self, file_path: str, details: Optional[str] = None):
        self.file_path = file_path
        self.details = details

        message = f"Could not read table file: {file_path}"
        if details:
            message += f"\n{details}"
        super().__init__(message)


class MissingColumnError(TableError):
    """Exception raised when a table lacks one or more required columns."""

    def __init__(self, table_name: str, missing: Sequence[str], found: Sequence[str]):
        self.table_name = table_name
        self.missing = list(missing)

        message = (
            f"The {table_name} table is missing required column(s): "
            f"{', '.join(missing)}. Found: {', '.join(found) or 'none'}."
        )
        suggestion = "\nExample feature table header: protein_id,domain,start,stop"
        suggestion += "\nExample color table header: domain,color"
        super().__init__(f"{message}{suggestion}")


class EmptyTableError(TableError):
    """Exception raised when a table has no rows."""

    def __init__(self, table_name: str):
        super().__init__(f"The {table_name} table contains no rows.")


class InvalidCoordinateError(TableError):
    """Exception raised when start/stop values cannot be parsed as integers."""

    def __init__(self, column: str, values: Sequence[str], row_numbers: Sequence[int]):
        self.column = column
        self.values = list(values)
        self.row_numbers = list(row_numbers)

        shown = ", ".join(
            f"row {row}: {value!r}" for row, value in zip(row_numbers[:5], values[:5])
        )
        if len(values) > 5:
            shown += f", ... ({len(values) - 5} more)"
        message = f"Non-numeric values in column '{column}': {shown}"
        suggestion = "\nCoordinates must be integers; thousands separators (1,050) are allowed."
        super().__init__(f"{message}{suggestion}")


class MissingValueError(TableError):
    """Exception raised when a required field is empty."""

    def __init__(self, table_name: str, column: str, row_numbers: Sequence[int]):
        self.column = column
        self.row_numbers = list(row_numbers)
        rows = ", ".join(str(r) for r in row_numbers[:10])
        super().__init__(
            f"Empty values in column '{column}' of the {table_name} table (rows {rows})."
        )


class InvalidColorError(TableError):
    """Exception raised when a color table entry is not a valid color."""

    def __init__(self, color_value: str, domain: str):
        self.color_value = color_value
        self.domain = domain

        message = f"Invalid color value '{color_value}' for domain '{domain}'."
        suggestion = "\nColors should be specified as hex (#RRGGBB), RGB (rgb(r,g,b)), or named colors."
        super().__init__(f"{message}{suggestion}")


# Style-related errors
class StyleError(IOError):
    """Base class for style-related errors."""

    def __init__(self, message: str):
        super().__init__(f"Style error: {message}")


class StyleFileNotFoundError(StyleError):
    """Exception raised when a style file is not found."""

    def __init__(self, file_path: str):
        message = f"Style file not found: {file_path}"
        super().__init__(message)


class StyleParsingError(StyleError):
    """Base error for style parsing issues."""

    pass


class InvalidTomlError(StyleParsingError):
    """Error for malformed TOML files."""

    pass


class StyleValidationError(StyleParsingError):
    """Error for invalid style field types or values."""

    pass


# Output-related errors
class OutputError(IOError):
    """Base class for output-related errors."""

    def __init__(self, message: str):
        super().__init__(f"Output error: {message}")


class OutputFileError(OutputError):
    """Exception raised when there's an issue with an output file."""

    def __init__(self, file_path: str, details: Optional[str] = None):
        self.file_path = file_path
        self.details = details

        message = f"Error writing to output file: {file_path}"
        if details:
            message += f"\n{details}"

        suggestion = "\nPlease check that you have write permissions to the directory and sufficient disk space."

        super().__init__(f"{message}{suggestion}")
