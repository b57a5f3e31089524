# Copyright 2025 Tobias Olenyi.
# SPDX-License-Identifier: Apache-2.0


class ProtFigError(Exception):
    """Base exception class for protfig errors.

    This class is used as the base for all custom exceptions raised by the
    package. It provides a consistent interface for error handling and formatting.
    """

    def __init__(self, message: str):
        self.message = message
        super().__init__(self.message)


class LayoutError(ProtFigError):
    """Error raised when a diagram layout cannot be computed."""

    def __init__(self, message: str):
        super().__init__(f"Layout error: {message}")
