# Copyright 2025 Tobias Olenyi.
# SPDX-License-Identifier: Apache-2.0

from .types import (
    PROTEIN_DOMAIN,
    FeatureRecord,
    ColorAssignment,
    DiagramParameters,
)

from .errors import (
    ProtFigError,
    LayoutError,
)

from .diagnostics import (
    Diagnostics,
    DiagramWarning,
    WarningKind,
)

from .logger import logger

__all__ = [
    "PROTEIN_DOMAIN",
    "FeatureRecord",
    "ColorAssignment",
    "DiagramParameters",
    "ProtFigError",
    "LayoutError",
    "Diagnostics",
    "DiagramWarning",
    "WarningKind",
    "logger",
]
