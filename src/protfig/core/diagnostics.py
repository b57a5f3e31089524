# Copyright 2025 Tobias Olenyi.
# SPDX-License-Identifier: Apache-2.0

"""Collects advisory findings about the input of a diagram."""

from dataclasses import dataclass
from enum import Enum
from typing import Iterator, List, Optional, Tuple

from .logger import logger


class WarningKind(str, Enum):
    MISSING_LENGTH_ROW = "missing_length_row"
    DUPLICATE_LENGTH_ROW = "duplicate_length_row"
    MISSING_COLOR = "missing_color"


@dataclass(frozen=True)
class DiagramWarning:
    kind: WarningKind
    message: str
    protein_id: Optional[str] = None
    domains: Tuple[str, ...] = ()

    def __str__(self) -> str:
        return self.message


class Diagnostics:
    """Ordered collection of the warnings emitted while laying out a diagram.

    Every warning is forwarded to the package logger as it is recorded, so
    operators see it on the console while callers can still inspect the
    collected records afterwards.
    """

    def __init__(self) -> None:
        self._warnings: List[DiagramWarning] = []

    def warn(
        self,
        kind: WarningKind,
        message: str,
        protein_id: Optional[str] = None,
        domains: Tuple[str, ...] = (),
    ) -> DiagramWarning:
        warning = DiagramWarning(kind, message, protein_id, tuple(domains))
        self._warnings.append(warning)
        logger.warning(message)
        return warning

    def of_kind(self, kind: WarningKind) -> List[DiagramWarning]:
        return [w for w in self._warnings if w.kind == kind]

    @property
    def warnings(self) -> List[DiagramWarning]:
        return list(self._warnings)

    def __iter__(self) -> Iterator[DiagramWarning]:
        return iter(self._warnings)

    def __len__(self) -> int:
        return len(self._warnings)
