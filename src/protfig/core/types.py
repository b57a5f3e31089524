# Copyright 2025 Tobias Olenyi.
# SPDX-License-Identifier: Apache-2.0

"""Record types describing the input of a protein domain diagram."""

from dataclasses import dataclass
from typing import Optional

from pydantic import BaseModel, Field

# Domain value of the row that defines a protein's total length
PROTEIN_DOMAIN = "protein"


@dataclass(frozen=True)
class FeatureRecord:
    """One row of the feature table.

    A record whose domain is ``"protein"`` defines the length of the protein
    (``start=1, stop=length``); any other domain denotes a sub-region.
    """

    protein_id: str
    domain: str
    start: int
    stop: int

    def __post_init__(self) -> None:
        if not isinstance(self.start, int) or not isinstance(self.stop, int):
            raise TypeError(
                f"Coordinates of {self.protein_id}/{self.domain} must be integers, "
                f"got {self.start!r} and {self.stop!r}"
            )

    @property
    def length(self) -> int:
        """Number of residues covered by this record."""
        return self.stop - self.start + 1

    @property
    def is_length_row(self) -> bool:
        return self.domain == PROTEIN_DOMAIN

    def __str__(self) -> str:
        return f"{self.protein_id}:{self.domain}:{self.start}-{self.stop}"


@dataclass(frozen=True)
class ColorAssignment:
    """Maps a domain name to a color accepted by the drawing surface."""

    domain: str
    color: str


class DiagramParameters(BaseModel):
    """Per-call parameters of a diagram or legend."""

    scalebar_length: float = Field(
        default=500, gt=0, description="Length of the scale bar in amino acids."
    )
    title: Optional[str] = Field(default=None, description="Optional figure title.")
    legend_mode: bool = Field(
        default=False, description="Draw the legend instead of the diagram."
    )

    model_config = {"extra": "forbid", "frozen": True}
