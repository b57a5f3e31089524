# Copyright 2025 Tobias Olenyi.
# SPDX-License-Identifier: Apache-2.0

"""Default color assignments for tables that come without colors."""

from itertools import cycle
from typing import List, Sequence

from protfig.core import PROTEIN_DOMAIN, ColorAssignment, FeatureRecord

# Okabe-Ito colorblind-safe palette
OKABE_ITO = (
    "#56B4E9",
    "#E69F00",
    "#009E73",
    "#F0E442",
    "#0072B2",
    "#D55E00",
    "#CC79A7",
    "#000000",
)


def default_color_table(
    features: Sequence[FeatureRecord], palette: Sequence[str] = OKABE_ITO
) -> List[ColorAssignment]:
    """Assign palette colors to the domains of a feature table.

    Domains are taken in order of first appearance, skipping protein-length
    rows. The palette is reused from the start once exhausted.

    Args:
        features: Normalized feature records.
        palette: Colors to hand out, in order.

    Returns:
        One color assignment per distinct domain.
    """
    if not palette:
        raise ValueError("Palette must contain at least one color.")

    domains = dict.fromkeys(f.domain for f in features if f.domain != PROTEIN_DOMAIN)
    return [
        ColorAssignment(domain=domain, color=color)
        for domain, color in zip(domains, cycle(palette))
    ]
