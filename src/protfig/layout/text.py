# Copyright 2025 Tobias Olenyi.
# SPDX-License-Identifier: Apache-2.0

"""Text metrics without a font backend."""

from typing import Iterable


def estimate_text_width(
    text: str, font_size: float, char_width_ratio: float = 0.6
) -> float:
    """Approximate the rendered width of a single line of text.

    SVG text is measured by the viewer, so the width is estimated from the
    average glyph width of proportional sans-serif fonts.
    """
    return len(text) * font_size * char_width_ratio


def max_text_width(
    texts: Iterable[str], font_size: float, char_width_ratio: float = 0.6
) -> float:
    """Width of the widest text, 0 for no texts."""
    return max(
        (estimate_text_width(t, font_size, char_width_ratio) for t in texts),
        default=0.0,
    )
