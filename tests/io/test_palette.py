# Copyright 2025 Tobias Olenyi.
# SPDX-License-Identifier: Apache-2.0

"""Tests for the default color table."""

import pytest

from protfig.core import FeatureRecord
from protfig.io import OKABE_ITO, default_color_table


def test_domains_get_palette_colors_in_first_appearance_order(three_proteins):
    colors = default_color_table(three_proteins)

    assert [c.domain for c in colors] == ["SH2", "Kinase"]
    assert [c.color for c in colors] == list(OKABE_ITO[:2])


def test_protein_rows_get_no_color(kinase_features):
    colors = default_color_table(kinase_features)
    assert [c.domain for c in colors] == ["Kinase"]


def test_palette_wraps_around():
    features = [FeatureRecord("P1", f"D{i}", i, i + 1) for i in range(10)]
    colors = default_color_table(features, palette=("#111111", "#222222", "#333333"))

    assert len(colors) == 10
    assert colors[3].color == "#111111"
    assert colors[9].color == "#111111"


def test_empty_palette_is_rejected(kinase_features):
    with pytest.raises(ValueError):
        default_color_table(kinase_features, palette=())
