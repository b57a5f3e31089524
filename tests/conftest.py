# Copyright 2025 Tobias Olenyi.
# SPDX-License-Identifier: Apache-2.0

"""Shared fixtures for the protfig test suite."""

import logging
from pathlib import Path
from typing import List

import pytest

from protfig.core import ColorAssignment, FeatureRecord
from protfig.io import colors_from_rows, features_from_rows


@pytest.fixture(autouse=True)
def restore_root_logging():
    """Undo the handler and level changes made by the CLI's logging setup."""
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)


@pytest.fixture
def kinase_features() -> List[FeatureRecord]:
    """One protein of length 100 with a single kinase domain."""
    return features_from_rows([("P1", "protein", 1, 100), ("P1", "Kinase", 5, 55)])


@pytest.fixture
def kinase_colors() -> List[ColorAssignment]:
    return colors_from_rows([("Kinase", "#FF0000")])


@pytest.fixture
def three_proteins() -> List[FeatureRecord]:
    return features_from_rows(
        [
            ("alpha", "protein", 1, 300),
            ("alpha", "SH2", 20, 110),
            ("beta", "protein", 1, 650),
            ("beta", "Kinase", 300, 600),
            ("beta", "SH2", 40, 120),
            ("beta", "SH2", 150, 230),
            ("gamma", "protein", 1, 120),
        ]
    )


@pytest.fixture
def features_csv(tmp_path: Path) -> Path:
    path = tmp_path / "features.csv"
    path.write_text(
        "protein_id,domain,start,stop\n"
        'P1,protein,1,"1,050"\n'
        "P1,Kinase,5,55\n"
        "P1,SH2,100,180\n"
        "P2,protein,1,400\n"
        "P2,SH2,10,90\n"
    )
    return path


@pytest.fixture
def colors_csv(tmp_path: Path) -> Path:
    path = tmp_path / "colors.csv"
    path.write_text("domain,color\nKinase,#FF0000\nSH2,blue\nUnused,#00FF00\n")
    return path
