# Copyright 2025 Tobias Olenyi.
# SPDX-License-Identifier: Apache-2.0

"""Tests for the record types in protfig.core.types."""

import pytest
from pydantic import ValidationError

from protfig.core import PROTEIN_DOMAIN, DiagramParameters, FeatureRecord


def test_feature_record_length_is_inclusive():
    record = FeatureRecord("P1", "Kinase", 5, 55)
    assert record.length == 51
    assert not record.is_length_row


def test_protein_row_is_length_row():
    record = FeatureRecord("P1", PROTEIN_DOMAIN, 1, 100)
    assert record.is_length_row
    assert record.length == 100
    assert str(record) == "P1:protein:1-100"


def test_feature_record_rejects_non_integer_coordinates():
    with pytest.raises(TypeError, match="must be integers"):
        FeatureRecord("P1", "Kinase", 5.5, 55)


def test_diagram_parameters_defaults():
    params = DiagramParameters()
    assert params.scalebar_length == 500
    assert params.title is None
    assert params.legend_mode is False


@pytest.mark.parametrize("scalebar", [0, -10])
def test_diagram_parameters_rejects_non_positive_scalebar(scalebar):
    with pytest.raises(ValidationError):
        DiagramParameters(scalebar_length=scalebar)


def test_diagram_parameters_are_immutable():
    params = DiagramParameters(title="Kinases")
    with pytest.raises(ValidationError):
        params.title = "Other"
