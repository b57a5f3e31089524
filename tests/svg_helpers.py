# Copyright 2025 Tobias Olenyi.
# SPDX-License-Identifier: Apache-2.0

"""Helpers for inspecting rendered SVG in tests."""

from typing import List
from xml.etree import ElementTree as ET

import pytest


def parse_svg(svg_output: str) -> ET.Element:
    """Parse SVG text and fail the test if it is not well-formed."""
    if not svg_output or not svg_output.strip():
        pytest.fail("Generated SVG output is empty or whitespace only.")
    try:
        return ET.fromstring(svg_output)
    except ET.ParseError as e:
        pytest.fail(f"Generated SVG is not well-formed XML: {e}\nOutput:\n{svg_output}")


def elements_with_class(root: ET.Element, class_name: str) -> List[ET.Element]:
    return [el for el in root.iter() if el.get("class") == class_name]
