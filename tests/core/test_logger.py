# Copyright 2025 Tobias Olenyi.
# SPDX-License-Identifier: Apache-2.0

"""Tests for the rich logging setup."""

import logging
from io import StringIO

import pytest
from rich.console import Console

from protfig.core import logger
from protfig.core.logger import RICH_THEME, LevelAwareFormatter, setup_logging
from protfig.io import features_from_rows
from protfig.layout import compute_diagram_layout


@pytest.fixture
def console_output() -> StringIO:
    """Route the rich handler into a buffer."""
    buffer = StringIO()
    setup_logging(
        logging.INFO,
        console=Console(file=buffer, theme=RICH_THEME, width=240, color_system=None),
    )
    return buffer


def test_bracketed_names_survive_in_warnings(console_output: StringIO):
    features = features_from_rows(
        [("P1", "protein", 1, 100), ("P1", "[ubiquitin]", 10, 80)]
    )
    compute_diagram_layout(features, [])

    assert "'[ubiquitin]'" in console_output.getvalue()


def test_messages_are_not_interpreted_as_markup(console_output: StringIO):
    logger.info("Protein [bold]X[/bold] drawn")
    assert "Protein [bold]X[/bold] drawn" in console_output.getvalue()


def test_formatter_restores_record():
    record = logging.LogRecord(
        "protfig", logging.WARNING, __file__, 1, "domain %s", ("[x]",), None
    )
    formatted = LevelAwareFormatter("%(message)s").format(record)

    assert formatted == "[warning]domain \\[x][/warning]"
    assert record.msg == "domain %s"
    assert record.args == ("[x]",)
