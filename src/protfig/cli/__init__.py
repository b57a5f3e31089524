# Copyright 2025 Tobias Olenyi.
# SPDX-License-Identifier: Apache-2.0

"""Command-line interface for protfig.

This module provides a command-line interface for drawing protein domain
diagrams and their legends from CSV tables.
"""

from protfig.cli.main import app

__all__ = ["app"]
