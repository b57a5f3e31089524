# Copyright 2025 Tobias Olenyi.
# SPDX-License-Identifier: Apache-2.0

import sys

from cyclopts import App

from .draw import draw_diagram, draw_legend
from protfig import __version__


app = App(version=__version__)
app.command(
    draw_diagram,
    "diagram",
)
app.command(
    draw_legend,
    "legend",
)


if __name__ == "__main__":
    sys.exit(app())
