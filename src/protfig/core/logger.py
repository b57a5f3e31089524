# Copyright 2025 Tobias Olenyi.
# SPDX-License-Identifier: Apache-2.0

"""Logging utilities for protfig."""

import logging
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.theme import Theme

from protfig import __app_name__


# Create a theme for consistent styling
RICH_THEME = Theme(
    {
        "error": "bold red",
        "warning": "yellow",
        "info": "green",
        "debug": "blue",
    }
)


class LevelAwareFormatter(logging.Formatter):
    """Formatter that wraps each message in the rich markup for its level."""

    def format(self, record: logging.LogRecord) -> str:
        # Message text is literal; only the level tags are markup
        original_message = escape(record.getMessage())

        if record.levelno >= logging.ERROR:
            formatted_message = f"[error]{original_message}[/error]"
        elif record.levelno == logging.WARNING:
            formatted_message = f"[warning]{original_message}[/warning]"
        elif record.levelno == logging.INFO:
            formatted_message = f"[info]{original_message}[/info]"
        else:
            formatted_message = f"[debug]{original_message}[/debug]"

        # Format with the styled text, then restore the record
        msg, args = record.msg, record.args
        record.msg, record.args = formatted_message, None
        try:
            return super().format(record)
        finally:
            record.msg, record.args = msg, args


def getLogger(name: str = __app_name__) -> logging.Logger:
    """Get a configured logger with the given name.

    Args:
        name: Logger name (defaults to "protfig")

    Returns:
        Configured logging.Logger instance
    """
    return logging.getLogger(name)


def setup_logging(
    level: int = logging.WARNING,
    console: Optional[Console] = None,
) -> None:
    """Configure the logging system with Rich formatting.

    Args:
        level: Initial logging level (defaults to WARNING)
        console: Optional Rich console instance to use
    """
    if console is None:
        console = Console(theme=RICH_THEME, stderr=True)

    # Clear existing handlers from the root logger
    root = logging.getLogger()
    if root.handlers:
        root.handlers.clear()

    root.setLevel(level)

    rich_handler = RichHandler(
        console=console,
        rich_tracebacks=True,
        omit_repeated_times=False,
        show_path=False,
        enable_link_path=True,
        markup=True,
        log_time_format="[%X]",
    )
    rich_handler.setFormatter(
        LevelAwareFormatter("%(message)s", datefmt="%Y-%m-%d %H:%M:%S")
    )
    root.addHandler(rich_handler)


# Create the default logger instance
logger = getLogger()
