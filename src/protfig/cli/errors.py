# Copyright 2025 Tobias Olenyi.
# SPDX-License-Identifier: Apache-2.0

"""Error classes for the protfig CLI."""

import functools
import os
import traceback
from typing import Any, Callable, TypeVar, cast

from rich.console import Console
from rich.panel import Panel
from rich.text import Text
from rich.traceback import Traceback

from protfig.core import ProtFigError

console = Console(stderr=True)

F = TypeVar("F", bound=Callable[..., Any])


class CLIError(ProtFigError):
    """Base class for CLI-specific errors."""

    def __init__(self, message: str):
        super().__init__(f"CLI error: {message}")


class InvalidArgumentError(CLIError):
    """Exception raised when an invalid argument is provided."""

    def __init__(self, argument: str, reason: str):
        message = f"Invalid argument: {argument}"
        suggestion = f"Reason: {reason}\nRun 'protfig --help' for more information."
        super().__init__(f"{message}\n{suggestion}")


def _error_panel(error: ProtFigError) -> Panel:
    frame = traceback.extract_tb(error.__traceback__)[-1]
    location = f" at {os.path.basename(frame.filename)}:{frame.lineno}"
    header = Text.assemble(
        Text("protfig Error", style="bold red"),
        " ",
        Text(f"[{error.__class__.__name__}]", style="red"),
        Text(location, style="dim"),
    )
    return Panel(Text(error.message), title=header, border_style="red", padding=(1, 2))


def error_handler(func: F) -> F:
    """Turn errors raised by a command into a rich panel and exit code 1.

    Known `ProtFigError`s show their message and the raising location; any
    other exception is printed with a full traceback.
    """

    @functools.wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        try:
            return func(*args, **kwargs)
        except ProtFigError as e:
            console.print(_error_panel(e))
            return 1
        except Exception as e:
            console.print(Text.assemble(("Unexpected error: ", "bold red"), str(e)))
            console.print(Traceback())
            return 1

    return cast(F, wrapper)
