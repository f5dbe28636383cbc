"""
Utilities module for the simulator.

Provides common utility functions and helpers, including console printing
with rich formatting and the base exception of the simulator.
"""

from __future__ import annotations

from typing import Any

from rich.console import Console
from rich.rule import Rule
from rich.text import Text

# Initialize the rich console.
_console = Console(markup=True, width=120, force_terminal=True, force_jupyter=False)


class GameException(Exception):
    """Base class for every error raised by the simulator."""


def cprint(*args: Any, **kwargs: Any) -> None:
    """
    Custom print function to handle colored output.

    Args:
        *args: Arguments to pass to the console print function.
        **kwargs: Keyword arguments to pass to the console print function.

    """
    _console.print(*args, **kwargs)


def crule(*args: Any, **kwargs: Any) -> None:
    """
    Custom print function to handle colored output with a rule.

    Args:
        *args: Arguments to pass to the Rule constructor.
        **kwargs: Keyword arguments to pass to the Rule constructor.

    """
    _console.print(Rule(*args, **kwargs))


def set_console_width(width: int) -> None:
    """Changes the width used by the shared console."""
    _console.width = width


def strip_markup(message: str) -> str:
    """
    Removes rich markup tags from a message.

    Args:
        message (str): The message, possibly containing markup.

    Returns:
        str: The plain text of the message.

    """
    return Text.from_markup(message).plain


def make_bar(current: int, maximum: int, length: int = 10, color: str = "white") -> str:
    """
    Creates a visual progress bar representation.

    Args:
        current (int): The current value.
        maximum (int): The maximum value.
        length (int): The length of the bar in characters. Defaults to 10.
        color (str): The color for the filled portion. Defaults to "white".

    Returns:
        str: A formatted progress bar string.

    """
    if maximum <= 0:
        return "[dim white]" + "▯" * length + "[/]"
    # Health is unbounded, keep the filled part inside the bar.
    filled = max(0, min(length, int((current / maximum) * length)))
    # Compute the empty part of the bar.
    empty = length - filled
    # Start by creating the bar with the filled part.
    bar = f"[{color}]" + "▮" * filled
    # If there is an empty part, add it to the bar.
    if empty > 0:
        bar += "[dim white]" + "▯" * empty + "[/]"
    bar += "[/]"
    return bar
