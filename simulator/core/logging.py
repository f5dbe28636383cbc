"""
Logging configuration module for the simulator.

Provides centralized logging setup with colored output using rich.
"""

import logging
from typing import Any

from rich.console import Console
from rich.logging import RichHandler


def setup_logging(level: int | str = logging.INFO, width: int = 120) -> None:
    """
    Sets up logging configuration with rich colored output.

    Args:
        level (int | str): The logging level to set. Defaults to logging.INFO.
        width (int): The width of the logging console. Defaults to 120.

    """
    if isinstance(level, str):
        name = level
        level = logging.getLevelName(name.upper())
        if not isinstance(level, int):
            raise ValueError(f"Unknown logging level: {name!r}")

    # Create a rich console for logging
    console = Console(width=width, force_terminal=True, force_jupyter=False)

    # Configure the rich handler
    rich_handler = RichHandler(
        console=console,
        show_time=True,
        show_level=True,
        show_path=False,  # Don't show file path to keep output clean
        markup=True,
        rich_tracebacks=True,
        tracebacks_show_locals=True,
    )

    # Set up the formatter
    rich_handler.setFormatter(
        logging.Formatter("%(name)s - %(levelname)s - %(message)s", datefmt="[%X]")
    )

    # Configure the root logger
    logging.basicConfig(
        level=level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[rich_handler],
        force=True,
    )


def get_logger(name: str) -> logging.Logger:
    """
    Gets a logger instance with the specified name.

    Args:
        name (str): The name of the logger.

    Returns:
        logging.Logger: The configured logger instance.

    """
    return logging.getLogger(name)


# Create a default logger for the simulator
logger = get_logger("simulator")


def _with_context(message: str, context: dict[str, Any] | None) -> str:
    if context:
        # Format context as key=value pairs
        context_str = " ".join(f"{k}={v}" for k, v in context.items())
        message = f"{message} ({context_str})"
    return message


def log_info(message: str, context: dict[str, Any] | None = None) -> None:
    """
    Logs an info message with optional context.

    Args:
        message (str): The info message.
        context (Dict[str, Any] | None): Optional context dictionary.

    """
    logger.info(_with_context(message, context))


def log_debug(message: str, context: dict[str, Any] | None = None) -> None:
    """
    Logs a debug message with optional context.

    Args:
        message (str): The debug message.
        context (Dict[str, Any] | None): Optional context dictionary.

    """
    logger.debug(_with_context(message, context))
