"""
Settings module for the simulator.

Holds the runtime configuration of the simulator and loads it from a JSON
file when one is provided.
"""

import json
import logging
from pathlib import Path
from typing import Any

from catchery import log_warning
from pydantic import BaseModel, Field, field_validator


class CombatSettings(BaseModel):
    """Runtime configuration for logging, the combat log and the console."""

    log_level: str = Field(
        default="INFO",
        description="Name of the logging level (e.g., 'DEBUG', 'INFO').",
    )
    log_capacity: int = Field(
        default=1000,
        gt=0,
        description="Maximum number of records kept by a combat log.",
    )
    console_width: int = Field(
        default=120,
        gt=0,
        description="Width of the rich console used for output.",
    )
    show_sheets: bool = Field(
        default=True,
        description="Whether player sheets are printed around each attack.",
    )

    @field_validator("log_level")
    @classmethod
    def check_log_level(cls, v: str) -> str:
        level = v.upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown logging level: {v!r}")
        return level


def _load_json_file(path: Path) -> dict[str, Any] | None:
    """
    Reads a JSON object from disk.

    Args:
        path (Path): The file to read.

    Returns:
        dict[str, Any] | None: The parsed object, or None if the file is missing.

    """
    if not path.exists():
        log_warning(
            f"Settings file not found: {path}",
            {"path": str(path), "context": "settings_loading"},
        )
        return None
    with path.open("r", encoding="utf-8") as f:
        data = json.load(f)
    if not isinstance(data, dict):
        raise ValueError(f"Settings file {path} must contain a JSON object.")
    return data


def load_settings(path: Path | None = None) -> CombatSettings:
    """
    Loads the simulator settings.

    Args:
        path (Path | None):
            The JSON file holding the settings. When None, or when the file
            does not exist, the defaults are used.

    Returns:
        CombatSettings: The loaded settings.

    """
    if path is None:
        return CombatSettings()
    data = _load_json_file(path)
    if data is None:
        return CombatSettings()
    return CombatSettings(**data)
