"""
Core system module for the combat simulator.

This module contains the fundamental components and utilities shared by the
rest of the simulator: constants, settings, logging and display helpers.
"""

from .constants import (
    DEFAULT_LIFESTEAL_RATIO,
    DEFAULT_REFLECT_RATIO,
    EffectType,
    RecordKind,
)
from .settings import CombatSettings, load_settings
from .utils import (
    GameException,
    cprint,
    crule,
    make_bar,
    set_console_width,
    strip_markup,
)

__all__ = [
    # Import from constants.py
    "DEFAULT_LIFESTEAL_RATIO",
    "DEFAULT_REFLECT_RATIO",
    "EffectType",
    "RecordKind",
    # Import from settings.py
    "CombatSettings",
    "load_settings",
    # Import from utils.py
    "GameException",
    "cprint",
    "crule",
    "make_bar",
    "set_console_width",
    "strip_markup",
]
