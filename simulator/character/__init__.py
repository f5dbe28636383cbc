"""
Character system module for the combat simulator.

This module holds the players taking part in a fight: their health and the
ordered list of passive effects they have equipped.
"""

from .main import Player

__all__ = [
    # Import from main.py
    "Player",
]
