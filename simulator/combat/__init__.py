"""
Combat system module for the combat simulator.

This module resolves attacks against players carrying passive effects and
records what happened along the way.
"""

from .combat_log import CombatLog, CombatRecord, RecordSink
from .damage_resolver import DamageResolver, DamageResult, deal_damage

__all__ = [
    "CombatLog",
    "CombatRecord",
    "RecordSink",
    "DamageResolver",
    "DamageResult",
    "deal_damage",
]
