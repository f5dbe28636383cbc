"""
Block effect module for the simulator.

Defines the effect that absorbs an attack entirely.
"""

from typing import Literal

from core.constants import EffectType
from core.logging import log_debug

from .base_effect import Effect
from .event_system import CombatEvent, EffectActivation


class BlockEffect(Effect):
    """
    Absorbs the whole attack: the damage drops to zero and the event is
    cancelled, so no later effect in the chain runs and nothing is applied
    to the target.
    """

    kind: Literal["BlockEffect"] = "BlockEffect"

    name: str = "Block"
    description: str = "The attack is fully absorbed."

    @property
    def effect_type(self) -> EffectType:
        return EffectType.BLOCK

    def process(self, event: CombatEvent) -> EffectActivation:
        damage_seen = event.damage
        event.damage = 0
        event.cancel()
        log_debug(
            f"{self.name} absorbed {damage_seen} damage aimed at {event.target.name}."
        )
        return EffectActivation(
            effect=self,
            effect_type=self.effect_type,
            damage_seen=damage_seen,
            amount=damage_seen,
            cancelled_event=True,
        )
