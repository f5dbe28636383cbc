"""
Reflect effect module for the simulator.
"""

from typing import Literal

from core.constants import DEFAULT_REFLECT_RATIO, EffectType
from core.logging import log_debug
from pydantic import Field

from .base_effect import RatioEffect
from .event_system import CombatEvent, EffectActivation


class ReflectEffect(RatioEffect):
    """
    Sends a share of the incoming damage back to the attacker.

    The event itself is left untouched: the target still receives the full
    damage unless a later effect changes it.
    """

    kind: Literal["ReflectEffect"] = "ReflectEffect"

    name: str = "Reflect"
    description: str = "Part of the damage is sent back to the attacker."
    ratio: float = Field(
        default=DEFAULT_REFLECT_RATIO,
        description="Fraction of the current damage sent back to the attacker.",
    )

    @property
    def effect_type(self) -> EffectType:
        return EffectType.REFLECT

    def process(self, event: CombatEvent) -> EffectActivation:
        reflected = self.scaled_amount(event.damage)
        log_debug(
            f"{self.name} sends {reflected} damage back to {event.attacker.name}.",
            {"damage": event.damage, "ratio": self.ratio},
        )
        # Non-positive amounts are ignored by the attacker.
        event.attacker.take_damage(reflected)
        return EffectActivation(
            effect=self,
            effect_type=self.effect_type,
            damage_seen=event.damage,
            amount=reflected,
        )
