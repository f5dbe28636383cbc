"""
Lifesteal effect module for the simulator.
"""

from typing import Literal

from core.constants import DEFAULT_LIFESTEAL_RATIO, EffectType
from core.logging import log_debug
from pydantic import Field

from .base_effect import RatioEffect
from .event_system import CombatEvent, EffectActivation


class LifestealEffect(RatioEffect):
    """
    Heals the attacker by a share of the incoming damage.

    The event itself is left untouched.
    """

    kind: Literal["LifestealEffect"] = "LifestealEffect"

    name: str = "Lifesteal"
    description: str = "The attacker drains health from the blow."
    ratio: float = Field(
        default=DEFAULT_LIFESTEAL_RATIO,
        description="Fraction of the current damage restored to the attacker.",
    )

    @property
    def effect_type(self) -> EffectType:
        return EffectType.LIFESTEAL

    def process(self, event: CombatEvent) -> EffectActivation:
        healed = self.scaled_amount(event.damage)
        log_debug(
            f"{self.name} restores {healed} health to {event.attacker.name}.",
            {"damage": event.damage, "ratio": self.ratio},
        )
        event.attacker.heal(healed)
        return EffectActivation(
            effect=self,
            effect_type=self.effect_type,
            damage_seen=event.damage,
            amount=healed,
        )
