"""
Event system module for the simulator.

Defines the combat event that travels through a target's effect chain, and
the activation records that effects produce while processing it.
"""

from typing import Any

from core.constants import EffectType
from core.utils import GameException
from pydantic import BaseModel, Field, PrivateAttr


class CombatEventError(GameException):
    """Raised when a combat event is driven into an invalid state."""


class CombatEvent(BaseModel):
    """
    One attack in flight.

    The attacker and the target are fixed for the lifetime of the event, the
    damage can be changed by any effect, and the cancellation flag can only
    ever go from False to True.
    """

    attacker: Any = Field(
        frozen=True,
        description="The player performing the attack.",
    )
    target: Any = Field(
        frozen=True,
        description="The player receiving the attack.",
    )
    damage: int = Field(
        description="The current damage carried by the event.",
    )

    _cancelled: bool = PrivateAttr(default=False)

    def __init__(self, attacker: Any, target: Any, damage: int, **data: Any) -> None:
        super().__init__(attacker=attacker, target=target, damage=damage, **data)

    @property
    def cancelled(self) -> bool:
        """Whether an effect has cancelled the event."""
        return self._cancelled

    @cancelled.setter
    def cancelled(self, value: bool) -> None:
        if value:
            self.cancel()
        elif self._cancelled:
            raise CombatEventError("A cancelled combat event cannot be resumed.")

    def cancel(self) -> None:
        """Marks the event as cancelled; the remaining effects are skipped."""
        self._cancelled = True

    def __str__(self) -> str:
        return (
            f"CombatEvent({self.attacker.name} -> {self.target.name}, "
            f"damage={self.damage}, cancelled={self.cancelled})"
        )


class EffectActivation(BaseModel):
    """What a single effect did while processing a combat event."""

    model_config = {"frozen": True}

    effect: Any = Field(
        description="The effect that was processed.",
    )
    effect_type: EffectType = Field(
        default=EffectType.GENERIC,
        description="The kind of the processed effect.",
    )
    damage_seen: int = Field(
        description="The damage carried by the event when the effect ran.",
    )
    amount: int = Field(
        default=0,
        description="Damage reflected or health restored by the effect.",
    )
    cancelled_event: bool = Field(
        default=False,
        description="Whether the effect cancelled the event.",
    )

    def __str__(self) -> str:
        return (
            f"EffectActivation({self.effect_type}, damage_seen={self.damage_seen}, "
            f"amount={self.amount}, cancelled_event={self.cancelled_event})"
        )
