"""
Base effect module for the simulator.

Defines the base class shared by every passive effect a player can equip.
"""

from core.constants import EffectType
from pydantic import BaseModel, Field

from .event_system import CombatEvent, EffectActivation


class Effect(BaseModel):
    """
    Base class for all passive effects that react to incoming attacks.

    Effects are immutable configuration objects: they never remember anything
    between two invocations, so the same instance can be equipped by many
    players and processed by many attacks. How an event moves from one effect
    to the next is decided by the effect chain, not by the effects.

    A new kind of effect only needs to subclass Effect and implement
    `process`. Overriding `effect_type` is optional; effects that keep the
    default are reported as GENERIC.
    """

    model_config = {"frozen": True}

    name: str = Field(
        description="The name of the effect.",
    )
    description: str = Field(
        "",
        description="A brief description of the effect.",
    )

    @property
    def effect_type(self) -> EffectType:
        """Returns the kind of this effect."""
        return EffectType.GENERIC

    @property
    def display_name(self) -> str:
        return self.name.lower().capitalize()

    @property
    def color(self) -> str:
        """Returns the color string associated with this effect type."""
        return self.effect_type.color

    @property
    def colored_name(self) -> str:
        """Returns the effect name with color formatting applied."""
        return self.colorize(self.display_name)

    @property
    def emoji(self) -> str:
        """Returns the emoji associated with this effect type."""
        return self.effect_type.emoji

    def colorize(self, message: str) -> str:
        """Applies effect color formatting to a message."""
        return f"[{self.color}]{message}[/]"

    def process(self, event: CombatEvent) -> EffectActivation:
        """
        Apply the effect to an attack in flight.

        Args:
            event (CombatEvent):
                The event to inspect and mutate.

        Returns:
            EffectActivation:
                A record of what the effect did.

        """
        raise NotImplementedError("Subclasses must implement process.")

    def __str__(self) -> str:
        return f"Effect: {self.display_name}"


class RatioEffect(Effect):
    """
    Base class for effects that act on a fraction of the incoming damage.

    The ratio is trusted configuration and is not range checked.
    """

    ratio: float = Field(
        description="Fraction of the current damage the effect acts on.",
    )

    def scaled_amount(self, damage: int) -> int:
        """
        Computes the share of the damage the effect acts on.

        Args:
            damage (int): The damage carried by the event.

        Returns:
            int: The product, truncated toward zero.

        """
        return int(damage * self.ratio)

    def __str__(self) -> str:
        return f"Effect: {self.display_name} ({self.ratio:.0%})"
