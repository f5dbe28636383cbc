"""
Constants and enumerations for the simulator.

Defines the kinds of passive effects, the kinds of combat records emitted
while an attack is resolved, and the default effect ratios.
"""

from enum import Enum

# Default fraction of the incoming damage sent back to the attacker.
DEFAULT_REFLECT_RATIO = 0.5

# Default fraction of the incoming damage restored to the attacker.
DEFAULT_LIFESTEAL_RATIO = 0.4


class NiceEnum(Enum):
    """An enumeration that provides a nicer string representation."""

    def __str__(self) -> str:
        return self.name

    @property
    def display_name(self) -> str:
        return self.name.lower().capitalize()


class EffectType(NiceEnum):
    """Defines the passive effects a player can equip."""

    BLOCK = "BLOCK"
    REFLECT = "REFLECT"
    LIFESTEAL = "LIFESTEAL"
    # Any effect without a dedicated kind.
    GENERIC = "GENERIC"

    @property
    def emoji(self) -> str:
        """Returns the emoji associated with this effect type."""
        return {
            EffectType.BLOCK: "🛡️",
            EffectType.REFLECT: "🪞",
            EffectType.LIFESTEAL: "🩸",
        }.get(self, "❔")

    @property
    def color(self) -> str:
        """Returns the color string associated with this effect type."""
        return {
            EffectType.BLOCK: "bold cyan",
            EffectType.REFLECT: "bold magenta",
            EffectType.LIFESTEAL: "bold red",
        }.get(self, "dim white")

    @property
    def colored_name(self) -> str:
        return self.colorize(self.display_name)

    def colorize(self, message: str) -> str:
        """Applies effect type color formatting to a message."""
        return f"[{self.color}]{message}[/]"


class RecordKind(NiceEnum):
    """Defines the kinds of entries reported while resolving an attack."""

    ATTACK = "ATTACK"
    NO_EFFECTS = "NO_EFFECTS"
    EFFECTS_ACTIVE = "EFFECTS_ACTIVE"
    BLOCK = "BLOCK"
    REFLECT = "REFLECT"
    LIFESTEAL = "LIFESTEAL"
    EFFECT = "EFFECT"
    DAMAGE_APPLIED = "DAMAGE_APPLIED"
    DAMAGE_CANCELLED = "DAMAGE_CANCELLED"
    SUMMARY = "SUMMARY"

    @classmethod
    def from_effect_type(cls, effect_type: EffectType) -> "RecordKind":
        """
        Maps an effect type to the record kind emitted when it activates.

        Effect types without a record kind of their own map to EFFECT.

        Args:
            effect_type (EffectType): The type of the activated effect.

        Returns:
            RecordKind: The matching record kind.

        """
        return cls.__members__.get(effect_type.name, cls.EFFECT)

    @property
    def is_activation(self) -> bool:
        return self in (
            RecordKind.BLOCK,
            RecordKind.REFLECT,
            RecordKind.LIFESTEAL,
            RecordKind.EFFECT,
        )
