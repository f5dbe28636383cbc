"""
Player module for the simulator.

Defines the Player class: a named health counter that carries the ordered
list of passive effects reacting to incoming attacks.
"""

from collections.abc import Iterable

from core.logging import log_debug
from effects.base_effect import Effect


class Player:
    """
    Represents a participant of a fight.

    Health is an unbounded integer: it is never clamped and may go negative,
    death is not tracked here. The effect list is owned by the player and can
    be reordered freely by the caller; its order at the moment an attack is
    resolved is the order in which the effects run.

    Attributes:
        name (str):
            The name of the player.
        health (int):
            The current health of the player.
        starting_health (int):
            The health the player was created with, used for display.
        effects (list[Effect]):
            The passive effects equipped by the player, in invocation order.

    """

    name: str
    health: int
    starting_health: int
    effects: list[Effect]

    def __init__(
        self,
        name: str,
        health: int,
        effects: Iterable[Effect] | None = None,
    ) -> None:
        self.name = name
        self.health = health
        self.starting_health = health
        self.effects = list(effects) if effects is not None else []

    @property
    def colored_name(self) -> str:
        """Returns the player's name with color formatting applied."""
        return f"[bold blue]{self.name}[/]"

    # === Health Management ===

    def take_damage(self, amount: int) -> None:
        """
        Removes health from the player.

        Args:
            amount (int):
                The damage to take. Non-positive amounts are ignored.

        """
        if amount > 0:
            self.health -= amount
            log_debug(f"{self.name} takes {amount} damage.", {"health": self.health})

    def heal(self, amount: int) -> None:
        """
        Restores health to the player.

        Args:
            amount (int):
                The health to restore. Non-positive amounts are ignored.

        """
        if amount > 0:
            self.health += amount
            log_debug(f"{self.name} heals {amount} health.", {"health": self.health})

    # === Effect Management ===

    def add_effect(self, effect: Effect) -> None:
        """Appends an effect at the end of the player's chain."""
        self.effects.append(effect)

    def insert_effect(self, index: int, effect: Effect) -> None:
        """Inserts an effect at the given position of the player's chain."""
        self.effects.insert(index, effect)

    def remove_effect(self, effect: Effect) -> bool:
        """
        Removes the first occurrence of an effect from the player's chain.

        Args:
            effect (Effect):
                The effect to remove.

        Returns:
            bool:
                True if the effect was removed, False if it was not equipped.

        """
        for index, equipped in enumerate(self.effects):
            if equipped is effect:
                del self.effects[index]
                return True
        if effect in self.effects:
            self.effects.remove(effect)
            return True
        return False

    def remove_effect_at(self, index: int) -> Effect:
        """Removes and returns the effect at the given position."""
        return self.effects.pop(index)

    def clear_effects(self) -> None:
        self.effects.clear()

    def __str__(self) -> str:
        return f"[Player: {self.name}, Health: {self.health}]"

    def __repr__(self) -> str:
        return f"Player(name={self.name!r}, health={self.health}, effects={len(self.effects)})"
