"""
Effect chain module for the simulator.

Links the effects equipped by a target into an ordered invocation sequence
and drives a combat event through it.
"""

from collections.abc import Callable, Iterator, Sequence
from typing import Any

from core.logging import log_debug
from core.utils import GameException

from .base_effect import Effect
from .event_system import CombatEvent, EffectActivation

ActivationSink = Callable[[EffectActivation], None]


class ChainError(GameException):
    """Raised when an effect chain is built from malformed links."""


class EffectChain:
    """
    A transient, ordered sequence of effects built for a single attack.

    The chain owns a snapshot of the effect list taken when it is built: the
    link following position ``i`` is position ``i + 1``, and the last link
    is terminal. The links live in the chain, never in the effects, so an
    effect can appear in many chains (or several times in the same chain)
    without any aliasing between them.

    Attributes:
        links (tuple[Effect, ...]):
            The effects of the chain, in invocation order.

    """

    links: tuple[Effect, ...]

    def __init__(self, links: tuple[Effect, ...]) -> None:
        self.links = links

    @classmethod
    def build(cls, effects: Sequence[Any]) -> "EffectChain":
        """
        Link a list of effects into a chain.

        Args:
            effects (Sequence[Any]):
                The effects, in the order in which they must run.

        Returns:
            EffectChain:
                The chain; empty if the list is empty.

        Raises:
            ChainError:
                If a link is not an effect, if the list contains itself, or
                if a link is another chain.

        """
        links: list[Effect] = []
        for index, link in enumerate(effects):
            if link is effects:
                raise ChainError(f"Link {index} refers to the effect list itself.")
            if isinstance(link, EffectChain):
                raise ChainError(f"Link {index} is a nested effect chain.")
            if not isinstance(link, Effect):
                raise ChainError(
                    f"Link {index} is not an effect: {type(link).__name__}."
                )
            links.append(link)
        return cls(tuple(links))

    @property
    def head(self) -> Effect | None:
        """Returns the first effect of the chain, or None if it is empty."""
        return self.links[0] if self.links else None

    def next_of(self, index: int) -> Effect | None:
        """
        Returns the effect that follows the one at the given position.

        Args:
            index (int): The position of an effect in the chain.

        Returns:
            Effect | None: The following effect, or None for the last link.

        """
        if index < 0 or index >= len(self.links):
            raise IndexError(f"Chain position out of range: {index}")
        if index + 1 < len(self.links):
            return self.links[index + 1]
        return None

    def is_empty(self) -> bool:
        return not self.links

    def run(
        self,
        event: CombatEvent,
        sink: ActivationSink | None = None,
    ) -> list[EffectActivation]:
        """
        Drive a combat event through the chain, starting from the head.

        Before each link the cancellation flag is checked: once an effect has
        cancelled the event, no further effect is processed.

        Args:
            event (CombatEvent):
                The event to propagate.
            sink (ActivationSink | None):
                Optional callback receiving every activation as it happens.

        Returns:
            list[EffectActivation]:
                The activations of the processed effects, in order.

        """
        activations: list[EffectActivation] = []
        for index, effect in enumerate(self.links):
            if event.cancelled:
                log_debug(
                    f"Event cancelled, skipping the remaining {len(self.links) - index} effect(s)."
                )
                break
            activation = effect.process(event)
            activations.append(activation)
            if sink is not None:
                sink(activation)
        return activations

    def __len__(self) -> int:
        return len(self.links)

    def __iter__(self) -> Iterator[Effect]:
        return iter(self.links)

    def __str__(self) -> str:
        if not self.links:
            return "EffectChain(<empty>)"
        return "EffectChain(" + " -> ".join(e.display_name for e in self.links) + ")"
