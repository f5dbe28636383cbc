"""
Damage resolver module for the simulator.

Resolves one attack: builds the combat event, drives it through the target's
effect chain and finally applies whatever damage is left to the target.
"""

from catchery import log_debug, log_warning
from character.main import Player
from core.constants import EffectType, RecordKind
from effects.effect_chain import EffectChain
from effects.event_system import CombatEvent, EffectActivation
from pydantic import BaseModel, Field

from combat.combat_log import CombatRecord, RecordSink


class DamageResult(BaseModel):
    """The outcome of a resolved attack."""

    final_damage: int = Field(
        description="Damage applied to the target (0 when cancelled).",
    )
    cancelled: bool = Field(
        description="Whether an effect cancelled the attack.",
    )
    activations: list[EffectActivation] = Field(
        default_factory=list,
        description="Effects processed during the attack, in order.",
    )
    attacker_health: int = Field(
        description="Health of the attacker once the attack is resolved.",
    )
    target_health: int = Field(
        description="Health of the target once the attack is resolved.",
    )


def _activation_message(event: CombatEvent, activation: EffectActivation) -> str:
    """
    Renders the log message of an effect activation.

    Args:
        event (CombatEvent): The event being processed.
        activation (EffectActivation): What the effect did.

    Returns:
        str: The message, with rich markup.

    """
    name = activation.effect_type.colorize(activation.effect.display_name)
    if activation.effect_type == EffectType.BLOCK:
        return f"-> {name} triggered. The damage is fully absorbed."
    if activation.effect_type == EffectType.REFLECT:
        return (
            f"-> {name} triggered. {event.attacker.colored_name} takes "
            f"[red]{activation.amount}[/] damage."
        )
    if activation.effect_type == EffectType.LIFESTEAL:
        return (
            f"-> {name} triggered. {event.attacker.colored_name} heals "
            f"[green]{activation.amount}[/] HP."
        )
    return f"-> {name} triggered."


class DamageResolver:
    """
    Orchestrates the resolution of attacks.

    Every call to ``resolve`` builds a fresh event and a fresh chain from the
    target's current effect list, so changes to the list between two attacks
    are always honoured. Attacks must be resolved one at a time.
    """

    def __init__(self, sink: RecordSink | None = None) -> None:
        """
        Initialize the DamageResolver.

        Args:
            sink (RecordSink | None):
                Optional callback receiving a record for every step of each
                attack (e.g., ``CombatLog.record``).

        """
        self.sink = sink

    def _emit(
        self,
        kind: RecordKind,
        actor: Player,
        message: str,
        target: Player | None = None,
        value: int | None = None,
    ) -> None:
        if self.sink is None:
            return
        self.sink(
            CombatRecord(
                kind=kind,
                actor=actor.name,
                target=target.name if target is not None else None,
                value=value,
                message=message,
            )
        )

    def resolve(self, attacker: Player, target: Player, damage: int) -> DamageResult:
        """
        Resolve an attack of ``attacker`` against ``target``.

        Effects equipped by the target run first, in list order; attacker side
        effects (reflected damage, lifesteal) therefore happen before the
        target is hit, and are computed from the damage as it was when each
        effect ran.

        Args:
            attacker (Player):
                The player performing the attack.
            target (Player):
                The player receiving the attack.
            damage (int):
                The incoming damage. It is not validated.

        Returns:
            DamageResult:
                The damage applied and whether the attack was cancelled.

        """
        if attacker is target:
            log_warning(
                f"{attacker.name} is attacking itself",
                {"player": attacker.name, "context": "damage_resolution"},
            )
        log_debug(f"{attacker.name} attacks {target.name} with {damage} damage.")
        self._emit(
            RecordKind.ATTACK,
            attacker,
            f"{attacker.colored_name} attacks {target.colored_name}, "
            f"trying to deal [red]{damage}[/] damage!",
            target=target,
            value=damage,
        )

        event = CombatEvent(attacker, target, damage)
        activations: list[EffectActivation] = []

        if not target.effects:
            self._emit(
                RecordKind.NO_EFFECTS,
                target,
                f"{target.colored_name} has no active effects.",
            )
        else:
            chain = EffectChain.build(target.effects)
            self._emit(
                RecordKind.EFFECTS_ACTIVE,
                target,
                f"Active effects on {target.colored_name}: "
                + ", ".join(str(e) for e in chain),
                value=len(chain),
            )
            log_debug(f"Running {chain} for {target.name}.")

            def forward(activation: EffectActivation) -> None:
                self._emit(
                    RecordKind.from_effect_type(activation.effect_type),
                    target,
                    _activation_message(event, activation),
                    target=attacker,
                    value=activation.amount,
                )

            activations = chain.run(event, sink=forward)

        if event.cancelled:
            final_damage = 0
            self._emit(
                RecordKind.DAMAGE_CANCELLED,
                target,
                "The damage was fully cancelled.",
                target=attacker,
            )
        else:
            final_damage = event.damage
            target.take_damage(final_damage)
            self._emit(
                RecordKind.DAMAGE_APPLIED,
                attacker,
                f"{target.colored_name} takes [red]{final_damage}[/] damage.",
                target=target,
                value=final_damage,
            )

        self._emit(
            RecordKind.SUMMARY,
            attacker,
            f"Result: {attacker} | {target}",
            target=target,
        )
        log_debug(
            f"Attack resolved: final_damage={final_damage}, cancelled={event.cancelled}"
        )
        return DamageResult(
            final_damage=final_damage,
            cancelled=event.cancelled,
            activations=activations,
            attacker_health=attacker.health,
            target_health=target.health,
        )


def deal_damage(
    attacker: Player,
    target: Player,
    damage: int,
    sink: RecordSink | None = None,
) -> DamageResult:
    """
    Resolve a single attack with a throwaway resolver.

    Args:
        attacker (Player): The player performing the attack.
        target (Player): The player receiving the attack.
        damage (int): The incoming damage.
        sink (RecordSink | None): Optional record sink.

    Returns:
        DamageResult: The outcome of the attack.

    """
    return DamageResolver(sink=sink).resolve(attacker, target, damage)
