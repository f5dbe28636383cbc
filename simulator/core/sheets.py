"""
Module for printing player sheets and other game elements in a formatted way.
"""

from typing import Any

from effects.base_effect import Effect, RatioEffect
from effects.block_effect import BlockEffect
from effects.lifesteal_effect import LifestealEffect
from effects.reflect_effect import ReflectEffect
from rich.padding import Padding

from core.utils import cprint, make_bar


def effect_to_string(effect: Effect) -> str:
    """
    Converts an effect to a formatted string representation.

    Args:
        effect (Effect): The effect to format.

    Returns:
        str: Formatted string describing what the effect does.

    """
    sheet: str = f"{effect.emoji} {effect.colored_name}"
    if isinstance(effect, BlockEffect):
        sheet += ", absorbs the attack and stops the chain"
    elif isinstance(effect, ReflectEffect):
        sheet += f", reflects [magenta]{effect.ratio:.0%}[/] of the damage"
    elif isinstance(effect, LifestealEffect):
        sheet += f", heals the attacker by [green]{effect.ratio:.0%}[/] of the damage"
    elif isinstance(effect, RatioEffect):
        sheet += f", ratio [blue]{effect.ratio:.0%}[/]"
    return sheet


def print_player_sheet(player: Any) -> None:
    """
    Prints the details of a player in a formatted way.

    Args:
        player (Player): The player to display.

    """
    bar = make_bar(player.health, player.starting_health, color="green")
    cprint(
        f"👤 {player.colored_name}, HP: [green]{player.health}[/] "
        f"({player.starting_health}) {bar}"
    )
    if not player.effects:
        cprint(Padding("[dim]No active effects.[/]", (0, 2)))
        return
    cprint(Padding("[blue]Effects[/] (in order):", (0, 2)))
    for position, effect in enumerate(player.effects, start=1):
        cprint(Padding(f"{position}. {effect_to_string(effect)}", (0, 4)))


def print_damage_result(result: Any) -> None:
    """
    Prints the outcome of a resolved attack.

    Args:
        result (DamageResult): The outcome to display.

    """
    if result.cancelled:
        cprint("[bold cyan]Attack cancelled[/], no damage applied.")
    else:
        cprint(f"Final damage applied: [red]{result.final_damage}[/].")
    for activation in result.activations:
        cprint(
            Padding(
                f"{activation.effect_type.colored_name}: saw {activation.damage_seen}, "
                f"amount {activation.amount}",
                (0, 2),
            )
        )
