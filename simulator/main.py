"""
Main entry point for the combat simulator.

This script runs a few attack scenarios against players carrying passive
effects, to show how the order of the effects changes the outcome:

- Reflect and Lifesteal both react to the damage of the attack.
- Block, placed first, absorbs the attack and silences the remaining effects.
- Removing Block and inserting Reflect at the front changes the chain again.

An optional path to a JSON settings file can be passed on the command line.
"""

import sys
from pathlib import Path

from character import Player
from combat import CombatLog, DamageResolver
from core.logging import log_info, setup_logging
from core.settings import CombatSettings, load_settings
from core.sheets import print_damage_result, print_player_sheet
from core.utils import cprint, crule, set_console_width
from effects import BlockEffect, LifestealEffect, ReflectEffect


def run_attack(
    resolver: DamageResolver,
    log: CombatLog,
    settings: CombatSettings,
    attacker: Player,
    target: Player,
    damage: int,
) -> None:
    """
    Resolve an attack and print what happened.

    Args:
        resolver (DamageResolver): The resolver, writing into ``log``.
        log (CombatLog): The log collecting the records of the attack.
        settings (CombatSettings): The simulator settings.
        attacker (Player): The player performing the attack.
        target (Player): The player receiving the attack.
        damage (int): The incoming damage.

    """
    log.clear()
    if settings.show_sheets:
        print_player_sheet(attacker)
        print_player_sheet(target)
    result = resolver.resolve(attacker, target, damage)
    log.print_records()
    print_damage_result(result)


def main(argv: list[str]) -> None:
    settings = load_settings(Path(argv[1]) if len(argv) > 1 else None)
    setup_logging(settings.log_level, width=settings.console_width)
    set_console_width(settings.console_width)
    log_info("Settings loaded.", settings.model_dump())

    log = CombatLog(capacity=settings.log_capacity)
    resolver = DamageResolver(sink=log.record)

    # Scenario 1: Reflect and Lifesteal.
    crule(":crossed_swords:  Reflect and Lifesteal", style="bold green")
    knight = Player("Knight", 100)
    goblin = Player("Goblin", 50)
    # Order matters: Reflect runs first, then Lifesteal, both on the full damage.
    knight.add_effect(ReflectEffect(ratio=0.5))
    knight.add_effect(LifestealEffect(ratio=0.4))
    run_attack(resolver, log, settings, goblin, knight, 20)

    # Scenario 2: Block first.
    crule(":crossed_swords:  Block first", style="bold green")
    paladin = Player("Paladin", 120)
    ogre = Player("Ogre", 80)
    # Block cancels the event, Lifesteal never runs.
    paladin.add_effect(BlockEffect())
    paladin.add_effect(LifestealEffect(ratio=1.0))
    run_attack(resolver, log, settings, ogre, paladin, 30)

    # Scenario 3: Block removed, Reflect inserted at the front.
    crule(":crossed_swords:  Reflect then Lifesteal", style="bold green")
    paladin.remove_effect_at(0)
    paladin.insert_effect(0, ReflectEffect(ratio=0.2))
    run_attack(resolver, log, settings, ogre, paladin, 25)

    cprint()
    crule(":crossed_swords:  Simulation Finished", style="bold green")


if __name__ == "__main__":
    try:
        main(sys.argv)
    except KeyboardInterrupt:
        cprint("")
        crule(":crossed_swords:  Simulation Interrupted", style="bold red")
