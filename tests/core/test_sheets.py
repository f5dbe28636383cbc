"""
Tests for the formatted display of effects and players.
"""

from character.main import Player
from core.sheets import effect_to_string, print_player_sheet
from core.utils import make_bar, strip_markup
from effects.block_effect import BlockEffect
from effects.lifesteal_effect import LifestealEffect
from effects.reflect_effect import ReflectEffect


def test_effect_to_string():
    assert strip_markup(effect_to_string(BlockEffect())).endswith(
        "Block, absorbs the attack and stops the chain"
    )
    assert strip_markup(effect_to_string(ReflectEffect(ratio=0.5))).endswith(
        "Reflect, reflects 50% of the damage"
    )
    assert strip_markup(effect_to_string(LifestealEffect(ratio=0.4))).endswith(
        "Lifesteal, heals the attacker by 40% of the damage"
    )


def test_make_bar_handles_unbounded_health():
    assert strip_markup(make_bar(5, 10, length=4)) == "▮▮▯▯"
    assert strip_markup(make_bar(20, 10, length=4)) == "▮▮▮▮"
    assert strip_markup(make_bar(-5, 10, length=4)) == "▯▯▯▯"
    assert strip_markup(make_bar(0, 0, length=4)) == "▯▯▯▯"


def test_print_player_sheet(capsys):
    player = Player("Knight", 100, [ReflectEffect(ratio=0.5)])
    print_player_sheet(player)
    out = capsys.readouterr().out
    assert "Knight" in out
    assert "Reflect" in out
