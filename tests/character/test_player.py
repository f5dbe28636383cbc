"""
Tests for the player health counter and effect list.
"""

import pytest
from character.main import Player
from effects.block_effect import BlockEffect
from effects.lifesteal_effect import LifestealEffect
from effects.reflect_effect import ReflectEffect


@pytest.fixture
def player():
    return Player("Knight", 100)


def test_take_damage(player):
    player.take_damage(30)
    assert player.health == 70


@pytest.mark.parametrize("amount", [0, -1, -50])
def test_take_non_positive_damage_is_ignored(player, amount):
    player.take_damage(amount)
    assert player.health == 100


def test_heal(player):
    player.heal(15)
    assert player.health == 115, "Health has no upper bound"


@pytest.mark.parametrize("amount", [0, -10])
def test_non_positive_heal_is_ignored(player, amount):
    player.heal(amount)
    assert player.health == 100


def test_health_can_go_negative(player):
    """
    Test that health is never clamped to zero.
    """
    player.take_damage(150)
    assert player.health == -50
    player.heal(20)
    assert player.health == -30


def test_effect_list_management(player):
    """
    Test adding, inserting and removing effects.
    """
    block = BlockEffect()
    reflect = ReflectEffect(ratio=0.2)
    lifesteal = LifestealEffect(ratio=1.0)

    player.add_effect(block)
    player.add_effect(lifesteal)
    assert player.effects == [block, lifesteal]

    assert player.remove_effect_at(0) is block
    player.insert_effect(0, reflect)
    assert player.effects == [reflect, lifesteal]

    assert player.remove_effect(lifesteal)
    assert not player.remove_effect(block)
    assert player.effects == [reflect]

    player.clear_effects()
    assert player.effects == []


def test_remove_effect_prefers_same_instance(player):
    first = ReflectEffect(ratio=0.5)
    second = ReflectEffect(ratio=0.5)
    player.add_effect(first)
    player.add_effect(second)
    player.remove_effect(second)
    assert len(player.effects) == 1
    assert player.effects[0] is first


def test_duplicates_are_allowed(player):
    reflect = ReflectEffect()
    player.add_effect(reflect)
    player.add_effect(reflect)
    assert player.effects == [reflect, reflect]


def test_effects_are_copied_on_construction():
    effects = [BlockEffect()]
    player = Player("Paladin", 120, effects)
    effects.append(ReflectEffect())
    assert len(player.effects) == 1


def test_player_str(player):
    assert str(player) == "[Player: Knight, Health: 100]"
    assert player.starting_health == 100
