"""
Tests for the reflect effect.
"""

import pytest
from character.main import Player
from core.constants import DEFAULT_REFLECT_RATIO, EffectType
from effects.event_system import CombatEvent
from effects.reflect_effect import ReflectEffect
from pydantic import ValidationError


@pytest.fixture
def attacker():
    return Player("Goblin", 50)


@pytest.fixture
def target():
    return Player("Knight", 100)


def test_reflect_default_ratio():
    assert ReflectEffect().ratio == DEFAULT_REFLECT_RATIO == 0.5


def test_reflect_damages_attacker(attacker, target):
    """
    Test that reflect sends a share of the damage back to the attacker.
    """
    reflect = ReflectEffect(ratio=0.5)
    event = CombatEvent(attacker, target, 20)
    activation = reflect.process(event)

    assert attacker.health == 40, "Attacker should take 10 reflected damage"
    assert activation.amount == 10
    assert activation.effect_type == EffectType.REFLECT
    assert activation.damage_seen == 20
    assert not activation.cancelled_event


def test_reflect_does_not_change_event(attacker, target):
    """
    Test that reflect leaves the damage and the cancellation flag alone.
    """
    event = CombatEvent(attacker, target, 20)
    ReflectEffect(ratio=0.5).process(event)
    assert event.damage == 20
    assert not event.cancelled
    assert target.health == 100, "The target is not hit by the effect itself"


@pytest.mark.parametrize(
    "damage, ratio, expected",
    [
        (7, 0.5, 3),
        (10, 0.3, 3),
        (25, 0.2, 5),
        (1, 0.5, 0),
        (10, 1.5, 15),
    ],
)
def test_reflect_truncates_toward_zero(attacker, target, damage, ratio, expected):
    """
    Test that the reflected amount is truncated, never rounded.
    """
    activation = ReflectEffect(ratio=ratio).process(CombatEvent(attacker, target, damage))
    assert activation.amount == expected
    assert attacker.health == 50 - expected


def test_reflect_non_positive_amount_is_ignored(attacker, target):
    """
    Test that nothing happens to the attacker when there is nothing to reflect.
    """
    activation = ReflectEffect(ratio=0.5).process(CombatEvent(attacker, target, -7))
    assert activation.amount == -3, "Truncation goes toward zero"
    assert attacker.health == 50


def test_reflect_reads_current_damage(attacker, target):
    """
    Test that reflect uses the damage as it is when it runs.
    """
    event = CombatEvent(attacker, target, 20)
    event.damage = 8
    activation = ReflectEffect(ratio=0.5).process(event)
    assert activation.amount == 4
    assert attacker.health == 46


def test_reflect_is_immutable():
    reflect = ReflectEffect(ratio=0.5)
    with pytest.raises(ValidationError):
        reflect.ratio = 0.9


def test_reflect_display():
    assert str(ReflectEffect(ratio=0.5)) == "Effect: Reflect (50%)"
    assert str(ReflectEffect(ratio=0.2)) == "Effect: Reflect (20%)"
