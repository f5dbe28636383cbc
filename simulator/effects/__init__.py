"""
Effects system module for the combat simulator.

This module contains the passive effects a player can equip (block, reflect,
lifesteal), the combat event they react to, and the effect chain that drives
an event through them.
"""

# Import base classes
from .base_effect import Effect, RatioEffect

# Import concrete effects
from .block_effect import BlockEffect
from .lifesteal_effect import LifestealEffect
from .reflect_effect import ReflectEffect

# Import the chain.
from .effect_chain import ActivationSink, ChainError, EffectChain

# Import the event system.
from .event_system import CombatEvent, CombatEventError, EffectActivation

__all__ = [
    # Base classes
    "Effect",
    "RatioEffect",
    # Concrete effects
    "BlockEffect",
    "ReflectEffect",
    "LifestealEffect",
    # Chain
    "ActivationSink",
    "ChainError",
    "EffectChain",
    # Event system
    "CombatEvent",
    "CombatEventError",
    "EffectActivation",
]
