"""
Simulator package for the effect-chain combat simulator.

This package contains the modules of the simulator: players, passive effects
and the effect chain, attack resolution, and shared utilities.
"""
