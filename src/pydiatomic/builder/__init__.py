"""
Builder module for diatomic simulations.

Provides initial-state derivation from temperature. YAML configuration
loading lives in ``pydiatomic.builder.config_loader``.
"""

from .initial_state import derive_initial_state, initial_displacement, thermal_seed

__all__ = [
    "derive_initial_state",
    "initial_displacement",
    "thermal_seed",
]
