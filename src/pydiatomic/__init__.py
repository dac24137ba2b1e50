"""
pydiatomic - Diatomic bond dynamics under simple interatomic potentials.

Computes the time evolution of a diatomic molecule's bond length under a
harmonic, Morse or Lennard-Jones potential, starting from a displacement
derived from a target temperature, and returns time series of
displacement, distance and energy components ready for plotting.

Main features:
- Reference constants for H, Hg and Ar, extensible per registry
- Closed-form thermal initial conditions for every model
- Single-precision velocity Verlet integration
- YAML configuration, CLI, REST API and matplotlib plots
"""

__version__ = "0.1.0"
__author__ = "pydiatomic Team"

from pydiatomic.core import (
    ElementProperties,
    ElementRegistry,
    InvalidInitialConditionError,
    InvalidParametersError,
    SimulationError,
    SimulationParameters,
    SimulationResult,
    UnknownElementError,
    UnknownModelError,
    elements,
)
from pydiatomic.core.service import list_elements, list_models, simulate_molecule

__all__ = [
    "ElementProperties",
    "ElementRegistry",
    "InvalidInitialConditionError",
    "InvalidParametersError",
    "SimulationError",
    "SimulationParameters",
    "SimulationResult",
    "UnknownElementError",
    "UnknownModelError",
    "elements",
    "list_elements",
    "list_models",
    "simulate_molecule",
]
