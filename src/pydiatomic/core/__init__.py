"""
Core module for diatomic simulations.

Provides the element table, value objects, simulation state and the
exception hierarchy. The service entry point lives in
``pydiatomic.core.service``.
"""

from .constants import (
    BOHR_TO_METER,
    BOLTZMANN_SI,
    HARMONIC,
    LENNARD_JONES,
    MAX_SAMPLES,
    MORSE,
    SUPPORTED_MODELS,
)
from .element_registry import ElementProperties, ElementRegistry, elements
from .errors import (
    InvalidInitialConditionError,
    InvalidParametersError,
    SimulationError,
    UnknownElementError,
    UnknownModelError,
)
from .schemas import SimulationParameters, SimulationResult
from .state import SimulationState

__all__ = [
    # Constants
    "BOHR_TO_METER",
    "BOLTZMANN_SI",
    "HARMONIC",
    "LENNARD_JONES",
    "MAX_SAMPLES",
    "MORSE",
    "SUPPORTED_MODELS",
    # Elements
    "ElementProperties",
    "ElementRegistry",
    "elements",
    # Errors
    "SimulationError",
    "UnknownElementError",
    "UnknownModelError",
    "InvalidInitialConditionError",
    "InvalidParametersError",
    # Value objects
    "SimulationParameters",
    "SimulationResult",
    "SimulationState",
]
