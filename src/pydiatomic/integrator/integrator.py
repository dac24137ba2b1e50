"""
Abstract base class for time integrators.

This module provides the Integrator ABC that defines the interface
for fixed-timestep integration of the bond coordinate.
"""
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

import numpy as np

if TYPE_CHECKING:
    from pydiatomic.core import SimulationState
    from pydiatomic.potential import ForceLaw


class Integrator(ABC):
    """
    Abstract base for time integration algorithms (Strategy Pattern).

    Integrators advance the simulation by one timestep, updating the
    displacement, velocity, force and energies of the state in place.

    Attributes:
        dt: Time step size, single precision.

    Example:
        >>> from pydiatomic.integrator import VelocityVerlet
        >>> integrator = VelocityVerlet(dt=0.1)
        >>> integrator.step(state, force_law, mass)
    """

    def __init__(self, dt: float) -> None:
        """
        Initialize integrator.

        Args:
            dt: Time step size in atomic time units.
        """
        if not dt > 0:
            raise ValueError(f"Time step must be positive, got {dt}")
        self.dt = np.float32(dt)

    @abstractmethod
    def step(
        self,
        state: "SimulationState",
        force_law: "ForceLaw",
        mass: np.float32,
    ) -> None:
        """
        Advance the state by one time step.

        Args:
            state: The state to integrate, updated in place.
            force_law: Model force and energy.
            mass: Reduced mass (atomic units).
        """
        pass

    @abstractmethod
    def get_name(self) -> str:
        """Get human-readable name of this integrator."""
        pass
