"""
Abstract base class for bond force laws.

This module provides the ForceLaw ABC that every potential model
implements. The integrator is written once against this interface;
models differ only in the closed forms below.
"""
from abc import ABC, abstractmethod

import numpy as np


class ForceLaw(ABC):
    """
    Abstract base for one-dimensional bond potentials (Strategy Pattern).

    Subclasses hold only the constants they need, stored as
    single-precision scalars, and evaluate force and energy as functions
    of the signed displacement ``r`` from equilibrium.

    Example:
        >>> class Linear(ForceLaw):
        ...     def compute_force(self, r):
        ...         return np.float32(-1.0)
        ...     def compute_energy(self, r):
        ...         return r
        ...     def get_name(self):
        ...         return "Linear"
    """

    @abstractmethod
    def compute_force(self, r: np.float32) -> np.float32:
        """
        Compute the force along the bond.

        Args:
            r: Displacement from equilibrium (bohr).

        Returns:
            Force in atomic units.
        """
        pass

    @abstractmethod
    def compute_energy(self, r: np.float32) -> np.float32:
        """
        Compute the potential energy of the bond.

        Args:
            r: Displacement from equilibrium (bohr).

        Returns:
            Potential energy in hartree.
        """
        pass

    @abstractmethod
    def get_name(self) -> str:
        """Get human-readable name of this force law."""
        pass
