"""
Lennard-Jones bond model.

The 12-6 potential written in terms of the equilibrium separation r*
and measured from the bottom of the well.
"""
import numpy as np

from .force_law import ForceLaw

_ONE = np.float32(1.0)
_TWO = np.float32(2.0)
_TWELVE = np.float32(12.0)


class LennardJonesForceLaw(ForceLaw):
    """
    Lennard-Jones 12-6 bond.

    With s = r* / (r + r*):

        F(r) = 12 / (r + r*) * ε * (s¹² - s⁶)
        U(r) = ε * (s¹² - 2s⁶ + 1)

    where:
        - ε (epsilon): Depth of the potential well
        - r* (rstar): Equilibrium separation, where U = 0 and F = 0
        - r: Displacement from r*, so the separation is r + r*

    The energy is shifted by +ε so that U(0) = 0 and U -> ε as the
    atoms separate.

    Attributes:
        epsilon: Well depth ε (hartree).
        rstar: Equilibrium separation r* (bohr).

    Example:
        >>> from pydiatomic.potential import LennardJonesForceLaw
        >>> lj = LennardJonesForceLaw(epsilon=4.53624e-4, rstar=7.10726)
        >>> force = lj.compute_force(np.float32(-0.5))
    """

    def __init__(self, epsilon: float, rstar: float) -> None:
        """
        Initialize Lennard-Jones force law.

        Args:
            epsilon: Well depth ε (energy units).
            rstar: Equilibrium separation r* (length units).
        """
        if epsilon <= 0:
            raise ValueError(f"Epsilon must be positive, got {epsilon}")
        if rstar <= 0:
            raise ValueError(f"rstar must be positive, got {rstar}")

        self.epsilon = np.float32(epsilon)
        self.rstar = np.float32(rstar)

    def _reduced_separation(self, r: np.float32) -> np.float32:
        """Return s = r* / (r + r*)."""
        return self.rstar / (r + self.rstar)

    def compute_force(self, r: np.float32) -> np.float32:
        s = self._reduced_separation(r)
        return (_TWELVE / (r + self.rstar)) * self.epsilon * (s**12 - s**6)

    def compute_energy(self, r: np.float32) -> np.float32:
        s = self._reduced_separation(r)
        return self.epsilon * (s**12 - _TWO * s**6 + _ONE)

    def get_name(self) -> str:
        """Return force law name with parameters."""
        return f"LennardJones(epsilon={self.epsilon}, rstar={self.rstar})"
