"""
Harmonic oscillator bond model.
"""
import numpy as np

from .force_law import ForceLaw

_HALF = np.float32(0.5)


class HarmonicForceLaw(ForceLaw):
    """
    Harmonic bond.

    F(r) = -k * r
    U(r) = 1/2 * k * r^2

    Attributes:
        k: Force constant (atomic units).

    Example:
        >>> from pydiatomic.potential import HarmonicForceLaw
        >>> law = HarmonicForceLaw(k=0.3665358)
        >>> law.compute_force(np.float32(0.1))
    """

    def __init__(self, k: float) -> None:
        """
        Initialize harmonic force law.

        Args:
            k: Force constant (hartree / bohr^2).
        """
        if k <= 0:
            raise ValueError(f"k must be positive, got {k}")
        self.k = np.float32(k)

    def compute_force(self, r: np.float32) -> np.float32:
        return -self.k * r

    def compute_energy(self, r: np.float32) -> np.float32:
        return _HALF * self.k * r * r

    def get_name(self) -> str:
        """Return force law name with parameters."""
        return f"Harmonic(k={self.k})"
