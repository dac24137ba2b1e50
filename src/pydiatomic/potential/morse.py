"""
Morse bond model.

Anharmonic bond with a finite dissociation energy.
"""
import numpy as np

from .force_law import ForceLaw

_ONE = np.float32(1.0)
_TWO = np.float32(2.0)


class MorseForceLaw(ForceLaw):
    """
    Morse potential for molecular bonds.

    F(r) = -2 * D * a * exp(-a*r) * [1 - exp(-a*r)]
    U(r) = D * [1 - exp(-a*r)]²

    where:
        - D: Well depth (dissociation energy)
        - a: Width parameter (controls steepness)
        - r: Displacement from the equilibrium bond length

    Unlike the harmonic bond, the Morse well is asymmetric: it stiffens
    under compression and flattens towards D under extension.

    Attributes:
        D: Well depth (hartree).
        a: Width parameter (1/bohr).

    Example:
        >>> from pydiatomic.potential import MorseForceLaw
        >>> morse = MorseForceLaw(D=0.1818446, a=1.003894)
        >>> energy = morse.compute_energy(np.float32(0.05))
    """

    def __init__(self, D: float, a: float) -> None:
        """
        Initialize Morse force law.

        Args:
            D: Well depth (energy units).
            a: Width parameter (1/length units).
        """
        if D <= 0:
            raise ValueError(f"D must be positive, got {D}")
        if a <= 0:
            raise ValueError(f"a must be positive, got {a}")

        self.D = np.float32(D)
        self.a = np.float32(a)

    def compute_force(self, r: np.float32) -> np.float32:
        exp_term = np.exp(-self.a * r)
        return -_TWO * self.D * self.a * exp_term * (_ONE - exp_term)

    def compute_energy(self, r: np.float32) -> np.float32:
        exp_term = np.exp(-self.a * r)
        return self.D * (_ONE - exp_term) ** 2

    def get_name(self) -> str:
        """Return force law name with parameters."""
        return f"Morse(D={self.D}, a={self.a})"
