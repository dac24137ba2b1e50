"""
State class for diatomic simulations.

This module provides the SimulationState dataclass representing the
bond coordinate and energies at a single timestep.
"""
from dataclasses import dataclass

import numpy as np

_ZERO = np.float32(0.0)


@dataclass
class SimulationState:
    """
    Snapshot of the molecule at one timestep.

    All fields are single-precision scalars and are evolved together by
    the integrator. The state belongs to one run; observers copy values
    out of it rather than keeping a reference.

    Attributes:
        time: Current simulation time.
        displacement: Bond displacement from equilibrium (bohr).
        force: Force along the bond at ``displacement``.
        acceleration: force / mass.
        velocity: Rate of change of the displacement.
        kinetic_energy: 0.5 * m * v^2.
        potential_energy: Model energy at ``displacement``.
        total_energy: kinetic_energy + potential_energy.

    Example:
        >>> import numpy as np
        >>> from pydiatomic.core import SimulationState
        >>> state = SimulationState(displacement=np.float32(0.07))
    """
    time: np.float32 = _ZERO
    displacement: np.float32 = _ZERO
    force: np.float32 = _ZERO
    acceleration: np.float32 = _ZERO
    velocity: np.float32 = _ZERO
    kinetic_energy: np.float32 = _ZERO
    potential_energy: np.float32 = _ZERO
    total_energy: np.float32 = _ZERO

    def __post_init__(self) -> None:
        """Coerce every field to single precision."""
        self.time = np.float32(self.time)
        self.displacement = np.float32(self.displacement)
        self.force = np.float32(self.force)
        self.acceleration = np.float32(self.acceleration)
        self.velocity = np.float32(self.velocity)
        self.kinetic_energy = np.float32(self.kinetic_energy)
        self.potential_energy = np.float32(self.potential_energy)
        self.total_energy = np.float32(self.total_energy)

    def copy(self) -> "SimulationState":
        """Create an independent copy of the state."""
        return SimulationState(
            time=self.time,
            displacement=self.displacement,
            force=self.force,
            acceleration=self.acceleration,
            velocity=self.velocity,
            kinetic_energy=self.kinetic_energy,
            potential_energy=self.potential_energy,
            total_energy=self.total_energy,
        )
