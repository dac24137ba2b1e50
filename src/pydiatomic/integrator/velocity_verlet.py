"""
Velocity Verlet integrator implementation.

Time-reversible and symplectic with good long-term energy conservation.
One implementation serves every force law.
"""
from typing import TYPE_CHECKING

import numpy as np

from .integrator import Integrator

if TYPE_CHECKING:
    from pydiatomic.core import SimulationState
    from pydiatomic.potential import ForceLaw

_HALF = np.float32(0.5)


class VelocityVerlet(Integrator):
    """
    Velocity Verlet integrator in the staggered half-step form.

    Algorithm (for each time step dt):
        1. r(t + dt/2) = r(t) + v(t) * dt/2
        2. a = F(r(t + dt/2)) / m
        3. v(t + dt) = v(t) + a * dt
        4. r(t + dt) = r(t + dt/2) + v(t + dt) * dt/2
        5. F, a re-evaluated at r(t + dt) for the record
        6. KE = 1/2 m v^2, PE = U(r(t + dt)), E = KE + PE

    The force from step 5 is not reused by the next step, which evaluates
    its own half-step force.

    Properties:
        - Time-reversible
        - Symplectic (preserves phase space volume)
        - Second-order accurate
        - Good long-term energy conservation

    Example:
        >>> from pydiatomic.integrator import VelocityVerlet
        >>> integrator = VelocityVerlet(dt=0.1)
        >>> for _ in range(1000):
        ...     integrator.step(state, force_law, mass)
    """

    def step(
        self,
        state: "SimulationState",
        force_law: "ForceLaw",
        mass: np.float32,
    ) -> None:
        """
        Advance state by one Velocity Verlet step.

        Args:
            state: The state to integrate, updated in place.
            force_law: Model force and energy.
            mass: Reduced mass (atomic units).
        """
        dt = self.dt
        mass = np.float32(mass)

        # Step 1: Half-step position update
        r_half = state.displacement + state.velocity * dt * _HALF

        # Step 2: Force and acceleration at the half step
        accel = force_law.compute_force(r_half) / mass

        # Step 3: Full-step velocity update
        state.velocity = state.velocity + accel * dt

        # Step 4: Complete position update
        state.displacement = r_half + state.velocity * dt * _HALF

        # Step 5: Force and acceleration at the new position
        state.force = force_law.compute_force(state.displacement)
        state.acceleration = state.force / mass

        # Step 6: Energies
        state.kinetic_energy = _HALF * mass * state.velocity * state.velocity
        state.potential_energy = force_law.compute_energy(state.displacement)
        state.total_energy = state.kinetic_energy + state.potential_energy

        # Step 7: Advance time
        state.time = state.time + dt

    def get_name(self) -> str:
        """Return integrator name with timestep."""
        return f"VelocityVerlet(dt={self.dt})"
