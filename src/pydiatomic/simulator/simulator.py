"""
Main Simulator class that orchestrates a diatomic run.

Brings together the initial state, integrator, force law and observers
into a fixed-timestep loop.
"""
import logging
from typing import TYPE_CHECKING, List, Optional

import numpy as np

if TYPE_CHECKING:
    from pydiatomic.core import SimulationState
    from pydiatomic.integrator import Integrator
    from pydiatomic.observer import Observer
    from pydiatomic.potential import ForceLaw

logger = logging.getLogger(__name__)


class Simulator:
    """
    Diatomic simulation driver.

    Orchestrates the simulation loop:
    1. Notify observers with the initial state (step 0)
    2. For each step:
       a. Integrate the equation of motion
       b. Notify observers
    3. Finalize observers

    The number of steps is fixed by the caller; there is no branching on
    wall-clock time and no cancellation.

    Example:
        >>> sim = Simulator(
        ...     state=initial_state,
        ...     integrator=VelocityVerlet(dt=0.1),
        ...     force_law=HarmonicForceLaw(k=0.3665358),
        ...     mass=911.44,
        ...     observers=[SeriesObserver()],
        ... )
        >>> sim.run(num_steps=100)
    """

    def __init__(
        self,
        state: "SimulationState",
        integrator: "Integrator",
        force_law: "ForceLaw",
        mass: float,
        observers: Optional[List["Observer"]] = None,
    ) -> None:
        """
        Initialize simulator.

        Args:
            state: Initial state; owned and mutated by the simulator.
            integrator: Time integration algorithm.
            force_law: Model force and energy.
            mass: Reduced mass (atomic units).
            observers: List of observers (optional).
        """
        if mass <= 0:
            raise ValueError(f"Mass must be positive, got {mass}")
        self.state = state
        self.integrator = integrator
        self.force_law = force_law
        self.mass = np.float32(mass)
        self.observers = observers or []

        self._initialized = False
        self._total_steps_run = 0

    def initialize(self) -> None:
        """
        Record the initial state with every observer.

        Called automatically by run() if not already done.
        """
        if not self._initialized:
            for observer in self.observers:
                observer.observe(self.state, 0)
            self._initialized = True

    def run(self, num_steps: int) -> None:
        """
        Run the simulation for a given number of steps.

        Args:
            num_steps: Number of time steps to run.
        """
        if num_steps < 0:
            raise ValueError(f"num_steps must be >= 0, got {num_steps}")

        self.initialize()

        logger.debug(
            "Running %d steps with %s and %s",
            num_steps,
            self.integrator.get_name(),
            self.force_law.get_name(),
        )

        for _ in range(num_steps):
            self.integrator.step(self.state, self.force_law, self.mass)
            self._total_steps_run += 1

            step = self._total_steps_run
            for observer in self.observers:
                if step % observer.interval == 0:
                    observer.observe(self.state, step)

        for observer in self.observers:
            observer.finalize()

    def get_total_steps(self) -> int:
        """Return total steps run so far."""
        return self._total_steps_run
