"""
Observer module for monitoring simulation progress.

Provides the Observer pattern for capturing the time series and for
logging progress during a run.
"""
import logging
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, List

if TYPE_CHECKING:
    from pydiatomic.core import SimulationState

logger = logging.getLogger(__name__)


class Observer(ABC):
    """
    Abstract base for simulation observers (Observer Pattern).

    Observers are notified with the initial state (step 0) and after
    every integration step.

    Attributes:
        interval: How often to call observe() (in steps).

    Example:
        >>> observer = SeriesObserver()
        >>> if step % observer.interval == 0:
        ...     observer.observe(state, step)
    """

    def __init__(self, interval: int = 1) -> None:
        """
        Initialize observer.

        Args:
            interval: Observation interval in steps. Default=1 (every step).
        """
        if interval < 1:
            raise ValueError(f"Interval must be >= 1, got {interval}")
        self.interval = interval

    @abstractmethod
    def observe(self, state: "SimulationState", step: int) -> None:
        """
        Record observation.

        Args:
            state: Current simulation state.
            step: Current step number (0 for the initial state).
        """
        pass

    def finalize(self) -> None:
        """Called at end of simulation for cleanup."""
        pass

    @abstractmethod
    def get_name(self) -> str:
        """Get observer name."""
        pass


class SeriesObserver(Observer):
    """
    Records the time series of a run by value.

    Values are widened from single to double precision as they are
    recorded. Displacements are recorded twice, once as the signed
    displacement and once as the distance series that is offset later.
    """

    def __init__(self, interval: int = 1) -> None:
        """Initialize series observer."""
        super().__init__(interval)
        self.steps: List[int] = []
        self.times: List[float] = []
        self.displacements: List[float] = []
        self.distances: List[float] = []
        self.potential_energies: List[float] = []
        self.kinetic_energies: List[float] = []
        self.total_energies: List[float] = []

    def observe(self, state: "SimulationState", step: int) -> None:
        """Record one sample."""
        self.steps.append(step)
        self.times.append(float(state.time))
        self.displacements.append(float(state.displacement))
        self.distances.append(float(state.displacement))
        self.potential_energies.append(float(state.potential_energy))
        self.kinetic_energies.append(float(state.kinetic_energy))
        self.total_energies.append(float(state.total_energy))

    def get_name(self) -> str:
        """Return observer name."""
        return f"SeriesObserver(interval={self.interval})"

    def get_energy_drift(self) -> float:
        """
        Compute relative energy drift.

        Returns:
            (E_final - E_initial) / |E_initial|
        """
        if len(self.total_energies) < 2:
            return 0.0
        E0 = self.total_energies[0]
        E_final = self.total_energies[-1]
        if abs(E0) < 1e-30:
            return 0.0
        return (E_final - E0) / abs(E0)


class LogObserver(Observer):
    """
    Logs simulation progress through the ``logging`` module.
    """

    def __init__(self, interval: int = 1000, level: int = logging.INFO) -> None:
        """Initialize log observer."""
        super().__init__(interval)
        self.level = level

    def observe(self, state: "SimulationState", step: int) -> None:
        """Log step info."""
        logger.log(
            self.level,
            "Step %8d | t=%12.4f | r=%12.6g | PE=%12.6g | KE=%12.6g | E_total=%12.6g",
            step,
            state.time,
            state.displacement,
            state.potential_energy,
            state.kinetic_energy,
            state.total_energy,
        )

    def get_name(self) -> str:
        """Return observer name."""
        return f"LogObserver(interval={self.interval})"
