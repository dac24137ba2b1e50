"""
Input and output value objects for a simulation run.

Shared by the service entry point, the application workflow, the REST
transport and the CLI so that all call paths agree on field names.
"""
from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Any, Dict, List

from .errors import InvalidParametersError


# ------------------------------------------------------------------ #
#  Input schema
# ------------------------------------------------------------------ #


@dataclass(frozen=True)
class SimulationParameters:
    """
    Everything needed to run one diatomic simulation.

    Attributes:
        model: "harmonic", "morse" or "lennard-jones".
        element: Element symbol resolved against the registry.
        duration: Simulated time span (atomic time units).
        timestep: Integration step (atomic time units).
        temperature: Temperature (K) seeding the initial displacement.
    """

    model: str
    element: str
    duration: float
    timestep: float
    temperature: float

    @property
    def num_steps(self) -> int:
        """Number of integration steps, floor(duration / timestep)."""
        return int(math.floor(self.duration / self.timestep))

    @property
    def num_samples(self) -> int:
        """Samples in the resulting series (initial state plus one per step)."""
        return self.num_steps + 1

    def validate(self) -> None:
        """
        Check numeric fields before any integration work.

        Raises:
            InvalidParametersError: On non-finite values, a non-positive
                timestep or temperature, duration shorter than timestep, or
                a step count too large to represent.
        """
        for name in ("duration", "timestep", "temperature"):
            value = getattr(self, name)
            if not math.isfinite(value):
                raise InvalidParametersError(f"{name} must be finite, got {value}")
        if self.timestep <= 0:
            raise InvalidParametersError(
                f"timestep must be positive, got {self.timestep}"
            )
        if self.duration < self.timestep:
            raise InvalidParametersError(
                f"duration ({self.duration}) must be >= timestep ({self.timestep})"
            )
        if not math.isfinite(self.duration / self.timestep):
            raise InvalidParametersError(
                f"duration / timestep overflows ({self.duration} / {self.timestep})"
            )
        if self.temperature <= 0:
            raise InvalidParametersError(
                f"temperature must be positive, got {self.temperature}"
            )

    @classmethod
    def from_dict(cls, d: Dict[str, Any]) -> "SimulationParameters":
        missing = [
            key
            for key in ("model", "element", "duration", "timestep", "temperature")
            if key not in d
        ]
        if missing:
            raise InvalidParametersError(
                f"Missing simulation parameters: {', '.join(missing)}"
            )
        try:
            return cls(
                model=str(d["model"]),
                element=str(d["element"]),
                duration=float(d["duration"]),
                timestep=float(d["timestep"]),
                temperature=float(d["temperature"]),
            )
        except (TypeError, ValueError) as exc:
            raise InvalidParametersError(f"Malformed simulation parameters: {exc}") from exc

    def to_dict(self) -> Dict[str, Any]:
        return {
            "model": self.model,
            "element": self.element,
            "duration": self.duration,
            "timestep": self.timestep,
            "temperature": self.temperature,
        }


# ------------------------------------------------------------------ #
#  Output schema
# ------------------------------------------------------------------ #


@dataclass(frozen=True)
class SimulationResult:
    """
    Time series from a completed run, indexed in parallel by step.

    All six sequences have length ``steps + 1``. ``distances`` equals
    ``displacements`` shifted so that no value is negative.
    """

    times: List[float] = field(default_factory=list)
    displacements: List[float] = field(default_factory=list)
    distances: List[float] = field(default_factory=list)
    potential_energies: List[float] = field(default_factory=list)
    kinetic_energies: List[float] = field(default_factory=list)
    total_energies: List[float] = field(default_factory=list)

    def __post_init__(self) -> None:
        lengths = {
            len(self.times),
            len(self.displacements),
            len(self.distances),
            len(self.potential_energies),
            len(self.kinetic_energies),
            len(self.total_energies),
        }
        if len(lengths) > 1:
            raise ValueError(f"Result series have unequal lengths: {sorted(lengths)}")

    def __len__(self) -> int:
        return len(self.times)

    def to_dict(self) -> Dict[str, List[float]]:
        return {
            "times": list(self.times),
            "displacements": list(self.displacements),
            "distances": list(self.distances),
            "potential_energies": list(self.potential_energies),
            "kinetic_energies": list(self.kinetic_energies),
            "total_energies": list(self.total_energies),
        }
