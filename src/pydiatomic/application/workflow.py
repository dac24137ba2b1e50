"""Transport-agnostic simulation workflow.

Wraps the service entry point so that callers (API routes, CLI) pass
plain Python primitives and receive plain dicts/lists; no schema
objects cross the boundary.
"""
from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, List, Optional, Union

from pydiatomic.builder.config_loader import (
    load_yaml,
    max_samples_from_config,
    registry_from_config,
)
from pydiatomic.core.constants import MAX_SAMPLES
from pydiatomic.core.element_registry import ElementRegistry, elements
from pydiatomic.core.schemas import SimulationParameters
from pydiatomic.core.service import list_elements, list_models, simulate_molecule


class SimulationWorkflow:
    """Stateless orchestrator bound to one element registry."""

    def __init__(
        self,
        registry: Optional[ElementRegistry] = None,
        max_samples: int = MAX_SAMPLES,
    ):
        self._registry = registry or elements
        self._max_samples = max_samples

    @classmethod
    def from_config(cls, path: Union[str, Path]) -> "SimulationWorkflow":
        """Bind to the ``elements`` and ``limits`` sections of a YAML file."""
        config = load_yaml(path)
        return cls(
            registry=registry_from_config(config),
            max_samples=max_samples_from_config(config),
        )

    # ------------------------------------------------------------------ #
    #  Introspection
    # ------------------------------------------------------------------ #

    @property
    def max_samples(self) -> int:
        return self._max_samples

    def list_elements(self) -> List[str]:
        return list_elements(self._registry)

    def list_models(self) -> List[str]:
        return list_models()

    # ------------------------------------------------------------------ #
    #  Simulation
    # ------------------------------------------------------------------ #

    def simulate(
        self,
        *,
        model: str,
        element: str,
        duration: float,
        timestep: float,
        temperature: float,
    ) -> Dict[str, Any]:
        """Run one simulation; returns the parameters and the six series."""
        params = SimulationParameters(
            model=model,
            element=element,
            duration=float(duration),
            timestep=float(timestep),
            temperature=float(temperature),
        )
        result = simulate_molecule(
            params,
            registry=self._registry,
            max_samples=self._max_samples,
        )
        return {
            "parameters": params.to_dict(),
            "num_samples": len(result),
            "result": result.to_dict(),
        }
