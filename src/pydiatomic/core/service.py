"""
Backend service layer for pydiatomic.

Framework-independent entry point consumed by the application workflow,
the FastAPI transport layer and the CLI. No references to HTTP, argparse
or plotting belong here.
"""
from __future__ import annotations

import logging
from typing import List, Optional, Sequence

from pydiatomic.builder.initial_state import derive_initial_state
from pydiatomic.core.constants import MAX_SAMPLES, SUPPORTED_MODELS
from pydiatomic.core.element_registry import ElementRegistry, elements
from pydiatomic.core.errors import InvalidParametersError
from pydiatomic.core.schemas import SimulationParameters, SimulationResult
from pydiatomic.integrator import VelocityVerlet
from pydiatomic.observer import Observer, SeriesObserver
from pydiatomic.potential import check_model, create_force_law
from pydiatomic.simulator import Simulator, assemble_result

logger = logging.getLogger(__name__)


def simulate_molecule(
    params: SimulationParameters,
    *,
    registry: Optional[ElementRegistry] = None,
    max_samples: int = MAX_SAMPLES,
    observers: Optional[Sequence[Observer]] = None,
) -> SimulationResult:
    """
    Run one diatomic simulation end to end.

    Every failure is detected before the first integration step.

    Args:
        params: Model, element, duration, timestep and temperature.
        registry: Element table to resolve the symbol against
            (default: the module-level reference table).
        max_samples: Upper bound on ``steps + 1``.
        observers: Extra observers notified alongside the series capture,
            e.g. a LogObserver.

    Returns:
        The six time series, ``steps + 1`` samples each.

    Raises:
        InvalidParametersError: Bad numeric parameters or too many samples.
        UnknownModelError: Model outside the supported set.
        UnknownElementError: Symbol absent from the registry.
        InvalidInitialConditionError: Temperature incompatible with the
            model's initial-state inversion for this element.
    """
    params.validate()
    check_model(params.model)
    properties = (registry or elements).get(params.element)

    num_steps = params.num_steps
    if num_steps + 1 > max_samples:
        raise InvalidParametersError(
            f"Run would produce {num_steps + 1} samples, "
            f"exceeding the limit of {max_samples}"
        )

    force_law = create_force_law(params.model, properties, params.temperature)
    state = derive_initial_state(
        params.model, properties, params.temperature, force_law
    )

    series = SeriesObserver(interval=1)
    simulator = Simulator(
        state=state,
        integrator=VelocityVerlet(dt=params.timestep),
        force_law=force_law,
        mass=properties.mass_au,
        observers=[series, *(observers or ())],
    )
    simulator.run(num_steps)

    result = assemble_result(series)
    logger.info(
        "Simulated %s/%s for %d steps (dt=%s, T=%s); energy drift %.3e",
        params.model,
        params.element,
        num_steps,
        params.timestep,
        params.temperature,
        series.get_energy_drift(),
    )
    return result


def list_models() -> List[str]:
    """Return the supported model names."""
    return list(SUPPORTED_MODELS)


def list_elements(registry: Optional[ElementRegistry] = None) -> List[str]:
    """Return the element symbols known to *registry*."""
    return (registry or elements).list_elements()
