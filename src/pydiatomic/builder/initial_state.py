"""
Initial-state derivation from a target temperature.

The starting bond extension is obtained analytically, not by stepping:
a harmonic displacement is drawn from equipartition (the thermal seed)
and each model maps that seed to its own initial displacement, so that
all three models start from the same nominal thermal energy.
"""
import logging
from typing import Callable, Dict

import numpy as np

from pydiatomic.core.constants import (
    BOHR_TO_METER,
    BOLTZMANN_SI,
    HARMONIC,
    LENNARD_JONES,
    MORSE,
)
from pydiatomic.core.element_registry import ElementProperties
from pydiatomic.core.errors import InvalidInitialConditionError
from pydiatomic.core.state import SimulationState
from pydiatomic.potential import ForceLaw, check_model

logger = logging.getLogger(__name__)

_KB = np.float32(BOLTZMANN_SI)
_A0 = np.float32(BOHR_TO_METER)
_ONE = np.float32(1.0)
_TWO = np.float32(2.0)


def thermal_seed(properties: ElementProperties, temperature: float) -> np.float32:
    """
    Harmonic displacement in meters from equipartition.

    r0 = sqrt(2 * kB * T / k_si)

    Args:
        properties: Element constants (uses the SI spring constant).
        temperature: Temperature in kelvin.

    Returns:
        Displacement in meters, single precision.

    Raises:
        InvalidInitialConditionError: If the element has no SI spring
            constant.
    """
    k_si = np.float32(properties.spring_constant_si)
    if k_si <= 0:
        raise InvalidInitialConditionError(
            HARMONIC,
            properties.symbol,
            temperature,
            "element has no SI spring constant",
        )
    return np.sqrt((_TWO * _KB * np.float32(temperature)) / k_si)


def _harmonic_displacement(
    properties: ElementProperties, seed: np.float32, temperature: float
) -> np.float32:
    return seed / _A0


def _morse_displacement(
    properties: ElementProperties, seed: np.float32, temperature: float
) -> np.float32:
    """Invert U = D (1 - exp(-a r))^2 at the harmonic energy of the seed."""
    d_si = np.float32(properties.dissociation_energy_si)
    alpha_si = np.float32(properties.morse_alpha_si)
    if d_si <= 0 or alpha_si <= 0:
        raise InvalidInitialConditionError(
            MORSE, properties.symbol, temperature, "element has no Morse constants"
        )

    k_si = np.float32(properties.spring_constant_si)
    log_arg = _ONE - np.sqrt(k_si * seed * seed / (_TWO * d_si))
    if not log_arg > 0:
        raise InvalidInitialConditionError(
            MORSE,
            properties.symbol,
            temperature,
            "thermal energy reaches the dissociation energy "
            f"(log argument {float(log_arg):.6g} <= 0)",
        )
    r0_si = np.log(log_arg) / (-alpha_si)
    return r0_si / _A0


def _lennard_jones_displacement(
    properties: ElementProperties, seed: np.float32, temperature: float
) -> np.float32:
    """Place the bond on the repulsive wall at the harmonic energy of the seed."""
    eps = np.float32(properties.well_depth_au)
    rstar = np.float32(properties.equilibrium_separation_au)
    if eps <= 0 or rstar <= 0:
        raise InvalidInitialConditionError(
            LENNARD_JONES,
            properties.symbol,
            temperature,
            "element has no Lennard-Jones constants",
        )

    r0_harm = seed / _A0
    k_au = np.float32(properties.spring_constant_au)
    two_eps = _TWO * eps
    scale = two_eps ** np.float32(1.0 / 12.0) * (
        np.sqrt(k_au) * r0_harm + np.sqrt(two_eps)
    ) ** np.float32(-1.0 / 6.0)
    return rstar * (scale - _ONE)


_DISPLACEMENT_TRANSFORMS: Dict[
    str, Callable[[ElementProperties, np.float32, float], np.float32]
] = {
    HARMONIC: _harmonic_displacement,
    MORSE: _morse_displacement,
    LENNARD_JONES: _lennard_jones_displacement,
}


def initial_displacement(
    model: str, properties: ElementProperties, temperature: float
) -> np.float32:
    """
    Initial bond displacement (bohr) for *model* at *temperature*.

    Raises:
        UnknownModelError: If the model is not supported.
        InvalidInitialConditionError: If the inversion leaves its domain.
    """
    check_model(model)
    seed = thermal_seed(properties, temperature)
    r0 = _DISPLACEMENT_TRANSFORMS[model](properties, seed, temperature)
    if not np.isfinite(r0):
        raise InvalidInitialConditionError(
            model, properties.symbol, temperature, "initial displacement is not finite"
        )
    return np.float32(r0)


def derive_initial_state(
    model: str,
    properties: ElementProperties,
    temperature: float,
    force_law: ForceLaw,
) -> SimulationState:
    """
    Build the state at t = 0.

    Velocity and kinetic energy are zero, so the total energy equals the
    potential energy at the initial displacement.

    Args:
        model: Potential model name.
        properties: Element constants.
        temperature: Temperature in kelvin.
        force_law: Force law of the same model, evaluated at r0.

    Returns:
        Fully populated SimulationState.
    """
    r0 = initial_displacement(model, properties, temperature)
    mass = np.float32(properties.mass_au)
    force = force_law.compute_force(r0)
    potential = force_law.compute_energy(r0)

    logger.debug(
        "Initial %s state for %s at T=%s: r0=%.6g, F0=%.6g, U0=%.6g",
        model,
        properties.symbol,
        temperature,
        r0,
        force,
        potential,
    )

    return SimulationState(
        time=np.float32(0.0),
        displacement=r0,
        force=force,
        acceleration=force / mass,
        velocity=np.float32(0.0),
        kinetic_energy=np.float32(0.0),
        potential_energy=potential,
        total_energy=potential,
    )
