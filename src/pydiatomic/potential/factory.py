"""
Build the force law for a model name and element.
"""
from pydiatomic.core.constants import HARMONIC, LENNARD_JONES, MORSE, SUPPORTED_MODELS
from pydiatomic.core.element_registry import ElementProperties
from pydiatomic.core.errors import InvalidInitialConditionError, UnknownModelError

from .force_law import ForceLaw
from .harmonic import HarmonicForceLaw
from .lennard_jones import LennardJonesForceLaw
from .morse import MorseForceLaw


def check_model(model: str) -> str:
    """
    Ensure *model* is one of the supported names.

    Raises:
        UnknownModelError: If the name is not supported.
    """
    if model not in SUPPORTED_MODELS:
        raise UnknownModelError(model, SUPPORTED_MODELS)
    return model


def create_force_law(
    model: str,
    properties: ElementProperties,
    temperature: float = 0.0,
) -> ForceLaw:
    """
    Create the force law for *model* from the element's constants.

    Args:
        model: "harmonic", "morse" or "lennard-jones".
        properties: Constants of the element.
        temperature: Only used to label a failure.

    Returns:
        A ForceLaw holding the atomic-unit constants of the model.

    Raises:
        UnknownModelError: If the model is not supported.
        InvalidInitialConditionError: If the element has no constants
            for this model (they are stored as zero).
    """
    check_model(model)
    try:
        if model == HARMONIC:
            return HarmonicForceLaw(k=properties.spring_constant_au)
        if model == MORSE:
            return MorseForceLaw(
                D=properties.dissociation_energy_au,
                a=properties.morse_alpha_au,
            )
        if model == LENNARD_JONES:
            return LennardJonesForceLaw(
                epsilon=properties.well_depth_au,
                rstar=properties.equilibrium_separation_au,
            )
    except ValueError as exc:
        raise InvalidInitialConditionError(
            model, properties.symbol, temperature, str(exc)
        ) from exc
    raise UnknownModelError(model, SUPPORTED_MODELS)
