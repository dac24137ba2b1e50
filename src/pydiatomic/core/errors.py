"""
Exception types raised by the simulation core.

Every failure is detected before integration starts and surfaces as one
of these types. They also derive from the builtin exception a caller
would naturally catch (KeyError for lookups, ValueError for bad input).
"""
from typing import Optional


class SimulationError(Exception):
    """Base class for all pydiatomic failures."""


class UnknownElementError(SimulationError, KeyError):
    """Element symbol is absent from the property table."""

    def __init__(self, symbol: str) -> None:
        self.symbol = symbol
        super().__init__(f"Element '{symbol}' not found in registry")

    def __str__(self) -> str:
        # KeyError would otherwise repr() the message
        return self.args[0]


class UnknownModelError(SimulationError, ValueError):
    """Model name is outside the supported set."""

    def __init__(self, model: str, supported: Optional[tuple] = None) -> None:
        self.model = model
        message = f"Unsupported model: '{model}'"
        if supported:
            message += f". Choose from: {', '.join(supported)}"
        super().__init__(message)


class InvalidInitialConditionError(SimulationError, ValueError):
    """
    Initial displacement cannot be derived for this temperature.

    Raised when the closed-form inversion leaves its domain, e.g. a
    non-positive logarithm argument in the Morse model, or when the
    element lacks the constants the model needs.
    """

    def __init__(
        self,
        model: str,
        element: str,
        temperature: float,
        reason: str,
    ) -> None:
        self.model = model
        self.element = element
        self.temperature = temperature
        self.reason = reason
        super().__init__(
            f"Cannot derive {model} initial state for '{element}' "
            f"at T={temperature}: {reason}"
        )


class InvalidParametersError(SimulationError, ValueError):
    """Simulation parameters fail validation."""
