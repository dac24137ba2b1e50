"""
Element registry for diatomic potential constants.

This module provides a registry of the physical constants each potential
model needs, keyed by element symbol. Constants are given in atomic
units and, where the initial-state derivation needs them, in SI units.
"""
from dataclasses import dataclass
from typing import Dict, Iterable, List, Optional

from .errors import UnknownElementError


@dataclass(frozen=True)
class ElementProperties:
    """
    Immutable potential constants for one diatomic species.

    Fields a model does not read are zero rather than omitted, so every
    record is complete regardless of which models it supports.

    Attributes:
        symbol: Chemical symbol (e.g., "H", "Ar").
        mass_au: Reduced mass in atomic units.
        spring_constant_au: Harmonic force constant (atomic units).
        spring_constant_si: Harmonic force constant (N/m).
        dissociation_energy_au: Morse well depth D (hartree).
        dissociation_energy_si: Morse well depth D (J).
        morse_alpha_au: Morse decay parameter (1/bohr).
        morse_alpha_si: Morse decay parameter (1/m).
        equilibrium_separation_au: Lennard-Jones r* (bohr).
        well_depth_au: Lennard-Jones epsilon (hartree).

    Example:
        >>> from pydiatomic.core.element_registry import ElementProperties
        >>> x = ElementProperties("X", mass_au=1.0, spring_constant_au=0.5,
        ...                       spring_constant_si=780.0)
    """
    symbol: str
    mass_au: float
    spring_constant_au: float = 0.0
    spring_constant_si: float = 0.0
    dissociation_energy_au: float = 0.0
    dissociation_energy_si: float = 0.0
    morse_alpha_au: float = 0.0
    morse_alpha_si: float = 0.0
    equilibrium_separation_au: float = 0.0
    well_depth_au: float = 0.0

    def __post_init__(self) -> None:
        """Validate the record."""
        if not self.symbol:
            raise ValueError("Element symbol cannot be empty")
        if self.mass_au <= 0:
            raise ValueError(f"Element mass must be positive, got {self.mass_au}")

    @classmethod
    def from_dict(cls, symbol: str, d: Dict[str, float]) -> "ElementProperties":
        return cls(
            symbol=symbol,
            mass_au=float(d["mass_au"]),
            spring_constant_au=float(d.get("spring_constant_au", 0.0)),
            spring_constant_si=float(d.get("spring_constant_si", 0.0)),
            dissociation_energy_au=float(d.get("dissociation_energy_au", 0.0)),
            dissociation_energy_si=float(d.get("dissociation_energy_si", 0.0)),
            morse_alpha_au=float(d.get("morse_alpha_au", 0.0)),
            morse_alpha_si=float(d.get("morse_alpha_si", 0.0)),
            equilibrium_separation_au=float(d.get("equilibrium_separation_au", 0.0)),
            well_depth_au=float(d.get("well_depth_au", 0.0)),
        )


# Reference data: hydrogen carries harmonic + Morse constants, mercury and
# argon carry harmonic + Lennard-Jones constants.
REFERENCE_ELEMENTS = (
    ElementProperties(
        "H",
        mass_au=9.114400e02,
        spring_constant_au=3.665358e-01,
        spring_constant_si=5.706570e02,
        dissociation_energy_au=1.818446e-01,
        dissociation_energy_si=7.928147e-19,
        morse_alpha_au=1.003894e00,
        morse_alpha_si=1.897085e10,
    ),
    ElementProperties(
        "Hg",
        mass_au=1.840841e05,
        spring_constant_au=1.374407e-03,
        spring_constant_si=2.139865e00,
        equilibrium_separation_au=6.952302e00,
        well_depth_au=1.845314e-03,
    ),
    ElementProperties(
        "Ar",
        mass_au=3.641021e04,
        spring_constant_au=3.232914e-04,
        spring_constant_si=5.033442e-01,
        equilibrium_separation_au=7.107260e00,
        well_depth_au=4.536240e-04,
    ),
)


class ElementRegistry:
    """
    Symbol-keyed table of ElementProperties.

    Each instance starts from the reference data; custom species can be
    added per instance without touching the module-level table.

    Example:
        >>> from pydiatomic.core import elements
        >>> elements.lookup("Ar").well_depth_au
        0.000453624
        >>> elements.lookup("Xe") is None
        True
        >>> "H" in elements
        True
    """

    def __init__(self, extra: Optional[Iterable[ElementProperties]] = None) -> None:
        self._elements_by_symbol: Dict[str, ElementProperties] = {}
        for element in REFERENCE_ELEMENTS:
            self._elements_by_symbol[element.symbol] = element
        for element in extra or ():
            self.add_custom_element(element)

    def lookup(self, symbol: str) -> Optional[ElementProperties]:
        """
        Get element properties by symbol.

        Args:
            symbol: Element symbol (e.g., 'H').

        Returns:
            ElementProperties if found, None otherwise.
        """
        return self._elements_by_symbol.get(symbol)

    def get(self, symbol: str) -> ElementProperties:
        """
        Get element properties by symbol.

        Raises:
            UnknownElementError: If the symbol is not registered.
        """
        element = self.lookup(symbol)
        if element is None:
            raise UnknownElementError(symbol)
        return element

    def list_elements(self) -> List[str]:
        """Return sorted list of registered symbols."""
        return sorted(self._elements_by_symbol.keys())

    def add_custom_element(self, element: ElementProperties) -> None:
        """
        Register an additional species.

        Raises:
            ValueError: If the symbol already exists.
        """
        if element.symbol in self._elements_by_symbol:
            raise ValueError(f"Element '{element.symbol}' already exists")
        self._elements_by_symbol[element.symbol] = element

    def __contains__(self, symbol: str) -> bool:
        """Support 'in' operator."""
        return self.lookup(symbol) is not None

    def __getitem__(self, symbol: str) -> ElementProperties:
        """Support indexing: registry['H']."""
        return self.get(symbol)

    def __len__(self) -> int:
        """Return number of registered elements."""
        return len(self._elements_by_symbol)


# Module-level registry holding the reference data
elements = ElementRegistry()
