"""
Unit tests for builder module.
"""
import math

import numpy as np
import pytest

from pydiatomic.builder import derive_initial_state, initial_displacement, thermal_seed
from pydiatomic.core import (
    BOHR_TO_METER,
    BOLTZMANN_SI,
    ElementProperties,
    InvalidInitialConditionError,
    UnknownModelError,
    elements,
)
from pydiatomic.potential import create_force_law

# Hartree energy in joules, used to express kB*T in atomic units
HARTREE_J = 4.3597447222e-18

VALID_PAIRS = [
    ("harmonic", "H"),
    ("harmonic", "Hg"),
    ("harmonic", "Ar"),
    ("morse", "H"),
    ("lennard-jones", "Hg"),
    ("lennard-jones", "Ar"),
]


def thermal_energy_au(temperature: float) -> float:
    return BOLTZMANN_SI * temperature / HARTREE_J


class TestThermalSeed:
    """Tests for thermal_seed."""

    def test_hydrogen_at_room_temperature(self) -> None:
        expected = math.sqrt(2.0 * BOLTZMANN_SI * 300.0 / 570.657)
        seed = thermal_seed(elements.get("H"), 300.0)
        assert isinstance(seed, np.float32)
        assert seed == pytest.approx(expected, rel=1e-5)

    def test_scales_with_sqrt_temperature(self) -> None:
        h = elements.get("H")
        assert thermal_seed(h, 1200.0) == pytest.approx(2.0 * thermal_seed(h, 300.0), rel=1e-5)

    def test_missing_spring_constant(self) -> None:
        props = ElementProperties("X", mass_au=10.0)
        with pytest.raises(InvalidInitialConditionError, match="spring constant"):
            thermal_seed(props, 300.0)


class TestInitialDisplacement:
    """Tests for the per-model displacement transforms."""

    def test_harmonic_is_seed_in_bohr(self) -> None:
        expected = math.sqrt(2.0 * BOLTZMANN_SI * 300.0 / 570.657) / BOHR_TO_METER
        r0 = initial_displacement("harmonic", elements.get("H"), 300.0)
        assert r0 == pytest.approx(expected, rel=1e-5)
        assert r0 == pytest.approx(0.0720, rel=1e-3)

    def test_morse_hydrogen_is_stretched(self) -> None:
        """The flatter extension side needs a larger displacement."""
        h = elements.get("H")
        assert initial_displacement("morse", h, 300.0) > initial_displacement("harmonic", h, 300.0)

    def test_lennard_jones_is_compressed(self) -> None:
        r0 = initial_displacement("lennard-jones", elements.get("Ar"), 100.0)
        assert r0 < 0
        assert r0 == pytest.approx(-0.684, rel=2e-2)

    def test_morse_outside_domain(self) -> None:
        """kB*T above the well depth has no real inversion."""
        with pytest.raises(InvalidInitialConditionError, match="dissociation") as excinfo:
            initial_displacement("morse", elements.get("H"), 60000.0)
        assert excinfo.value.temperature == 60000.0

    def test_morse_just_inside_domain(self) -> None:
        r0 = initial_displacement("morse", elements.get("H"), 57000.0)
        assert np.isfinite(r0)
        assert r0 > 0

    def test_morse_without_constants(self) -> None:
        with pytest.raises(InvalidInitialConditionError, match="Morse constants"):
            initial_displacement("morse", elements.get("Hg"), 300.0)

    def test_lennard_jones_without_constants(self) -> None:
        with pytest.raises(InvalidInitialConditionError, match="Lennard-Jones constants"):
            initial_displacement("lennard-jones", elements.get("H"), 300.0)

    def test_unknown_model(self) -> None:
        with pytest.raises(UnknownModelError):
            initial_displacement("xyz", elements.get("H"), 300.0)


class TestDeriveInitialState:
    """Tests for derive_initial_state."""

    @pytest.mark.parametrize("model,symbol", VALID_PAIRS)
    def test_starts_at_rest(self, model: str, symbol: str) -> None:
        props = elements.get(symbol)
        law = create_force_law(model, props)
        state = derive_initial_state(model, props, 300.0, law)

        assert state.time == 0.0
        assert state.velocity == 0.0
        assert state.kinetic_energy == 0.0
        assert state.total_energy == state.potential_energy
        assert state.force == law.compute_force(state.displacement)
        assert state.acceleration == pytest.approx(
            float(state.force) / props.mass_au, rel=1e-6
        )

    @pytest.mark.parametrize("model,symbol,temperature", [
        ("harmonic", "H", 300.0),
        ("morse", "H", 300.0),
        ("lennard-jones", "Ar", 100.0),
        ("lennard-jones", "Hg", 300.0),
    ])
    def test_potential_matches_thermal_energy(
        self, model: str, symbol: str, temperature: float
    ) -> None:
        """Every model starts at U(r0) = kB*T."""
        props = elements.get(symbol)
        law = create_force_law(model, props)
        state = derive_initial_state(model, props, temperature, law)
        assert state.potential_energy == pytest.approx(
            thermal_energy_au(temperature), rel=1e-3
        )

    def test_restoring_force_at_start(self) -> None:
        props = elements.get("H")
        law = create_force_law("harmonic", props)
        state = derive_initial_state("harmonic", props, 300.0, law)
        assert state.displacement > 0
        assert state.force < 0
