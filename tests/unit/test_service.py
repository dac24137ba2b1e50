"""
Unit tests for the service entry point.

End-to-end runs through simulate_molecule for every supported
model/element pair.
"""
import logging
import math

import pytest

import pydiatomic
from pydiatomic.core import (
    ElementProperties,
    ElementRegistry,
    InvalidInitialConditionError,
    InvalidParametersError,
    SimulationParameters,
    UnknownElementError,
    UnknownModelError,
)
from pydiatomic.core.service import list_elements, list_models, simulate_molecule
from pydiatomic.observer import LogObserver

VALID_PAIRS = [
    ("harmonic", "H"),
    ("harmonic", "Hg"),
    ("harmonic", "Ar"),
    ("morse", "H"),
    ("lennard-jones", "Hg"),
    ("lennard-jones", "Ar"),
]


def max_relative_deviation(values):
    e0 = values[0]
    return max(abs(e - e0) for e in values) / abs(e0)


class TestScenarios:
    """Representative runs."""

    def test_harmonic_hydrogen(self) -> None:
        params = SimulationParameters("harmonic", "H", 10.0, 0.1, 300.0)
        result = simulate_molecule(params)

        assert len(result) == 101
        assert result.times[0] == 0.0
        assert result.times[-1] == pytest.approx(10.0, abs=1e-4)
        assert result.kinetic_energies[0] == 0.0
        assert result.potential_energies[0] == result.total_energies[0]
        assert result.displacements[0] == pytest.approx(0.0720, rel=1e-3)
        # Released at rest, the bond starts contracting
        assert result.displacements[-1] < result.displacements[0]

    def test_morse_above_dissociation(self) -> None:
        params = SimulationParameters("morse", "H", 5.0, 0.05, 60000.0)
        with pytest.raises(InvalidInitialConditionError) as excinfo:
            simulate_molecule(params)
        assert excinfo.value.model == "morse"
        assert excinfo.value.element == "H"

    def test_morse_hydrogen(self) -> None:
        params = SimulationParameters("morse", "H", 5.0, 0.05, 5000.0)
        result = simulate_molecule(params)

        assert len(result) == 101
        for series in result.to_dict().values():
            assert all(math.isfinite(value) for value in series)
        assert min(result.distances) >= 0.0

    @pytest.mark.parametrize("symbol", ["Hg", "Ar"])
    def test_morse_without_constants(self, symbol: str) -> None:
        params = SimulationParameters("morse", symbol, 5.0, 0.05, 300.0)
        with pytest.raises(InvalidInitialConditionError):
            simulate_molecule(params)

    def test_lennard_jones_argon(self) -> None:
        params = SimulationParameters("lennard-jones", "Ar", 20.0, 0.2, 100.0)
        result = simulate_molecule(params)

        assert len(result) == 101
        assert result.displacements[0] < 0
        # Pushed off the repulsive wall towards r*
        assert result.displacements[-1] > result.displacements[0]
        assert max_relative_deviation(result.total_energies) < 1e-3

    def test_unknown_model(self) -> None:
        params = SimulationParameters("xyz", "H", 10.0, 0.1, 300.0)
        with pytest.raises(UnknownModelError, match="xyz"):
            simulate_molecule(params)

    def test_unknown_element(self) -> None:
        params = SimulationParameters("harmonic", "Xe", 10.0, 0.1, 300.0)
        with pytest.raises(UnknownElementError, match="Xe"):
            simulate_molecule(params)

    def test_model_checked_before_element(self) -> None:
        params = SimulationParameters("xyz", "Xe", 10.0, 0.1, 300.0)
        with pytest.raises(UnknownModelError):
            simulate_molecule(params)


class TestProperties:
    """Laws every run obeys."""

    @pytest.mark.parametrize("model,symbol", VALID_PAIRS)
    def test_starts_at_rest(self, model: str, symbol: str) -> None:
        result = simulate_molecule(SimulationParameters(model, symbol, 1.0, 0.1, 300.0))
        assert result.kinetic_energies[0] == 0.0
        assert result.total_energies[0] == result.potential_energies[0]

    @pytest.mark.parametrize("model,symbol", VALID_PAIRS)
    def test_total_is_sum(self, model: str, symbol: str) -> None:
        result = simulate_molecule(SimulationParameters(model, symbol, 5.0, 0.5, 300.0))
        for pe, ke, total in zip(
            result.potential_energies, result.kinetic_energies, result.total_energies
        ):
            assert total == pytest.approx(pe + ke, rel=1e-6)

    @pytest.mark.parametrize("duration,timestep", [
        (10.0, 0.1),
        (5.0, 0.25),
        (1.0, 0.3),
        (7.5, 0.7),
        (0.2, 0.2),
    ])
    def test_sample_count(self, duration: float, timestep: float) -> None:
        result = simulate_molecule(
            SimulationParameters("harmonic", "H", duration, timestep, 300.0)
        )
        expected = math.floor(duration / timestep) + 1
        assert len(result) == expected
        assert len(result.distances) == expected
        assert len(result.kinetic_energies) == expected

    def test_harmonic_energy_conservation(self) -> None:
        """Relative deviation stays below 1e-3 over 10,000 steps."""
        result = simulate_molecule(
            SimulationParameters("harmonic", "H", 10000.0, 1.0, 300.0)
        )
        assert len(result) == 10001
        assert max_relative_deviation(result.total_energies) < 1e-3

    def test_morse_energy_conservation(self) -> None:
        result = simulate_molecule(SimulationParameters("morse", "H", 1000.0, 0.5, 300.0))
        assert max_relative_deviation(result.total_energies) < 1e-3

    def test_distance_offset_law(self) -> None:
        result = simulate_molecule(
            SimulationParameters("harmonic", "H", 500.0, 1.0, 300.0)
        )
        m = min(result.displacements)
        # Several periods, so the bond has been compressed
        assert m < 0
        assert min(result.distances) >= 0.0
        for r, d in zip(result.displacements, result.distances):
            assert d == pytest.approx(r + 1.1 * abs(m), rel=1e-12, abs=1e-15)

    def test_no_offset_when_never_negative(self) -> None:
        """Too short to cross equilibrium, so distances equal displacements."""
        result = simulate_molecule(SimulationParameters("harmonic", "H", 1.0, 0.1, 300.0))
        assert min(result.displacements) > 0
        assert result.distances == result.displacements

    @pytest.mark.parametrize("model,symbol", VALID_PAIRS)
    def test_idempotent(self, model: str, symbol: str) -> None:
        params = SimulationParameters(model, symbol, 20.0, 0.5, 300.0)
        assert simulate_molecule(params) == simulate_molecule(params)


class TestValidation:
    """Failures raised before integration."""

    @pytest.mark.parametrize("duration,timestep,temperature", [
        (10.0, 0.0, 300.0),
        (10.0, -0.1, 300.0),
        (0.05, 0.1, 300.0),
        (10.0, 0.1, 0.0),
        (float("nan"), 0.1, 300.0),
    ])
    def test_invalid_parameters(
        self, duration: float, timestep: float, temperature: float
    ) -> None:
        params = SimulationParameters("harmonic", "H", duration, timestep, temperature)
        with pytest.raises(InvalidParametersError):
            simulate_molecule(params)

    def test_step_count_overflow(self) -> None:
        params = SimulationParameters("harmonic", "H", 1e300, 1e-10, 300.0)
        with pytest.raises(InvalidParametersError, match="overflows"):
            simulate_molecule(params)

    def test_sample_limit(self) -> None:
        params = SimulationParameters("harmonic", "H", 100.0, 0.1, 300.0)
        with pytest.raises(InvalidParametersError, match="exceeding the limit"):
            simulate_molecule(params, max_samples=50)

    def test_sample_limit_is_inclusive(self) -> None:
        params = SimulationParameters("harmonic", "H", 10.0, 0.1, 300.0)
        assert len(simulate_molecule(params, max_samples=101)) == 101


class TestRegistryAndObservers:
    """Custom registries and extra observers."""

    def test_custom_registry(self) -> None:
        registry = ElementRegistry([
            ElementProperties(
                "D",
                mass_au=1822.0,
                spring_constant_au=0.3665358,
                spring_constant_si=570.657,
            )
        ])
        params = SimulationParameters("harmonic", "D", 10.0, 0.1, 300.0)
        result = simulate_molecule(params, registry=registry)

        assert len(result) == 101
        with pytest.raises(UnknownElementError):
            simulate_molecule(params)

    def test_extra_observer(self, caplog: pytest.LogCaptureFixture) -> None:
        params = SimulationParameters("harmonic", "H", 10.0, 0.1, 300.0)
        with caplog.at_level(logging.INFO, logger="pydiatomic"):
            simulate_molecule(params, observers=[LogObserver(interval=50)])

        steps = [r for r in caplog.records if r.name == "pydiatomic.observer.observer"]
        assert len(steps) == 3
        assert any("energy drift" in r.getMessage() for r in caplog.records)

    def test_listing(self) -> None:
        assert list_models() == ["harmonic", "morse", "lennard-jones"]
        assert list_elements() == ["Ar", "H", "Hg"]

    def test_package_exports(self) -> None:
        assert pydiatomic.simulate_molecule is simulate_molecule
        assert pydiatomic.__version__
