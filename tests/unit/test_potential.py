"""
Unit tests for potential module.
"""
import numpy as np
import pytest

from pydiatomic.core import (
    InvalidInitialConditionError,
    UnknownModelError,
    elements,
)
from pydiatomic.potential import (
    ForceLaw,
    HarmonicForceLaw,
    LennardJonesForceLaw,
    MorseForceLaw,
    check_model,
    create_force_law,
)


class TestHarmonicForceLaw:
    """Tests for HarmonicForceLaw."""

    @pytest.fixture
    def law(self) -> HarmonicForceLaw:
        return HarmonicForceLaw(k=0.3665358)

    def test_force_is_linear(self, law: HarmonicForceLaw) -> None:
        assert law.compute_force(np.float32(0.1)) == pytest.approx(-0.03665358, rel=1e-6)
        assert law.compute_force(np.float32(-0.1)) == pytest.approx(0.03665358, rel=1e-6)

    def test_energy(self, law: HarmonicForceLaw) -> None:
        assert law.compute_energy(np.float32(0.1)) == pytest.approx(1.832679e-3, rel=1e-6)
        assert law.compute_energy(np.float32(0.0)) == 0.0

    def test_single_precision(self, law: HarmonicForceLaw) -> None:
        assert isinstance(law.compute_force(np.float32(0.1)), np.float32)
        assert isinstance(law.compute_energy(np.float32(0.1)), np.float32)

    def test_invalid_constant(self) -> None:
        with pytest.raises(ValueError, match="k must be positive"):
            HarmonicForceLaw(k=0.0)

    def test_name(self, law: HarmonicForceLaw) -> None:
        assert law.get_name().startswith("Harmonic(k=")


class TestMorseForceLaw:
    """Tests for MorseForceLaw."""

    @pytest.fixture
    def law(self) -> MorseForceLaw:
        return MorseForceLaw(D=0.1818446, a=1.003894)

    def test_zero_at_equilibrium(self, law: MorseForceLaw) -> None:
        assert law.compute_energy(np.float32(0.0)) == 0.0
        assert law.compute_force(np.float32(0.0)) == 0.0

    def test_restoring_force(self, law: MorseForceLaw) -> None:
        assert law.compute_force(np.float32(0.2)) < 0
        assert law.compute_force(np.float32(-0.2)) > 0

    def test_harmonic_limit(self, law: MorseForceLaw) -> None:
        """Small displacements see the spring constant 2 D a^2."""
        k_eff = 2.0 * 0.1818446 * 1.003894**2
        r = np.float32(1e-3)
        assert law.compute_force(r) == pytest.approx(-k_eff * 1e-3, rel=1e-2)

    def test_dissociation_limit(self, law: MorseForceLaw) -> None:
        """Energy approaches D at large extension."""
        assert law.compute_energy(np.float32(30.0)) == pytest.approx(0.1818446, rel=1e-5)

    def test_asymmetric_well(self, law: MorseForceLaw) -> None:
        """Compression costs more than extension by the same amount."""
        assert law.compute_energy(np.float32(-0.5)) > law.compute_energy(np.float32(0.5))

    def test_invalid_constants(self) -> None:
        with pytest.raises(ValueError, match="D must be positive"):
            MorseForceLaw(D=0.0, a=1.0)
        with pytest.raises(ValueError, match="a must be positive"):
            MorseForceLaw(D=1.0, a=0.0)


class TestLennardJonesForceLaw:
    """Tests for LennardJonesForceLaw."""

    @pytest.fixture
    def law(self) -> LennardJonesForceLaw:
        return LennardJonesForceLaw(epsilon=4.53624e-4, rstar=7.10726)

    def test_zero_at_equilibrium(self, law: LennardJonesForceLaw) -> None:
        assert law.compute_energy(np.float32(0.0)) == pytest.approx(0.0, abs=1e-10)
        assert law.compute_force(np.float32(0.0)) == pytest.approx(0.0, abs=1e-10)

    def test_repulsive_wall(self, law: LennardJonesForceLaw) -> None:
        """Compression pushes outward, extension pulls back."""
        assert law.compute_force(np.float32(-0.5)) > 0
        assert law.compute_force(np.float32(0.5)) < 0

    def test_curvature_at_equilibrium(self, law: LennardJonesForceLaw) -> None:
        """U''(0) = 72 eps / r*^2."""
        k_eff = 72.0 * 4.53624e-4 / 7.10726**2
        r = np.float32(1e-3)
        assert law.compute_force(r) == pytest.approx(-k_eff * 1e-3, rel=2e-2)

    def test_dissociation_limit(self, law: LennardJonesForceLaw) -> None:
        """Energy approaches epsilon as the atoms separate."""
        assert law.compute_energy(np.float32(500.0)) == pytest.approx(4.53624e-4, rel=1e-3)

    def test_invalid_constants(self) -> None:
        with pytest.raises(ValueError, match="Epsilon must be positive"):
            LennardJonesForceLaw(epsilon=0.0, rstar=7.0)
        with pytest.raises(ValueError, match="rstar must be positive"):
            LennardJonesForceLaw(epsilon=1e-3, rstar=0.0)


class TestFactory:
    """Tests for check_model and create_force_law."""

    @pytest.mark.parametrize("model", ["harmonic", "morse", "lennard-jones"])
    def test_check_model_accepts(self, model: str) -> None:
        assert check_model(model) == model

    @pytest.mark.parametrize("model", ["xyz", "Harmonic", "lennard_jones", ""])
    def test_check_model_rejects(self, model: str) -> None:
        with pytest.raises(UnknownModelError):
            check_model(model)

    @pytest.mark.parametrize("model,symbol,cls", [
        ("harmonic", "H", HarmonicForceLaw),
        ("harmonic", "Ar", HarmonicForceLaw),
        ("morse", "H", MorseForceLaw),
        ("lennard-jones", "Hg", LennardJonesForceLaw),
        ("lennard-jones", "Ar", LennardJonesForceLaw),
    ])
    def test_create(self, model: str, symbol: str, cls: type) -> None:
        law = create_force_law(model, elements.get(symbol))
        assert isinstance(law, cls)
        assert isinstance(law, ForceLaw)

    def test_create_uses_atomic_units(self) -> None:
        law = create_force_law("morse", elements.get("H"))
        assert law.D == np.float32(0.1818446)
        assert law.a == np.float32(1.003894)

    @pytest.mark.parametrize("model,symbol", [
        ("morse", "Hg"),
        ("morse", "Ar"),
        ("lennard-jones", "H"),
    ])
    def test_missing_constants(self, model: str, symbol: str) -> None:
        """Zero constants surface as an initial-condition failure."""
        with pytest.raises(InvalidInitialConditionError) as excinfo:
            create_force_law(model, elements.get(symbol), temperature=300.0)
        assert excinfo.value.element == symbol
        assert excinfo.value.model == model
