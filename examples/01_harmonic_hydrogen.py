#!/usr/bin/env python3
"""
Example 1: Harmonic Hydrogen

The H2 bond as a harmonic spring, released at rest from the thermal
displacement for 300 K.

Physics:
    U(r) = 0.5 * k * r^2

The bond oscillates around r = 0 with period 2*pi*sqrt(m/k).
Total energy is conserved (kinetic <-> potential).

Usage:
    python examples/01_harmonic_hydrogen.py
"""
import numpy as np

from pydiatomic import SimulationParameters, simulate_molecule
from pydiatomic.core import elements


def main():
    print("=" * 55)
    print("  Example 1: HARMONIC HYDROGEN")
    print("  H2 bond as a spring at 300 K")
    print("=" * 55)

    hydrogen = elements.get("H")
    expected_period = 2 * np.pi * np.sqrt(hydrogen.mass_au / hydrogen.spring_constant_au)
    print(f"\nExpected oscillation period: {expected_period:.1f} au")

    params = SimulationParameters(
        model="harmonic",
        element="H",
        duration=2000.0,
        timestep=1.0,
        temperature=300.0,
    )
    result = simulate_molecule(params)

    displacements = np.array(result.displacements)
    E_total = np.array(result.total_energies)

    print(f"\n{'='*40}")
    print("RESULTS")
    print(f"{'='*40}")
    print(f"Samples:            {len(result)}")
    print(f"Initial r0:         {displacements[0]:.5f} bohr")
    print(f"Displacement range: [{displacements.min():.5f}, {displacements.max():.5f}]")
    print(f"Distance range:     [{min(result.distances):.5f}, {max(result.distances):.5f}]")

    deviation = np.max(np.abs(E_total - E_total[0])) / abs(E_total[0])
    print(f"Max energy error:   {deviation:.2e}")

    # A symmetric well swings to -r0 and back
    print(f"Amplitude ratio:    {-displacements.min() / displacements[0]:.4f} (expected: 1)")

    print("\n[PASS] Harmonic oscillation observed!")
    print("=" * 55)


if __name__ == "__main__":
    main()
