#!/usr/bin/env python3
"""
Example 3: Lennard-Jones Argon

The Ar2 van der Waals bond with the 12-6 potential, started on the
repulsive wall at 100 K, with energy and displacement plots.

Usage:
    python examples/03_lennard_jones_argon.py [output_dir]

Requires matplotlib (pip install -e '.[plot]').
"""
import logging
import sys
from pathlib import Path

from pydiatomic import SimulationParameters, simulate_molecule
from pydiatomic.observer import LogObserver
from pydiatomic.visualization import render_displacement_plot, render_energy_plot


def main():
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")
    output_dir = Path(sys.argv[1]) if len(sys.argv) > 1 else Path("plots")
    output_dir.mkdir(parents=True, exist_ok=True)

    print("=" * 60)
    print("  Example 3: LENNARD-JONES ARGON")
    print("=" * 60)

    # One vibrational period is roughly 5e4 au for Ar2
    params = SimulationParameters(
        model="lennard-jones",
        element="Ar",
        duration=100000.0,
        timestep=20.0,
        temperature=100.0,
    )
    result = simulate_molecule(params, observers=[LogObserver(interval=1000)])

    print(f"\nSamples:            {len(result)}")
    print(f"Displacement range: [{min(result.displacements):.4f}, {max(result.displacements):.4f}]")

    render_energy_plot(result, output_dir / "lj_argon_energy.png", title="Ar2, T = 100 K")
    render_displacement_plot(
        result, output_dir / "lj_argon_displacement.png", title="Ar2, T = 100 K"
    )
    print(f"Plots written to {output_dir}/")
    print("=" * 60)


if __name__ == "__main__":
    main()
