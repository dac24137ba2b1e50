"""
Visualization module for diatomic simulations.

Requires matplotlib (``pip install -e '.[plot]'``):
- render_energy_plot: Potential, kinetic and total energy over time
- render_displacement_plot: Bond displacement over time
"""

from .plots import render_displacement_plot, render_energy_plot

__all__ = [
    "render_energy_plot",
    "render_displacement_plot",
]
