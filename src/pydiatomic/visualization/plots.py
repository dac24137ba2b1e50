"""
Energy and displacement plots for a SimulationResult.

Rendering only: axis scaling, legends and figure lifecycle live here,
the simulation core has no dependency on matplotlib.
"""
import logging
from pathlib import Path
from typing import Optional, Sequence, Tuple, Union

import matplotlib

# Agg backend, no display needed
matplotlib.use("Agg")
import matplotlib.pyplot as plt

from pydiatomic.core.schemas import SimulationResult

logger = logging.getLogger(__name__)

ENERGY_SERIES = (
    ("potential_energies", "Potential Energy", "red"),
    ("kinetic_energies", "Kinetic Energy", "blue"),
    ("total_energies", "Total Energy", "green"),
)


def _padded_range(*series: Sequence[float], padding: float = 0.1) -> Tuple[float, float]:
    """Range spanning 0 and every value, widened by *padding* on each side."""
    low = min([0.0, *(min(s) for s in series if s)])
    high = max([0.0, *(max(s) for s in series if s)])
    span = high - low
    if span == 0.0:
        span = 1.0
    return low - span * padding, high + span * padding


def render_energy_plot(
    result: SimulationResult,
    output_path: Union[str, Path],
    title: Optional[str] = None,
    dpi: int = 150,
) -> Path:
    """
    Draw potential, kinetic and total energy versus time.

    Args:
        result: Simulation result to draw.
        output_path: Image file to write (format from the suffix).
        title: Figure title (default "Energy Over Time").
        dpi: Image resolution.

    Returns:
        Path of the written image.
    """
    y_min, y_max = _padded_range(
        *(getattr(result, attr) for attr, _, _ in ENERGY_SERIES)
    )

    filepath = Path(output_path)
    fig, ax = plt.subplots(figsize=(10, 6))
    try:
        for attr, label, color in ENERGY_SERIES:
            ax.plot(result.times, getattr(result, attr), color=color, label=label)

        ax.set_xlim(0.0, max(result.times) if result.times else 1.0)
        ax.set_ylim(y_min, y_max)
        ax.set_xlabel("Time")
        ax.set_ylabel("Energy")
        ax.set_title(title or "Energy Over Time")
        ax.grid(True, alpha=0.3)
        ax.legend(loc="upper right", frameon=True, edgecolor="black")

        fig.tight_layout()
        fig.savefig(filepath, dpi=dpi, bbox_inches="tight")
    finally:
        plt.close(fig)

    logger.info("Energy plot written to %s", filepath)
    return filepath


def render_displacement_plot(
    result: SimulationResult,
    output_path: Union[str, Path],
    title: Optional[str] = None,
    dpi: int = 150,
) -> Path:
    """
    Draw displacement versus time.

    Args:
        result: Simulation result to draw.
        output_path: Image file to write (format from the suffix).
        title: Figure title (default "Displacement Over Time").
        dpi: Image resolution.

    Returns:
        Path of the written image.
    """
    y_min, y_max = _padded_range(result.displacements)

    filepath = Path(output_path)
    fig, ax = plt.subplots(figsize=(10, 6))
    try:
        ax.plot(result.times, result.displacements, color="blue")

        ax.set_xlim(0.0, max(result.times) if result.times else 1.0)
        ax.set_ylim(y_min, y_max)
        ax.set_xlabel("Time")
        ax.set_ylabel("Displacement")
        ax.set_title(title or "Displacement Over Time")
        ax.grid(True, alpha=0.3)

        fig.tight_layout()
        fig.savefig(filepath, dpi=dpi, bbox_inches="tight")
    finally:
        plt.close(fig)

    logger.info("Displacement plot written to %s", filepath)
    return filepath
