"""
Simulator module for diatomic simulations.

Provides the simulation driver and result assembly:
- Simulator: Orchestrates the fixed-timestep loop
- assemble_result / offset_distances: Post-processing of the series
"""

from .postprocess import assemble_result, distance_offset, offset_distances
from .simulator import Simulator

__all__ = [
    "Simulator",
    "assemble_result",
    "distance_offset",
    "offset_distances",
]
