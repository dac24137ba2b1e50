"""
Result assembly and display transforms.
"""
from typing import List, Sequence

from pydiatomic.core.constants import DISTANCE_OFFSET_FACTOR
from pydiatomic.core.schemas import SimulationResult
from pydiatomic.observer import SeriesObserver


def distance_offset(distances: Sequence[float]) -> float:
    """
    Offset that makes the distance series non-negative.

    Returns 1.1 * |min| when the minimum is negative, else 0.
    """
    if not distances:
        return 0.0
    min_distance = min(distances)
    if min_distance < 0.0:
        return DISTANCE_OFFSET_FACTOR * abs(min_distance)
    return 0.0


def offset_distances(distances: Sequence[float]) -> List[float]:
    """Return *distances* shifted by :func:`distance_offset`."""
    offset = distance_offset(distances)
    return [d + offset for d in distances]


def assemble_result(observer: SeriesObserver) -> SimulationResult:
    """
    Build the SimulationResult from a finished SeriesObserver.

    Only the distance series is shifted; displacements and energies keep
    their signed values.
    """
    return SimulationResult(
        times=list(observer.times),
        displacements=list(observer.displacements),
        distances=offset_distances(observer.distances),
        potential_energies=list(observer.potential_energies),
        kinetic_energies=list(observer.kinetic_energies),
        total_energies=list(observer.total_energies),
    )
