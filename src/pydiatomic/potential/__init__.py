"""
Force law module for diatomic simulations.

Each model supplies a closed-form force and energy as a function of the
bond displacement; the integrator is shared.

Available force laws:
- HarmonicForceLaw
- MorseForceLaw
- LennardJonesForceLaw
"""

from .factory import check_model, create_force_law
from .force_law import ForceLaw
from .harmonic import HarmonicForceLaw
from .lennard_jones import LennardJonesForceLaw
from .morse import MorseForceLaw

__all__ = [
    # Base class
    "ForceLaw",
    # Models
    "HarmonicForceLaw",
    "MorseForceLaw",
    "LennardJonesForceLaw",
    # Factory
    "check_model",
    "create_force_law",
]
