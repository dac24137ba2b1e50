"""
Physical constants and fixed limits for diatomic simulations.

Values match the precision of the reference element table, which is
given to single precision.
"""
from typing import Final, Tuple

# Boltzmann constant in SI units (J/K)
BOLTZMANN_SI: Final[float] = 1.3806488e-23

# Bohr radius to meter conversion (atomic length unit)
BOHR_TO_METER: Final[float] = 5.2917721092e-11

# Potential models understood by the simulator
HARMONIC: Final[str] = "harmonic"
MORSE: Final[str] = "morse"
LENNARD_JONES: Final[str] = "lennard-jones"

SUPPORTED_MODELS: Final[Tuple[str, ...]] = (HARMONIC, MORSE, LENNARD_JONES)

# Upper bound on samples per run; each sample adds one entry to six series
MAX_SAMPLES: Final[int] = 10_000_000

# Fraction of |min(distance)| added to the distance series
DISTANCE_OFFSET_FACTOR: Final[float] = 1.1
