"""
Pydantic request / response models for the pydiatomic REST API.

All validation, field constraints, and serialisation logic lives here.
Routes import these models and never define their own.
"""
from __future__ import annotations

from typing import List

from pydantic import BaseModel, Field, field_validator


# ------------------------------------------------------------------ #
#  Request models
# ------------------------------------------------------------------ #


class SimulateRequest(BaseModel):
    """Payload for ``POST /simulate``."""

    model: str = Field(
        "harmonic", description="Potential model (harmonic, morse, lennard-jones)"
    )
    element: str = Field("H", description="Element symbol (e.g. H, Hg, Ar)")
    duration: float = Field(100.0, gt=0, description="Simulated time span (atomic units)")
    timestep: float = Field(0.1, gt=0, description="Integration timestep (atomic units)")
    temperature: float = Field(300.0, gt=0, description="Temperature (K)")

    @field_validator("model")
    @classmethod
    def model_to_lower(cls, v: str) -> str:
        # membership is checked by the service so the error type is shared
        return v.strip().lower()


# ------------------------------------------------------------------ #
#  Response models
# ------------------------------------------------------------------ #


class SimulationParametersPayload(BaseModel):
    """Echo of the parameters a run used."""

    model: str
    element: str
    duration: float
    timestep: float
    temperature: float


class SimulationResultPayload(BaseModel):
    """The six parallel time series."""

    times: List[float]
    displacements: List[float]
    distances: List[float]
    potential_energies: List[float]
    kinetic_energies: List[float]
    total_energies: List[float]


class SimulateResponse(BaseModel):
    """Response for ``POST /simulate``."""

    ok: bool = True
    parameters: SimulationParametersPayload
    num_samples: int
    result: SimulationResultPayload


class ElementsResponse(BaseModel):
    """Response for ``GET /elements``."""

    ok: bool = True
    elements: List[str]


class ModelsResponse(BaseModel):
    """Response for ``GET /models``."""

    ok: bool = True
    models: List[str]


class HealthResponse(BaseModel):
    """Response for ``GET /health``."""

    status: str = "ok"
    version: str
    max_samples: int
