"""
API routes: thin adapters that delegate to :class:`SimulationWorkflow`.

Service errors map onto status codes as follows:

- UnknownElementError -> 404
- UnknownModelError, InvalidParametersError -> 400
- InvalidInitialConditionError -> 422
"""
from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, HTTPException, Request

from pydiatomic.api.models import (
    ElementsResponse,
    ModelsResponse,
    SimulateRequest,
    SimulateResponse,
)
from pydiatomic.application import SimulationWorkflow
from pydiatomic.core.errors import (
    InvalidInitialConditionError,
    InvalidParametersError,
    UnknownElementError,
    UnknownModelError,
)

logger = logging.getLogger(__name__)

router = APIRouter()


def get_workflow(request: Request) -> SimulationWorkflow:
    """Workflow installed on the application by ``create_app``."""
    return request.app.state.workflow


# ------------------------------------------------------------------ #
#  Endpoints
# ------------------------------------------------------------------ #


@router.get("/elements", response_model=ElementsResponse)
def get_elements(workflow: SimulationWorkflow = Depends(get_workflow)):
    return {"ok": True, "elements": workflow.list_elements()}


@router.get("/models", response_model=ModelsResponse)
def get_models(workflow: SimulationWorkflow = Depends(get_workflow)):
    return {"ok": True, "models": workflow.list_models()}


@router.post("/simulate", response_model=SimulateResponse)
def simulate(
    req: SimulateRequest,
    workflow: SimulationWorkflow = Depends(get_workflow),
):
    try:
        body = workflow.simulate(
            model=req.model,
            element=req.element,
            duration=req.duration,
            timestep=req.timestep,
            temperature=req.temperature,
        )
    except UnknownElementError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except (UnknownModelError, InvalidParametersError) as e:
        raise HTTPException(status_code=400, detail=str(e))
    except InvalidInitialConditionError as e:
        raise HTTPException(status_code=422, detail=str(e))
    logger.debug("Served %s/%s with %d samples", req.model, req.element, body["num_samples"])
    return {"ok": True, **body}
