"""
FastAPI application factory.

The served workflow comes from the ``create_app`` argument, else from the
YAML file named by ``PYDIATOMIC_CONFIG``, else the reference elements
with the default sample limit.

Usage::

    uvicorn pydiatomic.api.app:create_app --factory --reload
    PYDIATOMIC_CONFIG=run.yaml pydiatomic-api
"""
import logging
import os
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

import pydiatomic
from pydiatomic.api import CONFIG_ENV_VAR
from pydiatomic.api.models import HealthResponse
from pydiatomic.api.routes import router
from pydiatomic.application import SimulationWorkflow

logger = logging.getLogger(__name__)


def _default_workflow() -> SimulationWorkflow:
    config_path = os.environ.get(CONFIG_ENV_VAR)
    if not config_path:
        return SimulationWorkflow()
    logger.info("Serving elements and limits from %s", config_path)
    return SimulationWorkflow.from_config(config_path)


def create_app(workflow: Optional[SimulationWorkflow] = None) -> FastAPI:
    """
    Create and configure the FastAPI application.

    Args:
        workflow: Workflow behind every route (default: see module docs).
    """
    application = FastAPI(
        title="pydiatomic API",
        version=pydiatomic.__version__,
        description="REST API for diatomic bond dynamics simulations.",
    )
    application.state.workflow = workflow or _default_workflow()

    # Browser front-ends are served from other origins.
    application.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["GET", "POST"],
        allow_headers=["*"],
    )

    # Health-check (outside /api prefix).
    @application.get("/health", response_model=HealthResponse)
    def health():
        return HealthResponse(
            version=pydiatomic.__version__,
            max_samples=application.state.workflow.max_samples,
        )

    application.include_router(router, prefix="/api")
    return application
