"""FastAPI transport layer for pydiatomic.

Models, service adapters, and routes: no domain logic.

The ``create_app()`` factory is lazily imported so that
``import pydiatomic.api`` never forces a FastAPI dependency.
"""

# Path of a YAML file read by the app factory for elements and limits
CONFIG_ENV_VAR = "PYDIATOMIC_CONFIG"


def create_app(workflow=None):
    """Deferred import of the FastAPI application factory."""
    from pydiatomic.api.app import create_app as _create_app

    return _create_app(workflow)
