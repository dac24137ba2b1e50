"""
Launcher for the pydiatomic REST API server.

Usage::

    pydiatomic-api                                  # reference elements
    pydiatomic-api --config run.yaml --port 9000    # extra elements, own limit
    pydiatomic-api --reload                         # dev mode
"""
from __future__ import annotations

import argparse
import importlib.util
import os
import sys
from pathlib import Path
from typing import List, Optional

from pydiatomic.api import CONFIG_ENV_VAR
from pydiatomic.application import SimulationWorkflow
from pydiatomic.core.errors import SimulationError


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="pydiatomic-api",
        description="Serve diatomic simulations over HTTP.",
    )
    parser.add_argument("--host", default="127.0.0.1", help="Bind host (default: 127.0.0.1)")
    parser.add_argument("--port", type=int, default=8000, help="Bind port (default: 8000)")
    parser.add_argument("--config", type=Path, help="YAML file with elements and limits sections")
    parser.add_argument("--log-level", default="info", help="Uvicorn log level (default: info)")
    parser.add_argument("--reload", action="store_true", help="Enable auto-reload (dev)")
    return parser


def run_server(
    host: str,
    port: int,
    log_level: str,
    reload: bool,
    config: Optional[Path] = None,
) -> None:
    """
    Check the API extra is installed, then hand over to uvicorn.

    The config file is parsed once up front so that a bad file fails
    here instead of inside the worker. Its path reaches the app factory
    through the environment, which also survives a reload.
    """
    missing = [name for name in ("fastapi", "uvicorn") if importlib.util.find_spec(name) is None]
    if missing:
        raise RuntimeError(
            f"Missing API dependencies ({', '.join(missing)}). "
            "Install with: pip install -e '.[api]'"
        )

    if config is not None:
        SimulationWorkflow.from_config(config)
        os.environ[CONFIG_ENV_VAR] = str(config.resolve())

    import uvicorn

    uvicorn.run(
        "pydiatomic.api.app:create_app",
        factory=True,
        host=host,
        port=port,
        log_level=log_level,
        reload=reload,
    )


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    try:
        run_server(
            host=args.host,
            port=args.port,
            log_level=args.log_level,
            reload=args.reload,
            config=args.config,
        )
    except (RuntimeError, OSError, SimulationError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 2
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
