"""
Command-line entry point: ``pydiatomic`` or ``python -m pydiatomic``.

Usage::

    pydiatomic --model harmonic --element H --duration 10 --timestep 0.1 --temperature 300
    pydiatomic --config run.yaml --output result.json --plot-dir plots/
    pydiatomic --list-elements
"""
from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Any, Dict, List, Optional

import pydiatomic
from pydiatomic.builder.config_loader import (
    load_yaml,
    max_samples_from_config,
    registry_from_config,
)
from pydiatomic.core.errors import SimulationError
from pydiatomic.core.schemas import SimulationParameters, SimulationResult
from pydiatomic.core.service import list_elements, list_models, simulate_molecule
from pydiatomic.observer import LogObserver

logger = logging.getLogger("pydiatomic")

_PARAMETER_NAMES = ("model", "element", "duration", "timestep", "temperature")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="pydiatomic",
        description="Simulate the bond dynamics of a diatomic molecule.",
    )
    parser.add_argument(
        "--version", action="version", version=f"%(prog)s {pydiatomic.__version__}"
    )
    parser.add_argument("--config", type=Path, help="YAML configuration file")
    parser.add_argument("--model", help="Potential model (harmonic, morse, lennard-jones)")
    parser.add_argument("--element", help="Element symbol (e.g. H, Hg, Ar)")
    parser.add_argument("--duration", type=float, help="Simulated time span (atomic units)")
    parser.add_argument("--timestep", type=float, help="Integration timestep (atomic units)")
    parser.add_argument("--temperature", type=float, help="Temperature (K)")
    parser.add_argument("--max-samples", type=int, help="Upper bound on samples per run")
    parser.add_argument("--output", type=Path, help="Write the result as JSON to this file")
    parser.add_argument("--plot-dir", type=Path, help="Write energy/displacement plots here")
    parser.add_argument("--progress-interval", type=int, default=0,
                        help="Log progress every N steps (0 disables)")
    parser.add_argument("--list-elements", action="store_true", help="List elements and exit")
    parser.add_argument("--list-models", action="store_true", help="List models and exit")
    parser.add_argument("--log-level", default=None, help="Log level (default: WARNING)")
    return parser


def _merge_parameters(args: argparse.Namespace, config: Dict[str, Any]) -> SimulationParameters:
    """Command-line values override the ``simulation`` section of the config."""
    merged = dict(config.get("simulation", {}) or {})
    for name in _PARAMETER_NAMES:
        value = getattr(args, name)
        if value is not None:
            merged[name] = value
    return SimulationParameters.from_dict(merged)


def _write_outputs(
    result: SimulationResult,
    params: SimulationParameters,
    output: Optional[Path],
    plot_dir: Optional[Path],
) -> None:
    if output is not None:
        output.parent.mkdir(parents=True, exist_ok=True)
        with open(output, "w") as f:
            json.dump({"parameters": params.to_dict(), "result": result.to_dict()}, f)
        logger.info("Result written to %s", output)

    if plot_dir is not None:
        from pydiatomic.visualization import render_displacement_plot, render_energy_plot

        plot_dir.mkdir(parents=True, exist_ok=True)
        stem = f"{params.model}_{params.element}"
        label = f"{params.model} {params.element}, T={params.temperature} K"
        render_energy_plot(
            result, plot_dir / f"{stem}_energy.png", title=f"Energy Over Time ({label})"
        )
        render_displacement_plot(
            result,
            plot_dir / f"{stem}_displacement.png",
            title=f"Displacement Over Time ({label})",
        )


def _print_summary(result: SimulationResult, params: SimulationParameters) -> None:
    e0 = result.total_energies[0]
    drift = (result.total_energies[-1] - e0) / abs(e0) if e0 else 0.0
    print(f"pydiatomic {pydiatomic.__version__}: {params.model} / {params.element}")
    print(f"  samples:          {len(result)}")
    print(f"  final time:       {result.times[-1]:.6g}")
    print(f"  displacement:     [{min(result.displacements):.6g}, {max(result.displacements):.6g}]")
    print(f"  initial energy:   {e0:.6g}")
    print(f"  energy drift:     {drift:.3e}")


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        config = load_yaml(args.config) if args.config is not None else {}
    except (OSError, SimulationError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 2

    log_level = args.log_level or (config.get("logging", {}) or {}).get("level", "WARNING")
    logging.basicConfig(
        level=str(log_level).upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        registry = registry_from_config(config)
        if args.list_elements:
            print("\n".join(list_elements(registry)))
            return 0
        if args.list_models:
            print("\n".join(list_models()))
            return 0

        params = _merge_parameters(args, config)
        max_samples = args.max_samples or max_samples_from_config(config)
        observers = []
        if args.progress_interval > 0:
            observers.append(LogObserver(interval=args.progress_interval))
        result = simulate_molecule(
            params, registry=registry, max_samples=max_samples, observers=observers
        )
    except SimulationError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 2

    output_config = config.get("output", {}) or {}
    output = args.output or (Path(output_config["json"]) if output_config.get("json") else None)
    plot_dir = args.plot_dir or (
        Path(output_config["plot_dir"]) if output_config.get("plot_dir") else None
    )
    _write_outputs(result, params, output, plot_dir)
    _print_summary(result, params)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
