"""
Configuration loader for YAML-based simulation setup.

Provides functions to load simulation parameters, extra elements and
run limits from YAML files.

Example config:
    simulation:
      model: morse
      element: H
      duration: 2000.0
      timestep: 0.5
      temperature: 300
    limits:
      max_samples: 1000000
    elements:
      D:
        mass_au: 1822.0
        spring_constant_au: 0.3665358
        spring_constant_si: 570.657
    output:
      json: result.json
      plot_dir: plots
    logging:
      level: INFO
"""
import logging
from pathlib import Path
from typing import Any, Dict, Optional, Union

import yaml

from pydiatomic.core.constants import MAX_SAMPLES
from pydiatomic.core.element_registry import ElementProperties, ElementRegistry
from pydiatomic.core.errors import InvalidParametersError
from pydiatomic.core.schemas import SimulationParameters, SimulationResult
from pydiatomic.core.service import simulate_molecule

logger = logging.getLogger(__name__)


def load_yaml(path: Union[str, Path]) -> Dict[str, Any]:
    """
    Load YAML configuration file.

    Args:
        path: Path to YAML file.

    Returns:
        Dictionary with configuration (empty for an empty file).

    Raises:
        InvalidParametersError: If the file is not valid YAML or the top
            level is not a mapping.
    """
    with open(path, "r") as f:
        try:
            config = yaml.safe_load(f)
        except yaml.YAMLError as exc:
            raise InvalidParametersError(f"Malformed YAML in {path}: {exc}") from exc
    if config is None:
        return {}
    if not isinstance(config, dict):
        raise InvalidParametersError(
            f"Configuration root must be a mapping, got {type(config).__name__}"
        )
    logger.debug("Loaded configuration from %s", path)
    return config


def parameters_from_config(config: Dict[str, Any]) -> SimulationParameters:
    """Parse the ``simulation`` section into SimulationParameters."""
    return SimulationParameters.from_dict(config.get("simulation") or {})


def registry_from_config(config: Dict[str, Any]) -> Optional[ElementRegistry]:
    """
    Build a registry with the extra species of the ``elements`` section.

    Returns:
        None when the section is absent, so the reference table is used.
    """
    elements_config = config.get("elements")
    if not elements_config:
        return None
    if not isinstance(elements_config, dict):
        raise InvalidParametersError(
            "elements section must be a mapping of symbols, "
            f"got {type(elements_config).__name__}"
        )

    registry = ElementRegistry()
    for symbol, values in elements_config.items():
        try:
            registry.add_custom_element(ElementProperties.from_dict(str(symbol), values))
        except (KeyError, TypeError, ValueError) as exc:
            raise InvalidParametersError(
                f"Invalid element entry '{symbol}': {exc}"
            ) from exc
    return registry


def max_samples_from_config(config: Dict[str, Any]) -> int:
    """Parse ``limits.max_samples`` (default MAX_SAMPLES)."""
    limits = config.get("limits", {}) or {}
    value = limits.get("max_samples", MAX_SAMPLES)
    try:
        max_samples = int(value)
    except (TypeError, ValueError) as exc:
        raise InvalidParametersError(f"Invalid max_samples: {value!r}") from exc
    if max_samples < 1:
        raise InvalidParametersError(f"max_samples must be >= 1, got {max_samples}")
    return max_samples


def run_from_config(config: Dict[str, Any]) -> SimulationResult:
    """
    Run the simulation described by a configuration dictionary.

    Args:
        config: Configuration dictionary (typically from YAML).

    Returns:
        The simulation result.
    """
    params = parameters_from_config(config)
    return simulate_molecule(
        params,
        registry=registry_from_config(config),
        max_samples=max_samples_from_config(config),
    )


def load_and_run(path: Union[str, Path]) -> SimulationResult:
    """
    Load configuration from YAML and run the simulation.

    Args:
        path: Path to YAML configuration file.

    Returns:
        The simulation result.
    """
    return run_from_config(load_yaml(path))
