#!/usr/bin/env python3
"""
CVRP Configuration Management
Run parameters loaded from and saved to YAML or JSON files
"""

import json
import os
import logging
from dataclasses import dataclass, asdict, fields
from typing import Dict, Any, Optional

import yaml

from .common import DEFAULT_POPULATION_SIZE, ConfigurationError, get_logger

logger = get_logger(__name__)

VALID_LOG_LEVELS = ('DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL')


@dataclass
class CVRPConfiguration:
    """Population run parameters"""
    population_size: int = DEFAULT_POPULATION_SIZE
    vehicle_count: Optional[int] = None    # None: infer from the instance
    seed: Optional[int] = None             # None: seed from system entropy
    log_level: str = "INFO"

    def validate(self) -> bool:
        """Validate configuration parameters"""
        return (
            isinstance(self.population_size, int) and self.population_size > 0 and
            (self.vehicle_count is None or
             (isinstance(self.vehicle_count, int) and self.vehicle_count > 0)) and
            (self.seed is None or isinstance(self.seed, int)) and
            str(self.log_level).upper() in VALID_LOG_LEVELS
        )

    @property
    def logging_level(self) -> int:
        return getattr(logging, str(self.log_level).upper())

    def merged(self, overrides: Dict[str, Any]) -> 'CVRPConfiguration':
        """Copy with non-None overrides applied"""
        values = asdict(self)
        values.update({key: value for key, value in overrides.items() if value is not None})
        return configuration_from_dict(values)

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


def configuration_from_dict(data: Dict[str, Any]) -> CVRPConfiguration:
    """Build and validate a configuration from a plain mapping

    Raises:
        ConfigurationError: On unknown keys or invalid values
    """
    if not isinstance(data, dict):
        raise ConfigurationError("Configuration must be a mapping of parameter names to values")

    known = {f.name for f in fields(CVRPConfiguration)}
    unknown = sorted(set(data) - known)
    if unknown:
        raise ConfigurationError(f"Unknown configuration parameters: {', '.join(unknown)}")

    config = CVRPConfiguration(**data)
    if not config.validate():
        raise ConfigurationError(f"Invalid configuration values: {config.to_dict()}")
    return config


def load_configuration(path: str) -> CVRPConfiguration:
    """Load a configuration file (.yaml/.yml with PyYAML, anything else as JSON)"""
    if not os.path.isfile(path):
        raise ConfigurationError(f"Configuration file not found: {path}")

    try:
        with open(path, 'r') as f:
            if path.endswith('.yaml') or path.endswith('.yml'):
                data = yaml.safe_load(f)
            else:
                data = json.load(f)
    except (yaml.YAMLError, json.JSONDecodeError) as e:
        raise ConfigurationError(f"Cannot parse configuration file {path}: {e}") from e

    config = configuration_from_dict(data or {})
    logger.debug(f"Loaded configuration from {path}: {config.to_dict()}")
    return config


def save_configuration(config: CVRPConfiguration, path: str) -> str:
    """Write a configuration file in the format given by its extension"""
    with open(path, 'w') as f:
        if path.endswith('.yaml') or path.endswith('.yml'):
            yaml.dump(config.to_dict(), f, indent=2, default_flow_style=False)
        else:
            json.dump(config.to_dict(), f, indent=2)
    return path
