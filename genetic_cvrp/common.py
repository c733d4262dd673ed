#!/usr/bin/env python3
"""
Common definitions for CVRP chromosome components
Shared constants, logging helpers and exception classes
"""

import sys
import math
import logging
from typing import Dict, Any

# Common constants
DEFAULT_POPULATION_SIZE = 50
SEPARATOR_DISPLAY_VALUE = 0
LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


def setup_logging(level=logging.INFO):
    """Set up logging configuration"""
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
    logging.basicConfig(
        level=level,
        format=LOG_FORMAT,
        handlers=[
            logging.StreamHandler(sys.stdout)
        ],
        force=True
    )


def get_logger(name: str) -> logging.Logger:
    """Get logger with consistent configuration"""
    return logging.getLogger(name)


def round_to_cents(value: float) -> float:
    """Round to 2 decimal places, halves away from zero"""
    scaled = math.floor(abs(value) * 100.0 + 0.5)
    return math.copysign(scaled, value) / 100.0


def safe_divide(numerator: float, denominator: float, default: float = 0.0) -> float:
    """Safely divide with default for division by zero"""
    return numerator / denominator if denominator != 0 else default


def summarize_costs(costs) -> Dict[str, Any]:
    """Basic statistics over a list of population costs"""
    if not costs:
        return {'count': 0, 'best': None, 'worst': None, 'mean': None}

    return {
        'count': len(costs),
        'best': min(costs),
        'worst': max(costs),
        'mean': safe_divide(sum(costs), len(costs))
    }


# Common exception classes
class CVRPError(Exception):
    """Base CVRP exception"""
    pass


class InvalidChromosomeError(CVRPError):
    """Invalid chromosome error"""
    pass


class ChromosomeRepairError(InvalidChromosomeError):
    """Repair operator precondition does not hold"""
    pass


class InstanceFormatError(CVRPError):
    """Malformed or incomplete instance file"""
    pass


class ConfigurationError(CVRPError):
    """Invalid configuration error"""
    pass


__all__ = [
    'DEFAULT_POPULATION_SIZE', 'SEPARATOR_DISPLAY_VALUE', 'LOG_FORMAT',
    'setup_logging', 'get_logger', 'round_to_cents', 'safe_divide', 'summarize_costs',
    'CVRPError', 'InvalidChromosomeError', 'ChromosomeRepairError',
    'InstanceFormatError', 'ConfigurationError'
]
