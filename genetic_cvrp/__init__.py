#!/usr/bin/env python3
"""
Genetic CVRP Package
Sequence chromosome encoding, structural repair, decoding and evaluation for the CVRP
"""

# Core components
from .chromosome import Separator, SEPARATOR, SequenceChromosome, is_separator
from .generator import SequenceGenerator
from .repair import repair_separators, repair_customers
from .decoder import decode_chromosome, route_interiors
from .population import PopulationManager, PopulationResult

# Fitness evaluation
from .fitness import CVRPFitnessEvaluator, EvaluationResult, check_solution, route_demand

# Instance data
from .instance import InstanceData, CVRPParser, load_cvrp_instance, build_distance_matrix, infer_vehicle_count

# Configuration and reporting
from .config import CVRPConfiguration, load_configuration, save_configuration
from .formatter import SolutionFormatter

# Common utilities
from .common import (
    setup_logging, get_logger, round_to_cents, DEFAULT_POPULATION_SIZE,
    CVRPError, InvalidChromosomeError, ChromosomeRepairError,
    InstanceFormatError, ConfigurationError
)

__version__ = "1.0.0"

__all__ = [
    # Core
    'Separator',
    'SEPARATOR',
    'SequenceChromosome',
    'is_separator',
    'SequenceGenerator',
    'repair_separators',
    'repair_customers',
    'decode_chromosome',
    'route_interiors',
    'PopulationManager',
    'PopulationResult',

    # Fitness
    'CVRPFitnessEvaluator',
    'EvaluationResult',
    'check_solution',
    'route_demand',

    # Instance
    'InstanceData',
    'CVRPParser',
    'load_cvrp_instance',
    'build_distance_matrix',
    'infer_vehicle_count',

    # Configuration and reporting
    'CVRPConfiguration',
    'load_configuration',
    'save_configuration',
    'SolutionFormatter',

    # Common
    'setup_logging',
    'get_logger',
    'round_to_cents',
    'DEFAULT_POPULATION_SIZE',
    'CVRPError',
    'InvalidChromosomeError',
    'ChromosomeRepairError',
    'InstanceFormatError',
    'ConfigurationError',
]
