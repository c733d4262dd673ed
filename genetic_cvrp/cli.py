#!/usr/bin/env python3
"""
CVRP Population Builder - Command Line Interface
Reads an instance, builds a repaired random population and reports the best individual
"""

import argparse
import random
import sys

from .common import setup_logging, get_logger, CVRPError
from .config import CVRPConfiguration, load_configuration
from .fitness import CVRPFitnessEvaluator
from .formatter import SolutionFormatter
from .instance import load_cvrp_instance, infer_vehicle_count
from .population import PopulationManager
from .visualization import plot_solution

logger = get_logger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='genetic-cvrp',
        description='CVRP sequence population builder - Command Line Interface',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "examples:\n"
            "  genetic-cvrp CMT1.vrp --vehicles 5\n"
            "  genetic-cvrp A-n32-k5.vrp --population-size 200 --plot best.png"
        )
    )

    parser.add_argument(
        'instance',
        help='Path to a TSPLIB/CVRPLib .vrp instance file'
    )

    parser.add_argument(
        '--vehicles', '-k',
        type=int,
        help='Number of vehicles (default: -k<V> name suffix, else total demand / capacity)'
    )

    parser.add_argument(
        '--population-size', '-p',
        type=int,
        help='Number of individuals (default 50)'
    )

    parser.add_argument(
        '--seed', '-s',
        type=int,
        help='Random seed (default: system entropy)'
    )

    parser.add_argument(
        '--config', '-c',
        type=str,
        help='YAML or JSON configuration file'
    )

    parser.add_argument(
        '--plot',
        type=str,
        help='Save a plot of the best solution to this image file'
    )

    parser.add_argument(
        '--json',
        action='store_true',
        help='Print the summary as JSON instead of text'
    )

    parser.add_argument(
        '--quiet', '-q',
        action='store_true',
        help='Only print the best individual summary'
    )

    parser.add_argument(
        '--log-level',
        choices=['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL'],
        help='Logging level (default WARNING on the command line)'
    )

    return parser


def main(argv=None) -> int:
    """Main CLI entry point"""
    args = build_parser().parse_args(argv)

    try:
        config = load_configuration(args.config) if args.config else CVRPConfiguration(log_level="WARNING")
        config = config.merged({
            'population_size': args.population_size,
            'vehicle_count': args.vehicles,
            'seed': args.seed,
            'log_level': args.log_level
        })
        setup_logging(config.logging_level)

        instance = load_cvrp_instance(args.instance)
        vehicle_count = config.vehicle_count or infer_vehicle_count(instance)
        rng = random.Random(config.seed) if config.seed is not None else None

        manager = PopulationManager(instance, vehicle_count,
                                    population_size=config.population_size, rng=rng)
        result = manager.run()
    except CVRPError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    formatter = SolutionFormatter()
    if args.json:
        print(formatter.to_json(formatter.format_summary_json(result, instance.name, vehicle_count)))
    else:
        if not args.quiet:
            print(formatter.format_population_cli(result))
            print(formatter.format_costs_cli(result))
        print(formatter.format_summary_cli(result))

        if not args.quiet:
            evaluation = CVRPFitnessEvaluator(instance).evaluate(result.best_chromosome.copy())
            print(formatter.format_routes_cli(evaluation.routes, evaluation.route_costs,
                                              evaluation.route_demands))
            if not evaluation.is_feasible:
                print("Best individual violates capacity or coverage constraints")

    if args.plot:
        plot_solution(instance, result.best_routes, args.plot, cost=result.best_cost)
        if not args.json:
            print(f"Saved plot: {args.plot}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
