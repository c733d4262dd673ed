#!/usr/bin/env python3
"""
Solution Formatter
Formats population and best-solution data for CLI and JSON output
"""

from typing import Dict, List, Any, Optional
import json

from .population import PopulationResult


class SolutionFormatter:
    """Formats population results for different presentation contexts"""

    def format_population_cli(self, result: PopulationResult) -> str:
        """One line per individual with its tokens, separators shown as 0"""
        lines = []
        for i, chromosome in enumerate(result.population):
            values = " ".join(str(value) for value in chromosome.to_values())
            lines.append(f"Individual {i + 1}: {values}")
        return "\n".join(lines)

    def format_costs_cli(self, result: PopulationResult) -> str:
        """One line per individual with its total cost"""
        lines = []
        for i, cost in enumerate(result.costs):
            marker = "" if result.feasible[i] else " (infeasible)"
            lines.append(f"Individual {i + 1} cost: {cost:.2f}{marker}")
        return "\n".join(lines)

    def format_summary_cli(self, result: PopulationResult) -> str:
        """Best individual line, 1-based index"""
        return f"Best individual is {result.best_index + 1} with cost = {result.best_cost:.2f}"

    def format_routes_cli(self, routes: List[List[int]], route_costs: Optional[List[float]] = None,
                          route_demands: Optional[List[int]] = None) -> str:
        """Routes of a solution, optionally with their cost and demand

        Args:
            routes: Depot-rooted routes
            route_costs: Optional per-route cost
            route_demands: Optional per-route demand

        Returns:
            Formatted string for CLI display
        """
        if not routes:
            return "No routes"

        lines = []
        for i, route in enumerate(routes):
            line = f"Route #{i + 1}: {' '.join(str(node) for node in route)}"
            details = []
            if route_demands is not None:
                details.append(f"demand {route_demands[i]}")
            if route_costs is not None:
                details.append(f"cost {route_costs[i]:.2f}")
            if details:
                line += f" ({', '.join(details)})"
            lines.append(line)
        return "\n".join(lines)

    def format_summary_json(self, result: PopulationResult, instance_name: str = "",
                            vehicle_count: Optional[int] = None) -> Dict[str, Any]:
        """Summary as a JSON-serializable dictionary"""
        return {
            'instance': instance_name,
            'vehicle_count': vehicle_count,
            'population_size': len(result.population),
            'costs': list(result.costs),
            'feasible': list(result.feasible),
            'best_individual': result.best_index + 1,
            'best_cost': result.best_cost,
            'best_sequence': result.best_chromosome.to_values(),
            'best_routes': result.best_routes,
            'statistics': result.get_summary()
        }

    def to_json(self, data: Dict[str, Any]) -> str:
        return json.dumps(data, indent=2)
