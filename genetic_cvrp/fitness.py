#!/usr/bin/env python3
"""
CVRP Fitness Evaluation System
Computes route demand, route and total cost, and solution feasibility
"""

from dataclasses import dataclass, field
from typing import List, Dict, Iterable

from .chromosome import SequenceChromosome
from .common import get_logger, round_to_cents
from .decoder import decode_chromosome

logger = get_logger(__name__)


def route_demand(route: List[int], demands: Dict[int, int]) -> int:
    """Total demand of the interior ids of a route (depot endpoints excluded)"""
    return sum(demands[node] for node in route[1:-1])


def check_solution(routes: List[List[int]], demands: Dict[int, int], capacity: int,
                   customers: Iterable[int]) -> bool:
    """Whether routes form a feasible CVRP solution

    True iff every route is within capacity and every customer is visited
    exactly once. Stops at the first violation and does not say which.
    """
    customer_set = set(customers)
    visited = set()

    for route in routes:
        for node in route[1:-1]:
            if node not in customer_set or node in visited:
                return False
            visited.add(node)
        if route_demand(route, demands) > capacity:
            return False

    return visited == customer_set


@dataclass
class EvaluationResult:
    """Evaluation of one chromosome"""
    routes: List[List[int]]
    cost: float
    is_feasible: bool
    route_costs: List[float] = field(default_factory=list)
    route_demands: List[int] = field(default_factory=list)

    @property
    def used_routes(self) -> int:
        return sum(1 for route in self.routes if len(route) > 2)


class CVRPFitnessEvaluator:
    """Cost and feasibility evaluation against one instance"""

    def __init__(self, instance):
        """Initialize fitness evaluator

        Args:
            instance: InstanceData providing depot, demands, capacity and distances
        """
        self.instance = instance
        self.customers = instance.get_customers()

        # Performance tracking
        self.evaluations = 0
        self.best_cost = None

    def distance(self, node_i: int, node_j: int) -> float:
        """Euclidean distance rounded to 2 decimals"""
        return self.instance.get_distance(node_i, node_j)

    def route_demand(self, route: List[int]) -> int:
        return route_demand(route, self.instance.demands)

    def route_cost(self, route: List[int]) -> float:
        """Sum of edge distances along the route, rounded to 2 decimals"""
        cost = 0.0
        for i in range(len(route) - 1):
            cost += self.distance(route[i], route[i + 1])
        return round_to_cents(cost)

    def total_cost(self, routes: List[List[int]]) -> float:
        """Sum of rounded route costs, rounded to 2 decimals again"""
        total = 0.0
        for route in routes:
            total += self.route_cost(route)
        return round_to_cents(total)

    def check_solution(self, routes: List[List[int]]) -> bool:
        return check_solution(routes, self.instance.demands, self.instance.capacity, self.customers)

    def evaluate(self, chromosome: SequenceChromosome) -> EvaluationResult:
        """Decode, cost and check a chromosome

        The results are also cached on the chromosome; its tokens are not
        modified.
        """
        routes = decode_chromosome(chromosome.tokens, self.instance.depot)
        route_costs = [self.route_cost(route) for route in routes]
        cost = self.total_cost(routes)
        feasible = self.check_solution(routes)

        chromosome.routes = routes
        chromosome.cost = cost
        chromosome.is_feasible = feasible

        self.evaluations += 1
        if self.best_cost is None or cost < self.best_cost:
            self.best_cost = cost

        logger.debug(f"Evaluated chromosome: {len(routes)} routes, cost {cost:.2f}, feasible={feasible}")

        return EvaluationResult(
            routes=routes,
            cost=cost,
            is_feasible=feasible,
            route_costs=route_costs,
            route_demands=[self.route_demand(route) for route in routes]
        )
