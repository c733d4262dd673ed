#!/usr/bin/env python3
"""
CVRP Population Management
Builds a population of repaired random chromosomes and picks the cheapest one
"""

import random
import time
from dataclasses import dataclass, field
from typing import List, Optional

from .chromosome import SequenceChromosome
from .common import get_logger, DEFAULT_POPULATION_SIZE, CVRPError, summarize_costs
from .fitness import CVRPFitnessEvaluator
from .generator import SequenceGenerator
from .repair import repair_separators, repair_customers

logger = get_logger(__name__)


@dataclass
class PopulationResult:
    """Outcome of one population pass"""
    population: List[SequenceChromosome]
    costs: List[float]
    feasible: List[bool]
    best_index: int
    best_cost: float
    best_routes: List[List[int]] = field(default_factory=list)
    elapsed_time: float = 0.0

    @property
    def best_chromosome(self) -> SequenceChromosome:
        return self.population[self.best_index]

    @property
    def feasible_count(self) -> int:
        return sum(1 for flag in self.feasible if flag)

    def get_summary(self):
        """Best index (0-based), best cost and population cost statistics"""
        summary = summarize_costs(self.costs)
        summary.update({
            'best_index': self.best_index,
            'best_cost': self.best_cost,
            'feasible_count': self.feasible_count,
            'elapsed_time': self.elapsed_time
        })
        return summary


class PopulationManager:
    """Repeated random construction, structural repair and greedy best pick"""

    def __init__(self, instance, vehicle_count: int,
                 population_size: int = DEFAULT_POPULATION_SIZE,
                 rng: Optional[random.Random] = None):
        """Initialize population manager

        Args:
            instance: InstanceData to build solutions for
            vehicle_count: Number of vehicles (routes) per solution
            population_size: Number of chromosomes per population
            rng: Random source; without one every population is drawn from
                a freshly entropy-seeded generator
        """
        if vehicle_count < 1:
            raise CVRPError(f"Vehicle count must be at least 1, got {vehicle_count}")
        if population_size < 1:
            raise CVRPError(f"Population size must be at least 1, got {population_size}")

        self.instance = instance
        self.vehicle_count = vehicle_count
        self.population_size = population_size
        self.rng = rng
        self.customers = instance.get_customers()
        self.evaluator = CVRPFitnessEvaluator(instance)

    def create_population(self) -> List[SequenceChromosome]:
        """Create a population of generated and repaired chromosomes"""
        rng = self.rng if self.rng is not None else random.Random()
        generator = SequenceGenerator.from_instance(self.instance, self.vehicle_count, rng=rng)

        population = []
        for _ in range(self.population_size):
            chromosome = generator.generate()
            chromosome = repair_separators(chromosome, self.vehicle_count)
            chromosome = repair_customers(chromosome, self.customers)
            population.append(chromosome)

        logger.info(f"Created population of {len(population)} chromosomes "
                    f"({len(self.customers)} customers, {self.vehicle_count} vehicles)")
        return population

    def evaluate_population(self, population: List[SequenceChromosome]) -> List[float]:
        """Cost every chromosome, returning costs in population order"""
        return [self.evaluator.evaluate(chromosome).cost for chromosome in population]

    @staticmethod
    def find_best(costs: List[float]) -> int:
        """Index of the minimum cost; the first one on ties"""
        if not costs:
            raise CVRPError("Cannot pick the best individual of an empty population")

        best_index = 0
        for i, cost in enumerate(costs):
            if cost < costs[best_index]:
                best_index = i
        return best_index

    def run(self) -> PopulationResult:
        """Create, evaluate and pick the best individual of one population"""
        start_time = time.time()

        population = self.create_population()
        costs = self.evaluate_population(population)
        best_index = self.find_best(costs)
        best = population[best_index]

        result = PopulationResult(
            population=population,
            costs=costs,
            feasible=[bool(chromosome.is_feasible) for chromosome in population],
            best_index=best_index,
            best_cost=costs[best_index],
            best_routes=[route.copy() for route in best.routes],
            elapsed_time=time.time() - start_time
        )

        logger.info(f"Best individual is {best_index + 1} with cost = {result.best_cost:.2f} "
                    f"({result.feasible_count}/{len(population)} feasible)")
        return result
