#!/usr/bin/env python3
"""
CVRP Sequence Generator
Creates random candidate chromosomes by shuffling customers and packing them greedily by capacity
"""

import random
from typing import List, Optional, Dict

from .chromosome import SequenceChromosome, SEPARATOR
from .common import get_logger

logger = get_logger(__name__)


class SequenceGenerator:
    """Produces random capacity-packed chromosomes for one instance"""

    def __init__(self, customers: List[int], capacity: int, vehicle_count: int,
                 demands: Dict[int, int], rng: Optional[random.Random] = None):
        """Initialize sequence generator

        Args:
            customers: Non-depot customer ids
            capacity: Vehicle capacity
            vehicle_count: Number of vehicles (routes) in a solution
            demands: Customer id -> demand
            rng: Random source; a fresh entropy-seeded one if omitted
        """
        self.customers = list(customers)
        self.capacity = capacity
        self.vehicle_count = vehicle_count
        self.demands = demands
        self.rng = rng or random.Random()

    @classmethod
    def from_instance(cls, instance, vehicle_count: int,
                      rng: Optional[random.Random] = None) -> 'SequenceGenerator':
        """Create a generator for an InstanceData"""
        return cls(instance.get_customers(), instance.capacity, vehicle_count,
                   instance.demands, rng=rng)

    def pack_bins(self, order: List[int]) -> List[List[int]]:
        """Greedily pack customers, in the given order, into capacity bins

        A customer that does not fit closes the current bin (even an empty
        one) and opens a new bin on its own. A customer whose demand alone
        exceeds capacity is still packed, so its bin stays over capacity.
        Empty bins are appended until there are at least ``vehicle_count``.
        """
        bins = []
        current_bin = []
        load = 0

        for customer in order:
            demand = self.demands[customer]
            if load + demand <= self.capacity:
                current_bin.append(customer)
                load += demand
            else:
                bins.append(current_bin)
                current_bin = [customer]
                load = demand

        if current_bin:
            bins.append(current_bin)

        while len(bins) < self.vehicle_count:
            bins.append([])

        return bins

    @staticmethod
    def join_bins(bins: List[List[int]]) -> SequenceChromosome:
        """Concatenate bins with one separator between consecutive bins"""
        tokens = []
        for i, customer_bin in enumerate(bins):
            if i > 0:
                tokens.append(SEPARATOR)
            tokens.extend(customer_bin)
        return SequenceChromosome(tokens)

    def generate(self) -> SequenceChromosome:
        """Create one random chromosome"""
        order = self.customers.copy()
        self.rng.shuffle(order)

        bins = self.pack_bins(order)
        chromosome = self.join_bins(bins)
        chromosome.creation_method = "random_greedy_packing"

        logger.debug(f"Generated chromosome with {len(bins)} bins for {self.vehicle_count} vehicles")
        return chromosome
