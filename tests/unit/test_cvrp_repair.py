#!/usr/bin/env python3
"""
Unit tests for the structural repair operators
"""

import random
import unittest
import sys
import os

# Add project root and tests directory to path
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', '..'))
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from genetic_cvrp.repair import repair_separators, repair_customers
from genetic_cvrp.generator import SequenceGenerator
from genetic_cvrp.common import ChromosomeRepairError, InvalidChromosomeError
from cvrp_test_utils import CVRPTestBase, create_random_instance, seq


class TestRepairSeparators(CVRPTestBase):
    """Test separator count repair"""

    def test_adjacent_separator_removed_first(self):
        """Test a separator bounding an empty bin goes before others"""
        repaired = repair_separators(seq(2, 0, 0, 3, 0, 4), vehicle_count=3)

        self.assertEqual(repaired.to_values(), [2, 0, 3, 0, 4])

    def test_leftmost_separator_removed_without_adjacent_pairs(self):
        """Test fallback removal merges the first two bins"""
        repaired = repair_separators(seq(2, 0, 3, 0, 4), vehicle_count=2)

        self.assertEqual(repaired.to_values(), [2, 3, 0, 4])

    def test_adjacent_then_leftmost(self):
        """Test both phases in order"""
        repaired = repair_separators(seq(0, 0, 2, 0, 3), vehicle_count=1)

        self.assertEqual(repaired.to_values(), [2, 3])

    def test_repeated_adjacent_removal(self):
        """Test runs of separators collapse left to right"""
        repaired = repair_separators(seq(2, 0, 0, 0, 3, 0, 0, 4), vehicle_count=3)

        self.assertEqual(repaired.to_values(), [2, 0, 3, 0, 4])

    def test_already_at_target(self):
        """Test a chromosome with V - 1 separators is unchanged"""
        chromosome = seq(0, 0)
        repaired = repair_separators(chromosome, vehicle_count=3)

        self.assertEqual(repaired, chromosome)
        self.assertEqual(repaired.repairs_applied, ["separators"])

    def test_customer_order_preserved(self):
        """Test merging never reorders customers"""
        chromosome = seq(5, 2, 0, 7, 0, 0, 3, 0, 6)
        repaired = repair_separators(chromosome, vehicle_count=2)

        self.assertEqual(repaired.get_customers(), [5, 2, 7, 3, 6])
        self.assertEqual(repaired.separator_count(), 1)

    def test_input_not_modified(self):
        """Test the operator returns a new chromosome"""
        chromosome = seq(2, 0, 0, 3)
        repair_separators(chromosome, vehicle_count=1)

        self.assertEqual(chromosome.to_values(), [2, 0, 0, 3])

    def test_too_few_separators(self):
        """Test fewer separators than needed is rejected"""
        with self.assertRaises(ChromosomeRepairError):
            repair_separators(seq(2, 3, 4), vehicle_count=2)


class TestRepairCustomers(CVRPTestBase):
    """Test customer uniqueness repair"""

    def test_duplicate_replaced_by_missing(self):
        """Test the first occurrence of a duplicate takes the missing id"""
        repaired = repair_customers(seq(2, 2, 0, 3), customers=[2, 3, 4])

        self.assertEqual(repaired.to_values(), [4, 2, 0, 3])

    def test_missing_ids_placed_in_ascending_order(self):
        """Test several duplicates are filled left to right with ascending ids"""
        repaired = repair_customers(seq(2, 3, 2, 0, 3), customers=[5, 4, 3, 2])

        self.assertEqual(repaired.to_values(), [4, 5, 2, 0, 3])

    def test_triple_occurrence(self):
        """Test an id occurring three times keeps exactly one occurrence"""
        repaired = repair_customers(seq(3, 3, 0, 3), customers=[2, 3, 4])

        self.assertEqual(repaired.to_values(), [2, 4, 0, 3])

    def test_valid_chromosome_unchanged(self):
        """Test nothing is replaced without duplicates"""
        chromosome = seq(2, 3, 0, 4)
        repaired = repair_customers(chromosome, customers=[2, 3, 4])

        self.assertEqual(repaired, chromosome)

    def test_surplus_must_match_missing(self):
        """Test a slot count that cannot cover every customer is rejected"""
        with self.assertRaises(ChromosomeRepairError):
            repair_customers(seq(2, 2, 0, 3), customers=[2, 3, 4, 5])

        with self.assertRaises(ChromosomeRepairError):
            repair_customers(seq(2, 3, 0, 3), customers=[2, 3])

    def test_unknown_id_rejected(self):
        """Test depot or foreign ids are rejected"""
        with self.assertRaises(InvalidChromosomeError):
            repair_customers(seq(1, 2), customers=[2, 3])

    def test_input_not_modified(self):
        """Test the operator returns a new chromosome"""
        chromosome = seq(2, 2, 0, 3)
        repair_customers(chromosome, customers=[2, 3, 4])

        self.assertEqual(chromosome.to_values(), [2, 2, 0, 3])


class TestRepairPipeline(CVRPTestBase):
    """Test generation followed by both repairs"""

    def test_generated_then_repaired_is_valid(self):
        """Test V - 1 separators and full coverage across many draws"""
        instance = create_random_instance(n_customers=30, capacity=25)
        customers = instance.get_customers()

        for vehicle_count in (1, 3, 5, 12, 40):
            generator = SequenceGenerator.from_instance(instance, vehicle_count,
                                                        rng=random.Random(vehicle_count))
            for _ in range(10):
                chromosome = generator.generate()
                chromosome = repair_separators(chromosome, vehicle_count)
                chromosome = repair_customers(chromosome, customers)

                self.assertStructurallyValid(chromosome, customers, vehicle_count)
                self.assertEqual(chromosome.repairs_applied, ["separators", "customers"])


if __name__ == '__main__':
    unittest.main()
