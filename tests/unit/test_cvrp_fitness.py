#!/usr/bin/env python3
"""
Unit tests for CVRP fitness evaluation
Tests costs, three-level rounding and the feasibility check
"""

import unittest
import sys
import os

# Add project root and tests directory to path
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', '..'))
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from genetic_cvrp.fitness import CVRPFitnessEvaluator, EvaluationResult, check_solution, route_demand
from genetic_cvrp.common import round_to_cents
from genetic_cvrp.instance import InstanceData
from cvrp_test_utils import create_example_instance, create_small_instance, seq


class TestRoundToCents(unittest.TestCase):
    """Test round_to_cents"""

    def test_halves_round_away_from_zero(self):
        """Test exact halves go away from zero, unlike round()"""
        self.assertEqual(round_to_cents(0.125), 0.13)
        self.assertEqual(round_to_cents(-0.125), -0.13)
        self.assertEqual(round(0.125, 2), 0.12)

    def test_regular_values(self):
        """Test ordinary rounding"""
        self.assertEqual(round_to_cents(1.41421356), 1.41)
        self.assertEqual(round_to_cents(3.6056), 3.61)
        self.assertEqual(round_to_cents(5.0), 5.0)
        self.assertEqual(round_to_cents(0.0), 0.0)


class TestFeasibilityCheck(unittest.TestCase):
    """Test check_solution"""

    def setUp(self):
        """Set up test fixtures"""
        self.demands = {2: 4, 3: 5, 4: 3}
        self.customers = [2, 3, 4]

    def test_example_solution_feasible(self):
        """Test capacity 10 with routes of demand 9 and 3"""
        routes = [[1, 2, 3, 1], [1, 4, 1]]

        self.assertEqual(route_demand(routes[0], self.demands), 9)
        self.assertEqual(route_demand(routes[1], self.demands), 3)
        self.assertTrue(check_solution(routes, self.demands, 10, self.customers))

    def test_degenerate_routes_allowed(self):
        """Test empty routes do not affect feasibility"""
        routes = [[1, 2, 3, 1], [1, 1], [1, 4, 1]]

        self.assertTrue(check_solution(routes, self.demands, 10, self.customers))

    def test_capacity_violation(self):
        """Test a route above capacity"""
        routes = [[1, 2, 3, 4, 1]]

        self.assertFalse(check_solution(routes, self.demands, 10, self.customers))

    def test_duplicate_customer(self):
        """Test a customer served by two routes"""
        routes = [[1, 2, 3, 1], [1, 4, 2, 1]]

        self.assertFalse(check_solution(routes, self.demands, 10, self.customers))

    def test_missing_customer(self):
        """Test a customer never visited"""
        routes = [[1, 2, 3, 1]]

        self.assertFalse(check_solution(routes, self.demands, 10, self.customers))

    def test_foreign_id(self):
        """Test an interior id outside the customer set"""
        routes = [[1, 2, 3, 1], [1, 4, 1, 1]]

        self.assertFalse(check_solution(routes, self.demands, 10, self.customers))

    def test_no_customers(self):
        """Test an instance without customers and only degenerate routes"""
        self.assertTrue(check_solution([[1, 1], [1, 1]], {}, 10, []))


class TestCVRPFitnessEvaluator(unittest.TestCase):
    """Test CVRPFitnessEvaluator class"""

    def setUp(self):
        """Set up test fixtures"""
        self.instance = create_example_instance()
        self.evaluator = CVRPFitnessEvaluator(self.instance)

    def test_evaluator_creation(self):
        """Test evaluator creation"""
        self.assertIs(self.evaluator.instance, self.instance)
        self.assertEqual(self.evaluator.customers, [2, 3, 4])
        self.assertEqual(self.evaluator.evaluations, 0)
        self.assertIsNone(self.evaluator.best_cost)

    def test_route_cost(self):
        """Test sum of edge distances"""
        self.assertAlmostEqual(self.evaluator.route_cost([1, 2, 3, 1]), 20.0)
        self.assertAlmostEqual(self.evaluator.route_cost([1, 4, 1]), 10.0)
        self.assertEqual(self.evaluator.route_cost([1, 1]), 0.0)

    def test_route_cost_symmetric(self):
        """Test reversing a route keeps its cost"""
        instance = create_small_instance()
        evaluator = CVRPFitnessEvaluator(instance)
        route = [1, 5, 2, 3, 4, 6, 1]

        self.assertEqual(evaluator.route_cost(route), evaluator.route_cost(list(reversed(route))))

    def test_total_cost(self):
        """Test total over routes"""
        routes = [[1, 2, 3, 1], [1, 4, 1]]

        self.assertAlmostEqual(self.evaluator.total_cost(routes), 30.0)
        self.assertEqual(self.evaluator.total_cost([]), 0.0)

    def test_three_level_rounding(self):
        """Test edges, routes and totals are each rounded"""
        instance = InstanceData(
            name="rounding",
            capacity=10,
            node_coords={1: (0.0, 0.0), 2: (0.004, 0.0), 3: (0.008, 0.0)},
            demands={1: 0, 2: 1, 3: 1},
            depot=1
        )
        evaluator = CVRPFitnessEvaluator(instance)
        route = [1, 2, 3, 1]

        self.assertEqual(evaluator.distance(1, 2), 0.0)
        self.assertEqual(evaluator.distance(3, 1), 0.01)
        self.assertAlmostEqual(evaluator.route_cost(route), 0.01)
        # Rounding only the raw length once would give 0.02
        self.assertAlmostEqual(round_to_cents(0.004 + 0.004 + 0.008), 0.02)
        self.assertAlmostEqual(evaluator.total_cost([route, route]), 0.02)

    def test_evaluate_example(self):
        """Test decode, cost and feasibility of the example chromosome"""
        chromosome = seq(2, 3, 0, 4)
        result = self.evaluator.evaluate(chromosome)

        self.assertIsInstance(result, EvaluationResult)
        self.assertEqual(result.routes, [[1, 2, 3, 1], [1, 4, 1]])
        self.assertAlmostEqual(result.cost, 30.0)
        self.assertTrue(result.is_feasible)
        self.assertEqual(result.route_demands, [9, 3])
        self.assertEqual(len(result.route_costs), 2)
        self.assertEqual(result.used_routes, 2)

        self.assertAlmostEqual(chromosome.cost, 30.0)
        self.assertTrue(chromosome.is_feasible)
        self.assertEqual(chromosome.routes, result.routes)
        self.assertEqual(chromosome.to_values(), [2, 3, 0, 4])
        self.assertEqual(self.evaluator.evaluations, 1)
        self.assertAlmostEqual(self.evaluator.best_cost, 30.0)

    def test_evaluate_infeasible(self):
        """Test a capacity violation is only reported through the flag"""
        result = self.evaluator.evaluate(seq(2, 3, 4, 0))

        self.assertFalse(result.is_feasible)
        self.assertEqual(result.routes, [[1, 2, 3, 4, 1]])
        self.assertEqual(result.route_demands, [12])

    def test_evaluate_no_customers(self):
        """Test the depot-only instance with three vehicles"""
        instance = InstanceData(name="depot-only", capacity=10,
                                node_coords={1: (0.0, 0.0)}, demands={1: 0}, depot=1)
        result = CVRPFitnessEvaluator(instance).evaluate(seq(0, 0))

        self.assertEqual(result.routes, [[1, 1], [1, 1]])
        self.assertEqual(result.cost, 0.0)
        self.assertTrue(result.is_feasible)
        self.assertEqual(result.used_routes, 0)


if __name__ == '__main__':
    unittest.main()
