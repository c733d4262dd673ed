#!/usr/bin/env python3
"""
Structural Repair Operators
Restore separator count and customer uniqueness without looking at cost
"""

from collections import Counter
from typing import List, Iterable

from .chromosome import SequenceChromosome, is_separator
from .common import get_logger, ChromosomeRepairError

logger = get_logger(__name__)


def _find_adjacent_separator(tokens: List) -> int:
    """Index of the first separator followed directly by another, or -1"""
    for i in range(len(tokens) - 1):
        if is_separator(tokens[i]) and is_separator(tokens[i + 1]):
            return i
    return -1


def _find_first_separator(tokens: List) -> int:
    for i, token in enumerate(tokens):
        if is_separator(token):
            return i
    return -1


def repair_separators(chromosome: SequenceChromosome, vehicle_count: int) -> SequenceChromosome:
    """Reduce the separator count to exactly ``vehicle_count - 1``

    Separators bounding an empty bin (two adjacent separators) go first,
    leftmost pair first; any remaining surplus is removed leftmost-first.
    Removing a separator merges its two neighbouring bins in place, with no
    capacity check on the merged bin.

    Args:
        chromosome: Chromosome to repair (left untouched)
        vehicle_count: Number of vehicles

    Returns:
        Repaired copy of the chromosome

    Raises:
        ChromosomeRepairError: If there are already fewer separators than needed
    """
    tokens = chromosome.tokens.copy()
    target = vehicle_count - 1
    count = sum(1 for token in tokens if is_separator(token))

    if count < target:
        raise ChromosomeRepairError(
            f"Chromosome has {count} separators, {target} needed for {vehicle_count} vehicles")

    removed_adjacent = 0
    while count > target:
        index = _find_adjacent_separator(tokens)
        if index < 0:
            break
        del tokens[index]
        count -= 1
        removed_adjacent += 1

    removed_leftmost = 0
    while count > target:
        del tokens[_find_first_separator(tokens)]
        count -= 1
        removed_leftmost += 1

    if removed_adjacent or removed_leftmost:
        logger.debug(f"Separator repair removed {removed_adjacent} adjacent and "
                     f"{removed_leftmost} leftmost separators")

    return chromosome.with_tokens(tokens, repair_name="separators")


def repair_customers(chromosome: SequenceChromosome, customers: Iterable[int]) -> SequenceChromosome:
    """Make every customer appear exactly once

    Missing customers, in ascending id order, replace duplicate occurrences
    scanning left to right. The number of surplus occurrences must equal the
    number of missing customers.

    Args:
        chromosome: Chromosome to repair (left untouched)
        customers: The full non-depot customer set

    Returns:
        Repaired copy of the chromosome

    Raises:
        ChromosomeRepairError: On unknown ids or when surplus and missing counts differ
    """
    customer_set = set(customers)
    tokens = chromosome.tokens.copy()

    counts = Counter(token for token in tokens if not is_separator(token))
    unknown = sorted(set(counts) - customer_set)
    if unknown:
        raise ChromosomeRepairError(f"Chromosome holds ids outside the customer set: {unknown}")

    missing = sorted(customer for customer in customer_set if counts[customer] == 0)
    surplus = sum(count - 1 for count in counts.values() if count > 1)
    if surplus != len(missing):
        raise ChromosomeRepairError(
            f"{surplus} duplicate occurrences cannot hold {len(missing)} missing customers")

    if not missing:
        return chromosome.with_tokens(tokens, repair_name="customers")

    next_missing = 0
    for i, token in enumerate(tokens):
        if is_separator(token) or counts[token] <= 1:
            continue
        replacement = missing[next_missing]
        tokens[i] = replacement
        counts[token] -= 1
        counts[replacement] = 1
        next_missing += 1
        if next_missing == len(missing):
            break

    logger.debug(f"Customer repair placed {len(missing)} missing customers: {missing}")
    return chromosome.with_tokens(tokens, repair_name="customers")
