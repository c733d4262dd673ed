#!/usr/bin/env python3
"""
Chromosome Decoder
Turns a flat token sequence into explicit depot-rooted routes
"""

from typing import List, Iterable

from .chromosome import is_separator, Token


def decode_chromosome(tokens: Iterable[Token], depot: int) -> List[List[int]]:
    """Decode a chromosome into routes

    Each separator closes the current route. A route closed by a separator
    is emitted even when it has no customers (``[depot, depot]``); only an
    empty route left over at the end is dropped.

    Args:
        tokens: Chromosome or token sequence
        depot: Depot node id

    Returns:
        List of routes, each starting and ending at the depot
    """
    routes = []
    current_route = [depot]

    for token in tokens:
        if is_separator(token):
            current_route.append(depot)
            routes.append(current_route)
            current_route = [depot]
        else:
            current_route.append(token)

    if len(current_route) > 1:
        current_route.append(depot)
        routes.append(current_route)

    return routes


def route_interiors(routes: List[List[int]]) -> List[List[int]]:
    """Customer ids of each route, depot endpoints stripped"""
    return [route[1:-1] for route in routes]
