#!/usr/bin/env python3
"""
CVRP Instance Data and Parser
Parses TSPLIB/CVRPLib instances and exposes demand, capacity and distance lookups
"""

import os
import re
import math
from dataclasses import dataclass, field
from typing import List, Tuple, Dict, Optional

import numpy as np

from .common import get_logger, InstanceFormatError

logger = get_logger(__name__)

SUPPORTED_EDGE_WEIGHT_TYPES = ("EUC_2D",)


def build_distance_matrix(coords: List[Tuple[float, float]]) -> np.ndarray:
    """Build the pairwise Euclidean distance matrix

    Each entry is rounded to 2 decimal places (halves away from zero) at
    the point of computation.

    Args:
        coords: List of (x, y) coordinates

    Returns:
        Square float64 matrix indexed by position in ``coords``
    """
    C = np.asarray(coords, dtype=np.float64).reshape(-1, 2)
    dx = C[:, 0][:, None] - C[:, 0][None, :]
    dy = C[:, 1][:, None] - C[:, 1][None, :]
    D = np.floor(np.sqrt(dx * dx + dy * dy) * 100.0 + 0.5) / 100.0
    np.fill_diagonal(D, 0.0)
    return D


@dataclass
class InstanceData:
    """Represents a CVRP instance with all its data."""

    name: str
    capacity: int
    node_coords: Dict[int, Tuple[float, float]]  # node_id -> (x, y)
    demands: Dict[int, int]  # node_id -> demand
    depot: int
    dimension: int = 0
    comment: str = ""
    edge_weight_type: str = "EUC_2D"
    distance_matrix: Optional[np.ndarray] = field(default=None, repr=False)

    def __post_init__(self):
        if not self.dimension:
            self.dimension = len(self.node_coords)
        if self.depot not in self.node_coords:
            raise InstanceFormatError(f"Depot {self.depot} has no coordinates")

        self.node_ids = sorted(self.node_coords.keys())
        self._position = {node_id: i for i, node_id in enumerate(self.node_ids)}

        if self.distance_matrix is None:
            self.distance_matrix = build_distance_matrix(
                [self.node_coords[node_id] for node_id in self.node_ids])

    def get_customers(self) -> List[int]:
        """Customer ids: every node id except the depot, ascending"""
        return [node_id for node_id in self.node_ids if node_id != self.depot]

    @property
    def customer_count(self) -> int:
        return len(self.node_ids) - 1

    @property
    def total_demand(self) -> int:
        return sum(self.demand_of(node_id) for node_id in self.get_customers())

    def demand_of(self, node_id: int) -> int:
        """Demand of a node; the depot carries none"""
        if node_id == self.depot:
            return 0
        return self.demands[node_id]

    def get_distance(self, node_i: int, node_j: int) -> float:
        """Distance between two node ids, already rounded to 2 decimals"""
        return float(self.distance_matrix[self._position[node_i], self._position[node_j]])

    def __repr__(self) -> str:
        return (f"InstanceData(name='{self.name}', dimension={self.dimension}, "
                f"capacity={self.capacity}, depot={self.depot})")


def infer_vehicle_count(instance: InstanceData) -> int:
    """Vehicle count from a CVRPLib name suffix (``-k5``), else the demand bound"""
    match = re.search(r"-k(\d+)$", instance.name)
    if match:
        return int(match.group(1))
    if instance.capacity <= 0:
        return 1
    return max(1, math.ceil(instance.total_demand / instance.capacity))


class CVRPParser:
    """Parser for CVRP instances in CVRPLib format."""

    @staticmethod
    def parse(file_path: str) -> InstanceData:
        """
        Parse a CVRP instance file.

        Args:
            file_path: Path to the .vrp file

        Returns:
            InstanceData object with all the parsed data

        Raises:
            InstanceFormatError: If the file is missing or its format is invalid
        """
        if not os.path.isfile(file_path):
            raise InstanceFormatError(f"Cannot open instance file {file_path}")

        with open(file_path, 'r') as f:
            lines = [line.strip() for line in f.readlines()]

        name = os.path.splitext(os.path.basename(file_path))[0]
        comment = ""
        dimension = 0
        edge_weight_type = "EUC_2D"
        capacity = 0
        node_coords = {}
        demands = {}
        depots = []

        # State machine for parsing
        section = None

        for line_number, line in enumerate(lines, start=1):
            if not line or line.startswith("EOF"):
                continue

            try:
                # Parse header fields
                if line.startswith("NAME"):
                    name = line.split(":", 1)[1].strip()
                elif line.startswith("COMMENT"):
                    comment = line.split(":", 1)[1].strip().strip('"')
                elif line.startswith("TYPE"):
                    continue
                elif line.startswith("DIMENSION"):
                    dimension = int(line.split(":", 1)[1].strip())
                elif line.startswith("EDGE_WEIGHT_TYPE"):
                    edge_weight_type = line.split(":", 1)[1].strip()
                elif line.startswith("CAPACITY"):
                    capacity = int(line.split(":", 1)[1].strip())

                # Section markers
                elif line.startswith("NODE_COORD_SECTION"):
                    section = "NODE_COORD"
                elif line.startswith("DEMAND_SECTION"):
                    section = "DEMAND"
                elif line.startswith("DEPOT_SECTION"):
                    section = "DEPOT"

                # Parse section data
                elif section == "NODE_COORD":
                    parts = line.split()
                    if len(parts) < 3:
                        raise ValueError(f"expected 'id x y', got '{line}'")
                    node_coords[int(parts[0])] = (float(parts[1]), float(parts[2]))

                elif section == "DEMAND":
                    parts = line.split()
                    if len(parts) < 2:
                        raise ValueError(f"expected 'id demand', got '{line}'")
                    demands[int(parts[0])] = int(parts[1])

                elif section == "DEPOT":
                    depot_id = int(line)
                    if depot_id == -1:
                        section = None
                    else:
                        depots.append(depot_id)
            except (ValueError, IndexError) as e:
                raise InstanceFormatError(f"{file_path}:{line_number}: {e}") from e

        # Validate that we have all required data
        if dimension <= 0:
            raise InstanceFormatError("Missing or invalid DIMENSION field")
        if capacity <= 0:
            raise InstanceFormatError("Missing or invalid CAPACITY field")
        if edge_weight_type not in SUPPORTED_EDGE_WEIGHT_TYPES:
            raise InstanceFormatError(f"Edge weight type {edge_weight_type} not supported")
        if not node_coords:
            raise InstanceFormatError("Missing NODE_COORD_SECTION")
        if not demands:
            raise InstanceFormatError("Missing DEMAND_SECTION")
        if not depots:
            raise InstanceFormatError("Missing DEPOT_SECTION")
        if len(node_coords) != dimension:
            raise InstanceFormatError(
                f"NODE_COORD_SECTION has {len(node_coords)} nodes, DIMENSION is {dimension}")
        if set(demands) != set(node_coords):
            raise InstanceFormatError("DEMAND_SECTION ids do not match NODE_COORD_SECTION ids")
        if len(depots) > 1:
            logger.warning(f"{len(depots)} depots listed, using the first ({depots[0]})")

        instance = InstanceData(
            name=name,
            comment=comment,
            dimension=dimension,
            edge_weight_type=edge_weight_type,
            capacity=capacity,
            node_coords=node_coords,
            demands=demands,
            depot=depots[0]
        )
        logger.info(f"Loaded instance {instance.name}: {instance.customer_count} customers, "
                    f"capacity {instance.capacity}, depot {instance.depot}")
        return instance


def load_cvrp_instance(file_path: str) -> InstanceData:
    """
    Convenience function to load a CVRP instance from a file.

    Args:
        file_path: Path to the .vrp file

    Returns:
        InstanceData object
    """
    return CVRPParser.parse(file_path)
