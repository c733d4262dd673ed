#!/usr/bin/env python3
"""
CVRP Solution Visualization
Draws the routes of a decoded solution over the instance coordinates
"""

import os
from dataclasses import dataclass
from typing import List, Optional, Tuple

import matplotlib
matplotlib.use('Agg')
import matplotlib.pyplot as plt

from .common import get_logger

logger = get_logger(__name__)


@dataclass
class VisualizationConfig:
    """Configuration for solution plots"""
    figure_size: Tuple[int, int] = (8, 8)
    dpi: int = 150
    customer_marker_size: int = 12
    depot_marker_size: int = 120


ROUTE_COLORS = [
    '#FF6B6B', '#4ECDC4', '#45B7D1', '#96CEB4', '#FFEAA7',
    '#DDA0DD', '#98D8C8', '#F7DC6F', '#BB8FCE', '#85C1E9'
]


def plot_solution(instance, routes: List[List[int]], output_path: str,
                  cost: Optional[float] = None,
                  config: Optional[VisualizationConfig] = None) -> str:
    """Save a plot of the routes of one solution

    Degenerate routes (no customers) are not drawn.

    Args:
        instance: InstanceData with node coordinates
        routes: Depot-rooted routes
        output_path: Image file to write
        cost: Optional total cost for the title
        config: Plot configuration

    Returns:
        Path of the saved image
    """
    config = config or VisualizationConfig()
    coords = instance.node_coords

    fig, ax = plt.subplots(figsize=config.figure_size, dpi=config.dpi)
    try:
        customers = instance.get_customers()
        ax.scatter([coords[c][0] for c in customers], [coords[c][1] for c in customers],
                   s=config.customer_marker_size, c="black", alpha=0.6, label="Customers")

        depot_x, depot_y = coords[instance.depot]
        ax.scatter([depot_x], [depot_y], c="red", s=config.depot_marker_size,
                   marker="s", label="Depot")

        drawn = 0
        for route in routes:
            if len(route) <= 2:
                continue
            color = ROUTE_COLORS[drawn % len(ROUTE_COLORS)]
            ax.plot([coords[node][0] for node in route], [coords[node][1] for node in route],
                    color=color, linewidth=1.2)
            drawn += 1

        title = f"{instance.name} | Routes = {drawn}"
        if cost is not None:
            title += f" | Total cost = {cost:.2f}"
        ax.set_title(title)
        ax.set_aspect("equal", adjustable="datalim")
        ax.grid(True, alpha=0.3)
        ax.legend(loc="upper right")

        directory = os.path.dirname(output_path)
        if directory:
            os.makedirs(directory, exist_ok=True)
        fig.savefig(output_path, bbox_inches='tight', facecolor='white', edgecolor='none')
    finally:
        plt.close(fig)

    logger.info(f"Saved solution plot to {output_path}")
    return output_path
