# Visualization of a costmap and its frontiers using Matplotlib

import logging
from pathlib import Path
from typing import List, Optional, Sequence

import numpy as np
import matplotlib.pyplot as plt

from .costmap import Costmap2D, FREE_SPACE, NO_INFORMATION
from frontier_explore.explore.frontiers import Frontier

logger = logging.getLogger(__name__)


def costmap_image(costmap: Costmap2D) -> np.ndarray:
    """
    Map costs onto [0, 1] for a gray_r colormap:
    free -> 0 (white), unknown -> 0.5 (gray), lethal -> 1 (black).
    Graded costs fall in between free and lethal.
    """
    costs = costmap.costs.astype(float)
    img = costs / 254.0
    img[costmap.costs == FREE_SPACE] = 0.0
    img[costmap.costs == NO_INFORMATION] = 0.5
    return img


def plot_frontiers(
    costmap: Costmap2D,
    frontiers: List[Frontier],
    pose: Optional[Sequence[float]] = None,
    title: str = "Frontiers",
    output_path: Optional[str] = None,
    show_centroids: bool = True,
) -> None:
    """
    Draw the costmap in world coordinates with every frontier's cells,
    its middle (goal) point, and optionally its centroid.
    The best frontier (lowest cost, first in the list) is drawn in red.
    """
    img = costmap_image(costmap)
    spec = costmap.spec

    fig, ax = plt.subplots(figsize=(8, 8))

    # origin='lower' places cell (0,0) at bottom-left
    extent = [
        spec.origin_x,
        spec.origin_x + spec.width * spec.resolution,
        spec.origin_y,
        spec.origin_y + spec.height * spec.resolution,
    ]
    ax.imshow(img, cmap='gray_r', origin='lower', extent=extent, vmin=0.0, vmax=1.0)

    for rank, f in enumerate(frontiers):
        color = 'red' if rank == 0 else 'lime'
        xs = [f.initial[0]] + [p[0] for p in f.points]
        ys = [f.initial[1]] + [p[1] for p in f.points]
        ax.scatter(xs, ys, c=color, s=4, alpha=0.8)
        if f.middle is not None:
            ax.scatter(f.middle[0], f.middle[1], c=color, s=40, marker='x', zorder=9)
        if show_centroids and f.centroid is not None:
            ax.scatter(f.centroid[0], f.centroid[1], c='blue', s=15, marker='o', zorder=9)

    if pose is not None:
        x, y, theta = pose
        ax.scatter(x, y, c='red', s=20, zorder=10, label='Robot')

        arrow_len = 5 * spec.resolution
        ax.arrow(x, y, arrow_len * np.cos(theta), arrow_len * np.sin(theta),
                 head_width=2 * spec.resolution, head_length=2 * spec.resolution,
                 fc='red', ec='red', zorder=10)

    ax.set_title(f"{title} ({len(frontiers)} frontiers)")
    ax.set_xlabel("X (m)")
    ax.set_ylabel("Y (m)")
    ax.set_aspect('equal')
    ax.grid(False)

    if output_path:
        Path(output_path).parent.mkdir(parents=True, exist_ok=True)
        plt.savefig(output_path, dpi=150, bbox_inches='tight')
        logger.info("Saved frontier plot to %s", output_path)

    plt.close(fig)
