# frontier_explore/explore/neighbors.py
"""
Neighbourhood helpers over the flat cell index of a Costmap2D.

Enumeration order is fixed (left, right, up, down, then the four diagonals
top-left, bottom-left, top-right, bottom-right) so that repeated searches on
the same map visit cells in the same order.
"""

import logging
from collections import deque
from typing import List, Optional

import numpy as np

from frontier_explore.mapping.costmap import Costmap2D

logger = logging.getLogger(__name__)


def nhood4(idx: int, costmap: Costmap2D) -> List[int]:
    """Return the in-bounds 4-connected neighbours of `idx`."""
    size_x = costmap.size_x
    size_y = costmap.size_y
    out: List[int] = []

    if idx < 0 or idx >= size_x * size_y:
        logger.error("Evaluating nhood for offmap point %d", idx)
        return out

    if idx % size_x > 0:
        out.append(idx - 1)
    if idx % size_x < size_x - 1:
        out.append(idx + 1)
    if idx >= size_x:
        out.append(idx - size_x)
    if idx < size_x * (size_y - 1):
        out.append(idx + size_x)
    return out


def nhood8(idx: int, costmap: Costmap2D) -> List[int]:
    """Return the in-bounds 8-connected neighbours of `idx` (4-connected first)."""
    size_x = costmap.size_x
    size_y = costmap.size_y
    if idx < 0 or idx >= size_x * size_y:
        logger.error("Evaluating nhood for offmap point %d", idx)
        return []

    out = nhood4(idx, costmap)
    has_left = idx % size_x > 0
    has_right = idx % size_x < size_x - 1
    has_up = idx >= size_x
    has_down = idx < size_x * (size_y - 1)

    if has_left and has_up:
        out.append(idx - 1 - size_x)
    if has_left and has_down:
        out.append(idx - 1 + size_x)
    if has_right and has_up:
        out.append(idx + 1 - size_x)
    if has_right and has_down:
        out.append(idx + 1 + size_x)
    return out


def nearest_cell(
    start: int,
    value: int,
    costmap: Costmap2D,
    max_radius: int = 0,
) -> Optional[int]:
    """
    Breadth-first search (4-connected) from `start` for the closest cell whose
    cost equals `value`.

    Args:
        start: flat index to search from.
        value: cost value to match, e.g. FREE_SPACE.
        costmap: grid to search.
        max_radius: stop expanding beyond this many BFS steps from `start`.
                    <= 0 searches the whole connected grid.

    Returns:
        The matching index, or None if nothing matches within reach.
    """
    size = costmap.size_x * costmap.size_y
    if start < 0 or start >= size:
        return None

    char_map = costmap.char_map
    visited = np.zeros(size, dtype=bool)
    queue = deque([(start, 0)])
    visited[start] = True

    while queue:
        idx, depth = queue.popleft()
        if char_map[idx] == value:
            return idx

        if max_radius > 0 and depth >= max_radius:
            continue

        for nbr in nhood4(idx, costmap):
            if not visited[nbr]:
                visited[nbr] = True
                queue.append((nbr, depth + 1))

    return None
