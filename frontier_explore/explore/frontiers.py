# frontier_explore/explore/frontiers.py
"""
Frontier detection on a Costmap2D.

A frontier cell is an UNKNOWN cell with at least one FREE 4-neighbour.
FrontierSearch.search_from() flood-fills the map from the robot and grows
every frontier cell it touches into a connected (8-neighbour) region, then
ranks the regions by cost:

    cost = orientation_scale * angular_distance
         + potential_scale * min_distance * resolution
         - gain_scale * size * resolution

Lower cost is better: near, large, and in front of the robot.
"""

import logging
import math
from collections import deque
from dataclasses import dataclass, field
from typing import List, Optional, Sequence, Tuple

import numpy as np

from frontier_explore.mapping.costmap import Costmap2D, CellState, FREE_SPACE
from .neighbors import nhood4, nhood8, nearest_cell
from .utils import angle_shortest_path

logger = logging.getLogger(__name__)

Point = Tuple[float, float]


@dataclass
class Frontier:
    """
    A connected region of frontier cells.

    `points` holds every member except the seed cell, in discovery order,
    so size == len(points) + 1. `middle` is the member closest to the robot
    and is what the cost uses; `centroid` is the mean of all members.
    """
    initial: Point                 # world coords of the seed cell
    size: int = 1
    min_distance: float = math.inf
    points: List[Point] = field(default_factory=list)
    middle: Optional[Point] = None
    centroid: Optional[Point] = None
    orientation: float = 0.0       # heading from robot to middle [rad]
    angular_distance: float = 0.0  # |robot heading - orientation| [rad]
    cost: Optional[float] = None

    @property
    def goal(self) -> Optional[Point]:
        return self.middle


@dataclass
class FrontierSearchConfig:
    potential_scale: float = 3.0     # weight on distance
    gain_scale: float = 1.0          # weight on size
    orientation_scale: float = 0.0   # weight on turning
    min_frontier_size: float = 0.75  # meters
    max_frontier_size: float = 0.0   # meters, <= 0 for unbounded
    nearest_cell_radius: int = 0     # cells, <= 0 for unbounded


class FrontierSearch:

    # Stateless between calls: every search_from() allocates its own flag
    # arrays and returns freshly built Frontier objects.

    def __init__(
        self,
        costmap: Costmap2D,
        potential_scale: float = 3.0,
        gain_scale: float = 1.0,
        orientation_scale: float = 0.0,
        min_frontier_size: float = 0.75,
        max_frontier_size: float = 0.0,
        nearest_cell_radius: int = 0,
    ):
        self.costmap = costmap
        self.potential_scale = potential_scale
        self.gain_scale = gain_scale
        self.orientation_scale = orientation_scale
        self.min_frontier_size = min_frontier_size
        self.max_frontier_size = max_frontier_size
        self.nearest_cell_radius = nearest_cell_radius

    @classmethod
    def from_config(cls, costmap: Costmap2D, config: FrontierSearchConfig) -> "FrontierSearch":
        return cls(
            costmap,
            potential_scale=config.potential_scale,
            gain_scale=config.gain_scale,
            orientation_scale=config.orientation_scale,
            min_frontier_size=config.min_frontier_size,
            max_frontier_size=config.max_frontier_size,
            nearest_cell_radius=config.nearest_cell_radius,
        )

    def search_from(self, pose: Sequence[float]) -> List[Frontier]:
        """
        Find and rank all frontiers reachable from the robot.

        Args:
            pose: (x, y, theta) in world coordinates (meters, radians).

        Returns:
            Frontiers sorted by ascending cost. Empty if the robot is off the map
            or no frontier passes min_frontier_size.
        """
        if len(pose) != 3:
            raise ValueError(f"pose must be (x, y, theta), got {pose!r}")
        x, y, _ = pose

        frontier_list: List[Frontier] = []

        # make sure map is consistent and locked for duration of search
        with self.costmap.mutex:
            cell = self.costmap.world_to_map(x, y)
            if cell is None:
                logger.error("Robot out of costmap bounds, cannot search for frontiers")
                return frontier_list

            char_map = self.costmap.char_map
            resolution = self.costmap.resolution
            n_cells = self.costmap.size_x * self.costmap.size_y

            frontier_flag = np.zeros(n_cells, dtype=bool)
            visited_flag = np.zeros(n_cells, dtype=bool)

            # find closest clear cell to start search
            pos = self.costmap.get_index(*cell)
            start = nearest_cell(pos, FREE_SPACE, self.costmap, self.nearest_cell_radius)
            if start is None:
                logger.warning("Could not find nearby clear cell to start search")
                start = pos

            bfs = deque([start])
            visited_flag[start] = True

            while bfs:
                idx = bfs.popleft()

                for nbr in nhood4(idx, self.costmap):
                    # descending search in case we started on a non-free cell
                    if char_map[nbr] <= char_map[idx] and not visited_flag[nbr]:
                        visited_flag[nbr] = True
                        bfs.append(nbr)
                    elif self.is_new_frontier_cell(nbr, frontier_flag):
                        frontier_flag[nbr] = True
                        new_frontier = self.build_new_frontier(nbr, pose, frontier_flag)
                        if new_frontier.size * resolution >= self.min_frontier_size:
                            new_frontier.cost = self.frontier_cost(new_frontier)
                            frontier_list.append(new_frontier)

        # list.sort is stable, ties keep discovery order
        frontier_list.sort(key=lambda f: f.cost)
        logger.debug("Found %d frontiers from cell %s", len(frontier_list), cell)
        return frontier_list

    def build_new_frontier(
        self,
        initial_cell: int,
        reference_pose: Sequence[float],
        frontier_flag: np.ndarray,
    ) -> Frontier:
        """
        Grow one frontier from `initial_cell` with an 8-connected BFS.

        `frontier_flag` is shared with the calling search and updated in place,
        so a cell is never claimed by two frontiers.
        """
        rx, ry, rtheta = reference_pose
        resolution = self.costmap.resolution

        output = Frontier(initial=self.costmap.index_to_world(initial_cell))
        sum_x, sum_y = output.initial

        # the seed is counted in size but not stored in points
        self._update_closest(output, output.initial, rx, ry)

        bfs = deque([initial_cell])
        frontier_completed = False
        while bfs and not frontier_completed:
            idx = bfs.popleft()

            for nbr in nhood8(idx, self.costmap):
                if not self.is_new_frontier_cell(nbr, frontier_flag):
                    continue

                frontier_flag[nbr] = True
                point = self.costmap.index_to_world(nbr)
                output.points.append(point)
                output.size += 1
                sum_x += point[0]
                sum_y += point[1]
                self._update_closest(output, point, rx, ry)

                if self.max_frontier_size > 0.0 and output.size * resolution >= self.max_frontier_size:
                    frontier_completed = True
                    break

                bfs.append(nbr)

        output.centroid = (sum_x / output.size, sum_y / output.size)

        # heading from the robot towards the closest point
        mx, my = output.middle
        output.orientation = math.atan2(my - ry, mx - rx)
        output.angular_distance = angle_shortest_path(rtheta, output.orientation)

        return output

    @staticmethod
    def _update_closest(frontier: Frontier, point: Point, rx: float, ry: float) -> None:
        distance = math.hypot(rx - point[0], ry - point[1])
        if distance < frontier.min_distance:
            frontier.min_distance = distance
            frontier.middle = point

    def is_new_frontier_cell(self, idx: int, frontier_flag: np.ndarray) -> bool:
        # check that cell is unknown and not already marked as frontier
        if frontier_flag[idx] or self.costmap.classify(idx) != CellState.UNKNOWN:
            return False

        # frontier cells should have at least one free 4-connected neighbour
        for nbr in nhood4(idx, self.costmap):
            if self.costmap.classify(nbr) == CellState.FREE:
                return True

        return False

    def frontier_cost(self, frontier: Frontier) -> float:
        resolution = self.costmap.resolution
        position = self.potential_scale * frontier.min_distance * resolution
        gain = self.gain_scale * frontier.size * resolution
        orientation = self.orientation_scale * frontier.angular_distance
        return orientation + position - gain
