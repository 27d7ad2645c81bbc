from __future__ import annotations

import math
import threading
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple

import numpy as np


# Costmap cell values. Anything strictly between FREE_SPACE and
# NO_INFORMATION is a graded traversal cost.
FREE_SPACE = 0
INSCRIBED_INFLATED_OBSTACLE = 253
LETHAL_OBSTACLE = 254
NO_INFORMATION = 255


class CellState(Enum):
    FREE = "free"
    OCCUPIED = "occupied"
    UNKNOWN = "unknown"


@dataclass
class GridSpec:

    # Geometry of the costmap.
    # Cells are indexed (mx, my) with mx along x (columns) and my along y (rows).
    # Origin is the world-frame coordinate of the lower-left corner of cell (0, 0).

    resolution: float  # meters per cell
    width: int
    height: int
    origin_x: float = 0.0
    origin_y: float = 0.0


def _occupancy_translation_table() -> np.ndarray:
    """
    Lookup table from occupancy values (-1 unknown, 0..100 probability) to costs.
    Index with value + 1 so that -1 lands on entry 0.
    """
    table = np.zeros(102, dtype=np.uint8)
    table[0] = NO_INFORMATION          # -1
    table[1] = FREE_SPACE              # 0
    for value in range(1, 99):
        table[value + 1] = 1 + (251 * (value - 1)) // 97
    table[100] = INSCRIBED_INFLATED_OBSTACLE  # 99
    table[101] = LETHAL_OBSTACLE              # 100
    return table


OCCUPANCY_TO_COST = _occupancy_translation_table()


class Costmap2D:

    # Read-mostly 2D cost grid with a flat index scheme and grid <-> world transforms.
    # The mapping side writes through set_cost() while holding `mutex`;
    # frontier search holds the same lock for the duration of one call.

    def __init__(self, spec: GridSpec, costs: Optional[np.ndarray] = None) -> None:
        self.spec = spec
        if costs is None:
            costs = np.full((spec.height, spec.width), NO_INFORMATION, dtype=np.uint8)
        costs = np.asarray(costs)
        if costs.shape != (spec.height, spec.width):
            raise ValueError(
                f"cost array shape {costs.shape} does not match grid "
                f"({spec.height}, {spec.width})"
            )
        self.costs = np.ascontiguousarray(costs, dtype=np.uint8)
        self.mutex = threading.RLock()

    # --- constructors ---

    @classmethod
    def from_trinary(
        cls,
        grid: np.ndarray,
        spec: GridSpec,
        unknown_val: int = -1,
        free_val: int = 0,
    ) -> "Costmap2D":
        """
        Build a costmap from a {-1: unknown, 0: free, 1: occupied} grid.
        Any value that is neither unknown nor free is treated as lethal.
        """
        grid = np.asarray(grid)
        costs = np.full(grid.shape, LETHAL_OBSTACLE, dtype=np.uint8)
        costs[grid == unknown_val] = NO_INFORMATION
        costs[grid == free_val] = FREE_SPACE
        return cls(spec, costs)

    @classmethod
    def from_occupancy_values(cls, values: np.ndarray, spec: GridSpec) -> "Costmap2D":
        """
        Build a costmap from occupancy values (-1 unknown, 0..100 percent occupied),
        as published by most SLAM packages. Accepts a flat row-major array or a 2D one.
        """
        values = np.asarray(values, dtype=np.int16).reshape(spec.height, spec.width)
        if values.size and (values.min() < -1 or values.max() > 100):
            raise ValueError("occupancy values must lie in [-1, 100]")
        return cls(spec, OCCUPANCY_TO_COST[values + 1])

    @classmethod
    def from_log_odds(
        cls,
        log_odds: np.ndarray,
        spec: GridSpec,
        occ_thresh: float = 0.85,
        free_thresh: float = -0.4,
    ) -> "Costmap2D":
        # Cells between the two thresholds stay unknown.
        log_odds = np.asarray(log_odds)
        costs = np.full(log_odds.shape, NO_INFORMATION, dtype=np.uint8)
        costs[log_odds > occ_thresh] = LETHAL_OBSTACLE
        costs[log_odds < free_thresh] = FREE_SPACE
        return cls(spec, costs)

    # --- geometry ---

    @property
    def size_x(self) -> int:
        return self.spec.width

    @property
    def size_y(self) -> int:
        return self.spec.height

    @property
    def resolution(self) -> float:
        return self.spec.resolution

    @property
    def char_map(self) -> np.ndarray:
        """Flat view of the costs, indexed by get_index()."""
        return self.costs.reshape(-1)

    def in_bounds(self, mx: int, my: int) -> bool:
        return 0 <= mx < self.size_x and 0 <= my < self.size_y

    def get_index(self, mx: int, my: int) -> int:
        return my * self.size_x + mx

    def index_to_cells(self, idx: int) -> Tuple[int, int]:
        my, mx = divmod(idx, self.size_x)
        return mx, my

    def map_to_world(self, mx: int, my: int) -> Tuple[float, float]:

        # Returns center of cell (mx, my) in world coordinates

        x = self.spec.origin_x + (mx + 0.5) * self.spec.resolution
        y = self.spec.origin_y + (my + 0.5) * self.spec.resolution
        return x, y

    def world_to_map(self, x: float, y: float) -> Optional[Tuple[int, int]]:
        """
        Converts world coordinates (meters) to cell indices (mx, my).
        Returns None if the point falls outside the grid or is not finite.
        """
        if not (math.isfinite(x) and math.isfinite(y)):
            return None
        if x < self.spec.origin_x or y < self.spec.origin_y:
            return None
        mx = int((x - self.spec.origin_x) / self.spec.resolution)
        my = int((y - self.spec.origin_y) / self.spec.resolution)
        if not self.in_bounds(mx, my):
            return None
        return mx, my

    def index_to_world(self, idx: int) -> Tuple[float, float]:
        return self.map_to_world(*self.index_to_cells(idx))

    # --- cell access ---

    def get_cost(self, idx: int) -> int:
        return int(self.char_map[idx])

    def classify(self, idx: int) -> CellState:
        value = self.char_map[idx]
        if value == FREE_SPACE:
            return CellState.FREE
        if value == NO_INFORMATION:
            return CellState.UNKNOWN
        return CellState.OCCUPIED

    def set_cost(self, mx: int, my: int, value: int) -> None:
        if not self.in_bounds(mx, my):
            return
        with self.mutex:
            self.costs[my, mx] = value
