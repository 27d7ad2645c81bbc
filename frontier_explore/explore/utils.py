# frontier_explore/explore/utils.py
import math
from typing import Sequence, Tuple


def ij_to_xy(i: float, j: float, origin_xy: Tuple[float, float], resolution: float) -> Tuple[float, float]:
    """
    Convert grid index (i,j) = (row, col) to world meters (x,y).
    origin_xy: world coords (x0, y0) of cell (0,0) *corner*.
    resolution: meters per cell.
    Returns the CENTER of cell (i,j), consistent with Costmap2D.map_to_world.
    """
    x0, y0 = origin_xy
    x = x0 + (j + 0.5) * resolution
    y = y0 + (i + 0.5) * resolution
    return (x, y)


def normalize_angle(theta: float) -> float:
    """Wrap an angle to [-pi, pi)."""
    return (theta + math.pi) % (2 * math.pi) - math.pi


def angle_shortest_path(a: float, b: float) -> float:
    """Absolute shortest rotation between two headings, in [0, pi]."""
    return abs(normalize_angle(b - a))


def yaw_from_quaternion(q: Sequence[float]) -> float:
    """Yaw (rotation about z) of a quaternion given as (x, y, z, w)."""
    x, y, z, w = q
    siny_cosp = 2.0 * (w * z + x * y)
    cosy_cosp = 1.0 - 2.0 * (y * y + z * z)
    return math.atan2(siny_cosp, cosy_cosp)
