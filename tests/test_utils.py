import math

from frontier_explore.explore.utils import (
    angle_shortest_path, ij_to_xy, normalize_angle, yaw_from_quaternion,
)


def test_ij_to_xy_is_cell_center():
    assert ij_to_xy(0, 0, (0.0, 0.0), 0.1) == (0.05, 0.05)
    assert ij_to_xy(2, 1, (-1.0, -1.0), 1.0) == (0.5, 1.5)


def test_normalize_angle():
    assert math.isclose(normalize_angle(3 * math.pi / 2), -math.pi / 2)
    assert math.isclose(normalize_angle(-3 * math.pi / 2), math.pi / 2)
    assert normalize_angle(0.0) == 0.0


def test_angle_shortest_path_wraps():
    assert math.isclose(angle_shortest_path(math.radians(170), math.radians(-170)), math.radians(20))
    assert math.isclose(angle_shortest_path(0.0, math.pi), math.pi)
    assert math.isclose(angle_shortest_path(0.5, -0.5), 1.0)


def test_yaw_from_quaternion():
    half = math.pi / 4
    # 90 degrees about z
    assert math.isclose(yaw_from_quaternion((0.0, 0.0, math.sin(half), math.cos(half))), math.pi / 2)
    assert yaw_from_quaternion((0.0, 0.0, 0.0, 1.0)) == 0.0
