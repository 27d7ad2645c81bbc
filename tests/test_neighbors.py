import logging

import numpy as np

from frontier_explore.explore.neighbors import nhood4, nhood8, nearest_cell
from frontier_explore.mapping.costmap import (
    Costmap2D, GridSpec, FREE_SPACE, LETHAL_OBSTACLE, NO_INFORMATION,
)


def blank(width, height, value=FREE_SPACE):
    spec = GridSpec(resolution=1.0, width=width, height=height)
    return Costmap2D(spec, np.full((height, width), value, dtype=np.uint8))


def test_nhood_interior_order():
    c = blank(3, 3)
    # left, right, up, down
    assert nhood4(4, c) == [3, 5, 1, 7]
    # then top-left, bottom-left, top-right, bottom-right
    assert nhood8(4, c) == [3, 5, 1, 7, 0, 6, 2, 8]


def test_nhood_corners_and_edges():
    c = blank(3, 3)
    assert nhood4(0, c) == [1, 3]
    assert nhood8(0, c) == [1, 3, 4]
    assert nhood4(8, c) == [7, 5]
    assert nhood8(8, c) == [7, 5, 4]
    assert sorted(nhood8(1, c)) == [0, 2, 3, 4, 5]


def test_nhood_single_cell_grid():
    c = blank(1, 1)
    assert nhood4(0, c) == []
    assert nhood8(0, c) == []


def test_nhood_offmap_index(caplog):
    c = blank(3, 3)
    with caplog.at_level(logging.ERROR):
        assert nhood4(9, c) == []
        assert nhood8(-1, c) == []
    assert len(caplog.records) == 2


def test_nearest_cell_start_matches():
    c = blank(4, 4)
    assert nearest_cell(5, FREE_SPACE, c) == 5


def test_nearest_cell_finds_closest():
    c = blank(5, 5, LETHAL_OBSTACLE)
    c.set_cost(4, 4, FREE_SPACE)
    c.set_cost(2, 0, FREE_SPACE)

    assert nearest_cell(0, FREE_SPACE, c) == c.get_index(2, 0)


def test_nearest_cell_radius():
    c = blank(5, 5, LETHAL_OBSTACLE)
    c.set_cost(4, 4, FREE_SPACE)

    # eight 4-connected steps from the corner
    assert nearest_cell(0, FREE_SPACE, c, max_radius=7) is None
    assert nearest_cell(0, FREE_SPACE, c, max_radius=8) == 24
    assert nearest_cell(0, FREE_SPACE, c) == 24


def test_nearest_cell_no_match():
    c = blank(3, 3, NO_INFORMATION)
    assert nearest_cell(4, FREE_SPACE, c) is None
    assert nearest_cell(42, NO_INFORMATION, c) is None
