# frontier_explore/scripts/mock_frontier_demo.py
"""
Run one frontier search on a synthetic room map and print the ranked result.

    python -m frontier_explore.scripts.mock_frontier_demo --profile indoor --plot frontiers.png
"""
import argparse
import logging
from typing import List, Optional

import numpy as np

from frontier_explore.configs.config_loader import load_search_config
from frontier_explore.eval.logger import CsvLogger
from frontier_explore.explore.frontiers import FrontierSearch, Frontier
from frontier_explore.explore.utils import ij_to_xy
from frontier_explore.mapping.costmap import Costmap2D, GridSpec
from frontier_explore.mapping.visualize import plot_frontiers

UNKNOWN, FREE, OCCUPIED = -1, 0, 1


def build_mock_map(resolution: float = 0.05) -> Costmap2D:
    # build a simple synthetic map
    g = np.full((30, 30), UNKNOWN, dtype=int)
    g[5:25, 5:25] = FREE
    g[10:12, 10:20] = OCCUPIED  # obstacle band
    g[5:25, 24] = OCCUPIED      # east wall, leaves three open sides
    spec = GridSpec(resolution=resolution, width=30, height=30)
    return Costmap2D.from_trinary(g, spec)


def format_frontier(rank: int, f: Frontier) -> str:
    return (
        f"#{rank} cost={f.cost:.3f} size={f.size} "
        f"goal=({f.goal[0]:.2f},{f.goal[1]:.2f}) "
        f"dist={f.min_distance:.2f}m turn={np.degrees(f.angular_distance):.0f}deg"
    )


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(description=__doc__.strip().splitlines()[0])
    parser.add_argument("--profile", default=None, help="config profile (default: $FRONTIER_PROFILE or 'default')")
    parser.add_argument("--config", default=None, help="path to a frontier_search.yaml")
    parser.add_argument("--theta", type=float, default=0.0, help="robot heading [rad]")
    parser.add_argument("--plot", default=None, help="save a PNG of the map and frontiers")
    parser.add_argument("--csv", default=None, help="write the search result to a CSV log")
    parser.add_argument("-v", "--verbose", action="store_true")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="[%(levelname)s] %(name)s: %(message)s",
    )

    config = load_search_config(args.profile, args.config)
    costmap = build_mock_map()
    search = FrontierSearch.from_config(costmap, config)

    x, y = ij_to_xy(15, 15, (costmap.spec.origin_x, costmap.spec.origin_y), costmap.resolution)
    pose = (x, y, args.theta)

    frontiers = search.search_from(pose)

    print(f"pose=({x:.2f},{y:.2f},{args.theta:.2f})  frontiers: {len(frontiers)}")
    for rank, f in enumerate(frontiers):
        print("  " + format_frontier(rank, f))

    if args.csv:
        with CsvLogger(args.csv) as csv_logger:
            csv_logger.log_search(pose, frontiers, profile=args.profile or "")

    if args.plot:
        plot_frontiers(costmap, frontiers, pose=pose, output_path=args.plot)

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
