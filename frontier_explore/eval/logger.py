import csv
import time
from pathlib import Path
from typing import List, Sequence

from frontier_explore.explore.frontiers import Frontier


class CsvLogger:
    """One row per frontier search: pose, how many frontiers, and the best one."""

    FIELDNAMES = [
        "t",
        "pose_x",
        "pose_y",
        "pose_theta",
        "num_frontiers",
        "goal_x",
        "goal_y",
        "best_cost",
        "best_size",
        "profile",
    ]

    def __init__(self, path: str):
        self.path = Path(path)
        self.path.parent.mkdir(parents=True, exist_ok=True)

        self.f = self.path.open("w", newline="")

        self.w = csv.DictWriter(self.f, fieldnames=self.FIELDNAMES)
        self.w.writeheader()

    def log(self, **kwargs):
        row = {"t": time.time(), **kwargs}
        self.w.writerow(row)

    def log_search(self, pose: Sequence[float], frontiers: List[Frontier], profile: str = ""):
        x, y, theta = pose
        best = frontiers[0] if frontiers else None
        self.log(
            pose_x=x,
            pose_y=y,
            pose_theta=theta,
            num_frontiers=len(frontiers),
            goal_x=best.goal[0] if best else None,
            goal_y=best.goal[1] if best else None,
            best_cost=best.cost if best else None,
            best_size=best.size if best else None,
            profile=profile,
        )

    def close(self):
        self.f.close()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()
