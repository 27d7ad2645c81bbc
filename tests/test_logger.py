import csv

from frontier_explore.eval.logger import CsvLogger
from frontier_explore.explore.frontiers import Frontier


def test_log_search_rows(tmp_path):
    path = tmp_path / "logs" / "search.csv"
    best = Frontier(initial=(1.0, 1.0), size=4, min_distance=1.5, middle=(1.5, 2.0), cost=-0.5)

    with CsvLogger(str(path)) as logger:
        logger.log_search((0.0, 0.5, 1.0), [best], profile="indoor")
        logger.log_search((0.0, 0.5, 1.0), [])

    with path.open() as f:
        rows = list(csv.DictReader(f))

    assert len(rows) == 2
    assert rows[0]["num_frontiers"] == "1"
    assert float(rows[0]["goal_x"]) == 1.5
    assert float(rows[0]["best_cost"]) == -0.5
    assert rows[0]["profile"] == "indoor"
    assert rows[1]["num_frontiers"] == "0"
    assert rows[1]["goal_x"] == ""
