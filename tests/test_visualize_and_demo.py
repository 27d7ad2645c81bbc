import matplotlib
matplotlib.use("Agg")

import numpy as np

from frontier_explore.explore.frontiers import FrontierSearch
from frontier_explore.mapping.costmap import Costmap2D, GridSpec
from frontier_explore.mapping.visualize import costmap_image, plot_frontiers
from frontier_explore.scripts.mock_frontier_demo import build_mock_map, main


def test_costmap_image_levels():
    costs = np.array([[0, 255, 254, 127]], dtype=np.uint8)
    c = Costmap2D(GridSpec(resolution=1.0, width=4, height=1), costs)
    img = costmap_image(c)
    assert img[0, 0] == 0.0
    assert img[0, 1] == 0.5
    assert img[0, 2] == 1.0
    assert 0.0 < img[0, 3] < 1.0


def test_plot_frontiers_writes_png(tmp_path):
    costmap = build_mock_map()
    pose = (0.775, 0.775, 0.0)
    frontiers = FrontierSearch(costmap, min_frontier_size=0.1).search_from(pose)
    assert frontiers

    out = tmp_path / "plots" / "frontiers.png"
    plot_frontiers(costmap, frontiers, pose=pose, output_path=str(out))
    assert out.exists() and out.stat().st_size > 0


def test_demo_main(tmp_path, capsys, monkeypatch):
    monkeypatch.delenv("FRONTIER_PROFILE", raising=False)
    csv_path = tmp_path / "demo.csv"
    png_path = tmp_path / "demo.png"

    assert main(["--csv", str(csv_path), "--plot", str(png_path)]) == 0

    out = capsys.readouterr().out
    assert "frontiers:" in out
    assert "#0 cost=" in out
    assert csv_path.exists()
    assert png_path.exists()
