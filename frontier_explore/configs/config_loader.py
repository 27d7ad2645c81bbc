import yaml
import os
from pathlib import Path
from typing import Optional

from frontier_explore.explore.frontiers import FrontierSearchConfig

DEFAULT_CONFIG_PATH = Path(__file__).parent / "frontier_search.yaml"


def load_search_config(profile: Optional[str] = None, path: Optional[str] = None) -> FrontierSearchConfig:
    """
    Loads FrontierSearchConfig from frontier_search.yaml (or `path`).
    If profile is provided, tries to load that specific config.
    Otherwise, checks FRONTIER_PROFILE env var, or falls back to 'default'.
    """
    config_path = Path(path) if path else DEFAULT_CONFIG_PATH

    with open(config_path, "r") as f:
        config = yaml.safe_load(f) or {}

    # 1. Try argument
    target_config = profile

    # 2. Try env var
    if not target_config:
        target_config = os.environ.get("FRONTIER_PROFILE")

    # 3. Fallback to default
    if not target_config or target_config not in config:
        target_config = "default"

    c = config.get(target_config) or {}
    defaults = FrontierSearchConfig()

    return FrontierSearchConfig(
        potential_scale=float(c.get("potential_scale", defaults.potential_scale)),
        gain_scale=float(c.get("gain_scale", defaults.gain_scale)),
        orientation_scale=float(c.get("orientation_scale", defaults.orientation_scale)),
        min_frontier_size=float(c.get("min_frontier_size", defaults.min_frontier_size)),
        max_frontier_size=float(c.get("max_frontier_size", defaults.max_frontier_size)),
        nearest_cell_radius=int(c.get("nearest_cell_radius", defaults.nearest_cell_radius)),
    )
