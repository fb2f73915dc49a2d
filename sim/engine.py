"""
Maze solving session.

Purpose: Load configuration and maze, run the planner, report the result,
         record metrics and write the KPI log.

Inputs:
    - Maze file path
    - Planner type (dfs)
    - Config preset (default, verbose, random)
    - Optional overrides for preset values

Outputs:
    - Printed maze and solution summary
    - Logged KPIs to CSV
    - Optional maze image

Params:
    maze_file: str - Maze text file
    planner: str - Planner type
    config_preset: str - Configuration preset name
"""

import copy
import time
import yaml
from pathlib import Path
from typing import Dict, Optional

from sim.world import MazeWorld
from nav.dfs import DFSPlanner
from tools.logger import KPILogger
from tools.metrics import MetricsTracker
from tools.render import render_text


CONFIG_DIR = Path(__file__).resolve().parent.parent / "config"

PLANNERS = {
    "dfs": DFSPlanner,
}

SEARCH_NAMES = {
    "dfs": "Depth First Search",
}


def load_config(config_preset: str = "default", config_dir=None) -> Dict:
    """
    Load a configuration preset.

    Args:
        config_preset: Preset name, file config/<name>.yaml
        config_dir: Directory holding presets (default: repo config/)

    Returns:
        Config dictionary
    """
    config_path = Path(config_dir or CONFIG_DIR) / f"{config_preset}.yaml"
    if not config_path.exists():
        raise FileNotFoundError(f"config preset not found: {config_path}")
    with open(config_path, 'r') as f:
        return yaml.safe_load(f) or {}


def merge_overrides(config: Dict, overrides: Optional[Dict]) -> Dict:
    """Apply {section: {key: value}} overrides; None values are ignored."""
    merged = copy.deepcopy(config)
    for section, values in (overrides or {}).items():
        for key, value in values.items():
            if value is not None:
                merged.setdefault(section, {})[key] = value
    return merged


class MazeSession:
    """Single maze solve with reporting."""

    def __init__(self, maze_file, planner: Optional[str] = None, config_preset: str = "default",
                 overrides: Optional[Dict] = None, config_dir=None):
        """
        Initialize session.

        Args:
            maze_file: Maze text file
            planner: Planner type ('dfs'); None uses search.algorithm
            config_preset: Config preset ('default', 'verbose', 'random')
            overrides: {section: {key: value}} applied over the preset
            config_dir: Directory holding presets
        """
        self.config_preset = config_preset
        self.config = merge_overrides(load_config(config_preset, config_dir), overrides)

        search_cfg = self.config.get('search', {})
        self.planner_type = planner or search_cfg.get('algorithm', 'dfs')
        if self.planner_type not in PLANNERS:
            raise ValueError(f"Unknown search type: {self.planner_type}")

        self.shuffle = bool(search_cfg.get('shuffle', False))
        self.seed = search_cfg.get('seed')
        self.verbose = bool(search_cfg.get('verbose', False))

        # Initialize world
        self.world = MazeWorld.load(maze_file)

        # Initialize planner
        self.planner = PLANNERS[self.planner_type](
            self.world,
            shuffle=self.shuffle,
            seed=self.seed,
            verbose=self.verbose,
        )

        # Initialize logging and metrics
        self.metrics = MetricsTracker(open_cells=self.world.open_cell_count())
        log_cfg = self.config.get('logging', {})
        self.logger = None
        if log_cfg.get('enabled', True):
            self.logger = KPILogger(self.world.name, self.planner_type,
                                    log_dir=log_cfg.get('log_dir', 'data/logs'))

        self.result = None

    def run(self):
        """
        Solve the maze and report.

        Returns:
            SearchResult
        """
        print("Goal is", self.world.goal)
        print(f"Starting to solve maze with {SEARCH_NAMES[self.planner_type]}")

        start_time = time.perf_counter()
        self.result = self.planner.solve()
        solve_ms = (time.perf_counter() - start_time) * 1000.0

        self.metrics.record_solve_time(solve_ms)
        self.metrics.record_result(self.result)

        render_cfg = self.config.get('render', {})
        if self.result.solved:
            print("Solution: ")
            print(render_text(self.world, self.result,
                              show_explored=bool(render_cfg.get('show_explored', False))))
            print("Solution is", len(self.result.solution), "steps.")
            print(f"Time to solve: {solve_ms:.3f} ms")
        else:
            print("No solution found")
        print("Explored", self.result.num_explored, "nodes")

        if render_cfg.get('image'):
            from tools.plots import save_maze_image
            save_maze_image(self.world, self.result, render_cfg['image'])

        if self.logger is not None:
            final_metrics = self.metrics.finalize()
            self.logger.log(shuffle=self.shuffle, seed=self.seed, **final_metrics)

        return self.result
