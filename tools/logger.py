"""
CSV logger for KPI logging.

Purpose: Log KPIs per solve to CSV files.

Inputs:
    - Maze name
    - Planner type
    - KPI metrics

Outputs:
    - CSV file in the log directory with all schema fields

Params:
    maze: str - Maze name
    planner: str - Planner type
    log_dir: str - Output directory (default: data/logs)
"""

import csv
import os
from datetime import datetime
from pathlib import Path


class KPILogger:
    """CSV logger for KPIs."""

    def __init__(self, maze: str, planner: str, log_dir="data/logs"):
        """
        Initialize KPI logger.

        Args:
            maze: Maze name (file stem)
            planner: Planner type (dfs)
            log_dir: Directory for CSV files
        """
        self.maze = maze
        self.planner = planner
        self.log_dir = Path(log_dir)

        # CSV schema
        self.csv_schema = [
            "maze",
            "planner",
            "solved",
            "path_len",
            "explored",
            "open_cells",
            "coverage",
            "cpu_ms",
            "shuffle",
            "seed"
        ]

    def log(self, **metrics) -> Path:
        """
        Log metrics to CSV.

        Args:
            **metrics: Dictionary with KPI values

        Returns:
            Path of the CSV file written
        """
        os.makedirs(self.log_dir, exist_ok=True)

        timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
        filename = self.log_dir / f"{self.maze}_{self.planner}_{timestamp}.csv"

        seed = metrics.get("seed")
        row = {
            "maze": self.maze,
            "planner": self.planner,
            "solved": metrics.get("solved", 0),
            "path_len": metrics.get("path_len", 0),
            "explored": metrics.get("explored", 0),
            "open_cells": metrics.get("open_cells", 0),
            "coverage": metrics.get("coverage", 0.0),
            "cpu_ms": metrics.get("cpu_ms", 0.0),
            "shuffle": 1 if metrics.get("shuffle") else 0,
            "seed": "" if seed is None else seed
        }

        # Header only for new files
        file_exists = filename.exists()

        with open(filename, 'a', newline='') as f:
            writer = csv.DictWriter(f, fieldnames=self.csv_schema)

            if not file_exists:
                writer.writeheader()

            writer.writerow(row)

        print(f"Logs saved to {filename}")
        return filename
