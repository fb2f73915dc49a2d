"""
Metrics tracker for KPIs.

Purpose: Track and compute KPIs for a maze solve.

Inputs:
    - Solve time
    - SearchResult (explored count, solution length)
    - Open-cell count of the maze

Outputs:
    - Finalized metrics dictionary with all KPIs

Params:
    open_cells: int - Number of open cells, for the coverage metric
"""

from typing import Dict, Optional


class MetricsTracker:
    """Metrics tracker for KPIs."""

    def __init__(self, open_cells: Optional[int] = None):
        """
        Initialize metrics tracker.

        Args:
            open_cells: Open cells in the maze, for coverage = explored / open
        """
        self.open_cells = open_cells

        # Tracked metrics
        self.path_length = 0
        self.num_explored = 0
        self.total_solve_time = 0.0
        self.solve_calls = 0
        self.solved = False

    def record_solve_time(self, solve_time_ms: float):
        """Record solve time."""
        self.total_solve_time += solve_time_ms
        self.solve_calls += 1

    def record_result(self, result):
        """Record the outcome of a solve."""
        self.num_explored = result.num_explored
        self.solved = result.solved
        self.path_length = len(result.solution) if result.solution else 0

    def get_current_metrics(self) -> Dict:
        """Get current metrics."""
        return {
            "path_length": self.path_length,
            "explored": self.num_explored,
            "solve_time_ms": self.total_solve_time / max(1, self.solve_calls),
            "solved": self.solved
        }

    def finalize(self) -> Dict:
        """
        Finalize metrics and compute coverage.

        Returns:
            Dictionary with all KPIs
        """
        if self.open_cells:
            coverage = self.num_explored / self.open_cells
        else:
            coverage = 0.0

        return {
            "solved": 1 if self.solved else 0,
            "path_len": self.path_length,
            "explored": self.num_explored,
            "open_cells": self.open_cells or 0,
            "coverage": coverage,
            "cpu_ms": self.total_solve_time / max(1, self.solve_calls)
        }

    def reset(self):
        """Reset metrics tracker."""
        self.path_length = 0
        self.num_explored = 0
        self.total_solve_time = 0.0
        self.solve_calls = 0
        self.solved = False
