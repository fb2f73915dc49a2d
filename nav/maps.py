"""
Map utilities for navigation.

Purpose: 4-connected neighbor generation on the maze grid, move table,
         optional seeded shuffling of neighbor order.

Inputs:
    - MazeWorld with wall grid
    - Grid coordinates

Outputs:
    - Valid (action, coordinate) moves in up, left, right, down order

Params:
    world: MazeWorld - Grid to expand on
    shuffle: bool - Shuffle valid neighbors before returning them
    seed: int - Seed for the shuffle generator
"""

import numpy as np
from typing import List, Optional, Tuple

from sim.world import Coordinate, InvalidGrid


# Generation order sets the exploration bias; keep it fixed.
MOVES: Tuple[Tuple[str, Tuple[int, int]], ...] = (
    ("up", (-1, 0)),
    ("left", (0, -1)),
    ("right", (0, 1)),
    ("down", (1, 0)),
)
ACTION_OFFSETS = dict(MOVES)


def apply_action(coord, action: str) -> Coordinate:
    """Coordinate reached by taking action from coord."""
    dr, dc = ACTION_OFFSETS[action]
    return Coordinate(coord[0] + dr, coord[1] + dc)


class MapUtils:
    """Map utility functions."""

    def __init__(self, world, shuffle: bool = False, seed: Optional[int] = None):
        """
        Initialize map utilities.

        Args:
            world: MazeWorld object
            shuffle: Randomize the order of valid neighbors
            seed: Seed for the shuffle; None draws fresh entropy
        """
        self.world = world
        self.shuffle = shuffle
        self.seed = seed
        self.rng = np.random.default_rng(seed)

    def reseed(self):
        """Restart the shuffle sequence from the configured seed."""
        self.rng = np.random.default_rng(self.seed)

    def get_neighbors(self, coord) -> List[Tuple[str, Coordinate]]:
        """
        Get 4-connected neighbors of a grid cell.

        Args:
            coord: (row, col) grid coordinate

        Returns:
            List of (action, Coordinate) for in-bounds open cells

        Raises:
            InvalidGrid: World has no cells
        """
        if self.world.height == 0 or self.world.width == 0:
            raise InvalidGrid("cannot expand neighbors on an empty grid")

        row, col = coord
        neighbors = []
        for action, (dr, dc) in MOVES:
            candidate = Coordinate(row + dr, col + dc)
            if self.world.is_free(candidate):
                neighbors.append((action, candidate))

        if self.shuffle and len(neighbors) > 1:
            order = self.rng.permutation(len(neighbors))
            neighbors = [neighbors[i] for i in order]

        return neighbors
