"""
World system for maze solving.

Purpose: Load a text maze, hold the wall grid with start/goal cells,
         validate it before search, answer bounds and passability queries.

Inputs:
    - Maze text (file path, string or list of lines)

Outputs:
    - Wall grid (numpy bool array: False=open, True=wall)
    - Start and goal coordinates
    - Cell iteration and open-cell counts

Params:
    walls: numpy array - (height, width) wall mask
    start: Coordinate - Start cell
    goal: Coordinate - Goal cell
"""

import numpy as np
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, Iterator, List, NamedTuple


WALL_CHARS = {"#"}
OPEN_CHARS = {" ", "."}
START_CHARS = {"A", "S"}
GOAL_CHARS = {"B", "G"}


class InvalidGrid(ValueError):
    """Grid cannot be searched (empty, or start/goal out of bounds or walled)."""


class MazeLoadError(ValueError):
    """Maze text is malformed or the maze file cannot be read."""


class Coordinate(NamedTuple):
    """Grid cell position as (row, col)."""
    row: int
    col: int

    def __str__(self):
        return f"({self.row}, {self.col})"


@dataclass(frozen=True)
class Cell:
    """A grid cell and whether it is a wall."""
    coordinate: Coordinate
    wall: bool


class MazeWorld:
    """Rectangular maze with walls, a start cell and a goal cell."""

    def __init__(self, walls, start, goal, name: str = "maze"):
        """
        Initialize world.

        Args:
            walls: 2D array-like of bools, True where the cell is a wall
            start: (row, col) start cell
            goal: (row, col) goal cell
            name: Maze name used in reports and log file names
        """
        self.walls = np.asarray(walls, dtype=bool)
        if self.walls.ndim != 2:
            if self.walls.size:
                raise InvalidGrid(f"walls must be 2D, got shape {self.walls.shape}")
            self.walls = np.zeros((0, 0), dtype=bool)
        self.height, self.width = self.walls.shape
        self.start = Coordinate(*start)
        self.goal = Coordinate(*goal)
        self.name = name

    @classmethod
    def from_lines(cls, lines: Iterable[str], name: str = "maze") -> "MazeWorld":
        """
        Build a world from maze rows.

        Grid encoding: '#' wall, ' ' or '.' open, 'A'/'S' start, 'B'/'G' goal.
        Unknown characters are dropped from their row. Short rows are padded
        with walls.

        Args:
            lines: Maze rows, with or without trailing newlines
            name: Maze name

        Returns:
            MazeWorld

        Raises:
            MazeLoadError: No start/goal, or more than one of either
        """
        rows = [line.rstrip("\r\n") for line in lines]
        while rows and not rows[-1]:
            rows.pop()

        starts: List[Coordinate] = []
        goals: List[Coordinate] = []
        grid_rows: List[List[bool]] = []

        for i, row in enumerate(rows):
            cols = []
            for ch in row:
                j = len(cols)
                if ch in WALL_CHARS:
                    cols.append(True)
                elif ch in OPEN_CHARS:
                    cols.append(False)
                elif ch in START_CHARS:
                    starts.append(Coordinate(i, j))
                    cols.append(False)
                elif ch in GOAL_CHARS:
                    goals.append(Coordinate(i, j))
                    cols.append(False)
            grid_rows.append(cols)

        if not starts:
            raise MazeLoadError("no start point 'A' found in the maze")
        if not goals:
            raise MazeLoadError("no end point 'B' found in the maze")
        if len(starts) > 1:
            raise MazeLoadError(f"more than one start point found: {', '.join(map(str, starts))}")
        if len(goals) > 1:
            raise MazeLoadError(f"more than one end point found: {', '.join(map(str, goals))}")

        width = max(len(cols) for cols in grid_rows)
        walls = np.ones((len(grid_rows), width), dtype=bool)
        for i, cols in enumerate(grid_rows):
            walls[i, :len(cols)] = cols

        return cls(walls, starts[0], goals[0], name=name)

    @classmethod
    def from_text(cls, text: str, name: str = "maze") -> "MazeWorld":
        """Build a world from a multi-line maze string."""
        return cls.from_lines(text.splitlines(), name=name)

    @classmethod
    def load(cls, file_name) -> "MazeWorld":
        """
        Load a maze file.

        Args:
            file_name: Path to the maze text file

        Returns:
            MazeWorld named after the file stem
        """
        path = Path(file_name)
        try:
            with open(path, 'r') as f:
                lines = f.readlines()
        except OSError as e:
            raise MazeLoadError(f"cannot open file {path}: {e}") from e
        return cls.from_lines(lines, name=path.stem)

    def in_bounds(self, coord) -> bool:
        """Check if a coordinate lies inside the grid."""
        row, col = coord
        return 0 <= row < self.height and 0 <= col < self.width

    def is_wall(self, coord) -> bool:
        """Check if a coordinate is a wall. Out-of-bounds counts as wall."""
        if not self.in_bounds(coord):
            return True
        return bool(self.walls[coord[0], coord[1]])

    def is_free(self, coord) -> bool:
        """Check if a coordinate is an open in-bounds cell."""
        return not self.is_wall(coord)

    def cell(self, coord) -> Cell:
        """Get the cell at a coordinate."""
        if not self.in_bounds(coord):
            raise IndexError(f"cell {tuple(coord)} outside {self.height}x{self.width} grid")
        return Cell(Coordinate(*coord), bool(self.walls[coord[0], coord[1]]))

    def cells(self) -> Iterator[Cell]:
        """Iterate over all cells in row-major order."""
        for i in range(self.height):
            for j in range(self.width):
                yield Cell(Coordinate(i, j), bool(self.walls[i, j]))

    def open_cell_count(self) -> int:
        """Number of open cells in the grid."""
        return int(self.walls.size - np.count_nonzero(self.walls))

    def validate(self):
        """
        Check the grid can be searched.

        Raises:
            InvalidGrid: Zero dimensions, start/goal out of bounds or on a wall
        """
        if self.height == 0 or self.width == 0:
            raise InvalidGrid(f"grid has zero size ({self.height}x{self.width})")
        for label, coord in (("start", self.start), ("goal", self.goal)):
            if not self.in_bounds(coord):
                raise InvalidGrid(f"{label} {coord} outside {self.height}x{self.width} grid")
            if self.walls[coord.row, coord.col]:
                raise InvalidGrid(f"{label} {coord} is on a wall")
