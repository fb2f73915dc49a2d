"""
DFS (Depth-First Search) maze planner.

Purpose: Grid-based DFS from the maze start to the maze goal with a stack
         frontier, explored set and parent-linked search nodes.

Inputs:
    - MazeWorld (wall grid, start, goal)

Outputs:
    - SearchResult: terminal state, solution (actions + cells),
      explored history and explored count

Params:
    shuffle: bool - Shuffle neighbor order (seeded, off by default)
    seed: int - Shuffle seed
    verbose: bool - Print the frontier and each removed node
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Iterator, List, Optional

from nav.frontier import EmptyFrontier, StackFrontier
from nav.maps import MapUtils
from sim.world import Coordinate


class SearchState(Enum):
    """Planner states."""
    READY = "READY"
    RUNNING = "RUNNING"
    SOLVED = "SOLVED"
    EXHAUSTED = "EXHAUSTED"


@dataclass(frozen=True)
class Node:
    """Search node; parent is an index into the run's node arena."""
    index: int
    coordinate: Coordinate
    parent: Optional[int] = None
    action: str = ""


class ExploredSet:
    """Coordinates already processed, with the order they were processed in."""

    def __init__(self):
        self._seen = set()
        self.order: List[Coordinate] = []

    def mark_explored(self, coord):
        if coord not in self._seen:
            self._seen.add(coord)
            self.order.append(coord)

    def is_explored(self, coord) -> bool:
        return coord in self._seen

    def clear(self):
        self._seen.clear()
        self.order.clear()

    def __contains__(self, coord):
        return coord in self._seen

    def __iter__(self) -> Iterator[Coordinate]:
        return iter(self.order)

    def __len__(self):
        return len(self.order)


@dataclass
class Solution:
    """Start-to-goal path. actions[i] moves onto cells[i]."""
    start: Coordinate
    actions: List[str] = field(default_factory=list)
    cells: List[Coordinate] = field(default_factory=list)

    @property
    def path(self) -> List[Coordinate]:
        """Every cell on the path, start included."""
        return [self.start] + self.cells

    def __len__(self):
        return len(self.actions)


@dataclass
class SearchResult:
    """Outcome of one solve() call."""
    state: SearchState
    solution: Optional[Solution]
    explored: List[Coordinate]
    num_explored: int

    @property
    def solved(self) -> bool:
        return self.state == SearchState.SOLVED

    @property
    def path(self) -> List[Coordinate]:
        return self.solution.path if self.solution else []


class DFSPlanner:
    """DFS path planner for maze grids."""

    name = "dfs"

    def __init__(self, world, shuffle: bool = False, seed: Optional[int] = None,
                 verbose: bool = False):
        """
        Initialize DFS planner.

        Args:
            world: MazeWorld to search; not modified
            shuffle: Shuffle valid neighbors before pushing them
            seed: Shuffle seed, reapplied at the start of every solve
            verbose: Print a per-step trace
        """
        self.world = world
        self.maps = MapUtils(world, shuffle=shuffle, seed=seed)
        self.verbose = verbose
        self.state = SearchState.READY
        self.last_result: Optional[SearchResult] = None

    def solve(self) -> SearchResult:
        """
        Search from start to goal.

        Returns:
            SearchResult in state SOLVED or EXHAUSTED

        Raises:
            InvalidGrid: World is empty or start/goal are unusable
        """
        self.world.validate()
        self.state = SearchState.RUNNING
        self.maps.reseed()

        frontier = StackFrontier()
        explored = ExploredSet()
        arena: List[Node] = []
        num_explored = 0

        root = Node(index=0, coordinate=self.world.start)
        arena.append(root)
        frontier.push(root)

        while True:
            if self.verbose and not frontier.is_empty():
                self._print_frontier(frontier)
            try:
                current = frontier.pop()
            except EmptyFrontier:
                return self._finish(SearchState.EXHAUSTED, None, explored, num_explored)

            num_explored += 1
            if self.verbose:
                print("Removed:", current.coordinate)
                print("---------")
                print("")

            if current.coordinate == self.world.goal:
                solution = self._reconstruct(arena, current)
                explored.mark_explored(current.coordinate)
                return self._finish(SearchState.SOLVED, solution, explored, num_explored)

            explored.mark_explored(current.coordinate)

            for action, coord in self.maps.get_neighbors(current.coordinate):
                if frontier.contains_coordinate(coord) or explored.is_explored(coord):
                    continue
                child = Node(index=len(arena), coordinate=coord,
                             parent=current.index, action=action)
                arena.append(child)
                frontier.push(child)

    def _reconstruct(self, arena: List[Node], goal_node: Node) -> Solution:
        """Follow parent links from the goal node back to the root."""
        actions = []
        cells = []
        node = goal_node
        while node.parent is not None:
            actions.append(node.action)
            cells.append(node.coordinate)
            node = arena[node.parent]
        actions.reverse()
        cells.reverse()
        return Solution(start=node.coordinate, actions=actions, cells=cells)

    def _finish(self, state, solution, explored, num_explored) -> SearchResult:
        self.state = state
        self.last_result = SearchResult(
            state=state,
            solution=solution,
            explored=list(explored),
            num_explored=num_explored,
        )
        return self.last_result

    @staticmethod
    def _print_frontier(frontier: StackFrontier):
        print("Frontier before remove:")
        for node in frontier.nodes():
            print("Node:", node.coordinate)
