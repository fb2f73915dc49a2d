from pathlib import Path

import numpy as np
import pytest

from nav.dfs import DFSPlanner, ExploredSet, SearchState, Solution
from nav.maps import apply_action
from sim.world import Coordinate, InvalidGrid, MazeWorld


MAZES = Path(__file__).resolve().parent.parent / "mazes"


def _replay(start, actions):
    pos = Coordinate(*start)
    for action in actions:
        pos = apply_action(pos, action)
    return pos


def _assert_valid_path(world, path):
    assert path[0] == world.start
    assert path[-1] == world.goal
    for a, b in zip(path, path[1:]):
        assert abs(a[0] - b[0]) + abs(a[1] - b[1]) == 1
    assert all(world.is_free(c) for c in path)


def test_walled_maze_follows_only_route():
    world = MazeWorld.from_text("S..\n##.\n..G")
    result = DFSPlanner(world).solve()
    assert result.state == SearchState.SOLVED
    assert result.path == [(0, 0), (0, 1), (0, 2), (1, 2), (2, 2)]
    assert result.solution.actions == ["right", "right", "down", "down"]
    assert result.num_explored == 5


def test_actions_and_cells_have_equal_length():
    world = MazeWorld.from_text("S..\n##.\n..G")
    solution = DFSPlanner(world).solve().solution
    assert len(solution.actions) == len(solution.cells) == len(solution)
    assert solution.cells[-1] == world.goal


def test_start_equal_to_goal_is_zero_length():
    world = MazeWorld([[False, False], [False, False]], (1, 1), (1, 1))
    result = DFSPlanner(world).solve()
    assert result.solved
    assert result.solution.actions == []
    assert result.path == [(1, 1)]
    assert result.num_explored == 1


def test_enclosed_goal_exhausts_reachable_cells():
    world = MazeWorld.from_text(
        "A....\n"
        "..#..\n"
        ".#B#.\n"
        "..#..\n"
        "....."
    )
    result = DFSPlanner(world).solve()
    assert result.state == SearchState.EXHAUSTED
    assert result.solution is None
    assert result.path == []
    assert result.num_explored == world.open_cell_count() - 1


def test_wall_between_start_and_goal():
    world = MazeWorld.from_text("A.#..\n..#.B\n..#..")
    result = DFSPlanner(world).solve()
    assert not result.solved
    assert result.num_explored == 6
    assert result.num_explored <= world.open_cell_count()


def test_open_corridor_is_solved():
    world = MazeWorld.from_text("A.....B")
    result = DFSPlanner(world).solve()
    assert result.solved
    _assert_valid_path(world, result.path)
    assert len(result.solution) >= 6


def test_path_on_open_room_is_valid_and_replays_to_goal():
    world = MazeWorld.from_text(
        "A.....\n"
        "......\n"
        "......\n"
        ".....B"
    )
    result = DFSPlanner(world).solve()
    assert result.solved
    _assert_valid_path(world, result.path)
    manhattan = abs(world.goal.row - world.start.row) + abs(world.goal.col - world.start.col)
    assert len(result.solution) >= manhattan
    assert _replay(world.start, result.solution.actions) == world.goal


def test_last_generated_neighbor_is_expanded_first():
    world = MazeWorld.from_text("A.\n.B")
    result = DFSPlanner(world).solve()
    # right is pushed before down, so down is popped first
    assert result.solution.actions == ["down", "right"]
    assert result.explored == [(0, 0), (1, 0), (1, 1)]
    assert result.num_explored == 3


def test_explored_history_ends_with_goal_and_has_no_repeats():
    world = MazeWorld.load(MAZES / "maze2.txt")
    result = DFSPlanner(world).solve()
    assert result.solved
    assert result.explored[-1] == world.goal
    assert len(result.explored) == len(set(result.explored))
    assert result.num_explored == len(result.explored)
    _assert_valid_path(world, result.path)


def test_solve_twice_is_identical():
    world = MazeWorld.load(MAZES / "maze2.txt")
    planner = DFSPlanner(world)
    first = planner.solve()
    second = planner.solve()
    assert first.num_explored == second.num_explored
    assert first.solution == second.solution
    assert first.explored == second.explored


def test_seeded_shuffle_is_reproducible_and_valid():
    world = MazeWorld.from_text(
        "A.....\n"
        "..##..\n"
        "......\n"
        ".....B"
    )
    first = DFSPlanner(world, shuffle=True, seed=5).solve()
    second = DFSPlanner(world, shuffle=True, seed=5).solve()
    assert first.solution == second.solution
    assert first.num_explored == second.num_explored
    _assert_valid_path(world, first.path)
    assert _replay(world.start, first.solution.actions) == world.goal


def test_state_transitions():
    world = MazeWorld.from_text("A.B")
    planner = DFSPlanner(world)
    assert planner.state == SearchState.READY
    result = planner.solve()
    assert planner.state == SearchState.SOLVED
    assert planner.last_result is result

    blocked = DFSPlanner(MazeWorld.from_text("A#B"))
    blocked.solve()
    assert blocked.state == SearchState.EXHAUSTED


def test_invalid_grid_rejected_before_search():
    world = MazeWorld([[False, True]], (0, 0), (0, 1))
    planner = DFSPlanner(world)
    with pytest.raises(InvalidGrid):
        planner.solve()
    assert planner.state == SearchState.READY


def test_empty_grid_rejected():
    world = MazeWorld(np.zeros((0, 0), dtype=bool), (0, 0), (0, 0))
    with pytest.raises(InvalidGrid):
        DFSPlanner(world).solve()


def test_verbose_prints_trace(capsys):
    world = MazeWorld.from_text("AB")
    DFSPlanner(world, verbose=True).solve()
    out = capsys.readouterr().out
    assert "Frontier before remove:" in out
    assert "Removed: (0, 0)" in out
    assert "Removed: (0, 1)" in out


def test_quiet_by_default(capsys):
    DFSPlanner(MazeWorld.from_text("A.B")).solve()
    assert capsys.readouterr().out == ""


def test_explored_set_is_idempotent():
    explored = ExploredSet()
    explored.mark_explored((1, 2))
    explored.mark_explored((1, 2))
    assert explored.is_explored((1, 2))
    assert (1, 2) in explored
    assert len(explored) == 1
    explored.clear()
    assert not explored.is_explored((1, 2))


def test_solution_path_includes_start():
    solution = Solution(start=Coordinate(0, 0), actions=["right"], cells=[Coordinate(0, 1)])
    assert solution.path == [(0, 0), (0, 1)]
    assert len(solution) == 1


def test_verbose_exhausted_run_has_no_empty_frontier_dump(capsys):
    DFSPlanner(MazeWorld.from_text("A#B"), verbose=True).solve()
    out = capsys.readouterr().out
    assert out.count("Frontier before remove:") == 1
    assert out.rstrip().splitlines()[-1] == "---------"
