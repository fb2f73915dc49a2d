"""
Text rendering of a maze and its solution.

Purpose: Draw the maze as text with walls, start, goal, solution cells and
         (optionally) explored cells.

Inputs:
    - MazeWorld
    - SearchResult (optional)

Outputs:
    - Multi-line string
"""

WALL = "█"
START = "A"
GOAL = "B"
PATH = "*"
EXPLORED = "."
OPEN = " "


def render_text(world, result=None, show_explored: bool = False) -> str:
    """
    Render the maze.

    Args:
        world: MazeWorld
        result: SearchResult to overlay, or None for the bare maze
        show_explored: Mark explored cells that are not on the solution

    Returns:
        Maze as text, one line per row
    """
    on_path = set(result.path) if result is not None else set()
    explored = set(result.explored) if result is not None and show_explored else set()

    lines = []
    for i in range(world.height):
        chars = []
        for j in range(world.width):
            coord = (i, j)
            if world.walls[i, j]:
                chars.append(WALL)
            elif coord == world.start:
                chars.append(START)
            elif coord == world.goal:
                chars.append(GOAL)
            elif coord in on_path:
                chars.append(PATH)
            elif coord in explored:
                chars.append(EXPLORED)
            else:
                chars.append(OPEN)
        lines.append("".join(chars))
    return "\n".join(lines)
