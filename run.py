#!/usr/bin/env python3
"""
Entry point for the maze solver.

Purpose: Parse CLI arguments, load configuration, solve a maze file and
         print the result.

Inputs:
    --file: Maze text file
    --search: Search type (dfs)
    --config: Optional config preset (default, verbose, random)

Outputs:
    Prints the maze with its solution, logs KPIs to CSV.

Params:
    file: str - Maze file path
    search: str - Search algorithm
    config: str - Configuration preset (default: default)
"""

import argparse
import sys
import yaml
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent
sys.path.insert(0, str(project_root))

from sim.engine import MazeSession, PLANNERS
from sim.world import InvalidGrid, MazeLoadError


def build_parser():
    parser = argparse.ArgumentParser(description="Maze solver")
    parser.add_argument(
        "--file",
        type=str,
        default="mazes/maze1.txt",
        help="Maze file ('#' wall, ' ' open, 'A' start, 'B' goal)",
    )
    parser.add_argument(
        "--search",
        type=str,
        default=None,
        choices=sorted(PLANNERS),
        help="Search type: dfs (default: search.algorithm from the preset)",
    )
    parser.add_argument(
        "--config",
        type=str,
        default="default",
        help="Configuration preset under config/ (default: default)",
    )
    parser.add_argument("--verbose", action="store_true", default=None,
                        help="Print the frontier and each removed node")
    parser.add_argument("--shuffle", action="store_true", default=None,
                        help="Shuffle neighbor order")
    parser.add_argument("--seed", type=int, default=None,
                        help="Seed for neighbor shuffling")
    parser.add_argument("--show-explored", action="store_true", default=None,
                        help="Mark explored cells in the printed maze")
    parser.add_argument("--image", type=str, default=None,
                        help="Save a PNG of the solved maze")
    parser.add_argument("--no-log", action="store_true",
                        help="Do not write the CSV log")
    return parser


def main(argv=None):
    """Main entry point for the solver."""
    args = build_parser().parse_args(argv)

    overrides = {
        "search": {"verbose": args.verbose, "shuffle": args.shuffle, "seed": args.seed},
        "render": {"show_explored": args.show_explored, "image": args.image},
        "logging": {"enabled": False if args.no_log else None},
    }

    try:
        session = MazeSession(
            maze_file=args.file,
            planner=args.search,
            config_preset=args.config,
            overrides=overrides,
        )
        session.run()
    except KeyboardInterrupt:
        print("\nSolve interrupted by user.")
        return 0
    except (MazeLoadError, InvalidGrid, FileNotFoundError, yaml.YAMLError) as e:
        print(e)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
