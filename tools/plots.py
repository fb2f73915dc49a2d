"""
Plotting utilities for maze solves and run comparison.

Purpose: Draw a solved maze with matplotlib; chart explored-count and
         solve rate across logged runs.

Inputs:
    - MazeWorld and SearchResult (maze image)
    - CSV log files from data/logs/ (run charts)

Outputs:
    - PNG plots

Params:
    input_pattern: str - Glob pattern for CSV files
    output_dir: str - Output directory for plots
"""

import argparse
import glob
import pandas as pd
import matplotlib.pyplot as plt
from matplotlib.colors import ListedColormap
import numpy as np
import os
from pathlib import Path


# Image encoding: 0=open, 1=wall, 2=explored, 3=solution, 4=start, 5=goal
MAZE_COLORS = ["white", "black", "lightsteelblue", "gold", "green", "red"]


def maze_image(world, result=None):
    """
    Encode a maze and search result as an integer image.

    Args:
        world: MazeWorld
        result: SearchResult or None

    Returns:
        numpy array (height, width) using the image encoding above
    """
    img = world.walls.astype(np.uint8)
    if result is not None:
        for r, c in result.explored:
            img[r, c] = 2
        for r, c in result.path:
            img[r, c] = 3
    img[world.start.row, world.start.col] = 4
    img[world.goal.row, world.goal.col] = 5
    return img


def save_maze_image(world, result, path):
    """Save the maze with explored cells and solution to a PNG."""
    Path(path).parent.mkdir(parents=True, exist_ok=True)

    img = maze_image(world, result)
    fig, ax = plt.subplots(figsize=(max(4, world.width / 4), max(4, world.height / 4)))
    ax.imshow(img, cmap=ListedColormap(MAZE_COLORS), vmin=0, vmax=len(MAZE_COLORS) - 1,
              interpolation='nearest')
    ax.set_xticks([])
    ax.set_yticks([])

    status = "solved" if result is not None and result.solved else "no solution"
    explored = result.num_explored if result is not None else 0
    ax.set_title(f"{world.name}: {status}, explored {explored}")

    plt.tight_layout()
    plt.savefig(path, dpi=150, bbox_inches='tight')
    print(f"Saved maze image to {path}")
    plt.close(fig)


def load_logs(input_pattern):
    """Load CSV logs matching pattern."""
    csv_files = glob.glob(input_pattern)

    if not csv_files:
        print(f"No CSV files found matching {input_pattern}")
        return None

    dfs = []
    for csv_file in csv_files:
        try:
            df = pd.read_csv(csv_file)
            dfs.append(df)
        except (OSError, pd.errors.ParserError, pd.errors.EmptyDataError) as e:
            print(f"Error loading {csv_file}: {e}")

    if not dfs:
        return None

    return pd.concat(dfs, ignore_index=True)


def plot_runs(df, output_dir):
    """Generate run plots: explored vs path length, solve rate per maze."""
    os.makedirs(output_dir, exist_ok=True)

    fig, ax = plt.subplots(figsize=(10, 6))

    for maze in df['maze'].unique():
        maze_df = df[df['maze'] == maze]
        ax.scatter(maze_df['path_len'], maze_df['explored'], label=str(maze), alpha=0.6)

    ax.set_xlabel('Path Length')
    ax.set_ylabel('Explored Nodes')
    ax.set_title('Path Length vs Explored Nodes')
    ax.legend()
    ax.grid(True, alpha=0.3)

    plt.tight_layout()
    plt.savefig(f"{output_dir}/explored.png", dpi=300, bbox_inches='tight')
    print(f"Saved explored plot to {output_dir}/explored.png")
    plt.close(fig)

    fig, ax = plt.subplots(figsize=(8, 6))

    solve_rate = df.groupby('maze')['solved'].mean()
    ax.bar([str(m) for m in solve_rate.index], solve_rate.values)
    ax.set_ylabel('Solve Rate')
    ax.set_title('Solve Rate per Maze')
    ax.set_ylim([0, 1])
    ax.grid(True, alpha=0.3, axis='y')

    plt.tight_layout()
    plt.savefig(f"{output_dir}/solve_rate.png", dpi=300, bbox_inches='tight')
    print(f"Saved solve rate plot to {output_dir}/solve_rate.png")
    plt.close(fig)


def main(argv=None):
    """Main plotting function."""
    parser = argparse.ArgumentParser(description="Generate plots from CSV logs")
    parser.add_argument('--in', '--input', dest='input_pattern',
                        default='data/logs/*.csv',
                        help='Input CSV file pattern (glob)')
    parser.add_argument('--out', '--output', dest='output_dir',
                        default='docs/img/',
                        help='Output directory for plots')

    args = parser.parse_args(argv)

    df = load_logs(args.input_pattern)

    if df is None:
        print("No data to plot")
        return

    print(f"Loaded {len(df)} log entries")

    plot_runs(df, args.output_dir)

    print(f"\nPlots saved to {args.output_dir}")


if __name__ == "__main__":
    main()
