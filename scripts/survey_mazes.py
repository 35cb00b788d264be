#!/usr/bin/env python3
"""Generate a batch of mazes, solve each one and summarise goals and solution paths."""

from __future__ import annotations

import argparse
import random
import sys
from pathlib import Path
from typing import List

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from braidmaze import generate, solve
from braidmaze.maze import DEFAULT_SIZE


def _parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("count", type=int, help="Number of mazes to survey")
    parser.add_argument("--size", type=int, default=DEFAULT_SIZE, help="Odd grid dimension")
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Optional RNG seed shared by the whole batch",
    )
    return parser.parse_args()


def main() -> None:
    args = _parse_args()
    if args.count <= 0:
        raise ValueError(f"count must be positive, got {args.count}")
    rng = random.Random(args.seed)

    path_lengths: List[int] = []
    goals = set()
    unsolved = 0
    for index in range(1, args.count + 1):
        maze = generate(args.size, rng)
        open_cells = set(maze.grid.open_cells())
        if maze.grid.reachable_from(maze.start) != open_cells:
            raise RuntimeError(f"Maze {index} has open cells unreachable from the start")
        goals.add(maze.goal)
        distance = abs(maze.goal[0] - maze.start[0]) + abs(maze.goal[1] - maze.start[1])
        result = solve(maze)
        if result.found:
            path_lengths.append(len(result))
            outcome = f"path={len(result)}"
        else:
            unsolved += 1
            outcome = "no path"
        print(f"[{index}/{args.count}] goal={maze.goal} distance={distance} {outcome}")

    average = sum(path_lengths) / len(path_lengths) if path_lengths else 0.0
    shortest = min(path_lengths, default=0)
    longest = max(path_lengths, default=0)
    print(
        f"Surveyed {args.count} mazes of size {args.size}: "
        f"path average {average:.1f} (min {shortest}, max {longest}), "
        f"distinct goals {len(goals)}, unsolved {unsolved}"
    )


if __name__ == "__main__":
    main()
