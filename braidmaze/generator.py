"""Braided maze generator based on randomized frontier expansion."""

from __future__ import annotations

import argparse
import json
import random
from typing import List, Optional

from .errors import InvalidDimensionError
from .goal import place_goal
from .grid import GridModel, Position
from .maze import DEFAULT_SIZE, START, Maze
from .solver import solve

# Two-step offsets in the order new candidates join the frontier.
FRONTIER_STEPS = ((-2, 0), (2, 0), (0, -2), (0, 2))


def check_dimension(dimension: object) -> int:
    if isinstance(dimension, bool) or not isinstance(dimension, int):
        raise InvalidDimensionError(f"Maze size must be an integer, got {dimension!r}")
    if dimension < 3:
        raise InvalidDimensionError(f"Maze size must be at least 3, got {dimension}")
    if dimension % 2 == 0:
        raise InvalidDimensionError(f"Maze size must be odd, got {dimension}")
    return dimension


class MazeGenerator:
    """Generate braided mazes by Prim-style frontier growth.

    A candidate pulled from the frontier is joined to every open cell two
    steps away, not just the one that queued it. Every pair of neighbouring
    odd cells ends up connected, so the carved grid is the same for any seed
    and only the goal varies.
    """

    def __init__(
        self,
        size: int = DEFAULT_SIZE,
        *,
        seed: Optional[int] = None,
        rng: Optional[random.Random] = None,
    ) -> None:
        self.size = check_dimension(size)
        self._rng = rng if rng is not None else random.Random(seed)

    def create_maze(self) -> Maze:
        grid = self.build_grid()
        goal = place_goal(grid, START, self._rng)
        return Maze(grid=grid, goal=goal, start=START)

    def generate_batch(self, count: int) -> List[Maze]:
        return [self.create_maze() for _ in range(count)]

    def build_grid(self) -> GridModel:
        grid = GridModel(self.size)
        grid._set_open(START)
        frontier: List[Position] = []
        self._push_frontier(grid, START, frontier)

        while frontier:
            x, y = frontier.pop(self._rng.randrange(len(frontier)))
            if grid.is_open((x, y)):
                continue
            grid._set_open((x, y))
            for dx, dy in FRONTIER_STEPS:
                other = (x + dx, y + dy)
                if self._interior(other) and grid.is_open(other):
                    grid._set_open((x + dx // 2, y + dy // 2))
            self._push_frontier(grid, (x, y), frontier)

        grid.freeze()
        return grid

    # ------------------------------------------------------------------

    def _interior(self, pos: Position) -> bool:
        x, y = pos
        return 1 <= x <= self.size - 2 and 1 <= y <= self.size - 2

    def _push_frontier(self, grid: GridModel, pos: Position, frontier: List[Position]) -> None:
        x, y = pos
        for dx, dy in FRONTIER_STEPS:
            candidate = (x + dx, y + dy)
            if self._interior(candidate) and not grid.is_open(candidate):
                frontier.append(candidate)


def generate(dimension: int, rng: random.Random) -> Maze:
    """Build a maze of the given odd size and place its goal using ``rng``."""

    return MazeGenerator(dimension, rng=rng).create_maze()


__all__ = ["MazeGenerator", "generate", "check_dimension", "FRONTIER_STEPS"]


def _parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Generate braided mazes and print them as JSON")
    parser.add_argument("count", type=int, help="Number of mazes to generate")
    parser.add_argument("--size", type=int, default=DEFAULT_SIZE, help="Odd grid dimension")
    parser.add_argument("--seed", type=int, default=None)
    parser.add_argument("--solve", action="store_true", help="Attach the solver's path to each maze")
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> None:
    args = _parse_args(argv)
    generator = MazeGenerator(args.size, seed=args.seed)
    records = []
    for maze in generator.generate_batch(args.count):
        record = maze.to_dict()
        if args.solve:
            record["solution"] = solve(maze).to_dict()
        records.append(record)
    print(json.dumps(records, indent=2))


if __name__ == "__main__":
    main()
