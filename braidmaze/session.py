"""Driver-side game state for playing a maze."""

from __future__ import annotations

import argparse
import json
import random
from dataclasses import dataclass, field
from typing import List, Optional, Union

from .generator import generate
from .grid import Position
from .maze import DEFAULT_SIZE, Maze
from .moves import Direction, MoveResult, validate_move
from .solver import SolveResult, solve


@dataclass
class MazeSession:
    """Current maze, player position and progress flags owned by one driver.

    ``started`` flips on the first accepted move and ``finished`` once the
    player stands on the goal; an external timer can follow both. Neither
    resets until ``regenerate``.
    """

    maze: Maze
    rng: random.Random
    player: Position = field(init=False)
    moves: int = 0
    started: bool = False
    finished: bool = False

    def __post_init__(self) -> None:
        self.player = self.maze.start

    @classmethod
    def new(cls, dimension: int = DEFAULT_SIZE, rng: Optional[random.Random] = None) -> "MazeSession":
        rng = rng if rng is not None else random.Random()
        return cls(maze=generate(dimension, rng), rng=rng)

    def move(self, direction: Union[Direction, str]) -> MoveResult:
        result = validate_move(self.maze, self.player, direction)
        if result.moved:
            self.player = result.position
            self.moves += 1
            self.started = True
        if result.goal_reached:
            self.finished = True
        return result

    def solve(self) -> SolveResult:
        return solve(self.maze)

    def regenerate(self) -> Maze:
        self.maze = generate(self.maze.dimension, self.rng)
        self.player = self.maze.start
        self.moves = 0
        self.started = False
        self.finished = False
        return self.maze

    def to_dict(self) -> dict:
        return {
            "maze": self.maze.to_dict(),
            "player": list(self.player),
            "moves": self.moves,
            "started": self.started,
            "finished": self.finished,
        }


__all__ = ["MazeSession"]


def _parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Replay moves through a generated maze")
    parser.add_argument("moves", type=str, help="Comma-separated directions, e.g. right,right,down")
    parser.add_argument("--size", type=int, default=DEFAULT_SIZE, help="Odd grid dimension")
    parser.add_argument("--seed", type=int, default=None)
    parser.add_argument("--solve", action="store_true", help="Attach the solver's path to the output")
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> None:
    args = _parse_args(argv)
    session = MazeSession.new(args.size, random.Random(args.seed))
    steps = [step for step in args.moves.split(",") if step.strip()]
    for step in steps:
        session.move(step)
    payload = session.to_dict()
    if args.solve:
        payload["solution"] = session.solve().to_dict()
    print(json.dumps(payload, indent=2))


if __name__ == "__main__":
    main()
