"""Single-step player moves."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Union

from .errors import OutOfBoundsError
from .grid import Position
from .maze import Maze


class Direction(Enum):
    UP = (0, -1)
    RIGHT = (1, 0)
    DOWN = (0, 1)
    LEFT = (-1, 0)

    @property
    def dx(self) -> int:
        return self.value[0]

    @property
    def dy(self) -> int:
        return self.value[1]

    @classmethod
    def parse(cls, value: Union["Direction", str]) -> "Direction":
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            try:
                return cls[value.strip().upper()]
            except KeyError:
                pass
        raise ValueError(f"Unknown direction {value!r}; expected one of up, right, down, left")


@dataclass(frozen=True)
class MoveResult:
    position: Position
    moved: bool
    goal_reached: bool

    def to_dict(self) -> dict:
        return {
            "position": list(self.position),
            "moved": self.moved,
            "goal_reached": self.goal_reached,
        }


def validate_move(maze: Maze, position: Position, direction: Union[Direction, str]) -> MoveResult:
    """Step one cell in ``direction`` if that cell is inside the grid and open.

    Walls and the grid edge leave the position unchanged; that is a normal
    outcome, not an error.
    """

    step = Direction.parse(direction)
    grid = maze.grid
    position = tuple(position)
    if not grid.in_bounds(position):
        raise OutOfBoundsError(f"Position {position} is outside the {grid.dimension}x{grid.dimension} grid")
    if not grid.is_open(position):
        raise ValueError(f"Position {position} is a wall cell; a player can only stand on open cells")

    candidate = (position[0] + step.dx, position[1] + step.dy)
    moved = grid.in_bounds(candidate) and grid.is_open(candidate)
    new_position = candidate if moved else position
    return MoveResult(position=new_position, moved=moved, goal_reached=new_position == tuple(maze.goal))


__all__ = ["Direction", "MoveResult", "validate_move"]
