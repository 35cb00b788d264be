"""Maze value passed between the core operations and their driver."""

from __future__ import annotations

from dataclasses import dataclass

from .grid import GridModel, Position

START: Position = (1, 1)
DEFAULT_SIZE = 21


@dataclass(frozen=True)
class Maze:
    grid: GridModel
    goal: Position
    start: Position = START

    @property
    def dimension(self) -> int:
        return self.grid.dimension

    def to_dict(self) -> dict:
        return {
            "dimension": self.dimension,
            "start": list(self.start),
            "goal": list(self.goal),
            "maze_grid": self.grid.to_rows(),
        }


__all__ = ["Maze", "START", "DEFAULT_SIZE"]
