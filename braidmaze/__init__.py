"""Braided maze generation, goal placement, solving and move validation."""

__all__ = [
    "Cell",
    "GridModel",
    "Position",
    "Maze",
    "START",
    "MazeGenerator",
    "generate",
    "place_goal",
    "MazePath",
    "NoPathFound",
    "find_path",
    "solve",
    "Direction",
    "MoveResult",
    "validate_move",
    "MazeSession",
    "MazeError",
    "OutOfBoundsError",
    "InvalidDimensionError",
    "NoValidGoalError",
]

from .errors import MazeError, OutOfBoundsError, InvalidDimensionError, NoValidGoalError
from .grid import Cell, GridModel, Position
from .maze import Maze, START
from .generator import MazeGenerator, generate
from .goal import place_goal
from .solver import MazePath, NoPathFound, find_path, solve
from .moves import Direction, MoveResult, validate_move
from .session import MazeSession
