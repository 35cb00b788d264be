"""Exception types raised by the maze core."""

from __future__ import annotations


class MazeError(Exception):
    """Base class for maze core failures."""


class OutOfBoundsError(MazeError, IndexError):
    """A grid lookup or mutation addressed a cell outside the grid."""


class InvalidDimensionError(MazeError, ValueError):
    """The requested grid size cannot hold a maze."""


class NoValidGoalError(MazeError, RuntimeError):
    """The grid has no open cell that could serve as a goal."""


__all__ = [
    "MazeError",
    "OutOfBoundsError",
    "InvalidDimensionError",
    "NoValidGoalError",
]
