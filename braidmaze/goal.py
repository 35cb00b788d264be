"""Goal placement for generated mazes."""

from __future__ import annotations

import random

from .errors import NoValidGoalError, OutOfBoundsError
from .grid import GridModel, Position


def place_goal(grid: GridModel, start: Position, rng: random.Random) -> Position:
    """Pick an open cell other than ``start`` by rejection sampling.

    Each draw takes ``x`` then ``y`` from ``rng.randrange(N)`` and is kept only
    when the cell is open and differs from ``start``. A grid whose only open
    cell is the start raises ``NoValidGoalError`` up front instead of sampling
    forever.
    """

    if not grid.in_bounds(start):
        raise OutOfBoundsError(f"Start {tuple(start)} is outside the {grid.dimension}x{grid.dimension} grid")
    start = tuple(start)
    if not any(cell != start for cell in grid.open_cells()):
        raise NoValidGoalError(
            f"No open cell besides start {start} in a {grid.dimension}x{grid.dimension} grid"
        )

    size = grid.dimension
    while True:
        candidate = (rng.randrange(size), rng.randrange(size))
        if candidate != start and grid.is_open(candidate):
            return candidate


__all__ = ["place_goal"]
