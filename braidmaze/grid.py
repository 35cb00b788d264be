"""Square cell grid backing every maze."""

from __future__ import annotations

from collections import deque
from enum import IntEnum
from typing import Deque, Iterable, List, Sequence, Set, Tuple

import numpy as np

from .errors import InvalidDimensionError, OutOfBoundsError

Position = Tuple[int, int]  # (x, y)

STEPS: Tuple[Position, ...] = ((0, -1), (1, 0), (0, 1), (-1, 0))


class Cell(IntEnum):
    OPEN = 0
    WALL = 1


class GridModel:
    """Fixed-size square grid of wall/open cells addressed by ``(x, y)``.

    Cells live in a numpy ``int8`` array indexed ``[y, x]``. The grid is only
    mutated while a generator builds it; ``freeze()`` makes the backing array
    read-only and rejects any later ``_set_open`` call.
    """

    def __init__(self, dimension: int) -> None:
        if isinstance(dimension, bool) or not isinstance(dimension, int) or dimension <= 0:
            raise InvalidDimensionError(f"Grid dimension must be a positive integer, got {dimension!r}")
        self._dimension = dimension
        self._cells = np.full((dimension, dimension), int(Cell.WALL), dtype=np.int8)
        self._frozen = False

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[int]]) -> "GridModel":
        """Build a frozen grid from 0/1 rows (1 = wall, 0 = open)."""

        size = len(rows)
        if size == 0 or any(len(row) != size for row in rows):
            raise InvalidDimensionError("Grid rows must form a non-empty square")
        grid = cls(size)
        values = np.asarray(rows, dtype=np.int8)
        if not np.isin(values, (int(Cell.OPEN), int(Cell.WALL))).all():
            raise ValueError("Grid rows may only contain 0 (open) and 1 (wall)")
        grid._cells[:, :] = values
        grid.freeze()
        return grid

    @property
    def dimension(self) -> int:
        return self._dimension

    @property
    def frozen(self) -> bool:
        return self._frozen

    def in_bounds(self, pos: Position) -> bool:
        x, y = pos
        return 0 <= x < self._dimension and 0 <= y < self._dimension

    def _check(self, pos: Position) -> None:
        if not self.in_bounds(pos):
            raise OutOfBoundsError(
                f"Position {tuple(pos)} is outside the {self._dimension}x{self._dimension} grid"
            )

    def cell(self, pos: Position) -> Cell:
        self._check(pos)
        x, y = pos
        return Cell(int(self._cells[y, x]))

    def is_open(self, pos: Position) -> bool:
        return self.cell(pos) is Cell.OPEN

    def _set_open(self, pos: Position) -> None:
        if self._frozen:
            raise RuntimeError("Grid is frozen; regenerate the maze instead of mutating it")
        self._check(pos)
        x, y = pos
        self._cells[y, x] = int(Cell.OPEN)

    def freeze(self) -> None:
        self._cells.setflags(write=False)
        self._frozen = True

    # ------------------------------------------------------------------

    def to_rows(self) -> List[List[int]]:
        return self._cells.tolist()

    def open_cells(self) -> List[Position]:
        # argwhere yields (y, x) pairs in row-major order
        return [(int(x), int(y)) for y, x in np.argwhere(self._cells == Cell.OPEN)]

    def neighbors(self, pos: Position) -> Iterable[Position]:
        """Yield in-bounds open cells one step away, in up/right/down/left order."""

        x, y = pos
        for dx, dy in STEPS:
            candidate = (x + dx, y + dy)
            if self.in_bounds(candidate) and self.is_open(candidate):
                yield candidate

    def reachable_from(self, start: Position) -> Set[Position]:
        if not self.is_open(start):
            return set()
        queue: Deque[Position] = deque([start])
        seen = {start}
        while queue:
            current = queue.popleft()
            for nxt in self.neighbors(current):
                if nxt not in seen:
                    seen.add(nxt)
                    queue.append(nxt)
        return seen

    def cycle_rank(self) -> int:
        """Number of independent cycles in the open-cell graph.

        Zero for a perfect maze; every extra connection carved between two
        already-joined regions adds one.
        """

        open_mask = self._cells == Cell.OPEN
        vertices = int(open_mask.sum())
        if vertices == 0:
            return 0
        edges = int((open_mask[:, :-1] & open_mask[:, 1:]).sum())
        edges += int((open_mask[:-1, :] & open_mask[1:, :]).sum())
        remaining = set(self.open_cells())
        components = 0
        while remaining:
            components += 1
            remaining -= self.reachable_from(next(iter(remaining)))
        return edges - vertices + components

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, GridModel):
            return NotImplemented
        return self._dimension == other._dimension and np.array_equal(self._cells, other._cells)

    def __hash__(self) -> int:
        return hash((self._dimension, self._cells.tobytes()))

    def __repr__(self) -> str:
        return f"GridModel(dimension={self._dimension}, open={len(self.open_cells())})"


__all__ = ["Cell", "GridModel", "Position", "STEPS"]
