"""Depth-first maze solver."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, List, Set, Tuple, Union

from .errors import OutOfBoundsError
from .grid import GridModel, Position
from .maze import Maze

# Up, Right, Down, Left. The first open branch in this order is always taken,
# which fixes the path returned when several exist.
SEARCH_ORDER: Tuple[Position, ...] = ((0, -1), (1, 0), (0, 1), (-1, 0))


@dataclass(frozen=True)
class MazePath:
    """Start-to-goal route found by the solver."""

    cells: Tuple[Position, ...]

    found = True

    @property
    def start(self) -> Position:
        return self.cells[0]

    @property
    def goal(self) -> Position:
        return self.cells[-1]

    def __len__(self) -> int:
        return len(self.cells)

    def __iter__(self) -> Iterator[Position]:
        return iter(self.cells)

    def __getitem__(self, index: int) -> Position:
        return self.cells[index]

    def to_dict(self) -> dict:
        return {
            "found": True,
            "length": len(self.cells),
            "path": [list(cell) for cell in self.cells],
        }


@dataclass(frozen=True)
class NoPathFound:
    """The search exhausted every reachable cell without meeting the goal."""

    start: Position
    goal: Position
    explored: int

    found = False

    @property
    def message(self) -> str:
        return f"No path from {self.start} to {self.goal} after exploring {self.explored} cells."

    def __bool__(self) -> bool:
        return False

    def to_dict(self) -> dict:
        return {
            "found": False,
            "start": list(self.start),
            "goal": list(self.goal),
            "explored": self.explored,
            "message": self.message,
        }


SolveResult = Union[MazePath, NoPathFound]


def find_path(grid: GridModel, start: Position, goal: Position) -> SolveResult:
    start = tuple(start)
    goal = tuple(goal)
    for label, pos in (("start", start), ("goal", goal)):
        if not grid.in_bounds(pos):
            raise OutOfBoundsError(
                f"{label.capitalize()} {pos} is outside the {grid.dimension}x{grid.dimension} grid"
            )
    if not (grid.is_open(start) and grid.is_open(goal)):
        return NoPathFound(start=start, goal=goal, explored=0)

    stack: List[Position] = [start]
    visited: Set[Position] = {start}
    while stack:
        x, y = stack[-1]
        if (x, y) == goal:
            return MazePath(cells=tuple(stack))
        for dx, dy in SEARCH_ORDER:
            nxt = (x + dx, y + dy)
            if grid.in_bounds(nxt) and nxt not in visited and grid.is_open(nxt):
                visited.add(nxt)
                stack.append(nxt)
                break
        else:
            stack.pop()

    return NoPathFound(start=start, goal=goal, explored=len(visited))


def solve(maze: Maze) -> SolveResult:
    """Search ``maze`` from its start to its goal.

    Returns a ``MazePath`` on success or ``NoPathFound`` once the search runs
    out of unvisited open cells; callers check ``result.found``.
    """

    return find_path(maze.grid, maze.start, maze.goal)


__all__ = ["MazePath", "NoPathFound", "SolveResult", "SEARCH_ORDER", "find_path", "solve"]
