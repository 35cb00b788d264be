import random
import unittest

from braidmaze import (
    START,
    GridModel,
    Maze,
    MazePath,
    NoPathFound,
    OutOfBoundsError,
    find_path,
    generate,
    solve,
)

RING = [
    [1, 1, 1, 1, 1],
    [1, 0, 0, 0, 1],
    [1, 0, 1, 0, 1],
    [1, 0, 0, 0, 1],
    [1, 1, 1, 1, 1],
]


class PathSolverTests(unittest.TestCase):
    def _assert_valid_path(self, maze: Maze, path: MazePath) -> None:
        self.assertEqual(path[0], maze.start)
        self.assertEqual(path[-1], maze.goal)
        for cell in path:
            self.assertTrue(maze.grid.is_open(cell))
        for (x0, y0), (x1, y1) in zip(path.cells, path.cells[1:]):
            self.assertEqual(abs(x0 - x1) + abs(y0 - y1), 1)

    def test_generated_mazes_are_solved(self) -> None:
        rng = random.Random(2024)
        for size in (5, 9, 15, 21, 31):
            for _ in range(4):
                maze = generate(size, rng)
                result = solve(maze)
                self.assertTrue(result.found)
                self.assertIsInstance(result, MazePath)
                self._assert_valid_path(maze, result)

    def test_path_has_no_repeated_cells(self) -> None:
        maze = generate(21, random.Random(8))
        path = solve(maze)
        self.assertEqual(len(set(path)), len(path))

    def test_fixed_direction_order_picks_the_path(self) -> None:
        grid = GridModel.from_rows(RING)
        # Right is tried before Down, so both goals are reached clockwise.
        self.assertEqual(
            find_path(grid, START, (3, 3)).cells,
            ((1, 1), (2, 1), (3, 1), (3, 2), (3, 3)),
        )
        self.assertEqual(
            find_path(grid, START, (1, 3)).cells,
            ((1, 1), (2, 1), (3, 1), (3, 2), (3, 3), (2, 3), (1, 3)),
        )

    def test_disconnected_goal_reports_no_path(self) -> None:
        grid = GridModel.from_rows(
            [
                [1, 1, 1, 1, 1],
                [1, 0, 0, 1, 1],
                [1, 1, 1, 1, 1],
                [1, 1, 1, 0, 1],
                [1, 1, 1, 1, 1],
            ]
        )
        result = solve(Maze(grid=grid, goal=(3, 3)))
        self.assertIsInstance(result, NoPathFound)
        self.assertFalse(result.found)
        self.assertFalse(result)
        self.assertEqual(result.explored, 2)
        payload = result.to_dict()
        self.assertFalse(payload["found"])
        self.assertEqual(payload["goal"], [3, 3])
        self.assertIn("No path", payload["message"])

    def test_wall_goal_reports_no_path(self) -> None:
        grid = GridModel.from_rows(RING)
        result = find_path(grid, START, (2, 2))
        self.assertIsInstance(result, NoPathFound)
        self.assertEqual(result.explored, 0)

    def test_goal_at_start_is_single_cell_path(self) -> None:
        grid = GridModel.from_rows(RING)
        result = find_path(grid, START, START)
        self.assertEqual(result.cells, (START,))

    def test_out_of_bounds_endpoints_raise(self) -> None:
        grid = GridModel.from_rows(RING)
        with self.assertRaises(OutOfBoundsError):
            find_path(grid, START, (5, 1))
        with self.assertRaises(OutOfBoundsError):
            find_path(grid, (-1, 1), (3, 3))

    def test_path_to_dict(self) -> None:
        path = find_path(GridModel.from_rows(RING), START, (3, 1))
        self.assertEqual(
            path.to_dict(),
            {"found": True, "length": 3, "path": [[1, 1], [2, 1], [3, 1]]},
        )


if __name__ == "__main__":
    unittest.main()
