import unittest

from mazecraft import Grid, MazeAborted, MazeGenerator, MazeSolver, PathEvaluator

# Unique route through the 5x5 recursive-backtracker maze carved with seed 42.
SEED_42_ROUTE = [
    (0, 0), (0, 1), (1, 1), (1, 2), (0, 2), (0, 3), (0, 4), (1, 4), (2, 4), (3, 4),
    (3, 3), (3, 2), (2, 2), (2, 1), (3, 1), (4, 1), (4, 2), (4, 3), (4, 4),
]


def _open_grid(width: int, height: int) -> Grid:
    grid = Grid(width, height)
    for cell in grid:
        if cell.x < width - 1:
            grid.remove_walls(cell, grid.cell(cell.x + 1, cell.y))
        if cell.y < height - 1:
            grid.remove_walls(cell, grid.cell(cell.x, cell.y + 1))
    return grid


class MazeSolverTests(unittest.TestCase):
    def setUp(self) -> None:
        self.grid = MazeGenerator(5, 5, seed=42).generate()
        self.solver = MazeSolver(self.grid)

    def test_bidirectional_finds_the_unique_route(self) -> None:
        path = self.solver.solve((0, 0), (4, 4))
        self.assertEqual([cell.position for cell in path], SEED_42_ROUTE)

    def test_astar_agrees_with_bidirectional(self) -> None:
        self.assertEqual(self.solver.solve_astar((0, 0), (4, 4)), self.solver.solve_bidirectional((0, 0), (4, 4)))

    def test_every_step_goes_through_an_open_wall(self) -> None:
        path = self.solver.solve((0, 0), (4, 4))
        for here, there in zip(path, path[1:]):
            self.assertTrue(self.grid.is_open(here, there))

    def test_reverse_direction_gives_reversed_route(self) -> None:
        path = self.solver.solve((4, 4), (0, 0))
        self.assertEqual([cell.position for cell in path], list(reversed(SEED_42_ROUTE)))

    def test_start_equal_to_end(self) -> None:
        self.assertEqual(self.solver.solve((2, 2), (2, 2)), [self.grid.cell(2, 2)])
        self.assertEqual(self.solver.solve_astar((2, 2), (2, 2)), [self.grid.cell(2, 2)])

    def test_accepts_cells_as_endpoints(self) -> None:
        path = self.solver.solve(self.grid.cell(0, 0), self.grid.cell(4, 4))
        self.assertEqual(len(path), len(SEED_42_ROUTE))

    def test_out_of_bounds_endpoints_raise(self) -> None:
        with self.assertRaises(IndexError):
            self.solver.solve((5, 0), (0, 0))
        with self.assertRaises(IndexError):
            self.solver.solve_astar((0, 0), (0, -1))

    def test_unreachable_goal_returns_empty_path(self) -> None:
        walled = MazeSolver(Grid(3, 3))
        self.assertEqual(walled.solve((0, 0), (2, 2)), [])
        self.assertEqual(walled.solve_astar((0, 0), (2, 2)), [])

    def test_partially_connected_grid(self) -> None:
        grid = Grid(3, 1)
        grid.remove_walls(grid.cell(0, 0), grid.cell(1, 0))
        solver = MazeSolver(grid)
        self.assertEqual(len(solver.solve((0, 0), (1, 0))), 2)
        self.assertEqual(solver.solve((0, 0), (2, 0)), [])

    def test_open_grid_paths_are_shortest(self) -> None:
        grid = _open_grid(6, 5)
        solver = MazeSolver(grid)
        astar = solver.solve_astar((0, 0), (5, 4))
        self.assertEqual(len(astar), 5 + 4 + 1)

        bidirectional = solver.solve_bidirectional((0, 0), (5, 4))
        result = PathEvaluator(grid).evaluate(bidirectional, (0, 0), (5, 4))
        self.assertTrue(result.is_valid, result.message)

    def test_solutions_on_generated_mazes_are_valid(self) -> None:
        for algorithm in ("prim", "kruskal", "wilson", "sidewinder", "binary-tree"):
            with self.subTest(algorithm=algorithm):
                grid = MazeGenerator(9, 7, algorithm, seed=17).generate()
                path = MazeSolver(grid).solve((0, 0), (8, 6))
                result = PathEvaluator(grid).evaluate(path, (0, 0), (8, 6))
                self.assertTrue(result.is_valid, result.message)
                self.assertEqual(path, MazeSolver(grid).solve_astar((0, 0), (8, 6)))


class MazeSolverObserverTests(unittest.TestCase):
    def setUp(self) -> None:
        self.grid = MazeGenerator(5, 5, seed=42).generate()

    def test_bidirectional_steps_end_at_the_meeting_node(self) -> None:
        steps = []
        path = MazeSolver(self.grid, on_step=steps.append).solve((0, 0), (4, 4))
        self.assertGreater(len(steps), 1)
        self.assertIsNotNone(steps[-1].meeting_node)
        self.assertIn(steps[-1].meeting_node, path)
        self.assertTrue(all(step.meeting_node is None for step in steps[:-1]))

    def test_astar_steps_only_fill_the_forward_side(self) -> None:
        steps = []
        MazeSolver(self.grid, on_step=steps.append).solve_astar((0, 0), (4, 4))
        self.assertEqual(steps[0].current_forward, self.grid.cell(0, 0))
        self.assertEqual(steps[-1].current_forward, self.grid.cell(4, 4))
        self.assertTrue(all(not step.open_backward and not step.closed_backward for step in steps))
        self.assertEqual(steps[0].to_dict()["closed_forward"], [[0, 0]])

    def test_observer_can_stop_the_search(self) -> None:
        solver = MazeSolver(self.grid, on_step=lambda step: True)
        with self.assertRaises(MazeAborted) as context:
            solver.solve((0, 0), (4, 4))
        self.assertIs(context.exception.grid, self.grid)


if __name__ == "__main__":
    unittest.main()
