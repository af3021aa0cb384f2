import io
import tempfile
import unittest
from contextlib import redirect_stdout
from pathlib import Path

from mazecraft import Direction, Grid, HighlightSets, MazeGenerator, MazeSolver, render_image, render_text
from mazecraft.generation.generator import main
from mazecraft.render.image import GOAL_COLOR, PATH_COLOR, START_COLOR, WALL_COLOR


class RenderTextTests(unittest.TestCase):
    def test_fresh_grid(self) -> None:
        self.assertEqual(render_text(Grid(2, 1)), "+---+---+\n|   |   |\n+---+---+")

    def test_path_cells_are_marked(self) -> None:
        grid = MazeGenerator(5, 5, seed=42).generate()
        path = MazeSolver(grid).solve((0, 0), (4, 4))
        drawing = render_text(grid, path)
        self.assertEqual(drawing.count("."), len(path))
        self.assertEqual(drawing.splitlines()[1], "| . |               |")

    def test_highlight_precedence(self) -> None:
        grid = Grid(3, 1)
        first, second, third = grid.rows()[0]
        highlights = HighlightSets(
            path={first},
            forward_open={first, second},
            backward_open={second},
            forward_closed={third},
            backward_closed={third},
        )
        self.assertEqual(render_text(grid, highlights).splitlines()[1], "| . | O | X |")

    def test_opened_boundary_is_drawn(self) -> None:
        grid = Grid(1, 1)
        grid.open_boundary(grid.cell(0, 0), Direction.UP)
        self.assertEqual(render_text(grid).splitlines()[0], "+   +")


class RenderImageTests(unittest.TestCase):
    def test_canvas_size(self) -> None:
        image = render_image(Grid(3, 2), cell_size=10, wall_size=2)
        self.assertEqual(image.size, (38, 26))

    def test_default_wall_size(self) -> None:
        image = render_image(Grid(1, 1), cell_size=16)
        self.assertEqual(image.size, (16 + 2 * 4, 16 + 2 * 4))

    def test_walls_and_cells(self) -> None:
        image = render_image(Grid(3, 2), cell_size=10, wall_size=2)
        self.assertEqual(image.getpixel((0, 0)), WALL_COLOR)
        self.assertEqual(image.getpixel((7, 7)), PATH_COLOR)
        # Wall block between cells (0, 0) and (1, 0).
        self.assertEqual(image.getpixel((12, 7)), WALL_COLOR)

    def test_removed_wall_is_not_drawn(self) -> None:
        grid = Grid(2, 1)
        grid.remove_walls(grid.cell(0, 0), grid.cell(1, 0))
        image = render_image(grid, cell_size=10, wall_size=2)
        self.assertEqual(image.getpixel((12, 7)), PATH_COLOR)

    def test_path_endpoints_are_colored(self) -> None:
        grid = Grid(2, 1)
        grid.remove_walls(grid.cell(0, 0), grid.cell(1, 0))
        image = render_image(grid, path=[grid.cell(0, 0), grid.cell(1, 0)], cell_size=10, wall_size=2)
        self.assertEqual(image.getpixel((3, 3)), START_COLOR)
        self.assertEqual(image.getpixel((23, 3)), GOAL_COLOR)

    def test_single_cell_path(self) -> None:
        grid = Grid(1, 1)
        image = render_image(grid, path=[grid.cell(0, 0)], cell_size=10, wall_size=2)
        self.assertEqual(image.getpixel((3, 3)), GOAL_COLOR)

    def test_invalid_sizes_raise(self) -> None:
        with self.assertRaises(ValueError):
            render_image(Grid(2, 2), cell_size=0)
        with self.assertRaises(ValueError):
            render_image(Grid(2, 2), cell_size=8, wall_size=0)


class CommandLineTests(unittest.TestCase):
    def _run(self, *argv: str) -> str:
        buffer = io.StringIO()
        with redirect_stdout(buffer):
            main(list(argv))
        return buffer.getvalue()

    def test_prints_maze_and_path_length(self) -> None:
        output = self._run("5", "5", "--seed", "42")
        self.assertIn("Path length: 19 cells", output)
        self.assertTrue(output.startswith("+   +---+"))

    def test_astar_solver_option(self) -> None:
        output = self._run("5", "5", "--seed", "42", "--solver", "astar")
        self.assertIn("Path length: 19 cells", output)

    def test_no_solve(self) -> None:
        output = self._run("4", "3", "--seed", "1", "--algorithm", "sidewinder", "--no-solve")
        self.assertNotIn("Path length", output)
        self.assertNotIn(".", output)

    def test_writes_image(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            target = Path(tmp) / "out" / "maze.png"
            output = self._run("6", "4", "--seed", "3", "--algorithm", "prim", "--image", str(target))
            self.assertTrue(target.exists())
            self.assertIn(f"Wrote {target}", output)


if __name__ == "__main__":
    unittest.main()
