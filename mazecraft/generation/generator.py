"""Maze generator front-end and command line entry point."""

from __future__ import annotations

import argparse
import logging
from pathlib import Path
from typing import List, Optional, Union

from ..base import GenerationStep, StepCallback, StepReporter
from ..grid import Direction, Grid
from ..rng import create_random
from .algorithms import CARVERS, CarveRun
from .options import (
    Algorithm,
    BinaryTreeBias,
    GeneratorOptions,
    GrowingTreeStrategy,
    coerce_enum,
)

logger = logging.getLogger(__name__)


class MazeGenerator(StepReporter[GenerationStep]):
    """Generate perfect mazes on a rectangular grid.

    All arguments are validated here, before any grid exists or any random
    number is drawn. The random source is created once per generator, so two
    generators built with the same arguments and seed carve identical mazes.
    """

    def __init__(
        self,
        width: int,
        height: int,
        algorithm: Union[Algorithm, str] = Algorithm.RECURSIVE_BACKTRACKER,
        *,
        seed: Optional[int] = None,
        straight_bias: float = 0.75,
        growing_tree_strategy: Union[GrowingTreeStrategy, str] = GrowingTreeStrategy.RANDOM,
        binary_tree_bias: Union[BinaryTreeBias, str] = BinaryTreeBias.NORTH_WEST,
        on_step: Optional[StepCallback] = None,
    ) -> None:
        for value in (width, height):
            if isinstance(value, bool) or not isinstance(value, int):
                raise ValueError("Width and height must be integers.")
        if width <= 0 or height <= 0:
            raise ValueError("Width and height must be greater than 0.")
        super().__init__(on_step)
        self.width = width
        self.height = height
        self.algorithm = coerce_enum(Algorithm, algorithm, "algorithm")
        self.options = GeneratorOptions(
            seed=seed,
            straight_bias=straight_bias,
            growing_tree_strategy=growing_tree_strategy,
            binary_tree_bias=binary_tree_bias,
            on_step=on_step,
        )
        self._rng = create_random(seed)

    @classmethod
    def from_options(
        cls,
        width: int,
        height: int,
        algorithm: Union[Algorithm, str],
        options: GeneratorOptions,
    ) -> "MazeGenerator":
        return cls(
            width,
            height,
            algorithm,
            seed=options.seed,
            straight_bias=options.straight_bias,
            growing_tree_strategy=options.growing_tree_strategy,
            binary_tree_bias=options.binary_tree_bias,
            on_step=options.on_step,
        )

    def generate(self) -> Grid:
        """Carve a fresh grid and return it.

        Raises :class:`~mazecraft.base.MazeAborted` if the step observer asks
        to stop; the exception carries the partially carved grid.
        """
        grid = Grid(self.width, self.height)
        logger.debug(
            "Generating %dx%d maze with %s (seed=%s)",
            self.width,
            self.height,
            self.algorithm.value,
            self.options.seed,
        )
        run = CarveRun(grid=grid, rng=self._rng, options=self.options, reporter=self)
        CARVERS[self.algorithm](run)
        logger.debug("Carved %d passages", grid.passage_count())
        return grid


__all__ = ["MazeGenerator"]


def _parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Generate and solve a rectangular maze")
    parser.add_argument("width", type=int, help="Number of columns")
    parser.add_argument("height", type=int, help="Number of rows")
    parser.add_argument(
        "--algorithm",
        choices=[algorithm.value for algorithm in Algorithm],
        default=Algorithm.RECURSIVE_BACKTRACKER.value,
    )
    parser.add_argument("--seed", type=int, default=None)
    parser.add_argument("--straight-bias", type=float, default=0.75, help="Only used by the biased backtracker")
    parser.add_argument(
        "--strategy",
        choices=[strategy.value for strategy in GrowingTreeStrategy],
        default=GrowingTreeStrategy.RANDOM.value,
        help="Cell selection strategy for growing-tree",
    )
    parser.add_argument(
        "--binary-bias",
        choices=[bias.value for bias in BinaryTreeBias],
        default=BinaryTreeBias.NORTH_WEST.value,
        help="Carving directions for binary-tree",
    )
    parser.add_argument("--no-solve", action="store_true", help="Skip solving from top-left to bottom-right")
    parser.add_argument("--solver", choices=["bidirectional", "astar"], default="bidirectional")
    parser.add_argument("--image", type=Path, default=None, help="Also write a PNG rendering to this path")
    parser.add_argument("--cell-size", type=int, default=16)
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> None:
    from ..render import render_image, render_text
    from ..solving import MazeSolver

    args = _parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    generator = MazeGenerator(
        args.width,
        args.height,
        args.algorithm,
        seed=args.seed,
        straight_bias=args.straight_bias,
        growing_tree_strategy=args.strategy,
        binary_tree_bias=args.binary_bias,
    )
    grid = generator.generate()

    start = grid.cell(0, 0)
    end = grid.cell(grid.width - 1, grid.height - 1)
    grid.open_boundary(start, Direction.UP)
    grid.open_boundary(end, Direction.DOWN)

    path = []
    if not args.no_solve:
        solver = MazeSolver(grid)
        if args.solver == "astar":
            path = solver.solve_astar(start.position, end.position)
        else:
            path = solver.solve_bidirectional(start.position, end.position)

    print(render_text(grid, path))
    if path:
        print(f"Path length: {len(path)} cells")
    if args.image is not None:
        image = render_image(grid, path=path, cell_size=args.cell_size)
        args.image.parent.mkdir(parents=True, exist_ok=True)
        image.save(args.image)
        print(f"Wrote {args.image}")


if __name__ == "__main__":
    main()
