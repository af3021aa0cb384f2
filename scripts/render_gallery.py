#!/usr/bin/env python3
"""Render one solved maze per generation algorithm for side-by-side comparison."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from mazecraft import Algorithm, Direction, MazeGenerator, MazeSolver, render_image


def _parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument(
        "--output-dir",
        type=Path,
        default=Path("data/gallery"),
        help="Directory to write one PNG per algorithm",
    )
    parser.add_argument("--width", type=int, default=24, help="Maze width in cells")
    parser.add_argument("--height", type=int, default=16, help="Maze height in cells")
    parser.add_argument("--cell-size", type=int, default=20, help="Pixel size of a single cell")
    parser.add_argument(
        "--seed",
        type=int,
        default=42,
        help="Seed shared by every algorithm so runs are reproducible",
    )
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")
    return parser.parse_args()


def main() -> None:
    args = _parse_args()
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    output_dir = args.output_dir.resolve()
    output_dir.mkdir(parents=True, exist_ok=True)

    algorithms = list(Algorithm)
    for index, algorithm in enumerate(algorithms, start=1):
        grid = MazeGenerator(args.width, args.height, algorithm, seed=args.seed).generate()
        start = grid.cell(0, 0)
        end = grid.cell(grid.width - 1, grid.height - 1)
        grid.open_boundary(start, Direction.UP)
        grid.open_boundary(end, Direction.DOWN)
        path = MazeSolver(grid).solve(start.position, end.position)

        image_path = output_dir / f"{algorithm.value}.png"
        render_image(grid, path=path, cell_size=args.cell_size).save(image_path)
        print(f"[{index}/{len(algorithms)}] {algorithm.value}: path of {len(path)} cells -> {image_path}")

    print(f"Wrote {len(algorithms)} images to {output_dir}")


if __name__ == "__main__":
    main()
