"""Carving algorithms.

Each function starts from a fully walled, unvisited grid and removes walls until
the passages form a spanning tree. Every random draw goes through the run's
single ``rng``.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Dict, List, Optional, Sequence, Tuple

from ..base import GenerationStep, StepReporter
from ..grid import Cell, Grid
from ..rng import RandomSource, choice, random_index, shuffle
from ..structures import DisjointSet
from .options import Algorithm, GeneratorOptions, GrowingTreeStrategy


@dataclass
class CarveRun:
    grid: Grid
    rng: RandomSource
    options: GeneratorOptions
    reporter: StepReporter

    def step(
        self,
        *,
        current_cell: Optional[Cell] = None,
        active_set: Sequence[Cell] = (),
        stack: Sequence[Cell] = (),
        walk_path: Sequence[Cell] = (),
    ) -> None:
        self.reporter.report(
            lambda: GenerationStep(
                grid=self.grid,
                current_cell=current_cell,
                active_set=list(active_set),
                stack=list(stack),
                walk_path=list(walk_path),
            )
        )

    def random_cell(self) -> Cell:
        # Row is drawn before column.
        y = random_index(self.rng, self.grid.height)
        x = random_index(self.rng, self.grid.width)
        return self.grid.cell(x, y)


def carve_recursive_backtracker(run: CarveRun, *, biased: bool = False) -> None:
    grid, rng = run.grid, run.rng
    start = grid.cell(0, 0)
    start.visited = True
    stack: List[Cell] = [start]

    while stack:
        current = stack[-1]
        neighbors = grid.unvisited_neighbors(current)
        run.step(stack=stack, current_cell=current)

        if not neighbors:
            stack.pop()
            run.step(stack=stack)
            continue

        if biased:
            chosen = _straight_or_random(run, stack, neighbors)
        else:
            chosen = choice(rng, neighbors)
        grid.remove_walls(current, chosen)
        chosen.visited = True
        stack.append(chosen)


def _straight_or_random(run: CarveRun, stack: List[Cell], neighbors: List[Cell]) -> Cell:
    current = stack[-1]
    straight: Optional[Cell] = None
    if len(stack) > 1:
        previous = stack[-2]
        dx, dy = current.x - previous.x, current.y - previous.y
        straight = next(
            (n for n in neighbors if n.x - current.x == dx and n.y - current.y == dy),
            None,
        )
    if straight is not None and run.rng.random() < run.options.straight_bias:
        return straight
    return choice(run.rng, neighbors)


def carve_prim(run: CarveRun) -> None:
    grid, rng = run.grid, run.rng
    start = run.random_cell()
    start.visited = True

    frontier: List[Tuple[Cell, Cell]] = []

    def add_frontier(cell: Cell) -> None:
        frontier.extend((cell, neighbor) for neighbor in grid.neighbors(cell))

    add_frontier(start)
    while frontier:
        source, target = frontier.pop(random_index(rng, len(frontier)))
        if target.visited:
            continue
        run.step(current_cell=target, active_set=[source])
        grid.remove_walls(source, target)
        target.visited = True
        add_frontier(target)


def carve_kruskal(run: CarveRun) -> None:
    grid = run.grid
    walls: List[Tuple[Cell, Cell]] = []
    for cell in grid:
        if cell.y < grid.height - 1:
            walls.append((cell, grid.cell(cell.x, cell.y + 1)))
        if cell.x < grid.width - 1:
            walls.append((cell, grid.cell(cell.x + 1, cell.y)))
    shuffle(run.rng, walls)

    sets: DisjointSet[int] = DisjointSet(cell.index for cell in grid)
    for first, second in walls:
        if sets.union(first.index, second.index):
            grid.remove_walls(first, second)
            run.step(active_set=[first, second])


def carve_wilson(run: CarveRun) -> None:
    grid, rng = run.grid, run.rng
    run.random_cell().visited = True

    pending = [cell for cell in grid if not cell.visited]
    shuffle(rng, pending)

    for start in pending:
        if start.visited:
            continue
        walk: List[Cell] = [start]
        current = start
        while not current.visited:
            following = choice(rng, grid.neighbors(current))
            if following in walk:
                # Loop: erase everything after the first visit.
                del walk[walk.index(following) + 1:]
            else:
                walk.append(following)
            current = following
            run.step(walk_path=walk, current_cell=current)

        for here, there in zip(walk, walk[1:]):
            grid.remove_walls(here, there)
            here.visited = True
            run.step(active_set=[here, there])


def carve_growing_tree(run: CarveRun) -> None:
    grid, rng = run.grid, run.rng
    strategy = run.options.growing_tree_strategy
    start = run.random_cell()
    start.visited = True
    active: List[Cell] = [start]

    while active:
        if strategy is GrowingTreeStrategy.NEWEST:
            index = len(active) - 1
        elif strategy is GrowingTreeStrategy.OLDEST:
            index = 0
        else:
            index = random_index(rng, len(active))
        current = active[index]
        neighbors = grid.unvisited_neighbors(current)
        run.step(active_set=active, current_cell=current)

        if neighbors:
            chosen = choice(rng, neighbors)
            grid.remove_walls(current, chosen)
            chosen.visited = True
            active.append(chosen)
        else:
            del active[index]


def carve_binary_tree(run: CarveRun) -> None:
    grid = run.grid
    bias = run.options.binary_tree_bias
    north = bias.vertical == "north"
    west = bias.horizontal == "west"

    for cell in grid:
        candidates: List[Cell] = []
        if north and cell.y > 0:
            candidates.append(grid.cell(cell.x, cell.y - 1))
        if not north and cell.y < grid.height - 1:
            candidates.append(grid.cell(cell.x, cell.y + 1))
        if west and cell.x > 0:
            candidates.append(grid.cell(cell.x - 1, cell.y))
        if not west and cell.x < grid.width - 1:
            candidates.append(grid.cell(cell.x + 1, cell.y))
        if not candidates:
            continue
        neighbor = choice(run.rng, candidates)
        grid.remove_walls(cell, neighbor)
        run.step(current_cell=cell, active_set=[neighbor])


def carve_aldous_broder(run: CarveRun) -> None:
    """Pure random walk. Terminates with probability one; no iteration cap."""
    grid, rng = run.grid, run.rng
    current = run.random_cell()
    current.visited = True
    remaining = len(grid) - 1

    while remaining > 0:
        following = choice(rng, grid.neighbors(current))
        if not following.visited:
            grid.remove_walls(current, following)
            following.visited = True
            remaining -= 1
        current = following
        run.step(current_cell=current)


def carve_sidewinder(run: CarveRun) -> None:
    grid, rng = run.grid, run.rng
    for row in grid.rows():
        run_cells: List[Cell] = []
        for cell in row:
            run_cells.append(cell)
            at_east = cell.x == grid.width - 1
            at_north = cell.y == 0
            # The north row has nothing above it, so its run spans the row.
            close_run = at_east or (not at_north and rng.random() < 0.5)

            if close_run:
                passage = choice(rng, run_cells)
                if not at_north:
                    grid.remove_walls(passage, grid.cell(passage.x, passage.y - 1))
                run.step(active_set=run_cells, current_cell=passage)
                run_cells = []
            else:
                east = grid.cell(cell.x + 1, cell.y)
                grid.remove_walls(cell, east)
                run.step(active_set=run_cells + [east])


CARVERS: Dict[Algorithm, Callable[[CarveRun], None]] = {
    Algorithm.RECURSIVE_BACKTRACKER: carve_recursive_backtracker,
    Algorithm.RECURSIVE_BACKTRACKER_BIASED: lambda run: carve_recursive_backtracker(run, biased=True),
    Algorithm.PRIM: carve_prim,
    Algorithm.KRUSKAL: carve_kruskal,
    Algorithm.WILSON: carve_wilson,
    Algorithm.GROWING_TREE: carve_growing_tree,
    Algorithm.BINARY_TREE: carve_binary_tree,
    Algorithm.ALDOUS_BRODER: carve_aldous_broder,
    Algorithm.SIDEWINDER: carve_sidewinder,
}


__all__ = [
    "CARVERS",
    "CarveRun",
    "carve_aldous_broder",
    "carve_binary_tree",
    "carve_growing_tree",
    "carve_kruskal",
    "carve_prim",
    "carve_recursive_backtracker",
    "carve_sidewinder",
    "carve_wilson",
]
