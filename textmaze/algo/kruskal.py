import logging
import random
from typing import AbstractSet, Iterator, Optional
from textmaze.core.grid import Cell, Grid
from textmaze.core.disjoint_set import DisjointSet
from textmaze.algo.base import Generator

logger = logging.getLogger(__name__)

class RandomizedKruskal(Generator):
    """
    Knocks down random walls between disconnected components until
    'start' and 'finish' share a component.

    Stops as soon as the two endpoints connect, so the rest of the grid
    may stay fragmented. Every merge joins two separate components, which
    keeps each component a tree: exactly one path joins start and finish.

    A mask that separates start from finish makes run() loop forever.
    Masked cells must not include start or finish.
    """

    def __init__(self, grid: Grid, rng: random.Random, start: Cell, finish: Cell,
                 mask: Optional[AbstractSet[Cell]] = None):
        super().__init__(grid, rng, start, finish)
        self.mask = mask if mask is not None else frozenset()
        self.total_iterations = 0
        self.productive_iterations = 0

    @property
    def productive_percent(self) -> float:
        if self.total_iterations == 0:
            return 0.0
        return 100.0 * self.productive_iterations / self.total_iterations

    def run(self) -> Iterator[str]:
        grid = self.grid
        rng = self.rng
        mask = self.mask
        width, height = grid.width, grid.height

        # One component per cell, discarded when generation ends
        components = DisjointSet(width, height)

        if components.connected(self.start, self.finish):
            yield "Done"
            return

        # Orientations with at least one candidate wall
        orientations = []
        if width > 1:
            orientations.append(Grid.EAST)
        if height > 1:
            orientations.append(Grid.SOUTH)

        while True:
            self.total_iterations += 1
            if self.total_iterations % 1000 == 0:
                yield f"Iterations: {self.total_iterations}"

            orientation = orientations[rng.randrange(len(orientations))]
            if orientation == Grid.EAST:
                x = rng.randrange(width - 1)
                y = rng.randrange(height)
                other = (y, x + 1)
                flags = grid.to_east
            else:
                x = rng.randrange(width)
                y = rng.randrange(height - 1)
                other = (y + 1, x)
                flags = grid.to_south

            cell = (y, x)
            if cell in mask or other in mask:
                continue

            if flags[y, x]:
                continue # No change

            if not components.union(cell, other):
                continue # Would close a cycle

            grid.carve(y, x, orientation)
            self.productive_iterations += 1

            # Only test start/finish on iterations that change connectivity
            if components.connected(self.start, self.finish):
                break

        logger.debug(
            f"Connected {self.start} to {self.finish} after "
            f"{self.productive_iterations}/{self.total_iterations} productive iterations"
        )
        yield "Done"


def generate(width: int, height: int, start: Cell, finish: Cell,
             mask: Optional[AbstractSet[Cell]], rng: random.Random) -> Grid:
    """Builds a grid with exactly one path from start to finish."""
    return RandomizedKruskal(Grid(width, height), rng, start, finish, mask).run_all()
