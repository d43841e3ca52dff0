import random
from abc import ABC, abstractmethod
from typing import Iterator
from textmaze.core.grid import Cell, Grid

class Generator(ABC):
    """
    Carves passages into 'grid' until 'start' and 'finish' are joined.
    The random stream belongs to the caller and is consumed in order,
    so a seeded stream reproduces the same grid.
    """
    def __init__(self, grid: Grid, rng: random.Random, start: Cell, finish: Cell):
        for cell in (start, finish):
            grid.get_index(*cell)
        self.grid = grid
        self.rng = rng
        self.start = start
        self.finish = finish

    @abstractmethod
    def run(self) -> Iterator[str]:
        """
        Yields status strings while walls come down in-place on self.grid.
        """
        pass

    def run_all(self) -> Grid:
        for _ in self.run():
            pass
        return self.grid
