import numpy as np
from typing import Iterator, Tuple

# (row, column)
Cell = Tuple[int, int]

class Grid:
    """
    Connectivity grid. Only east and south edges are stored:
    west/north connectivity of (y, x) is read from the neighbour's flag.
    """
    # Direction bits
    NORTH = 0b0001
    EAST  = 0b0010
    SOUTH = 0b0100
    WEST  = 0b1000

    DX = {NORTH: 0, SOUTH: 0, EAST: 1, WEST: -1}
    DY = {NORTH: -1, SOUTH: 1, EAST: 0, WEST: 0}

    __slots__ = ('width', 'height', 'to_east', 'to_south')

    def __init__(self, width: int, height: int):
        if width < 1 or height < 1:
            raise ValueError(f"Grid must be at least 1x1, got {width}x{height}")
        self.width = width
        self.height = height
        # All walls up
        self.to_east = np.zeros((height, width), dtype=bool)
        self.to_south = np.zeros((height, width), dtype=bool)

    def in_bounds(self, y: int, x: int) -> bool:
        return 0 <= y < self.height and 0 <= x < self.width

    def get_index(self, y: int, x: int) -> int:
        if self.in_bounds(y, x):
            return y * self.width + x
        raise IndexError(f"Cell ({y}, {x}) out of bounds")

    def carve(self, y: int, x: int, dir_bit: int) -> bool:
        """
        Removes the wall between (y, x) and its neighbour in 'dir_bit'.
        North/west walls are stored on the neighbour, so they are rewritten
        as the neighbour's south/east flag.
        Returns False if the neighbour is outside the grid.
        """
        ny, nx = y + self.DY[dir_bit], x + self.DX[dir_bit]
        if not (self.in_bounds(y, x) and self.in_bounds(ny, nx)):
            return False # Cannot carve into void

        if dir_bit == self.EAST:
            self.to_east[y, x] = True
        elif dir_bit == self.SOUTH:
            self.to_south[y, x] = True
        elif dir_bit == self.WEST:
            self.to_east[ny, nx] = True
        else:
            self.to_south[ny, nx] = True
        return True

    def has_east(self, y: int, x: int) -> bool:
        return x + 1 < self.width and bool(self.to_east[y, x])

    def has_south(self, y: int, x: int) -> bool:
        return y + 1 < self.height and bool(self.to_south[y, x])

    def has_west(self, y: int, x: int) -> bool:
        return x > 0 and bool(self.to_east[y, x - 1])

    def has_north(self, y: int, x: int) -> bool:
        return y > 0 and bool(self.to_south[y - 1, x])

    def is_open(self, a: Cell, b: Cell) -> bool:
        """True if a and b are cardinal neighbours joined by an open edge."""
        (y1, x1), (y2, x2) = a, b
        if not (self.in_bounds(y1, x1) and self.in_bounds(y2, x2)):
            return False
        if y1 == y2 and abs(x1 - x2) == 1:
            return self.has_east(y1, min(x1, x2))
        if x1 == x2 and abs(y1 - y2) == 1:
            return self.has_south(min(y1, y2), x1)
        return False

    def get_open_neighbors(self, y: int, x: int) -> Iterator[Cell]:
        """
        Yields neighbours reachable through an open wall, in N, E, S, W order.
        """
        if self.has_north(y, x):
            yield (y - 1, x)
        if self.has_east(y, x):
            yield (y, x + 1)
        if self.has_south(y, x):
            yield (y + 1, x)
        if self.has_west(y, x):
            yield (y, x - 1)

    def open_wall_count(self) -> int:
        return int(self.to_east.sum() + self.to_south.sum())

    def tobytes(self) -> bytes:
        return self.to_east.tobytes() + self.to_south.tobytes()
