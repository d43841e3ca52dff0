from array import array
from typing import Tuple

class DisjointSet:
    """
    Union-find over the cells of a width*height grid.
    Parents live in a dense index arena (one slot per cell, row-major),
    with union by rank and path halving.
    """
    __slots__ = ('width', 'height', 'parent', 'rank', 'components')

    def __init__(self, width: int, height: int):
        self.width = width
        self.height = height
        size = width * height
        self.parent = array('i', range(size))
        # Rank never exceeds log2(size), fits a byte
        self.rank = array('B', [0] * size)
        self.components = size

    def _index(self, cell: Tuple[int, int]) -> int:
        y, x = cell
        return y * self.width + x

    def _find(self, i: int) -> int:
        parent = self.parent
        while parent[i] != i:
            parent[i] = parent[parent[i]]
            i = parent[i]
        return i

    def find_representative(self, cell: Tuple[int, int]) -> int:
        return self._find(self._index(cell))

    def union(self, a: Tuple[int, int], b: Tuple[int, int]) -> bool:
        """Merges the components of a and b. Returns False if already merged."""
        ra = self.find_representative(a)
        rb = self.find_representative(b)
        if ra == rb:
            return False

        if self.rank[ra] < self.rank[rb]:
            ra, rb = rb, ra
        self.parent[rb] = ra
        if self.rank[ra] == self.rank[rb]:
            self.rank[ra] += 1

        self.components -= 1
        return True

    def connected(self, a: Tuple[int, int], b: Tuple[int, int]) -> bool:
        return self.find_representative(a) == self.find_representative(b)
