from abc import ABC, abstractmethod
from array import array
from collections import deque
from typing import Iterator, List, Optional, Type
from textmaze.core.grid import Cell, Grid

class Solver(ABC):
    def __init__(self, grid: Grid):
        self.grid = grid
        self.path: List[Cell] = []
        self.visited_count = 0

    @abstractmethod
    def run(self, start: Cell, end: Cell) -> Iterator[str]:
        pass

class DepthFirstSolver(Solver):
    """
    Exhaustive depth-first search over open walls.

    Each stack entry owns its own copy of the path so far. A cell is only
    rejected if it already lies on that branch, so it may be reached again
    through a different branch. On a tree-shaped maze this stays linear.
    """
    def run(self, start: Cell, end: Cell) -> Iterator[str]:
        fringe: List[List[Cell]] = [[start]]

        while fringe:
            some_path = fringe.pop()
            current = some_path[-1]
            self.visited_count += 1

            if current == end:
                self.path = some_path
                break

            for nxt in self.grid.get_open_neighbors(*current):
                # Reverse scan: a revisit is most likely a recent cell
                if nxt not in reversed(some_path):
                    fringe.append(some_path + [nxt])

            if self.visited_count % 100 == 0:
                yield f"Visited: {self.visited_count}"

        yield "Solved" if self.path else "No path"

class BFS(Solver):
    def run(self, start: Cell, end: Cell) -> Iterator[str]:
        width = self.grid.width
        # Dense parent array: -1 = unvisited
        self.parents = array('i', [-1] * (width * self.grid.height))

        start_idx = self.grid.get_index(*start)
        self.parents[start_idx] = start_idx
        self.visited_count = 1

        queue = deque([start])
        found = False
        while queue:
            current = queue.popleft()
            if current == end:
                found = True
                break

            current_idx = current[0] * width + current[1]
            for ny, nx in self.grid.get_open_neighbors(*current):
                idx = ny * width + nx
                if self.parents[idx] == -1:
                    self.parents[idx] = current_idx
                    self.visited_count += 1
                    queue.append((ny, nx))

            if self.visited_count % 100 == 0:
                yield f"Visited: {self.visited_count}"

        if found:
            self.reconstruct_path(start, end)
        yield "Solved" if self.path else "No path"

    def reconstruct_path(self, start: Cell, end: Cell):
        width = self.grid.width
        start_idx = self.grid.get_index(*start)
        idx = self.grid.get_index(*end)
        while idx != start_idx:
            self.path.append(divmod(idx, width))
            idx = self.parents[idx]
        self.path.append(start)
        self.path.reverse()

SOLVERS = {
    "dfs": DepthFirstSolver,
    "bfs": BFS,
}

def solve(grid: Grid, start: Cell, finish: Cell,
          solver_cls: Type[Solver] = DepthFirstSolver) -> Optional[List[Cell]]:
    """Returns the path from start to finish, or None if there is none."""
    solver = solver_cls(grid)
    for _ in solver.run(start, finish):
        pass
    return solver.path if solver.path else None
