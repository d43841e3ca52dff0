import sys
from typing import AbstractSet, Iterable, List, Optional, TextIO
from textmaze.core.grid import Cell, Grid

class TextRenderer:
    """
    Draws a grid as double-wide block art: each cell is followed by its
    east wall, and each row by a line of south walls.
    """
    WALL = "█"
    FLOOR = " "
    START = "S"
    FINISH = "E"
    BREADCRUMB = "."

    def __init__(self, grid: Grid, start: Cell, finish: Cell,
                 path: Optional[Iterable[Cell]] = None,
                 mask: Optional[AbstractSet[Cell]] = None):
        self.grid = grid
        self.start = start
        self.finish = finish
        self.breadcrumbs = set(path) if path else set()
        self.mask = mask if mask is not None else frozenset()

    def cell_char(self, y: int, x: int) -> str:
        cell = (y, x)
        if cell == self.start:
            return self.START
        if cell == self.finish:
            return self.FINISH
        if cell in self.breadcrumbs:
            return self.BREADCRUMB
        if cell in self.mask:
            return self.WALL
        return self.FLOOR

    def render_lines(self) -> List[str]:
        grid = self.grid
        wall = self.WALL
        lines = [wall * (2 * grid.width + 1)]

        for y in range(grid.height):
            cells = [wall]
            walls = [wall]
            for x in range(grid.width):
                cells.append(self.cell_char(y, x))
                cells.append(self.FLOOR if grid.has_east(y, x) else wall)
                walls.append(self.FLOOR + wall if grid.has_south(y, x) else wall * 2)
            lines.append("".join(cells))
            lines.append("".join(walls))

        return lines

    def render(self) -> str:
        return "\n".join(self.render_lines()) + "\n"

    def draw(self, stream: Optional[TextIO] = None):
        (stream or sys.stdout).write(self.render())
