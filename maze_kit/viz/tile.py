import numpy as np

from maze_kit.core.direction import Direction
from maze_kit.core.errors import PositionOutOfBoundsError
from maze_kit.core.grid import Grid


class TileMaze:
    """
    Tile view of a Grid, for renderers that draw walls as whole cells.

    A W x H grid becomes (2W+1) x (2H+1) tiles: even/even tiles are pillars
    (always wall), odd/odd tiles are node interiors (always open) and the
    mixed ones show one wall bit of the node next to them. Nothing is stored
    here; every query goes back to the grid.
    """
    __slots__ = ('grid', 'width', 'height')

    def __init__(self, grid: Grid):
        if not isinstance(grid, Grid):
            raise TypeError(f"Expected a Grid, got {grid!r}")
        self.grid = grid
        self.width = grid.width * 2 + 1
        self.height = grid.height * 2 + 1

    def is_wall(self, x: int, y: int) -> bool:
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise PositionOutOfBoundsError(x, y, self.width, self.height)

        x_even = x % 2 == 0
        y_even = y % 2 == 0
        if x_even and y_even:
            return True
        if x == 0:  # left border
            return self.grid.is_wall(0, (y - 1) // 2, Direction.WEST)
        if y == 0:  # top border
            return self.grid.is_wall((x - 1) // 2, 0, Direction.NORTH)
        if x_even:
            return self.grid.is_wall((x - 1) // 2, (y - 1) // 2, Direction.EAST)
        if y_even:
            return self.grid.is_wall((x - 1) // 2, (y - 1) // 2, Direction.SOUTH)
        return False

    def to_array(self) -> np.ndarray:
        """Boolean wall map, indexed [y, x]."""
        gw, gh = self.grid.width, self.grid.height
        walls = np.frombuffer(self.grid.tobytes(), dtype=np.uint8).reshape(gh, gw)

        tiles = np.zeros((self.height, self.width), dtype=bool)
        tiles[0::2, 0::2] = True
        tiles[0, 1::2] = (walls[0, :] & Direction.NORTH.mask) != 0
        tiles[1::2, 0] = (walls[:, 0] & Direction.WEST.mask) != 0
        tiles[1::2, 2::2] = (walls & Direction.EAST.mask) != 0
        tiles[2::2, 1::2] = (walls & Direction.SOUTH.mask) != 0
        return tiles

    def __str__(self) -> str:
        from maze_kit.viz.ascii import render_tiles
        return render_tiles(self)
