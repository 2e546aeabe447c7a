from array import array

from maze_kit.core.direction import Direction
from maze_kit.core.errors import NoDirectionError, PositionOutOfBoundsError
from maze_kit.core.grid import Grid


class GridCarver:
    """
    Write access to a Grid, handed to generators only.

    add_wall/remove_wall are the only methods that touch two nodes; they keep
    A.wall(D) == B.wall(D.reverse()) for every interior edge.
    """
    __slots__ = ('grid', 'width', 'height', '_cells')

    def __init__(self, grid: Grid):
        self.grid = grid
        self.width = grid.width
        self.height = grid.height
        self._cells = grid._cells

    def _index(self, x: int, y: int) -> int:
        if 0 <= x < self.width and 0 <= y < self.height:
            return y * self.width + x
        raise PositionOutOfBoundsError(x, y, self.width, self.height)

    # Bulk operations

    def fill_walls(self):
        """Sets every wall bit, flags untouched."""
        cells = self._cells
        for i in range(len(cells)):
            cells[i] |= Grid.WALL_MASK

    def clear_walls(self):
        """Clears every wall bit, flags untouched."""
        cells = self._cells
        for i in range(len(cells)):
            cells[i] &= Grid.FLAG_MASK

    def reset(self):
        self._fill(0)

    def reset_fill(self):
        self._fill(Grid.ALL_WALLS)

    def reset_flags(self):
        cells = self._cells
        for i in range(len(cells)):
            cells[i] &= Grid.WALL_MASK

    def _fill(self, value: int):
        # Slice assignment keeps the same buffer, anything holding it stays valid
        self._cells[:] = array('B', [value]) * len(self._cells)

    def add_borders(self):
        cells = self._cells
        w, h = self.width, self.height
        for y in range(h):
            cells[y * w] |= Direction.WEST.mask
            cells[y * w + w - 1] |= Direction.EAST.mask
        for x in range(w):
            cells[x] |= Direction.NORTH.mask
            cells[(h - 1) * w + x] |= Direction.SOUTH.mask

    # Single edge operations

    def is_border(self, x: int, y: int, direction: Direction) -> bool:
        if not isinstance(direction, Direction):
            raise NoDirectionError(f"Expected a Direction, got {direction!r}")
        self._index(x, y)
        return not self.grid.in_bounds(x + direction.dx, y + direction.dy)

    def add_border(self, x: int, y: int, direction: Direction):
        if not self.is_border(x, y, direction):
            raise ValueError(f"({x}, {y}) {direction.name} is not a border")
        self._cells[y * self.width + x] |= direction.mask

    def remove_border(self, x: int, y: int, direction: Direction):
        if not self.is_border(x, y, direction):
            raise ValueError(f"({x}, {y}) {direction.name} is not a border")
        self._cells[y * self.width + x] &= ~direction.mask

    def add_wall(self, x: int, y: int, direction: Direction):
        if not isinstance(direction, Direction):
            raise NoDirectionError(f"Expected a Direction, got {direction!r}")
        self._cells[self._index(x, y)] |= direction.mask

        nx, ny = x + direction.dx, y + direction.dy
        if 0 <= nx < self.width and 0 <= ny < self.height:
            self._cells[ny * self.width + nx] |= direction.reverse().mask

    def remove_wall(self, x: int, y: int, direction: Direction):
        if not isinstance(direction, Direction):
            raise NoDirectionError(f"Expected a Direction, got {direction!r}")
        self._cells[self._index(x, y)] &= ~direction.mask

        nx, ny = x + direction.dx, y + direction.dy
        if 0 <= nx < self.width and 0 <= ny < self.height:
            self._cells[ny * self.width + nx] &= ~direction.reverse().mask

    carve = remove_wall

    # Node state

    def is_closed(self, x: int, y: int) -> bool:
        return (self._cells[self._index(x, y)] & Grid.WALL_MASK) == Grid.WALL_MASK

    def is_open(self, x: int, y: int) -> bool:
        return (self._cells[self._index(x, y)] & Grid.WALL_MASK) == 0

    def get_flags(self, x: int, y: int) -> int:
        return self._cells[self._index(x, y)] >> Grid.FLAG_SHIFT

    def set_flags(self, x: int, y: int, flags: int):
        if not 0 <= flags <= 0xF:
            raise ValueError(f"Flags must fit in 4 bits, got {flags}")
        idx = self._index(x, y)
        self._cells[idx] = (self._cells[idx] & Grid.WALL_MASK) | (flags << Grid.FLAG_SHIFT)
