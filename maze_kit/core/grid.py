from array import array

from maze_kit.core.direction import Direction
from maze_kit.core.errors import MazeDimensionError, NoDirectionError, PositionOutOfBoundsError

# byte -> byte with the flag nibble cleared
_WALLS_ONLY = bytes(v & 0x0F for v in range(256))


class Grid:
    """
    Read-only view of a maze.

    Every node is one byte in a single linear buffer (index = y * width + x).
    The low nibble holds the four wall bits (see Direction.mask), the high
    nibble is scratch space for the generators and is always cleared once a
    maze is finished. Mutation goes through GridCarver, which only the
    generators use.
    """
    # Bitmask Constants
    WALL_MASK = 0b00001111
    FLAG_MASK = 0b11110000
    FLAG_SHIFT = 4

    # All walls present (N|E|S|W) = 15
    ALL_WALLS = WALL_MASK

    __slots__ = ('_width', '_height', '_cells')

    def __init__(self, width: int, height: int):
        if any(not isinstance(v, int) or isinstance(v, bool) for v in (width, height)):
            raise MazeDimensionError(f"Width and height must be integers, got {width!r}x{height!r}")
        if width <= 0 or height <= 0:
            raise MazeDimensionError(f"Width and height must be positive, got {width}x{height}")
        self._width = width
        self._height = height
        # 'B' (unsigned char) -> 1 byte per node, no walls and no flags yet
        self._cells = array('B', bytes(width * height))

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    @property
    def size(self) -> int:
        return self._width * self._height

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self._width and 0 <= y < self._height

    def check_position(self, x: int, y: int):
        if not (0 <= x < self._width and 0 <= y < self._height):
            raise PositionOutOfBoundsError(x, y, self._width, self._height)

    def get_index(self, x: int, y: int) -> int:
        self.check_position(x, y)
        return y * self._width + x

    def is_wall(self, x: int, y: int, direction: Direction) -> bool:
        if not isinstance(direction, Direction):
            raise NoDirectionError(f"Expected a Direction, got {direction!r}")
        self.check_position(x, y)
        return (self._cells[y * self._width + x] & direction.mask) != 0

    def tobytes(self) -> bytes:
        """Wall bits of every node, flags masked out."""
        return self._cells.tobytes().translate(_WALLS_ONLY)

    def __str__(self) -> str:
        from maze_kit.viz.ascii import render_grid
        return render_grid(self)

    def __repr__(self) -> str:
        return f"Grid({self._width}, {self._height})"
