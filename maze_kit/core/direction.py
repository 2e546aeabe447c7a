from enum import Enum


class Direction(Enum):
    """
    The four cardinal directions.
    Each one carries its wall bit, its (dx, dy) step and an ordinal (0-3)
    small enough to be packed into the grid's flag nibble.
    """
    # (mask, dx, dy)
    NORTH = (0b0001, 0, -1)
    EAST  = (0b0010, 1, 0)
    SOUTH = (0b0100, 0, 1)
    WEST  = (0b1000, -1, 0)

    def __init__(self, mask: int, dx: int, dy: int):
        self.mask = mask
        self.dx = dx
        self.dy = dy

    @property
    def ordinal(self) -> int:
        return _ORDINALS[self]

    def reverse(self) -> "Direction":
        return _REVERSE[self]

    @staticmethod
    def from_ordinal(ordinal: int) -> "Direction":
        return DIRECTIONS[ordinal]


DIRECTIONS = tuple(Direction)

_ORDINALS = {d: i for i, d in enumerate(DIRECTIONS)}

_REVERSE = {
    Direction.NORTH: Direction.SOUTH,
    Direction.SOUTH: Direction.NORTH,
    Direction.EAST: Direction.WEST,
    Direction.WEST: Direction.EAST,
}
