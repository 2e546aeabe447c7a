class MazeError(Exception):
    """Base class for every error raised by maze_kit."""


class MazeDimensionError(MazeError, ValueError):
    pass


class PositionOutOfBoundsError(MazeError, IndexError):
    def __init__(self, x: int, y: int, width: int, height: int):
        super().__init__(f"Coordinate ({x}, {y}) out of bounds for {width}x{height} grid")
        self.x = x
        self.y = y


class NoDirectionError(MazeError, TypeError):
    pass


class RandomRangeError(MazeError, ValueError):
    pass


class RandomSeedError(MazeError, ValueError):
    pass
