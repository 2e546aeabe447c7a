import logging
import time
from abc import ABC, abstractmethod
from typing import Optional, Tuple

from maze_kit.core.carver import GridCarver
from maze_kit.core.direction import Direction
from maze_kit.core.grid import Grid
from maze_kit.rng.base import RandomSource
from maze_kit.rng.xorshift import XorShift32

logger = logging.getLogger(__name__)


class Generator(ABC):
    """
    One maze algorithm bound to one Grid and one RandomSource.

    Consumers get the read-only `grid`; the algorithm writes through its own
    GridCarver. Pass `rng` to control the random source explicitly, or `seed`
    to build the algorithm's default source.
    """
    rng_class = XorShift32

    def __init__(self, width: int, height: int, rng: Optional[RandomSource] = None, seed: Optional[int] = None):
        self.grid = Grid(width, height)
        self._carver = GridCarver(self.grid)
        self.rng = rng if rng is not None else self.rng_class(seed)

    @property
    def width(self) -> int:
        return self.grid.width

    @property
    def height(self) -> int:
        return self.grid.height

    def is_wall(self, x: int, y: int, direction: Direction) -> bool:
        return self.grid.is_wall(x, y, direction)

    def generate(self):
        """Builds the maze in place. Every call starts over from a blank grid."""
        name = type(self).__name__
        logger.debug(f"{name}: generating {self.width}x{self.height}...")
        t0 = time.perf_counter()

        self._generate()
        # Scratch flags never leave the algorithm
        self._carver.reset_flags()

        logger.debug(f"{name}: done in {time.perf_counter() - t0:.4f}s")

    @abstractmethod
    def _generate(self):
        pass

    def __str__(self) -> str:
        return str(self.grid)


class StartPositionGenerator(Generator):
    """A Generator that grows the maze outward from a start node."""

    def __init__(self, width: int, height: int, start: Optional[Tuple[int, int]] = None,
                 rng: Optional[RandomSource] = None, seed: Optional[int] = None):
        super().__init__(width, height, rng=rng, seed=seed)
        if start is None:
            start = (self.rng.next_int(width), self.rng.next_int(height))
        self.start = start

    @property
    def start(self) -> Tuple[int, int]:
        return self._start

    @start.setter
    def start(self, start: Tuple[int, int]):
        x, y = start
        self.grid.check_position(x, y)
        self._start = (x, y)
