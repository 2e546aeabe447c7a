from typing import List, NamedTuple

from maze_kit.algo.base import Generator
from maze_kit.core.direction import Direction


class Rect(NamedTuple):
    x: int
    y: int
    width: int
    height: int


class RecursiveDivision(Generator):
    """
    Starts from an open field inside the border and keeps cutting rectangles
    in two with a wall that has a single gap. The recursion runs on an
    explicit stack; strips 1 node wide or tall are finished and never split.
    """

    def _generate(self):
        carver = self._carver
        carver.reset()
        carver.add_borders()

        stack: List[Rect] = []
        self._push(stack, Rect(0, 0, self.width, self.height))
        while stack:
            for part in self._split(stack.pop()):
                self._push(stack, part)

    @staticmethod
    def _push(stack: List[Rect], r: Rect):
        if r.width >= 2 and r.height >= 2:
            stack.append(r)

    def _split(self, r: Rect) -> List[Rect]:
        carver = self._carver
        rng = self.rng
        end_x = r.x + r.width
        end_y = r.y + r.height

        if self._horizontal(r.width, r.height):
            # Wall along the south side of row y, gap somewhere in it
            y = rng.next_int(r.y, end_y - 1)
            for x in range(r.x, end_x):
                carver.add_wall(x, y, Direction.SOUTH)
            carver.carve(rng.next_int(r.x, end_x), y, Direction.SOUTH)
            return [Rect(r.x, y + 1, r.width, end_y - y - 1),
                    Rect(r.x, r.y, r.width, y + 1 - r.y)]

        x = rng.next_int(r.x, end_x - 1)
        for y in range(r.y, end_y):
            carver.add_wall(x, y, Direction.EAST)
        carver.carve(x, rng.next_int(r.y, end_y), Direction.EAST)
        return [Rect(x + 1, r.y, end_x - x - 1, r.height),
                Rect(r.x, r.y, x + 1 - r.x, r.height)]

    def _horizontal(self, width: int, height: int) -> bool:
        # Ties (exactly 2:1) fall through to the coin
        if width > height * 2:
            return False
        if height > width * 2:
            return True
        return self.rng.next_boolean()
