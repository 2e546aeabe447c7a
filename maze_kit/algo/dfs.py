from typing import List

from maze_kit.algo.base import StartPositionGenerator
from maze_kit.core.direction import Direction
from maze_kit.rng.taus88 import Taus88


class RecursiveBacktracker(StartPositionGenerator):
    """
    Randomized depth-first search.

    There is no explicit stack: every node entered stores the ordinal of the
    direction it was entered from in its flag bits, and a dead end walks back
    along the reverse of that direction. A node is unvisited while it still
    has all four walls.
    """
    rng_class = Taus88

    def _generate(self):
        carver = self._carver
        rng = self.rng
        carver.reset_fill()

        cx, cy = self.start
        unvisited = self.grid.size - 1
        moves: List[Direction] = []

        while unvisited > 0:
            self._find_moves(cx, cy, moves)

            if not moves:
                # Backtrack
                back = Direction.from_ordinal(carver.get_flags(cx, cy)).reverse()
                cx += back.dx
                cy += back.dy
                continue

            d = moves[rng.next_int(len(moves))]
            carver.carve(cx, cy, d)
            cx += d.dx
            cy += d.dy
            carver.set_flags(cx, cy, d.ordinal)
            unvisited -= 1

    def _find_moves(self, x: int, y: int, moves: List[Direction]):
        moves.clear()
        carver = self._carver
        if y > 0 and carver.is_closed(x, y - 1):
            moves.append(Direction.NORTH)
        if x < self.width - 1 and carver.is_closed(x + 1, y):
            moves.append(Direction.EAST)
        if y < self.height - 1 and carver.is_closed(x, y + 1):
            moves.append(Direction.SOUTH)
        if x > 0 and carver.is_closed(x - 1, y):
            moves.append(Direction.WEST)
