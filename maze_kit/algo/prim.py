from enum import IntEnum
from typing import List, Tuple

from maze_kit.algo.base import StartPositionGenerator
from maze_kit.core.direction import Direction


class Mark(IntEnum):
    OUT      = 0b0000
    IN       = 0b0001
    FRONTIER = 0b0010


class PrimsAlgorithm(StartPositionGenerator):
    """
    Randomized Prim's.

    Not Prim's with random weights: a uniformly random frontier node is joined
    to a uniformly random visited neighbour, so the maze spreads out from the
    start more or less evenly. Membership lives in the flag bits (see Mark),
    which keeps the frontier list free of duplicates.
    """

    def _generate(self):
        carver = self._carver
        rng = self.rng
        carver.reset_fill()

        # Frontier = unvisited nodes next to visited ones
        frontier: List[Tuple[int, int]] = []
        neighbors: List[Direction] = []

        sx, sy = self.start
        carver.set_flags(sx, sy, Mark.IN)
        self._add_frontier(sx, sy, frontier)

        while frontier:
            # Swap remove for O(1)
            idx = rng.next_int(len(frontier))
            frontier[idx], frontier[-1] = frontier[-1], frontier[idx]
            cx, cy = frontier.pop()

            self._visited_neighbors(cx, cy, neighbors)
            d = neighbors[rng.next_int(len(neighbors))]
            carver.carve(cx, cy, d)
            carver.set_flags(cx, cy, Mark.IN)

            self._add_frontier(cx, cy, frontier)

    def _add_frontier(self, x: int, y: int, frontier: List[Tuple[int, int]]):
        carver = self._carver
        for d in Direction:
            nx, ny = x + d.dx, y + d.dy
            if self.grid.in_bounds(nx, ny) and carver.get_flags(nx, ny) == Mark.OUT:
                carver.set_flags(nx, ny, Mark.FRONTIER)
                frontier.append((nx, ny))

    def _visited_neighbors(self, x: int, y: int, neighbors: List[Direction]):
        neighbors.clear()
        carver = self._carver
        for d in Direction:
            nx, ny = x + d.dx, y + d.dy
            if self.grid.in_bounds(nx, ny) and carver.get_flags(nx, ny) == Mark.IN:
                neighbors.append(d)


Prims = PrimsAlgorithm
