from enum import IntEnum
from typing import List

from maze_kit.algo.base import Generator
from maze_kit.core.direction import Direction
from maze_kit.rng.lfib4 import LFib4


class WalkMark(IntEnum):
    # Flag values 0-3 are the exit direction ordinal of a node on the current walk
    IN = 0b0100


class Wilsons(Generator):
    """
    Wilson's algorithm: a uniform spanning tree built from loop-erased random
    walks.

    A walk from an unvisited node records, in each node it leaves, the
    direction it left by. Revisiting a node overwrites that record, which is
    what erases loops. Once the walk hits the tree, following the records from
    the walk's first node gives the loop-free path, which is carved and
    marked IN.
    """
    rng_class = LFib4

    def _generate(self):
        carver = self._carver
        rng = self.rng
        width = self.width
        carver.reset_fill()

        moves: List[Direction] = []
        i = self.grid.size - 2

        # Seed the tree with the last node
        carver.set_flags(width - 1, self.height - 1, WalkMark.IN)

        while i >= 0:
            sx, sy = i % width, i // width

            # Random walk until the tree is reached
            wx, wy = sx, sy
            while carver.get_flags(wx, wy) != WalkMark.IN:
                self._find_moves(wx, wy, moves)
                d = moves[rng.next_int(len(moves))]
                carver.set_flags(wx, wy, d.ordinal)
                wx += d.dx
                wy += d.dy

            # Retrace along the surviving exits
            tx, ty = sx, sy
            flags = carver.get_flags(tx, ty)
            while flags != WalkMark.IN:
                d = Direction.from_ordinal(flags)
                carver.carve(tx, ty, d)
                carver.set_flags(tx, ty, WalkMark.IN)
                tx += d.dx
                ty += d.dy
                flags = carver.get_flags(tx, ty)

            # Next unvisited node, scanning backwards
            while i >= 0 and carver.get_flags(i % width, i // width) == WalkMark.IN:
                i -= 1

    def _find_moves(self, x: int, y: int, moves: List[Direction]):
        moves.clear()
        if y > 0:
            moves.append(Direction.NORTH)
        if x < self.width - 1:
            moves.append(Direction.EAST)
        if y < self.height - 1:
            moves.append(Direction.SOUTH)
        if x > 0:
            moves.append(Direction.WEST)
