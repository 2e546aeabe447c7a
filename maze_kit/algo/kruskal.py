from array import array

from maze_kit.algo.base import Generator
from maze_kit.core.direction import Direction
from maze_kit.core.dsf import DisjointSetForest
from maze_kit.rng.taus88 import Taus88


class Kruskals(Generator):
    """
    Randomized Kruskal's: every interior edge in shuffled order, carved when
    its two nodes are not yet connected. With equal weights this picks a
    random spanning tree (not a uniform one).

    Edges are packed as node_index * 2 + kind, kind 0 = south, 1 = east.
    """
    rng_class = Taus88

    SOUTH_EDGE = 0
    EAST_EDGE = 1

    def _generate(self):
        carver = self._carver
        width = self.width
        carver.reset_fill()

        edges = self.edge_list()
        self.rng.shuffle(edges)

        dsf = DisjointSetForest(self.grid.size)
        for e in edges:
            u = e >> 1
            d = Direction.EAST if e & 1 else Direction.SOUTH
            v = u + d.dy * width + d.dx
            if dsf.union(u, v):
                carver.carve(u % width, u // width, d)

    def edge_list(self) -> array:
        """All 2*w*h - w - h interior edges, in a fixed order."""
        width, height = self.width, self.height
        nodes = width * height
        edges = array('l')

        for y in range(height - 1):
            for x in range(width - 1):
                i = y * width + x
                edges.append(i * 2 + self.SOUTH_EDGE)
                edges.append(i * 2 + self.EAST_EDGE)

        # Right column: south edges only
        for y in range(height - 1):
            edges.append((y * width + width - 1) * 2 + self.SOUTH_EDGE)

        # Bottom row: east edges only
        for i in range(nodes - width, nodes - 1):
            edges.append(i * 2 + self.EAST_EDGE)

        return edges
