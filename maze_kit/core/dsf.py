from array import array


class DisjointSetForest:
    """
    Union-find over the integers [0, n).

    Entries are either a parent index (>= 0) or, for a root, -(rank + 1).
    find() compresses paths, union() merges by rank.
    """
    __slots__ = ('_nodes', 'set_count')

    def __init__(self, n: int):
        if n < 0:
            raise ValueError(f"Node count must not be negative, got {n}")
        self._nodes = array('l', [-1]) * n
        self.set_count = n

    def __len__(self) -> int:
        return len(self._nodes)

    def _check(self, x: int):
        if not 0 <= x < len(self._nodes):
            raise IndexError(f"Node {x} out of range [0, {len(self._nodes)})")

    def find(self, x: int) -> int:
        self._check(x)
        nodes = self._nodes

        root = x
        while nodes[root] >= 0:
            root = nodes[root]

        # Second pass: point everything on the path straight at the root
        while nodes[x] >= 0:
            parent = nodes[x]
            nodes[x] = root
            x = parent
        return root

    def union(self, x: int, y: int) -> bool:
        """Merges the sets of x and y. Returns False if they were already one set."""
        rx = self.find(x)
        ry = self.find(y)
        if rx == ry:
            return False

        nodes = self._nodes
        # More negative = higher rank
        if nodes[rx] > nodes[ry]:
            rx, ry = ry, rx
        if nodes[rx] == nodes[ry]:
            nodes[rx] -= 1
        nodes[ry] = rx
        self.set_count -= 1
        return True

    def connected(self, x: int, y: int) -> bool:
        return self.find(x) == self.find(y)

    def rank(self, x: int) -> int:
        return -self._nodes[self.find(x)] - 1
