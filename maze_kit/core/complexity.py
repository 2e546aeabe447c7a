from collections import deque
from typing import Dict, Iterator, Tuple

import numpy as np

from maze_kit.core.direction import Direction
from maze_kit.core.grid import Grid

# Number of wall bits set for each 4-bit wall value
_POPCOUNT = np.array([bin(v).count("1") for v in range(16)], dtype=np.uint8)


class MazeStats:
    """Read-only measurements of a finished maze (diagnostics and tests)."""

    @staticmethod
    def open_edges(grid: Grid) -> Iterator[Tuple[int, int, Direction]]:
        """
        Yields (x, y, direction) once per open interior edge.
        Only EAST and SOUTH are checked so no edge is counted twice.
        """
        for y in range(grid.height):
            for x in range(grid.width):
                if x < grid.width - 1 and not grid.is_wall(x, y, Direction.EAST):
                    yield (x, y, Direction.EAST)
                if y < grid.height - 1 and not grid.is_wall(x, y, Direction.SOUTH):
                    yield (x, y, Direction.SOUTH)

    @staticmethod
    def count_open_edges(grid: Grid) -> int:
        return sum(1 for _ in MazeStats.open_edges(grid))

    @staticmethod
    def reachable_count(grid: Grid, start: Tuple[int, int] = (0, 0)) -> int:
        """How many nodes can be reached from start through open walls."""
        sx, sy = start
        grid.check_position(sx, sy)

        seen = bytearray(grid.size)
        seen[sy * grid.width + sx] = 1
        queue = deque([start])
        count = 1

        while queue:
            cx, cy = queue.popleft()
            for d in Direction:
                nx, ny = cx + d.dx, cy + d.dy
                if not grid.in_bounds(nx, ny) or grid.is_wall(cx, cy, d):
                    continue
                idx = ny * grid.width + nx
                if not seen[idx]:
                    seen[idx] = 1
                    count += 1
                    queue.append((nx, ny))
        return count

    @staticmethod
    def is_perfect(grid: Grid) -> bool:
        """A spanning tree: size - 1 open edges and every node reachable."""
        return (MazeStats.count_open_edges(grid) == grid.size - 1
                and MazeStats.reachable_count(grid) == grid.size)

    @staticmethod
    def calculate_stats(grid: Grid) -> Dict[str, float]:
        walls = _POPCOUNT[np.frombuffer(grid.tobytes(), dtype=np.uint8)]

        dead_ends = int(np.count_nonzero(walls == 3))
        corridors = int(np.count_nonzero(walls == 2))  # 2 walls
        intersections = int(np.count_nonzero(walls <= 1))  # 0, 1 walls

        total = grid.size
        return {
            "dead_ends": dead_ends,
            "corridors": corridors,
            "intersections": intersections,
            "open_edges": MazeStats.count_open_edges(grid),
            "dead_end_percent": (dead_ends / total) * 100,
        }
