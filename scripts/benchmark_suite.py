import sys
import os
import time

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from maze_kit.algo.catalog import ALGORITHMS, SPANNING_TREE
from maze_kit.core.complexity import MazeStats


def benchmark_size(width: int, height: int):
    print(f"\n--- Benchmarking {width}x{height} ({width*height/1e6:.2f}M cells) ---")

    for name, cls in sorted(ALGORITHMS.items()):
        generator = cls(width, height, seed=42)

        gen_start = time.time()
        generator.generate()
        gen_time = time.time() - gen_start

        stats = MazeStats.calculate_stats(generator.grid)
        print(f"{name:<12} {gen_time:8.4f}s  {(width*height)/gen_time:>12,.0f} cells/sec  "
              f"dead ends {stats['dead_end_percent']:5.1f}%")

        # Full connectivity check is BFS over the whole grid, keep it to small sizes
        if width * height <= 250_000 and name in SPANNING_TREE:
            assert MazeStats.is_perfect(generator.grid), f"{name} did not produce a spanning tree"


def run_suite():
    sizes = [
        (100, 100),
        (300, 300),
        (1000, 1000),   # 1M - takes a while in pure Python
    ]

    for w, h in sizes:
        benchmark_size(w, h)


if __name__ == "__main__":
    run_suite()
