import unittest
import sys
import os
from unittest import mock

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from maze_kit.algo.catalog import ALGORITHMS, SPANNING_TREE, generate_maze, make_rng
from maze_kit.algo.dfs import RecursiveBacktracker
from maze_kit.algo.division import Rect, RecursiveDivision
from maze_kit.algo.ellers import Ellers
from maze_kit.algo.kruskal import Kruskals
from maze_kit.algo.prim import PrimsAlgorithm
from maze_kit.algo.sidewinder import Sidewinder
from maze_kit.core.complexity import MazeStats
from maze_kit.core.direction import Direction
from maze_kit.core.errors import MazeDimensionError, PositionOutOfBoundsError
from maze_kit.core.grid import Grid
from maze_kit.rng.python_random import PythonRandom
from maze_kit.rng.xorshift import XorShift32

SHAPES = [(1, 1), (1, 6), (6, 1), (2, 2), (5, 5), (13, 7), (20, 20)]


def assert_symmetric(test, grid):
    for y in range(grid.height):
        for x in range(grid.width):
            for d in Direction:
                nx, ny = x + d.dx, y + d.dy
                if grid.in_bounds(nx, ny):
                    test.assertEqual(grid.is_wall(x, y, d), grid.is_wall(nx, ny, d.reverse()),
                                     f"asymmetric wall at ({x}, {y}) {d.name}")


def assert_closed_border(test, grid):
    for x in range(grid.width):
        test.assertTrue(grid.is_wall(x, 0, Direction.NORTH))
        test.assertTrue(grid.is_wall(x, grid.height - 1, Direction.SOUTH))
    for y in range(grid.height):
        test.assertTrue(grid.is_wall(0, y, Direction.WEST))
        test.assertTrue(grid.is_wall(grid.width - 1, y, Direction.EAST))


class TestGenerators(unittest.TestCase):
    def test_wall_symmetry(self):
        for name, cls in ALGORITHMS.items():
            for w, h in SHAPES:
                with self.subTest(algo=name, size=(w, h)):
                    gen = cls(w, h, seed=42)
                    gen.generate()
                    assert_symmetric(self, gen.grid)

    def test_spanning_trees(self):
        for name in SPANNING_TREE:
            for w, h in SHAPES:
                with self.subTest(algo=name, size=(w, h)):
                    grid = generate_maze(name, w, h, seed=1234).grid
                    self.assertEqual(MazeStats.count_open_edges(grid), w * h - 1)
                    self.assertEqual(MazeStats.reachable_count(grid), w * h)

    def test_all_algorithms_make_perfect_mazes(self):
        # The rest are perfect too, just with a strong bias
        for name in ALGORITHMS:
            for seed in (1, 2, 3):
                with self.subTest(algo=name, seed=seed):
                    self.assertTrue(MazeStats.is_perfect(generate_maze(name, 17, 11, seed=seed).grid))

    def test_border_is_closed(self):
        for name in ALGORITHMS:
            with self.subTest(algo=name):
                assert_closed_border(self, generate_maze(name, 9, 6, seed=5).grid)

    def test_flags_cleared(self):
        for name, cls in ALGORITHMS.items():
            with self.subTest(algo=name):
                gen = cls(12, 9, seed=3)
                gen.generate()
                self.assertTrue(all(v <= Grid.WALL_MASK for v in gen.grid._cells))

    def test_rows_connect_downward(self):
        for cls in (Ellers, Sidewinder):
            for seed in range(5):
                with self.subTest(algo=cls.__name__, seed=seed):
                    gen = cls(15, 10, seed=seed)
                    gen.generate()
                    for y in range(gen.height - 1):
                        self.assertTrue(
                            any(not gen.is_wall(x, y, Direction.SOUTH) for x in range(gen.width)),
                            f"row {y} has no passage south")

    def test_sidewinder_top_row_open(self):
        gen = Sidewinder(10, 4, seed=8)
        gen.generate()
        for x in range(9):
            self.assertFalse(gen.is_wall(x, 0, Direction.EAST))

    def test_ellers_last_row_joined(self):
        gen = Ellers(12, 1, seed=4)
        gen.generate()
        for x in range(11):
            self.assertFalse(gen.is_wall(x, 0, Direction.EAST))

    def test_division_never_splits_thin_rectangles(self):
        real_split = RecursiveDivision._split
        with mock.patch.object(RecursiveDivision, "_split", autospec=True, side_effect=real_split) as split:
            gen = RecursiveDivision(16, 9, seed=21)
            gen.generate()

        self.assertGreater(split.call_count, 0)
        for call in split.call_args_list:
            rect = call.args[1]
            self.assertGreaterEqual(rect.width, 2)
            self.assertGreaterEqual(rect.height, 2)
        assert_closed_border(self, gen.grid)

    def test_division_orientation(self):
        for seed in range(1, 21):
            rng = mock.Mock(wraps=XorShift32(seed))
            gen = RecursiveDivision(10, 10, rng=rng)
            # More than twice as wide: always a vertical wall
            self.assertFalse(gen._horizontal(10, 2))
            self.assertFalse(gen._horizontal(5, 2))
            # More than twice as tall: always a horizontal wall
            self.assertTrue(gen._horizontal(2, 10))
            self.assertTrue(gen._horizontal(2, 5))
            rng.next_boolean.assert_not_called()

    def test_division_exact_ratio_is_a_coin_flip(self):
        outcomes = set()
        for seed in range(1, 41):
            rng = mock.Mock(wraps=PythonRandom(seed))
            gen = RecursiveDivision(4, 4, rng=rng)
            outcomes.add(bool(gen._horizontal(4, 2)))
            outcomes.add(bool(gen._horizontal(2, 4)))
            self.assertEqual(rng.next_boolean.call_count, 2)
        self.assertEqual(outcomes, {True, False})

    def test_division_wide_rect_splits_vertically(self):
        for seed in range(1, 11):
            gen = RecursiveDivision(12, 2, seed=seed)
            gen._carver.reset()
            gen._carver.add_borders()
            parts = gen._split(Rect(0, 0, 12, 2))

            self.assertEqual([p.height for p in parts], [2, 2])
            self.assertEqual(sum(p.width for p in parts), 12)
            # One east wall across both rows, with exactly one gap
            x = parts[1].width - 1
            walls = [gen.is_wall(x, y, Direction.EAST) for y in range(2)]
            self.assertEqual(sorted(walls), [False, True])
            self.assertTrue(all(not gen.is_wall(cx, 0, Direction.SOUTH) for cx in range(12)))

    def test_division_thin_grid_is_corridor(self):
        gen = RecursiveDivision(1, 8, seed=2)
        gen.generate()
        for y in range(7):
            self.assertFalse(gen.is_wall(0, y, Direction.SOUTH))

    def test_kruskal_determinism(self):
        grid1 = Kruskals(5, 5, rng=XorShift32(2718)).grid
        gen1 = Kruskals(5, 5, rng=XorShift32(2718))
        gen1.generate()

        gen2 = Kruskals(5, 5, rng=XorShift32(2718))
        gen2.generate()

        self.assertEqual(gen1.grid.tobytes(), gen2.grid.tobytes())
        self.assertNotEqual(gen1.grid.tobytes(), grid1.tobytes())

        gen3 = Kruskals(5, 5, rng=XorShift32(3141))
        gen3.generate()
        self.assertTrue(MazeStats.is_perfect(gen3.grid))

    def test_determinism(self):
        for name, cls in ALGORITHMS.items():
            with self.subTest(algo=name):
                a = cls(10, 10, seed=12345)
                a.generate()
                b = cls(10, 10, seed=12345)
                b.generate()
                self.assertEqual(a.grid.tobytes(), b.grid.tobytes())

    def test_regenerate_starts_over(self):
        gen = Kruskals(8, 8, seed=6)
        gen.generate()
        gen.generate()
        self.assertTrue(MazeStats.is_perfect(gen.grid))

    def test_kruskal_edge_list(self):
        gen = Kruskals(4, 3, seed=1)
        edges = gen.edge_list()
        self.assertEqual(len(edges), 2 * 12 - 4 - 3)
        self.assertEqual(len(set(edges)), len(edges))

    def test_explicit_rng(self):
        for rng_name in ("xorshift", "taus88", "lfib4", "python"):
            with self.subTest(rng=rng_name):
                gen = generate_maze("wilson", 8, 8, rng=make_rng(rng_name, 9))
                self.assertTrue(MazeStats.is_perfect(gen.grid))

    def test_start_position(self):
        for cls in (PrimsAlgorithm, RecursiveBacktracker):
            gen = cls(6, 4, start=(5, 3), seed=1)
            self.assertEqual(gen.start, (5, 3))
            gen.generate()
            self.assertTrue(MazeStats.is_perfect(gen.grid))

            gen.start = (0, 0)
            self.assertEqual(gen.start, (0, 0))

            # Default start is drawn inside the grid
            x, y = cls(6, 4, seed=2).start
            self.assertTrue(0 <= x < 6 and 0 <= y < 4)

    def test_start_out_of_bounds(self):
        for cls in (PrimsAlgorithm, RecursiveBacktracker):
            with self.assertRaises(PositionOutOfBoundsError):
                cls(5, 5, start=(5, 0))
            with self.assertRaises(PositionOutOfBoundsError):
                cls(5, 5, start=(0, -1))
            gen = cls(5, 5, seed=1)
            with self.assertRaises(PositionOutOfBoundsError):
                gen.start = (7, 7)

    def test_bad_dimensions(self):
        for cls in ALGORITHMS.values():
            with self.assertRaises(MazeDimensionError):
                cls(0, 5, seed=1)

    def test_unknown_names(self):
        with self.assertRaises(ValueError):
            generate_maze("hunt-and-kill", 5, 5)
        with self.assertRaises(ValueError):
            make_rng("mersenne")


if __name__ == '__main__':
    unittest.main()
