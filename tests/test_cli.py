import unittest
import sys
import os
import io
from contextlib import redirect_stdout, redirect_stderr

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from maze_kit.main import main


class TestCLI(unittest.TestCase):
    def run_main(self, *argv):
        out = io.StringIO()
        with redirect_stdout(out):
            main(list(argv))
        return out.getvalue()

    def test_generate_box_drawing(self):
        text = self.run_main("generate", "--algo", "kruskal", "--width", "4", "--height", "3", "--seed", "7")
        lines = text.splitlines()
        self.assertEqual(len(lines), 2 * 3 + 1)
        self.assertEqual(lines[0], "+---+---+---+---+")
        self.assertEqual(lines[-1], "+---+---+---+---+")

    def test_generate_is_reproducible(self):
        args = ("generate", "--algo", "wilson", "--width", "6", "--height", "6", "--seed", "99", "--rng", "taus88")
        self.assertEqual(self.run_main(*args), self.run_main(*args))

    def test_generate_tiles(self):
        text = self.run_main("generate", "--algo", "prim", "--width", "3", "--height", "2",
                             "--seed", "5", "--start", "1", "1", "--tiles", "--stats")
        lines = text.splitlines()
        self.assertEqual(len(lines), 5)
        self.assertTrue(all(len(line) == 2 * 7 for line in lines))

    def test_start_rejected_for_fixed_algorithms(self):
        with redirect_stderr(io.StringIO()):
            with self.assertRaises(SystemExit):
                self.run_main("generate", "--algo", "binary", "--start", "0", "0")

    def test_benchmark(self):
        text = self.run_main("benchmark", "--size", "10", "--algo", "ellers", "dfs")
        self.assertIn("ellers", text)
        self.assertIn("dfs", text)


if __name__ == '__main__':
    unittest.main()
