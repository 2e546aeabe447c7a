from maze_kit.algo.base import Generator
from maze_kit.core.direction import Direction
from maze_kit.rng.python_random import PythonRandom


class Sidewinder(Generator):
    rng_class = PythonRandom

    def _generate(self):
        carver = self._carver
        rng = self.rng
        width = self.width
        carver.reset_fill()

        # First row is one long corridor
        for x in range(width - 1):
            carver.carve(x, 0, Direction.EAST)

        for y in range(1, self.height):
            x = 0
            while x < width:
                # Extend the run east on heads, then close it with one passage north
                run = 1
                while x < width - 1 and rng.next_boolean():
                    carver.carve(x, y, Direction.EAST)
                    x += 1
                    run += 1
                carver.carve(x - rng.next_int(run), y, Direction.NORTH)
                x += 1
