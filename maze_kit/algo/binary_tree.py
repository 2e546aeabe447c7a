from maze_kit.algo.base import Generator
from maze_kit.core.direction import Direction


class BinaryTree(Generator):
    """
    Every node except the north-west corner opens one passage, north or west.
    The result is a binary tree rooted at (0, 0) with a long open top row and
    left column.
    """

    def _generate(self):
        carver = self._carver
        rng = self.rng
        carver.reset_fill()

        for y in range(self.height):
            for x in range(self.width):
                if x > 0 and y > 0:
                    d = Direction.NORTH if rng.next_boolean() else Direction.WEST
                elif y > 0:
                    d = Direction.NORTH
                elif x > 0:
                    d = Direction.WEST
                else:
                    continue
                carver.carve(x, y, d)
