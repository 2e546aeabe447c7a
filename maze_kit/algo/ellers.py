from maze_kit.algo.base import Generator
from maze_kit.core.direction import Direction
from maze_kit.rng.taus88 import Taus88


class Ellers(Generator):
    """
    Eller's algorithm, one row at a time with O(width) memory.

    The sets of the current row are circular doubly linked lists kept in two
    arrays, `left` and `right`. Two horizontal neighbours x and x + 1 belong to
    the same set exactly when right[x] == x + 1, so that test is all it takes
    to avoid closing a loop.
    """
    rng_class = Taus88

    # Odds (out of 5) of merging east / of detaching a node from the row below
    MERGE_ODDS = 3
    DETACH_ODDS = 3

    def _generate(self):
        carver = self._carver
        width, height = self.width, self.height
        x_end = width - 1
        y_end = height - 1
        carver.reset_fill()

        left = list(range(width))
        right = list(range(width))

        for y in range(y_end):
            for x in range(width):
                if x < x_end and right[x] != x + 1 and self._roll(self.MERGE_ODDS):
                    self._merge(left, right, x)
                    carver.carve(x, y, Direction.EAST)

                # A node may only stop going south if its set goes on without it
                if right[x] != x and self._roll(self.DETACH_ODDS):
                    left[right[x]] = left[x]
                    right[left[x]] = right[x]
                    left[x] = right[x] = x
                else:
                    carver.carve(x, y, Direction.SOUTH)

        # Last row: join every set that is still apart
        for x in range(x_end):
            if right[x] != x + 1:
                self._merge(left, right, x)
                carver.carve(x, y_end, Direction.EAST)

    def _roll(self, odds: int) -> bool:
        return self.rng.next_int(5) < odds

    @staticmethod
    def _merge(left, right, x):
        """Splices the list holding x + 1 in directly after x."""
        left[right[x]] = left[x + 1]
        right[left[x + 1]] = right[x]
        right[x] = x + 1
        left[x + 1] = x
