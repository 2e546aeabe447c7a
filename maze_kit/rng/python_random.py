import random

from maze_kit.rng.base import RandomSource


class PythonRandom(RandomSource):
    """The platform default generator (Mersenne Twister) behind the common contract."""
    __slots__ = ('_random',)

    def seed(self, seed: int):
        self._random = random.Random(seed)

    def next_uint32(self) -> int:
        return self._random.getrandbits(32)
