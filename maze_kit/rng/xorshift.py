from maze_kit.core.errors import RandomSeedError
from maze_kit.rng.base import MASK32, RandomSource


class XorShift32(RandomSource):
    """
    Marsaglia's 32-bit xorshift (shifts 13, 17, 5), period 2**32 - 1.
    See "Xorshift RNGs", Journal of Statistical Software 8(14), 2003.
    """
    __slots__ = ('_x',)

    def seed(self, seed: int):
        x = seed & MASK32
        if x == 0:
            raise RandomSeedError("Seed must not be zero")
        self._x = x

    def next_uint32(self) -> int:
        x = self._x
        x ^= (x << 13) & MASK32
        x ^= x >> 17
        x ^= (x << 5) & MASK32
        self._x = x
        return x
