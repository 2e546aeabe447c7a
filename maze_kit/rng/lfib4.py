from array import array

from maze_kit.rng.base import MASK32, RandomSource


class LFib4(RandomSource):
    """
    Marsaglia's LFIB4 lagged Fibonacci generator:
        t[c] = t[c] + t[c+58] + t[c+119] + t[c+178]  (mod 2**32)
    with an 8-bit wrapping index over a 256 word table. Period ~2**287.

    The table is filled from the seed with the CONG generator
    (69069 * x + 1234567), whose alternating low bit guarantees the table is
    not all even.
    """
    __slots__ = ('_t', '_c')

    def seed(self, seed: int):
        x = seed & MASK32
        words = []
        for _ in range(256):
            x = (69069 * x + 1234567) & MASK32
            words.append(x)
        self._t = array('L', words)
        self._c = 0

    def next_uint32(self) -> int:
        t = self._t
        c = (self._c + 1) & 0xFF
        v = (t[c] + t[(c + 58) & 0xFF] + t[(c + 119) & 0xFF] + t[(c + 178) & 0xFF]) & MASK32
        t[c] = v
        self._c = c
        return v
