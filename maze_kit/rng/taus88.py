from maze_kit.rng.base import MASK32, RandomSource


def lcg69069(x: int) -> int:
    return (69069 * x + 1) & MASK32


class Taus88(RandomSource):
    """
    L'Ecuyer's maximally equidistributed combined Tausworthe generator,
    period ~2**88. Each component has a minimum legal seed (2, 8, 16), so the
    three words are spread out of one seed with the 69069 LCG and nudged above
    their minimums.
    """
    __slots__ = ('_s1', '_s2', '_s3')

    def seed(self, seed: int):
        s = lcg69069(seed & MASK32)
        self._s1 = s if s >= 2 else s + 2
        s = lcg69069(s)
        self._s2 = s if s >= 8 else s + 8
        s = lcg69069(s)
        self._s3 = s if s >= 16 else s + 16

    def next_uint32(self) -> int:
        s1, s2, s3 = self._s1, self._s2, self._s3

        b = (((s1 << 13) & MASK32) ^ s1) >> 19
        s1 = (((s1 & 0xFFFFFFFE) << 12) & MASK32) ^ b
        b = (((s2 << 2) & MASK32) ^ s2) >> 25
        s2 = (((s2 & 0xFFFFFFF8) << 4) & MASK32) ^ b
        b = (((s3 << 3) & MASK32) ^ s3) >> 11
        s3 = (((s3 & 0xFFFFFFF0) << 17) & MASK32) ^ b

        self._s1, self._s2, self._s3 = s1, s2, s3
        return s1 ^ s2 ^ s3
