import random
from abc import ABC, abstractmethod
from typing import MutableSequence, Optional

from maze_kit.core.errors import RandomRangeError

MASK32 = 0xFFFFFFFF
_TOP31 = 1 << 31


def entropy_seed() -> int:
    """A nonzero 32-bit seed from the OS entropy pool."""
    sysrand = random.SystemRandom()
    seed = 0
    while seed == 0:
        seed = sysrand.getrandbits(32)
    return seed


class RandomSource(ABC):
    """
    Contract every generator algorithm draws from.

    Subclasses only supply next_uint32(); ranges, booleans and shuffling are
    built on top of it here so every source behaves the same way.
    Not thread-safe: one instance per maze run.
    """
    __slots__ = ()

    def __init__(self, seed: Optional[int] = None):
        self.seed(entropy_seed() if seed is None else seed)

    @abstractmethod
    def seed(self, seed: int):
        pass

    @abstractmethod
    def next_uint32(self) -> int:
        """Next raw 32-bit word, 0 <= value < 2**32."""

    def next_int(self, m: Optional[int] = None, n: Optional[int] = None) -> int:
        """
        next_int()      -> signed 32-bit integer
        next_int(n)     -> uniform in [0, n)
        next_int(m, n)  -> uniform in [m, n)
        """
        if m is None:
            word = self.next_uint32()
            return word - (1 << 32) if word & _TOP31 else word
        if n is None:
            return self._below(m)
        if n <= m:
            raise RandomRangeError(f"Upper bound {n} must be greater than lower bound {m}")
        return m + self._below(n - m)

    def _below(self, n: int) -> int:
        if n <= 0:
            raise RandomRangeError(f"Bound must be positive, got {n}")
        if n > _TOP31:
            raise RandomRangeError(f"Bound must not exceed 2**31, got {n}")
        # Top 31 bits; anything in the incomplete last bucket is drawn again
        limit = _TOP31 - _TOP31 % n
        r = self.next_uint32() >> 1
        while r >= limit:
            r = self.next_uint32() >> 1
        return r % n

    def next_boolean(self) -> bool:
        return (self.next_uint32() >> 31) != 0

    def shuffle(self, items: MutableSequence):
        """Fisher-Yates, in place."""
        for i in range(len(items) - 1, 0, -1):
            j = self._below(i + 1)
            items[i], items[j] = items[j], items[i]
