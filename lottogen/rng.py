"""
Seeded Pseudo-Random Stream

Mulberry32: a 32-bit counter-based generator. The same seed always yields
the same sequence of floats in [0, 1), so a generation run can be replayed
exactly from its seed.
"""
import random
import time

MASK32 = 0xFFFFFFFF
GOLDEN_STEP = 0x6D2B79F5
TWO_POW_32 = 4294967296.0


class SeededStream:
    """Callable stream of floats in [0, 1) driven by a 32-bit seed."""

    def __init__(self, seed):
        self.seed = int(seed) & MASK32
        self._state = self.seed

    def __call__(self):
        self._state = (self._state + GOLDEN_STEP) & MASK32
        t = self._state
        x = ((t ^ (t >> 15)) * (t | 1)) & MASK32
        x ^= (x + ((x ^ (x >> 7)) * (x | 61))) & MASK32
        return ((x ^ (x >> 14)) & MASK32) / TWO_POW_32

    def take(self, n):
        """Return the next `n` values as a list.

        Convenience for inspecting or replaying a stream in tests; the
        engine calls the stream one value at a time.
        """
        return [self() for _ in range(n)]


def new_seed():
    """Fresh seed: wall-clock milliseconds mixed with Python's global RNG."""
    t = int(time.time() * 1000) & MASK32
    extra = random.getrandbits(32)
    return (t ^ extra) & MASK32
