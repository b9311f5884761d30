"""Seedable random source for generating test polynomials.

Use set_seed(n) at test start for reproducibility.
Default (no seed) uses os.urandom.
"""

import os
import random as _random


class DeterministicRNG:
    """Seeded PRNG wrapper. When seed is None, uses os.urandom."""

    def __init__(self, seed=None):
        self._seed = seed
        if seed is not None:
            self._rng = _random.Random(seed)
        else:
            self._rng = None

    def randbelow(self, n: int) -> int:
        if self._rng is not None:
            return self._rng.randrange(n)
        return int.from_bytes(os.urandom(8), 'big') % n

    def randint(self, low: int, high: int) -> int:
        """Uniform integer in [low, high]."""
        return low + self.randbelow(high - low + 1)


_global_rng = DeterministicRNG(seed=None)


def set_seed(seed: int | None):
    """Set global seed for reproducibility. None = OS randomness."""
    global _global_rng
    _global_rng = DeterministicRNG(seed=seed)


def randbelow(n: int) -> int:
    return _global_rng.randbelow(n)


def randint(low: int, high: int) -> int:
    return _global_rng.randint(low, high)
