# planetgen/core/rng.py
"""
Deterministic Random Stream
===========================

Every generator stage receives one `RandomStream` handle explicitly;
nothing in planetgen touches a global RNG.

The stream wraps a numpy `Generator` over the PCG64 bit generator.
All derived distributions are built from exactly ONE primitive double
(`Generator.random()`) per call, so:

- the number of draws a stage consumes is exact and documented,
- `position` is a faithful cursor for provenance / replay,
- changing a distribution never shifts the draws that follow it.

Per-body seeds are derived from a master seed and an offset with a
splitmix64 hash, which is stable across platforms and numpy versions.
"""

from __future__ import annotations

import math
from typing import Sequence, Tuple, TypeVar

import numpy as np

T = TypeVar("T")

_MASK64 = 0xFFFFFFFFFFFFFFFF


# ============================================================
# Seed derivation
# ============================================================

def splitmix64(x: int) -> int:
    x = (x + 0x9E3779B97F4A7C15) & _MASK64
    z = x
    z = ((z ^ (z >> 30)) * 0xBF58476D1CE4E5B9) & _MASK64
    z = ((z ^ (z >> 27)) * 0x94D049BB133111EB) & _MASK64
    return (z ^ (z >> 31)) & _MASK64


def derive_seed(master_seed: int, offset: int) -> int:
    """Stable 64-bit per-body seed from (master seed, body offset)."""
    x = 0xA5A5A5A5A5A5A5A5
    for v in (master_seed, offset):
        x ^= v & _MASK64
        x = splitmix64(x)
    return x


# ============================================================
# Stream
# ============================================================

class RandomStream:
    """
    Seeded, positioned random stream.

    seed     : non-negative integer seed
    position : number of primitive draws consumed so far
    """

    def __init__(self, seed: int):
        if seed < 0:
            raise ValueError("seed must be non-negative.")
        self._seed = int(seed)
        self._gen = np.random.Generator(np.random.PCG64(self._seed))
        self._position = 0

    @classmethod
    def positioned(cls, seed: int, offset: int = 0) -> "RandomStream":
        """Fresh stream for `seed`, advanced by `offset` draws."""
        stream = cls(seed)
        stream.skip(offset)
        return stream

    @property
    def seed(self) -> int:
        return self._seed

    @property
    def position(self) -> int:
        return self._position

    def skip(self, n: int) -> None:
        if n < 0:
            raise ValueError("cannot skip a negative number of draws.")
        for _ in range(n):
            self.uniform()

    # --------------------
    # Primitive
    # --------------------
    def uniform(self) -> float:
        """One double in [0, 1)."""
        self._position += 1
        return float(self._gen.random())

    # --------------------
    # Derived (one primitive each)
    # --------------------
    def range(self, lo: float, hi: float) -> float:
        return lo + (hi - lo) * self.uniform()

    def log_range(self, lo: float, hi: float) -> float:
        """Log-uniform in [lo, hi); both bounds must be positive."""
        if lo <= 0.0 or hi <= 0.0:
            raise ValueError("log_range bounds must be positive.")
        x = math.exp(self.range(math.log(lo), math.log(hi)))
        return min(max(x, lo), hi)

    def squared(self) -> float:
        """u^2, biased toward zero."""
        x = self.uniform()
        return x * x

    def int_range(self, lo: int, hi: int) -> int:
        """Inclusive integer in [lo, hi]."""
        if hi < lo:
            lo, hi = hi, lo
        k = lo + int(math.floor(self.uniform() * (hi - lo + 1)))
        return min(k, hi)

    def chance(self, p: float) -> bool:
        return self.uniform() < p

    def choice(self, seq: Sequence[T]) -> T:
        if not seq:
            raise ValueError("choice from an empty sequence.")
        return seq[self.int_range(0, len(seq) - 1)]

    def weighted_choice(self, pairs: Sequence[Tuple[T, float]]) -> T:
        """Pick a value from (value, weight) pairs; weights need not sum to 1."""
        if not pairs:
            raise ValueError("weighted_choice from an empty sequence.")
        total = sum(w for _, w in pairs)
        r = self.uniform() * total
        acc = 0.0
        for value, weight in pairs:
            acc += weight
            if r < acc:
                return value
        return pairs[-1][0]

    def __repr__(self) -> str:
        return f"RandomStream(seed={self._seed}, position={self._position})"


__all__ = ["RandomStream", "derive_seed", "splitmix64"]
