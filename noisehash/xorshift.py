"""XorShift128 generator and the uniform sampling used by the table shuffle.

The generator and the sampling are bit-compatible with the ``rand`` /
``rand_xorshift`` reference, so a seed produces the same permutation table in
every implementation of the algorithm.
"""

from __future__ import annotations

from typing import MutableSequence, Protocol, runtime_checkable

import numpy as np

from .config import SEED_BYTES, U32_MASK, XORSHIFT_ZERO_SEED


@runtime_checkable
class RngCore(Protocol):
    def next_u32(self) -> int:  # pragma: no cover
        ...


class XorShiftRng:
    """Marsaglia's xorshift128 generator. Fast, small and not cryptographic."""

    __slots__ = ("x", "y", "z", "w")

    def __init__(self, x: int, y: int, z: int, w: int):
        self.x = int(x) & U32_MASK
        self.y = int(y) & U32_MASK
        self.z = int(z) & U32_MASK
        self.w = int(w) & U32_MASK

    @classmethod
    def from_seed(cls, seed: bytes | bytearray) -> "XorShiftRng":
        seed = bytes(seed)
        if len(seed) != SEED_BYTES:
            raise ValueError(f"XorShiftRng seed must be {SEED_BYTES} bytes, got {len(seed)}")

        words = [int.from_bytes(seed[i : i + 4], "little") for i in range(0, SEED_BYTES, 4)]
        # An all-zero state would only ever produce zeros.
        if not any(words):
            words = [XORSHIFT_ZERO_SEED] * 4
        return cls(*words)

    def next_u32(self) -> int:
        x = self.x
        t = (x ^ (x << 11)) & U32_MASK
        self.x = self.y
        self.y = self.z
        self.z = self.w
        w = self.w
        self.w = w ^ (w >> 19) ^ (t ^ (t >> 8))
        return self.w

    def next_u64(self) -> int:
        lo = self.next_u32()
        hi = self.next_u32()
        return (hi << 32) | lo

    def fill_bytes(self, dest: bytearray) -> None:
        n = len(dest)
        i = 0
        while i < n:
            chunk = self.next_u32().to_bytes(4, "little")
            take = min(4, n - i)
            dest[i : i + take] = chunk[:take]
            i += take

    def state(self) -> tuple[int, int, int, int]:
        return (self.x, self.y, self.z, self.w)

    def __repr__(self) -> str:
        return "XorShiftRng(..)"


class NumpyRng:
    """Adapts a ``numpy.random.Generator`` to ``RngCore``."""

    __slots__ = ("generator",)

    def __init__(self, generator: np.random.Generator):
        self.generator = generator

    def next_u32(self) -> int:
        return int(self.generator.integers(0, 1 << 32, dtype=np.uint32))


def as_rng_core(source) -> RngCore:
    if isinstance(source, np.random.Generator):
        return NumpyRng(source)
    if isinstance(source, RngCore):
        return source
    raise TypeError(
        f"expected an object with next_u32() or a numpy Generator, got {type(source).__name__}"
    )


def uniform_index(rng: RngCore, bound: int) -> int:
    """Draw an integer uniformly from ``[0, bound)`` with 32-bit draws.

    Widening-multiply rejection sampling: the high word of ``v * bound`` is the
    result, draws whose low word falls above ``zone`` are rejected.
    """

    bound = int(bound)
    if not 0 < bound <= U32_MASK:
        raise ValueError("bound must be in [1, 2**32)")

    zone = ((bound << (32 - bound.bit_length())) - 1) & U32_MASK
    while True:
        m = (rng.next_u32() & U32_MASK) * bound
        if (m & U32_MASK) <= zone:
            return m >> 32


def shuffle(values: MutableSequence, rng: RngCore) -> None:
    """In-place Fisher-Yates shuffle, highest index first."""
    for i in range(len(values) - 1, 0, -1):
        j = uniform_index(rng, i + 1)
        values[i], values[j] = values[j], values[i]
