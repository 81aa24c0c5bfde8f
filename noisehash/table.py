from __future__ import annotations

import json
import logging
from typing import Iterable, Sequence

import numpy as np

from .config import (
    BYTE_MASK,
    SEED_BLOCKS,
    SEED_BYTES,
    SEED_MARKER,
    SEED_MASK,
    TABLE_SIZE,
)
from .xorshift import XorShiftRng, as_rng_core, shuffle

logger = logging.getLogger(__name__)


class TableError(ValueError):
    """A serialized permutation table could not be decoded."""


class TableLengthError(TableError):
    def __init__(self, expected: int, actual: int):
        self.expected = int(expected)
        self.actual = int(actual)
        super().__init__(
            f"PermutationTable must have exactly {self.expected} elements, found {self.actual}"
        )


class TableValueError(TableError):
    def __init__(self, index: int, value: object):
        self.index = int(index)
        self.value = value
        super().__init__(
            f"PermutationTable element {self.index} must be an integer in [0, 255], got {value!r}"
        )


def expand_seed(seed: int) -> bytes:
    """Expand a 32-bit seed into the 16-byte XorShift seed.

    Byte 0 holds the marker, bytes 1-3 are zero, and the seed is written
    little-endian into each of the three remaining 4-byte blocks.
    """

    seed = int(seed) & SEED_MASK
    buf = bytearray(SEED_BYTES)
    buf[0] = SEED_MARKER
    for block in SEED_BLOCKS:
        base = block * 4
        buf[base] = seed & 0xFF
        buf[base + 1] = (seed >> 8) & 0xFF
        buf[base + 2] = (seed >> 16) & 0xFF
        buf[base + 3] = (seed >> 24) & 0xFF
    return bytes(buf)


def _decode_values(seq: Iterable[int]) -> bytes:
    items = list(seq)
    if len(items) != TABLE_SIZE:
        raise TableLengthError(TABLE_SIZE, len(items))

    buf = bytearray(TABLE_SIZE)
    for i, v in enumerate(items):
        if isinstance(v, bool) or not isinstance(v, (int, np.integer)):
            raise TableValueError(i, v)
        if not 0 <= v <= BYTE_MASK:
            raise TableValueError(i, v)
        buf[i] = int(v)
    return bytes(buf)


class PermutationTable:
    """A shuffled 256-entry byte table used to hash lattice coordinates.

    Build one with ``from_seed`` or ``from_rng`` when the owning generator is
    created; construction costs a full shuffle, hashing is a few lookups.
    Instances never change after construction and can be shared between
    threads.
    """

    __slots__ = ("_lut", "_values")

    def __init__(self, values: bytes | Iterable[int]):
        if isinstance(values, (bytes, bytearray, memoryview)):
            values = bytes(values)
            if len(values) != TABLE_SIZE:
                raise TableLengthError(TABLE_SIZE, len(values))
        else:
            values = _decode_values(values)
        self._lut = values
        # A view over immutable bytes can never be made writeable.
        self._values = np.frombuffer(values, dtype=np.uint8)

    @classmethod
    def from_seed(cls, seed: int) -> "PermutationTable":
        seed = int(seed) & SEED_MASK
        logger.debug("Building permutation table from seed %d", seed)
        return cls.from_rng(XorShiftRng.from_seed(expand_seed(seed)))

    @classmethod
    def from_rng(cls, rng) -> "PermutationTable":
        values = list(range(TABLE_SIZE))
        shuffle(values, as_rng_core(rng))
        return cls(bytes(values))

    @property
    def values(self) -> np.ndarray:
        return self._values

    def hash(self, coords: Sequence[int]) -> int:
        it = iter(coords)
        try:
            acc = int(next(it)) & BYTE_MASK
        except StopIteration:
            raise ValueError("hash requires at least one coordinate") from None

        lut = self._lut
        for c in it:
            acc = lut[acc] ^ (int(c) & BYTE_MASK)
        return lut[acc]

    def hash_array(self, *axes: np.ndarray) -> np.ndarray:
        """Vectorized ``hash`` over broadcast integer arrays, one per axis."""
        if not axes:
            raise ValueError("hash requires at least one coordinate")

        raw = np.broadcast_arrays(*[np.asarray(a, dtype=np.int64) & BYTE_MASK for a in axes])
        p = self._values
        acc = raw[0]
        for v in raw[1:]:
            acc = p[acc].astype(np.int64) ^ v
        return p[acc].astype(np.int64)

    def is_permutation(self) -> bool:
        return len(set(self._lut)) == TABLE_SIZE

    # --- serialization ---

    def serialize(self) -> list[int]:
        return list(self._lut)

    @classmethod
    def deserialize(cls, seq: Iterable[int]) -> "PermutationTable":
        """Rebuild a table from exactly 256 byte values.

        The values are not checked to be a permutation; a table loaded from
        foreign data hashes with whatever values it holds.
        """

        table = cls(_decode_values(seq))
        if logger.isEnabledFor(logging.DEBUG) and not table.is_permutation():
            logger.debug("Deserialized permutation table contains duplicate values")
        return table

    def to_bytes(self) -> bytes:
        return self._lut

    @classmethod
    def from_bytes(cls, data: bytes | bytearray | memoryview) -> "PermutationTable":
        return cls(data)

    def dumps(self) -> str:
        return json.dumps(self.serialize())

    @classmethod
    def loads(cls, text: str | bytes) -> "PermutationTable":
        data = json.loads(text)
        if not isinstance(data, list):
            raise TableError(f"expected a JSON array, got {type(data).__name__}")
        return cls.deserialize(data)

    # --- value semantics ---

    def copy(self) -> "PermutationTable":
        return type(self)(bytes(self._lut))

    def __copy__(self) -> "PermutationTable":
        return self.copy()

    def __deepcopy__(self, memo) -> "PermutationTable":
        return self.copy()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PermutationTable):
            return NotImplemented
        return self._lut == other._lut

    def __hash__(self) -> int:
        return hash(self._lut)

    def __len__(self) -> int:
        return TABLE_SIZE

    def __reduce__(self):
        return (type(self), (self._lut,))

    def __repr__(self) -> str:
        return "PermutationTable(..)"
