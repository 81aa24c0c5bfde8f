from __future__ import annotations

from typing import Protocol, Sequence, runtime_checkable

import numpy as np


@runtime_checkable
class NoiseHasher(Protocol):
    """Maps integer lattice coordinates to an index in ``[0, 255]``.

    ``coords`` must hold at least one value; passing none is a caller error.
    """

    def hash(self, coords: Sequence[int]) -> int:  # pragma: no cover
        ...


def hash_lattice(hasher: NoiseHasher, *axes: np.ndarray) -> np.ndarray:
    """Hash broadcast integer arrays, one array per axis.

    Hashers with a vectorized ``hash_array`` are used directly; any other
    ``NoiseHasher`` is evaluated point by point.
    """

    if not axes:
        raise ValueError("hash_lattice requires at least one coordinate axis")

    fast = getattr(hasher, "hash_array", None)
    if fast is not None:
        return fast(*axes)

    arrays = np.broadcast_arrays(*[np.asarray(a, dtype=np.int64) for a in axes])
    out = np.empty(arrays[0].shape, dtype=np.int64)
    for idx in np.ndindex(out.shape):
        out[idx] = hasher.hash([int(a[idx]) for a in arrays])
    return out
