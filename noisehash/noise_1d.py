from __future__ import annotations

import numpy as np

from .config import DEFAULT_SEED
from .core import fade, grad1_from_hash, lattice_floor, lerp, resolve_hasher
from .hasher import NoiseHasher, hash_lattice


class Perlin1D:
    def __init__(self, *, seed: int = DEFAULT_SEED, hasher: NoiseHasher | None = None):
        self.seed = int(seed)
        self.hasher = resolve_hasher(self.seed, hasher)

    def noise(self, x: np.ndarray) -> np.ndarray:
        x = np.asarray(x, dtype=np.float64)
        xi0, xf = lattice_floor(x)

        ga = grad1_from_hash(hash_lattice(self.hasher, xi0))
        gb = grad1_from_hash(hash_lattice(self.hasher, xi0 + 1))

        d0 = ga * xf
        d1 = gb * (xf - 1.0)
        return lerp(d0, d1, fade(xf))

    def get(self, point) -> float:
        (x,) = point
        return float(self.noise(np.array([x], dtype=np.float64))[0])
