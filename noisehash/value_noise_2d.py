from __future__ import annotations

import numpy as np

from .config import DEFAULT_SEED, TABLE_SIZE
from .core import fade, lattice_floor, lerp, resolve_hasher
from .hasher import NoiseHasher, hash_lattice


class ValueNoise2D:
    """2D value noise (hashed lattice values + smooth interpolation)."""

    def __init__(self, *, seed: int = DEFAULT_SEED, hasher: NoiseHasher | None = None):
        self.seed = int(seed)
        self.hasher = resolve_hasher(self.seed, hasher)

    def _lattice_value(self, xi: np.ndarray, yi: np.ndarray) -> np.ndarray:
        h = hash_lattice(self.hasher, xi, yi).astype(np.float64)
        # Map hashed values into [-1, 1].
        return (h / (TABLE_SIZE - 1)) * 2.0 - 1.0

    def noise(self, x: np.ndarray, y: np.ndarray) -> np.ndarray:
        x = np.asarray(x, dtype=np.float64)
        y = np.asarray(y, dtype=np.float64)
        xi, xf = lattice_floor(x)
        yi, yf = lattice_floor(y)
        u = fade(xf)
        v = fade(yf)

        x_lerp0 = lerp(self._lattice_value(xi, yi), self._lattice_value(xi + 1, yi), u)
        x_lerp1 = lerp(self._lattice_value(xi, yi + 1), self._lattice_value(xi + 1, yi + 1), u)
        return lerp(x_lerp0, x_lerp1, v)

    def get(self, point) -> float:
        x, y = point
        return float(self.noise(np.array([x]), np.array([y]))[0])
