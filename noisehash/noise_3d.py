from __future__ import annotations

import numpy as np

from .config import DEFAULT_SEED
from .core import fade, grad3_from_hash, lattice_floor, lerp, resolve_hasher
from .hasher import NoiseHasher, hash_lattice


class Perlin3D:
    """3D gradient noise. Corner gradients come from ``hasher.hash([x, y, z])``."""

    def __init__(self, *, seed: int = DEFAULT_SEED, hasher: NoiseHasher | None = None):
        self.seed = int(seed)
        self.hasher = resolve_hasher(self.seed, hasher)

    def noise(self, x: np.ndarray, y: np.ndarray, z: np.ndarray) -> np.ndarray:
        x, y, z = np.broadcast_arrays(
            np.asarray(x, dtype=np.float64),
            np.asarray(y, dtype=np.float64),
            np.asarray(z, dtype=np.float64),
        )
        xi, xf = lattice_floor(x)
        yi, yf = lattice_floor(y)
        zi, zf = lattice_floor(z)

        def corner(ox: int, oy: int, oz: int) -> np.ndarray:
            h = hash_lattice(self.hasher, xi + ox, yi + oy, zi + oz)
            gx, gy, gz = grad3_from_hash(h)
            return gx * (xf - ox) + gy * (yf - oy) + gz * (zf - oz)

        u = fade(xf)
        v = fade(yf)
        w = fade(zf)

        x_lerp00 = lerp(corner(0, 0, 0), corner(1, 0, 0), u)
        x_lerp10 = lerp(corner(0, 1, 0), corner(1, 1, 0), u)
        y_lerp0 = lerp(x_lerp00, x_lerp10, v)

        x_lerp01 = lerp(corner(0, 0, 1), corner(1, 0, 1), u)
        x_lerp11 = lerp(corner(0, 1, 1), corner(1, 1, 1), u)
        y_lerp1 = lerp(x_lerp01, x_lerp11, v)

        return lerp(y_lerp0, y_lerp1, w)

    def sample(self, x: np.ndarray, y: np.ndarray, z: np.ndarray) -> np.ndarray:
        return self.noise(x, y, z)

    def get(self, point) -> float:
        x, y, z = point
        return float(self.noise(np.array([x]), np.array([y]), np.array([z]))[0])
