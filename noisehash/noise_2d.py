from __future__ import annotations

import math
from typing import Protocol

import numpy as np

from .config import DEFAULT_SEED
from .core import (
    Corner2D,
    fade,
    grad2_from_hash,
    grad2_table,
    lattice_floor,
    lerp,
    resolve_hasher,
)
from .hasher import NoiseHasher, hash_lattice


class Noise2D(Protocol):
    def noise(self, x: np.ndarray, y: np.ndarray) -> np.ndarray:  # pragma: no cover
        ...


class Perlin2D:
    def __init__(
        self,
        *,
        seed: int = DEFAULT_SEED,
        grad_set: str = "diag8",
        hasher: NoiseHasher | None = None,
    ):
        self.seed = int(seed)
        self.hasher = resolve_hasher(self.seed, hasher)
        self.grad_set = str(grad_set)
        self.grad_table = grad2_table(self.grad_set)

    def noise(self, x: np.ndarray, y: np.ndarray) -> np.ndarray:
        x = np.asarray(x, dtype=np.float64)
        y = np.asarray(y, dtype=np.float64)

        xi0, xf = lattice_floor(x)
        yi0, yf = lattice_floor(y)
        u = fade(xf)
        v = fade(yf)

        def dot(ox: int, oy: int) -> np.ndarray:
            h = hash_lattice(self.hasher, xi0 + ox, yi0 + oy)
            gx, gy = grad2_from_hash(h, grad_table=self.grad_table)
            return gx * (xf - ox) + gy * (yf - oy)

        x_lerp0 = lerp(dot(0, 0), dot(1, 0), u)
        x_lerp1 = lerp(dot(0, 1), dot(1, 1), u)
        return lerp(x_lerp0, x_lerp1, v)

    def get(self, point) -> float:
        x, y = point
        return float(self.noise(np.array([x]), np.array([y]))[0])

    def debug_point(self, x: float, y: float) -> dict:
        # Scalar breakdown through the plain hash contract.
        xf = float(x)
        yf = float(y)
        xi0 = math.floor(xf)
        yi0 = math.floor(yf)
        xrel = xf - xi0
        yrel = yf - yi0

        u = float(fade(np.float64(xrel)))
        v = float(fade(np.float64(yrel)))

        def corner(ox: int, oy: int) -> Corner2D:
            h = int(self.hasher.hash([xi0 + ox, yi0 + oy]))
            gx, gy = grad2_from_hash(h, grad_table=self.grad_table)
            dx = xrel - ox
            dy = yrel - oy
            return Corner2D(
                hash=h,
                gx=float(gx),
                gy=float(gy),
                dx=dx,
                dy=dy,
                dot=float(gx) * dx + float(gy) * dy,
            )

        c00 = corner(0, 0)
        c10 = corner(1, 0)
        c01 = corner(0, 1)
        c11 = corner(1, 1)

        x_lerp0 = c00.dot + u * (c10.dot - c00.dot)
        x_lerp1 = c01.dot + u * (c11.dot - c01.dot)

        return {
            "seed": self.seed,
            "input": {"x": xf, "y": yf},
            "cell": {"xi0": xi0, "yi0": yi0, "xi1": xi0 + 1, "yi1": yi0 + 1},
            "relative": {"xf": xrel, "yf": yrel},
            "fade": {"u": u, "v": v},
            "hash": {"aa": c00.hash, "ab": c01.hash, "ba": c10.hash, "bb": c11.hash},
            "corners": {
                "c00": c00.__dict__,
                "c10": c10.__dict__,
                "c01": c01.__dict__,
                "c11": c11.__dict__,
            },
            "interpolation": {"x_lerp0": x_lerp0, "x_lerp1": x_lerp1},
            "noise": x_lerp0 + v * (x_lerp1 - x_lerp0),
        }


def fbm2(
    noise: Noise2D,
    x: np.ndarray,
    y: np.ndarray,
    *,
    octaves: int = 4,
    lacunarity: float = 2.0,
    persistence: float = 0.5,
) -> np.ndarray:
    x = np.asarray(x, dtype=np.float64)
    y = np.asarray(y, dtype=np.float64)

    amp = 1.0
    freq = 1.0
    total = np.zeros(np.broadcast(x, y).shape, dtype=np.float64)
    amp_sum = 0.0

    for _ in range(max(int(octaves), 1)):
        total += amp * noise.noise(x * freq, y * freq)
        amp_sum += amp
        amp *= float(persistence)
        freq *= float(lacunarity)

    if amp_sum == 0.0:
        return total
    return total / amp_sum
