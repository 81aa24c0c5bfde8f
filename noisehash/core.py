from __future__ import annotations

from dataclasses import dataclass

import numpy as np

from .config import DEFAULT_SEED
from .hasher import NoiseHasher
from .table import PermutationTable


def fade(t: np.ndarray) -> np.ndarray:
    """Quintic fade curve used by Improved Perlin Noise (2002)."""
    return t * t * t * (t * (t * 6.0 - 15.0) + 10.0)


def lerp(a: np.ndarray, b: np.ndarray, t: np.ndarray) -> np.ndarray:
    return a + t * (b - a)


def resolve_hasher(seed: int = DEFAULT_SEED, hasher: NoiseHasher | None = None) -> NoiseHasher:
    """Return ``hasher`` or, when absent, a table built from ``seed``."""
    if hasher is not None:
        if not isinstance(hasher, NoiseHasher):
            raise TypeError(f"hasher must provide hash(coords), got {type(hasher).__name__}")
        return hasher
    return PermutationTable.from_seed(int(seed))


def lattice_floor(x: np.ndarray) -> tuple[np.ndarray, np.ndarray]:
    """Split coordinates into integer cell and fractional offset."""
    cell = np.floor(x)
    return cell.astype(np.int64), x - cell


@dataclass(frozen=True)
class Corner2D:
    hash: int
    gx: float
    gy: float
    dx: float
    dy: float
    dot: float


def _normalized(rows: list[list[float]]) -> np.ndarray:
    g = np.array(rows, dtype=np.float64)
    return g / np.linalg.norm(g, axis=1, keepdims=True)


_GRAD2_SETS = {
    "diag8": _normalized(
        [
            [1.0, 0.0],
            [-1.0, 0.0],
            [0.0, 1.0],
            [0.0, -1.0],
            [1.0, 1.0],
            [-1.0, 1.0],
            [1.0, -1.0],
            [-1.0, -1.0],
        ]
    ),
    "axis4": _normalized([[1.0, 0.0], [-1.0, 0.0], [0.0, 1.0], [0.0, -1.0]]),
    "circle16": np.stack(
        [
            np.cos(np.linspace(0.0, 2.0 * np.pi, 16, endpoint=False)),
            np.sin(np.linspace(0.0, 2.0 * np.pi, 16, endpoint=False)),
        ],
        axis=1,
    ),
}

_GRAD3 = _normalized(
    [
        [1.0, 1.0, 0.0],
        [-1.0, 1.0, 0.0],
        [1.0, -1.0, 0.0],
        [-1.0, -1.0, 0.0],
        [1.0, 0.0, 1.0],
        [-1.0, 0.0, 1.0],
        [1.0, 0.0, -1.0],
        [-1.0, 0.0, -1.0],
        [0.0, 1.0, 1.0],
        [0.0, -1.0, 1.0],
        [0.0, 1.0, -1.0],
        [0.0, -1.0, -1.0],
    ]
)

_GRAD1 = np.array([1.0, -1.0], dtype=np.float64)


def grad2_table(name: str) -> np.ndarray:
    name = str(name)
    if name == "default":
        name = "diag8"
    try:
        return _GRAD2_SETS[name]
    except KeyError:
        raise ValueError(f"unknown 2D gradient set: {name}") from None


def grad1_from_hash(h: np.ndarray) -> np.ndarray:
    return _GRAD1[np.asarray(h) & 1]


def grad2_from_hash(h: np.ndarray, *, grad_table: np.ndarray) -> tuple[np.ndarray, np.ndarray]:
    g = grad_table[np.asarray(h) % grad_table.shape[0]]
    return g[..., 0], g[..., 1]


def grad3_from_hash(h: np.ndarray) -> tuple[np.ndarray, np.ndarray, np.ndarray]:
    g = _GRAD3[np.asarray(h) % 12]
    return g[..., 0], g[..., 1], g[..., 2]
