"""Noise sources and arithmetic combinators over them.

A source exposes ``sample(x, y, z)`` over numpy arrays and ``get(point)`` for a
single 3D point. Combinators take two sources and are sources themselves.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Protocol

import numpy as np


class Source3D(Protocol):
    def sample(
        self, x: np.ndarray, y: np.ndarray, z: np.ndarray
    ) -> np.ndarray:  # pragma: no cover
        ...


class _SourceMixin:
    def get(self, point) -> float:
        x, y, z = point
        return float(self.sample(np.array([x]), np.array([y]), np.array([z]))[0])


class Cylinders(_SourceMixin):
    """Concentric cylinders centred on the y axis, values in [-1, 1]."""

    def __init__(self, *, frequency: float = 1.0):
        self.frequency = float(frequency)

    def sample(self, x: np.ndarray, y: np.ndarray, z: np.ndarray) -> np.ndarray:
        x = np.asarray(x, dtype=np.float64) * self.frequency
        z = np.asarray(z, dtype=np.float64) * self.frequency
        x, _, z = np.broadcast_arrays(x, np.asarray(y, dtype=np.float64), z)

        dist = np.sqrt(x * x + z * z)
        inner = dist - np.floor(dist)
        outer = 1.0 - inner
        nearest = np.minimum(inner, outer)
        # Puts the result in [-1, 1].
        return 1.0 - nearest * 4.0


class _Binary(_SourceMixin, ABC):
    def __init__(self, source1: Source3D, source2: Source3D):
        self.source1 = source1
        self.source2 = source2

    @abstractmethod
    def combine(self, a: np.ndarray, b: np.ndarray) -> np.ndarray:  # pragma: no cover
        ...

    def sample(self, x: np.ndarray, y: np.ndarray, z: np.ndarray) -> np.ndarray:
        return self.combine(self.source1.sample(x, y, z), self.source2.sample(x, y, z))


class Add(_Binary):
    def combine(self, a: np.ndarray, b: np.ndarray) -> np.ndarray:
        return a + b


class Multiply(_Binary):
    def combine(self, a: np.ndarray, b: np.ndarray) -> np.ndarray:
        return a * b


class Min(_Binary):
    def combine(self, a: np.ndarray, b: np.ndarray) -> np.ndarray:
        return np.minimum(a, b)


class Max(_Binary):
    def combine(self, a: np.ndarray, b: np.ndarray) -> np.ndarray:
        return np.maximum(a, b)
