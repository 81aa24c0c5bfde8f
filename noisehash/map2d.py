from __future__ import annotations

import logging

import numpy as np

from .combinators import Source3D
from .config import DEFAULT_MAP_BOUNDS, DEFAULT_MAP_SIZE

logger = logging.getLogger(__name__)


class PlaneMapBuilder:
    """Sample a 3D source over a rectangle of the z = 0 plane.

    Rows follow y and columns follow x; both bound pairs are inclusive of the
    lower edge and step ``(upper - lower) / size`` per cell.
    """

    def __init__(
        self,
        source: Source3D,
        *,
        width: int = DEFAULT_MAP_SIZE[0],
        height: int = DEFAULT_MAP_SIZE[1],
        x_bounds: tuple[float, float] = DEFAULT_MAP_BOUNDS,
        y_bounds: tuple[float, float] = DEFAULT_MAP_BOUNDS,
    ):
        self.source = source
        self.set_size(width, height)
        self.set_x_bounds(*x_bounds)
        self.set_y_bounds(*y_bounds)

    def set_size(self, width: int, height: int) -> "PlaneMapBuilder":
        width = int(width)
        height = int(height)
        if width <= 0 or height <= 0:
            raise ValueError("width and height must be > 0")
        self.width = width
        self.height = height
        return self

    def set_x_bounds(self, lower: float, upper: float) -> "PlaneMapBuilder":
        self.x_bounds = (float(lower), float(upper))
        return self

    def set_y_bounds(self, lower: float, upper: float) -> "PlaneMapBuilder":
        self.y_bounds = (float(lower), float(upper))
        return self

    def build(self) -> np.ndarray:
        x0, x1 = self.x_bounds
        y0, y1 = self.y_bounds
        xs = x0 + np.arange(self.width, dtype=np.float64) * ((x1 - x0) / self.width)
        ys = y0 + np.arange(self.height, dtype=np.float64) * ((y1 - y0) / self.height)
        xg, yg = np.meshgrid(xs, ys)

        logger.debug("Sampling %dx%d plane map", self.width, self.height)
        z = self.source.sample(xg, yg, np.zeros_like(xg))
        return np.asarray(z, dtype=np.float64)
