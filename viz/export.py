from __future__ import annotations

import io
import logging
from pathlib import Path

import numpy as np
from PIL import Image

logger = logging.getLogger(__name__)


def array_to_gray8(
    z: np.ndarray, *, value_range: tuple[float, float] | None = None
) -> np.ndarray:
    """Quantize a 2D array to 8-bit grayscale.

    Without ``value_range`` values are min/max normalized and constant arrays
    become all zeros. With it, values are mapped linearly from the range and
    clamped.
    """

    z = np.asarray(z, dtype=np.float64)
    if z.ndim != 2:
        raise ValueError("expected a 2D array")

    if value_range is None:
        lo = float(np.min(z))
        hi = float(np.max(z))
    else:
        lo, hi = (float(v) for v in value_range)
        if hi <= lo:
            raise ValueError("value_range upper bound must exceed lower bound")

    if hi == lo:
        return np.zeros(z.shape, dtype=np.uint8)
    zn = (z - lo) / (hi - lo)
    return np.clip(zn * 255.0, 0.0, 255.0).astype(np.uint8)


def array_to_png_bytes(
    z: np.ndarray, *, value_range: tuple[float, float] | None = None
) -> bytes:
    img = array_to_gray8(z, value_range=value_range)
    out = io.BytesIO()
    Image.fromarray(img).save(out, format="PNG")
    return out.getvalue()


def array_to_npy_bytes(z: np.ndarray) -> bytes:
    z = np.asarray(z)
    out = io.BytesIO()
    np.save(out, z)
    return out.getvalue()


def write_png(
    path: str | Path, z: np.ndarray, *, value_range: tuple[float, float] | None = None
) -> Path:
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_bytes(array_to_png_bytes(z, value_range=value_range))
    logger.info("Wrote %s (%dx%d)", path, z.shape[1], z.shape[0])
    return path
