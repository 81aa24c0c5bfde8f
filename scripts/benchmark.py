from __future__ import annotations

import time

import numpy as np

from noisehash import PermutationTable, Perlin2D, fbm2


def _timeit(label: str, fn) -> float:
    t0 = time.perf_counter()
    fn()
    t1 = time.perf_counter()
    ms = (t1 - t0) * 1000.0
    print(f"{label}: {ms:.2f} ms")
    return ms


def main() -> None:
    """Quick CPU benchmark.

    Intended targets (laptop-class CPU):
    - from_seed: < ~1ms per table
    - hash_array over 512x512 3D points: < ~50ms
    """

    table = PermutationTable.from_seed(0)

    _timeit(
        "PermutationTable.from_seed x100",
        lambda: [PermutationTable.from_seed(s) for s in range(100)],
    )
    _timeit(
        "PermutationTable.hash x100000 (3 axes)",
        lambda: [table.hash((i, i >> 3, -i)) for i in range(100_000)],
    )

    xi, yi = np.meshgrid(np.arange(512), np.arange(512))
    _timeit(
        "PermutationTable.hash_array 512x512 (3 axes)",
        lambda: table.hash_array(xi, yi, xi ^ yi),
    )

    perlin = Perlin2D(seed=0, hasher=table)
    xg, yg = np.meshgrid(np.linspace(0.0, 8.0, 512), np.linspace(0.0, 8.0, 512))
    _timeit("fbm2 Perlin2D 512x512, 4 octaves", lambda: fbm2(perlin, xg, yg, octaves=4))


if __name__ == "__main__":
    main()
