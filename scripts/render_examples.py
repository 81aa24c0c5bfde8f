from __future__ import annotations

import argparse
import logging
from pathlib import Path

from noisehash import Add, Cylinders, Min, Perlin3D, PlaneMapBuilder
from noisehash.log import setup_logging
from viz.export import write_png

logger = logging.getLogger(__name__)


def main() -> None:
    """Render Cylinders combined with Perlin noise, as Add and as Min."""

    parser = argparse.ArgumentParser(description=main.__doc__)
    parser.add_argument("--out", type=Path, default=Path("example_images"))
    parser.add_argument("--seed", type=int, default=0)
    parser.add_argument("--size", type=int, default=100)
    args = parser.parse_args()

    setup_logging()

    cyl = Cylinders()
    perlin = Perlin3D(seed=args.seed)
    examples = {
        "add.png": Add(cyl, perlin),
        "min.png": Min(cyl, perlin),
    }

    for name, source in examples.items():
        z = PlaneMapBuilder(source, width=args.size, height=args.size).build()
        write_png(args.out / name, z, value_range=(-1.0, 1.0))

    logger.info("Rendered %d examples into %s", len(examples), args.out)


if __name__ == "__main__":
    main()
