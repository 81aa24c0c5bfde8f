from __future__ import annotations

import logging
import sys

LOG_FORMAT = "%(asctime)s.%(msecs)03d [%(levelname)s] %(name)s:%(lineno)d | %(message)s"


def setup_logging(level: int = logging.INFO) -> None:
    """Configure the root logger for scripts.

    The library modules only create loggers; handlers are installed here so
    importing ``noisehash`` never changes logging output on its own.
    """

    logging.basicConfig(
        level=level,
        format=LOG_FORMAT,
        datefmt="%H:%M:%S",
        handlers=[logging.StreamHandler(sys.stdout)],
        force=True,
    )
    logging.getLogger("noisehash").setLevel(level)
    logging.getLogger("PIL").setLevel(logging.WARNING)
