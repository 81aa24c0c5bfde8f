import logging

from noisehash.log import setup_logging
from noisehash.table import PermutationTable


def test_setup_logging_sets_package_level():
    root = logging.getLogger()
    saved = (root.handlers[:], root.level)
    try:
        setup_logging(logging.DEBUG)
        assert logging.getLogger("noisehash").level == logging.DEBUG
        setup_logging()
        assert logging.getLogger("noisehash").level == logging.INFO
        assert len(root.handlers) == 1
    finally:
        root.handlers[:] = saved[0]
        root.setLevel(saved[1])
        logging.getLogger("noisehash").setLevel(logging.NOTSET)


def test_from_seed_logs_seed(caplog):
    with caplog.at_level(logging.DEBUG, logger="noisehash"):
        PermutationTable.from_seed(-1)
    assert "seed 4294967295" in caplog.text


def test_deserialize_logs_duplicates(caplog):
    with caplog.at_level(logging.DEBUG, logger="noisehash"):
        PermutationTable.deserialize([0] * 256)
    assert "duplicate" in caplog.text
