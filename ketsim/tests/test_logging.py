"""Tests for logging utilities."""

import io
import logging

from ketsim.computer import QuantumComputer
from ketsim.logging import configure_logging, get_logger, set_log_level
from ketsim import gates as G


def test_get_logger_namespaced_and_cached():
    logger = get_logger("test_module")
    assert isinstance(logger, logging.Logger)
    assert logger.name == "ketsim.test_module"
    assert get_logger("test_module") is logger
    assert get_logger("ketsim.computer").name == "ketsim.computer"


def test_computer_logs_at_debug():
    buf = io.StringIO()
    configure_logging(level=logging.DEBUG, stream=buf)
    try:
        c = QuantumComputer(1, seed=1)
        c.apply(G.hadamard())
        c.collapse()
        c.reset()
        out = buf.getvalue()
        assert "applied 1-qubit gate" in out
        assert "collapsed to" in out
        assert "reset 1-qubit register" in out
    finally:
        configure_logging(level=logging.WARNING)


def test_set_log_level_accepts_names():
    logger = get_logger("levels")
    set_log_level("ERROR")
    try:
        assert logger.level == logging.ERROR
    finally:
        set_log_level(logging.WARNING)
