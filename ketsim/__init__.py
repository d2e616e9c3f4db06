"""ketsim: a dense state-vector quantum register simulator."""

from . import gates
from .circuit import Circuit
from .complex import I, ONE, ZERO, Complex
from .computer import QuantumComputer
from .gate import Gate
from .ket import Ket
from .logging import configure_logging, get_logger, set_log_level
from .matrix import Matrix

__version__ = "0.1.0"

__all__ = [
    "Complex",
    "ZERO",
    "ONE",
    "I",
    "Matrix",
    "Gate",
    "Ket",
    "QuantumComputer",
    "Circuit",
    "gates",
    "get_logger",
    "configure_logging",
    "set_log_level",
]
