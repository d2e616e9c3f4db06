# ketsim/computer.py
from typing import Optional

import numpy as np

from . import config
from .gate import Gate
from .ket import Ket
from .logging import get_logger

logger = get_logger(__name__)


class QuantumComputer:
    """An n-qubit register with a measurement lifecycle.

    initialize -> apply* -> collapse -> value -> reset. Until `collapse()` the
    amplitudes are not observable; afterwards the register holds the measured
    basis state and `value()` returns its index.

    `rng` is anything with a `random()` method returning a float in [0, 1).
    It defaults to `np.random.default_rng(seed)`.
    """

    def __init__(self, width: int, rng=None, seed: Optional[int] = None):
        if width < 1:
            raise ValueError(f"QuantumComputer needs at least one qubit, got {width}")
        self._width = width
        self._rng = rng if rng is not None else np.random.default_rng(seed)
        self._state = Ket.basis(Ket.size_for(width), 0)
        self._observed: Optional[int] = None

    @property
    def width(self) -> int:
        return self._width

    @property
    def state(self) -> Ket:
        return self._state.copy()

    @property
    def collapsed(self) -> bool:
        return self._observed is not None

    def initialize(self, value: int):
        size = Ket.size_for(self._width)
        if not 0 <= value < size:
            raise ValueError(f"Initial value {value} out of range [0, {size}) for {self._width} qubits")
        self._state = Ket.basis(size, value)
        self._observed = None

    def apply(self, gate: Gate, offset: int = 0):
        if gate.width > self._width:
            raise ValueError(f"{gate.width}-qubit gate is wider than the {self._width}-qubit register")
        self._state.apply(gate, offset)
        self._observed = None
        logger.debug("applied %d-qubit gate at offset %d", gate.width, offset)

    def probabilities(self) -> np.ndarray:
        return self._state.probabilities()

    def collapse(self) -> int:
        """Measure every qubit (Born rule) and freeze the register to the outcome."""
        if self._observed is not None:
            raise RuntimeError("Register is already collapsed; initialize, apply or reset first")

        p = self._state.probabilities()
        total = float(p.sum())
        if abs(1.0 - total) > config.NORM_TOLERANCE:
            logger.warning("collapsing a denormalized state: sum(|a|^2)=%g", total)

        cumulative = np.cumsum(p)
        cumulative[-1] = 1.0  # absorb rounding at the top end
        u = float(self._rng.random())
        outcome = int(np.searchsorted(cumulative, u, side="right"))

        self._state = Ket.basis(len(self._state), outcome)
        self._observed = outcome
        logger.debug("collapsed to %d (p=%.6f, u=%.6f)", outcome, p[outcome], u)
        return outcome

    def value(self) -> int:
        if self._observed is None:
            raise RuntimeError("No classical value before collapse()")
        return self._observed

    def reset(self):
        self._state = Ket.basis(Ket.size_for(self._width), 0)
        self._observed = None
        logger.debug("reset %d-qubit register", self._width)

    def __repr__(self):
        return f"QuantumComputer(width={self._width}, observed={self._observed})"
