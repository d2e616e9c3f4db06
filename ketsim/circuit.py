# ketsim/circuit.py
from collections import Counter
from typing import List, Tuple, Optional

import numpy as np

from .computer import QuantumComputer
from .gate import Gate
from .logging import get_logger
from . import gates as G

logger = get_logger(__name__)

Op = Tuple[Gate, int]  # (gate, offset of its first qubit)

class Circuit:
    n: int
    ops: List[Op]

    def __init__(self, n: int, ops: Optional[List[Op]] = None):
        if n < 1:
            raise ValueError(f"Circuit needs at least one qubit, got {n}")
        self.n = n
        self.ops = []
        for gate, offset in ops or ():
            self.add(gate, offset)

    @staticmethod
    def empty(n:int) -> "Circuit":
        return Circuit(n)

    def __len__(self):
        return len(self.ops)

    def add(self, gate: Gate, offset: int = 0) -> "Circuit":
        if offset < 0 or offset + gate.width > self.n:
            raise ValueError(f"{gate.width}-qubit gate at offset {offset} does not fit {self.n} qubits")
        self.ops.append((gate, offset))
        return self

    def h(self, k:int): return self.add(G.hadamard(), k)
    def x(self, k:int): return self.add(G.pauli_x(), k)
    def z(self, k:int): return self.add(G.pauli_z(), k)
    def cnot(self, k:int): return self.add(G.controlled_not(), k)  # control k, target k+1
    def swap(self, k:int): return self.add(G.swap(), k)            # qubits k, k+1

    def _apply_all(self, qc: QuantumComputer):
        for gate, offset in self.ops:
            qc.apply(gate, offset)

    def run(self, initial: int = 0, rng=None, check_norm=True, tol=None) -> QuantumComputer:
        """Apply every gate to |initial> and return the (uncollapsed) computer."""
        qc = QuantumComputer(self.n, rng=rng)
        qc.initialize(initial)
        self._apply_all(qc)
        if check_norm:
            qc.state.check_normalized(tol=tol)
        return qc

    def sample(self, shots: int, initial: int = 0, rng=None, seed: Optional[int] = None) -> Counter:
        """Run `shots` independent trials on one register and count the outcomes."""
        if rng is None:
            rng = np.random.default_rng(seed)
        qc = QuantumComputer(self.n, rng=rng)
        counts = Counter()
        for _ in range(shots):
            qc.initialize(initial)
            self._apply_all(qc)
            qc.collapse()
            counts[qc.value()] += 1
            qc.reset()
        logger.debug("sampled %d shots over %d gates: %s", shots, len(self.ops), dict(counts))
        return counts
