# ketsim/tests/test_gates.py
import math
import pytest
from ketsim.computer import QuantumComputer
from ketsim.gate import Gate
from ketsim.matrix import Matrix
from ketsim import gates as G

def run_gate(c, gate, start):
    """initialize -> apply -> collapse -> value -> reset"""
    c.initialize(start)
    c.apply(gate)
    c.collapse()
    v = c.value()
    c.reset()
    return v

CATALOG = [
    G.identity(1), G.identity(2), G.hadamard(), G.pauli_x(), G.pauli_y(), G.pauli_z(),
    G.phase_shift(0.3), G.rotation_x(0.7), G.rotation_z(1.1), G.swap(), G.sqrt_swap(),
    G.controlled_not(), G.controlled_x(), G.controlled_y(), G.controlled_z(),
]

@pytest.mark.parametrize("gate", CATALOG)
def test_catalog_is_unitary(gate):
    assert gate.matrix.is_unitary()
    assert gate.matrix.size() == 1 << gate.width

@pytest.mark.parametrize("factory", [G.pauli_x, G.pauli_y, G.pauli_z, G.hadamard, G.swap])
def test_involutions(factory):
    g = factory()
    assert g.matrix @ g.matrix == Matrix.identity(1 << g.width)

def test_hadamard_statistics():
    c = QuantumComputer(1, seed=2024)
    ones = sum(run_gate(c, G.hadamard(), 0) for _ in range(1000))
    assert 400 <= ones <= 600

def test_pauli_x_truth_table():
    c = QuantumComputer(1, seed=0)
    assert run_gate(c, G.pauli_x(), 0) == 1
    assert run_gate(c, G.pauli_x(), 1) == 0

def test_pauli_y_truth_table():
    c = QuantumComputer(1, seed=0)
    assert run_gate(c, G.pauli_y(), 0) == 1   # i|1>
    assert run_gate(c, G.pauli_y(), 1) == 0   # -i|0>

def test_pauli_z_keeps_classical_value():
    c = QuantumComputer(1, seed=0)
    assert run_gate(c, G.pauli_z(), 0) == 0
    assert run_gate(c, G.pauli_z(), 1) == 1   # -|1>

def test_phase_shift():
    c = QuantumComputer(1, seed=0)
    assert run_gate(c, G.phase_shift(0.3), 0) == 0
    assert run_gate(c, G.phase_shift(0.3), 1) == 1
    assert G.phase_shift(math.pi) == G.pauli_z()

def test_rotation_x_pi_is_x_up_to_phase():
    assert G.rotation_x(math.pi).matrix == Matrix([[0, -1j], [-1j, 0]])
    c = QuantumComputer(1, seed=0)
    assert run_gate(c, G.rotation_x(math.pi), 0) == 1

def test_swap():
    c = QuantumComputer(2, seed=0)
    assert run_gate(c, G.swap(), 0) == 0
    assert run_gate(c, G.swap(), 2) == 1
    assert run_gate(c, G.swap(), 1) == 2
    assert run_gate(c, G.swap(), 3) == 3

def test_sqrt_swap():
    c = QuantumComputer(2, seed=0)
    assert run_gate(c, G.sqrt_swap(), 0) == 0
    assert run_gate(c, G.sqrt_swap(), 3) == 3
    half = G.sqrt_swap().matrix
    assert half @ half == G.swap().matrix

def test_controlled_not_truth_table():
    c = QuantumComputer(2, seed=0)
    assert run_gate(c, G.controlled_not(), 0) == 0   # 00 -> 00
    assert run_gate(c, G.controlled_not(), 1) == 1   # 01 -> 01
    assert run_gate(c, G.controlled_not(), 2) == 3   # 10 -> 11
    assert run_gate(c, G.controlled_not(), 3) == 2   # 11 -> 10

def test_controlled_builds_cnot():
    assert G.controlled(Matrix([[0, 1], [1, 0]])) == G.controlled_not()
    assert G.controlled(G.pauli_x().matrix).matrix == G.controlled_not().matrix
    assert G.controlled_x() == G.controlled_not()

def test_controlled_z_is_diagonal():
    assert G.controlled_z().matrix == Matrix([[1, 0, 0, 0],
                                              [0, 1, 0, 0],
                                              [0, 0, 1, 0],
                                              [0, 0, 0, -1]])
    assert G.controlled_y().matrix.extract(2, 2, 2) == G.pauli_y().matrix
    assert G.controlled_y().matrix.extract(0, 0, 2) == Matrix.identity(2)

def test_controlled_requires_2x2():
    with pytest.raises(ValueError):
        G.controlled(Matrix.identity(4))

def test_gate_contract():
    with pytest.raises(ValueError):
        Gate(2, Matrix.identity(2))
    with pytest.raises(ValueError):
        Gate(0, Matrix.identity(1))

def test_gate_is_immutable():
    m = Matrix([[0, 1], [1, 0]])
    g = Gate(1, m)
    m[0, 0] = 5
    g.matrix[0, 0] = 5
    assert g == G.pauli_x()
    assert g != G.pauli_z()
    assert g != G.identity(2)
