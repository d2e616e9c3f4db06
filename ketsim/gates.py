# ketsim/gates.py
"""Gate catalog.

Two-qubit matrices are in basis order 00,01,10,11 with qubit 0 as the high
bit, so qubit 0 is the control and qubit 1 the target.
"""
import math

from .complex import Complex, I, ONE, ZERO
from .gate import Gate
from .ket import Ket
from .matrix import Matrix


def identity(width: int) -> Gate:
    return Gate(width, Matrix.identity(Ket.size_for(width)))

def hadamard() -> Gate:
    s = math.sqrt(0.5)
    return Gate(1, Matrix([[s, s],
                           [s, -s]]))

def pauli_x() -> Gate:
    return Gate(1, Matrix([[0, 1],
                           [1, 0]]))

def pauli_y() -> Gate:
    return Gate(1, Matrix([[ZERO, -I],
                           [I, ZERO]]))

def pauli_z() -> Gate:
    return Gate(1, Matrix([[1, 0],
                           [0, -1]]))

def phase_shift(phi: float) -> Gate:
    return Gate(1, Matrix([[ONE, ZERO],
                           [ZERO, Complex.from_polar(1.0, phi)]]))

def rotation_z(theta: float) -> Gate:
    return Gate(1, Matrix([[Complex.from_polar(1.0, -0.5*theta), ZERO],
                           [ZERO, Complex.from_polar(1.0, 0.5*theta)]]))

def rotation_x(theta: float) -> Gate:
    c = math.cos(theta/2.0)
    s = Complex(0.0, -math.sin(theta/2.0))
    return Gate(1, Matrix([[c, s],
                           [s, c]]))

def swap() -> Gate:
    # exchanges |01> and |10>
    return Gate(2, Matrix([[1, 0, 0, 0],
                           [0, 0, 1, 0],
                           [0, 1, 0, 0],
                           [0, 0, 0, 1]]))

def sqrt_swap() -> Gate:
    """Half of a swap; sqrt_swap() twice equals swap()."""
    a = Complex(0.5, 0.5)
    b = Complex(0.5, -0.5)
    return Gate(2, Matrix([[ONE, ZERO, ZERO, ZERO],
                           [ZERO, a, b, ZERO],
                           [ZERO, b, a, ZERO],
                           [ZERO, ZERO, ZERO, ONE]]))

def controlled_not() -> Gate:
    # swap |10> <-> |11>
    return Gate(2, Matrix([[1, 0, 0, 0],
                           [0, 1, 0, 0],
                           [0, 0, 0, 1],
                           [0, 0, 1, 0]]))

def controlled(u: Matrix) -> Gate:
    """Apply the 2x2 unitary u to qubit 1 when qubit 0 is set."""
    if u.size() != 2:
        raise ValueError(f"controlled() takes a 2x2 matrix, got {u.size()}x{u.size()}")
    m = Matrix.identity(4)
    m.embed(u, 2, 2)
    return Gate(2, m)

def controlled_x() -> Gate:
    return controlled(pauli_x().matrix)

def controlled_y() -> Gate:
    return controlled(pauli_y().matrix)

def controlled_z() -> Gate:
    return controlled(pauli_z().matrix)
