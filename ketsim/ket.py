# ketsim/ket.py
import numpy as np

from . import config
from .complex import Complex
from .gate import Gate
from .matrix import Matrix


class Ket:
    """Dense state vector of 2**n amplitudes.

    Qubit 0 is the most significant bit of a basis index: for n qubits,
    index i = sum_q b_q * 2**(n-1-q). A gate placed at `offset` therefore
    expands to I(2**offset) ⊗ U ⊗ I(2**rest).
    """

    __slots__ = ("psi",)

    def __init__(self, size: int, dtype=None):
        if size < 1 or size & (size - 1):
            raise ValueError(f"Ket size must be a positive power of two, got {size}")
        self.psi = np.zeros(size, dtype=config.DTYPE if dtype is None else dtype)

    @staticmethod
    def size_for(width: int) -> int:
        return 1 << width

    @classmethod
    def basis(cls, size: int, index: int, dtype=None) -> "Ket":
        ket = cls(size, dtype=dtype)
        if not 0 <= index < size:
            raise ValueError(f"Basis index {index} out of range [0, {size})")
        ket.psi[index] = 1.0
        return ket

    @property
    def width(self) -> int:
        return self.psi.shape[0].bit_length() - 1

    @property
    def dtype(self):
        return self.psi.dtype

    def __len__(self):
        return self.psi.shape[0]

    def __getitem__(self, i: int) -> Complex:
        return Complex.coerce(self.psi[i])

    def __setitem__(self, i: int, value):
        self.psi[i] = complex(Complex.coerce(value))

    def apply(self, gate: Gate, offset: int = 0):
        """Left-multiply the gate, expanded to the full register, onto psi.

        Builds the full 2**n x 2**n operator, so cost is O(4**n).
        """
        n, k = self.width, gate.width
        if offset < 0 or offset + k > n:
            raise ValueError(f"{k}-qubit gate at offset {offset} does not fit a {n}-qubit register")
        op = gate.matrix
        for _ in range(offset):
            op = Matrix.identity(2).tensor(op)
        for _ in range(n - offset - k):
            op = op.tensor(Matrix.identity(2))
        self.psi[:] = op.as_numpy() @ self.psi

    def probabilities(self) -> np.ndarray:
        return np.abs(self.psi) ** 2

    def norm2(self) -> float:
        return float(np.vdot(self.psi, self.psi).real)

    def check_normalized(self, tol=None):
        tol = config.NORM_TOLERANCE if tol is None else tol
        n2 = self.norm2()
        if not (abs(1.0 - n2) <= tol):
            raise AssertionError(f"Normalization failed: ||psi||^2={n2}")

    def isclose(self, other: "Ket", eps=None) -> bool:
        eps = config.EPSILON if eps is None else eps
        if len(self) != len(other):
            return False
        diff = self.psi - other.psi
        return bool(np.all(np.abs(diff.real) <= eps) and np.all(np.abs(diff.imag) <= eps))

    def __eq__(self, other):
        if not isinstance(other, Ket):
            return NotImplemented
        return self.isclose(other)

    __hash__ = None

    def copy(self) -> "Ket":
        ket = Ket(len(self), dtype=self.dtype)
        ket.psi[:] = self.psi
        return ket

    def as_numpy(self) -> np.ndarray:
        return self.psi

    def __repr__(self):
        return f"Ket({self.psi.tolist()!r})"
