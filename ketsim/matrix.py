# ketsim/matrix.py
import numpy as np

from . import config
from .complex import Complex


class Matrix:
    """Square complex matrix backed by a 2-D numpy array (row-major)."""

    __slots__ = ("_data",)

    def __init__(self, rows, dtype=None):
        dtype = config.DTYPE if dtype is None else dtype
        rows = [[complex(v) for v in row] for row in rows]
        d = len(rows)
        if d == 0:
            raise ValueError("Matrix must have at least one row")
        for r, row in enumerate(rows):
            if len(row) != d:
                raise ValueError(f"Matrix must be square: row {r} has {len(row)} entries, expected {d}")
        self._data = np.array(rows, dtype=dtype)

    @classmethod
    def from_numpy(cls, array: np.ndarray, dtype=None) -> "Matrix":
        dtype = config.DTYPE if dtype is None else dtype
        a = np.array(array, dtype=dtype, copy=True)
        if a.ndim != 2 or a.shape[0] != a.shape[1] or a.shape[0] == 0:
            raise ValueError(f"Matrix must be square and non-empty, got shape {a.shape}")
        m = cls.__new__(cls)
        m._data = a
        return m

    @classmethod
    def identity(cls, d: int, dtype=None) -> "Matrix":
        return cls.from_numpy(np.eye(d), dtype=dtype)

    @classmethod
    def zeros(cls, d: int, dtype=None) -> "Matrix":
        return cls.from_numpy(np.zeros((d, d)), dtype=dtype)

    def size(self) -> int:
        return self._data.shape[0]

    def __getitem__(self, rc) -> Complex:
        r, c = rc
        return Complex.coerce(self._data[r, c])

    def __setitem__(self, rc, value):
        r, c = rc
        self._data[r, c] = complex(Complex.coerce(value))

    # ---------------------------------------------------------------------

    def multiply(self, other: "Matrix") -> "Matrix":
        if self.size() != other.size():
            raise ValueError(f"Cannot multiply {self.size()}x{self.size()} by {other.size()}x{other.size()}")
        return Matrix.from_numpy(self._data @ other._data)

    def __matmul__(self, other):
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.multiply(other)

    def tensor(self, other: "Matrix") -> "Matrix":
        """Kronecker product self ⊗ other; self's indices become the high-order part."""
        return Matrix.from_numpy(np.kron(self._data, other._data))

    def _check_block(self, row, col, size):
        if row < 0 or col < 0 or row + size > self.size() or col + size > self.size():
            raise ValueError(
                f"{size}x{size} block at ({row}, {col}) does not fit in {self.size()}x{self.size()} matrix")

    def embed(self, sub: "Matrix", row: int, col: int) -> None:
        """Overwrite the block whose top-left corner is (row, col) with sub, in place."""
        k = sub.size()
        self._check_block(row, col, k)
        self._data[row:row + k, col:col + k] = sub._data

    def extract(self, row: int, col: int, size: int) -> "Matrix":
        self._check_block(row, col, size)
        return Matrix.from_numpy(self._data[row:row + size, col:col + size])

    def conjugate_transpose(self) -> "Matrix":
        return Matrix.from_numpy(self._data.conj().T)

    def is_unitary(self, eps=None) -> bool:
        eps = config.EPSILON if eps is None else eps
        prod = self._data @ self._data.conj().T
        return bool(np.allclose(prod, np.eye(self.size()), atol=eps, rtol=0))

    # ---------------------------------------------------------------------

    def isclose(self, other: "Matrix", eps=None) -> bool:
        eps = config.EPSILON if eps is None else eps
        if self.size() != other.size():
            return False
        diff = self._data - other._data
        return bool(np.all(np.abs(diff.real) <= eps) and np.all(np.abs(diff.imag) <= eps))

    def __eq__(self, other):
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.isclose(other)

    __hash__ = None

    def copy(self) -> "Matrix":
        return Matrix.from_numpy(self._data)

    def as_numpy(self) -> np.ndarray:
        view = self._data.view()
        view.flags.writeable = False
        return view

    def __repr__(self):
        return f"Matrix({self._data.tolist()!r})"
