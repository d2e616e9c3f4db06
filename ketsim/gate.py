# ketsim/gate.py
from .matrix import Matrix


class Gate:
    """A unitary operator on `width` qubits.

    The operator is copied in and copied out, so a Gate never changes after
    construction. Unitarity is not checked here; see `Matrix.is_unitary`.
    """

    __slots__ = ("_width", "_matrix")

    def __init__(self, width: int, matrix: Matrix):
        if width < 1:
            raise ValueError(f"Gate width must be at least 1, got {width}")
        if matrix.size() != 1 << width:
            raise ValueError(
                f"A {width}-qubit gate needs a {1 << width}x{1 << width} operator, "
                f"got {matrix.size()}x{matrix.size()}")
        self._width = width
        self._matrix = matrix.copy()

    @property
    def width(self) -> int:
        return self._width

    @property
    def matrix(self) -> Matrix:
        return self._matrix.copy()

    def __eq__(self, other):
        if not isinstance(other, Gate):
            return NotImplemented
        return self._width == other._width and self._matrix == other._matrix

    __hash__ = None

    def __repr__(self):
        return f"Gate(width={self._width}, matrix={self._matrix!r})"
