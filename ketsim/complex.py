# ketsim/complex.py
import math
from dataclasses import dataclass
from numbers import Number

from . import config


@dataclass(frozen=True, eq=False)
class Complex:
    """Scalar complex value. Arithmetic promotes plain numbers."""
    real: float = 0.0
    imag: float = 0.0

    @staticmethod
    def from_polar(r: float, theta: float) -> "Complex":
        """r * exp(i*theta)"""
        return Complex(r * math.cos(theta), r * math.sin(theta))

    @staticmethod
    def coerce(value) -> "Complex":
        if isinstance(value, Complex):
            return value
        if isinstance(value, Number):
            c = complex(value)
            return Complex(c.real, c.imag)
        raise TypeError(f"Cannot convert {type(value).__name__} to Complex")

    def __add__(self, other):
        o = Complex.coerce(other)
        return Complex(self.real + o.real, self.imag + o.imag)

    __radd__ = __add__

    def __sub__(self, other):
        o = Complex.coerce(other)
        return Complex(self.real - o.real, self.imag - o.imag)

    def __rsub__(self, other):
        return Complex.coerce(other) - self

    def __mul__(self, other):
        o = Complex.coerce(other)
        # (a+bi)(c+di) = (ac-bd) + (ad+bc)i
        return Complex(self.real * o.real - self.imag * o.imag,
                       self.real * o.imag + self.imag * o.real)

    __rmul__ = __mul__

    def __neg__(self):
        return Complex(-self.real, -self.imag)

    def conjugate(self) -> "Complex":
        return Complex(self.real, -self.imag)

    def norm_sqr(self) -> float:
        return self.real * self.real + self.imag * self.imag

    def isclose(self, other, eps=None) -> bool:
        eps = config.EPSILON if eps is None else eps
        o = Complex.coerce(other)
        return abs(self.real - o.real) <= eps and abs(self.imag - o.imag) <= eps

    def __eq__(self, other):
        try:
            return self.isclose(other)
        except TypeError:
            return NotImplemented

    __hash__ = None

    def __complex__(self):
        return complex(self.real, self.imag)

    def __repr__(self):
        return f"Complex({self.real!r}, {self.imag!r})"


ZERO = Complex(0.0, 0.0)
ONE = Complex(1.0, 0.0)
I = Complex(0.0, 1.0)
