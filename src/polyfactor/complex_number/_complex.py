"""Cartesian complex value type."""

from __future__ import annotations

import math
from dataclasses import dataclass
from numbers import Real
from typing import Union

Number = Union["Complex", Real, complex]


def _coerce(value):
    if isinstance(value, Complex):
        return value
    if isinstance(value, Real):
        return Complex(float(value), 0.0)
    if isinstance(value, complex):
        return Complex(value.real, value.imag)
    return NotImplemented


@dataclass(frozen=True, eq=False)
class Complex:
    """Immutable complex number in Cartesian form.

    Every arithmetic operation returns a new instance. Real scalars and
    built-in ``complex`` values are accepted on either side of an operator.

    Attributes
    ----------
    real : float
        Real component.
    imag : float
        Imaginary component.

    Examples
    --------
    >>> z = Complex(1.0, 2.0)
    >>> z * z.conjugate()
    Complex(real=5.0, imag=0.0)
    >>> 2 * z
    Complex(real=2.0, imag=4.0)

    Notes
    -----
    Equality is exact component-wise comparison; no tolerance is applied.
    Use :meth:`absolute` of the difference for approximate comparisons.
    """

    real: float
    imag: float = 0.0

    def __post_init__(self):
        object.__setattr__(self, "real", float(self.real))
        object.__setattr__(self, "imag", float(self.imag))

    @classmethod
    def from_number(cls, value: Number) -> "Complex":
        """Coerce an ``int``, ``float``, ``complex`` or ``Complex``."""
        result = _coerce(value)
        if result is NotImplemented:
            raise TypeError(
                f"Complex.from_number: cannot convert {type(value).__name__}"
            )
        return result

    @classmethod
    def from_polar(cls, magnitude: float, argument: float) -> "Complex":
        """Build ``magnitude * (cos(argument) + i sin(argument))``."""
        return cls(
            magnitude * math.cos(argument), magnitude * math.sin(argument)
        )

    def conjugate(self) -> "Complex":
        return Complex(self.real, -self.imag)

    def absolute(self) -> float:
        """Magnitude ``sqrt(real^2 + imag^2)``."""
        return math.hypot(self.real, self.imag)

    def argument(self) -> float:
        """Principal argument in ``(-pi, pi]``.

        The zero value has argument ``0.0``.
        """
        if self.real == 0.0 and self.imag == 0.0:
            return 0.0
        angle = math.atan2(self.imag, self.real)
        # atan2 rounds to -pi below the negative real axis when the imaginary
        # part is a signed zero or too small to move the result off -pi
        if angle == -math.pi:
            return math.pi
        return angle

    def is_finite(self) -> bool:
        return math.isfinite(self.real) and math.isfinite(self.imag)

    def __complex__(self) -> complex:
        return complex(self.real, self.imag)

    def __eq__(self, other) -> bool:
        other = _coerce(other)
        if other is NotImplemented:
            return NotImplemented
        return self.real == other.real and self.imag == other.imag

    def __ne__(self, other) -> bool:
        result = self.__eq__(other)
        if result is NotImplemented:
            return NotImplemented
        return not result

    def __hash__(self) -> int:
        # Matches hash(x) for Complex(x, 0) == x
        return hash(complex(self.real, self.imag))

    def __neg__(self) -> "Complex":
        return Complex(-self.real, -self.imag)

    def __pos__(self) -> "Complex":
        return self

    def __add__(self, other) -> "Complex":
        other = _coerce(other)
        if other is NotImplemented:
            return NotImplemented
        return Complex(self.real + other.real, self.imag + other.imag)

    def __radd__(self, other) -> "Complex":
        return self.__add__(other)

    def __sub__(self, other) -> "Complex":
        other = _coerce(other)
        if other is NotImplemented:
            return NotImplemented
        return Complex(self.real - other.real, self.imag - other.imag)

    def __rsub__(self, other) -> "Complex":
        other = _coerce(other)
        if other is NotImplemented:
            return NotImplemented
        return other.__sub__(self)

    def __mul__(self, other) -> "Complex":
        other = _coerce(other)
        if other is NotImplemented:
            return NotImplemented
        return Complex(
            self.real * other.real - self.imag * other.imag,
            self.real * other.imag + self.imag * other.real,
        )

    def __rmul__(self, other) -> "Complex":
        return self.__mul__(other)

    def __truediv__(self, other) -> "Complex":
        other = _coerce(other)
        if other is NotImplemented:
            return NotImplemented

        c, d = other.real, other.imag
        if c == 0.0 and d == 0.0:
            raise ZeroDivisionError("Complex division by zero")

        # Smith's algorithm: scale by the larger divisor component so the
        # squared magnitude never underflows
        if abs(c) >= abs(d):
            ratio = d / c
            denominator = c + d * ratio
            return Complex(
                (self.real + self.imag * ratio) / denominator,
                (self.imag - self.real * ratio) / denominator,
            )

        ratio = c / d
        denominator = c * ratio + d
        return Complex(
            (self.real * ratio + self.imag) / denominator,
            (self.imag * ratio - self.real) / denominator,
        )

    def __rtruediv__(self, other) -> "Complex":
        other = _coerce(other)
        if other is NotImplemented:
            return NotImplemented
        return other.__truediv__(self)

    def __pow__(self, exponent) -> "Complex":
        from ._complex_pow import complex_pow, complex_pow_real

        if isinstance(exponent, Real):
            return complex_pow_real(self, exponent)

        exponent = _coerce(exponent)
        if exponent is NotImplemented:
            return NotImplemented
        return complex_pow(self, exponent)

    def __rpow__(self, base) -> "Complex":
        from ._complex_pow import complex_pow

        base = _coerce(base)
        if base is NotImplemented:
            return NotImplemented
        return complex_pow(base, self)
