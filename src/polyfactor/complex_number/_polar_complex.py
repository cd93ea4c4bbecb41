"""Polar complex value type."""

from __future__ import annotations

import math
from dataclasses import dataclass
from numbers import Real

from ._complex import Complex


def _wrap(angle: float) -> float:
    """Map an angle onto the principal range ``(-pi, pi]``."""
    wrapped = math.remainder(angle, 2.0 * math.pi)
    if wrapped == -math.pi:
        return math.pi
    return wrapped


@dataclass(frozen=True)
class PolarComplex:
    """Immutable complex number in polar form.

    Multiplication, division and real powers act on the magnitude and
    argument directly; addition and subtraction round-trip through
    :class:`Complex`. Arguments of results are kept in ``(-pi, pi]`` and
    magnitudes are non-negative.

    Attributes
    ----------
    magnitude : float
        Distance from the origin.
    argument : float
        Angle from the positive real axis in radians.

    Examples
    --------
    >>> a = PolarComplex(2.0, math.pi / 4)
    >>> a * a
    PolarComplex(magnitude=4.0, argument=1.5707963267948966)
    """

    magnitude: float
    argument: float = 0.0

    def __post_init__(self):
        object.__setattr__(self, "magnitude", float(self.magnitude))
        object.__setattr__(self, "argument", float(self.argument))

    @classmethod
    def from_cartesian(cls, z: Complex) -> "PolarComplex":
        return cls(z.absolute(), z.argument())

    @property
    def real(self) -> float:
        return self.magnitude * math.cos(self.argument)

    @property
    def imag(self) -> float:
        return self.magnitude * math.sin(self.argument)

    def to_cartesian(self) -> Complex:
        return Complex(self.real, self.imag)

    def conjugate(self) -> "PolarComplex":
        return PolarComplex(self.magnitude, _wrap(-self.argument))

    def pow_real(self, exponent: float) -> "PolarComplex":
        """Raise to a real power: ``(r^n, n * theta)``."""
        return PolarComplex(
            self.magnitude**exponent, _wrap(self.argument * exponent)
        )

    def __neg__(self) -> "PolarComplex":
        return PolarComplex(self.magnitude, _wrap(self.argument + math.pi))

    def __mul__(self, other) -> "PolarComplex":
        if isinstance(other, PolarComplex):
            return PolarComplex(
                self.magnitude * other.magnitude,
                _wrap(self.argument + other.argument),
            )
        if isinstance(other, Real):
            if other < 0:
                return PolarComplex(
                    -self.magnitude * other, _wrap(self.argument + math.pi)
                )
            return PolarComplex(self.magnitude * other, self.argument)
        return NotImplemented

    def __rmul__(self, other) -> "PolarComplex":
        return self.__mul__(other)

    def __truediv__(self, other) -> "PolarComplex":
        if isinstance(other, Real):
            other = PolarComplex(abs(other), math.pi if other < 0 else 0.0)
        if not isinstance(other, PolarComplex):
            return NotImplemented
        if other.magnitude == 0.0:
            raise ZeroDivisionError("PolarComplex division by zero")
        return PolarComplex(
            self.magnitude / other.magnitude,
            _wrap(self.argument - other.argument),
        )

    def __rtruediv__(self, other) -> "PolarComplex":
        if not isinstance(other, Real):
            return NotImplemented
        return PolarComplex(abs(other), math.pi if other < 0 else 0.0) / self

    def __add__(self, other) -> "PolarComplex":
        if isinstance(other, PolarComplex):
            other = other.to_cartesian()
        elif isinstance(other, Real):
            other = Complex(float(other))
        else:
            return NotImplemented
        return PolarComplex.from_cartesian(self.to_cartesian() + other)

    def __radd__(self, other) -> "PolarComplex":
        return self.__add__(other)

    def __sub__(self, other) -> "PolarComplex":
        if isinstance(other, PolarComplex):
            other = other.to_cartesian()
        elif isinstance(other, Real):
            other = Complex(float(other))
        else:
            return NotImplemented
        return PolarComplex.from_cartesian(self.to_cartesian() - other)

    def __rsub__(self, other) -> "PolarComplex":
        if not isinstance(other, Real):
            return NotImplemented
        return PolarComplex.from_cartesian(
            Complex(float(other)) - self.to_cartesian()
        )


def polar_to_cartesian(magnitude: float, argument: float) -> Complex:
    """Convert polar coordinates to a :class:`Complex`."""
    return Complex.from_polar(magnitude, argument)


def cartesian_to_polar(z: Complex) -> PolarComplex:
    """Convert a :class:`Complex` to a :class:`PolarComplex`."""
    return PolarComplex.from_cartesian(z)
