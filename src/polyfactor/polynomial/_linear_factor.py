from typing import NamedTuple, Tuple, Union

from polyfactor.complex_number import Complex


class LinearFactor(NamedTuple):
    """Degree-one factor ``scale * x + root``.

    Parameters
    ----------
    scale : float
        Coefficient of ``x``.
    root : Complex
        Constant term. The zero of the factor is ``-root / scale``, so a
        factor of ``(x - 3)`` is ``LinearFactor(1.0, Complex(-3.0))``.
    """

    scale: float
    root: Complex

    @classmethod
    def coerce(
        cls, factor: Union["LinearFactor", Tuple[float, object]]
    ) -> "LinearFactor":
        """Build a factor from any ``(scale, root)`` pair."""
        scale, root = factor
        return cls(float(scale), Complex.from_number(root))

    @property
    def zero(self) -> Complex:
        """Value of ``x`` where the factor vanishes."""
        return -self.root / self.scale

    def coefficients(self) -> list:
        """Ascending coefficients ``[root, scale]``."""
        return [self.root, Complex(self.scale)]
