from polyfactor.polynomial._polynomial_error import PolynomialError


class DegreeError(PolynomialError):
    """Raised when a coefficient vector has no degree, or too low a degree.

    The zero polynomial (every coefficient zero) has no degree.
    """
