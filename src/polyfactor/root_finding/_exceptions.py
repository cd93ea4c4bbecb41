"""Exception and warning classes for root finding module."""

from polyfactor.polynomial._degree_error import DegreeError


class RootFindingError(Exception):
    """Base exception for root finding errors."""

    pass


class InvalidDegreeError(RootFindingError, DegreeError, ValueError):
    """Raised when a polynomial's degree is below what the method handles.

    Degree 0 and 1 polynomials have trivial solutions and are rejected, as
    are coefficient vectors whose leading coefficient is zero.
    """

    pass


class ConvergenceWarning(RuntimeWarning):
    """Iteration budget exhausted before the tolerance was met.

    The accompanying result is still complete; each approximation may be
    inaccurate.
    """

    pass
