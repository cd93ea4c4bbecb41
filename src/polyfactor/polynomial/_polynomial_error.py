class PolynomialError(Exception):
    """Base exception for coefficient-vector operations."""

    pass
