"""Durand-Kerner (Weierstrass) simultaneous polynomial root finding."""

import warnings
from typing import List, NamedTuple, Sequence

from polyfactor.complex_number import Complex, norm
from polyfactor.polynomial import (
    LinearFactor,
    as_coefficients,
    polynomial_evaluate,
)
from polyfactor.polynomial._coefficients import Coefficients

from ._convergence import (
    COLLISION_PERTURBATION,
    DEFAULT_MAX_ITERATIONS,
    DEFAULT_TOLERANCE,
    PROXIMITY_LIMIT,
    SEED_SNAP_THRESHOLD,
    STALL_WINDOW,
    step_sizes,
)
from ._exceptions import ConvergenceWarning, InvalidDegreeError
from ._initial_guesses import (
    initial_guesses,
    separate_collisions,
    shift_guess,
)


class Factorization(NamedTuple):
    """Result of :func:`factorize_with_info`.

    Parameters
    ----------
    factors : list of LinearFactor
        One ``(1.0, -zero)`` factor per root, in seeding order.
    converged : bool
        Whether the last pass moved every guess by less than ``tol``.
    num_iterations : int
        Number of passes performed.
    """

    factors: List[LinearFactor]
    converged: bool
    num_iterations: int


def _validate(
    coefficients: List[Complex], max_iterations: int, tol: float
) -> None:
    degree = len(coefficients) - 1
    if degree < 2:
        raise InvalidDegreeError(
            f"factorize: polynomial degree must be >= 2, got {degree} "
            f"({len(coefficients)} coefficients)"
        )
    if coefficients[degree] == 0:
        raise InvalidDegreeError(
            "factorize: leading coefficient must be non-zero. "
            "Use polynomial_trim first to remove trailing zeros."
        )
    if max_iterations < 1:
        raise ValueError(
            f"factorize: max_iterations must be >= 1, got {max_iterations}"
        )
    if not tol > 0:
        raise ValueError(f"factorize: tol must be positive, got {tol}")


def _weierstrass_pass(
    current: Sequence[Complex],
    coefficients: Sequence[Complex],
    perturbation: Complex,
) -> List[Complex]:
    """Compute every updated guess from ``current`` alone.

    Returns a new list; ``current`` is only read.
    """
    leading = coefficients[-1]
    following = []

    for i, guess in enumerate(current):
        denominator = leading
        for j, other in enumerate(current):
            if j != i:
                denominator = denominator * (guess - other)

        if denominator == 0:
            following.append(shift_guess(guess, perturbation))
            continue

        correction = polynomial_evaluate(guess, coefficients) / denominator
        if not correction.is_finite():
            following.append(shift_guess(guess, perturbation))
            continue

        following.append(guess - correction)

    return following


def _kick_stalled(
    current: Sequence[Complex], steps: Sequence[float], perturbation: Complex
) -> List[Complex]:
    """Shift the guess that moved furthest during the last pass.

    With real coefficients a pair of conjugate guesses stays conjugate
    from pass to pass, so it can never split into two real roots. One
    shift breaks that symmetry.
    """
    worst = max(range(len(steps)), key=steps.__getitem__)
    kicked = list(current)
    kicked[worst] = shift_guess(kicked[worst], perturbation)
    return kicked


def factorize_with_info(
    coefficients: Coefficients,
    max_iterations: int = DEFAULT_MAX_ITERATIONS,
    *,
    tol: float = DEFAULT_TOLERANCE,
    snap_threshold: float = SEED_SNAP_THRESHOLD,
    proximity_limit: float = PROXIMITY_LIMIT,
    perturbation: Complex = COLLISION_PERTURBATION,
) -> Factorization:
    """Factor a polynomial and report whether iteration converged.

    Same algorithm and parameters as :func:`factorize`. No warning is
    emitted on non-convergence; inspect ``converged`` instead.

    Returns
    -------
    Factorization
        ``(factors, converged, num_iterations)``.
    """
    coefficients = as_coefficients(coefficients)
    _validate(coefficients, max_iterations, tol)

    current = initial_guesses(coefficients, snap_threshold=snap_threshold)
    steps: List[float] = []
    converged = False
    num_iterations = 0

    while num_iterations < max_iterations:
        num_iterations += 1

        stalled = num_iterations % STALL_WINDOW == 1
        if num_iterations > STALL_WINDOW and stalled:
            current = _kick_stalled(current, steps, perturbation)

        current = separate_collisions(
            current,
            proximity_limit=proximity_limit,
            perturbation=perturbation,
        )
        following = _weierstrass_pass(current, coefficients, perturbation)
        steps = step_sizes(current, following)

        # Publish the pass only once it is complete
        current = following

        if all(step < tol for step in steps):
            converged = True
            break

    factors = [LinearFactor(1.0, -z) for z in current]
    return Factorization(factors, converged, num_iterations)


def factorize(
    coefficients: Coefficients,
    max_iterations: int = DEFAULT_MAX_ITERATIONS,
    *,
    tol: float = DEFAULT_TOLERANCE,
    snap_threshold: float = SEED_SNAP_THRESHOLD,
    proximity_limit: float = PROXIMITY_LIMIT,
    perturbation: Complex = COLLISION_PERTURBATION,
) -> List[LinearFactor]:
    """Factor a polynomial into linear terms using Durand-Kerner iteration.

    The Durand-Kerner (Weierstrass) method refines approximations of all
    ``d`` roots at once. Each pass replaces every guess ``z_i`` by

    .. math::

        z_i - \\frac{p(z_i)}{c_d \\prod_{j \\ne i} (z_i - z_j)}

    where every term on the right-hand side comes from the previous pass.

    Parameters
    ----------
    coefficients : sequence of numbers or Tensor
        Ascending coefficients ``c_0 + c_1 x + ... + c_d x^d``. The
        degree ``d = len(coefficients) - 1`` must be at least 2 and
        ``c_d`` must be non-zero.
    max_iterations : int, default=2**12
        Iteration budget. Exhausting it is not an error.
    tol : float, default=1e-9
        Iteration stops once no guess moves by ``tol`` or more in a pass.
    snap_threshold : float, default=1e-10
        Initial-guess coordinates below this magnitude are set to zero.
    proximity_limit : float, default=1e-10
        Guesses closer than this are separated before each pass.
    perturbation : Complex, default=1e-8 + 1e-8i
        Shift used to separate colliding guesses, to move a guess whose
        correction is not finite, and to break a stalled iteration.

    Returns
    -------
    list of LinearFactor
        Exactly ``d`` factors ``(1.0, -z_i)``, one per approximate root
        ``z_i``, in the order the guesses were seeded. Coincident roots
        are not merged.

    Raises
    ------
    InvalidDegreeError
        If the degree is below 2 or the leading coefficient is zero.
    ValueError
        If ``max_iterations`` is below 1 or ``tol`` is not positive.

    Warns
    -----
    ConvergenceWarning
        If the budget ran out first. The returned factors are the last
        approximations; check ``residuals`` if accuracy matters.

    Examples
    --------
    Roots of ``x^2 - x - 6 = (x - 3)(x + 2)``:

    >>> factors = factorize([-6, -1, 1])
    >>> sorted(round(f.zero.real, 6) for f in factors)
    [-2.0, 3.0]

    Notes
    -----
    **Initialization**: guesses start evenly spaced on a circle of radius
    ``(|c_0| / |c_d|) ** (1 / d)`` (``c_0`` being the lowest non-zero
    coefficient), offset by ``pi / (2d)`` from the positive real axis.

    **Convergence**: quadratic near simple roots, linear near multiple
    roots. Not guaranteed for every coefficient distribution.

    **Collisions**: two identical guesses make the product in the
    denominator vanish. Before every pass, a guess closer than
    ``proximity_limit`` to an earlier one is shifted by ``perturbation``.
    Shifts are scaled by ``|z|`` for guesses larger than one.

    **Stalls**: with real coefficients, guesses that reach an exactly
    conjugate pair stay conjugate and circle a pair of real roots forever.
    After every 64 passes without convergence the guess that moved
    furthest in the last pass is shifted once by ``perturbation``.

    See Also
    --------
    factorize_with_info : Same computation, also reports convergence.
    durand_kerner : Batched tensor implementation.

    References
    ----------
    .. [1] E. Durand, "Solutions numeriques des equations algebriques",
           Masson, 1960.
    .. [2] I.O. Kerner, "Ein Gesamtschrittverfahren zur Berechnung der
           Nullstellen von Polynomen", Numerische Mathematik, 8:290-294,
           1966.
    """
    result = factorize_with_info(
        coefficients,
        max_iterations,
        tol=tol,
        snap_threshold=snap_threshold,
        proximity_limit=proximity_limit,
        perturbation=perturbation,
    )

    if not result.converged:
        warnings.warn(
            f"factorize: did not converge within {max_iterations} iterations",
            ConvergenceWarning,
            stacklevel=2,
        )

    return result.factors


def polynomial_roots(
    coefficients: Coefficients,
    max_iterations: int = DEFAULT_MAX_ITERATIONS,
    *,
    tol: float = DEFAULT_TOLERANCE,
) -> List[Complex]:
    """Approximate zeros of a polynomial.

    Convenience wrapper around :func:`factorize_with_info` returning the
    zeros ``z_i`` rather than linear factors.

    Warns
    -----
    ConvergenceWarning
        If the iteration budget ran out first.
    """
    result = factorize_with_info(coefficients, max_iterations, tol=tol)

    if not result.converged:
        warnings.warn(
            f"polynomial_roots: did not converge within {max_iterations} "
            "iterations",
            ConvergenceWarning,
            stacklevel=2,
        )

    return [factor.zero for factor in result.factors]


def residuals(roots, coefficients: Coefficients) -> List[float]:
    """Return ``|p(z)|`` for each approximate zero.

    Parameters
    ----------
    roots : sequence of Complex or LinearFactor
        Zeros, or factors as returned by :func:`factorize` (their
        ``zero`` is used).
    coefficients : sequence of numbers
        Ascending coefficients of ``p``.
    """
    coefficients = as_coefficients(coefficients)
    return [
        norm(
            polynomial_evaluate(
                r.zero if isinstance(r, LinearFactor) else r, coefficients
            )
        )
        for r in roots
    ]
