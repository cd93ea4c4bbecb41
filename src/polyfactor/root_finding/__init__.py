from ._convergence import (
    COLLISION_PERTURBATION,
    DEFAULT_MAX_ITERATIONS,
    DEFAULT_TOLERANCE,
    PROXIMITY_LIMIT,
    SEED_SNAP_THRESHOLD,
    STALL_WINDOW,
    check_convergence,
    default_tolerances,
    max_step,
    step_sizes,
)
from ._durand_kerner import (
    Factorization,
    factorize,
    factorize_with_info,
    polynomial_roots,
    residuals,
)
from ._durand_kerner_batched import durand_kerner
from ._exceptions import (
    ConvergenceWarning,
    InvalidDegreeError,
    RootFindingError,
)
from ._initial_guesses import (
    initial_guesses,
    separate_collisions,
    shift_guess,
)
from ._linear_factors import LinearFactors

__all__ = [
    "COLLISION_PERTURBATION",
    "DEFAULT_MAX_ITERATIONS",
    "DEFAULT_TOLERANCE",
    "PROXIMITY_LIMIT",
    "SEED_SNAP_THRESHOLD",
    "STALL_WINDOW",
    "check_convergence",
    "default_tolerances",
    "durand_kerner",
    "factorize",
    "factorize_with_info",
    "initial_guesses",
    "max_step",
    "polynomial_roots",
    "residuals",
    "separate_collisions",
    "shift_guess",
    "step_sizes",
    "ConvergenceWarning",
    "Factorization",
    "InvalidDegreeError",
    "LinearFactors",
    "RootFindingError",
]
