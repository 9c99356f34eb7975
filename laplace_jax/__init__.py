# laplace_jax/__init__.py
"""
laplace-jax: mode finding, Fisher-information covariances and parameter
reshaping for Laplace-style Bayesian computation in JAX.

Submodules:
    inference: find_mode, fisher_var, laplace_approximation
    linalg: fast_inv
    ops: flatten, vec_to_matrix, tens_to_mat
    core: exceptions and typing protocols
"""

__version__ = "0.1.0"

from .core.errors import (
    LaplaceJaxError,
    ValidationError,
    ShapeError,
    NumericalError,
    SingularMatrixError,
    DegenerateDerivativeError,
    ConvergenceError,
)
from .inference import (
    ModeCFG,
    ModeRun,
    find_mode,
    find_mode_scalar,
    fisher_var,
    fisher_var_scalar,
    LaplaceRun,
    laplace_approximation,
)
from .linalg import fast_inv
from .ops import flatten, vec_to_matrix, tens_to_mat

__all__ = [
    "__version__",
    # errors
    "LaplaceJaxError", "ValidationError", "ShapeError", "NumericalError",
    "SingularMatrixError", "DegenerateDerivativeError", "ConvergenceError",
    # inference
    "ModeCFG", "ModeRun", "find_mode", "find_mode_scalar",
    "fisher_var", "fisher_var_scalar",
    "LaplaceRun", "laplace_approximation",
    # linalg
    "fast_inv",
    # reshaping
    "flatten", "vec_to_matrix", "tens_to_mat",
]
