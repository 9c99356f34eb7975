# laplace_jax/linalg/inverse.py
"""
Matrix inversion through a direct linear solve.
"""
from __future__ import annotations

import math

import jax.numpy as jnp

from ..core.errors import ShapeError, SingularMatrixError
from ..core.utils import as_float


def fast_inv(
    M,
    *,
    matrix_name: str = "matrix",
    cond: float | None = None,
) -> jnp.ndarray:
    """
    Invert a square matrix by solving M X = I.

    The solve reuses the LU factorisation behind `jnp.linalg.solve` instead of
    forming an explicit inverse.

    JAX's solve does not raise on singular systems (it returns NaN/Inf), so
    the condition number is checked first and the solution is checked for
    finiteness afterwards.

    Args:
        M: Square matrix (n, n)
        matrix_name: Name used in error messages (default: "matrix")
        cond: Precomputed 2-norm condition number of M. Computed with an SVD
            when omitted; callers that already hold the spectrum pass it in.

    Returns:
        X: Inverse of M (n, n)

    Raises:
        ShapeError: M is not a non-empty square 2-D array
        SingularMatrixError: M is singular or numerically rank-deficient
    """
    M = as_float(M)
    if M.ndim != 2 or M.shape[0] != M.shape[1]:
        raise ShapeError(
            f"{matrix_name} must be square 2-D, got shape {M.shape}",
            expected="(n, n)",
            actual=tuple(M.shape),
        )
    n = M.shape[0]
    if n == 0:
        raise ShapeError(
            f"{matrix_name} is empty, got shape {M.shape}",
            expected="(n, n) with n >= 1",
            actual=tuple(M.shape),
        )

    eps = float(jnp.finfo(M.dtype).eps)
    if cond is None:
        cond = float(jnp.linalg.cond(M))
    if not math.isfinite(cond) or cond > 1.0 / eps:
        raise SingularMatrixError(
            f"{matrix_name} is singular (condition number {cond:.3e}, limit {1.0 / eps:.3e})",
            matrix_name=matrix_name,
            condition_number=cond,
        )

    X = jnp.linalg.solve(M, jnp.eye(n, dtype=M.dtype))
    if not bool(jnp.all(jnp.isfinite(X))):
        raise SingularMatrixError(
            f"Solving {matrix_name} @ X = I produced non-finite values",
            matrix_name=matrix_name,
            condition_number=cond,
        )
    return X
