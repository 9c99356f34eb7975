# laplace_jax/inference/fisher.py
"""
Covariance from the observed Fisher information.

For a log-density log f evaluated at a point x (usually the mode), the
observed Fisher information is the negative Hessian

    I(x) = -H(x),   H_ij(x) = d^2 log f / dx_i dx_j

and its inverse I(x)^-1 approximates the covariance of the distribution
(Laplace approximation). Derivatives are exact, computed by JAX autodiff.
"""
from __future__ import annotations

import math
import warnings

import jax
import jax.numpy as jnp

from ..core.errors import DegenerateDerivativeError, ShapeError
from ..core.typing import Array, LogDensity
from ..core.utils import as_float
from ..linalg.inverse import fast_inv


def fisher_var(logf: LogDensity, x) -> Array:
    """
    Covariance matrix derived from the Fisher information.

    Args:
        logf: Log-density, traceable by JAX
        x: Where to compute the Fisher information (d,), usually the mode

    Returns:
        cov: -H(x)^-1 (d, d)

    Raises:
        ShapeError: x is not a non-empty 1-D vector
        SingularMatrixError: the Hessian is singular at x

    Warns:
        RuntimeWarning: the Hessian is not negative definite, so x is not a
            local maximum and cov is not a valid covariance matrix
    """
    x = as_float(x)
    if x.ndim != 1 or x.shape[0] == 0:
        raise ShapeError(
            f"Evaluation point must be a non-empty 1-D vector, got shape {x.shape}",
            expected="(d,) with d >= 1",
            actual=tuple(x.shape),
        )

    H = jax.hessian(logf)(x)

    # One symmetric eigendecomposition serves both the singularity check
    # (cond = max|lambda| / min|lambda|) and the definiteness check.
    eigs = jnp.linalg.eigvalsh(0.5 * (H + H.T))
    abs_eigs = jnp.abs(eigs)
    cond = float(jnp.max(abs_eigs) / jnp.min(abs_eigs))
    cov = -fast_inv(H, matrix_name="Hessian", cond=cond)

    max_eig = float(jnp.max(eigs))
    if max_eig >= 0.0:
        warnings.warn(
            f"Hessian of the log-density is not negative definite (largest eigenvalue "
            f"{max_eig:.3e}); the returned matrix is not a valid covariance",
            RuntimeWarning,
        )
    return cov


def fisher_var_scalar(logf: LogDensity, x) -> Array:
    """
    One-dimensional variance derived from the Fisher information.

    Computes -1 / (d^2 log f / dx^2) at the scalar x, with the second
    derivative obtained by nesting jax.grad.

    Raises:
        ShapeError: x is not a scalar
        DegenerateDerivativeError: the second derivative is zero or not finite
    """
    x = as_float(x)
    if x.ndim != 0:
        raise ShapeError(
            f"Evaluation point must be a scalar, got shape {x.shape}",
            expected="()",
            actual=tuple(x.shape),
        )

    d2 = jax.grad(jax.grad(logf))(x)
    d2_value = float(d2)
    if d2_value == 0.0 or not math.isfinite(d2_value):
        raise DegenerateDerivativeError(
            f"Second derivative of the log-density at {float(x)} is {d2_value}",
            point=float(x),
            derivative=d2_value,
        )
    if d2_value > 0.0:
        warnings.warn(
            f"Second derivative of the log-density is positive ({d2_value:.3e}); "
            "the returned variance is negative",
            RuntimeWarning,
        )
    return -1.0 / d2
