# laplace_jax/inference/laplace.py
"""
Laplace approximation to a posterior.

Approximates the distribution with density exp(log f) by a Gaussian

    N(mean = argmax log f, cov = -H(mean)^-1)

where H is the Hessian of log f. The mode of log f coincides with the mode
of f, so the optimiser works on the log scale where gradients are better
conditioned.
"""
from __future__ import annotations

from dataclasses import dataclass

from ..core.typing import Array, LogDensity
from .fisher import fisher_var
from .optimisation.mode import ModeCFG, ModeRun, run_mode


@dataclass
class LaplaceRun:
    """Laplace approximation results."""
    mean: Array  # shape [d]
    cov: Array  # shape [d, d]
    mode_run: ModeRun


def laplace_approximation(
    logf: LogDensity,
    x0,
    cfg: ModeCFG = ModeCFG(),
) -> LaplaceRun:
    """
    Gaussian approximation around the mode of a log-density.

    Args:
        logf: Log-density, traceable by JAX
        x0: Starting point for the mode search (d,)
        cfg: Optimiser configuration

    Returns:
        LaplaceRun with the mode, the Fisher covariance and the optimiser run

    Raises:
        ConvergenceError, ShapeError, SingularMatrixError: from the mode
            search and the covariance computation

    Examples:
        >>> import jax.numpy as jnp
        >>> logf = lambda x: -0.5 * jnp.sum((x - 2.0) ** 2)
        >>> out = laplace_approximation(logf, jnp.zeros(3))
        >>> out.mean, out.cov  # ~ [2., 2., 2.], eye(3)
    """
    run = run_mode(logf, x0, cfg)
    return LaplaceRun(mean=run.x, cov=fisher_var(logf, run.x), mode_run=run)
