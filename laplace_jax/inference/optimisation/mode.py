# laplace_jax/inference/optimisation/mode.py
"""
Mode finding by unconstrained minimisation.

The mode of a density f is found by minimising the objective -f:

    x* = argmax_x f(x) = argmin_x -f(x)

The minimiser is an optax optimiser (L-BFGS with a zoom line search by
default). The objective is divided by its magnitude at the starting point,
s = |fun(x0)|, and the run stops once the scaled gradient satisfies

    ||grad fun(x)|| / s <= tol * max(|fun(x)| / s, 1)

For a density this is ||grad log f(x)|| <= tol, so the test does not depend
on how tall or wide the density is. At least one optimiser step is taken
whenever the starting gradient is non-zero. A run that ends without meeting
the tolerance raises ConvergenceError; nothing is retried.
"""
from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Callable, Literal, Optional

import jax
import jax.numpy as jnp
import optax
from jax import lax

from ...core.errors import ConvergenceError, ShapeError
from ...core.typing import Array, Density
from ...core.utils import as_float


@dataclass(frozen=True)
class ModeCFG:
    """Configuration for mode finding."""
    max_iter: int = 500
    tol: Optional[float] = None  # relative gradient tolerance; None -> sqrt(eps) of the working dtype
    optimizer: Literal["lbfgs", "adam", "sgd", "rmsprop"] = "lbfgs"
    lr: float = 1e-2  # ignored by lbfgs, which line-searches
    jit: bool = True


@dataclass
class ModeRun:
    """Mode-finding run results."""
    x: Array
    value: float  # objective value at x, i.e. -f(x)
    grad_norm: float  # scaled gradient norm, the quantity compared against tol
    n_iter: int
    converged: bool


def _get_optimizer(cfg: ModeCFG) -> optax.GradientTransformation:
    """Get optimizer based on configuration."""
    if cfg.optimizer == "lbfgs":
        return optax.lbfgs()
    elif cfg.optimizer == "adam":
        return optax.adam(cfg.lr)
    elif cfg.optimizer == "sgd":
        return optax.sgd(cfg.lr)
    elif cfg.optimizer == "rmsprop":
        return optax.rmsprop(cfg.lr)
    else:
        raise ValueError(f"Unknown optimizer: {cfg.optimizer}")


def default_tol(dtype) -> float:
    """Default relative gradient tolerance: sqrt(eps) of the dtype."""
    return math.sqrt(float(jnp.finfo(dtype).eps))


def minimize(
    fun: Callable[[Array], Array],
    x0,
    cfg: ModeCFG = ModeCFG(),
) -> ModeRun:
    """
    Minimise a scalar function of a vector.

    Args:
        fun: Objective, traceable by JAX, returning a scalar
        x0: Starting point
        cfg: Optimiser configuration

    Returns:
        ModeRun with the final point and diagnostics. Never raises on
        non-convergence; check `converged`.
    """
    x0 = as_float(x0)
    tol = cfg.tol if cfg.tol is not None else default_tol(x0.dtype)
    max_iter = cfg.max_iter
    linesearch = cfg.optimizer == "lbfgs"

    optimizer = _get_optimizer(cfg)

    scale = abs(float(fun(x0)))
    if not math.isfinite(scale) or scale == 0.0:
        scale = 1.0
    scale = max(scale, float(jnp.finfo(x0.dtype).tiny))

    def scaled_fun(x):
        return fun(x) / scale

    value_and_grad_fn = jax.value_and_grad(scaled_fun)

    def step(x, opt_state, value, grad):
        if linesearch:
            updates, opt_state = optimizer.update(
                grad, opt_state, x, value=value, grad=grad, value_fn=scaled_fun
            )
        else:
            updates, opt_state = optimizer.update(grad, opt_state, x)
        x = optax.apply_updates(x, updates)
        value, grad = value_and_grad_fn(x)
        return x, opt_state, value, grad

    def rel_grad_norm(value, grad):
        return jnp.linalg.norm(grad) / jnp.maximum(jnp.abs(value), 1.0)

    def keep_going(value, grad, i):
        finite = jnp.isfinite(value) & jnp.all(jnp.isfinite(grad))
        gnorm = rel_grad_norm(value, grad)
        # the first step is skipped only at an exact stationary point
        first = (i == 0) & (gnorm > 0.0)
        return finite & (i < max_iter) & (first | (gnorm > tol))

    value0, grad0 = value_and_grad_fn(x0)
    opt_state = optimizer.init(x0)

    if cfg.jit:
        def cond(carry):
            _, _, value, grad, i = carry
            return keep_going(value, grad, i)

        def body(carry):
            x, opt_state, value, grad, i = carry
            x, opt_state, value, grad = step(x, opt_state, value, grad)
            return x, opt_state, value, grad, i + 1

        x, _, value, grad, i = lax.while_loop(
            cond, body, (x0, opt_state, value0, grad0, jnp.asarray(0))
        )
    else:
        x, value, grad, i = x0, value0, grad0, 0
        while bool(keep_going(value, grad, i)):
            x, opt_state, value, grad = step(x, opt_state, value, grad)
            i += 1

    grad_norm = float(rel_grad_norm(value, grad))
    value = float(value) * scale
    converged = (
        math.isfinite(value)
        and math.isfinite(grad_norm)
        and bool(jnp.all(jnp.isfinite(x)))
        and grad_norm <= tol
    )
    return ModeRun(x=x, value=value, grad_norm=grad_norm, n_iter=int(i), converged=converged)


def run_mode(f: Density, x0, cfg: ModeCFG = ModeCFG()) -> ModeRun:
    """
    Maximise f from the vector x0 and return the full run record.

    Raises:
        ShapeError: x0 is not a 1-D vector
        ConvergenceError: the optimiser did not converge within cfg.max_iter
    """
    x0 = as_float(x0)
    if x0.ndim != 1:
        raise ShapeError(
            f"Starting point must be a 1-D vector, got shape {x0.shape}",
            expected="(d,)",
            actual=tuple(x0.shape),
        )

    run = minimize(lambda x: -f(x), x0, cfg)
    if not run.converged:
        tol = cfg.tol if cfg.tol is not None else default_tol(x0.dtype)
        if math.isfinite(run.value) and math.isfinite(run.grad_norm):
            reason = "max_iterations"
        else:
            reason = "non_finite"
        raise ConvergenceError(
            f"Mode search did not converge after {run.n_iter} iterations "
            f"(scaled gradient norm {run.grad_norm:.3e}, tolerance {tol:.3e}, reason: {reason})",
            iterations=run.n_iter,
            grad_norm=run.grad_norm,
            tol=tol,
            reason=reason,
        )
    return run


def find_mode(f: Density, x0, cfg: ModeCFG = ModeCFG()) -> Array:
    """
    Find the mode of a density f starting from the vector x0.

    Args:
        f: Density (or any function to maximise), traceable by JAX
        x0: Starting point (d,)
        cfg: Optimiser configuration

    Returns:
        Location of the mode (d,)

    Raises:
        ShapeError: x0 is not a 1-D vector
        ConvergenceError: the optimiser did not converge

    Examples:
        >>> import jax.numpy as jnp
        >>> f = lambda x: jnp.exp(-0.5 * jnp.sum((x - 1.0) ** 2))
        >>> find_mode(f, jnp.zeros(2))  # ~ [1., 1.]
    """
    return run_mode(f, x0, cfg).x


def find_mode_scalar(f: Density, x0, cfg: ModeCFG = ModeCFG()) -> Array:
    """
    Find the mode of a univariate density f starting from the scalar x0.

    x0 is wrapped into a length-1 vector for the optimiser and the scalar
    component of the minimiser is returned (shape ()).
    """
    x0 = as_float(x0)
    if x0.ndim != 0:
        raise ShapeError(
            f"Starting point must be a scalar, got shape {x0.shape}",
            expected="()",
            actual=tuple(x0.shape),
        )
    return run_mode(lambda x: f(x[0]), jnp.reshape(x0, (1,)), cfg).x[0]
