# laplace_jax/core/errors.py
"""
Exception hierarchy for laplace-jax.

Every exception inherits from LaplaceJaxError so callers can catch any
library-specific failure in one place. Exceptions carry diagnostic values as
attributes; messages report the actual value next to the expected one.

Nothing in the library retries or recovers from these errors: they propagate
straight to the caller.
"""
from __future__ import annotations

from typing import Any


class LaplaceJaxError(Exception):
    """Base exception for all laplace-jax errors."""
    pass


class ValidationError(LaplaceJaxError):
    """User-provided input failed validation."""
    pass


class ShapeError(ValidationError):
    """
    Array has the wrong number of dimensions or an incompatible shape.

    Attributes:
        expected: Description of the expected shape
        actual: The shape that was received
    """

    def __init__(
        self,
        message: str,
        expected: str | None = None,
        actual: tuple[int, ...] | None = None,
    ):
        super().__init__(message)
        self.expected = expected
        self.actual = actual


class NumericalError(LaplaceJaxError):
    """Base class for errors arising from numerical issues."""
    pass


class SingularMatrixError(NumericalError):
    """
    Matrix is singular or nearly singular.

    Attributes:
        matrix_name: Name of the problematic matrix (e.g. "Hessian")
        condition_number: Estimated 2-norm condition number, if available
    """

    def __init__(
        self,
        message: str,
        matrix_name: str | None = None,
        condition_number: float | None = None,
    ):
        super().__init__(message)
        self.matrix_name = matrix_name
        self.condition_number = condition_number


class DegenerateDerivativeError(NumericalError):
    """
    Scalar second derivative is zero or not finite, so its reciprocal is undefined.

    Attributes:
        point: Where the derivative was evaluated
        derivative: The offending derivative value
    """

    def __init__(self, message: str, point: Any = None, derivative: float | None = None):
        super().__init__(message)
        self.point = point
        self.derivative = derivative


class ConvergenceError(LaplaceJaxError):
    """
    Optimiser did not reach the gradient tolerance within its iteration budget.

    Attributes:
        iterations: Number of iterations completed
        grad_norm: Final gradient norm
        tol: The gradient tolerance that was not met
        reason: 'max_iterations' or 'non_finite'
    """

    def __init__(
        self,
        message: str,
        iterations: int,
        grad_norm: float | None = None,
        tol: float | None = None,
        reason: str | None = None,
    ):
        super().__init__(message)
        self.iterations = iterations
        self.grad_norm = grad_norm
        self.tol = tol
        self.reason = reason
