# laplace_jax/core/__init__.py
from .errors import (
    LaplaceJaxError,
    ValidationError,
    ShapeError,
    NumericalError,
    SingularMatrixError,
    DegenerateDerivativeError,
    ConvergenceError,
)
from .typing import Array, Density, LogDensity

__all__ = [
    "LaplaceJaxError",
    "ValidationError",
    "ShapeError",
    "NumericalError",
    "SingularMatrixError",
    "DegenerateDerivativeError",
    "ConvergenceError",
    "Array",
    "Density",
    "LogDensity",
]
