# laplace_jax/core/typing.py
from __future__ import annotations
from typing import Protocol

from jax import Array


class Density(Protocol):
    """
    Scalar density on R^d (or R for the scalar entry points).

    Must be traceable by JAX, i.e. written with jax.numpy, and
    differentiable at the points the optimiser visits.
    """

    def __call__(self, x: Array) -> Array:
        ...


class LogDensity(Protocol):
    """
    Natural logarithm of a density, twice differentiable.

    Only needs to be known up to an additive constant.
    """

    def __call__(self, x: Array) -> Array:
        ...
