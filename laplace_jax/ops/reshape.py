# laplace_jax/ops/reshape.py
"""
Reshaping between flattened and structured parameter layouts.

This module provides:
- flatten: (R, C) matrix -> row-major vector of length R*C
- vec_to_matrix: length n^2 vector -> (n, n) matrix, row-major, rounded
- tens_to_mat: (G, N, M) tensor -> (G*M, N) matrix of stacked group blocks

All functions return new arrays; inputs are never modified.
"""
from __future__ import annotations

import math

import jax.numpy as jnp

from ..core.errors import ShapeError

# Decimals kept by vec_to_matrix to drop floating-point noise.
ROUND_DIGITS = 7


def flatten(mat) -> jnp.ndarray:
    """
    Row-major flattening of a matrix.

    [[1, 2], [3, 4]] -> [1, 2, 3, 4]
    """
    mat = jnp.asarray(mat)
    if mat.ndim != 2:
        raise ShapeError(
            f"flatten expects a 2-D matrix, got shape {mat.shape}",
            expected="(R, C)",
            actual=tuple(mat.shape),
        )
    return jnp.ravel(mat, order="C")


def vec_to_matrix(vector) -> jnp.ndarray:
    """
    Build an (n, n) matrix from an n^2-element vector.

    Rows are filled in order, so vec_to_matrix(flatten(M)) equals M rounded to
    ROUND_DIGITS decimals. A length that is not a perfect square raises
    ShapeError rather than truncating.
    """
    vector = jnp.asarray(vector)
    if vector.ndim != 1:
        raise ShapeError(
            f"vec_to_matrix expects a 1-D vector, got shape {vector.shape}",
            expected="(n*n,)",
            actual=tuple(vector.shape),
        )

    L = vector.shape[0]
    n = math.isqrt(L)
    if n * n != L:
        raise ShapeError(
            f"vec_to_matrix expects a perfect-square length, got {L}",
            expected="(n*n,)",
            actual=tuple(vector.shape),
        )
    return jnp.round(jnp.reshape(vector, (n, n)), ROUND_DIGITS)


def tens_to_mat(tensor) -> jnp.ndarray:
    """
    Reshape a (G, N, M) tensor into a (G*M, N) matrix.

    Column n stacks the M-vectors tensor[g, n, :] for g = 0..G-1, e.g. the
    per-group [mu, phi, ...] blocks of variable n:

        out[g*M + m, n] = tensor[g, n, m]
    """
    tensor = jnp.asarray(tensor)
    if tensor.ndim != 3:
        raise ShapeError(
            f"tens_to_mat expects a 3-D tensor, got shape {tensor.shape}",
            expected="(G, N, M)",
            actual=tuple(tensor.shape),
        )

    G, N, M = tensor.shape
    return jnp.reshape(jnp.transpose(tensor, (0, 2, 1)), (G * M, N))
