# laplace_jax/ops/__init__.py
from .reshape import flatten, vec_to_matrix, tens_to_mat, ROUND_DIGITS

__all__ = [
    "flatten",
    "vec_to_matrix",
    "tens_to_mat",
    "ROUND_DIGITS",
]
