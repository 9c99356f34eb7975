# laplace_jax/linalg/__init__.py
from .inverse import fast_inv

__all__ = ["fast_inv"]
