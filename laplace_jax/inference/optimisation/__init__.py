# laplace_jax/inference/optimisation/__init__.py
"""
Optimisation-based point estimates.

This module provides:
- ModeCFG / ModeRun: optimiser configuration and run record
- minimize: optax-driven minimisation of a scalar objective
- find_mode / find_mode_scalar: mode of a density (vector / scalar start)
"""
from .mode import ModeCFG, ModeRun, default_tol, minimize, run_mode, find_mode, find_mode_scalar

__all__ = [
    "ModeCFG", "ModeRun", "default_tol",
    "minimize", "run_mode",
    "find_mode", "find_mode_scalar",
]
