# laplace_jax/inference/__init__.py
from .optimisation import ModeCFG, ModeRun, minimize, run_mode, find_mode, find_mode_scalar
from .fisher import fisher_var, fisher_var_scalar
from .laplace import LaplaceRun, laplace_approximation

__all__ = [
    "ModeCFG", "ModeRun", "minimize", "run_mode", "find_mode", "find_mode_scalar",
    "fisher_var", "fisher_var_scalar",
    "LaplaceRun", "laplace_approximation",
]
