# laplace_jax/core/utils.py
import jax.numpy as jnp


def as_float(x) -> jnp.ndarray:
    """Convert to a JAX array, promoting integer/bool input to the default float dtype."""
    x = jnp.asarray(x)
    if not jnp.issubdtype(x.dtype, jnp.floating):
        x = x.astype(jnp.result_type(float))
    return x
