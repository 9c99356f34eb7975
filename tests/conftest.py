import jax

# Mode and covariance checks compare against closed forms at ~1e-6.
jax.config.update("jax_enable_x64", True)
