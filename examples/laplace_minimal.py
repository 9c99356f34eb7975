"""
Minimal Laplace approximations using laplace_jax.

1. Poisson rate with a Gamma prior (scalar): the posterior is Gamma, so the
   Laplace mean/variance can be checked against the exact mode and the
   curvature-based variance.
2. Normal model with unknown (mu, log sigma) (vector): mode + Fisher
   covariance, then the per-group parameter blocks are packed with
   tens_to_mat.
"""

import jax
import jax.numpy as jnp

from laplace_jax import (
    find_mode_scalar,
    fisher_var_scalar,
    laplace_approximation,
    tens_to_mat,
    flatten,
    vec_to_matrix,
)

jax.config.update("jax_enable_x64", True)


# ============================================================
# Poisson rate, Gamma(a, b) prior
# ============================================================

def poisson_gamma_example():
    counts = jnp.array([3, 5, 4, 6, 2, 4])
    a, b = 2.0, 1.0

    def log_post(lam):
        return (a - 1.0 + jnp.sum(counts)) * jnp.log(lam) - (b + counts.size) * lam

    post_density = lambda lam: jnp.exp(log_post(lam) - log_post(4.0))

    mode = find_mode_scalar(post_density, 3.0)
    var = fisher_var_scalar(log_post, mode)

    a_post = a + jnp.sum(counts)
    b_post = b + counts.size
    print("Poisson-Gamma")
    print(f"  Laplace mode    : {float(mode):.6f}  (exact {(a_post - 1) / b_post:.6f})")
    print(f"  Laplace variance: {float(var):.6f}  (exact {(a_post - 1) / b_post ** 2:.6f})")


# ============================================================
# Normal model with unknown (mu, log sigma), several groups
# ============================================================

def make_log_post(y):
    def log_post(theta):
        mu, log_sigma = theta[0], theta[1]
        sigma = jnp.exp(log_sigma)
        return -y.size * log_sigma - 0.5 * jnp.sum((y - mu) ** 2) / sigma ** 2
    return log_post


def normal_groups_example():
    key = jax.random.PRNGKey(0)
    G, N = 3, 2  # groups, variables
    blocks = []
    for g in range(G):
        row = []
        for n in range(N):
            key, sub = jax.random.split(key)
            y = 1.0 + g + 0.5 * n + 0.7 * jax.random.normal(sub, (50,))
            out = laplace_approximation(make_log_post(y), jnp.zeros(2))
            row.append(out.mean)
        blocks.append(jnp.stack(row))

    tensor = jnp.stack(blocks)  # (G, N, 2)
    mat = tens_to_mat(tensor)  # (G*2, N)
    print("Normal groups")
    print(f"  tensor shape {tensor.shape} -> matrix shape {mat.shape}")

    out = laplace_approximation(make_log_post(jnp.linspace(-1.0, 1.0, 40)), jnp.zeros(2))
    packed = flatten(out.cov)
    print("  covariance (rounded):")
    print(vec_to_matrix(packed))


if __name__ == "__main__":
    poisson_gamma_example()
    normal_groups_example()
