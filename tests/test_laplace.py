import jax.numpy as jnp
import numpy as np

from laplace_jax.inference import ModeCFG, find_mode, fisher_var, laplace_approximation

MU = np.array([1.5, -0.5])
SIGMA = np.array([[0.8, -0.2], [-0.2, 0.3]])
PREC = np.linalg.inv(SIGMA)


def logpdf(x):
    d = x - MU
    return -0.5 * d @ PREC @ d


def test_laplace_recovers_gaussian():
    out = laplace_approximation(logpdf, jnp.zeros(2), ModeCFG(tol=1e-8))
    assert out.mode_run.converged
    np.testing.assert_allclose(np.asarray(out.mean), MU, atol=1e-6)
    np.testing.assert_allclose(np.asarray(out.cov), SIGMA, atol=1e-8)


def test_mode_then_fisher_on_density():
    pdf = lambda x: jnp.exp(logpdf(x))
    mode = find_mode(pdf, jnp.array([1.0, 0.0]))
    cov = fisher_var(logpdf, mode)
    np.testing.assert_allclose(np.asarray(mode), MU, atol=1e-4)
    np.testing.assert_allclose(np.asarray(cov), SIGMA, atol=1e-8)
