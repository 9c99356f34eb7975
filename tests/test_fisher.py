import jax.numpy as jnp
import numpy as np
import pytest

from laplace_jax.core.errors import DegenerateDerivativeError, ShapeError, SingularMatrixError
from laplace_jax.inference import fisher_var, fisher_var_scalar

MU = np.array([0.5, -1.0, 2.0])
SIGMA = np.array([
    [2.0, 0.4, 0.1],
    [0.4, 1.0, -0.2],
    [0.1, -0.2, 0.5],
])
PREC = np.linalg.inv(SIGMA)


def gaussian_logpdf(x):
    d = x - MU
    return -0.5 * d @ PREC @ d


def test_fisher_var_recovers_gaussian_covariance():
    cov = fisher_var(gaussian_logpdf, jnp.asarray(MU))
    assert cov.shape == (3, 3)
    np.testing.assert_allclose(np.asarray(cov), SIGMA, atol=1e-8)


def test_fisher_var_scalar_recovers_variance():
    var = 0.36
    logf = lambda x: -0.5 * (x - 1.0) ** 2 / var
    out = fisher_var_scalar(logf, 1.0)
    assert out.shape == ()
    assert abs(float(out) - var) < 1e-10


def test_fisher_var_scalar_non_quadratic():
    # d2/dx2 of -cosh(x) is -cosh(x)
    out = fisher_var_scalar(lambda x: -jnp.cosh(x), 0.3)
    assert abs(float(out) - 1.0 / np.cosh(0.3)) < 1e-10


def test_fisher_var_singular_hessian():
    logf = lambda x: -0.5 * (x[0] + x[1]) ** 2
    with pytest.raises(SingularMatrixError) as exc_info:
        fisher_var(logf, jnp.zeros(2))
    assert exc_info.value.matrix_name == "Hessian"


def test_fisher_var_scalar_zero_second_derivative():
    with pytest.raises(DegenerateDerivativeError) as exc_info:
        fisher_var_scalar(lambda x: 2.0 * x + 1.0, 0.0)
    assert exc_info.value.derivative == 0.0


def test_fisher_var_warns_away_from_maximum():
    logf = lambda x: 0.5 * jnp.sum(x ** 2)
    with pytest.warns(RuntimeWarning):
        cov = fisher_var(logf, jnp.ones(2))
    np.testing.assert_allclose(np.asarray(cov), -np.eye(2), atol=1e-12)

    with pytest.warns(RuntimeWarning):
        var = fisher_var_scalar(lambda x: x ** 2, 1.0)
    assert float(var) == pytest.approx(-0.5)


def test_fisher_var_shape_checks():
    with pytest.raises(ShapeError):
        fisher_var(gaussian_logpdf, 0.0)
    with pytest.raises(ShapeError):
        fisher_var_scalar(lambda x: -x ** 2, jnp.zeros(2))


def test_fisher_var_passes_spectral_condition_number(monkeypatch):
    from laplace_jax.inference import fisher as fisher_module

    seen = {}
    real_fast_inv = fisher_module.fast_inv

    def recording_fast_inv(M, **kwargs):
        seen.update(kwargs)
        return real_fast_inv(M, **kwargs)

    monkeypatch.setattr(fisher_module, "fast_inv", recording_fast_inv)
    fisher_var(gaussian_logpdf, jnp.asarray(MU))

    assert seen["matrix_name"] == "Hessian"
    assert seen["cond"] == pytest.approx(np.linalg.cond(PREC), rel=1e-8)


def test_fisher_var_empty_point():
    with pytest.raises(ShapeError):
        fisher_var(lambda x: -jnp.sum(x ** 2), jnp.zeros(0))
