import jax.numpy as jnp
import numpy as np
import pytest

from laplace_jax.core.errors import ShapeError, SingularMatrixError
from laplace_jax.linalg import fast_inv


def test_fast_inv_is_inverse():
    rng = np.random.default_rng(0)
    A = rng.normal(size=(4, 4)) + 4.0 * np.eye(4)
    X = fast_inv(jnp.asarray(A))
    np.testing.assert_allclose(np.asarray(X) @ A, np.eye(4), atol=1e-10)
    np.testing.assert_allclose(A @ np.asarray(X), np.eye(4), atol=1e-10)


def test_fast_inv_integer_matrix():
    X = fast_inv([[2, 0], [0, 4]])
    np.testing.assert_allclose(np.asarray(X), [[0.5, 0.0], [0.0, 0.25]])


@pytest.mark.parametrize(
    "M",
    [
        np.zeros((3, 3)),
        np.array([[1.0, 2.0], [2.0, 4.0]]),
        np.array([[1.0, 2.0, 3.0], [2.0, 4.0, 6.0], [0.0, 1.0, 1.0]]),
    ],
)
def test_fast_inv_singular(M):
    with pytest.raises(SingularMatrixError):
        fast_inv(M)


def test_fast_inv_not_square():
    with pytest.raises(ShapeError):
        fast_inv(np.ones((2, 3)))
    with pytest.raises(ShapeError):
        fast_inv(np.ones(3))


def test_fast_inv_empty_matrix():
    with pytest.raises(ShapeError) as exc_info:
        fast_inv(np.zeros((0, 0)))
    assert exc_info.value.actual == (0, 0)


def test_fast_inv_uses_given_condition_number():
    A = np.array([[2.0, 0.0], [0.0, 1.0]])
    X = fast_inv(A, cond=2.0)
    np.testing.assert_allclose(np.asarray(X), np.diag([0.5, 1.0]))

    with pytest.raises(SingularMatrixError) as exc_info:
        fast_inv(A, matrix_name="Hessian", cond=float("inf"))
    assert exc_info.value.matrix_name == "Hessian"
