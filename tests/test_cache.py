import math

import numpy as np
import pytest
from CacheMatrix.cache import CachingMatrix, placeholder_matrix


def test_default_construction():
    cached = CachingMatrix()

    matrix = cached.get_matrix()
    assert matrix.shape == (1, 1)
    assert math.isnan(matrix[0, 0])
    assert cached.get_inverse() is None

    cached.set_matrix([[4.0]])
    assert cached.get_matrix()[0, 0] == 4.0


def test_placeholder_is_fresh():
    first = placeholder_matrix()
    second = placeholder_matrix()
    assert first is not second
    assert first.shape == (1, 1)


def test_set_matrix_invalidates():
    cached = CachingMatrix(np.eye(2))
    cached.set_inverse(np.eye(2))
    assert cached.get_inverse() is not None

    cached.set_matrix(np.diag([2.0, 4.0]))
    assert cached.get_inverse() is None
    assert np.array_equal(cached.get_matrix(), np.diag([2.0, 4.0]))


def test_failed_set_matrix_still_invalidates():
    cached = CachingMatrix(np.eye(2))
    cached.set_inverse(np.eye(2))

    # ragged rows cannot become an array
    with pytest.raises(ValueError):
        cached.set_matrix([[1.0, 2.0], [3.0]])
    assert cached.get_inverse() is None


def test_set_inverse_is_trusted():
    cached = CachingMatrix(np.eye(2))
    # no check that this is the true inverse
    cached.set_inverse([[7.0, 7.0], [7.0, 7.0]])
    assert np.array_equal(cached.get_inverse(), np.full((2, 2), 7.0))


def test_stored_arrays_are_private():
    source = np.eye(3)
    cached = CachingMatrix(source)

    source[0, 0] = 42.0
    assert cached.get_matrix()[0, 0] == 1.0

    with pytest.raises(ValueError):
        cached.get_matrix()[0, 0] = 42.0

    cached.set_inverse(np.eye(3))
    with pytest.raises(ValueError):
        cached.get_inverse()[1, 1] = 42.0


def test_no_shape_check_on_set():
    cached = CachingMatrix()
    cached.set_matrix(np.ones((2, 3)))
    assert cached.get_matrix().shape == (2, 3)


def test_str():
    cached = CachingMatrix(np.eye(2))
    text = str(cached)
    assert "_matrix" in text
    assert "_inverse=None" in text


if __name__ == "__main__":
    test_default_construction()
    test_placeholder_is_fresh()
    test_set_matrix_invalidates()
    test_failed_set_matrix_still_invalidates()
    test_set_inverse_is_trusted()
    test_stored_arrays_are_private()
    test_no_shape_check_on_set()
    test_str()
