import numpy as np
import pytest

from metamesh.math import (
    cross_vec3,
    dot_vec,
    magnitude_vec,
    norm_vec,
    normalize_rows,
    swizzle_to_axis,
)
from metamesh.types import Vector2, Vector3


def test_vector3_arithmetic():
    a = Vector3(1.0, 2.0, 3.0)
    b = Vector3(0.5, 0.5, 0.5)

    assert a + b == Vector3(1.5, 2.5, 3.5)
    assert a - b == Vector3(0.5, 1.5, 2.5)
    assert a * 2.0 == Vector3(2.0, 4.0, 6.0)
    assert tuple(a) == (1.0, 2.0, 3.0)
    assert tuple(Vector2.one()) == (1.0, 1.0)


def test_dot_and_cross():
    x, y = Vector3(1.0, 0.0, 0.0), Vector3(0.0, 1.0, 0.0)

    assert dot_vec(x, y) == 0.0
    assert dot_vec(Vector3(1.0, 2.0, 2.0), Vector3(1.0, 2.0, 2.0)) == 9.0
    np.testing.assert_array_equal(cross_vec3(x, y), (0.0, 0.0, 1.0))


def test_normalize_keeps_zero_vector():
    np.testing.assert_array_equal(norm_vec((0.0, 0.0, 0.0)), (0.0, 0.0, 0.0))
    assert magnitude_vec(norm_vec((3.0, 4.0, 0.0))) == pytest.approx(1.0)


def test_normalize_rows_leaves_zero_rows():
    rows = normalize_rows(np.array([[3.0, 4.0, 0.0], [0.0, 0.0, 0.0]]))

    np.testing.assert_allclose(rows, [[0.6, 0.8, 0.0], [0.0, 0.0, 0.0]])


@pytest.mark.parametrize(
    "axis, expected",
    [(0, (1.0, 0.0, 0.0)), (1, (0.0, 1.0, 0.0)), (2, (0.0, 0.0, 1.0))],
)
def test_swizzle_sends_up_to_axis(axis, expected):
    up = np.array([[0.0, 1.0, 0.0]])

    np.testing.assert_array_equal(swizzle_to_axis(up, axis)[0], expected)


def test_swizzle_is_a_rotation():
    basis = np.eye(3)

    for axis in (0, 2):
        assert np.linalg.det(swizzle_to_axis(basis, axis)) == pytest.approx(1.0)
