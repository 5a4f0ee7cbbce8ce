import math

import pytest

from tmgsampler.eigen import symmetric_eigen

MATRICES = [
    [[2.0, 1.0, 0.0], [1.0, 2.0, 1.0], [0.0, 1.0, 2.0]],
    [[4.0, -2.0, 1.0], [-2.0, 3.0, 0.5], [1.0, 0.5, -1.0]],
    [[1.0, 0.0, 0.0], [0.0, 1.0, 0.0], [0.0, 0.0, 1.0]],
    [[0.0, 0.0, 0.0], [0.0, 0.0, 0.0], [0.0, 0.0, 0.0]],
    [[5.0, 0.0, 0.0], [0.0, -1.0, 3.0], [0.0, 3.0, 2.0]],
]


def _matvec(m, v):
    return [sum(m[i][k] * v[k] for k in range(3)) for i in range(3)]


def _dot(a, b):
    return sum(x * y for x, y in zip(a, b))


@pytest.mark.parametrize("m", MATRICES)
def test_eigenpairs_satisfy_definition(m):
    vectors, values = symmetric_eigen(m)
    for vec, lam in zip(vectors, values):
        lhs = _matvec(m, vec)
        for a, b in zip(lhs, vec):
            assert a == pytest.approx(lam * b, abs=1e-10)


@pytest.mark.parametrize("m", MATRICES)
def test_eigenvectors_orthonormal(m):
    vectors, _ = symmetric_eigen(m)
    for i in range(3):
        for j in range(3):
            expected = 1.0 if i == j else 0.0
            assert _dot(vectors[i], vectors[j]) == pytest.approx(expected, abs=1e-10)


@pytest.mark.parametrize("m", MATRICES)
def test_values_sorted_and_sum_to_trace(m):
    _, values = symmetric_eigen(m)
    assert list(values) == sorted(values)
    assert sum(values) == pytest.approx(m[0][0] + m[1][1] + m[2][2], abs=1e-10)


@pytest.mark.parametrize("m", MATRICES)
def test_product_of_values_is_determinant(m):
    _, values = symmetric_eigen(m)
    det = (
        m[0][0] * (m[1][1] * m[2][2] - m[1][2] * m[2][1])
        + m[0][1] * (m[1][2] * m[2][0] - m[1][0] * m[2][2])
        + m[0][2] * (m[1][0] * m[2][1] - m[1][1] * m[2][0])
    )
    assert math.prod(values) == pytest.approx(det, abs=1e-9)


def test_diagonal_matrix_values_and_axes():
    vectors, values = symmetric_eigen([[3.0, 0.0, 0.0], [0.0, 1.0, 0.0], [0.0, 0.0, 2.0]])
    assert values == pytest.approx((1.0, 2.0, 3.0))
    assert [abs(c) for c in vectors[0]] == pytest.approx([0.0, 1.0, 0.0])
    assert [abs(c) for c in vectors[1]] == pytest.approx([0.0, 0.0, 1.0])
    assert [abs(c) for c in vectors[2]] == pytest.approx([1.0, 0.0, 0.0])


def test_input_not_modified():
    m = [[2.0, 1.0, 0.0], [1.0, 2.0, 1.0], [0.0, 1.0, 2.0]]
    copy = [row[:] for row in m]
    symmetric_eigen(m)
    assert m == copy


@pytest.mark.parametrize(
    "bad",
    [
        [[1.0, 0.0], [0.0, 1.0]],
        [[1.0, 0.0, 0.0], [0.0, 1.0, 0.0]],
        [[1.0, 0.0, 0.0], [0.0, 1.0], [0.0, 0.0, 1.0]],
    ],
)
def test_wrong_shape_rejected(bad):
    with pytest.raises(ValueError):
        symmetric_eigen(bad)