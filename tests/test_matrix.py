import io
import math

import pytest

from tmgsampler.matrix import Matrix
from tmgsampler.vector import Vector
from tmgsampler.xmlwriter import XmlStream

A = Matrix(2, -1, 3, 0.5, 4, 1, -2, 1.5, 5)
B = Matrix(1, 2, 0, -3, 1, 4, 2, 0, -1)


def _entries(m):
    return [m[k] for k in range(9)]


def test_identity_properties():
    ident = Matrix.identity()
    assert ident.det() == 1.0
    assert ident.tr() == 3.0
    assert ident * A == A
    assert A * ident == A


def test_zeros_norm():
    z = Matrix.zeros()
    assert z.nrm() == 0.0
    assert z.nrm2() == 0.0
    assert A + z == A


def test_indexing_flat_and_pair():
    assert A[0, 1] == -1.0
    assert A[5] == A[1, 2]
    assert A[8] == 5.0


def test_index_out_of_range():
    with pytest.raises(IndexError):
        A[3, 0]
    with pytest.raises(IndexError):
        A[9]
    with pytest.raises(IndexError):
        A.row(3)
    with pytest.raises(IndexError):
        A.column(-1)


def test_row_and_column():
    assert A.row(1) == Vector(0.5, 4, 1)
    assert A.column(2) == Vector(3, 1, 5)
    assert A.transpose().row(2) == A.column(2)


def test_nrm_matches_nrm2():
    assert math.isclose(A.nrm() ** 2, A.nrm2())


def test_add_sub_roundtrip():
    assert _entries((A + B) - B) == pytest.approx(_entries(A), abs=1e-9)
    assert A - A == Matrix.zeros()


def test_scalar_ops():
    assert 2 * A == A * 2
    assert _entries((A * 4) / 4) == pytest.approx(_entries(A), abs=1e-9)
    assert -A == A * -1
    assert (A * 3).tr() == pytest.approx(3 * A.tr())


def test_det_multiplicative():
    assert (A * B).det() == pytest.approx(A.det() * B.det())
    assert A.transpose().det() == pytest.approx(A.det())


def test_transpose_involution_and_product():
    assert A.transpose().transpose() == A
    assert _entries((A * B).transpose()) == pytest.approx(
        _entries(B.transpose() * A.transpose()), abs=1e-9
    )


def test_matrix_vector_product():
    v = Vector(1.0, -2.0, 0.5)
    w = A * v
    for i in range(3):
        assert w[i] == pytest.approx(A.row(i).dot(v))


def test_product_associative():
    v = Vector(0.3, 1.0, -1.0)
    lhs = (A * B) * v
    rhs = A * (B * v)
    for a, b in zip(lhs, rhs):
        assert a == pytest.approx(b)


def test_mul_unsupported_type():
    with pytest.raises(TypeError):
        assert A * "x" is None


def test_symmetric_eigen_decomposition():
    s = A + A.transpose()
    vectors, values = s.symmetric_eigen_decomposition()
    assert list(values) == sorted(values)
    assert sum(values) == pytest.approx(s.tr())
    assert values[0] * values[1] * values[2] == pytest.approx(s.det())
    for vec, val in zip(vectors, values):
        assert vec.nrm() == pytest.approx(1.0)
        sv = s * vec
        for a, b in zip(sv, vec * val):
            assert a == pytest.approx(b, abs=1e-9)


def test_write_xml_identity():
    buf = io.StringIO()
    Matrix.identity().write_xml(XmlStream(buf))
    assert buf.getvalue() == (
        '<x x="1" y="0" z="0"/>\n'
        '<y x="0" y="1" z="0"/>\n'
        '<z x="0" y="0" z="1"/>\n'
    )