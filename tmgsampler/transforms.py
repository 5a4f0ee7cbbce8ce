"""Matrix constructions: inverse, rotations, outer products and re-orthogonalisation."""

from __future__ import annotations

import math

from tmgsampler.matrix import Matrix
from tmgsampler.vector import Vector

_MAX_REORTHOGONALIZE_PASSES = 9
_DET_TOLERANCE = 1e-16


def inverse(matrix: Matrix) -> Matrix:
    """Return the inverse of a 3x3 matrix.

    Raises ``ZeroDivisionError`` if the matrix is singular.
    """
    det = matrix.det()
    if det == 0:
        raise ZeroDivisionError("cannot invert a singular matrix")
    d = 1.0 / det
    xx, xy, xz, yx, yy, yz, zx, zy, zz = (matrix[k] for k in range(9))
    return Matrix(
        (yy * zz - yz * zy) * d,
        -(xy * zz - xz * zy) * d,
        (xy * yz - xz * yy) * d,
        -(yx * zz - yz * zx) * d,
        (xx * zz - xz * zx) * d,
        -(xx * yz - xz * yx) * d,
        (yx * zy - yy * zx) * d,
        -(xx * zy - xy * zx) * d,
        (xx * yy - xy * yx) * d,
    )


def rodrigues(vector: Vector) -> Matrix:
    """Rotation matrix about ``vector`` by an angle equal to its length."""
    theta = vector.nrm()
    if theta == 0:
        return Matrix.identity()
    s = math.sin(theta)
    c = math.cos(theta)
    wx, wy, wz = (component / theta for component in vector)
    one_minus_c = 1 - c
    wxwy = wx * wy * one_minus_c
    wxwz = wx * wz * one_minus_c
    wywz = wy * wz * one_minus_c
    wxs, wys, wzs = wx * s, wy * s, wz * s
    return Matrix(
        c + wx * wx * one_minus_c, wxwy - wzs, wxwz + wys,
        wxwy + wzs, c + wy * wy * one_minus_c, wywz - wxs,
        wxwz - wys, wywz + wxs, c + wz * wz * one_minus_c,
    )


def dyadic(a: Vector, b: Vector) -> Matrix:
    """Outer product: the matrix with entries ``a[i] * b[j]``."""
    return Matrix(*(ai * bj for ai in a for bj in b))


def reorthogonalize(matrix: Matrix) -> Matrix:
    """Gram-Schmidt the rows of a near-rotation matrix into a proper rotation.

    The first row keeps its direction, the second is made orthogonal to it,
    and the third is rebuilt as their cross product. Passes repeat until the
    determinant is 1 to within 1e-16, for at most nine passes.
    """
    r0, r1, r2 = matrix.row(0), matrix.row(1), matrix.row(2)
    for _ in range(_MAX_REORTHOGONALIZE_PASSES):
        if abs(Matrix(*r0, *r1, *r2).det() - 1) <= _DET_TOLERANCE:
            break
        r0 = r0 * (1 / r0.nrm())
        r1 = r1 - (r0 | r1) * r0
        r1 = r1 * (1 / r1.nrm())
        r2 = r0 ^ r1
        r2 = r2 * (1 / r2.nrm())
    return Matrix(*r0, *r1, *r2)