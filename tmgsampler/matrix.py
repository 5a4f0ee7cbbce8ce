"""Real 3x3 matrices with the usual arithmetic."""

from __future__ import annotations

import math
from numbers import Real
from typing import Iterator

from tmgsampler.eigen import symmetric_eigen
from tmgsampler.vector import NDIM, Vector
from tmgsampler.xmlwriter import XmlStream

_AXIS_NAMES = "xyz"


class Matrix:
    """An immutable 3x3 matrix stored in row-major order.

    ``m * n`` is the matrix product, ``m * v`` applies the matrix to a
    :class:`Vector`, and ``m * s`` / ``s * m`` / ``m / s`` scale by a number.
    Elements are read with ``m[i, j]`` or by flat row-major index ``m[k]``.
    """

    __slots__ = ("_data",)

    def __init__(
        self,
        xx: float,
        xy: float,
        xz: float,
        yx: float,
        yy: float,
        yz: float,
        zx: float,
        zy: float,
        zz: float,
    ) -> None:
        self._data = tuple(float(v) for v in (xx, xy, xz, yx, yy, yz, zx, zy, zz))

    @classmethod
    def identity(cls) -> Matrix:
        """The 3x3 identity matrix."""
        return cls(1, 0, 0, 0, 1, 0, 0, 0, 1)

    @classmethod
    def zeros(cls) -> Matrix:
        """The 3x3 zero matrix."""
        return cls(0, 0, 0, 0, 0, 0, 0, 0, 0)

    @classmethod
    def _from_rows(cls, rows) -> Matrix:
        return cls(*(v for row in rows for v in row))

    def _rows(self) -> tuple[tuple[float, ...], ...]:
        d = self._data
        return (d[0:3], d[3:6], d[6:9])

    def nrm2(self) -> float:
        """Squared Frobenius norm."""
        return sum(v * v for v in self._data)

    def nrm(self) -> float:
        """Frobenius norm, scaled by the largest element to avoid overflow."""
        biggest = max(abs(v) for v in self._data)
        if biggest == 0:
            return 0.0
        return biggest * math.sqrt(sum((v / biggest) ** 2 for v in self._data))

    def tr(self) -> float:
        """Trace."""
        d = self._data
        return d[0] + d[4] + d[8]

    def det(self) -> float:
        """Determinant."""
        xx, xy, xz, yx, yy, yz, zx, zy, zz = self._data
        return xx * (yy * zz - yz * zy) + xy * (yz * zx - yx * zz) + xz * (yx * zy - yy * zx)

    def row(self, i: int) -> Vector:
        """The ``i``-th row as a vector."""
        if not 0 <= i < NDIM:
            raise IndexError(f"row index {i} out of range")
        return Vector(*self._rows()[i])

    def column(self, j: int) -> Vector:
        """The ``j``-th column as a vector."""
        if not 0 <= j < NDIM:
            raise IndexError(f"column index {j} out of range")
        return Vector(*(row[j] for row in self._rows()))

    def __getitem__(self, index) -> float:
        if isinstance(index, tuple):
            i, j = index
            if not (0 <= i < NDIM and 0 <= j < NDIM):
                raise IndexError(f"matrix index {index} out of range")
            return self._data[NDIM * i + j]
        if not 0 <= index < NDIM * NDIM:
            raise IndexError(f"matrix index {index} out of range")
        return self._data[index]

    def __iter__(self) -> Iterator[Vector]:
        """Iterate over the rows."""
        return (Vector(*row) for row in self._rows())

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self._data == other._data

    def __hash__(self) -> int:
        return hash(self._data)

    def __add__(self, other: Matrix) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        return Matrix(*(a + b for a, b in zip(self._data, other._data)))

    def __sub__(self, other: Matrix) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        return Matrix(*(a - b for a, b in zip(self._data, other._data)))

    def __mul__(self, other):
        if isinstance(other, Matrix):
            cols = [other.column(j) for j in range(NDIM)]
            return Matrix._from_rows(
                [[self.row(i).dot(c) for c in cols] for i in range(NDIM)]
            )
        if isinstance(other, Vector):
            return Vector(*(self.row(i).dot(other) for i in range(NDIM)))
        if isinstance(other, Real):
            return Matrix(*(v * other for v in self._data))
        return NotImplemented

    def __rmul__(self, other):
        if isinstance(other, Real):
            return Matrix(*(other * v for v in self._data))
        return NotImplemented

    def __truediv__(self, scalar: float) -> Matrix:
        if not isinstance(scalar, Real):
            return NotImplemented
        return self * (1.0 / scalar)

    def __neg__(self) -> Matrix:
        return Matrix(*(-v for v in self._data))

    def transpose(self) -> Matrix:
        """The transposed matrix."""
        return Matrix._from_rows(zip(*self._rows()))

    def symmetric_eigen_decomposition(self) -> tuple[tuple[Vector, Vector, Vector], tuple[float, float, float]]:
        """Return ``(eigenvectors, eigenvalues)``, eigenvalues ascending.

        The matrix is assumed to be symmetric.
        """
        vectors, values = symmetric_eigen(self._rows())
        return tuple(Vector(*v) for v in vectors), values  # type: ignore[return-value]

    def __str__(self) -> str:
        return "[" + ", ".join(str(row) for row in self) + "]"

    def __repr__(self) -> str:
        return "Matrix(" + ", ".join(repr(v) for v in self._data) + ")"

    def write_xml(self, xml: XmlStream) -> XmlStream:
        """Write one element per row (``x``, ``y``, ``z``) with the row's
        entries as attributes ``x``, ``y`` and ``z``."""
        for row_name, row in zip(_AXIS_NAMES, self._rows()):
            xml.tag(row_name)
            for col_name, value in zip(_AXIS_NAMES, row):
                xml.attr(col_name).write(value)
            xml.endtag(row_name)
        return xml