"""Three-component real vectors with the usual arithmetic."""

from __future__ import annotations

import math
from numbers import Real
from typing import Iterator

from tmgsampler.xmlwriter import XmlStream

NDIM = 3
_AXIS_NAMES = "xyz"


class Vector:
    """An immutable 3D vector.

    ``a * b`` and ``a | b`` give the dot product of two vectors, ``a ^ b``
    the cross product, and ``a * s`` / ``s * a`` / ``a / s`` scale by a
    number.
    """

    __slots__ = ("_data",)

    def __init__(self, x: float, y: float, z: float) -> None:
        self._data = (float(x), float(y), float(z))

    def nrm2(self) -> float:
        """Squared Euclidean norm."""
        return sum(c * c for c in self._data)

    def nrm(self) -> float:
        """Euclidean norm, scaled by the largest component to avoid overflow."""
        biggest = self.max_element()
        if biggest == 0:
            return 0.0
        inv = 1.0 / (biggest * biggest)
        return biggest * math.sqrt(sum(inv * c * c for c in self._data))

    def max_element(self) -> float:
        """Largest absolute value among the components."""
        return max(abs(c) for c in self._data)

    def dot(self, other: Vector) -> float:
        """Dot product with another vector."""
        return sum(a * b for a, b in zip(self._data, other._data))

    def cross(self, other: Vector) -> Vector:
        """Cross product with another vector."""
        ax, ay, az = self._data
        bx, by, bz = other._data
        return Vector(ay * bz - az * by, az * bx - ax * bz, ax * by - ay * bx)

    def __getitem__(self, index: int) -> float:
        return self._data[index]

    def __iter__(self) -> Iterator[float]:
        return iter(self._data)

    def __len__(self) -> int:
        return NDIM

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Vector):
            return NotImplemented
        return self._data == other._data

    def __hash__(self) -> int:
        return hash(self._data)

    def __add__(self, other: Vector) -> Vector:
        if not isinstance(other, Vector):
            return NotImplemented
        return Vector(*(a + b for a, b in zip(self._data, other._data)))

    def __sub__(self, other: Vector) -> Vector:
        if not isinstance(other, Vector):
            return NotImplemented
        return Vector(*(a - b for a, b in zip(self._data, other._data)))

    def __mul__(self, other):
        if isinstance(other, Vector):
            return self.dot(other)
        if isinstance(other, Real):
            return Vector(*(c * other for c in self._data))
        return NotImplemented

    def __rmul__(self, other):
        if isinstance(other, Real):
            return Vector(*(other * c for c in self._data))
        return NotImplemented

    def __truediv__(self, scalar: float) -> Vector:
        if not isinstance(scalar, Real):
            return NotImplemented
        return self * (1.0 / scalar)

    def __neg__(self) -> Vector:
        return Vector(*(-c for c in self._data))

    def __xor__(self, other: Vector) -> Vector:
        if not isinstance(other, Vector):
            return NotImplemented
        return self.cross(other)

    def __or__(self, other: Vector) -> float:
        if not isinstance(other, Vector):
            return NotImplemented
        return self.dot(other)

    def __str__(self) -> str:
        return "<" + ",".join(format(c, "g") for c in self._data) + ">"

    def __repr__(self) -> str:
        return f"Vector({self._data[0]!r}, {self._data[1]!r}, {self._data[2]!r})"

    def write_xml(self, xml: XmlStream) -> XmlStream:
        """Write the components as attributes ``x``, ``y`` and ``z``."""
        for name, value in zip(_AXIS_NAMES, self._data):
            xml.attr(name).write(value)
        return xml