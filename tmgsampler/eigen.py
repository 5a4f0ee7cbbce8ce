"""Eigen decomposition of real symmetric 3x3 matrices.

Householder reduction to tridiagonal form followed by the implicit QL
algorithm.
"""

from __future__ import annotations

import math
from typing import Sequence

_N = 3
_EPS = 2.0 ** -52

Vec3 = tuple[float, float, float]


def _tred2(V: list[list[float]], d: list[float], e: list[float]) -> None:
    n = _N
    d[:] = V[n - 1]

    for i in range(n - 1, 0, -1):
        h = 0.0
        scale = sum(abs(x) for x in d[:i])
        if scale == 0.0:
            e[i] = d[i - 1]
            for j in range(i):
                d[j] = V[i - 1][j]
                V[i][j] = 0.0
                V[j][i] = 0.0
        else:
            for k in range(i):
                d[k] /= scale
                h += d[k] * d[k]
            f = d[i - 1]
            g = math.sqrt(h)
            if f > 0:
                g = -g
            e[i] = scale * g
            h -= f * g
            d[i - 1] = f - g
            for j in range(i):
                e[j] = 0.0

            for j in range(i):
                f = d[j]
                V[j][i] = f
                g = e[j] + V[j][j] * f
                for k in range(j + 1, i):
                    g += V[k][j] * d[k]
                    e[k] += V[k][j] * f
                e[j] = g

            f = 0.0
            for j in range(i):
                e[j] /= h
                f += e[j] * d[j]
            hh = f / (h + h)
            for j in range(i):
                e[j] -= hh * d[j]
            for j in range(i):
                f = d[j]
                g = e[j]
                for k in range(j, i):
                    V[k][j] -= f * e[k] + g * d[k]
                d[j] = V[i - 1][j]
                V[i][j] = 0.0
        d[i] = h

    for i in range(n - 1):
        V[n - 1][i] = V[i][i]
        V[i][i] = 1.0
        h = d[i + 1]
        if h != 0.0:
            for k in range(i + 1):
                d[k] = V[k][i + 1] / h
            for j in range(i + 1):
                g = sum(V[k][i + 1] * V[k][j] for k in range(i + 1))
                for k in range(i + 1):
                    V[k][j] -= g * d[k]
        for k in range(i + 1):
            V[k][i + 1] = 0.0

    d[:] = V[n - 1]
    V[n - 1] = [0.0] * n
    V[n - 1][n - 1] = 1.0
    e[0] = 0.0


def _tql2(V: list[list[float]], d: list[float], e: list[float]) -> None:
    n = _N
    e[:] = e[1:] + [0.0]

    f = 0.0
    tst1 = 0.0
    for l in range(n):
        tst1 = max(tst1, abs(d[l]) + abs(e[l]))
        m = next((k for k in range(l, n) if abs(e[k]) <= _EPS * tst1), n - 1)

        if m > l:
            while True:
                g = d[l]
                p = (d[l + 1] - g) / (2.0 * e[l])
                r = math.sqrt(p * p + 1.0)
                if p < 0:
                    r = -r
                d[l] = e[l] / (p + r)
                d[l + 1] = e[l] * (p + r)
                dl1 = d[l + 1]
                h = g - d[l]
                for i in range(l + 2, n):
                    d[i] -= h
                f += h

                p = d[m]
                c = c2 = c3 = 1.0
                el1 = e[l + 1]
                s = s2 = 0.0
                for i in range(m - 1, l - 1, -1):
                    c3 = c2
                    c2 = c
                    s2 = s
                    g = c * e[i]
                    h = c * p
                    r = math.sqrt(p * p + e[i] * e[i])
                    e[i + 1] = s * r
                    s = e[i] / r
                    c = p / r
                    p = c * d[i] - s * g
                    d[i + 1] = h + s * (c * g + s * d[i])
                    for row in V:
                        h = row[i + 1]
                        row[i + 1] = s * row[i] + c * h
                        row[i] = c * row[i] - s * h
                p = -s * s2 * c3 * el1 * e[l] / dl1
                e[l] = s * p
                d[l] = c * p
                if abs(e[l]) <= _EPS * tst1:
                    break
        d[l] += f
        e[l] = 0.0

    for i in range(n - 1):
        k = i
        p = d[i]
        for j in range(i + 1, n):
            if d[j] < p:
                k = j
                p = d[j]
        if k != i:
            d[k] = d[i]
            d[i] = p
            for row in V:
                row[i], row[k] = row[k], row[i]


def symmetric_eigen(
    matrix: Sequence[Sequence[float]],
) -> tuple[tuple[Vec3, Vec3, Vec3], tuple[float, float, float]]:
    """Return ``(eigenvectors, eigenvalues)`` of a symmetric 3x3 matrix.

    Eigenvalues are sorted in ascending order; ``eigenvectors[i]`` is the
    unit eigenvector belonging to ``eigenvalues[i]``. Only the symmetric
    part of the input is meaningful.
    """
    rows = [list(map(float, row)) for row in matrix]
    if len(rows) != _N or any(len(row) != _N for row in rows):
        raise ValueError("symmetric_eigen needs a 3x3 matrix")

    d = [0.0] * _N
    e = [0.0] * _N
    _tred2(rows, d, e)
    _tql2(rows, d, e)

    vectors = tuple(tuple(row[c] for row in rows) for c in range(_N))
    return vectors, (d[0], d[1], d[2])  # type: ignore[return-value]