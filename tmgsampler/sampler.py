"""Exact Hamiltonian Monte Carlo for Gaussians truncated by linear and quadratic constraints.

The target is a standard multivariate normal restricted to the region where
every constraint is non-negative:

* linear: ``f . x + g >= 0``
* quadratic: ``x' A x + B . x + C >= 0``

Under the Hamiltonian of a standard normal a particle moves along
``x(t) = a sin t + b cos t``. It travels for a total time of pi/2 and
bounces elastically off any constraint wall it meets on the way.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass

import numpy as np

__all__ = ["LinearConstraint", "QuadraticConstraint", "HmcSampler"]

_log = logging.getLogger(__name__)

_MIN_T = 0.00001
_TRAVEL_TIME = math.pi / 2
_TRACE_STEP = 0.01
_TWO_PI = 2 * math.pi
_IMAG_TOLERANCE = 1e-9


@dataclass(frozen=True, eq=False)
class LinearConstraint:
    """The constraint ``f . x + g >= 0``."""

    f: np.ndarray
    g: float

    def value(self, x: np.ndarray) -> float:
        return float(self.f @ x + self.g)


@dataclass(frozen=True, eq=False)
class QuadraticConstraint:
    """The constraint ``x' A x + B . x + C >= 0``."""

    A: np.ndarray
    B: np.ndarray
    C: float

    def value(self, x: np.ndarray) -> float:
        return float(x @ self.A @ x + self.B @ x + self.C)


def _trace_segment(a: np.ndarray, b: np.ndarray, t: float) -> list[np.ndarray]:
    """Points along ``a sin s + b cos s`` every 0.01 up to ``t``, plus the end point."""
    steps = int(t / _TRACE_STEP)
    points = [math.sin(i * _TRACE_STEP) * a + math.cos(i * _TRACE_STEP) * b for i in range(steps)]
    points.append(math.sin(t) * a + math.cos(t) * b)
    return points


def _real_roots(coefficients: np.ndarray) -> list[float]:
    """Real roots of a polynomial given highest-degree coefficient first."""
    if not np.all(np.isfinite(coefficients)) or not np.any(coefficients):
        return []
    roots = np.roots(coefficients)
    return [
        float(r.real)
        for r in roots
        if abs(r.imag) <= _IMAG_TOLERANCE * max(1.0, abs(r.real))
    ]


class HmcSampler:
    """Draws successive samples from a truncated standard normal in ``dim`` dimensions."""

    def __init__(self, dim: int, seed: int) -> None:
        if dim < 1:
            raise ValueError("dimension must be positive")
        self.dim = int(dim)
        self._rng = np.random.default_rng(seed)
        self._last_sample: np.ndarray | None = None
        self.linear_constraints: list[LinearConstraint] = []
        self.quadratic_constraints: list[QuadraticConstraint] = []

    def _vector(self, values, what: str) -> np.ndarray:
        array = np.asarray(values, dtype=float).reshape(-1)
        if array.shape != (self.dim,):
            raise ValueError(f"{what} must have {self.dim} components, got {array.size}")
        return array

    @property
    def last_sample(self) -> np.ndarray | None:
        """The most recent sample, or the initial value before any sampling."""
        return None if self._last_sample is None else self._last_sample.copy()

    def set_initial_value(self, initial_value) -> None:
        """Set the starting point of the chain; it should satisfy every constraint."""
        self._last_sample = self._vector(initial_value, "initial value")

    def add_linear_constraint(self, f, g: float) -> None:
        """Add the constraint ``f . x + g >= 0``."""
        self.linear_constraints.append(LinearConstraint(self._vector(f, "f"), float(g)))

    def add_quadratic_constraint(self, A, B, C: float) -> None:
        """Add the constraint ``x' A x + B . x + C >= 0``."""
        matrix = np.asarray(A, dtype=float)
        if matrix.shape != (self.dim, self.dim):
            raise ValueError(f"A must be {self.dim}x{self.dim}, got shape {matrix.shape}")
        self.quadratic_constraints.append(
            QuadraticConstraint(matrix, self._vector(B, "B"), float(C))
        )

    def sample_next(self, return_trace: bool = False) -> np.ndarray:
        """Draw the next sample with a freshly drawn Gaussian velocity.

        Returns the new sample, or, with ``return_trace``, an array whose rows
        are points along the whole trajectory ending at the new sample.
        """
        while True:
            velocity = self._rng.standard_normal(self.dim)
            result = self._travel(velocity, return_trace)
            if result is not None:
                return result

    def sample_next_given_velocity(self, velocity, return_trace: bool = False) -> np.ndarray:
        """Draw the next sample starting with ``velocity``.

        If the move fails for numerical reasons, fresh Gaussian velocities are
        drawn until one succeeds.
        """
        a = self._vector(velocity, "velocity")
        while True:
            result = self._travel(a, return_trace)
            if result is not None:
                return result
            a = self._rng.standard_normal(self.dim)

    def _travel(self, velocity: np.ndarray, return_trace: bool) -> np.ndarray | None:
        """Move from the last sample for pi/2 with the given initial velocity.

        Returns ``None`` when numerical trouble forces a new velocity.
        """
        if self._last_sample is None:
            raise RuntimeError("set_initial_value must be called before sampling")

        a = velocity.copy()
        b = self._last_sample.copy()
        time_left = _TRAVEL_TIME
        trace: list[np.ndarray] = []
        first_bounce = True

        while True:
            t1, cn1 = self._next_linear_hit(a, b) if self.linear_constraints else (0.0, -1)
            t2, cn2 = 0.0, -1
            if self.quadratic_constraints:
                t2, cn2 = self._next_quadratic_hit(a, b, first_bounce)
                first_bounce = False

            t, linear_hit = t1, True
            if t2 > 0 and (t1 == 0 or t2 < t1):
                t, linear_hit = t2, False

            if t == 0 or time_left < t:
                break

            if return_trace:
                trace.extend(_trace_segment(a, b, t))

            time_left -= t
            hit_position = math.sin(t) * a + math.cos(t) * b
            hit_velocity = math.cos(t) * a - math.sin(t) * b
            b = hit_position

            if linear_hit:
                normal = self.linear_constraints[cn1].f
            else:
                qc = self.quadratic_constraints[cn2]
                normal = 2 * (qc.A @ b) + qc.B
            alpha = (normal @ hit_velocity) / (normal @ normal)
            a = hit_velocity - 2 * alpha * normal
            if a @ normal < 0:
                _log.debug("reflected velocity points out of the region; resampling")
                return None

        final = math.sin(time_left) * a + math.cos(time_left) * b
        if self._verify_constraints(final) < 0:
            _log.debug("constraint violated after move; resampling")
            return None

        self._last_sample = final
        if return_trace:
            trace.extend(_trace_segment(a, b, time_left))
            return np.array(trace)
        return final.copy()

    def _next_linear_hit(self, a: np.ndarray, b: np.ndarray) -> tuple[float, int]:
        hit_time, hit_index = 0.0, -1
        for index, lc in enumerate(self.linear_constraints):
            fa = float(lc.f @ a)
            fb = float(lc.f @ b)
            u = math.sqrt(fa * fa + fb * fb)
            if not (u > lc.g and u > -lc.g):
                continue
            phi = math.atan2(-fa, fb)
            t1 = math.acos(-lc.g / u) - phi
            if t1 < 0:
                t1 += _TWO_PI
            if abs(t1) < _MIN_T or abs(t1 - _TWO_PI) < _MIN_T:
                t1 = 0.0

            t2 = -t1 - 2 * phi
            if t2 < 0:
                t2 += _TWO_PI
            if t2 < 0:
                t2 += _TWO_PI
            if abs(t2) < _MIN_T or abs(t2 - _TWO_PI) < _MIN_T:
                t2 = 0.0

            if t1 == 0:
                t = t2
            elif t2 == 0:
                t = t1
            else:
                t = min(t1, t2)

            if t > _MIN_T and (hit_time == 0 or t < hit_time):
                hit_time, hit_index = t, index
        return hit_time, hit_index

    def _next_quadratic_hit(
        self, a: np.ndarray, b: np.ndarray, first_bounce: bool
    ) -> tuple[float, int]:
        hit_time, hit_index = 0.0, -1
        min_time = 0.0 if first_bounce else _MIN_T
        for index, qc in enumerate(self.quadratic_constraints):
            aAa = float(a @ qc.A @ a)
            bAb = float(b @ qc.A @ b)
            q1 = bAb - aAa
            q2 = float(qc.B @ b)
            q3 = qc.C + aAa
            q4 = 2 * float(b @ qc.A @ a)
            q5 = float(qc.B @ a)

            coefficients = np.array(
                [
                    q1 * q1 + q4 * q4,
                    2 * q1 * q2 + 2 * q4 * q5,
                    q2 * q2 + 2 * q1 * q3 + q5 * q5 - q4 * q4,
                    2 * q2 * q3 - 2 * q4 * q5,
                    q3 * q3 - q5 * q5,
                ]
            )
            for r in _real_roots(coefficients):
                if abs(r) > 1:
                    continue
                l1 = q1 * r * r + q2 * r + q3
                l2 = -math.sqrt(1 - r * r) * (q4 * r + q5)
                if l1 * l2 > 0:
                    t = math.acos(r)
                    if t > min_time and (hit_time == 0 or t < hit_time):
                        hit_time, hit_index = t, index
        return hit_time, hit_index

    def _verify_constraints(self, x: np.ndarray) -> float:
        """Smallest constraint value at ``x``; 0 when there are no constraints."""
        values = [qc.value(x) for qc in self.quadratic_constraints]
        values += [lc.value(x) for lc in self.linear_constraints]
        return min(values, default=0.0)