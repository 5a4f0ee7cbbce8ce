# tmgsampler

Exact Hamiltonian Monte Carlo for drawing samples from a standard
multivariate Gaussian truncated by linear and quadratic constraints.
A particle moves along the exact trajectory `x(t) = a sin t + b cos t` for a
time of pi/2 per step and bounces elastically off every constraint wall it
meets, so each returned sample satisfies all constraints.

The package also has small 3-D linear algebra helpers (`Vector`, `Matrix`,
a symmetric 3x3 eigen-decomposition, inverses and Rodrigues rotations) and a
streaming XML writer that these types can write themselves to.

## Installation

```
pip install tmgsampler
```

The only runtime dependency is numpy.

## Sampling a truncated Gaussian

```python
import numpy as np
from tmgsampler.sampler import HmcSampler

sampler = HmcSampler(2, 42)        # dimension, random seed

# Constraints have the form f . x + g >= 0 and x' A x + B . x + C >= 0.
sampler.add_linear_constraint(np.array([1.0, 0.0]), 0.0)        # x0 >= 0
sampler.add_linear_constraint(np.array([0.0, 1.0]), 0.0)        # x1 >= 0
sampler.add_quadratic_constraint(-np.eye(2), np.zeros(2), 4.0)  # |x| <= 2

sampler.set_initial_value(np.array([0.5, 0.5]))
samples = np.array([sampler.sample_next(False) for _ in range(1000)])
```

- The initial value should satisfy every constraint. Sampling before
  `set_initial_value` raises `RuntimeError`; vectors and matrices of the
  wrong size raise `ValueError`.
- `sample_next(True)` returns the whole trajectory of the step as an array,
  one point per row (a point every 0.01 time units on each segment between
  bounces, plus each segment's end point); the last row is the new sample.
- `sample_next_given_velocity(velocity, return_trace)` starts the step with
  the given velocity. If that move fails for numerical reasons, fresh
  Gaussian velocities are drawn until one succeeds.
- `sampler.last_sample` holds a copy of the most recent sample.
- The constraints are kept in `sampler.linear_constraints` and
  `sampler.quadratic_constraints` as `LinearConstraint` and
  `QuadraticConstraint` objects, whose `value(x)` gives the constraint's
  left-hand side at `x`.

Only the standard normal is sampled; for another mean or covariance,
transform the constraints and the samples yourself.

## 3-D vectors and matrices

```python
from tmgsampler.vector import Vector
from tmgsampler.matrix import Matrix
from tmgsampler.transforms import dyadic, inverse, reorthogonalize, rodrigues

v = Vector(1.0, 2.0, 3.0)
v.nrm()                         # Euclidean norm
v * Vector(0, 1, 0)             # dot product (also v | w)
v ^ Vector(0, 0, 1)             # cross product

m = Matrix.identity()
w = m * v                       # matrix-vector product
m[1, 2], m.det(), m.tr(), m.transpose()

rot = rodrigues(Vector(0.0, 0.0, 1.5707963))   # rotation by the vector's length
m_inv = inverse(Matrix(2, 0, 0, 0, 2, 0, 0, 0, 2))
outer = dyadic(v, v)
fixed = reorthogonalize(rot)
vectors, values = Matrix(2, 1, 0, 1, 2, 0, 0, 0, 3).symmetric_eigen_decomposition()
```

`Vector` and `Matrix` are immutable. `inverse` raises `ZeroDivisionError`
for a singular matrix. Eigenvalues come back in ascending order, with
`vectors[i]` belonging to `values[i]`; `tmgsampler.eigen.symmetric_eigen`
does the same for a plain 3x3 list of lists.

## XML output

```python
import io
from tmgsampler.vector import Vector
from tmgsampler.xmlwriter import XmlStream

buffer = io.StringIO()
with XmlStream(buffer) as xml:
    xml.prolog()
    xml.tag("Point")
    Vector(1.0, 2.0, 3.0).write_xml(xml)
    xml.endtag("Point")
print(buffer.getvalue())
# <?xml version="1.0"?>
# <Point x="1" y="2" z="3"/>
```

`attr(name)` makes the next `write` the attribute's value; `chardata()`
makes later writes the element's contents. `endtag(name)` closes open
elements up to and including `name`, and leaving the `with` block (or
calling `close()`) closes any still open. Floats are written with six
significant digits.

## What the package does not do

- There is no command-line tool; everything is used from Python.
- The XML writer does not escape `<`, `&` or quotes in names or values, and
  the package has no XML reader.

## Running the tests

```
pip install -e ".[test]"
pytest
```