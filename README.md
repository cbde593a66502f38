# numethods

A small collection of classic numerical methods written in plain Python,
with no third-party dependencies.

## What it provides

- `numethods.linear_system`: `EquationSystem(matrix, rhs)` solves the square
  system `A x = b` by LU decomposition (Doolittle). It does so with
  `lu_decomposition()`, `forward_substitution()` and `backward_substitution()`,
  and `solve_lu()` runs all three steps. A pivot whose absolute value is
  below `1e-9` raises `SingularMatrixError`, and its `row` attribute gives the
  row. A matrix that is not square, or a right-hand side of the wrong length,
  raises `ValueError`. `format_matrix(matrix, name, iteration)` renders a
  matrix as text.
- `numethods.integration`: definite integrals by the left-rectangle,
  trapezoid, Simpson and composite Gauss–Legendre rules. You can call
  `integrate(func, a, b, n=1000, method=IntegrationMethod.SIMPSON)` or one of
  the single-rule functions `rectangle`, `trapezoid`, `simpson` and
  `gauss_legendre`. `gauss_points(n)` gives the nodes and weights for 2, 3
  or 4 points. `simpson` raises an odd `n` to the next even number. The
  Gauss–Legendre method of `integrate` applies a 4-point rule on each of the
  `n` subintervals. A non-positive `n` raises `ValueError`.
- `numethods.approximation`: `Approximation(a, b, degree)` fits a polynomial
  to a function on `[a, b]` by continuous least squares.
  `least_squares_approximation(f)` returns the coefficients `c[0..degree]`,
  starting with the constant term. It builds the normal equations with the
  Simpson rule (10000 subintervals) and solves them by Gaussian elimination
  with partial pivoting. A near-zero pivot raises `SingularMatrixError`. An
  interval with `a >= b`, or a negative degree, raises `ValueError`.
- `numethods.interpolation`: `Interpolation(x_values, fx_values)` builds the
  Newton divided-difference polynomial through the given points.
  `evaluate(x)` gives its value at `x`, and the `coefficients` property gives
  the Newton coefficients. Repeated x values, lists of unequal length and an
  empty set of points all raise `ValueError`.
- `numethods.ode`: fixed-step solvers for the autonomous equation
  `dx/dt = f(x)`. The methods are Euler, Heun, midpoint and classical
  Runge–Kutta 4, available through `solve(method, func, initial_value,
  max_iteration_value, step_size)` with `OdeMethod`, or as the single-step
  functions `euler_step`, `heun_step`, `midpoint_step` and
  `runge_kutta4_step`. `solve` takes one step for each value of a counter
  that starts at 0, grows by `step_size`, and does not exceed
  `max_iteration_value`.
- `numethods.circuit`: a worked example. `mesh_currents()` returns the
  currents in a three-mesh resistor circuit, solved with `EquationSystem`.

## Installation

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Usage

Solving a linear system:

```python
from numethods.linear_system import EquationSystem

system = EquationSystem([[2, -1, 1], [3, 3, 9], [3, 3, 5]], [2, -1, 4])
x = system.solve_lu()
```

Integrating a function:

```python
import math
from numethods.integration import IntegrationMethod, integrate

area = integrate(math.sin, 0.0, math.pi, 1000, IntegrationMethod.SIMPSON)
```

Interpolating through points:

```python
from numethods.interpolation import Interpolation

poly = Interpolation([0, 1, 2], [0, 1, 4])
poly.evaluate(1.5)   # 2.25
```

Stepping a differential equation:

```python
from numethods.ode import OdeMethod, solve

solve(OdeMethod.HEUN, lambda x: x, 1.0, 1.0, 0.5)
```

Least-squares approximation:

```python
from numethods.approximation import Approximation

fit = Approximation(0, 5, 2)
coefficients = fit.least_squares_approximation(lambda x: x * x + 2 * x + 1)
```

## Diagnostics

`numethods.linear_system` and `numethods.approximation` log their
intermediate results at `DEBUG` level through the standard `logging` module.
These include the L and U matrices after each step, the substitution vectors,
the residual `Ax` against `b`, and the normal equations. To see them, turn
on debug logging:

```python
import logging
logging.basicConfig(level=logging.DEBUG)
```

## Command line

The circuit example is installed as a command. It prints the current in
each mesh:

```
numethods-circuit
```