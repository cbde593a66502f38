"""Continuous least-squares polynomial approximation on an interval."""

from __future__ import annotations

import logging
from collections.abc import Callable

from numethods.integration import simpson
from numethods.linear_system import SingularMatrixError

Function = Callable[[float], float]

_DEFAULT_NODES = 10000
_PIVOT_TOLERANCE = 1e-10

_log = logging.getLogger(__name__)


class Approximation:
    """Least-squares approximation by a polynomial of a given degree on [a, b]."""

    def __init__(self, a: float, b: float, degree: int) -> None:
        if a >= b:
            raise ValueError("invalid interval: a must be less than b")
        if degree < 0:
            raise ValueError("the degree must not be negative")
        self.a = a
        self.b = b
        self.degree = degree

    def monomial(self, degree: int, x: float) -> float:
        """Return ``x`` raised to ``degree``."""
        return x**degree

    def integrate(self, func: Function, n: int = _DEFAULT_NODES) -> float:
        """Integrate ``func`` over [a, b] with the composite Simpson rule.

        A non-positive ``n`` falls back to the default; an odd ``n`` is made even.
        """
        if n <= 0:
            n = _DEFAULT_NODES
        return simpson(func, float(self.a), float(self.b), n)

    def least_squares_approximation(self, f: Function) -> list[float]:
        """Return the coefficients ``c[0..degree]`` of the best L2 polynomial for ``f``."""
        size = self.degree + 1
        matrix = [
            [
                self.integrate(
                    lambda x, i=i, j=j: self.monomial(i, x) * self.monomial(j, x)
                )
                for j in range(size)
            ]
            for i in range(size)
        ]
        rhs = [
            self.integrate(lambda x, i=i: f(x) * self.monomial(i, x))
            for i in range(size)
        ]

        _log.debug(
            "Matrix A:\n%s",
            "\n".join(" ".join(f"{v:.6e}" for v in row) for row in matrix),
        )
        _log.debug("Vector b: %s", " ".join(f"{v:.6e}" for v in rhs))

        for i in range(size):
            pivot_row = max(range(i, size), key=lambda k: abs(matrix[k][i]))
            if pivot_row != i:
                matrix[i], matrix[pivot_row] = matrix[pivot_row], matrix[i]
                rhs[i], rhs[pivot_row] = rhs[pivot_row], rhs[i]

            pivot = matrix[i][i]
            if abs(pivot) < _PIVOT_TOLERANCE:
                raise SingularMatrixError(i)

            for k in range(i + 1, size):
                factor = matrix[k][i] / pivot
                matrix[k][i:] = [
                    value - factor * top
                    for value, top in zip(matrix[k][i:], matrix[i][i:])
                ]
                rhs[k] -= factor * rhs[i]

        coefficients = [0.0] * size
        for i in reversed(range(size)):
            tail = sum(matrix[i][j] * coefficients[j] for j in range(i + 1, size))
            coefficients[i] = (rhs[i] - tail) / matrix[i][i]

        for i, value in enumerate(coefficients):
            _log.debug("c[%d] = %.12f", i, value)
        return coefficients