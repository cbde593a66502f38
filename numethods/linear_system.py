"""Solving systems of linear equations by LU decomposition (Doolittle)."""

from __future__ import annotations

import logging
from collections.abc import Sequence

EPSILON = 1e-9

_log = logging.getLogger(__name__)

Matrix = list[list[float]]


class SingularMatrixError(ArithmeticError):
    """Raised when a zero (or nearly zero) pivot appears on the diagonal of U."""

    def __init__(self, row: int) -> None:
        self.row = row
        super().__init__(f"singular matrix: zero diagonal element of U in row {row}")


def format_matrix(
    matrix: Sequence[Sequence[float]], name: str, iteration: int | None = None
) -> str:
    """Render a matrix as text, one row per line, five significant digits per value."""
    header = name if iteration is None else f"{name} (after iteration {iteration})"
    rows = (" ".join(f"{value:>10.5g}" for value in row) for row in matrix)
    return "\n".join([f"{header}:", *rows])


def _format_vector(vector: Sequence[float]) -> str:
    return " ".join(f"{value:>10.5g}" for value in vector)


class EquationSystem:
    """A square system ``A x = b`` solved through ``A = L U``."""

    def __init__(
        self, matrix: Sequence[Sequence[float]], rhs: Sequence[float]
    ) -> None:
        self.matrix: Matrix = [[float(value) for value in row] for row in matrix]
        self.rhs: list[float] = [float(value) for value in rhs]
        self.size = len(self.matrix)
        if any(len(row) != self.size for row in self.matrix):
            raise ValueError("the coefficient matrix must be square")
        if len(self.rhs) != self.size:
            raise ValueError("the right-hand side must have one value per row")

    def lu_decomposition(self) -> tuple[Matrix, Matrix]:
        """Return ``(L, U)`` with L unit lower triangular and U upper triangular."""
        n = self.size
        a = self.matrix
        lower = [[0.0] * n for _ in range(n)]
        upper = [[0.0] * n for _ in range(n)]

        for i in range(n):
            for j in range(i, n):
                upper[i][j] = a[i][j] - sum(lower[i][k] * upper[k][j] for k in range(i))

            if abs(upper[i][i]) < EPSILON:
                raise SingularMatrixError(i)

            lower[i][i] = 1.0
            for j in range(i + 1, n):
                partial = a[j][i] - sum(lower[j][k] * upper[k][i] for k in range(i))
                lower[j][i] = partial / upper[i][i]

            _log.debug("%s", format_matrix(lower, "Matrix L", i))
            _log.debug("%s", format_matrix(upper, "Matrix U", i))

        return lower, upper

    def forward_substitution(
        self, lower: Sequence[Sequence[float]], rhs: Sequence[float]
    ) -> list[float]:
        """Solve ``L y = rhs`` for a unit lower triangular L."""
        y: list[float] = []
        for row, value in zip(lower, rhs):
            y.append(value - sum(coef * known for coef, known in zip(row, y)))
        _log.debug("Vector y (forward substitution):\n%s", _format_vector(y))
        return y

    def backward_substitution(
        self, upper: Sequence[Sequence[float]], y: Sequence[float]
    ) -> list[float]:
        """Solve ``U x = y`` for an upper triangular U."""
        n = self.size
        x = [0.0] * n
        for i in reversed(range(n)):
            pivot = upper[i][i]
            if abs(pivot) < EPSILON:
                raise SingularMatrixError(i)
            tail = sum(upper[i][j] * x[j] for j in range(i + 1, n))
            x[i] = (y[i] - tail) / pivot
        _log.debug("Vector x (solution):\n%s", _format_vector(x))
        return x

    def solve_lu(self) -> list[float]:
        """Solve the system and return the solution vector."""
        lower, upper = self.lu_decomposition()
        y = self.forward_substitution(lower, self.rhs)
        x = self.backward_substitution(upper, y)

        for i, (row, expected) in enumerate(zip(self.matrix, self.rhs)):
            product = sum(coef * value for coef, value in zip(row, x))
            _log.debug(
                "Ax[%d] = %.6f, b[%d] = %.6f, difference = %.6f",
                i,
                product,
                i,
                expected,
                abs(product - expected),
            )
        return x