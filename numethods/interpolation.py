"""Newton divided-difference polynomial interpolation."""

from __future__ import annotations

from collections.abc import Sequence


class Interpolation:
    """The Newton form of the polynomial through the given points."""

    def __init__(
        self, x_values: Sequence[float], fx_values: Sequence[float]
    ) -> None:
        self._x = [float(x) for x in x_values]
        fx = [float(y) for y in fx_values]
        if len(self._x) != len(fx):
            raise ValueError("x and f(x) must have the same number of values")
        if not self._x:
            raise ValueError("at least one point is required")
        if len(set(self._x)) != len(self._x):
            raise ValueError("x values must not repeat")
        self._coefficients = self._divided_differences(fx)

    def _divided_differences(self, fx: list[float]) -> list[float]:
        coefficients = [fx[0]]
        column = fx
        for order in range(1, len(fx)):
            column = [
                (upper - lower) / (self._x[i + order] - self._x[i])
                for i, (lower, upper) in enumerate(zip(column, column[1:]))
            ]
            coefficients.append(column[0])
        return coefficients

    def evaluate(self, x: float) -> float:
        """Value of the interpolating polynomial at ``x``."""
        result = self._coefficients[-1]
        for node, coefficient in zip(
            reversed(self._x[:-1]), reversed(self._coefficients[:-1])
        ):
            result = result * (x - node) + coefficient
        return result

    @property
    def coefficients(self) -> list[float]:
        """The Newton coefficients, from the constant term upwards."""
        return list(self._coefficients)