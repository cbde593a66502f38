"""Numerical integration: rectangle, trapezoid, Simpson and Gauss-Legendre rules."""

from __future__ import annotations

import math
from collections.abc import Callable
from enum import Enum

Function = Callable[[float], float]


class IntegrationMethod(Enum):
    """Quadrature rule used by :func:`integrate`."""

    SIMPSON = "simpson"
    TRAPEZOID = "trapezoid"
    RECTANGLE = "rectangle"
    GAUSS_LEGENDRE = "gauss_legendre"


def gauss_points(n: int) -> list[tuple[float, float]]:
    """Return ``(node, weight)`` pairs of the n-point Gauss-Legendre rule on [-1, 1]."""
    if n == 2:
        node = 1.0 / math.sqrt(3)
        return [(-node, 1.0), (node, 1.0)]
    if n == 3:
        node = math.sqrt(3.0 / 5.0)
        return [(-node, 5.0 / 9.0), (0.0, 8.0 / 9.0), (node, 5.0 / 9.0)]
    if n == 4:
        outer = math.sqrt(3.0 / 7.0 + (2.0 / 7.0) * math.sqrt(6.0 / 5.0))
        inner = math.sqrt(3.0 / 7.0 - (2.0 / 7.0) * math.sqrt(6.0 / 5.0))
        w_outer = (18 - math.sqrt(30.0)) / 36
        w_inner = (18 + math.sqrt(30.0)) / 36
        return [(-outer, w_outer), (-inner, w_inner), (inner, w_inner), (outer, w_outer)]
    raise ValueError(f"unsupported number of Gauss nodes: {n}")


def gauss_legendre(func: Function, a: float, b: float, n: int = 4) -> float:
    """Integrate ``func`` over [a, b] with a single n-point Gauss-Legendre rule."""
    half = (b - a) / 2.0
    centre = (a + b) / 2.0
    return half * sum(w * func(half * x + centre) for x, w in gauss_points(n))


def rectangle(func: Function, a: float, b: float, n: int) -> float:
    """Composite left-rectangle rule with n subintervals."""
    h = (b - a) / n
    return h * sum(func(a + i * h) for i in range(n))


def trapezoid(func: Function, a: float, b: float, n: int) -> float:
    """Composite trapezoid rule with n subintervals."""
    h = (b - a) / n
    total = 0.5 * (func(a) + func(b)) + sum(func(a + i * h) for i in range(1, n))
    return h * total


def simpson(func: Function, a: float, b: float, n: int) -> float:
    """Composite Simpson rule; an odd n is raised to the next even number."""
    if n % 2:
        n += 1
    h = (b - a) / n
    total = func(a) + func(b)
    total += sum((2 if i % 2 == 0 else 4) * func(a + i * h) for i in range(1, n))
    return h / 3 * total


def _composite_gauss(func: Function, a: float, b: float, n: int) -> float:
    width = b - a
    return sum(
        gauss_legendre(func, a + i * width / n, a + (i + 1) * width / n, 4)
        for i in range(n)
    )


_RULES: dict[IntegrationMethod, Callable[[Function, float, float, int], float]] = {
    IntegrationMethod.SIMPSON: simpson,
    IntegrationMethod.TRAPEZOID: trapezoid,
    IntegrationMethod.RECTANGLE: rectangle,
    IntegrationMethod.GAUSS_LEGENDRE: _composite_gauss,
}


def integrate(
    func: Function,
    a: float,
    b: float,
    n: int = 1000,
    method: IntegrationMethod = IntegrationMethod.SIMPSON,
) -> float:
    """Integrate ``func`` over [a, b] using n subintervals and the chosen rule.

    The Gauss-Legendre method applies a 4-point rule on each of the n subintervals.
    """
    if n <= 0:
        raise ValueError("the number of subintervals must be positive")
    try:
        rule = _RULES[IntegrationMethod(method)]
    except ValueError:
        raise ValueError(f"unsupported integration method: {method!r}") from None
    return rule(func, a, b, n)