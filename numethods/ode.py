"""Fixed-step solvers for the autonomous equation ``x' = f(x)``."""

from __future__ import annotations

from collections.abc import Callable
from enum import Enum

Function = Callable[[float], float]


class OdeMethod(Enum):
    """Single-step method used by :func:`solve`."""

    EULER = "euler"
    HEUN = "heun"
    MIDPOINT = "midpoint"
    RUNGE_KUTTA4 = "runge_kutta4"


def euler_step(func: Function, x: float, h: float) -> float:
    """One explicit Euler step."""
    return x + h * func(x)


def heun_step(func: Function, x: float, h: float) -> float:
    """One Heun (improved Euler) step."""
    k1 = func(x)
    k2 = func(x + h * k1)
    return x + h / 2.0 * (k1 + k2)


def midpoint_step(func: Function, x: float, h: float) -> float:
    """One explicit midpoint step."""
    k1 = func(x)
    k2 = func(x + h / 2.0 * k1)
    return x + h * k2


def runge_kutta4_step(func: Function, x: float, h: float) -> float:
    """One classical fourth-order Runge-Kutta step."""
    k1 = func(x)
    k2 = func(x + h / 2.0 * k1)
    k3 = func(x + h / 2.0 * k2)
    k4 = func(x + h * k3)
    return x + h / 6.0 * (k1 + 2 * k2 + 2 * k3 + k4)


_STEPS: dict[OdeMethod, Callable[[Function, float, float], float]] = {
    OdeMethod.EULER: euler_step,
    OdeMethod.HEUN: heun_step,
    OdeMethod.MIDPOINT: midpoint_step,
    OdeMethod.RUNGE_KUTTA4: runge_kutta4_step,
}


def solve(
    method: OdeMethod,
    func: Function,
    initial_value: float,
    max_iteration_value: float,
    step_size: float,
) -> float:
    """Advance ``initial_value`` while the step counter runs from 0 to the maximum.

    The counter starts at 0 and grows by ``step_size``; a step is taken for every
    counter value not exceeding ``max_iteration_value``.
    """
    if step_size <= 0:
        raise ValueError("step size must be positive")
    if func is None or not callable(func):
        raise TypeError("func must be callable")
    if max_iteration_value <= 0:
        raise ValueError("max iteration value must be positive")
    try:
        step = _STEPS[OdeMethod(method)]
    except ValueError:
        raise ValueError(f"unsupported method: {method!r}") from None

    x = float(initial_value)
    counter = 0.0
    while counter <= max_iteration_value:
        x = step(func, x, step_size)
        counter += step_size
    return x