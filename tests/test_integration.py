import math

import pytest

from numethods.integration import (
    IntegrationMethod,
    gauss_legendre,
    gauss_points,
    integrate,
    rectangle,
    simpson,
    trapezoid,
)


@pytest.mark.parametrize("n", [2, 3, 4])
def test_gauss_weights_sum_to_interval_length(n):
    points = gauss_points(n)
    assert len(points) == n
    assert sum(w for _, w in points) == pytest.approx(2.0)


@pytest.mark.parametrize("n", [2, 3, 4])
def test_gauss_points_are_symmetric(n):
    points = gauss_points(n)
    for (x_left, w_left), (x_right, w_right) in zip(points, reversed(points)):
        assert x_left == pytest.approx(-x_right)
        assert w_left == pytest.approx(w_right)


def test_gauss_two_point_nodes():
    nodes = [x for x, _ in gauss_points(2)]
    assert nodes == pytest.approx([-1 / math.sqrt(3), 1 / math.sqrt(3)])


@pytest.mark.parametrize("n", [0, 1, 5])
def test_unsupported_gauss_node_count(n):
    with pytest.raises(ValueError):
        gauss_points(n)


@pytest.mark.parametrize("method", list(IntegrationMethod))
def test_methods_converge_on_exp(method):
    result = integrate(math.exp, 0.0, 1.0, 1000, method)
    assert result == pytest.approx(math.e - 1, rel=1e-2)


@pytest.mark.parametrize(
    "method", [IntegrationMethod.SIMPSON, IntegrationMethod.GAUSS_LEGENDRE]
)
def test_high_order_methods_on_cosine(method):
    result = integrate(math.cos, 0.0, math.pi / 2, 100, method)
    assert result == pytest.approx(math.sin(math.pi / 2), abs=1e-8)


def test_default_method_is_simpson():
    assert integrate(math.sin, 0.0, 2.0) == simpson(math.sin, 0.0, 2.0, 1000)


def test_simpson_and_gauss_agree_on_cubic():
    cubic = lambda x: x**3 - 2 * x + 1  # noqa: E731
    assert simpson(cubic, 0.0, 2.0, 2) == pytest.approx(gauss_legendre(cubic, 0.0, 2.0, 2))


def test_simpson_odd_n_matches_next_even():
    assert simpson(math.exp, 0.0, 1.0, 7) == simpson(math.exp, 0.0, 1.0, 8)


def test_rectangle_uses_left_endpoints():
    assert rectangle(lambda x: x, 1.0, 3.0, 1) == pytest.approx(2.0)


def test_trapezoid_exact_for_linear():
    line = lambda x: 3 * x + 1  # noqa: E731
    assert trapezoid(line, 0.0, 2.0, 3) == pytest.approx(simpson(line, 0.0, 2.0, 4))


def test_constant_function_is_exact_for_all_methods():
    results = {
        method: integrate(lambda _x: 2.5, -1.0, 3.0, 10, method) for method in IntegrationMethod
    }
    for value in results.values():
        assert value == pytest.approx(10.0)


def test_reversed_limits_negate_result():
    forward = integrate(math.exp, 0.0, 1.0, 50)
    backward = integrate(math.exp, 1.0, 0.0, 50)
    assert backward == pytest.approx(-forward)


@pytest.mark.parametrize("n", [0, -3])
def test_non_positive_subdivisions_rejected(n):
    with pytest.raises(ValueError):
        integrate(math.exp, 0.0, 1.0, n)


def test_unknown_method_rejected():
    with pytest.raises(ValueError):
        integrate(math.exp, 0.0, 1.0, 10, "midpoint")