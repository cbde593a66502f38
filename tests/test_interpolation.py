import pytest

from numethods.interpolation import Interpolation


def test_square_at_one_and_a_half():
    interp = Interpolation([0, 1, 2], [0, 1, 4])
    assert interp.evaluate(1.5) == pytest.approx(2.25)


def test_repeated_x_values_are_rejected():
    with pytest.raises(ValueError):
        Interpolation([1, 1, 2], [3, 3, 4])


def test_coefficients_of_square():
    interp = Interpolation([0, 1, 2], [0, 1, 4])
    assert interp.coefficients == pytest.approx([0.0, 1.0, 1.0])


def test_passes_through_nodes():
    xs = [-2.0, 0.5, 1.0, 3.0]
    ys = [4.0, -1.0, 2.5, 7.0]
    interp = Interpolation(xs, ys)
    for x, y in zip(xs, ys):
        assert interp.evaluate(x) == pytest.approx(y)


def test_single_point_is_constant():
    interp = Interpolation([3.0], [7.0])
    assert interp.evaluate(-10.0) == 7.0
    assert interp.coefficients == [7.0]


def test_mismatched_lengths_are_rejected():
    with pytest.raises(ValueError):
        Interpolation([0, 1], [0])


def test_empty_input_is_rejected():
    with pytest.raises(ValueError):
        Interpolation([], [])


def test_coefficients_are_a_copy():
    interp = Interpolation([0, 1], [1, 3])
    interp.coefficients.append(99.0)
    assert interp.coefficients == [1.0, 2.0]