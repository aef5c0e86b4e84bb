import math
import statistics

import pytest

from helixkit.integer_window import IntegerWindow
from helixkit.power import power


@pytest.mark.parametrize("exponent", [0, 1, 3])
def test_holds_power_of_two_elements(exponent):
    window = IntegerWindow(exponent)
    count = power(2, exponent)
    for value in range(count - 1):
        window.add_element(value)
        assert not window.is_full()
    window.add_element(count)
    assert window.is_full()
    assert window.element_count == count


def test_average_of_positive_values():
    window = IntegerWindow(2)
    values = [3, 4, 6, 9]
    for value in values:
        window.add_element(value)
    assert window.average() == math.floor(statistics.fmean(values))


def test_average_of_negative_values_rounds_down():
    window = IntegerWindow(1)
    values = [-1, -2]
    for value in values:
        window.add_element(value)
    assert window.average() == math.floor(statistics.fmean(values))


def test_initial_value():
    window = IntegerWindow(3, 11)
    assert window.is_full()
    assert window.average() == 11


def test_float_initial_value_is_rejected():
    with pytest.raises(TypeError):
        IntegerWindow(2, 1.5)


def test_negative_exponent_is_rejected():
    with pytest.raises(ValueError):
        IntegerWindow(-1)