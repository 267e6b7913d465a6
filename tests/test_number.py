from decimal import Decimal

import pytest

from hyperbench.number import ParameterValue, number_to_count


def test_text_value_displays_as_is():
    value = ParameterValue("hello world")
    assert str(value) == "hello world"
    assert value.is_numeric is False


def test_numeric_values_display():
    assert str(ParameterValue(42)) == "42"
    assert str(ParameterValue(Decimal("0.1"))) == "0.1"
    assert ParameterValue(Decimal("0.1")).is_numeric is True


def test_decimal_keeps_scale():
    assert str(ParameterValue(Decimal("1.0"))) == "1.0"


def test_small_decimal_is_not_scientific():
    text = str(ParameterValue(Decimal("1E-7")))
    assert "E" not in text
    assert Decimal(text) == Decimal("1E-7")


def test_values_compare_by_content():
    assert ParameterValue("a") == ParameterValue("a")
    assert ParameterValue(3) == ParameterValue(3)
    assert ParameterValue("3") != ParameterValue(3)


def test_number_to_count_int():
    assert number_to_count(0) == 0
    assert number_to_count(5) == 5


def test_number_to_count_decimal_truncates():
    assert number_to_count(Decimal("7")) == 7
    assert number_to_count(Decimal("3.7")) == 3


@pytest.mark.parametrize("number", [-1, Decimal("-2"), Decimal("-0.5"), Decimal("1E30")])
def test_number_to_count_rejects(number):
    with pytest.raises(ValueError):
        number_to_count(number)