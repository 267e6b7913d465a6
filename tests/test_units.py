import pytest

from hyperbench.units import Unit


@pytest.mark.parametrize(
    "unit, expected",
    [(Unit.SECOND, "s"), (Unit.MILLISECOND, "ms"), (Unit.MICROSECOND, "µs")],
)
def test_unit_short_name(unit, expected):
    assert unit.short_name() == expected


def test_unit_format():
    value = 123.456789
    assert Unit.SECOND.format(value) == "123.457"
    assert Unit.MILLISECOND.format(value) == "123456.8"
    assert Unit.MICROSECOND.format(0.00123456) == "1234.6"