"""Numeric and textual parameter values."""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from typing import Union

Number = Union[int, Decimal]

_U64_MAX = 2**64 - 1


def _format_number(value: Number) -> str:
    if isinstance(value, Decimal):
        return format(value, "f")
    return str(value)


def number_to_count(number: Number) -> int:
    """Convert a number into a non-negative count, truncating decimals.

    Raises ValueError for negative or too large values.
    """
    if isinstance(number, Decimal):
        if number.is_signed() or not number.is_finite():
            raise ValueError(f"cannot convert {_format_number(number)} to a count")
        count = int(number)
        if count > _U64_MAX:
            raise ValueError(f"cannot convert {_format_number(number)} to a count")
        return count
    if number < 0:
        raise ValueError(f"cannot convert {number} to a count")
    return int(number)


@dataclass(frozen=True)
class ParameterValue:
    """A parameter value: either text or a number."""

    value: Union[str, int, Decimal]

    @property
    def is_numeric(self) -> bool:
        return not isinstance(self.value, str)

    def __str__(self) -> str:
        if isinstance(self.value, str):
            return self.value
        return _format_number(self.value)