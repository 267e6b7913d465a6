"""Stepped numeric ranges for parameter scans."""

from __future__ import annotations

from collections.abc import Iterator
from decimal import Decimal
from typing import Generic, TypeVar, Union

from .number import number_to_count

T = TypeVar("T", int, Decimal)

MAX_PARAMETERS = 100_000


class ParameterScanError(ValueError):
    """Raised for an invalid parameter scan range."""

    EMPTY_RANGE = "Empty parameter range"
    ZERO_STEP = "Zero is not a valid parameter step"
    TOO_LARGE = "Parameter range is too large"


def _trunc_div(a: Union[int, Decimal], b: Union[int, Decimal]) -> Union[int, Decimal]:
    if isinstance(a, int) and isinstance(b, int):
        quotient = abs(a) // abs(b)
        return quotient if (a < 0) == (b < 0) else -quotient
    return a / b


def _size_hint(start, end, step) -> int | None:
    if step == 0 or step < 0:
        return None
    try:
        return number_to_count(_trunc_div(end - start + 1, step))
    except ValueError:
        return None


class RangeStep(Generic[T]):
    """The values start, start + step, ... up to and including end."""

    def __init__(self, start: T, end: T, step: T) -> None:
        if end < start:
            raise ParameterScanError(ParameterScanError.EMPTY_RANGE)
        if step == 0:
            raise ParameterScanError(ParameterScanError.ZERO_STEP)
        size = _size_hint(start, end, step)
        if size is None or size > MAX_PARAMETERS:
            raise ParameterScanError(ParameterScanError.TOO_LARGE)
        self.start = start
        self.end = end
        self.step = step

    def __iter__(self) -> Iterator[T]:
        state = self.start
        while state <= self.end:
            yield state
            state += self.step

    def __len__(self) -> int:
        return int((self.end - self.start) // self.step) + 1

    def __repr__(self) -> str:
        return f"RangeStep({self.start!r}, {self.end!r}, {self.step!r})"