"""Time units used when displaying benchmark results."""

from __future__ import annotations

from enum import Enum


class Unit(Enum):
    """Supported time units."""

    SECOND = "s"
    MILLISECOND = "ms"
    MICROSECOND = "µs"

    def short_name(self) -> str:
        """The abbreviation of the unit."""
        return self.value

    def format(self, value: float) -> str:
        """Format a value given in seconds for this unit."""
        if self is Unit.SECOND:
            return f"{value:.3f}"
        if self is Unit.MILLISECOND:
            return f"{value * 1e3:.1f}"
        return f"{value * 1e6:.1f}"