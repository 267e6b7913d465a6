"""Formatting of durations for display."""

from __future__ import annotations

from .units import Unit


def format_duration_value(duration: float, unit: Unit | None = None) -> tuple[str, Unit]:
    """Format a duration without its unit suffix; return the text and the unit used."""
    if (duration < 0.001 and unit is None) or unit is Unit.MICROSECOND:
        chosen = Unit.MICROSECOND
    elif (duration < 1.0 and unit is None) or unit is Unit.MILLISECOND:
        chosen = Unit.MILLISECOND
    else:
        chosen = Unit.SECOND
    return chosen.format(duration), chosen


def format_duration_unit(duration: float, unit: Unit | None = None) -> tuple[str, Unit]:
    """Format a duration with its unit suffix; return the text and the unit used."""
    text, chosen = format_duration_value(duration, unit)
    return f"{text} {chosen.short_name()}", chosen


def format_duration(duration: float, unit: Unit | None = None) -> str:
    """Format a duration with its unit suffix, choosing the unit if none is given."""
    return format_duration_unit(duration, unit)[0]