"""Formatting helpers for season analysis output."""

from __future__ import annotations

from .constants import PLACEHOLDER
from .models.event import RaceEvent


def format_position(position: int | None) -> str:
    """Format a position as 'P3', or '—' if None."""
    if position is None:
        return PLACEHOLDER
    return f"P{position}"


def format_average(value: float | None, digits: int = 1) -> str:
    """Format an average position as 'P4.5', or '—' if None."""
    if value is None:
        return PLACEHOLDER
    return f"P{value:.{digits}f}"


def format_points(points: float) -> str:
    """Drop the fractional part when points are whole."""
    return str(int(points)) if float(points).is_integer() else f"{points:.1f}"


def short_event_label(event: RaceEvent | None, order: int) -> str:
    """Compact axis label: short name, 'X GP' from the event name, track, or 'R{order}'."""
    if event is None:
        return f"R{order}"
    if event.short_event_name:
        return event.short_event_name
    if event.event_name:
        gp_index = event.event_name.lower().find(" grand prix")
        if gp_index > 0:
            return f"{event.event_name[:gp_index]} GP"
        return event.event_name
    if event.track_name:
        return event.track_name
    return f"R{order}"
