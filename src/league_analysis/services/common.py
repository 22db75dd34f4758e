"""Shared pure functions for the analysis services."""

from __future__ import annotations

import statistics
from collections.abc import Iterable
from datetime import datetime
from decimal import ROUND_HALF_UP, Decimal

from ..models.event import RaceEvent


def round_half_up(value: float, digits: int) -> float:
    """Round like a scoreboard does (0.05 -> 0.1), not banker's rounding."""
    quantum = Decimal(1).scaleb(-digits)
    return float(Decimal(str(value)).quantize(quantum, rounding=ROUND_HALF_UP))


def mean_or_none(values: Iterable[float | int | None], digits: int) -> float | None:
    """Mean of the non-None values rounded to *digits*, or None if there are none."""
    present = [v for v in values if v is not None]
    if not present:
        return None
    return round_half_up(statistics.fmean(present), digits)


def chronological_key(event: RaceEvent) -> tuple[bool, datetime, int, str]:
    """Sort key: race date ascending with undated events last, then ordinal."""
    return (
        event.race_date is None,
        event.race_date or datetime.min,
        event.order_index,
        event.id,
    )


def sort_chronologically(events: Iterable[RaceEvent]) -> list[RaceEvent]:
    return sorted(events, key=chronological_key)


def sort_most_recent_first(events: Iterable[RaceEvent]) -> list[RaceEvent]:
    """Latest race date first, ties by ordinal descending; undated events last."""
    events = list(events)
    dated = sorted(
        (e for e in events if e.race_date is not None),
        key=lambda e: (e.race_date, e.order_index, e.id),
        reverse=True,
    )
    undated = sorted(
        (e for e in events if e.race_date is None),
        key=lambda e: (e.order_index, e.id),
        reverse=True,
    )
    return dated + undated
