"""Event-aligned position series for driver comparison charts."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from ..formatters import short_event_label
from ..models.event import RaceEvent
from ..models.result import DriverResult
from ..models.trend import TrendPoint, TrendSeries
from .common import mean_or_none, sort_chronologically


def order_completed_events(events: Iterable[RaceEvent]) -> list[RaceEvent]:
    """Completed events by race date (undated last), ties by ordinal."""
    return sort_chronologically(e for e in events if e.is_completed)


def average_position(values: Iterable[int | None]) -> float | None:
    """Mean of the present positions to one decimal, for chart reference lines."""
    return mean_or_none(values, 1)


def event_label(event: RaceEvent, order: int) -> str:
    """Short event name, else track name, else "Race {order}"."""
    return event.short_event_name or event.track_name or f"Race {order}"


def _results_by_event(results: Iterable[DriverResult], driver_id: str | None) -> dict[str, DriverResult]:
    if driver_id is None:
        return {}
    by_event: dict[str, DriverResult] = {}
    for r in results:
        if r.driver_id == driver_id:
            by_event.setdefault(r.event_id, r)
    return by_event


def build_trend_series(
    events: Sequence[RaceEvent],
    results: Sequence[DriverResult],
    driver_id: str,
    comparison_driver_id: str | None = None,
) -> TrendSeries:
    """Build one point per completed event for a driver and optional rival.

    The series always has one point per completed event, with None positions
    where a driver has no result, so two series can be compared index by
    index.
    """
    completed = order_completed_events(events)
    driver_results = _results_by_event(results, driver_id)
    rival_results = _results_by_event(results, comparison_driver_id)

    points: list[TrendPoint] = []
    for order, event in enumerate(completed, start=1):
        own = driver_results.get(event.id)
        rival = rival_results.get(event.id)
        points.append(TrendPoint(
            race_id=event.id,
            order=order,
            label=event_label(event, order),
            short_label=short_event_label(event, order),
            date=event.race_date,
            race_position=own.position if own else None,
            qualifying_position=own.grid_position if own else None,
            comparison_race_position=rival.position if rival else None,
            comparison_qualifying_position=rival.grid_position if rival else None,
        ))

    has_rival = comparison_driver_id is not None
    return TrendSeries(
        driver_id=driver_id,
        comparison_driver_id=comparison_driver_id,
        points=tuple(points),
        average_race_position=average_position(p.race_position for p in points),
        average_qualifying_position=average_position(p.qualifying_position for p in points),
        comparison_average_race_position=(
            average_position(p.comparison_race_position for p in points) if has_rival else None
        ),
        comparison_average_qualifying_position=(
            average_position(p.comparison_qualifying_position for p in points) if has_rival else None
        ),
    )
