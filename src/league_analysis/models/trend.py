"""Event-ordered position series for driver comparison charts."""

from __future__ import annotations

from datetime import datetime

from ._base import LeagueModel


class TrendPoint(LeagueModel):
    race_id: str
    order: int
    label: str
    short_label: str
    date: datetime | None = None
    race_position: int | None = None
    qualifying_position: int | None = None
    comparison_race_position: int | None = None
    comparison_qualifying_position: int | None = None


class TrendSeries(LeagueModel):
    """One point per completed event; index-aligned across drivers."""

    driver_id: str
    comparison_driver_id: str | None = None
    points: tuple[TrendPoint, ...] = ()
    average_race_position: float | None = None
    average_qualifying_position: float | None = None
    comparison_average_race_position: float | None = None
    comparison_average_qualifying_position: float | None = None
