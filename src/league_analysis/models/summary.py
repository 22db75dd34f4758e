"""Derived per-driver season summary."""

from __future__ import annotations

from datetime import datetime

from ._base import LeagueModel, Points


class RecentResult(LeagueModel):
    """A single race entry in a driver's recent form list."""

    race_id: str
    track_name: str | None = None
    date: datetime | None = None
    position: int | None = None
    points: Points = 0
    grid_position: int | None = None
    fastest_lap: bool = False
    pole_position: bool = False
    result_status: int | None = None


class DriverSeasonSummary(LeagueModel):
    """Aggregate statistics for one driver over a season's completed events."""

    id: str
    name: str
    team: str | None = None
    number: int | None = None
    points: Points = 0
    wins: int = 0
    podiums: int = 0
    pole_positions: int = 0
    fastest_laps: int = 0
    dnfs: int = 0
    points_finishes: int = 0
    total_races: int = 0
    average_finish: float | None = None
    consistency: float = 0.0
    position: int | None = None
    recent_results: tuple[RecentResult, ...] = ()
