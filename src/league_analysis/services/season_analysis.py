"""Season analysis facade: standings, highlights and schedule state in one call."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping, Sequence
from dataclasses import dataclass
from typing import Any

from ..api_logging import log_service_call
from ..data.base import LeagueDataRepository
from ..models.analysis import SeasonAnalysis, SeasonEvents, SeasonSummary
from ..models.driver import Driver
from ..models.event import EventStatus, RaceEvent
from ..models.result import DriverResult
from ..models.season import Season
from ..models.trend import TrendSeries
from ..normalizer import normalize_driver, normalize_event, normalize_result, normalize_season
from ..settings import get_settings
from .common import sort_chronologically
from .driver_summary import build_driver_summary, driver_from_results
from .highlights import compute_highlights
from .standings import rank_standings
from .trends import build_trend_series

logger = logging.getLogger(__name__)

RawRow = Mapping[str, Any]


@dataclass(frozen=True)
class SeasonSnapshot:
    """Normalized, read-only input for one season."""

    season: Season | None
    events: tuple[RaceEvent, ...]
    results: tuple[DriverResult, ...]
    drivers: tuple[Driver, ...]


def normalize_snapshot(
    events: Iterable[RawRow | RaceEvent],
    results: Iterable[RawRow | DriverResult],
    drivers: Iterable[RawRow | Driver] | None = None,
    season: RawRow | Season | None = None,
) -> SeasonSnapshot:
    return SeasonSnapshot(
        season=normalize_season(season) if season is not None else None,
        events=tuple(normalize_event(raw, index) for index, raw in enumerate(events)),
        results=tuple(normalize_result(raw) for raw in results),
        drivers=tuple(normalize_driver(raw) for raw in drivers or ()),
    )


def counted_results(
    results: Iterable[DriverResult],
    completed_ids: set[str],
) -> list[DriverResult]:
    """Results that count towards the season, one per (event, driver).

    Rows for non-completed or unknown events and rows without a driver id are
    dropped; of duplicate rows the first one wins.
    """
    counted: list[DriverResult] = []
    seen: set[tuple[str, str]] = set()
    for r in results:
        if not r.driver_id or r.event_id not in completed_ids:
            continue
        key = (r.event_id, r.driver_id)
        if key in seen:
            logger.warning("Duplicate result for driver %s in event %s ignored", r.driver_id, r.event_id)
            continue
        seen.add(key)
        counted.append(r)
    return counted


def _roster(drivers: Sequence[Driver], by_driver: Mapping[str, list[DriverResult]]) -> list[Driver]:
    """Roster entries plus every driver with a counted result, first entry per id."""
    roster: dict[str, Driver] = {}
    for driver in drivers:
        if driver.id:
            roster.setdefault(driver.id, driver)
    for driver_id, driver_results in by_driver.items():
        if driver_id not in roster:
            roster[driver_id] = driver_from_results(driver_id, driver_results)
    return list(roster.values())


def analyze_season(
    events: Iterable[RawRow | RaceEvent],
    results: Iterable[RawRow | DriverResult],
    drivers: Iterable[RawRow | Driver] | None = None,
    season: RawRow | Season | None = None,
    *,
    recent_limit: int | None = None,
) -> SeasonAnalysis:
    """Build the full SeasonAnalysis from one season's snapshot.

    Inputs may be raw backend rows or normalized models; *results* must already
    be scoped to the season. Pure: identical inputs give identical output.
    """
    if recent_limit is None:
        recent_limit = get_settings().recent_results_limit
    snapshot = normalize_snapshot(events, results, drivers, season)

    ordered_events = sort_chronologically(e for e in snapshot.events if e.id)
    completed = [e for e in ordered_events if e.is_completed]
    upcoming = [e for e in ordered_events if e.is_upcoming]
    events_by_id = {e.id: e for e in completed}

    by_driver: dict[str, list[DriverResult]] = {}
    for r in counted_results(snapshot.results, set(events_by_id)):
        by_driver.setdefault(r.driver_id, []).append(r)

    summaries = [
        build_driver_summary(driver, by_driver.get(driver.id, []), events_by_id, recent_limit)
        for driver in _roster(snapshot.drivers, by_driver)
    ]
    ranked = rank_standings(summaries)

    return SeasonAnalysis(
        season=snapshot.season,
        summary=SeasonSummary(
            total_events=len(ordered_events),
            completed_events=len(completed),
            upcoming_events=len(upcoming),
            cancelled_events=sum(1 for e in ordered_events if e.status is EventStatus.CANCELLED),
            highlights=compute_highlights(ranked),
        ),
        drivers=tuple(ranked),
        events=SeasonEvents(
            all=tuple(ordered_events),
            completed=tuple(completed),
            upcoming=tuple(upcoming),
        ),
        next_event=upcoming[0] if upcoming else None,
        previous_event=completed[-1] if completed else None,
    )


class SeasonAnalysisService:
    """Runs season analysis over snapshots fetched from a repository."""

    def __init__(self, repo: LeagueDataRepository, recent_limit: int | None = None) -> None:
        self._repo = repo
        self._recent_limit = recent_limit

    @log_service_call
    def fetch_snapshot(self, season_id: str) -> SeasonSnapshot:
        """Fetch and normalize season metadata, events, roster and results."""
        events = self._repo.get_events(season_id)
        return normalize_snapshot(
            events=events,
            results=self._repo.get_results(season_id, events),
            drivers=self._repo.get_drivers(season_id),
            season=self._repo.get_season(season_id),
        )

    @log_service_call
    def analyze(self, snapshot: SeasonSnapshot) -> SeasonAnalysis:
        return analyze_season(
            snapshot.events,
            snapshot.results,
            snapshot.drivers,
            snapshot.season,
            recent_limit=self._recent_limit,
        )

    def analyze_season(self, season_id: str) -> SeasonAnalysis:
        """Fetch one season and analyze it. Raises LeagueDataError on fetch failure."""
        return self.analyze(self.fetch_snapshot(season_id))

    @log_service_call
    def driver_trend(
        self,
        snapshot: SeasonSnapshot,
        driver_id: str,
        comparison_driver_id: str | None = None,
    ) -> TrendSeries:
        """Race and qualifying position series for a driver and optional rival."""
        return build_trend_series(
            snapshot.events, snapshot.results, driver_id, comparison_driver_id,
        )
