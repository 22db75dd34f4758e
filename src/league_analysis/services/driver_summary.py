"""Fold one driver's season results into a DriverSeasonSummary."""

from __future__ import annotations

import math
from collections.abc import Mapping, Sequence

from ..constants import RECENT_RESULTS_LIMIT
from ..models.driver import Driver
from ..models.event import RaceEvent
from ..models.result import DriverResult
from ..models.summary import DriverSeasonSummary, RecentResult
from .common import mean_or_none, round_half_up, sort_most_recent_first


def driver_from_results(driver_id: str, results: Sequence[DriverResult]) -> Driver:
    """Build a roster entry from the identity fields carried on result rows."""
    name = next((r.driver_name for r in results if r.driver_name), None)
    team = next((r.team for r in results if r.team), None)
    number = next((r.driver_number for r in results if r.driver_number is not None), None)
    return Driver(id=driver_id, name=name or driver_id, team=team, number=number)


def compute_consistency(points_finishes: int, total_races: int) -> float:
    """Percentage of entered races that scored points, to one decimal."""
    if total_races <= 0:
        return 0.0
    return round_half_up(points_finishes / total_races * 100, 1)


def build_recent_results(
    results: Sequence[DriverResult],
    events_by_id: Mapping[str, RaceEvent],
    limit: int = RECENT_RESULTS_LIMIT,
) -> tuple[RecentResult, ...]:
    """Return the driver's latest results, newest first, at most *limit* long."""
    by_event = {r.event_id: r for r in results}
    events = [events_by_id[eid] for eid in by_event if eid in events_by_id]

    recent: list[RecentResult] = []
    for event in sort_most_recent_first(events)[:limit]:
        r = by_event[event.id]
        recent.append(RecentResult(
            race_id=event.id,
            track_name=event.track_name,
            date=event.race_date,
            position=r.position,
            points=r.points,
            grid_position=r.grid_position,
            fastest_lap=r.fastest_lap,
            pole_position=r.pole_position,
            result_status=r.result_status,
        ))
    return tuple(recent)


def build_driver_summary(
    driver: Driver,
    results: Sequence[DriverResult],
    events_by_id: Mapping[str, RaceEvent],
    recent_limit: int = RECENT_RESULTS_LIMIT,
) -> DriverSeasonSummary:
    """Aggregate a driver's results for the season's completed events.

    *results* must already be restricted to completed events; each one counts
    as a race entered. An absent status with a classified position is a
    finish, and a row with neither contributes to ``total_races`` only. The
    returned summary has no championship ``position`` yet.
    """
    total_races = len(results)
    points_finishes = sum(1 for r in results if r.points > 0)
    points = math.fsum(r.points for r in results)

    return DriverSeasonSummary(
        id=driver.id,
        name=driver.name,
        team=driver.team,
        number=driver.number,
        points=int(points) if points.is_integer() else points,
        wins=sum(1 for r in results if r.position == 1),
        podiums=sum(1 for r in results if r.is_podium),
        pole_positions=sum(1 for r in results if r.pole_position),
        fastest_laps=sum(1 for r in results if r.fastest_lap),
        dnfs=sum(1 for r in results if r.is_dnf),
        points_finishes=points_finishes,
        total_races=total_races,
        average_finish=mean_or_none((r.position for r in results), 2),
        consistency=compute_consistency(points_finishes, total_races),
        position=None,
        recent_results=build_recent_results(results, events_by_id, recent_limit),
    )
