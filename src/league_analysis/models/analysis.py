"""Top-level season analysis view model."""

from __future__ import annotations

from typing import Any

from ._base import LeagueModel
from .event import RaceEvent
from .season import Season
from .summary import DriverSeasonSummary


class SeasonAnalysisHighlight(LeagueModel):
    """The driver leading one season-wide statistic."""

    id: str
    name: str
    team: str | None = None
    value: int | float


class SeasonHighlights(LeagueModel):
    most_wins: SeasonAnalysisHighlight | None = None
    most_podiums: SeasonAnalysisHighlight | None = None
    most_poles: SeasonAnalysisHighlight | None = None
    most_fastest_laps: SeasonAnalysisHighlight | None = None
    best_average_finish: SeasonAnalysisHighlight | None = None
    best_consistency: SeasonAnalysisHighlight | None = None


class SeasonSummary(LeagueModel):
    total_events: int = 0
    completed_events: int = 0
    upcoming_events: int = 0
    cancelled_events: int = 0
    highlights: SeasonHighlights = SeasonHighlights()


class SeasonEvents(LeagueModel):
    """Season events in chronological order, split by status."""

    all: tuple[RaceEvent, ...] = ()
    completed: tuple[RaceEvent, ...] = ()
    upcoming: tuple[RaceEvent, ...] = ()


class SeasonAnalysis(LeagueModel):
    """Standings, highlights and schedule state for one season."""

    season: Season | None = None
    summary: SeasonSummary = SeasonSummary()
    drivers: tuple[DriverSeasonSummary, ...] = ()
    events: SeasonEvents = SeasonEvents()
    next_event: RaceEvent | None = None
    previous_event: RaceEvent | None = None

    def to_json(self) -> dict[str, Any]:
        """Return the JSON-ready, camelCase representation."""
        return self.model_dump(by_alias=True, mode="json")

    def driver(self, driver_id: str) -> DriverSeasonSummary | None:
        """Look up a driver's summary by id."""
        for summary in self.drivers:
            if summary.id == driver_id:
                return summary
        return None
