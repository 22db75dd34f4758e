"""League analysis data models."""

from .analysis import (
    SeasonAnalysis,
    SeasonAnalysisHighlight,
    SeasonEvents,
    SeasonHighlights,
    SeasonSummary,
)
from .driver import Driver
from .event import EventStatus, RaceEvent
from .result import DriverResult, ResultStatus
from .season import Season
from .summary import DriverSeasonSummary, RecentResult
from .trend import TrendPoint, TrendSeries

__all__ = [
    "Driver",
    "DriverResult",
    "DriverSeasonSummary",
    "EventStatus",
    "RaceEvent",
    "RecentResult",
    "ResultStatus",
    "Season",
    "SeasonAnalysis",
    "SeasonAnalysisHighlight",
    "SeasonEvents",
    "SeasonHighlights",
    "SeasonSummary",
    "TrendPoint",
    "TrendSeries",
]
