"""league_analysis: championship standings and season statistics for racing leagues."""

from .client import AsyncLeagueClient, LeagueClient
from .data import InMemoryRepository, LeagueAPIRepository, LeagueDataError, LeagueDataRepository
from .exceptions import (
    LeagueAPIError,
    LeagueAnalysisError,
    LeagueConnectionError,
    LeagueTimeoutError,
    LeagueValidationError,
)
from .models import (
    Driver,
    DriverResult,
    DriverSeasonSummary,
    EventStatus,
    RaceEvent,
    ResultStatus,
    Season,
    SeasonAnalysis,
    SeasonAnalysisHighlight,
    TrendPoint,
    TrendSeries,
)
from .normalizer import normalize_driver, normalize_event, normalize_result
from .services import SeasonAnalysisService, analyze_season, build_trend_series
from .settings import LeagueSettings, get_settings

__all__ = [
    "AsyncLeagueClient",
    "Driver",
    "DriverResult",
    "DriverSeasonSummary",
    "EventStatus",
    "InMemoryRepository",
    "LeagueAPIError",
    "LeagueAPIRepository",
    "LeagueAnalysisError",
    "LeagueClient",
    "LeagueConnectionError",
    "LeagueDataError",
    "LeagueDataRepository",
    "LeagueSettings",
    "LeagueTimeoutError",
    "LeagueValidationError",
    "RaceEvent",
    "ResultStatus",
    "Season",
    "SeasonAnalysis",
    "SeasonAnalysisHighlight",
    "SeasonAnalysisService",
    "TrendPoint",
    "TrendSeries",
    "analyze_season",
    "build_trend_series",
    "get_settings",
    "normalize_driver",
    "normalize_event",
    "normalize_result",
]

__version__ = "0.1.0"
