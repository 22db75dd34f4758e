"""Service layer: the season analysis engine."""

from .common import chronological_key, mean_or_none, round_half_up, sort_chronologically
from .driver_summary import build_driver_summary, build_recent_results, compute_consistency
from .highlights import HIGHLIGHT_CATEGORIES, compute_highlights, find_leader
from .season_analysis import (
    SeasonAnalysisService,
    SeasonSnapshot,
    analyze_season,
    counted_results,
    normalize_snapshot,
)
from .standings import rank_standings, standings_sort_key
from .trends import average_position, build_trend_series, event_label, order_completed_events

__all__ = [
    "HIGHLIGHT_CATEGORIES",
    "SeasonAnalysisService",
    "SeasonSnapshot",
    "analyze_season",
    "average_position",
    "build_driver_summary",
    "build_recent_results",
    "build_trend_series",
    "chronological_key",
    "compute_consistency",
    "compute_highlights",
    "counted_results",
    "event_label",
    "find_leader",
    "mean_or_none",
    "normalize_snapshot",
    "order_completed_events",
    "rank_standings",
    "round_half_up",
    "sort_chronologically",
    "standings_sort_key",
]
