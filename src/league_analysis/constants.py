"""Shared constants for season analysis."""

from __future__ import annotations

DEFAULT_API_BASE_URL = "http://localhost:3001/api"
DEFAULT_TIMEOUT = 30.0

# Number of entries kept in DriverSeasonSummary.recent_results
RECENT_RESULTS_LIMIT = 5

PODIUM_POSITIONS = frozenset({1, 2, 3})

# Session type code of the main race in imported session results
RACE_SESSION_TYPE = 10

TRUE_STRINGS = frozenset({"true", "1", "yes", "y", "on"})
FALSE_STRINGS = frozenset({"false", "0", "no", "n", "off", ""})

PLACEHOLDER = "—"
