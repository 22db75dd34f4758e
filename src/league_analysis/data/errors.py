"""Source-agnostic data fetch error."""

from __future__ import annotations


class LeagueDataError(Exception):
    """Source-agnostic data fetch error. Callers catch only this."""
