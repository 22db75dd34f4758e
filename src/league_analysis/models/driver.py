"""Season roster entry."""

from __future__ import annotations

from ._base import LeagueModel


class Driver(LeagueModel):
    """A driver registered for a season."""

    id: str
    name: str
    team: str | None = None
    number: int | None = None
