"""Season metadata."""

from __future__ import annotations

from ._base import LeagueModel


class Season(LeagueModel):
    """A league season."""

    id: str
    name: str | None = None
    year: int | None = None
    status: str | None = None
