"""Race event (one scheduled session slot of a season)."""

from __future__ import annotations

from datetime import datetime
from enum import Enum

from pydantic import field_validator

from ._base import LeagueModel, naive_utc


class EventStatus(str, Enum):
    """Lifecycle state of a race event."""

    SCHEDULED = "scheduled"
    COMPLETED = "completed"
    CANCELLED = "cancelled"


class RaceEvent(LeagueModel):
    """One scheduled or completed race slot within a season."""

    id: str
    season_id: str | None = None
    track_id: str | None = None
    track_name: str | None = None
    event_name: str | None = None
    short_event_name: str | None = None
    race_date: datetime | None = None
    status: EventStatus = EventStatus.SCHEDULED
    order_index: int = 0
    session_types: tuple[str, ...] = ()

    @field_validator("race_date", mode="after")
    @classmethod
    def utc_race_date(cls, value: datetime | None) -> datetime | None:
        return naive_utc(value)

    @property
    def is_completed(self) -> bool:
        return self.status is EventStatus.COMPLETED

    @property
    def is_upcoming(self) -> bool:
        return self.status is EventStatus.SCHEDULED
