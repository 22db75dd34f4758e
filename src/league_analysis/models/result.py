"""Per-driver, per-event race result."""

from __future__ import annotations

from enum import IntEnum

from pydantic import PositiveInt

from ..constants import PODIUM_POSITIONS
from ._base import LeagueModel, Points


class ResultStatus(IntEnum):
    """Result status codes reported by the game's session results."""

    INVALID = 0
    INACTIVE = 1
    ACTIVE = 2
    FINISHED = 3
    DNF = 4
    DSQ = 5
    NOT_CLASSIFIED = 6
    RETIRED = 7

    @classmethod
    def is_finish(cls, code: int | None) -> bool:
        """Return True if *code* denotes a classified finish.

        ``None`` is not a finish code; callers decide what a missing status means.
        """
        return code in (cls.ACTIVE, cls.FINISHED)


class DriverResult(LeagueModel):
    """One driver's outcome in one event. ``position is None`` means unclassified."""

    event_id: str
    driver_id: str
    position: PositiveInt | None = None
    grid_position: PositiveInt | None = None
    points: Points = 0
    fastest_lap: bool = False
    pole_position: bool = False
    result_status: int | None = None

    # Display-only
    best_lap_time_ms: int | None = None
    total_race_time_ms: int | None = None

    # Denormalized driver identity carried by some result feeds
    driver_name: str | None = None
    team: str | None = None
    driver_number: int | None = None

    @property
    def is_dnf(self) -> bool:
        """True when the status code reports a non-finish."""
        return self.result_status is not None and not ResultStatus.is_finish(self.result_status)

    @property
    def is_podium(self) -> bool:
        return self.position in PODIUM_POSITIONS
