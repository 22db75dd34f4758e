"""League backend repository implementation."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from ..api_logging import log_api_call
from ..client import LeagueClient
from ..constants import RACE_SESSION_TYPE
from ..exceptions import LeagueAnalysisError
from ..normalizer import parse_int
from .base import LeagueDataRepository
from .errors import LeagueDataError


def _is_completed(race: dict[str, Any]) -> bool:
    return str(race.get("status") or "").strip().lower() == "completed"


def _race_session_rows(race_id: str, sessions: list[dict[str, Any]]) -> list[dict[str, Any]]:
    """Result rows of the race session(s), tagged with the race id."""
    rows: list[dict[str, Any]] = []
    for session in sessions:
        if parse_int(session.get("sessionType")) != RACE_SESSION_TYPE:
            continue
        for result in session.get("results") or []:
            if isinstance(result, dict):
                rows.append({**result, "eventId": race_id})
    return rows


class LeagueAPIRepository(LeagueDataRepository):
    """Reads season snapshots from the league backend over HTTP.

    The backend has no season-wide results endpoint, so results are gathered
    per completed race from its race session.
    """

    def __init__(self, client: LeagueClient | None = None) -> None:
        self._client = client or LeagueClient()

    def close(self) -> None:
        self._client.close()

    @log_api_call
    def get_season(self, season_id: str) -> dict[str, Any]:
        try:
            return self._client.season(season_id)
        except LeagueAnalysisError as exc:
            raise LeagueDataError(f"Failed to fetch season {season_id}: {exc}") from exc

    @log_api_call
    def get_events(self, season_id: str) -> list[dict[str, Any]]:
        try:
            return self._client.races(season_id)
        except LeagueAnalysisError as exc:
            raise LeagueDataError(f"Failed to fetch races for season {season_id}: {exc}") from exc

    @log_api_call
    def get_drivers(self, season_id: str) -> list[dict[str, Any]]:
        try:
            return self._client.participants(season_id)
        except LeagueAnalysisError as exc:
            raise LeagueDataError(
                f"Failed to fetch participants for season {season_id}: {exc}",
            ) from exc

    @log_api_call
    def get_results(
        self, season_id: str, events: Sequence[dict[str, Any]] | None = None,
    ) -> list[dict[str, Any]]:
        races = self.get_events(season_id) if events is None else events
        rows: list[dict[str, Any]] = []
        for race in races:
            race_id = race.get("id")
            if race_id is None or not _is_completed(race):
                continue
            try:
                sessions = self._client.race_results(str(race_id))
            except LeagueAnalysisError as exc:
                raise LeagueDataError(f"Failed to fetch results for race {race_id}: {exc}") from exc
            rows.extend(_race_session_rows(str(race_id), sessions))
        return rows
