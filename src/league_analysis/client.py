"""Public client classes for the league backend's read endpoints."""

from __future__ import annotations

from typing import Any
from urllib.parse import quote

from ._http import AsyncTransport, SyncTransport, build_query_params
from .exceptions import LeagueValidationError
from .settings import get_settings


def _segment(value: str | int) -> str:
    return quote(str(value), safe="")


def _unwrap(payload: Any, key: str) -> Any:
    """Return ``payload[key]`` from a ``{"success": true, key: ...}`` envelope."""
    if not isinstance(payload, dict):
        raise LeagueValidationError(f"Expected a JSON object containing '{key}'")
    if payload.get("success") is False:
        raise LeagueValidationError(str(payload.get("error") or f"Request for '{key}' failed"))
    if key not in payload:
        raise LeagueValidationError(f"Response is missing '{key}'")
    return payload[key]


def _rows(payload: Any, key: str) -> list[dict[str, Any]]:
    rows = _unwrap(payload, key)
    if not isinstance(rows, list) or not all(isinstance(row, dict) for row in rows):
        raise LeagueValidationError(f"Expected '{key}' to be a list of objects")
    return rows


def _object(payload: Any, key: str) -> dict[str, Any]:
    obj = _unwrap(payload, key)
    if not isinstance(obj, dict):
        raise LeagueValidationError(f"Expected '{key}' to be an object")
    return obj


class LeagueClient:
    """Synchronous client for the league backend.

    Usage:
        client = LeagueClient()
        races = client.races("season-2024")
        client.close()

        # Or as a context manager:
        with LeagueClient(base_url="http://league.local/api") as client:
            drivers = client.participants("season-2024")
    """

    def __init__(
        self,
        base_url: str | None = None,
        timeout: float | None = None,
    ) -> None:
        settings = get_settings()
        self._transport = SyncTransport(
            base_url=base_url or settings.api_base_url,
            timeout=timeout if timeout is not None else settings.api_timeout,
        )

    def __enter__(self) -> LeagueClient:
        return self

    def __exit__(self, *args: object) -> None:
        self.close()

    def close(self) -> None:
        """Close the underlying HTTP connection."""
        self._transport.close()

    # ── Endpoints ──────────────────────────────────────────────

    def season(self, season_id: str) -> dict[str, Any]:
        """Get season metadata."""
        return _object(self._transport.get(f"/seasons/{_segment(season_id)}"), "season")

    def races(self, season_id: str) -> list[dict[str, Any]]:
        """Get every race event of a season, in schedule order."""
        return _rows(self._transport.get(f"/seasons/{_segment(season_id)}/races"), "races")

    def participants(self, season_id: str) -> list[dict[str, Any]]:
        """Get the season's driver roster."""
        return _rows(
            self._transport.get(f"/seasons/{_segment(season_id)}/participants"), "participants",
        )

    def standings(self, season_id: str) -> list[dict[str, Any]]:
        """Get the backend's own points table (points, wins, podiums only)."""
        return _rows(
            self._transport.get(f"/seasons/{_segment(season_id)}/standings"), "standings",
        )

    def race_results(self, race_id: str) -> list[dict[str, Any]]:
        """Get the completed sessions of a race with their driver results."""
        return _rows(self._transport.get(f"/races/{_segment(race_id)}/results"), "sessions")

    def driver_race_history(
        self, driver_id: str, season_id: str | None = None,
    ) -> list[dict[str, Any]]:
        """Get a driver's race results, newest first, optionally for one season."""
        params = build_query_params(seasonId=season_id)
        return _rows(
            self._transport.get(f"/drivers/{_segment(driver_id)}/race-history", params),
            "raceHistory",
        )


class AsyncLeagueClient:
    """Asynchronous client for the league backend.

    Usage:
        async with AsyncLeagueClient() as client:
            races = await client.races("season-2024")
    """

    def __init__(
        self,
        base_url: str | None = None,
        timeout: float | None = None,
    ) -> None:
        settings = get_settings()
        self._transport = AsyncTransport(
            base_url=base_url or settings.api_base_url,
            timeout=timeout if timeout is not None else settings.api_timeout,
        )

    async def __aenter__(self) -> AsyncLeagueClient:
        return self

    async def __aexit__(self, *args: object) -> None:
        await self.close()

    async def close(self) -> None:
        """Close the underlying HTTP connection."""
        await self._transport.close()

    # ── Endpoints ──────────────────────────────────────────────

    async def season(self, season_id: str) -> dict[str, Any]:
        """Get season metadata."""
        return _object(await self._transport.get(f"/seasons/{_segment(season_id)}"), "season")

    async def races(self, season_id: str) -> list[dict[str, Any]]:
        """Get every race event of a season, in schedule order."""
        return _rows(await self._transport.get(f"/seasons/{_segment(season_id)}/races"), "races")

    async def participants(self, season_id: str) -> list[dict[str, Any]]:
        """Get the season's driver roster."""
        return _rows(
            await self._transport.get(f"/seasons/{_segment(season_id)}/participants"),
            "participants",
        )

    async def standings(self, season_id: str) -> list[dict[str, Any]]:
        """Get the backend's own points table (points, wins, podiums only)."""
        return _rows(
            await self._transport.get(f"/seasons/{_segment(season_id)}/standings"), "standings",
        )

    async def race_results(self, race_id: str) -> list[dict[str, Any]]:
        """Get the completed sessions of a race with their driver results."""
        return _rows(await self._transport.get(f"/races/{_segment(race_id)}/results"), "sessions")

    async def driver_race_history(
        self, driver_id: str, season_id: str | None = None,
    ) -> list[dict[str, Any]]:
        """Get a driver's race results, newest first, optionally for one season."""
        params = build_query_params(seasonId=season_id)
        return _rows(
            await self._transport.get(f"/drivers/{_segment(driver_id)}/race-history", params),
            "raceHistory",
        )
