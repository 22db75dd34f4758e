"""Snapshot-backed repository for offline analysis and tests."""

from __future__ import annotations

import copy
from collections.abc import Mapping, Sequence
from typing import Any

from .base import LeagueDataRepository
from .errors import LeagueDataError


class InMemoryRepository(LeagueDataRepository):
    """Serves seasons from in-memory snapshots.

    Each snapshot is a mapping with optional ``season``, ``events``,
    ``drivers`` and ``results`` keys. Returned rows are copies.
    """

    def __init__(self, snapshots: Mapping[str, Mapping[str, Any]] | None = None) -> None:
        self._snapshots: dict[str, Mapping[str, Any]] = dict(snapshots or {})

    def add_season(self, season_id: str, snapshot: Mapping[str, Any]) -> None:
        self._snapshots[season_id] = snapshot

    def _snapshot(self, season_id: str) -> Mapping[str, Any]:
        try:
            return self._snapshots[season_id]
        except KeyError:
            raise LeagueDataError(f"Season {season_id!r} not found") from None

    def get_season(self, season_id: str) -> dict[str, Any]:
        season = self._snapshot(season_id).get("season") or {"id": season_id}
        return copy.deepcopy(dict(season))

    def get_events(self, season_id: str) -> list[dict[str, Any]]:
        return copy.deepcopy(list(self._snapshot(season_id).get("events", [])))

    def get_drivers(self, season_id: str) -> list[dict[str, Any]]:
        return copy.deepcopy(list(self._snapshot(season_id).get("drivers", [])))

    def get_results(
        self, season_id: str, events: Sequence[dict[str, Any]] | None = None,
    ) -> list[dict[str, Any]]:
        return copy.deepcopy(list(self._snapshot(season_id).get("results", [])))
