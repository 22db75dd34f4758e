"""Abstract base repository for season snapshot access."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Sequence
from typing import Any


class LeagueDataRepository(ABC):
    """Source-agnostic interface for reading one season's raw rows.

    Implementations return committed data only; rows are raw mappings and are
    normalized by the analysis layer.
    """

    @abstractmethod
    def get_season(self, season_id: str) -> dict[str, Any]: ...

    @abstractmethod
    def get_events(self, season_id: str) -> list[dict[str, Any]]: ...

    @abstractmethod
    def get_drivers(self, season_id: str) -> list[dict[str, Any]]: ...

    @abstractmethod
    def get_results(
        self, season_id: str, events: Sequence[dict[str, Any]] | None = None,
    ) -> list[dict[str, Any]]:
        """Result rows of the season. *events* are its race rows when the caller already has them."""
