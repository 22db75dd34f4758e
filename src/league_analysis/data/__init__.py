"""Data layer: repository interface, implementations and errors."""

from __future__ import annotations

from .api_repo import LeagueAPIRepository
from .base import LeagueDataRepository
from .errors import LeagueDataError
from .memory_repo import InMemoryRepository

__all__ = [
    "InMemoryRepository",
    "LeagueAPIRepository",
    "LeagueDataError",
    "LeagueDataRepository",
]
