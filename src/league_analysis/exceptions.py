"""Custom exceptions for the league API client."""

from __future__ import annotations


class LeagueAnalysisError(Exception):
    """Base exception for all league client errors."""


class LeagueConnectionError(LeagueAnalysisError):
    """Raised when the client cannot connect to the league backend."""


class LeagueTimeoutError(LeagueAnalysisError):
    """Raised when a request to the league backend times out."""


class LeagueAPIError(LeagueAnalysisError):
    """Raised when the backend returns an error response (4xx/5xx)."""

    def __init__(self, status_code: int, message: str) -> None:
        self.status_code = status_code
        self.message = message
        super().__init__(f"HTTP {status_code}: {message}")


class LeagueValidationError(LeagueAnalysisError):
    """Raised when a response payload does not have the expected shape."""
