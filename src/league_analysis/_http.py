"""httpx transports for the league backend's JSON API."""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager
from typing import Any

import httpx

from .constants import DEFAULT_API_BASE_URL, DEFAULT_TIMEOUT
from .exceptions import (
    LeagueAPIError,
    LeagueConnectionError,
    LeagueTimeoutError,
    LeagueValidationError,
)

Params = list[tuple[str, str]]

_HEADERS = {"Accept": "application/json", "User-Agent": "league-analysis"}


def build_query_params(**kwargs: Any) -> Params:
    """Build query parameter tuples, skipping None values."""
    return [(key, str(value)) for key, value in kwargs.items() if value is not None]


def _error_message(response: httpx.Response) -> str:
    """The backend's ``{"error": ...}`` text when present, else the raw body."""
    try:
        body = response.json()
    except ValueError:
        return response.text
    if isinstance(body, dict):
        for key in ("error", "message"):
            if isinstance(body.get(key), str):
                return body[key]
    return response.text


def _decode(response: httpx.Response) -> Any:
    if response.is_error:
        raise LeagueAPIError(status_code=response.status_code, message=_error_message(response))
    try:
        return response.json()
    except ValueError as exc:
        raise LeagueValidationError(f"Response from {response.url} is not JSON") from exc


@contextmanager
def _translate_errors() -> Iterator[None]:
    try:
        yield
    except httpx.ConnectError as exc:
        raise LeagueConnectionError(str(exc)) from exc
    except httpx.TimeoutException as exc:
        raise LeagueTimeoutError(str(exc)) from exc


class SyncTransport:
    """Blocking GET-only transport over httpx.Client."""

    def __init__(self, base_url: str = DEFAULT_API_BASE_URL, timeout: float = DEFAULT_TIMEOUT) -> None:
        self._client = httpx.Client(base_url=base_url, timeout=timeout, headers=_HEADERS)

    def get(self, endpoint: str, params: Params | None = None) -> Any:
        with _translate_errors():
            response = self._client.get(endpoint, params=params or [])
        return _decode(response)

    def close(self) -> None:
        self._client.close()


class AsyncTransport:
    """asyncio counterpart of SyncTransport over httpx.AsyncClient."""

    def __init__(self, base_url: str = DEFAULT_API_BASE_URL, timeout: float = DEFAULT_TIMEOUT) -> None:
        self._client = httpx.AsyncClient(base_url=base_url, timeout=timeout, headers=_HEADERS)

    async def get(self, endpoint: str, params: Params | None = None) -> Any:
        with _translate_errors():
            response = await self._client.get(endpoint, params=params or [])
        return _decode(response)

    async def close(self) -> None:
        await self._client.aclose()
