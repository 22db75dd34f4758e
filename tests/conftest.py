"""Shared test fixtures and sample league backend rows."""

from __future__ import annotations

import logging

import pytest

import league_analysis.api_logging as api_logging
from league_analysis.settings import get_settings

BASE_URL = "http://league.test/api"


SAMPLE_SEASON = {
    "id": "season-2024",
    "name": "Season 4",
    "year": 2024,
    "status": "active",
}

SAMPLE_RACE = {
    "id": "race-1",
    "seasonId": "season-2024",
    "trackId": "track-bahrain",
    "trackName": "Bahrain International Circuit",
    "raceDate": "2024-03-02T18:00:00.000Z",
    "orderIndex": 0,
    "status": "completed",
    "sessionTypes": ["qualifying", "race"],
    "track_event_name": "Bahrain Grand Prix",
    "track_short_event_name": "Bahrain",
}

SAMPLE_PARTICIPANT = {
    "id": "drv-a",
    "name": "Alice Archer",
    "team": "Red Bull Racing",
    "number": 1,
}

SAMPLE_RESULT = {
    "driverId": "drv-a",
    "position": 1,
    "gridPosition": 2,
    "points": 25,
    "fastestLap": True,
    "polePosition": False,
    "resultStatus": 3,
    "bestLapTimeMs": 93812,
    "totalRaceTimeMs": 5501234,
}


# ── Logging isolation ────────────────────────────────────────────────────────


def _drop_file_handlers() -> None:
    named_logger = logging.getLogger(api_logging.LOGGER_NAME)
    for h in named_logger.handlers[:]:
        if isinstance(h, logging.FileHandler):
            h.close()
            named_logger.removeHandler(h)


@pytest.fixture(autouse=True)
def _isolate_api_log(tmp_path):
    """Send the call log to tmp_path and reset cached logger and settings."""
    _drop_file_handlers()
    old_file = api_logging._LOG_FILE
    api_logging._logger = None
    api_logging._LOG_FILE = tmp_path / "api_calls.log"
    get_settings.cache_clear()

    yield tmp_path

    _drop_file_handlers()
    api_logging._logger = None
    api_logging._LOG_FILE = old_file
    get_settings.cache_clear()


# ── Row factories ────────────────────────────────────────────────────────────


def _make_event(
    event_id: str,
    race_date: str | None,
    status: str = "completed",
    order_index: int | None = None,
    track_name: str | None = None,
    event_name: str | None = None,
    short_event_name: str | None = None,
) -> dict:
    row: dict = {
        "id": event_id,
        "seasonId": "season-2024",
        "raceDate": race_date,
        "status": status,
        "trackName": track_name,
        "eventName": event_name,
        "shortEventName": short_event_name,
    }
    if order_index is not None:
        row["orderIndex"] = order_index
    return row


def _make_result(
    event_id: str,
    driver_id: str,
    position: int | str | None = None,
    points: float | str | None = 0,
    grid_position: int | str | None = None,
    fastest_lap: bool = False,
    pole_position: bool = False,
    result_status: int | None = 3,
) -> dict:
    return {
        "eventId": event_id,
        "driverId": driver_id,
        "position": position,
        "gridPosition": grid_position,
        "points": points,
        "fastestLap": fastest_lap,
        "polePosition": pole_position,
        "resultStatus": result_status,
    }


@pytest.fixture
def make_event():
    """Factory fixture for creating raw race rows."""
    return _make_event


@pytest.fixture
def make_result():
    """Factory fixture for creating raw result rows."""
    return _make_result


# ── Sample season ────────────────────────────────────────────────────────────


@pytest.fixture
def sample_events() -> list[dict]:
    """Three completed races, one scheduled, one cancelled."""
    return [
        _make_event("race-1", "2024-03-02", order_index=0,
                    track_name="Bahrain International Circuit", short_event_name="Bahrain"),
        _make_event("race-2", "2024-03-09", order_index=1,
                    track_name="Jeddah Corniche Circuit", event_name="Saudi Arabian Grand Prix"),
        _make_event("race-3", "2024-03-24", order_index=2, track_name="Albert Park"),
        _make_event("race-4", "2024-04-07", status="scheduled", order_index=3, track_name="Suzuka"),
        _make_event("race-5", "2024-04-21", status="cancelled", order_index=4, track_name="Shanghai"),
    ]


@pytest.fixture
def sample_drivers() -> list[dict]:
    return [
        {"id": "drv-a", "name": "Alice Archer", "team": "Red Bull Racing", "number": 1},
        {"id": "drv-b", "name": "Ben Brooks", "team": "Williams", "number": 23},
        {"id": "drv-c", "name": "Chris Cole", "team": "Ferrari", "number": 16},
        {"id": "drv-d", "name": "Dana Diaz", "team": "McLaren", "number": 4},
    ]


@pytest.fixture
def sample_results() -> list[dict]:
    """A: P1/P3/P1 (65 pts). C: P2/P1/P2 (61 pts). D: P3, DNF, absent. B: nothing.

    Includes a result attached to the scheduled race-4, which must not count.
    """
    return [
        _make_result("race-1", "drv-a", 1, 25, grid_position=2, fastest_lap=True),
        _make_result("race-1", "drv-c", 2, 18, grid_position=1, pole_position=True),
        _make_result("race-1", "drv-d", 3, 15, grid_position=3),
        _make_result("race-2", "drv-c", 1, 25, grid_position=1, fastest_lap=True, pole_position=True),
        _make_result("race-2", "drv-a", 3, 15, grid_position=4),
        _make_result("race-2", "drv-d", None, 0, grid_position=2, result_status=4),
        _make_result("race-3", "drv-a", 1, 25, grid_position=2),
        _make_result("race-3", "drv-c", 2, 18, grid_position=1, pole_position=True),
        _make_result("race-4", "drv-a", 1, 25, grid_position=1),
    ]
