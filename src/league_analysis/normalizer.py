"""Coerce raw league rows into strict models.

Result feeds are semi-trusted: positions arrive as ints, numeric strings or
nothing, flags as bools or strings, dates in several ISO shapes. Every parser
here falls back to the "unknown" value (``None``/``0``/``False``) instead of
raising, so one bad row never aborts a season analysis.
"""

from __future__ import annotations

import math
import numbers
from collections.abc import Mapping
from datetime import date, datetime
from typing import Any

from .constants import FALSE_STRINGS, TRUE_STRINGS
from .models._base import naive_utc
from .models.driver import Driver
from .models.event import EventStatus, RaceEvent
from .models.result import DriverResult, ResultStatus
from .models.season import Season

_STATUS_NAMES: dict[str, int] = {status.name: status.value for status in ResultStatus}
_STATUS_NAMES.update({
    "RUNNING": ResultStatus.ACTIVE,
    "DID_NOT_FINISH": ResultStatus.DNF,
    "DISQUALIFIED": ResultStatus.DSQ,
    "NCL": ResultStatus.NOT_CLASSIFIED,
    "RET": ResultStatus.RETIRED,
})


# ── Field lookup ─────────────────────────────────────────────────────────────


def _as_mapping(raw: Any) -> Mapping[str, Any]:
    """Rows that are not mappings (None, lists, stray strings) read as empty."""
    return raw if isinstance(raw, Mapping) else {}


def _first(raw: Mapping[str, Any], *keys: str) -> Any:
    """Return the value of the first key present with a non-None value."""
    for key in keys:
        value = raw.get(key)
        if value is not None:
            return value
    return None


# ── Scalar parsers ───────────────────────────────────────────────────────────


def _to_number(value: Any) -> float | None:
    """Parse a finite real number; bools and non-numeric strings yield None."""
    if isinstance(value, bool):
        return None
    if isinstance(value, numbers.Real):
        number = float(value)
    elif isinstance(value, str):
        try:
            number = float(value.strip())
        except ValueError:
            return None
    else:
        return None
    return number if math.isfinite(number) else None


def parse_position(value: Any) -> int | None:
    """Parse a 1-based finishing or grid position, else None."""
    number = _to_number(value)
    if number is None or not number.is_integer() or number <= 0:
        return None
    return int(number)


def parse_points(value: Any) -> int | float:
    """Parse awarded points as a non-negative number, defaulting to 0."""
    number = _to_number(value)
    if number is None or number < 0:
        return 0
    return int(number) if number.is_integer() else number


def parse_flag(value: Any) -> bool:
    if isinstance(value, str):
        lowered = value.strip().lower()
        if lowered in TRUE_STRINGS:
            return True
        if lowered in FALSE_STRINGS:
            return False
    return bool(value)


def parse_status(value: Any) -> int | None:
    """Parse a result status code from an int, numeric string or status name."""
    if value is None:
        return None
    if isinstance(value, str):
        key = value.strip().upper().replace(" ", "_").replace("-", "_")
        if key in _STATUS_NAMES:
            return int(_STATUS_NAMES[key])
    number = _to_number(value)
    if number is None or not number.is_integer() or number < 0:
        return None
    return int(number)


def parse_datetime(value: Any) -> datetime | None:
    """Parse a date or datetime into a naive UTC datetime, else None."""
    if isinstance(value, datetime):
        parsed = value
    elif isinstance(value, date):
        parsed = datetime(value.year, value.month, value.day)
    elif isinstance(value, str) and value.strip():
        try:
            parsed = datetime.fromisoformat(value.strip())
        except ValueError:
            return None
    else:
        return None
    return naive_utc(parsed)


def parse_int(value: Any) -> int | None:
    number = _to_number(value)
    if number is None or not number.is_integer():
        return None
    return int(number)


def _parse_id(value: Any) -> str:
    if value is None or isinstance(value, bool):
        return ""
    return str(value).strip()


def _parse_text(value: Any) -> str | None:
    if value is None:
        return None
    text = str(value).strip()
    return text or None


def _parse_session_types(value: Any) -> tuple[str, ...]:
    if isinstance(value, str):
        items: list[Any] = value.split(",")
    elif isinstance(value, (list, tuple)):
        items = list(value)
    else:
        return ()
    return tuple(text for text in (_parse_text(item) for item in items) if text)


def _parse_event_status(value: Any) -> EventStatus:
    if isinstance(value, EventStatus):
        return value
    if isinstance(value, str):
        try:
            return EventStatus(value.strip().lower())
        except ValueError:
            pass
    return EventStatus.SCHEDULED


# ── Row normalizers ──────────────────────────────────────────────────────────


def normalize_result(raw: Mapping[str, Any] | DriverResult) -> DriverResult:
    """Convert one raw result row into a canonical DriverResult."""
    if isinstance(raw, DriverResult):
        return raw
    raw = _as_mapping(raw)
    return DriverResult(
        event_id=_parse_id(_first(raw, "eventId", "event_id", "raceId", "race_id")),
        driver_id=_parse_id(_first(raw, "driverId", "driver_id", "userId", "user_id", "json_driver_id")),
        position=parse_position(_first(raw, "position", "finishPosition", "finish_position")),
        grid_position=parse_position(_first(raw, "gridPosition", "grid_position")),
        points=parse_points(_first(raw, "points")),
        fastest_lap=parse_flag(_first(raw, "fastestLap", "fastest_lap")),
        pole_position=parse_flag(_first(raw, "polePosition", "pole_position")),
        result_status=parse_status(_first(raw, "resultStatus", "result_status")),
        best_lap_time_ms=parse_int(_first(raw, "bestLapTimeMs", "best_lap_time_ms")),
        total_race_time_ms=parse_int(_first(raw, "totalRaceTimeMs", "total_race_time_ms")),
        driver_name=_parse_text(_first(
            raw, "driverName", "driver_name", "name", "json_driver_name", "mapping_driver_name",
        )),
        team=_parse_text(_first(
            raw, "team", "teamName", "team_name", "driver_team", "json_team_name", "mapping_team_name",
        )),
        driver_number=parse_int(_first(
            raw, "driverNumber", "driver_number", "number", "json_car_number", "mapping_driver_number",
        )),
    )


def normalize_event(raw: Mapping[str, Any] | RaceEvent, index: int = 0) -> RaceEvent:
    """Convert one raw race row into a RaceEvent.

    *index* is the row's position in the season's event list and becomes the
    ordinal when the row carries no explicit order index.
    """
    if isinstance(raw, RaceEvent):
        return raw
    raw = _as_mapping(raw)
    order_index = parse_int(_first(raw, "orderIndex", "order_index"))
    return RaceEvent(
        id=_parse_id(_first(raw, "id", "raceId", "race_id", "eventId")),
        season_id=_parse_text(_first(raw, "seasonId", "season_id")),
        track_id=_parse_text(_first(raw, "trackId", "track_id")),
        track_name=_parse_text(_first(raw, "trackName", "track_name")),
        event_name=_parse_text(_first(raw, "eventName", "event_name", "track_event_name")),
        short_event_name=_parse_text(
            _first(raw, "shortEventName", "short_event_name", "track_short_event_name"),
        ),
        race_date=parse_datetime(_first(raw, "raceDate", "race_date", "date")),
        status=_parse_event_status(_first(raw, "status")),
        order_index=order_index if order_index is not None else index,
        session_types=_parse_session_types(_first(raw, "sessionTypes", "session_types")),
    )


def normalize_driver(raw: Mapping[str, Any] | Driver) -> Driver:
    """Convert one roster row into a Driver; the id doubles as a missing name."""
    if isinstance(raw, Driver):
        return raw
    raw = _as_mapping(raw)
    driver_id = _parse_id(_first(raw, "id", "driverId", "driver_id", "userId"))
    return Driver(
        id=driver_id,
        name=_parse_text(_first(raw, "name", "driverName", "fullName", "full_name")) or driver_id,
        team=_parse_text(_first(raw, "team", "teamName", "team_name")),
        number=parse_int(_first(raw, "number", "driverNumber", "driver_number")),
    )


def normalize_season(raw: Mapping[str, Any] | Season) -> Season:
    if isinstance(raw, Season):
        return raw
    raw = _as_mapping(raw)
    return Season(
        id=_parse_id(_first(raw, "id", "seasonId", "season_id")),
        name=_parse_text(_first(raw, "name")),
        year=parse_int(_first(raw, "year")),
        status=_parse_text(_first(raw, "status")),
    )
