"""Call logging for the league data and service layers.

Both decorators append to one file (``LeagueSettings.log_file``) through a
non-propagating logger, so library users see nothing on stderr unless they
attach their own handler to ``league_analysis.api``.
"""

from __future__ import annotations

import functools
import logging
import os
import threading
import time
from pathlib import Path
from typing import Any, Callable, TypeVar

from .settings import get_settings

F = TypeVar("F", bound=Callable[..., Any])

LOGGER_NAME = "league_analysis.api"
LOG_FORMAT = "%(asctime)s | %(levelname)s | %(message)s"

# Replaces the settings-derived path when set (tests point it at tmp_path)
_LOG_FILE: Path | None = None

_logger: logging.Logger | None = None
_logger_lock = threading.Lock()


def _get_logger() -> logging.Logger:
    """Return the file logger, creating the log directory on first use."""
    global _logger
    if _logger is not None:
        return _logger

    with _logger_lock:
        if _logger is None:
            settings = get_settings()
            path = _LOG_FILE or settings.log_file
            path.parent.mkdir(parents=True, exist_ok=True)

            logger = logging.getLogger(LOGGER_NAME)
            logger.setLevel(settings.log_level)
            logger.propagate = False
            target = os.path.abspath(path)
            if not any(
                isinstance(h, logging.FileHandler) and h.baseFilename == target for h in logger.handlers
            ):
                handler = logging.FileHandler(target, encoding="utf-8")
                handler.setFormatter(logging.Formatter(LOG_FORMAT))
                logger.addHandler(handler)
            _logger = logger

    return _logger


def _summarise(value: Any) -> str:
    if isinstance(value, (list, tuple)):
        return f"<{type(value).__name__} of {len(value)}>"
    if value is None or isinstance(value, (str, int, float)):
        return repr(value)
    return f"<{type(value).__name__}>"


def _brief(value: Any) -> str:
    if isinstance(value, (list, tuple)):
        return _summarise(value)
    return repr(value)


def _describe(args: tuple[Any, ...], kwargs: dict[str, Any], fmt: Callable[[Any], str]) -> str:
    # args[0] is self
    parts = [fmt(a) for a in args[1:]]
    parts.extend(f"{k}={fmt(v)}" for k, v in kwargs.items())
    return ", ".join(parts)


def log_api_call(fn: F) -> F:
    """Log a repository method: arguments, returned row count and timing."""

    @functools.wraps(fn)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        log = _get_logger()
        call = f"{fn.__qualname__}({_describe(args, kwargs, _brief)})"
        log.info("CALL: %s", call)
        started = time.monotonic()
        try:
            result = fn(*args, **kwargs)
        except Exception as exc:
            log.error("FAIL: %s -> %s: %s (%.3fs)", call, type(exc).__name__, exc, time.monotonic() - started)
            raise
        rows = len(result) if isinstance(result, (list, tuple)) else 1
        log.info("OK: %s -> %d items (%.3fs)", call, rows, time.monotonic() - started)
        return result

    return wrapper  # type: ignore[return-value]


def log_service_call(fn: F) -> F:
    """Log a service method. Collections are logged by size, never by content."""

    @functools.wraps(fn)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        log = _get_logger()
        name = fn.__qualname__
        log.info("SERVICE CALL: %s(%s)", name, _describe(args, kwargs, _summarise))
        started = time.monotonic()
        try:
            result = fn(*args, **kwargs)
        except Exception as exc:
            log.error(
                "SERVICE FAIL: %s -> %s: %s (%.3fs)", name, type(exc).__name__, exc, time.monotonic() - started,
            )
            raise
        log.info("SERVICE OK: %s -> %.3fs", name, time.monotonic() - started)
        return result

    return wrapper  # type: ignore[return-value]
