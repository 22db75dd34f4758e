"""Tests for the call-logging decorators."""

from __future__ import annotations

import io
import logging

import pytest

from league_analysis.api_logging import LOGGER_NAME, log_api_call, log_service_call


class _Repo:
    @log_api_call
    def rows(self, season_id: str) -> list[int]:
        return [1, 2, 3]

    @log_api_call
    def broken(self, season_id: str) -> list[int]:
        raise RuntimeError("backend down")


class _Service:
    @log_service_call
    def run(self, rows: list[int], label: str = "x") -> int:
        return len(rows)


def _log_text(tmp_path) -> str:
    return (tmp_path / "api_calls.log").read_text()


class TestLogApiCall:
    def test_success(self, _isolate_api_log) -> None:
        assert _Repo().rows("s1") == [1, 2, 3]
        text = _log_text(_isolate_api_log)
        assert "CALL: _Repo.rows('s1')" in text
        assert "OK: _Repo.rows('s1') -> 3 items" in text

    def test_failure_reraised(self, _isolate_api_log) -> None:
        with pytest.raises(RuntimeError):
            _Repo().broken("s1")
        assert "FAIL: _Repo.broken('s1') -> RuntimeError: backend down" in _log_text(_isolate_api_log)


class TestLogServiceCall:
    def test_summarises_collections(self, _isolate_api_log) -> None:
        assert _Service().run([1, 2], label="y") == 2
        text = _log_text(_isolate_api_log)
        assert "SERVICE CALL: _Service.run(<list of 2>, label='y')" in text
        assert "SERVICE OK: _Service.run" in text

    def test_objects_logged_by_type(self, _isolate_api_log) -> None:
        _Service().run([], label=object())
        assert "label=<object>" in _log_text(_isolate_api_log)


class TestLoggerSetup:
    def test_writes_file_when_other_handlers_attached(self, _isolate_api_log) -> None:
        named = logging.getLogger(LOGGER_NAME)
        foreign = logging.StreamHandler(io.StringIO())
        named.addHandler(foreign)
        try:
            _Repo().rows("s1")
        finally:
            named.removeHandler(foreign)
        assert "CALL: _Repo.rows('s1')" in _log_text(_isolate_api_log)

    def test_collections_in_api_calls_logged_by_size(self, _isolate_api_log) -> None:
        _Repo().rows(["race-1", "race-2"])
        assert "CALL: _Repo.rows(<list of 2>)" in _log_text(_isolate_api_log)
