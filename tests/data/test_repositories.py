"""Tests for the in-memory and HTTP-backed repositories."""

from __future__ import annotations

import httpx
import pytest
import respx

from league_analysis.client import LeagueClient
from league_analysis.data import InMemoryRepository, LeagueAPIRepository, LeagueDataError
from tests.conftest import BASE_URL, SAMPLE_PARTICIPANT, SAMPLE_RACE, SAMPLE_RESULT, SAMPLE_SEASON


class TestInMemoryRepository:
    def test_returns_copies(self) -> None:
        events = [{"id": "race-1", "status": "completed"}]
        repo = InMemoryRepository({"s1": {"events": events}})
        fetched = repo.get_events("s1")
        fetched[0]["status"] = "cancelled"
        assert repo.get_events("s1")[0]["status"] == "completed"

    def test_missing_keys_default_empty(self) -> None:
        repo = InMemoryRepository({"s1": {}})
        assert repo.get_season("s1") == {"id": "s1"}
        assert repo.get_drivers("s1") == []
        assert repo.get_results("s1") == []

    def test_unknown_season(self) -> None:
        with pytest.raises(LeagueDataError, match="s9"):
            InMemoryRepository().get_events("s9")


def _mock_season(*, race_two_status: str = "completed") -> respx.Route:
    """Mock season, races and roster endpoints; returns the races route."""
    races = [SAMPLE_RACE, {**SAMPLE_RACE, "id": "race-2", "status": race_two_status}]
    respx.get(f"{BASE_URL}/seasons/season-2024").mock(
        return_value=httpx.Response(200, json={"success": True, "season": SAMPLE_SEASON})
    )
    races_route = respx.get(f"{BASE_URL}/seasons/season-2024/races").mock(
        return_value=httpx.Response(200, json={"success": True, "races": races})
    )
    respx.get(f"{BASE_URL}/seasons/season-2024/participants").mock(
        return_value=httpx.Response(200, json={"success": True, "participants": [SAMPLE_PARTICIPANT]})
    )
    return races_route


def _sessions(*results: dict) -> dict:
    return {
        "success": True,
        "sessions": [
            {"sessionType": 5, "results": [{**SAMPLE_RESULT, "position": 9}]},
            {"sessionType": "10", "results": list(results)},
        ],
    }


@pytest.fixture
def api_repo():
    repo = LeagueAPIRepository(LeagueClient(base_url=BASE_URL))
    yield repo
    repo.close()


class TestLeagueAPIRepository:
    @respx.mock
    def test_season_events_drivers(self, api_repo) -> None:
        _mock_season()
        assert api_repo.get_season("season-2024")["id"] == "season-2024"
        assert [r["id"] for r in api_repo.get_events("season-2024")] == ["race-1", "race-2"]
        assert api_repo.get_drivers("season-2024")[0]["name"] == "Alice Archer"

    @respx.mock
    def test_results_from_race_sessions(self, api_repo) -> None:
        _mock_season()
        respx.get(f"{BASE_URL}/races/race-1/results").mock(
            return_value=httpx.Response(200, json=_sessions(SAMPLE_RESULT))
        )
        respx.get(f"{BASE_URL}/races/race-2/results").mock(
            return_value=httpx.Response(200, json=_sessions({**SAMPLE_RESULT, "position": 2}))
        )
        rows = api_repo.get_results("season-2024")
        assert [(r["eventId"], r["position"]) for r in rows] == [("race-1", 1), ("race-2", 2)]

    @respx.mock
    def test_skips_races_not_completed(self, api_repo) -> None:
        _mock_season(race_two_status="scheduled")
        respx.get(f"{BASE_URL}/races/race-1/results").mock(
            return_value=httpx.Response(200, json=_sessions(SAMPLE_RESULT))
        )
        race_two = respx.get(f"{BASE_URL}/races/race-2/results")
        rows = api_repo.get_results("season-2024")
        assert len(rows) == 1
        assert not race_two.called

    @respx.mock
    def test_api_error_wrapped(self, api_repo) -> None:
        respx.get(f"{BASE_URL}/seasons/season-2024/races").mock(
            return_value=httpx.Response(500, text="boom")
        )
        with pytest.raises(LeagueDataError, match="season-2024"):
            api_repo.get_events("season-2024")

    @respx.mock
    def test_connection_error_wrapped(self, api_repo) -> None:
        respx.get(f"{BASE_URL}/seasons/season-2024").mock(side_effect=httpx.ConnectError("refused"))
        with pytest.raises(LeagueDataError):
            api_repo.get_season("season-2024")

    @respx.mock
    def test_calls_logged(self, api_repo, _isolate_api_log) -> None:
        _mock_season()
        api_repo.get_drivers("season-2024")
        text = (_isolate_api_log / "api_calls.log").read_text()
        assert "CALL: LeagueAPIRepository.get_drivers('season-2024')" in text
        assert "-> 1 items" in text

    @respx.mock
    def test_end_to_end_analysis(self, api_repo) -> None:
        from league_analysis.services import SeasonAnalysisService

        _mock_season()
        respx.get(f"{BASE_URL}/races/race-1/results").mock(
            return_value=httpx.Response(200, json=_sessions(SAMPLE_RESULT))
        )
        respx.get(f"{BASE_URL}/races/race-2/results").mock(
            return_value=httpx.Response(200, json=_sessions({**SAMPLE_RESULT, "position": 2, "points": 18}))
        )
        analysis = SeasonAnalysisService(api_repo).analyze_season("season-2024")
        alice = analysis.driver("drv-a")
        assert alice.name == "Alice Archer"
        assert (alice.points, alice.wins, alice.total_races) == (43, 1, 2)

    @respx.mock
    def test_fetch_snapshot_reads_races_once(self, api_repo) -> None:
        from league_analysis.services import SeasonAnalysisService

        races = _mock_season(race_two_status="scheduled")
        respx.get(f"{BASE_URL}/races/race-1/results").mock(
            return_value=httpx.Response(200, json=_sessions(SAMPLE_RESULT))
        )
        snapshot = SeasonAnalysisService(api_repo).fetch_snapshot("season-2024")
        assert races.call_count == 1
        assert len(snapshot.results) == 1

    @respx.mock
    def test_results_use_given_races(self, api_repo) -> None:
        route = respx.get(f"{BASE_URL}/races/race-7/results").mock(
            return_value=httpx.Response(200, json=_sessions(SAMPLE_RESULT))
        )
        rows = api_repo.get_results("season-2024", [{"id": "race-7", "status": "completed"}])
        assert route.called
        assert rows[0]["eventId"] == "race-7"

    @respx.mock
    def test_session_rows_keep_team_columns(self, api_repo) -> None:
        from league_analysis.normalizer import normalize_result

        row = {
            "user_id": None,
            "json_driver_id": 14,
            "json_driver_name": "Guest Driver",
            "json_team_name": "Alpine",
            "position": 6,
            "points": 8,
        }
        respx.get(f"{BASE_URL}/races/race-1/results").mock(
            return_value=httpx.Response(200, json=_sessions(row))
        )
        rows = api_repo.get_results("season-2024", [SAMPLE_RACE])
        result = normalize_result(rows[0])
        assert (result.driver_id, result.driver_name, result.team) == ("14", "Guest Driver", "Alpine")
