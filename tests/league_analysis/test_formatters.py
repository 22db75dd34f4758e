"""Tests for display formatting helpers."""

from __future__ import annotations

from league_analysis.constants import PLACEHOLDER
from league_analysis.formatters import format_average, format_points, format_position, short_event_label
from league_analysis.models import RaceEvent


class TestFormatters:
    def test_position(self) -> None:
        assert format_position(3) == "P3"
        assert format_position(None) == PLACEHOLDER

    def test_average(self) -> None:
        assert format_average(4.46) == "P4.5"
        assert format_average(1.666, digits=2) == "P1.67"
        assert format_average(None) == PLACEHOLDER

    def test_points(self) -> None:
        assert format_points(65.0) == "65"
        assert format_points(12.5) == "12.5"


class TestShortEventLabel:
    def test_short_name_first(self) -> None:
        assert short_event_label(RaceEvent(id="r", short_event_name="Bahrain", event_name="Bahrain Grand Prix"), 1) == "Bahrain"

    def test_grand_prix_abbreviated(self) -> None:
        assert short_event_label(RaceEvent(id="r", event_name="British Grand Prix"), 1) == "British GP"

    def test_plain_event_name(self) -> None:
        assert short_event_label(RaceEvent(id="r", event_name="Sprint Cup"), 1) == "Sprint Cup"

    def test_track_then_ordinal(self) -> None:
        assert short_event_label(RaceEvent(id="r", track_name="Monza"), 4) == "Monza"
        assert short_event_label(RaceEvent(id="r"), 4) == "R4"
        assert short_event_label(None, 2) == "R2"
