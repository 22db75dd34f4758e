"""Championship ordering of driver season summaries."""

from __future__ import annotations

from collections.abc import Iterable

from ..models.summary import DriverSeasonSummary


def standings_sort_key(
    summary: DriverSeasonSummary,
) -> tuple[float, int, int, int, str, str, str]:
    """Points, wins, podiums and fastest laps descending, then name ascending.

    The trailing raw name and id keep the order total when two drivers share
    a case-folded name.
    """
    return (
        -summary.points,
        -summary.wins,
        -summary.podiums,
        -summary.fastest_laps,
        summary.name.casefold(),
        summary.name,
        summary.id,
    )


def rank_standings(summaries: Iterable[DriverSeasonSummary]) -> list[DriverSeasonSummary]:
    """Return new summaries in championship order with 1-based positions.

    No positions are shared; the result does not depend on input order.
    """
    ordered = sorted(summaries, key=standings_sort_key)
    return [
        summary.model_copy(update={"position": index})
        for index, summary in enumerate(ordered, start=1)
    ]
