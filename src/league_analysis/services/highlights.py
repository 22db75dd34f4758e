"""Season-wide superlatives derived from ranked driver summaries."""

from __future__ import annotations

import math
from collections.abc import Callable, Sequence
from dataclasses import dataclass

from ..models.analysis import SeasonAnalysisHighlight, SeasonHighlights
from ..models.summary import DriverSeasonSummary
from .standings import standings_sort_key


@dataclass(frozen=True)
class HighlightCategory:
    name: str
    field: str
    lower_is_better: bool = False


HIGHLIGHT_CATEGORIES: tuple[HighlightCategory, ...] = (
    HighlightCategory("most_wins", "wins"),
    HighlightCategory("most_podiums", "podiums"),
    HighlightCategory("most_poles", "pole_positions"),
    HighlightCategory("most_fastest_laps", "fastest_laps"),
    HighlightCategory("best_average_finish", "average_finish", lower_is_better=True),
    HighlightCategory("best_consistency", "consistency"),
)


def _rank_key(summary: DriverSeasonSummary) -> tuple:
    position = summary.position if summary.position is not None else math.inf
    return (position, *standings_sort_key(summary))


def find_leader(
    summaries: Sequence[DriverSeasonSummary],
    value_of: Callable[[DriverSeasonSummary], float | None],
    lower_is_better: bool = False,
) -> SeasonAnalysisHighlight | None:
    """Return the driver with the best qualifying value, or None.

    Higher values win unless *lower_is_better*. Zero and None never qualify
    for "most" categories; None never qualifies for "best average" ones. Ties
    go to the better championship position.
    """
    candidates = []
    for summary in summaries:
        value = value_of(summary)
        if value is None:
            continue
        if not lower_is_better and value <= 0:
            continue
        candidates.append((value if lower_is_better else -value, _rank_key(summary), summary, value))

    if not candidates:
        return None

    _, _, leader, value = min(candidates, key=lambda c: (c[0], c[1]))
    return SeasonAnalysisHighlight(
        id=leader.id,
        name=leader.name,
        team=leader.team,
        value=value,
    )


def compute_highlights(ranked: Sequence[DriverSeasonSummary]) -> SeasonHighlights:
    """Compute every highlight category over the ranked summaries."""
    return SeasonHighlights(**{
        category.name: find_leader(
            ranked,
            lambda s, field=category.field: getattr(s, field),
            lower_is_better=category.lower_is_better,
        )
        for category in HIGHLIGHT_CATEGORIES
    })
