"""pandas views of analysis results for notebooks and CSV export."""

from __future__ import annotations

import pandas as pd

from .models.analysis import SeasonAnalysis
from .models.trend import TrendSeries

STANDINGS_COLUMNS = [
    "position",
    "name",
    "team",
    "number",
    "points",
    "wins",
    "podiums",
    "pole_positions",
    "fastest_laps",
    "dnfs",
    "points_finishes",
    "total_races",
    "average_finish",
    "consistency",
]

TREND_COLUMNS = [
    "order",
    "race_id",
    "label",
    "short_label",
    "date",
    "race_position",
    "qualifying_position",
    "comparison_race_position",
    "comparison_qualifying_position",
]


def standings_frame(analysis: SeasonAnalysis) -> pd.DataFrame:
    """One row per driver in championship order, indexed by driver id."""
    rows = [
        {"id": d.id, **d.model_dump(include=set(STANDINGS_COLUMNS))}
        for d in analysis.drivers
    ]
    frame = pd.DataFrame(rows, columns=["id", *STANDINGS_COLUMNS])
    return frame.set_index("id")


def trend_frame(series: TrendSeries) -> pd.DataFrame:
    """One row per completed event; missing positions are NA (nullable Int64)."""
    frame = pd.DataFrame(
        [p.model_dump() for p in series.points],
        columns=TREND_COLUMNS,
    )
    position_columns = TREND_COLUMNS[5:]
    frame[position_columns] = frame[position_columns].astype("Int64")
    return frame
