"""Print standings, highlights and a head-to-head trend for one season."""

import sys

from league_analysis import LeagueAPIRepository, SeasonAnalysisService
from league_analysis.formatters import format_average, format_points, format_position


def main(season_id: str) -> None:
    repo = LeagueAPIRepository()
    try:
        service = SeasonAnalysisService(repo)
        snapshot = service.fetch_snapshot(season_id)
        analysis = service.analyze(snapshot)
    finally:
        repo.close()

    name = analysis.season.name if analysis.season else season_id
    summary = analysis.summary
    print(f"=== {name} ===")
    print(f"  {summary.completed_events}/{summary.total_events} races completed, "
          f"{summary.upcoming_events} upcoming")

    print("\n=== Standings ===")
    for d in analysis.drivers:
        print(f"  {format_position(d.position):>4} {d.name:<24} {format_points(d.points):>6} pts"
              f"  W{d.wins} Pod{d.podiums}  avg {format_average(d.average_finish)}"
              f"  {d.consistency:.1f}%")

    print("\n=== Highlights ===")
    for key, highlight in summary.highlights:
        if highlight is not None:
            print(f"  {key.replace('_', ' ')}: {highlight.name} ({highlight.value:g})")

    if len(analysis.drivers) >= 2:
        leader, rival = analysis.drivers[0], analysis.drivers[1]
        series = service.driver_trend(snapshot, leader.id, rival.id)
        print(f"\n=== {leader.name} vs {rival.name} ===")
        for p in series.points:
            print(f"  {p.short_label:<16} {format_position(p.race_position):>4}"
                  f" {format_position(p.comparison_race_position):>4}")


if __name__ == "__main__":
    main(sys.argv[1] if len(sys.argv) > 1 else "season-2024")
