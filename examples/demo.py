"""Demo script for campus-dashboard's study tracker."""

import sys
from datetime import date
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parents[1]))

from campus_dashboard.adapters.csv_adapter import parse
from campus_dashboard.tracker import build_heatmap, compute_streak, compute_weekly_trend, format_minutes


def main() -> None:
    sessions = parse("examples/sample_sessions.csv")
    as_of = date(2025, 3, 14)
    heatmap = build_heatmap(sessions, as_of)
    trend = compute_weekly_trend(sessions, as_of)
    print("Busiest day:", format_minutes(heatmap.max_minutes))
    print("Active days:", sum(1 for day in heatmap.days if day.level > 0))
    print("Streak:", compute_streak(sessions, as_of))
    print("Weeks:", [format_minutes(week.minutes) for week in trend.weeks], "trend", trend.trend)


if __name__ == "__main__":
    main()
