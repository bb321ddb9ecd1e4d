"""Build a study-tracker report from a CSV/JSON session export."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from datetime import date
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parents[1]))

from campus_dashboard.adapters import csv_adapter, json_adapter
from campus_dashboard.tracker import build_heatmap, compute_weekly_trend, monthly_stats, summarize, weekly_stats

logger = logging.getLogger("study_report")


def _load_sessions(path: Path):
    suffix = path.suffix.lower()
    if suffix == ".csv":
        return csv_adapter.parse(str(path))
    if suffix == ".json":
        return json_adapter.parse(str(path))
    raise ValueError("Unsupported input format, expected .csv or .json")


def build_report(sessions, as_of: date) -> dict:
    heatmap = build_heatmap(sessions, as_of)
    trend = compute_weekly_trend(sessions, as_of)
    weekly = weekly_stats(sessions, as_of)
    weekly["best_day"] = weekly["best_day"].isoformat()
    return {
        "as_of": as_of.isoformat(),
        "summary": summarize(sessions, as_of),
        "heatmap": {
            "max_minutes": heatmap.max_minutes,
            "days": [{"date": d.date.isoformat(), "minutes": d.minutes, "level": d.level} for d in heatmap.days],
        },
        "weekly": weekly,
        "monthly": monthly_stats(sessions, as_of),
        "weeks": [
            {"start": w.start.isoformat(), "end": w.end.isoformat(), "minutes": w.minutes} for w in trend.weeks
        ],
    }


def main() -> None:
    parser = argparse.ArgumentParser(description="Summarize study sessions into a yearly heatmap report")
    parser.add_argument("--data", required=True, help="Path to CSV/JSON sessions file")
    parser.add_argument("--as-of", default=None, help="Report date (YYYY-MM-DD), defaults to today")
    parser.add_argument("--out", default="outputs/study_report.json", help="Where to write the JSON report")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    args = parser.parse_args()

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO, format="%(levelname)s %(name)s: %(message)s")

    as_of = date.fromisoformat(args.as_of) if args.as_of else date.today()
    sessions = _load_sessions(Path(args.data))
    logger.info("Loaded %d sessions from %s", len(sessions), args.data)

    report = build_report(sessions, as_of)
    print(json.dumps(report["summary"], indent=2))

    out_path = Path(args.out)
    out_path.parent.mkdir(parents=True, exist_ok=True)
    out_path.write_text(json.dumps(report, indent=2), encoding="utf-8")
    logger.info("Saved study report to %s", out_path)


if __name__ == "__main__":
    main()
