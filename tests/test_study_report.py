from datetime import date
from pathlib import Path

from campus_dashboard.adapters.csv_adapter import parse
from scripts.study_report import build_report

SAMPLE = Path(__file__).resolve().parents[1] / "examples" / "sample_sessions.csv"


def test_build_report_on_sample_data():
    sessions = parse(str(SAMPLE))
    report = build_report(sessions, date(2025, 3, 14))

    assert report["as_of"] == "2025-03-14"
    assert len(report["heatmap"]["days"]) == 365
    assert report["heatmap"]["max_minutes"] == 120
    assert report["summary"]["sessions"] == 17
    assert report["summary"]["current_streak"] == 5
    assert [week["start"] for week in report["weeks"]] == ["2025-02-17", "2025-02-24", "2025-03-03", "2025-03-10"]
