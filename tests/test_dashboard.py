from datetime import date

from campus_dashboard.dashboard import build_overview, build_tracker_payload
from campus_dashboard.schema import Budget, Course, Expense, StudySession, Task

TODAY = date(2025, 3, 14)


def test_build_overview_counts():
    tasks = [
        Task("t1", "u1", "Essay", date(2025, 3, 16), status="completed"),
        Task("t2", "u1", "Quiz", date(2025, 3, 30)),
        Task("t3", "u1", "Old", date(2025, 3, 1)),
    ]
    courses = [Course("c1", "u1", "Algorithms", "CS201", "Dr. Knuth", "Mon 10:00")]
    budgets = [Budget("b1", "u1", "food", 150.0, "monthly", TODAY, TODAY)]
    expenses = [Expense("e1", "u1", "food", 20.0, "lunch", TODAY)]

    assert build_overview(tasks, courses, budgets, expenses, TODAY) == {
        "total_tasks": 3,
        "completed_tasks": 1,
        "total_courses": 1,
        "upcoming_deadlines": 1,
        "total_budget": 150.0,
        "total_expenses": 20.0,
    }


def test_build_tracker_payload():
    sessions = [StudySession("s1", "u1", TODAY, 45), StudySession("s2", "u1", date(2025, 3, 13), 30)]
    payload = build_tracker_payload(sessions, TODAY)

    assert payload["summary"]["current_streak"] == 2
    assert len(payload["heatmap"].days) == 365
    assert payload["levels"].shape == (7, 53)
    assert len(payload["last_seven_days"]) == 7
    assert payload["weekly_trend"].weeks[-1].minutes == 75
    assert payload["day_distribution"]["Fri"] == 45


def test_empty_tracker_payload():
    payload = build_tracker_payload([], TODAY)
    assert payload["summary"]["current_streak"] == 0
    assert payload["weekly_trend"].trend == 0
    assert all(day.level == 0 for day in payload["heatmap"].days)
