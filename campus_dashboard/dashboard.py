"""View payloads assembled from the domain modules."""

from __future__ import annotations

from datetime import date
from typing import Any

from campus_dashboard.budget import totals
from campus_dashboard.schema import Budget, Course, Expense, StudySession, Task
from campus_dashboard.tasks import upcoming
from campus_dashboard.tracker import (
    build_heatmap,
    compute_weekly_trend,
    day_of_week_distribution,
    last_seven_days,
    level_matrix,
    monthly_stats,
    summarize,
    weekly_stats,
)


def build_overview(
    tasks: list[Task],
    courses: list[Course],
    budgets: list[Budget],
    expenses: list[Expense],
    today: date | None = None,
) -> dict[str, Any]:
    """Counts for the overview stats grid."""

    money = totals(budgets, expenses)
    return {
        "total_tasks": len(tasks),
        "completed_tasks": sum(1 for t in tasks if t.status == "completed"),
        "total_courses": len(courses),
        "upcoming_deadlines": len(upcoming(tasks, today)),
        "total_budget": money["total_budget"],
        "total_expenses": money["total_spent"],
    }


def build_tracker_payload(sessions: list[StudySession], as_of: date | None = None) -> dict[str, Any]:
    """Run every tracker aggregation once and return a UI-friendly payload."""

    as_of = as_of or date.today()
    heatmap = build_heatmap(sessions, as_of)
    return {
        "as_of": as_of,
        "summary": summarize(sessions, as_of),
        "heatmap": heatmap,
        "levels": level_matrix(heatmap),
        "last_seven_days": last_seven_days(sessions, as_of),
        "weekly": weekly_stats(sessions, as_of),
        "weekly_trend": compute_weekly_trend(sessions, as_of),
        "monthly": monthly_stats(sessions, as_of),
        "day_distribution": day_of_week_distribution(sessions),
    }
